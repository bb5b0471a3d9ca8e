#!/usr/bin/env python3
"""Create the photo and award buckets if they do not exist yet."""

import asyncio
import sys

import logfire

from birddex.adapter.hosted import HostedStorageClient
from birddex.config import Settings
from birddex.domain.service import StorageService
from birddex.util.observability import configure_logfire


async def bootstrap(settings: Settings) -> list[str]:
    service = StorageService(HostedStorageClient(settings.storage), settings.storage)
    return await service.ensure_buckets()


def main() -> int:
    settings = Settings()
    configure_logfire(settings)

    try:
        created = asyncio.run(bootstrap(settings))
        logfire.info("Storage bootstrap completed", created=created)
        return 0

    except Exception as e:
        logfire.error(
            "Storage bootstrap failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
