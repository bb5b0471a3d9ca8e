"""Hosted object storage client."""

from urllib.parse import quote

import httpx

from birddex.adapter.error import ProviderError
from birddex.adapter.hosted.http import HostedHTTPClient
from birddex.config import StorageSettings
from birddex.domain.service.storage_service import StorageClient


class HostedStorageClient(HostedHTTPClient, StorageClient):
    """Storage client backed by the hosted storage REST API.

    Requests are made with the service key, so bucket policies do not
    apply; the API checks ownership before it uploads anything.
    """

    def __init__(
        self,
        settings: StorageSettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(settings.api_url, settings.service_key, transport=transport)

    async def upload(
        self,
        bucket: str,
        path: str,
        data: bytes,
        content_type: str = "image/jpeg",
        upsert: bool = False,
        cache_control: str = "3600",
    ) -> str:
        await self._request(
            "POST",
            f"/object/{bucket}/{quote(path)}",
            headers={
                "Content-Type": content_type,
                "x-upsert": "true" if upsert else "false",
                "cache-control": f"max-age={cache_control}",
            },
            content=data,
        )
        return path

    async def create_signed_url(self, bucket: str, path: str, ttl_seconds: int) -> str:
        response = await self._request(
            "POST",
            f"/object/sign/{bucket}/{quote(path)}",
            json={"expiresIn": ttl_seconds},
        )
        signed = response.json().get("signedURL")
        if not signed:
            raise ProviderError("Storage did not return a signed URL")
        return f"{self.base_url}/{signed.lstrip('/')}"

    def get_public_url(self, bucket: str, path: str) -> str:
        return f"{self.base_url}/object/public/{bucket}/{quote(path)}"

    async def list_buckets(self) -> list[str]:
        response = await self._request("GET", "/bucket")
        return [bucket["name"] for bucket in response.json()]

    async def create_bucket(
        self, name: str, public: bool, allowed_mime_types: list[str]
    ) -> None:
        await self._request(
            "POST",
            "/bucket",
            json={
                "id": name,
                "name": name,
                "public": public,
                "allowed_mime_types": allowed_mime_types,
            },
        )


class MockStorageClient(StorageClient):
    """In-memory storage client for testing."""

    def __init__(self, base_url: str = "https://storage.test") -> None:
        self.base_url = base_url
        self.objects: dict[tuple[str, str], bytes] = {}
        self.buckets: dict[str, bool] = {}

    async def upload(
        self,
        bucket: str,
        path: str,
        data: bytes,
        content_type: str = "image/jpeg",
        upsert: bool = False,
        cache_control: str = "3600",
    ) -> str:
        if (bucket, path) in self.objects and not upsert:
            raise ProviderError("The resource already exists", status_code=409)
        self.objects[(bucket, path)] = data
        return path

    async def create_signed_url(self, bucket: str, path: str, ttl_seconds: int) -> str:
        if (bucket, path) not in self.objects:
            raise ProviderError("Object not found", status_code=404)
        return f"{self.base_url}/sign/{bucket}/{path}?ttl={ttl_seconds}"

    def get_public_url(self, bucket: str, path: str) -> str:
        return f"{self.base_url}/public/{bucket}/{path}"

    async def list_buckets(self) -> list[str]:
        return list(self.buckets)

    async def create_bucket(
        self, name: str, public: bool, allowed_mime_types: list[str]
    ) -> None:
        self.buckets[name] = public
