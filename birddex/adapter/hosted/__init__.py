"""Hosted auth and storage adapters."""

from .auth import HostedAuthClient, MockAuthClient
from .storage import HostedStorageClient, MockStorageClient

__all__ = [
    "HostedAuthClient",
    "MockAuthClient",
    "HostedStorageClient",
    "MockStorageClient",
]
