"""HTTP plumbing shared by the hosted service clients."""

from typing import Any

import httpx
import logfire

from birddex.adapter.error import ProviderError


def error_message(response: httpx.Response) -> str:
    """Pull the service's error text out of a failed response.

    The hosted services are not consistent about the field name, so the
    usual candidates are tried in order before falling back to the body.
    """
    try:
        body = response.json()
    except ValueError:
        return response.text or f"Request failed: {response.status_code}"
    if isinstance(body, dict):
        for key in ("error_description", "msg", "message", "error"):
            if body.get(key):
                return str(body[key])
    return f"Request failed: {response.status_code}"


class HostedHTTPClient:
    """Base for clients of the hosted REST services.

    ``transport`` lets tests substitute an ``httpx.MockTransport``.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self.transport = transport

    def _headers(self, bearer: str | None = None) -> dict[str, str]:
        return {
            "apikey": self.api_key,
            "Authorization": f"Bearer {bearer or self.api_key}",
        }

    async def _request(
        self,
        method: str,
        path: str,
        bearer: str | None = None,
        headers: dict[str, str] | None = None,
        **kwargs: Any,
    ) -> httpx.Response:
        """Send a request and raise ``ProviderError`` on any failure."""
        url = f"{self.base_url}/{path.lstrip('/')}"
        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.request(
                    method,
                    url,
                    headers={**self._headers(bearer), **(headers or {})},
                    timeout=self.timeout,
                    **kwargs,
                )
        except httpx.HTTPError as e:
            logfire.error("Hosted service HTTP error", url=url, error=str(e))
            raise ProviderError(f"Could not reach the service: {e}")

        if response.status_code >= 400:
            message = error_message(response)
            logfire.warn(
                "Hosted service request failed",
                url=url,
                status_code=response.status_code,
                error=message,
            )
            raise ProviderError(message, status_code=response.status_code)
        return response
