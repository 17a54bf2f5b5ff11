import abc
import logging
from typing import Any

import httpx

from errors.errors import APIError

logger = logging.getLogger(__name__)


class BaseAPIClient(abc.ABC):
    BASE_URL: str
    ERROR_CLASS: type[APIError] = APIError

    def __init__(
        self,
        base_url: str | None = None,
        *,
        timeout: float = 10,
        headers: dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._timeout = timeout
        self._client = httpx.AsyncClient(
            base_url=base_url or self.BASE_URL,
            timeout=timeout,
            headers=headers,
            transport=transport,
            follow_redirects=True,
        )

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        try:
            resp = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.error("Request to %s failed: %s", path, e)
            raise self.ERROR_CLASS(f"Request failed: {e}", url=path) from e
        try:
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                "HTTP error",
                extra={"status": e.response.status_code, "url": str(e.request.url)},
            )
            raise self.ERROR_CLASS(
                e.response.text or "Unknown error",
                status=e.response.status_code,
                url=str(e.request.url),
            ) from e
        return resp

    async def _get_text(self, path: str, params: dict | None = None) -> str:
        resp = await self._request("GET", path, params=params)
        return resp.text

    async def _post_json(self, path: str, content: bytes) -> bytes:
        resp = await self._request(
            "POST",
            path,
            content=content,
            headers={"Content-Type": "application/json"},
        )
        return resp.content

    async def aclose(self):
        await self._client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        await self.aclose()
