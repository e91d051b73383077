"""RemoteImageFetcher — downloads a remote image so it can be streamed to the service."""
import logging
from typing import Optional

import httpx

from src.constants import (
    DEFAULT_HTTP_TIMEOUT,
    IMAGE_CONTENT_PREFIX,
    MAX_IMAGE_BYTES,
    MSG_LOG_FETCHED,
    MSG_LOG_FETCHING,
)
from src.errors import FetchError

logger = logging.getLogger(__name__)


class RemoteImageFetcher:

    def __init__(
        self,
        timeout: float = DEFAULT_HTTP_TIMEOUT,
        max_bytes: int = MAX_IMAGE_BYTES,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._timeout = timeout
        self._max_bytes = max_bytes
        self._transport = transport

    async def fetch(self, url: str) -> bytes:
        """Return the image bytes at url. Raises FetchError on any failure."""
        logger.info(MSG_LOG_FETCHING, url)
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                async with client.stream("GET", url) as response:
                    response.raise_for_status()
                    _check_content_type(url, response.headers.get("content-type", ""))
                    data = await self._read_limited(url, response)
        except httpx.HTTPStatusError as e:
            raise FetchError(
                f"GET {url} failed with status {e.response.status_code}"
            ) from e
        except (httpx.RequestError, httpx.TimeoutException) as e:
            raise FetchError(f"could not download {url}: {e}") from e
        except httpx.InvalidURL as e:
            raise FetchError(f"invalid image URL {url}: {e}") from e

        logger.debug(MSG_LOG_FETCHED, len(data), url)
        return data

    async def _read_limited(self, url: str, response: httpx.Response) -> bytes:
        buffer = bytearray()
        async for chunk in response.aiter_bytes():
            buffer.extend(chunk)
            if len(buffer) > self._max_bytes:
                raise FetchError(
                    f"image at {url} exceeds the {self._max_bytes} byte limit"
                )
        return bytes(buffer)


def _check_content_type(url: str, content_type: str) -> None:
    # Servers that omit the header get the benefit of the doubt.
    match content_type.split(";")[0].strip().lower():
        case "":
            return
        case ct if ct.startswith(IMAGE_CONTENT_PREFIX) or ct == "application/octet-stream":
            return
        case ct:
            raise FetchError(f"{url} is not an image (content type {ct})")
