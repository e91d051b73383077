"""TDD: RemoteImageFetcher tests written FIRST"""
import httpx
import pytest

from src.errors import FetchError
from src.fetcher import RemoteImageFetcher

URL = "https://example.com/cat.jpg"


def make_fetcher(handler, **kwargs) -> RemoteImageFetcher:
    return RemoteImageFetcher(transport=httpx.MockTransport(handler), **kwargs)


async def test_fetch_returns_image_bytes():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(str(request.url))
        return httpx.Response(200, content=b"jpeg-bytes", headers={"content-type": "image/jpeg"})

    data = await make_fetcher(handler).fetch(URL)

    assert data == b"jpeg-bytes"
    assert seen == [URL]


async def test_fetch_follows_redirects():
    def handler(request: httpx.Request) -> httpx.Response:
        match request.url.path:
            case "/cat.jpg":
                return httpx.Response(302, headers={"location": "https://example.com/real.jpg"})
            case _:
                return httpx.Response(200, content=b"real", headers={"content-type": "image/png"})

    assert await make_fetcher(handler).fetch(URL) == b"real"


async def test_fetch_accepts_missing_content_type():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"raw")

    assert await make_fetcher(handler).fetch(URL) == b"raw"


async def test_fetch_raises_on_http_error_status():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, content=b"not found")

    with pytest.raises(FetchError, match="404"):
        await make_fetcher(handler).fetch(URL)


async def test_fetch_raises_on_non_image_content():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"<html></html>", headers={"content-type": "text/html; charset=utf-8"})

    with pytest.raises(FetchError, match="not an image"):
        await make_fetcher(handler).fetch(URL)


async def test_fetch_raises_on_oversized_payload():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"x" * 64, headers={"content-type": "image/jpeg"})

    with pytest.raises(FetchError, match="limit"):
        await make_fetcher(handler, max_bytes=16).fetch(URL)


async def test_fetch_raises_on_transport_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(FetchError, match="could not download"):
        await make_fetcher(handler).fetch(URL)


async def test_fetch_raises_on_malformed_url():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"never", headers={"content-type": "image/jpeg"})

    with pytest.raises(FetchError, match="invalid image URL"):
        await make_fetcher(handler).fetch("https://example.com:abc/cat.jpg")
