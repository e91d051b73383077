"""Analysis invoker — resolves an ImageReference and asks the service about it."""
from pathlib import Path
from typing import Optional

from src.errors import InputError
from src.fetcher import RemoteImageFetcher
from src.image_source import ImageReference, LocalImage, RemoteImage
from src.vision.client import ImageSource, VisionClient
from src.vision.models import ANALYSIS_FEATURES, AnalysisResult


def read_local_image(path: Path) -> bytes:
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as e:
        raise InputError(f"could not read {path}: {e}") from e


async def resolve_source(
    reference: ImageReference, fetcher: Optional[RemoteImageFetcher] = None
) -> ImageSource:
    """URLs go to the service as-is unless a fetcher is given to download them first."""
    match (reference, fetcher):
        case (RemoteImage(url=url), None):
            return url
        case (RemoteImage(url=url), f):
            return await f.fetch(url)
        case (LocalImage(path=path), _):
            return read_local_image(path)


async def analyze_image(
    client: VisionClient,
    reference: ImageReference,
    fetcher: Optional[RemoteImageFetcher] = None,
) -> AnalysisResult:
    """Send the referenced image to the service with the fixed feature set.

    Raises FetchError, InputError or ServiceError.
    """
    source = await resolve_source(reference, fetcher)
    return await client.analyze(source, ANALYSIS_FEATURES)
