"""Thumbnail generator — asks the service for a smart-cropped thumbnail and saves it."""
import logging
import os
from pathlib import Path

from src.analysis import read_local_image
from src.constants import (
    MSG_LOG_THUMBNAIL_WRITTEN,
    THUMBNAIL_HEIGHT,
    THUMBNAIL_SMART_CROPPING,
    THUMBNAIL_WIDTH,
)
from src.errors import InputError, ServiceError, ThumbnailError
from src.image_source import ImageReference, LocalImage, RemoteImage
from src.vision.client import ImageSource, VisionClient

logger = logging.getLogger(__name__)


def ensure_writable(destination: Path) -> None:
    """Raise ThumbnailError unless destination can be created or overwritten."""
    parent = destination.parent
    match (destination.is_dir(), parent.is_dir()):
        case (True, _):
            raise ThumbnailError(f"{destination} is a directory")
        case (_, False):
            raise ThumbnailError(f"directory {parent} does not exist")
        case _:
            pass

    target = destination if destination.exists() else parent
    if not os.access(target, os.W_OK):
        raise ThumbnailError(f"{target} is not writable")


def _thumbnail_source(reference: ImageReference) -> ImageSource:
    match reference:
        case RemoteImage(url=url):
            return url
        case LocalImage(path=path):
            return read_local_image(path)


def save_thumbnail(data: bytes, destination: Path) -> None:
    try:
        with open(destination, "wb") as f:
            f.write(data)
    except OSError as e:
        raise ThumbnailError(f"could not write {destination}: {e}") from e


async def generate_thumbnail(
    client: VisionClient,
    reference: ImageReference,
    destination: Path,
    width: int = THUMBNAIL_WIDTH,
    height: int = THUMBNAIL_HEIGHT,
    smart_cropping: bool = THUMBNAIL_SMART_CROPPING,
) -> Path:
    """Fetch a thumbnail for reference and write it to destination. Raises ThumbnailError."""
    ensure_writable(destination)
    try:
        source = _thumbnail_source(reference)
        data = await client.thumbnail(width, height, source, smart_cropping)
    except (InputError, ServiceError) as e:
        raise ThumbnailError(str(e)) from e

    save_thumbnail(data, destination)
    logger.debug(MSG_LOG_THUMBNAIL_WRITTEN, len(data), destination)
    return destination
