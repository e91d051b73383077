"""Classify raw user input as a remote URL or a local image file."""
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import urlsplit
import logging
import os

from src.constants import MSG_INVALID_INPUT, MSG_LOG_CLASSIFIED
from src.errors import InputError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RemoteImage:
    url: str


@dataclass(frozen=True)
class LocalImage:
    path: Path


ImageReference = RemoteImage | LocalImage


def is_absolute_url(text: str) -> bool:
    try:
        parts = urlsplit(text)
        parts.port  # raises ValueError for a malformed port
    except ValueError:
        return False
    return bool(parts.scheme) and bool(parts.hostname) and not any(c.isspace() for c in text)


def is_readable_file(text: str) -> bool:
    path = Path(text).expanduser()
    return path.is_file() and os.access(path, os.R_OK)


def classify(raw: str | None) -> ImageReference:
    """Turn raw input into an ImageReference. Raises InputError when it is neither."""
    text = (raw or "").strip()
    match text:
        case "":
            raise InputError(MSG_INVALID_INPUT)
        case t if is_absolute_url(t):
            reference: ImageReference = RemoteImage(url=t)
        case t if is_readable_file(t):
            reference = LocalImage(path=Path(t).expanduser())
        case _:
            raise InputError(MSG_INVALID_INPUT)
    logger.debug(MSG_LOG_CLASSIFIED, reference)
    return reference
