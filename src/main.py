"""Entry point — wires Config → AzureVisionClient → analysis → thumbnail."""
import asyncio
import logging
import sys
from pathlib import Path
from typing import Callable, Optional

from rich.console import Console
from rich.logging import RichHandler

from src.analysis import analyze_image
from src.config import Config
from src.constants import (
    EXIT_OK,
    EXIT_UNEXPECTED,
    MSG_ANALYSIS_ERROR,
    MSG_CONFIG_ERROR,
    MSG_GENERATING_THUMBNAIL,
    MSG_LOG_ANALYSIS_UNHANDLED,
    MSG_LOG_UNHANDLED,
    MSG_PROMPT,
    MSG_THUMBNAIL_ERROR,
    MSG_THUMBNAIL_SAVED,
    MSG_UNEXPECTED_ERROR,
)
from src.errors import (
    ConfigurationError,
    FetchError,
    InputError,
    ServiceError,
    ThumbnailError,
)
from src.fetcher import RemoteImageFetcher
from src.image_source import ImageReference, classify
from src.presenter import display_analysis
from src.thumbnail import generate_thumbnail
from src.vision.azure import AzureVisionClient
from src.vision.client import VisionClient

logger = logging.getLogger(__name__)

ClientFactory = Callable[[Config], VisionClient]


def _setup_logging(level: str) -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    list(map(root.removeHandler, root.handlers[:]))
    root.addHandler(RichHandler(console=Console(stderr=True), rich_tracebacks=True))


def _read_line(read_input: Callable[[str], str]) -> str:
    try:
        return read_input(MSG_PROMPT)
    except EOFError:
        return ""


async def _analysis_step(
    client: VisionClient,
    reference: ImageReference,
    fetcher: Optional[RemoteImageFetcher],
) -> int:
    try:
        result = await analyze_image(client, reference, fetcher)
    except (FetchError, ServiceError, InputError) as e:
        print(MSG_ANALYSIS_ERROR % e)
        return e.exit_code
    except Exception as e:
        logger.exception(MSG_LOG_ANALYSIS_UNHANDLED)
        print(MSG_UNEXPECTED_ERROR % e)
        return EXIT_UNEXPECTED
    display_analysis(result)
    return EXIT_OK


async def _thumbnail_step(client: VisionClient, reference: ImageReference, destination: Path) -> int:
    print(MSG_GENERATING_THUMBNAIL)
    try:
        saved = await generate_thumbnail(client, reference, destination)
    except ThumbnailError as e:
        print(MSG_THUMBNAIL_ERROR % e)
        return e.exit_code
    print(MSG_THUMBNAIL_SAVED % saved)
    return EXIT_OK


async def _run_with_client(
    client: VisionClient, config: Config, read_input: Callable[[str], str]
) -> int:
    fetcher = (
        RemoteImageFetcher(timeout=config.http_timeout)
        if config.fetch_remote
        else None
    )

    try:
        reference = classify(_read_line(read_input))
    except InputError as e:
        print(e)
        return e.exit_code

    # Both steps always run; the first failure decides the exit code.
    analysis_code = await _analysis_step(client, reference, fetcher)
    thumbnail_code = await _thumbnail_step(client, reference, config.thumbnail_path)
    return analysis_code or thumbnail_code


async def run(
    settings_path: Optional[Path] = None,
    read_input: Callable[[str], str] = input,
    client_factory: ClientFactory = AzureVisionClient.from_config,
) -> int:
    """Run one interactive analysis. Returns the process exit code."""
    try:
        config = Config.from_settings(settings_path)
    except ConfigurationError as e:
        print(MSG_CONFIG_ERROR % e)
        return e.exit_code

    _setup_logging(config.log_level)

    try:
        client = client_factory(config)
        try:
            return await _run_with_client(client, config, read_input)
        finally:
            client.close()
    except Exception as e:
        logger.exception(MSG_LOG_UNHANDLED)
        print(MSG_UNEXPECTED_ERROR % e)
        return EXIT_UNEXPECTED


def main() -> None:
    sys.exit(asyncio.run(run()))


if __name__ == "__main__":
    main()
