"""Error taxonomy — every failure the CLI reports maps to one of these."""
from src.constants import EXIT_ANALYSIS, EXIT_CONFIG, EXIT_INPUT, EXIT_THUMBNAIL, EXIT_UNEXPECTED


class VisionCliError(Exception):
    """Base class for all handled failures."""

    exit_code: int = EXIT_UNEXPECTED


class ConfigurationError(VisionCliError):
    """Settings file missing, unreadable, or a required field is absent."""

    exit_code = EXIT_CONFIG


class InputError(VisionCliError):
    """Image reference is empty, malformed, or names no readable file."""

    exit_code = EXIT_INPUT


class FetchError(VisionCliError):
    """Remote image bytes could not be retrieved."""

    exit_code = EXIT_ANALYSIS


class ServiceError(VisionCliError):
    """The vision service call failed (auth, network, quota, format)."""

    exit_code = EXIT_ANALYSIS


class ThumbnailError(VisionCliError):
    """Thumbnail request or file write failed."""

    exit_code = EXIT_THUMBNAIL


class PresentationError(VisionCliError):
    """Malformed result shape. Handled with fallback text, never raised to the user."""
