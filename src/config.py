from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional
import json
import os
from dotenv import load_dotenv

from src.constants import (
    DEFAULT_HTTP_TIMEOUT,
    DEFAULT_LOG_LEVEL,
    DEFAULT_SETTINGS_FILE,
    DEFAULT_THUMBNAIL_PATH,
    ENV_FETCH_REMOTE,
    ENV_HTTP_TIMEOUT,
    ENV_LOG_LEVEL,
    ENV_THUMBNAIL_PATH,
    SETTING_ENDPOINT,
    SETTING_FETCH_REMOTE,
    SETTING_HTTP_TIMEOUT,
    SETTING_KEY,
    SETTING_THUMBNAIL_PATH,
    SETTINGS_FILE_ENV,
)
from src.errors import ConfigurationError


@dataclass(frozen=True)
class Config:
    endpoint: str
    key: str
    thumbnail_path: Path
    http_timeout: float
    log_level: str
    fetch_remote: bool = False

    @classmethod
    def from_settings(cls, path: Optional[Path] = None) -> "Config":
        load_dotenv()

        settings_path = Path(path or os.getenv(SETTINGS_FILE_ENV, DEFAULT_SETTINGS_FILE))
        settings = _read_settings(settings_path)

        raw_thumbnail = os.getenv(ENV_THUMBNAIL_PATH) or settings.get(
            SETTING_THUMBNAIL_PATH, DEFAULT_THUMBNAIL_PATH
        )
        raw_timeout = os.getenv(ENV_HTTP_TIMEOUT) or settings.get(
            SETTING_HTTP_TIMEOUT, DEFAULT_HTTP_TIMEOUT
        )
        log_level = os.getenv(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL)
        raw_fetch = os.getenv(ENV_FETCH_REMOTE) or settings.get(SETTING_FETCH_REMOTE, False)

        return cls._validate(
            endpoint=settings.get(SETTING_ENDPOINT),
            key=settings.get(SETTING_KEY),
            thumbnail_path=raw_thumbnail,
            http_timeout=raw_timeout,
            log_level=log_level,
            fetch_remote=raw_fetch,
        )

    @staticmethod
    def _validate(
        endpoint: Any,
        key: Any,
        thumbnail_path: Any,
        http_timeout: Any,
        log_level: str,
        fetch_remote: Any = False,
    ) -> "Config":
        match endpoint:
            case str() as e if e.strip():
                pass
            case _:
                raise ConfigurationError(f"{SETTING_ENDPOINT} must be set in the settings file")

        match key:
            case str() as k if k.strip():
                pass
            case _:
                raise ConfigurationError(f"{SETTING_KEY} must be set in the settings file")

        match thumbnail_path:
            case str() | Path() if str(thumbnail_path).strip():
                pass
            case _:
                raise ConfigurationError(f"{SETTING_THUMBNAIL_PATH} must be a non-empty path")

        try:
            timeout = float(http_timeout)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"{SETTING_HTTP_TIMEOUT} must be a number, got {http_timeout!r}") from e
        match timeout:
            case t if t > 0:
                pass
            case _:
                raise ConfigurationError(f"{SETTING_HTTP_TIMEOUT} must be positive, got {timeout}")

        return Config(
            endpoint=endpoint.strip(),
            key=key.strip(),
            thumbnail_path=Path(thumbnail_path).expanduser().resolve(),
            http_timeout=timeout,
            log_level=log_level,
            fetch_remote=_as_bool(fetch_remote),
        )


def _as_bool(value: Any) -> bool:
    match value:
        case bool():
            return value
        case str():
            return value.strip().lower() in ("1", "true", "yes", "on")
        case _:
            raise ConfigurationError(f"{SETTING_FETCH_REMOTE} must be true or false, got {value!r}")


def _read_settings(path: Path) -> dict[str, Any]:
    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    except FileNotFoundError as e:
        raise ConfigurationError(f"settings file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"settings file {path} is not valid JSON: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"settings file {path} could not be read: {e}") from e

    match raw:
        case dict():
            return raw
        case _:
            raise ConfigurationError(f"settings file {path} must contain a JSON object")
