"""AzureVisionClient — Azure Computer Vision backend."""
import asyncio
import io
import logging
import time
from typing import Any, Callable, Iterable, Iterator

from azure.cognitiveservices.vision.computervision import ComputerVisionClient
from azure.cognitiveservices.vision.computervision.models import VisualFeatureTypes
from msrest.authentication import CognitiveServicesCredentials
from msrest.exceptions import ClientException

from src.config import Config
from src.constants import (
    DEFAULT_HTTP_TIMEOUT,
    MSG_LOG_ANALYZED,
    MSG_LOG_ANALYZING,
    MSG_LOG_CLIENT_READY,
    MSG_LOG_THUMBNAIL,
    MSG_LOG_THUMBNAIL_DONE,
)
from src.errors import ServiceError
from src.vision.client import ImageSource, VisionClient
from src.vision.models import (
    AdultRating,
    AnalysisResult,
    Caption,
    Feature,
    ScoredItem,
    Tag,
)

logger = logging.getLogger(__name__)

_SDK_FEATURES: dict[Feature, VisualFeatureTypes] = {
    Feature.DESCRIPTION: VisualFeatureTypes.description,
    Feature.TAGS: VisualFeatureTypes.tags,
    Feature.CATEGORIES: VisualFeatureTypes.categories,
    Feature.BRANDS: VisualFeatureTypes.brands,
    Feature.OBJECTS: VisualFeatureTypes.objects,
    Feature.ADULT: VisualFeatureTypes.adult,
}


class AzureVisionClient(VisionClient):

    def __init__(self, endpoint: str, key: str, timeout: float = DEFAULT_HTTP_TIMEOUT) -> None:
        self._client = ComputerVisionClient(endpoint, CognitiveServicesCredentials(key))
        self._client.config.connection.timeout = timeout
        logger.debug(MSG_LOG_CLIENT_READY, endpoint)

    @classmethod
    def from_config(cls, config: Config) -> "AzureVisionClient":
        return cls(config.endpoint, config.key, timeout=config.http_timeout)

    async def analyze(self, image: ImageSource, features: Iterable[Feature]) -> AnalysisResult:
        visual_features = [_SDK_FEATURES[f] for f in features]
        start = time.monotonic()
        match image:
            case bytes() as data:
                logger.info(MSG_LOG_ANALYZING, len(data))
                analysis = await self._call(
                    self._client.analyze_image_in_stream,
                    io.BytesIO(data),
                    visual_features=visual_features,
                )
            case str() as url:
                analysis = await self._call(
                    self._client.analyze_image, url, visual_features=visual_features
                )
            case _:
                raise TypeError(f"unsupported image source: {type(image).__name__}")
        logger.info(MSG_LOG_ANALYZED, time.monotonic() - start)
        return to_analysis_result(analysis)

    async def thumbnail(
        self, width: int, height: int, image: ImageSource, smart_cropping: bool
    ) -> bytes:
        match (width, height):
            case (int() as w, int() as h) if w > 0 and h > 0:
                pass
            case _:
                raise ValueError(f"thumbnail dimensions must be positive, got {width}x{height}")

        logger.info(MSG_LOG_THUMBNAIL, width, height, smart_cropping)
        start = time.monotonic()
        match image:
            case bytes() as data:
                data = await self._call(
                    _collect,
                    self._client.generate_thumbnail_in_stream,
                    width,
                    height,
                    io.BytesIO(data),
                    smart_cropping=smart_cropping,
                )
            case str() as url:
                data = await self._call(
                    _collect,
                    self._client.generate_thumbnail,
                    width,
                    height,
                    url,
                    smart_cropping=smart_cropping,
                )
            case _:
                raise TypeError(f"unsupported image source: {type(image).__name__}")
        logger.info(MSG_LOG_THUMBNAIL_DONE, len(data), time.monotonic() - start)
        return data

    def close(self) -> None:
        self._client.close()

    async def _call(self, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        # The SDK is blocking; keep the event loop free while it runs.
        try:
            return await asyncio.to_thread(fn, *args, **kwargs)
        except ClientException as e:
            raise ServiceError(f"Computer Vision request failed: {e}") from e


def _collect(stream_call: Callable[..., Iterator[bytes]], *args: Any, **kwargs: Any) -> bytes:
    return b"".join(stream_call(*args, **kwargs))


def to_analysis_result(analysis: Any) -> AnalysisResult:
    """Map an SDK ImageAnalysis onto AnalysisResult. Missing sections become empty."""
    description = getattr(analysis, "description", None)
    adult = getattr(analysis, "adult", None)
    return AnalysisResult(
        captions=tuple(
            Caption(text=c.text, confidence=c.confidence or 0.0)
            for c in (getattr(description, "captions", None) or [])
        ),
        tags=tuple(
            Tag(name=t.name, confidence=t.confidence or 0.0)
            for t in (analysis.tags or [])
        ),
        categories=tuple(
            ScoredItem(name=c.name, confidence=c.score or 0.0)
            for c in (analysis.categories or [])
        ),
        brands=tuple(
            ScoredItem(name=b.name, confidence=b.confidence or 0.0)
            for b in (analysis.brands or [])
        ),
        objects=tuple(
            ScoredItem(name=o.object_property, confidence=o.confidence or 0.0)
            for o in (analysis.objects or [])
        ),
        adult=AdultRating(
            is_adult=bool(getattr(adult, "is_adult_content", False)),
            is_racy=bool(getattr(adult, "is_racy_content", False)),
            is_gory=bool(getattr(adult, "is_gory_content", False)),
        ),
    )
