"""VisionClient — abstract base for image analysis backends."""
from abc import ABC, abstractmethod
from typing import Iterable

from src.vision.models import AnalysisResult, Feature

# A URL the service fetches itself, or raw bytes streamed to it.
ImageSource = bytes | str


class VisionClient(ABC):
    @abstractmethod
    async def analyze(self, image: ImageSource, features: Iterable[Feature]) -> AnalysisResult:
        """Analyze an image for the requested features. Raises ServiceError on failure."""
        ...

    @abstractmethod
    async def thumbnail(
        self, width: int, height: int, image: ImageSource, smart_cropping: bool
    ) -> bytes:
        """Return JPEG thumbnail bytes. Raises ServiceError on failure."""
        ...

    def close(self) -> None:
        """Release transport resources. Backends without any keep the default."""
