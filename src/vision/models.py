"""SDK-independent analysis result returned by every VisionClient."""
from dataclasses import dataclass, field
from enum import Enum


class Feature(str, Enum):
    DESCRIPTION = "description"
    TAGS = "tags"
    CATEGORIES = "categories"
    BRANDS = "brands"
    OBJECTS = "objects"
    ADULT = "adult"


# Requested on every analyze call, in report order.
ANALYSIS_FEATURES: tuple[Feature, ...] = (
    Feature.DESCRIPTION,
    Feature.TAGS,
    Feature.CATEGORIES,
    Feature.BRANDS,
    Feature.OBJECTS,
    Feature.ADULT,
)


@dataclass(frozen=True)
class Caption:
    text: str
    confidence: float = 0.0


@dataclass(frozen=True)
class Tag:
    name: str
    confidence: float = 0.0


@dataclass(frozen=True)
class ScoredItem:
    name: str
    confidence: float


@dataclass(frozen=True)
class AdultRating:
    is_adult: bool = False
    is_racy: bool = False
    is_gory: bool = False


@dataclass(frozen=True)
class AnalysisResult:
    captions: tuple[Caption, ...] = ()
    tags: tuple[Tag, ...] = ()
    categories: tuple[ScoredItem, ...] = ()
    brands: tuple[ScoredItem, ...] = ()
    objects: tuple[ScoredItem, ...] = ()
    adult: AdultRating = field(default_factory=AdultRating)
