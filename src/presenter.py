"""Result presenter — turns an AnalysisResult into report lines."""
import logging
from typing import Optional

from src.constants import (
    MSG_ADULT,
    MSG_ANALYSIS_NULL,
    MSG_BRANDS_HEADER,
    MSG_CATEGORIES_HEADER,
    MSG_DESCRIPTION,
    MSG_GORE,
    MSG_ITEM,
    MSG_LOG_NO_CAPTION,
    MSG_NO_DESCRIPTION,
    MSG_OBJECTS_HEADER,
    MSG_RACY,
    MSG_RATINGS_HEADER,
    MSG_RESULTS_HEADER,
    MSG_SCORED_ITEM,
    MSG_TAGS_HEADER,
)
from src.errors import PresentationError
from src.vision.models import AnalysisResult, ScoredItem

logger = logging.getLogger(__name__)


def format_percent(score: float) -> str:
    return f"{score:.2%}"


def _first_caption(result: AnalysisResult) -> str:
    match result.captions:
        case (first, *_):
            return first.text
        case _:
            raise PresentationError("service returned no captions")


def _description_line(result: AnalysisResult) -> str:
    try:
        return MSG_DESCRIPTION % _first_caption(result)
    except PresentationError as e:
        logger.debug(MSG_LOG_NO_CAPTION, e)
        return MSG_DESCRIPTION % MSG_NO_DESCRIPTION


def _scored_lines(header: str, items: tuple[ScoredItem, ...]) -> list[str]:
    return [header, *(MSG_SCORED_ITEM % (i.name, format_percent(i.confidence)) for i in items)]


def format_analysis(result: Optional[AnalysisResult]) -> list[str]:
    match result:
        case None:
            return [MSG_ANALYSIS_NULL]
        case _:
            pass

    return [
        MSG_RESULTS_HEADER,
        _description_line(result),
        MSG_TAGS_HEADER,
        *(MSG_ITEM % t.name for t in result.tags),
        *_scored_lines(MSG_CATEGORIES_HEADER, result.categories),
        *_scored_lines(MSG_BRANDS_HEADER, result.brands),
        *_scored_lines(MSG_OBJECTS_HEADER, result.objects),
        MSG_RATINGS_HEADER,
        MSG_ADULT % result.adult.is_adult,
        MSG_RACY % result.adult.is_racy,
        MSG_GORE % result.adult.is_gory,
    ]


def display_analysis(result: Optional[AnalysisResult]) -> None:
    print("\n".join(format_analysis(result)))
