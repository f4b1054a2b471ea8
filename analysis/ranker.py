"""
Sorting of journal recommendations for display
"""
import math
import re
from enum import Enum
from typing import Any, Iterable, List, Optional

from models.manuscript import Journal

WORST_REVIEW_WEEKS = 99

_LEADING_FLOAT = re.compile(r'\d+(?:\.\d*)?|\.\d+')


class SortOption(Enum):
    """Selectable orderings for the journal cards"""
    MATCH_SCORE = "match"
    IMPACT_FACTOR = "impact"
    ACCEPTANCE_RATE = "acceptance"
    REVIEW_TIME = "review"


def parse_rate(text: Optional[Any]) -> float:
    """Extract a rate such as '18%' -> 18.0; anything unparseable counts as 0"""
    if text is None:
        return 0.0
    cleaned = re.sub(r'[^0-9.]', '', str(text))
    match = _LEADING_FLOAT.match(cleaned)
    if not match:
        return 0.0
    rate = float(match.group())
    return rate if math.isfinite(rate) else 0.0


def parse_weeks(text: Optional[Any]) -> int:
    """Extract a week count such as '6 weeks' -> 6; anything unparseable counts as 99"""
    if text is None:
        return WORST_REVIEW_WEEKS
    digits = re.sub(r'[^0-9]', '', str(text))
    if not digits:
        return WORST_REVIEW_WEEKS
    try:
        return int(digits)
    except ValueError:
        # Longer than the interpreter's integer string conversion limit
        return WORST_REVIEW_WEEKS


def _numeric(value: Any) -> float:
    if isinstance(value, bool):
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return 0.0
    return number if math.isfinite(number) else 0.0


def rank_journals(journals: Iterable[Journal], option: SortOption = SortOption.MATCH_SCORE) -> List[Journal]:
    """Return a new, stably sorted list; the input sequence is left untouched"""
    journals = list(journals)
    
    if option == SortOption.MATCH_SCORE:
        return sorted(journals, key=lambda j: _numeric(j.match_score), reverse=True)
    if option == SortOption.IMPACT_FACTOR:
        return sorted(journals, key=lambda j: _numeric(j.impact_factor), reverse=True)
    if option == SortOption.ACCEPTANCE_RATE:
        return sorted(journals, key=lambda j: parse_rate(j.acceptance_rate), reverse=True)
    if option == SortOption.REVIEW_TIME:
        return sorted(journals, key=lambda j: parse_weeks(j.review_time))
    
    return journals
