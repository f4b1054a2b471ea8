"""
Data models for manuscript submissions and journal matching results
"""
import logging
import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Any

from utils.categories import AUTO_DETECT

logger = logging.getLogger(__name__)

FULL_TEXT_LIMIT = 3000


@dataclass(frozen=True)
class Preferences:
    """Submission preferences selected by the user"""
    open_access: bool = False
    high_impact: bool = False
    fast_review: bool = False


@dataclass(frozen=True)
class Submission:
    """Manuscript metadata bundle sent for analysis"""
    title: str
    abstract: str
    keywords: str = ""
    subject_area: str = AUTO_DETECT
    full_text: Optional[str] = None
    preferences: Preferences = field(default_factory=Preferences)
    
    @classmethod
    def create(cls, title: str, abstract: str, keywords: str = "",
               subject_area: str = AUTO_DETECT, full_text: Optional[str] = None,
               preferences: Optional[Preferences] = None) -> "Submission":
        """Build a submission from raw form input, rejecting empty required fields"""
        title = (title or "").strip()
        abstract = (abstract or "").strip()
        if not title:
            raise ValueError("Manuscript title must not be empty")
        if not abstract:
            raise ValueError("Manuscript abstract must not be empty")
        
        return cls(
            title=title,
            abstract=abstract,
            keywords=(keywords or "").strip(),
            subject_area=subject_area or AUTO_DETECT,
            full_text=full_text or None,
            preferences=preferences or Preferences()
        )
    
    @property
    def is_auto_detect(self) -> bool:
        return self.subject_area == AUTO_DETECT
    
    @property
    def full_text_excerpt(self) -> Optional[str]:
        """First FULL_TEXT_LIMIT characters of the full text, if any"""
        if not self.full_text:
            return None
        return self.full_text[:FULL_TEXT_LIMIT]


def _number(value: Any, field_name: str) -> float:
    """Coerce a numeric wire value, treating missing or malformed values as 0"""
    if isinstance(value, (int, float, str)) and not isinstance(value, bool):
        try:
            number = float(value)
        except (ValueError, OverflowError):
            number = None
        if number is not None and math.isfinite(number):
            return number if isinstance(value, str) else value
    logger.warning(f"Journal field {field_name!r} missing or not numeric ({value!r}), using 0")
    return 0


def _optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def _string_list(payload: Dict[str, Any], key: str, owner: str) -> List[str]:
    value = payload.get(key, [])
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"{owner}.{key} must be a list, got {type(value).__name__}")
    return [item if isinstance(item, str) else str(item) for item in value]


def _section(payload: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = payload.get(key)
    if value is None:
        logger.warning(f"Analysis payload is missing {key!r}, using empty defaults")
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"{key} must be an object, got {type(value).__name__}")
    return value


@dataclass
class Journal:
    """One recommended publication venue with estimated metrics"""
    name: str
    publisher: str
    impact_factor: float
    match_score: float
    acceptance_probability: float
    match_reason: str = ""
    issn: Optional[str] = None
    acceptance_rate: Optional[str] = None
    review_time: Optional[str] = None
    is_oa: bool = False
    scope: Optional[str] = None
    
    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "Journal":
        if not isinstance(payload, dict):
            raise ValueError(f"journal entry must be an object, got {type(payload).__name__}")
        
        return cls(
            name=_optional_text(payload.get("name")) or "",
            publisher=_optional_text(payload.get("publisher")) or "",
            impact_factor=_number(payload.get("impactFactor"), "impactFactor"),
            match_score=_number(payload.get("matchScore"), "matchScore"),
            acceptance_probability=_number(payload.get("acceptanceProbability"), "acceptanceProbability"),
            match_reason=_optional_text(payload.get("matchReason")) or "",
            issn=_optional_text(payload.get("issn")),
            acceptance_rate=_optional_text(payload.get("acceptanceRate")),
            review_time=_optional_text(payload.get("reviewTime")),
            is_oa=bool(payload.get("isOA", False)),
            scope=_optional_text(payload.get("scope"))
        )
    
    def to_dict(self) -> Dict[str, Any]:
        data = {
            "name": self.name,
            "issn": self.issn,
            "publisher": self.publisher,
            "impactFactor": self.impact_factor,
            "acceptanceRate": self.acceptance_rate,
            "reviewTime": self.review_time,
            "isOA": self.is_oa,
            "matchScore": self.match_score,
            "acceptanceProbability": self.acceptance_probability,
            "matchReason": self.match_reason,
            "scope": self.scope
        }
        return {key: value for key, value in data.items() if value is not None}


@dataclass
class DetailedAnalysis:
    """Strengths and weaknesses critique of the manuscript"""
    strengths: List[str] = field(default_factory=list)
    weaknesses: List[str] = field(default_factory=list)


@dataclass
class ImprovementSuggestions:
    """Title, keyword and strategy suggestions"""
    title_suggestions: List[str] = field(default_factory=list)
    abstract_keywords_to_include: List[str] = field(default_factory=list)
    general_advice: str = ""


@dataclass
class AnalysisResult:
    """Structured outcome of one inference call"""
    detected_subject_area: str
    journals: List[Journal]
    detailed_analysis: DetailedAnalysis
    suggestions: ImprovementSuggestions
    
    @classmethod
    def from_dict(cls, payload: Any) -> "AnalysisResult":
        """Convert a decoded JSON payload, raising ValueError on structural mismatch"""
        if not isinstance(payload, dict):
            raise ValueError(f"analysis payload must be an object, got {type(payload).__name__}")
        
        journals = payload.get("journals", [])
        if journals is None:
            journals = []
        if not isinstance(journals, list):
            raise ValueError(f"journals must be a list, got {type(journals).__name__}")
        
        analysis = _section(payload, "detailedAnalysis")
        suggestions = _section(payload, "suggestions")
        
        return cls(
            detected_subject_area=_optional_text(payload.get("detectedSubjectArea")) or "",
            journals=[Journal.from_dict(item) for item in journals],
            detailed_analysis=DetailedAnalysis(
                strengths=_string_list(analysis, "strengths", "detailedAnalysis"),
                weaknesses=_string_list(analysis, "weaknesses", "detailedAnalysis")
            ),
            suggestions=ImprovementSuggestions(
                title_suggestions=_string_list(suggestions, "titleSuggestions", "suggestions"),
                abstract_keywords_to_include=_string_list(suggestions, "abstractKeywordsToInclude", "suggestions"),
                general_advice=_optional_text(suggestions.get("generalAdvice")) or ""
            )
        )
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "detectedSubjectArea": self.detected_subject_area,
            "journals": [journal.to_dict() for journal in self.journals],
            "detailedAnalysis": {
                "strengths": list(self.detailed_analysis.strengths),
                "weaknesses": list(self.detailed_analysis.weaknesses)
            },
            "suggestions": {
                "titleSuggestions": list(self.suggestions.title_suggestions),
                "abstractKeywordsToInclude": list(self.suggestions.abstract_keywords_to_include),
                "generalAdvice": self.suggestions.general_advice
            }
        }
