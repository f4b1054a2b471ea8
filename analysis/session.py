"""
Orchestration of one analysis at a time for a front-end
"""
import logging
from dataclasses import dataclass
from typing import Optional

from analysis.errors import AnalysisError
from analysis.ranker import SortOption, rank_journals
from models.manuscript import AnalysisResult, Submission
from utils.messages import DEFAULT_LANGUAGE, get_message

logger = logging.getLogger(__name__)


@dataclass
class AnalysisOutcome:
    """Success-or-failure result of one submission"""
    request_id: int
    result: Optional[AnalysisResult] = None
    error: Optional[str] = None
    stale: bool = False
    
    @property
    def ok(self) -> bool:
        return self.result is not None and self.error is None


class AnalysisSession:
    """
    Holds the current result for a front-end and guards the single in-flight request.
    
    Each submission gets a request id; a response that arrives after reset() or
    after a newer submission is discarded instead of replacing the current state.
    """
    
    def __init__(self, matcher, language: str = DEFAULT_LANGUAGE):
        self.matcher = matcher
        self.language = language
        self.result: Optional[AnalysisResult] = None
        self.error: Optional[str] = None
        self.busy = False
        self._request_id = 0
    
    async def submit(self, submission: Submission) -> AnalysisOutcome:
        if self.busy:
            logger.warning("Submission ignored: an analysis is already in progress")
            return AnalysisOutcome(request_id=self._request_id, error=get_message("busy", self.language))
        
        self._request_id += 1
        request_id = self._request_id
        self.busy = True
        self.result = None
        self.error = None
        
        try:
            result = await self.matcher.analyze(submission)
        except AnalysisError as e:
            logger.error(f"Analysis request {request_id} failed: {type(e).__name__}: {e}", exc_info=True)
            if request_id != self._request_id:
                return AnalysisOutcome(request_id=request_id, error=get_message("analysis_failed", self.language), stale=True)
            self.error = get_message("analysis_failed", self.language)
            return AnalysisOutcome(request_id=request_id, error=self.error)
        finally:
            if request_id == self._request_id:
                self.busy = False
        
        if request_id != self._request_id:
            logger.info(f"Discarding result of superseded analysis request {request_id}")
            return AnalysisOutcome(request_id=request_id, result=result, stale=True)
        
        self.result = result
        return AnalysisOutcome(request_id=request_id, result=result)
    
    def reset(self):
        """Clear the current result and supersede any request still in flight"""
        self._request_id += 1
        self.result = None
        self.error = None
        self.busy = False
    
    def sorted_journals(self, option: SortOption = SortOption.MATCH_SCORE):
        if self.result is None:
            return []
        return rank_journals(self.result.journals, option)
