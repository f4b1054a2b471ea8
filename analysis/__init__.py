"""
Analysis package: journal matching client, result ranking and session handling
"""

from analysis.errors import (
    AnalysisError,
    ConfigurationError,
    TransportFailure,
    EmptyResponse,
    ParseFailure
)
from analysis.matcher import JournalMatcher, parse_analysis
from analysis.ranker import SortOption, rank_journals
from analysis.session import AnalysisSession, AnalysisOutcome
from analysis.text_extractor import ManuscriptReader, ManuscriptReadError

__all__ = [
    'AnalysisError',
    'ConfigurationError',
    'TransportFailure',
    'EmptyResponse',
    'ParseFailure',
    'JournalMatcher',
    'parse_analysis',
    'SortOption',
    'rank_journals',
    'AnalysisSession',
    'AnalysisOutcome',
    'ManuscriptReader',
    'ManuscriptReadError'
]
