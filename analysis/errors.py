"""
Failure types raised by the journal matching client
"""
from typing import Optional


class AnalysisError(Exception):
    """Base class for every failure of an inference call"""


class ConfigurationError(AnalysisError):
    """The client is misconfigured (unknown provider, missing credential)"""


class TransportFailure(AnalysisError):
    """Network error, timeout or credential rejection from the model API"""


class EmptyResponse(AnalysisError):
    """The model API answered without any text content"""


class ParseFailure(AnalysisError):
    """The model returned text that is not a valid analysis payload"""
    
    def __init__(self, message: str, detail: Optional[str] = None, raw_text: Optional[str] = None):
        super().__init__(message)
        self.detail = detail
        self.raw_text = raw_text
