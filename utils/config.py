"""
Process-wide configuration, resolved once at startup
"""
import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from utils.messages import DEFAULT_LANGUAGE

logger = logging.getLogger(__name__)


@dataclass
class Settings:
    """Provider, model and credential settings for the matcher"""
    provider: str = "gemini"
    model: Optional[str] = None
    gemini_api_key: Optional[str] = None
    openai_api_key: Optional[str] = None
    language: str = DEFAULT_LANGUAGE
    
    @classmethod
    def from_env(cls, env_file: Optional[str] = None, environ=None) -> "Settings":
        """Read settings from the environment, loading a .env file first if present"""
        if environ is None:
            load_dotenv(dotenv_path=env_file)
            environ = os.environ
        
        settings = cls(
            provider=environ.get("SCHOLARMATCH_PROVIDER", "gemini").lower(),
            model=environ.get("SCHOLARMATCH_MODEL") or None,
            gemini_api_key=environ.get("GEMINI_API_KEY") or environ.get("API_KEY") or None,
            openai_api_key=environ.get("OPENAI_API_KEY") or None,
            language=environ.get("SCHOLARMATCH_LANGUAGE", DEFAULT_LANGUAGE)
        )
        
        if not settings.api_key:
            logger.warning(f"No API key found for the {settings.provider} provider in the environment")
        return settings
    
    @property
    def api_key(self) -> Optional[str]:
        if self.provider == "openai":
            return self.openai_api_key
        return self.gemini_api_key
