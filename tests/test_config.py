"""
Unit tests for environment-based settings.
"""

import os
from unittest.mock import patch

from utils.config import Settings
from utils.messages import get_message, response_language


class TestSettings:
    
    def test_defaults(self):
        settings = Settings.from_env(environ={})
        
        assert settings.provider == "gemini"
        assert settings.model is None
        assert settings.api_key is None
        assert settings.language == "en"
    
    def test_gemini_key_with_api_key_alias(self):
        settings = Settings.from_env(environ={"API_KEY": "alias-key"})
        
        assert settings.api_key == "alias-key"
    
    def test_openai_provider_selects_openai_key(self):
        settings = Settings.from_env(environ={
            "SCHOLARMATCH_PROVIDER": "OpenAI",
            "SCHOLARMATCH_MODEL": "gpt-4o",
            "GEMINI_API_KEY": "g-key",
            "OPENAI_API_KEY": "o-key",
        })
        
        assert settings.provider == "openai"
        assert settings.model == "gpt-4o"
        assert settings.api_key == "o-key"
    
    def test_loads_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("GEMINI_API_KEY=from-file\n", encoding="utf-8")
        
        with patch.dict(os.environ, {}, clear=False):
            os.environ.pop("GEMINI_API_KEY", None)
            os.environ.pop("API_KEY", None)
            settings = Settings.from_env(env_file=str(env_file))
        
        assert settings.gemini_api_key == "from-file"


class TestMessages:
    
    def test_unknown_language_falls_back_to_english(self):
        assert get_message("analysis_failed", "fr") == get_message("analysis_failed", "en")
        assert response_language("fr") == "English"
        assert response_language("zh") == "Chinese"
