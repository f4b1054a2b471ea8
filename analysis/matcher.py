"""
LLM client that matches a manuscript to candidate journals
"""
import asyncio
import json
import logging
from typing import Optional

import openai
import google.generativeai as genai

from analysis.errors import ConfigurationError, EmptyResponse, ParseFailure, TransportFailure
from models.manuscript import AnalysisResult, Submission
from prompts.matching_prompts import compile_request, to_json_schema

logger = logging.getLogger(__name__)

DEFAULT_MODELS = {
    "gemini": "gemini-2.5-flash",
    "openai": "gpt-4o-mini"
}

# Placeholder so the OpenAI client can be built without a key; the API rejects it on first use
MISSING_KEY_PLACEHOLDER = "missing-api-key"


def strip_code_fence(text: str) -> str:
    """Remove a Markdown code fence wrapped around a JSON payload"""
    text = text.strip()
    if text.startswith('```json'):
        text = text[7:]
        if text.endswith('```'):
            text = text[:-3]
    elif text.startswith('```'):
        text = text[3:]
        if text.endswith('```'):
            text = text[:-3]
    return text.strip()


def parse_analysis(text: str) -> AnalysisResult:
    """Parse the raw model payload into an AnalysisResult or raise ParseFailure"""
    payload_text = strip_code_fence(text)
    
    try:
        payload = json.loads(payload_text)
    except json.JSONDecodeError as e:
        logger.error(f"JSON parsing error in analysis response: {e}")
        logger.error(f"Response text: {payload_text[:200]}...")
        raise ParseFailure("Failed to parse analysis results", detail=str(e), raw_text=text) from e
    
    try:
        return AnalysisResult.from_dict(payload)
    except (TypeError, ValueError) as e:
        logger.error(f"Analysis response has an unexpected shape: {e}")
        logger.error(f"Response text: {payload_text[:200]}...")
        raise ParseFailure("Analysis results have an unexpected shape", detail=str(e), raw_text=text) from e


class JournalMatcher:
    """Sends one manuscript analysis request to the configured LLM provider"""
    
    def __init__(self, provider: str = "gemini", api_key: Optional[str] = None,
                 model: Optional[str] = None, language: str = "English", client=None):
        self.provider = provider.lower()
        if self.provider not in DEFAULT_MODELS:
            raise ConfigurationError("Provider must be 'gemini' or 'openai'")
        
        self.model = model or DEFAULT_MODELS[self.provider]
        self.language = language
        
        if not api_key:
            logger.error(f"No API key configured for the {self.provider} provider; analysis requests will fail")
        
        if client is not None:
            self.client = client
        elif self.provider == "openai":
            self.client = openai.AsyncOpenAI(api_key=api_key or MISSING_KEY_PLACEHOLDER)
        else:
            if api_key:
                genai.configure(api_key=api_key)
            self.client = genai.GenerativeModel(self.model)
        
        logger.info(f"Initialized JournalMatcher with {self.provider} provider using model {self.model}")
    
    async def _call_llm(self, prompt: str, schema: dict) -> Optional[str]:
        """Issue the single-turn request and return the text content, if any"""
        try:
            if self.provider == "openai":
                response = await self.client.chat.completions.create(
                    model=self.model,
                    messages=[{"role": "user", "content": prompt}],
                    response_format={
                        "type": "json_schema",
                        "json_schema": {"name": "analysis_result", "schema": to_json_schema(schema)}
                    }
                )
                if not response.choices:
                    return None
                return response.choices[0].message.content
            
            loop = asyncio.get_event_loop()
            
            def _sync_generate():
                return self.client.generate_content(
                    [{"role": "user", "parts": [prompt]}],
                    generation_config=genai.types.GenerationConfig(
                        candidate_count=1,
                        response_mime_type="application/json",
                        response_schema=schema
                    )
                )
            
            response = await loop.run_in_executor(None, _sync_generate)
        
        except Exception as e:
            logger.error(f"LLM API call failed: {e}")
            raise TransportFailure(f"{self.provider} request failed: {e}") from e
        
        try:
            return response.text
        except ValueError as e:
            # Raised by the Gemini SDK when the candidate carries no text parts
            logger.warning(f"Gemini response has no text content: {e}")
            return None
    
    async def analyze(self, submission: Submission) -> AnalysisResult:
        """Run one analysis for a submission"""
        request = compile_request(submission, self.language)
        logger.debug(f"Compiled prompt ({len(request.prompt)} chars) for '{submission.title}'")
        
        response_text = await self._call_llm(request.prompt, request.schema)
        if not response_text or not response_text.strip():
            logger.error("No response from AI service")
            raise EmptyResponse("No response from AI service")
        
        result = parse_analysis(response_text)
        logger.info(f"Received {len(result.journals)} journal recommendations "
                    f"for subject area '{result.detected_subject_area}'")
        return result
