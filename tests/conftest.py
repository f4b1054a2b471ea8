import copy
import json

import pytest
from unittest.mock import AsyncMock, Mock

from models.manuscript import Preferences, Submission
from utils.categories import AUTO_DETECT


SAMPLE_PAYLOAD = {
    "detectedSubjectArea": "Computer Science - Machine Learning",
    "journals": [
        {
            "name": "Journal of Machine Learning Research",
            "issn": "1532-4435",
            "publisher": "JMLR",
            "impactFactor": 6.0,
            "acceptanceRate": "18%",
            "reviewTime": "12 weeks",
            "isOA": True,
            "matchScore": 88,
            "acceptanceProbability": 35,
            "matchReason": "Strong methodological contribution to learning theory",
            "scope": "All areas of machine learning"
        },
        {
            "name": "Neurocomputing",
            "issn": "0925-2312",
            "publisher": "Elsevier",
            "impactFactor": 5.5,
            "acceptanceRate": "30%",
            "reviewTime": "6 weeks",
            "isOA": False,
            "matchScore": 74,
            "acceptanceProbability": 55,
            "matchReason": "Applied neural network focus",
            "scope": "Neural computation and applications"
        }
    ],
    "detailedAnalysis": {
        "strengths": ["Clear problem statement", "Extensive experiments"],
        "weaknesses": ["Limited comparison with recent baselines"]
    },
    "suggestions": {
        "titleSuggestions": ["Sparse Attention for Long Documents"],
        "abstractKeywordsToInclude": ["sparse attention", "long context"],
        "generalAdvice": "Submit to a specialised venue first."
    }
}


@pytest.fixture
def sample_payload():
    return copy.deepcopy(SAMPLE_PAYLOAD)


@pytest.fixture
def sample_payload_text(sample_payload):
    return json.dumps(sample_payload)


@pytest.fixture
def make_submission():
    """Factory for submissions with sensible defaults"""
    def _make(**overrides):
        fields = {
            "title": "Sparse Attention for Long Document Classification",
            "abstract": "We propose a sparse attention mechanism for long documents.",
            "keywords": "attention, transformers, long documents",
            "subject_area": AUTO_DETECT,
            "full_text": None,
            "preferences": Preferences()
        }
        fields.update(overrides)
        return Submission(**fields)
    return _make


@pytest.fixture
def gemini_client():
    """Fake Gemini GenerativeModel returning the text set via .reply"""
    client = Mock()
    
    def reply(text):
        client.generate_content.return_value = Mock(text=text)
    
    client.reply = reply
    return client


@pytest.fixture
def openai_client():
    """Fake AsyncOpenAI client returning the text set via .reply"""
    client = Mock()
    client.chat.completions.create = AsyncMock()
    
    def reply(text):
        message = Mock(content=text)
        client.chat.completions.create.return_value = Mock(choices=[Mock(message=message)])
    
    client.reply = reply
    return client
