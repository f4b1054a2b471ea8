"""
Unit tests for submission and analysis result models.
"""

import json
import logging

import pytest

from analysis.ranker import SortOption, rank_journals
from models.manuscript import AnalysisResult, Journal, Preferences, Submission
from utils.categories import AUTO_DETECT, normalize_subject_area


class TestSubmission:
    
    def test_create_strips_and_defaults(self):
        submission = Submission.create(title="  A Title ", abstract=" Body ", keywords=None)
        
        assert submission.title == "A Title"
        assert submission.abstract == "Body"
        assert submission.keywords == ""
        assert submission.subject_area == AUTO_DETECT
        assert submission.preferences == Preferences()
        assert submission.is_auto_detect
    
    @pytest.mark.parametrize("title, abstract", [("", "abstract"), ("title", "   ")])
    def test_create_rejects_empty_required_fields(self, title, abstract):
        with pytest.raises(ValueError):
            Submission.create(title=title, abstract=abstract)
    
    def test_full_text_excerpt(self, make_submission):
        assert make_submission(full_text="a" * 4000).full_text_excerpt == "a" * 3000
        assert make_submission(full_text="short").full_text_excerpt == "short"
        assert make_submission().full_text_excerpt is None


class TestSubjectAreas:
    
    @pytest.mark.parametrize("value, expected", [
        (None, AUTO_DETECT),
        ("auto", AUTO_DETECT),
        ("自动检测", AUTO_DETECT),
        ("physics", "Physics"),
        ("生物学", "Biology"),
        ("Marine Archaeology", "Marine Archaeology"),
    ])
    def test_normalize_subject_area(self, value, expected):
        assert normalize_subject_area(value) == expected


class TestAnalysisResult:
    
    def test_round_trip(self, sample_payload):
        result = AnalysisResult.from_dict(sample_payload)
        
        assert result.to_dict() == sample_payload
        assert result.journals[0].name == "Journal of Machine Learning Research"
        assert result.journals[0].is_oa is True
        assert result.suggestions.general_advice == "Submit to a specialised venue first."
    
    def test_missing_numeric_fields_default_to_zero(self, sample_payload):
        del sample_payload["journals"][0]["matchScore"]
        sample_payload["journals"][1]["impactFactor"] = "unknown"
        
        result = AnalysisResult.from_dict(sample_payload)
        
        assert result.journals[0].match_score == 0
        assert result.journals[1].impact_factor == 0
    
    def test_missing_optional_fields(self):
        journal = Journal.from_dict({"name": "J", "publisher": "P", "impactFactor": 2,
                                     "matchScore": 70, "acceptanceProbability": 40, "matchReason": "fit"})
        
        assert journal.is_oa is False
        assert journal.issn is None
        assert "issn" not in journal.to_dict()
    
    @pytest.mark.parametrize("mutate", [
        lambda p: p.update(journals="not a list"),
        lambda p: p["journals"].append("not an object"),
        lambda p: p.update(detailedAnalysis=["strengths"]),
        lambda p: p["suggestions"].update(titleSuggestions="one title"),
    ])
    def test_structural_mismatch_is_rejected(self, sample_payload, mutate):
        mutate(sample_payload)
        
        with pytest.raises(ValueError):
            AnalysisResult.from_dict(sample_payload)
    
    def test_non_object_payload_is_rejected(self):
        with pytest.raises(ValueError):
            AnalysisResult.from_dict([1, 2, 3])
    
    def test_non_finite_scores_from_json_default_to_zero(self, sample_payload, caplog):
        sample_payload["journals"][0]["matchScore"] = float("nan")
        sample_payload["journals"][1]["impactFactor"] = "Infinity"
        sample_payload["journals"][1]["acceptanceProbability"] = 10 ** 400
        
        with caplog.at_level(logging.WARNING, logger="models.manuscript"):
            result = AnalysisResult.from_dict(sample_payload)
        
        assert result.journals[0].match_score == 0
        assert result.journals[1].impact_factor == 0
        assert result.journals[1].acceptance_probability == 0
        assert "'matchScore'" in caplog.text
    
    def test_nan_token_in_payload_ranks_last(self):
        payload = json.loads(
            '{"detectedSubjectArea": "X", "journals": ['
            '{"name": "a", "publisher": "P", "impactFactor": 1, "matchScore": 10, "acceptanceProbability": 1, "matchReason": ""},'
            '{"name": "nan", "publisher": "P", "impactFactor": 1, "matchScore": NaN, "acceptanceProbability": 1, "matchReason": ""},'
            '{"name": "b", "publisher": "P", "impactFactor": 1, "matchScore": 90, "acceptanceProbability": 1, "matchReason": ""}],'
            '"detailedAnalysis": {"strengths": [], "weaknesses": []},'
            '"suggestions": {"titleSuggestions": [], "abstractKeywordsToInclude": [], "generalAdvice": ""}}'
        )
        
        result = AnalysisResult.from_dict(payload)
        ranked = rank_journals(result.journals, SortOption.MATCH_SCORE)
        
        assert [j.name for j in ranked] == ["b", "a", "nan"]
    
    def test_boolean_numeric_field_is_logged_and_zeroed(self, sample_payload, caplog):
        sample_payload["journals"][0]["impactFactor"] = True
        
        with caplog.at_level(logging.WARNING, logger="models.manuscript"):
            result = AnalysisResult.from_dict(sample_payload)
        
        assert result.journals[0].impact_factor == 0
        assert "'impactFactor'" in caplog.text
