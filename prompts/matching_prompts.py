"""
Prompts and response schema for the journal matching model
"""
from dataclasses import dataclass
from typing import Any, Dict

from models.manuscript import FULL_TEXT_LIMIT

AUTO_DETECT_DIRECTIVE = (
    "Infer the most specific subject area of this manuscript from its content."
)
SUBJECT_OVERRIDE_DIRECTIVE = "The user-specified subject area is: {subject_area}"

OPEN_ACCESS_DIRECTIVE = "Prefer open-access (OA) journals."
HIGH_IMPACT_DIRECTIVE = "Prioritize journals with a high impact factor."
FAST_REVIEW_DIRECTIVE = "Prioritize journals with a short review cycle."

TRUNCATION_MARKER = "(truncated excerpt, first {limit} characters)"


@dataclass(frozen=True)
class CompiledRequest:
    """Instruction text plus the schema the response must follow"""
    prompt: str
    schema: Dict[str, Any]


def subject_area_directive(submission):
    if submission.is_auto_detect:
        return AUTO_DETECT_DIRECTIVE
    return SUBJECT_OVERRIDE_DIRECTIVE.format(subject_area=submission.subject_area)


def preference_directives(preferences):
    """Join one directive per enabled preference; disabled ones add nothing"""
    directives = []
    if preferences.open_access:
        directives.append(OPEN_ACCESS_DIRECTIVE)
    if preferences.high_impact:
        directives.append(HIGH_IMPACT_DIRECTIVE)
    if preferences.fast_review:
        directives.append(FAST_REVIEW_DIRECTIVE)
    return " ".join(directives)


def build_analysis_prompt(submission, language="English"):
    """
    Generate the journal matching prompt for a submission
    The model plays a senior journal editor and must recommend only real journals
    """
    excerpt = submission.full_text_excerpt
    full_text_line = ""
    if excerpt:
        marker = TRUNCATION_MARKER.format(limit=FULL_TEXT_LIMIT)
        full_text_line = f"\n    - Full text {marker}: {excerpt}..."
    
    preferences = preference_directives(submission.preferences) or "None"
    
    return f"""
    You are a rigorous, impartial and highly experienced senior academic journal editor.
    Respond in {language}.
    
    Core principles:
    1. Authenticity: every journal you recommend must be a real, identifiable publication with a valid ISSN. Never fabricate journals. Base recommendations on real index knowledge (e.g. Web of Science, Scopus).
    2. Confidentiality: analyze the manuscript neutrally and objectively, as under a peer review confidentiality agreement, and never reveal personal or sensitive information from the input in your output.
    
    Manuscript details:
    - Title: {submission.title}
    - Keywords: {submission.keywords}
    - Abstract: {submission.abstract}
    - Subject area: {subject_area_directive(submission)}{full_text_line}
    
    User preferences: {preferences}
    
    Tasks:
    1. Subject detection: if the user did not specify one, infer the most accurate subject area.
    2. Journal recommendation: identify 6-8 real, existing English-language academic journals.
    3. Metric estimation: give the real impact factor (latest data) and an estimate of the historical acceptance rate.
    4. Match analysis: compute a match score (0-100) and an estimated acceptance probability (0-100).
    5. Brief critique:
       - Analyze the strengths and weaknesses of the manuscript.
       - Suggest revisions to the title and keywords to include in the abstract.
    
    The output must be strict JSON.
    """


def analysis_response_schema():
    """Response schema in the OpenAPI subset accepted by the Gemini API"""
    string_list = {"type": "ARRAY", "items": {"type": "STRING"}}
    
    return {
        "type": "OBJECT",
        "properties": {
            "detectedSubjectArea": {"type": "STRING", "description": "Specific subject area determined by the analysis"},
            "journals": {
                "type": "ARRAY",
                "items": {
                    "type": "OBJECT",
                    "properties": {
                        "name": {"type": "STRING"},
                        "issn": {"type": "STRING"},
                        "publisher": {"type": "STRING"},
                        "impactFactor": {"type": "NUMBER", "description": "Estimated Impact Factor"},
                        "acceptanceRate": {"type": "STRING", "description": "e.g., '18%'"},
                        "reviewTime": {"type": "STRING", "description": "e.g., '6 weeks'"},
                        "isOA": {"type": "BOOLEAN"},
                        "matchScore": {"type": "NUMBER", "description": "0-100, scope relevance"},
                        "acceptanceProbability": {"type": "NUMBER", "description": "0-100, likelihood of acceptance"},
                        "matchReason": {"type": "STRING", "description": "Why the journal fits the manuscript"},
                        "scope": {"type": "STRING", "description": "Short summary of the journal scope"}
                    },
                    "required": ["name", "publisher", "impactFactor", "matchScore", "acceptanceProbability", "matchReason"]
                }
            },
            "detailedAnalysis": {
                "type": "OBJECT",
                "properties": {
                    "strengths": dict(string_list, description="Highlights of the manuscript"),
                    "weaknesses": dict(string_list, description="Shortcomings of the manuscript")
                },
                "required": ["strengths", "weaknesses"]
            },
            "suggestions": {
                "type": "OBJECT",
                "properties": {
                    "titleSuggestions": dict(string_list),
                    "abstractKeywordsToInclude": dict(string_list),
                    "generalAdvice": {"type": "STRING", "description": "Overall submission strategy advice"}
                },
                "required": ["titleSuggestions", "abstractKeywordsToInclude", "generalAdvice"]
            }
        },
        "required": ["journals", "suggestions", "detectedSubjectArea", "detailedAnalysis"]
    }


def to_json_schema(schema):
    """Rewrite the Gemini schema with lowercase JSON Schema type names"""
    if isinstance(schema, dict):
        converted = {}
        for key, value in schema.items():
            if key == "type" and isinstance(value, str):
                converted[key] = value.lower()
            elif key == "properties":
                converted[key] = {name: to_json_schema(prop) for name, prop in value.items()}
            else:
                converted[key] = to_json_schema(value)
        return converted
    if isinstance(schema, list):
        return [to_json_schema(item) for item in schema]
    return schema


def compile_request(submission, language="English"):
    return CompiledRequest(
        prompt=build_analysis_prompt(submission, language),
        schema=analysis_response_schema()
    )
