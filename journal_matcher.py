#!/usr/bin/env python3
"""
ScholarMatch - Main Entry Point
Finds the academic journals that best match a manuscript using an LLM
"""

import asyncio
import argparse
import json
import logging
import sys

# Local imports
from analysis.errors import ConfigurationError
from analysis.matcher import JournalMatcher
from analysis.ranker import SortOption
from analysis.session import AnalysisSession
from analysis.text_extractor import ManuscriptReader, ManuscriptReadError
from models.manuscript import Preferences, Submission
from utils.categories import AUTO_DETECT, SUBJECT_AREAS, normalize_subject_area
from utils.config import Settings
from utils.messages import get_message, response_language

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

SORT_CHOICES = {option.value: option for option in SortOption}


def probability_bar(value, width=20):
    """Text bar for a 0-100 probability"""
    try:
        value = float(value)
    except (TypeError, ValueError):
        value = 0.0
    value = max(0.0, min(100.0, value))
    filled = int(round(value / 100 * width))
    return "#" * filled + "-" * (width - filled)


def format_journal_card(rank, journal):
    """Render one journal recommendation as a block of text lines"""
    oa_flag = " [OA]" if journal.is_oa else ""
    lines = [
        f"{rank}. {journal.name}{oa_flag}",
        f"   Publisher: {journal.publisher}" + (f"  |  ISSN: {journal.issn}" if journal.issn else ""),
        f"   Impact Factor: {journal.impact_factor}  |  Acceptance Rate: {journal.acceptance_rate or 'N/A'}"
        f"  |  Review Time: {journal.review_time or 'N/A'}",
        f"   Match Score: {journal.match_score}/100",
        f"   Acceptance Probability: [{probability_bar(journal.acceptance_probability)}] {journal.acceptance_probability}%",
    ]
    if journal.match_reason:
        lines.append(f"   Why it fits: {journal.match_reason}")
    if journal.scope:
        lines.append(f"   Scope: {journal.scope}")
    return "\n".join(lines)


def render_results(result, journals, language):
    """Build the full text report for an analysis result"""
    lines = [
        "RESULTS",
        "=" * 70,
        f"Detected Subject Area: {result.detected_subject_area}",
        "",
        "Strengths:"
    ]
    lines.extend(f"  + {item}" for item in result.detailed_analysis.strengths)
    lines.append("Weaknesses:")
    lines.extend(f"  - {item}" for item in result.detailed_analysis.weaknesses)
    
    lines.append("")
    lines.append(f"RECOMMENDED JOURNALS ({len(journals)})")
    lines.append("=" * 70)
    for i, journal in enumerate(journals, 1):
        lines.append(format_journal_card(i, journal))
        lines.append("")
    
    suggestions = result.suggestions
    lines.append("SUGGESTIONS")
    lines.append("=" * 70)
    if suggestions.title_suggestions:
        lines.append("Title alternatives:")
        lines.extend(f"  * {title}" for title in suggestions.title_suggestions)
    if suggestions.abstract_keywords_to_include:
        lines.append(f"Keywords to include: {', '.join(suggestions.abstract_keywords_to_include)}")
    if suggestions.general_advice:
        lines.append(f"Advice: {suggestions.general_advice}")
    
    lines.append("")
    lines.append(get_message("disclaimer", language))
    return "\n".join(lines)


def list_subject_areas(args):
    """List the subject areas accepted by --subject-area"""
    print("Available subject areas:")
    print("=" * 50)
    print(f"  {AUTO_DETECT:25} - let the model infer the field (default)")
    for name, label in SUBJECT_AREAS.items():
        print(f"  {name:25} - {label}")


def build_submission(args):
    """Turn parsed arguments into a Submission, reading the manuscript file if given"""
    full_text = None
    if args.full_text_file:
        full_text = ManuscriptReader.read(args.full_text_file)
    
    return Submission.create(
        title=args.title,
        abstract=args.abstract,
        keywords=args.keywords or "",
        subject_area=normalize_subject_area(args.subject_area),
        full_text=full_text,
        preferences=Preferences(
            open_access=args.open_access,
            high_impact=args.high_impact,
            fast_review=args.fast_review
        )
    )


def resolve_settings(args, settings=None):
    """Apply command line overrides on top of environment settings"""
    settings = settings or Settings.from_env()
    if args.provider:
        settings.provider = args.provider
    if args.model:
        settings.model = args.model
    if args.gemini_key:
        settings.gemini_api_key = args.gemini_key
    if args.openai_key:
        settings.openai_api_key = args.openai_key
    if args.language:
        settings.language = args.language
    return settings


async def run_analysis(args, submission, settings, matcher=None):
    """Run one analysis and print the report; returns the process exit code"""
    if matcher is None:
        matcher = JournalMatcher(
            provider=settings.provider,
            api_key=settings.api_key,
            model=settings.model,
            language=response_language(settings.language)
        )
    session = AnalysisSession(matcher, language=settings.language)
    
    print(f"ScholarMatch - AI Journal Matching ({settings.provider.upper()})")
    print("=" * 70)
    print(f"Title: {submission.title}")
    print(f"Subject area: {submission.subject_area}")
    print("\nAnalyzing manuscript...\n")
    
    outcome = await session.submit(submission)
    if not outcome.ok:
        print(outcome.error, file=sys.stderr)
        return 1
    
    if args.json:
        print(json.dumps(outcome.result.to_dict(), ensure_ascii=False, indent=2))
    else:
        journals = session.sorted_journals(SORT_CHOICES[args.sort])
        print(render_results(outcome.result, journals, settings.language))
    return 0


def build_parser():
    parser = argparse.ArgumentParser(description="ScholarMatch - Recommends journals for a manuscript using an LLM")
    parser.add_argument("--title", help="Manuscript title")
    parser.add_argument("--abstract", help="Manuscript abstract")
    parser.add_argument("--keywords", default="", help="Comma-separated keywords")
    parser.add_argument("--subject-area", default=AUTO_DETECT,
                        help="Subject area (use --list-subject-areas to see options, default: auto-detect)")
    parser.add_argument("--full-text-file", help="Text or PDF file with the manuscript; only the first 3000 characters are sent")
    parser.add_argument("--open-access", action="store_true", help="Prefer open-access journals")
    parser.add_argument("--high-impact", action="store_true", help="Prioritize high impact factor journals")
    parser.add_argument("--fast-review", action="store_true", help="Prioritize journals with short review cycles")
    parser.add_argument("--provider", choices=["gemini", "openai"], help="LLM provider to use (default: gemini)")
    parser.add_argument("--model", help="Model name override")
    parser.add_argument("--gemini-key", help="Google Gemini API key (defaults to GEMINI_API_KEY)")
    parser.add_argument("--openai-key", help="OpenAI API key (defaults to OPENAI_API_KEY)")
    parser.add_argument("--sort", choices=list(SORT_CHOICES), default=SortOption.MATCH_SCORE.value,
                        help="Order of the journal cards")
    parser.add_argument("--language", choices=["en", "zh"], help="Interface and response language")
    parser.add_argument("--json", action="store_true", help="Print the raw analysis result as JSON")
    parser.add_argument("--list-subject-areas", action="store_true", help="List available subject areas and exit")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def main(argv=None):
    """Main entry point for the script"""
    parser = build_parser()
    args = parser.parse_args(argv)
    
    # Set logging level
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)
        for handler in logging.getLogger().handlers:
            handler.setLevel(logging.DEBUG)
    
    if args.list_subject_areas:
        list_subject_areas(args)
        return 0
    
    if not args.title or not args.abstract:
        parser.error("--title and --abstract are required")
    
    try:
        submission = build_submission(args)
        settings = resolve_settings(args)
        return asyncio.run(run_analysis(args, submission, settings))
    except (ValueError, ManuscriptReadError, ConfigurationError) as e:
        parser.error(str(e))
    except KeyboardInterrupt:
        print("\nShutdown requested by user")
        return 130


if __name__ == "__main__":
    sys.exit(main())
