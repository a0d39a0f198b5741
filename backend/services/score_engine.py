"""ATS compatibility scoring for structured resume attributes.

Every function here is a pure computation over an ``AnalysisInput``:
no I/O, no shared state, safe to call concurrently.
"""

import logging

from models.responses import AnalysisResult, FormatValidation, Severity, Suggestion
from models.schemas.analysis_input import AnalysisInput

logger = logging.getLogger(__name__)

BASE_SCORE = 100
MIN_SCORE = 0
MAX_SCORE = 100

# Deductions for missing required sections
PENALTY_NO_CONTACT_INFO = 10
PENALTY_NO_WORK_EXPERIENCE = 15
PENALTY_NO_EDUCATION = 10
PENALTY_NO_SKILLS = 10
PENALTY_PER_FORMAT_ISSUE = 5

MSG_NO_CONTACT_INFO = "Add complete contact information including phone, email, and location"
MSG_NO_WORK_EXPERIENCE = "Include detailed work experience with measurable achievements"
MSG_NO_EDUCATION = "Add your educational background"
MSG_NO_SKILLS = "List relevant technical and soft skills"


def compute_score(data: AnalysisInput) -> int:
    """Compute the 0-100 ATS compatibility score."""
    score = BASE_SCORE

    if not data.has_contact_info:
        score -= PENALTY_NO_CONTACT_INFO
    if not data.has_work_experience:
        score -= PENALTY_NO_WORK_EXPERIENCE
    if not data.has_education:
        score -= PENALTY_NO_EDUCATION
    if not data.has_skills:
        score -= PENALTY_NO_SKILLS

    score -= PENALTY_PER_FORMAT_ISSUE * len(data.format_issues)

    return max(MIN_SCORE, min(MAX_SCORE, score))


def extract_keywords(data: AnalysisInput) -> list[str]:
    """Unique skills, industry terms and action verbs in first-seen order.

    Matching is exact (case-sensitive, untrimmed).
    """
    seen: dict[str, None] = {}
    for term in (*data.skills, *data.industry_terms, *data.action_verbs):
        seen.setdefault(term, None)
    return list(seen)


def generate_suggestions(data: AnalysisInput) -> list[Suggestion]:
    """Build suggestions: missing sections, then format issues, then strengths."""
    missing = [
        (data.has_contact_info, MSG_NO_CONTACT_INFO),
        (data.has_work_experience, MSG_NO_WORK_EXPERIENCE),
        (data.has_education, MSG_NO_EDUCATION),
        (data.has_skills, MSG_NO_SKILLS),
    ]
    suggestions = [
        Suggestion(text=message, severity=Severity.ERROR)
        for present, message in missing
        if not present
    ]
    suggestions.extend(
        Suggestion(text=issue, severity=Severity.WARNING) for issue in data.format_issues
    )
    suggestions.extend(
        Suggestion(text=strength, severity=Severity.SUCCESS) for strength in data.strengths
    )
    return suggestions


def validate_format(data: AnalysisInput) -> FormatValidation:
    """Resume format is valid iff no format issues were reported."""
    return FormatValidation(is_valid=not data.format_issues, issues=data.format_issues)


def analyze(data: AnalysisInput) -> AnalysisResult:
    """Derive score, keywords, suggestions and format validation."""
    result = AnalysisResult(
        score=compute_score(data),
        keywords=extract_keywords(data),
        suggestions=generate_suggestions(data),
        format=validate_format(data),
    )
    logger.info(
        "Scored resume: score=%d keywords=%d suggestions=%d",
        result.score, len(result.keywords), len(result.suggestions),
    )
    return result
