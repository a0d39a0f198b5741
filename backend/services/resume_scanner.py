"""Scan an uploaded resume: extract text, analyze it, score it.

All collaborator failures surface as ``ScanError`` with kind
``SCAN_FAILED``; input problems are reported before any I/O happens.
"""

import logging

import httpx

from config import settings
from models.responses import AnalysisResult
from services import resume_analyzer, score_engine, text_extractor
from services.errors import ScanError

logger = logging.getLogger(__name__)


def validate_upload(content: bytes | None, filename: str | None) -> None:
    """Reject uploads that cannot be scanned. Performs no I/O."""
    if content is None and not filename:
        raise ScanError.not_submitted()

    if not filename or not text_extractor.is_supported(filename):
        raise ScanError.unsupported("Only PDF, DOC and DOCX files are accepted")

    if not content:
        raise ScanError.unsupported("Uploaded file is empty")

    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise ScanError.unsupported(
            f"File too large. Max size: {settings.max_upload_size_mb}MB"
        )


async def scan_text(resume_text: str) -> AnalysisResult:
    """Analyze already-extracted resume text and score it."""
    if not resume_text.strip():
        raise ScanError.unsupported("No resume text to analyze")

    try:
        analysis_input = await resume_analyzer.analyze_text(resume_text)
    except (httpx.HTTPError, ValueError) as e:
        logger.error("Error analyzing resume: %s", e)
        raise ScanError.failed() from e

    result = score_engine.analyze(analysis_input)
    logger.info("Resume scanned: score=%d", result.score)
    return result


async def scan(
    content: bytes | None,
    filename: str | None,
    content_type: str | None = None,
) -> AnalysisResult:
    """Full flow for an uploaded document."""
    validate_upload(content, filename)

    try:
        resume_text = await text_extractor.extract_text(content, filename, content_type)
    except (httpx.HTTPError, ValueError) as e:
        logger.error("Error extracting resume text from %s: %s", filename, e)
        raise ScanError.failed() from e

    return await scan_text(resume_text)
