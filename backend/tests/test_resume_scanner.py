"""Tests for the upload -> extract -> analyze -> score flow."""

from unittest.mock import AsyncMock, patch

import httpx
import pytest

from conftest import SAMPLE_ANALYSIS_JSON, make_input
from config import settings
from models.schemas.analysis_input import AnalysisInput
from services.errors import SCAN_FAILED_MESSAGE, ScanError, ScanErrorKind
from services.resume_scanner import scan, scan_text, validate_upload

EXTRACT = "services.resume_scanner.text_extractor.extract_text"
ANALYZE = "services.resume_scanner.resume_analyzer.analyze_text"


# --- validate_upload ---


def test_nothing_submitted():
    with pytest.raises(ScanError) as exc_info:
        validate_upload(None, None)
    assert exc_info.value.kind is ScanErrorKind.INPUT_NOT_SUBMITTED
    assert exc_info.value.message == "No file selected"


def test_unsupported_extension():
    with pytest.raises(ScanError) as exc_info:
        validate_upload(b"data", "resume.txt")
    assert exc_info.value.kind is ScanErrorKind.UNSUPPORTED_INPUT


def test_empty_file():
    with pytest.raises(ScanError) as exc_info:
        validate_upload(b"", "resume.pdf")
    assert exc_info.value.kind is ScanErrorKind.UNSUPPORTED_INPUT


def test_file_too_large(monkeypatch):
    monkeypatch.setattr(settings, "max_upload_size_mb", 1)
    with pytest.raises(ScanError) as exc_info:
        validate_upload(b"x" * (1024 * 1024 + 1), "resume.pdf")
    assert exc_info.value.kind is ScanErrorKind.UNSUPPORTED_INPUT
    assert "1MB" in exc_info.value.message


def test_valid_upload_passes():
    validate_upload(b"%PDF", "resume.pdf")


# --- scan ---


@pytest.mark.asyncio
async def test_scan_happy_path():
    analysis_input = AnalysisInput.model_validate(SAMPLE_ANALYSIS_JSON)
    with patch(EXTRACT, new=AsyncMock(return_value="resume text")) as mock_extract, \
         patch(ANALYZE, new=AsyncMock(return_value=analysis_input)) as mock_analyze:
        result = await scan(b"%PDF", "resume.pdf", "application/pdf")

    mock_extract.assert_awaited_once_with(b"%PDF", "resume.pdf", "application/pdf")
    mock_analyze.assert_awaited_once_with("resume text")
    assert result.score == 80
    assert result.keywords == ["Python"]
    assert len(result.suggestions) == 3


@pytest.mark.asyncio
async def test_scan_not_submitted_skips_io():
    with patch(EXTRACT, new=AsyncMock()) as mock_extract:
        with pytest.raises(ScanError) as exc_info:
            await scan(None, None)
    assert exc_info.value.kind is ScanErrorKind.INPUT_NOT_SUBMITTED
    mock_extract.assert_not_awaited()


@pytest.mark.asyncio
async def test_scan_extraction_transport_failure():
    request = httpx.Request("POST", "http://localhost:3001/api/extract-text")
    error = httpx.ConnectError("connection refused", request=request)
    with patch(EXTRACT, new=AsyncMock(side_effect=error)):
        with pytest.raises(ScanError) as exc_info:
            await scan(b"%PDF", "resume.pdf")

    assert exc_info.value.kind is ScanErrorKind.SCAN_FAILED
    assert exc_info.value.message == SCAN_FAILED_MESSAGE
    assert exc_info.value.__cause__ is error


@pytest.mark.asyncio
async def test_scan_analysis_failure():
    with patch(EXTRACT, new=AsyncMock(return_value="resume text")), \
         patch(ANALYZE, new=AsyncMock(side_effect=ValueError("bad payload"))):
        with pytest.raises(ScanError) as exc_info:
            await scan(b"%PDF", "resume.pdf")
    assert exc_info.value.kind is ScanErrorKind.SCAN_FAILED


@pytest.mark.asyncio
async def test_scan_blank_extracted_text():
    with patch(EXTRACT, new=AsyncMock(return_value="   \n")), \
         patch(ANALYZE, new=AsyncMock()) as mock_analyze:
        with pytest.raises(ScanError) as exc_info:
            await scan(b"%PDF", "resume.pdf")
    assert exc_info.value.kind is ScanErrorKind.UNSUPPORTED_INPUT
    mock_analyze.assert_not_awaited()


@pytest.mark.asyncio
async def test_scan_text_complete_resume():
    with patch(ANALYZE, new=AsyncMock(return_value=make_input(skills=["Go"]))):
        result = await scan_text("resume text")
    assert result.score == 100
    assert result.suggestions == []
    assert result.format.is_valid is True
