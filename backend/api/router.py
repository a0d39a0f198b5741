from fastapi import APIRouter, File, Request, UploadFile
from slowapi import Limiter
from slowapi.util import get_remote_address

from config import settings
from models.requests import AnalyzeTextRequest
from models.responses import AnalysisResult, ErrorResponse, HealthResponse
from models.schemas.analysis_input import AnalysisInput
from services import resume_scanner, score_engine

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Nothing submitted or unsupported input"},
    502: {"model": ErrorResponse, "description": "Extraction or analysis service failed"},
}


@router.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(
        status="ok",
        analysis_backend=settings.analysis_backend,
        gemini_configured=bool(settings.gemini_api_key),
    )


@router.post("/scan", response_model=AnalysisResult, responses=_ERROR_RESPONSES)
@limiter.limit("10/minute")
async def scan(request: Request, resume_file: UploadFile | None = File(None)):
    if resume_file is None:
        return await resume_scanner.scan(None, None)

    content = await resume_file.read()
    return await resume_scanner.scan(content, resume_file.filename, resume_file.content_type)


@router.post("/analyze/text", response_model=AnalysisResult, responses=_ERROR_RESPONSES)
@limiter.limit("10/minute")
async def analyze_text(request: Request, body: AnalyzeTextRequest):
    return await resume_scanner.scan_text(body.text)


@router.post("/score", response_model=AnalysisResult)
async def score(body: AnalysisInput):
    return score_engine.analyze(body)
