from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    SUCCESS = "success"


class Suggestion(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    severity: Severity


class FormatValidation(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    is_valid: bool = Field(True, alias="isValid")
    issues: list[str] = []


class AnalysisResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    score: int = Field(100, ge=0, le=100)
    keywords: list[str] = []
    suggestions: list[Suggestion] = []
    format: FormatValidation = FormatValidation()


class HealthResponse(BaseModel):
    status: str = "ok"
    analysis_backend: str = ""
    gemini_configured: bool = False


class ErrorResponse(BaseModel):
    detail: str
    kind: str
