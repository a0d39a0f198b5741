"""Pydantic contracts exchanged with the analysis collaborators."""

from models.schemas.analysis_input import AnalysisInput

__all__ = [
    "AnalysisInput",
]
