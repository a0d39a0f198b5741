"""Shared test configuration, fixtures and pytest markers."""

import pytest

from api.router import limiter
from models.schemas.analysis_input import AnalysisInput


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: talks to real extraction/analysis services"
    )


@pytest.fixture(autouse=True)
def _disable_rate_limit():
    """Keep slowapi from rejecting repeated test requests."""
    limiter.enabled = False
    yield
    limiter.enabled = True


def make_input(**overrides) -> AnalysisInput:
    """AnalysisInput with every section present unless overridden."""
    fields = {
        "has_contact_info": True,
        "has_work_experience": True,
        "has_education": True,
        "has_skills": True,
    }
    fields.update(overrides)
    return AnalysisInput(**fields)


@pytest.fixture
def complete_input() -> AnalysisInput:
    return make_input()


SAMPLE_ANALYSIS_JSON = {
    "hasContactInfo": True,
    "hasWorkExperience": False,
    "hasEducation": True,
    "hasSkills": True,
    "formatIssues": ["Font too small"],
    "skills": ["Python"],
    "strengths": ["Strong leadership"],
}
