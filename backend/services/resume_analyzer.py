"""Turn resume text into structured ``AnalysisInput`` attributes.

Two backends are supported, selected by ``settings.analysis_backend``:

- ``gemini``: prompt Google Gemini for the attribute JSON.
- ``remote``: POST the text to ``{api_url}/analyze`` with a bearer token.
"""

import logging

import httpx

from config import settings
from models.schemas.analysis_input import AnalysisInput
from services import gemini_client, prompt_builder

logger = logging.getLogger(__name__)

BACKENDS = ("gemini", "remote")


async def _analyze_with_gemini(resume_text: str) -> dict:
    prompt = prompt_builder.build_analysis_prompt(resume_text)
    data = await gemini_client.generate_json(prompt)
    if data is None:
        raise ValueError("Gemini analysis unavailable")
    return data


async def _analyze_with_remote(
    resume_text: str, client: httpx.AsyncClient | None = None
) -> dict:
    url = f"{settings.api_url.rstrip('/')}/analyze"
    headers = {"Authorization": f"Bearer {settings.analysis_api_key}"}
    body = {"text": resume_text}

    if client is None:
        timeout = httpx.Timeout(settings.request_timeout_seconds, connect=10.0)
        async with httpx.AsyncClient(timeout=timeout) as owned:
            response = await owned.post(url, json=body, headers=headers)
    else:
        response = await client.post(url, json=body, headers=headers)
    response.raise_for_status()

    data = response.json()
    if not isinstance(data, dict):
        raise ValueError("Analysis service did not return a JSON object")
    return data


async def analyze_text(
    resume_text: str, client: httpx.AsyncClient | None = None
) -> AnalysisInput:
    """Run the configured analysis backend and validate its answer.

    Raises ``httpx.HTTPError`` for transport failures and ``ValueError``
    (including pydantic ``ValidationError``) for unusable answers.
    """
    backend = settings.analysis_backend
    if backend == "gemini":
        data = await _analyze_with_gemini(resume_text)
    elif backend == "remote":
        data = await _analyze_with_remote(resume_text, client=client)
    else:
        raise ValueError(f"Unknown analysis backend: {backend!r}. Use one of {BACKENDS}")

    return AnalysisInput.model_validate(data)
