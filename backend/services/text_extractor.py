"""Client for the remote text-extraction service.

The service accepts a multipart upload at ``{api_url}/extract-text`` and
answers ``{"text": "..."}``.
"""

import logging

import httpx

from config import settings

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = (".pdf", ".doc", ".docx")

CONTENT_TYPES = {
    ".pdf": "application/pdf",
    ".doc": "application/msword",
    ".docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}


def is_supported(filename: str) -> bool:
    return filename.lower().endswith(ALLOWED_EXTENSIONS)


def _guess_content_type(filename: str) -> str:
    for ext, content_type in CONTENT_TYPES.items():
        if filename.lower().endswith(ext):
            return content_type
    return "application/octet-stream"


async def extract_text(
    content: bytes,
    filename: str,
    content_type: str | None = None,
    client: httpx.AsyncClient | None = None,
) -> str:
    """Upload a resume document and return its plain text.

    Raises ``httpx.HTTPError`` on transport or status failures and
    ``ValueError`` when the response body is not the expected shape.
    """
    url = f"{settings.api_url.rstrip('/')}/extract-text"
    files = {"file": (filename, content, content_type or _guess_content_type(filename))}

    if client is None:
        timeout = httpx.Timeout(settings.request_timeout_seconds, connect=10.0)
        async with httpx.AsyncClient(timeout=timeout) as owned:
            response = await owned.post(url, files=files)
    else:
        response = await client.post(url, files=files)
    response.raise_for_status()

    payload = response.json()
    text = payload.get("text") if isinstance(payload, dict) else None
    if not isinstance(text, str):
        raise ValueError("Extraction service response has no 'text' field")

    logger.debug("Extracted %d characters from %s", len(text), filename)
    return text
