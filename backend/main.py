import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from api.router import limiter, router
from config import settings
from services.errors import ScanError, ScanErrorKind

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Resume Scanner API",
    description="ATS compatibility scoring and suggestions for resumes",
    version="1.0.0",
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ScanError)
async def scan_error_handler(request: Request, exc: ScanError) -> JSONResponse:
    status_code = 502 if exc.kind is ScanErrorKind.SCAN_FAILED else 400
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message, "kind": exc.kind.value},
    )


app.include_router(router)
