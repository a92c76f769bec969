"""socialnet — social-network backend API.

Main FastAPI application with lifespan management, CORS, and global error handling.
"""

import logging
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from socialnet.config import get_settings
from socialnet.api.router import api_router
from socialnet.exceptions import (
    RequestValidationFailed,
    SocialNetError,
    UnregisteredTypeError,
    UnsupportedProviderError,
)
from socialnet.models.responses import ErrorResponse, ResponseStatus
from socialnet.validators import get_validation_facade

# Configure structured logging
structlog.configure(
    processors=[
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.dev.ConsoleRenderer() if get_settings().DEBUG else structlog.processors.JSONRenderer(),
    ],
    wrapper_class=structlog.make_filtering_bound_logger(
        logging.getLevelName(get_settings().LOG_LEVEL.upper())
    ),
)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown lifecycle."""
    settings = get_settings()

    # ── Startup ──
    logger.info("app_starting", debug=settings.DEBUG, strict_validation=settings.VALIDATION_STRICT)

    # Build and freeze the rule table once; a DuplicateRuleError aborts boot
    facade = get_validation_facade()
    logger.info("rules_loaded", rules=facade.registry.rule_count)

    logger.info("app_started")

    yield

    # ── Shutdown ──
    logger.info("app_stopped")


# ── Create Application ──

app = FastAPI(
    title="socialnet",
    description="Social-network backend: posts, users, profiles and OAuth sign-in.",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ── Middleware ──

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Global Exception Handlers ──

def _error_response(status_code: int, status: ResponseStatus, message: str, error=None) -> JSONResponse:
    body = ErrorResponse(status=status, message=message, error=error)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


@app.exception_handler(RequestValidationFailed)
async def request_validation_failed_handler(request: Request, exc: RequestValidationFailed):
    """Business-rule violations → 400 with one entry per violation."""
    logger.info(
        "request_validation_failed",
        path=request.url.path,
        violations=[v.rule for v in exc.result.violations],
    )
    return _error_response(400, ResponseStatus.FAIL, exc.message, exc.result.error_details())


@app.exception_handler(RequestValidationError)
async def schema_validation_error_handler(request: Request, exc: RequestValidationError):
    """Shape errors from pydantic, rendered in the same ``{property, message}`` form."""
    details = [
        {"property": ".".join(str(part) for part in err["loc"][1:]) or "body", "message": err["msg"]}
        for err in exc.errors()
    ]
    return _error_response(422, ResponseStatus.FAIL, "Invalid request body", details)


@app.exception_handler(UnsupportedProviderError)
async def unsupported_provider_handler(request: Request, exc: UnsupportedProviderError):
    return _error_response(404, ResponseStatus.FAIL, exc.message, "Not Found")


@app.exception_handler(UnregisteredTypeError)
async def unregistered_type_handler(request: Request, exc: UnregisteredTypeError):
    """Strict-mode misconfiguration: a server fault, not client input."""
    logger.error("unregistered_validation_type", path=request.url.path, **exc.context)
    return _error_response(500, ResponseStatus.ERROR, "Internal validation configuration error")


@app.exception_handler(SocialNetError)
async def app_error_handler(request: Request, exc: SocialNetError):
    logger.error(
        "application_error",
        path=request.url.path,
        error=exc.message,
        error_type=type(exc).__name__,
        **exc.context,
    )
    return _error_response(500, ResponseStatus.ERROR, exc.message)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Catch-all error handler for unhandled exceptions."""
    logger.error(
        "unhandled_exception",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return _error_response(500, ResponseStatus.ERROR, "An unexpected error occurred. Please try again.")


# ── Routes ──

app.include_router(api_router, prefix="/api/v1")


# ── Root endpoint ──

@app.get("/")
async def root():
    """Root endpoint — API info."""
    return {
        "name": "socialnet",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/api/v1/health",
    }


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "socialnet.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL,
    )
