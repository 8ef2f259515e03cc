"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from datetime import UTC, datetime

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from ideaflow import __version__
from ideaflow.api import auth, ideas
from ideaflow.config import get_settings
from ideaflow.database import check_connection, engine
from ideaflow.errors import IdeaFlowError, InternalError, ValidationError

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Check storage on startup, release the connection pool on shutdown."""
    try:
        check_connection()
    except SQLAlchemyError:
        logger.exception("Database connection failed; refusing to start")
        raise
    logger.info(f"IdeaFlow API started ({settings.environment})")
    yield
    logger.info("IdeaFlow API shutting down")
    engine.dispose()


app = FastAPI(
    title="IdeaFlow API",
    description="Capture ideas anonymously, keep them when you sign up",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_url],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(auth.router)
app.include_router(ideas.router)


def _error_response(exc: IdeaFlowError, detail: str | None = None) -> JSONResponse:
    content = {"detail": exc.message, "error": exc.kind}
    if detail and settings.is_development:
        content["error_detail"] = detail
    return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)


@app.exception_handler(IdeaFlowError)
async def ideaflow_error_handler(request: Request, exc: IdeaFlowError):
    return _error_response(exc)


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    fields = sorted(
        {".".join(str(p) for p in err["loc"][1:]) or err["loc"][0] for err in exc.errors()}
    )
    return _error_response(ValidationError(f"Invalid or missing fields: {', '.join(fields)}"))


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return JSONResponse(status_code=404, content={"detail": "Endpoint not found"})
    return JSONResponse(
        status_code=exc.status_code, content={"detail": exc.detail}, headers=exc.headers
    )


@app.exception_handler(SQLAlchemyError)
async def storage_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception(f"Storage error on {request.method} {request.url.path}")
    return _error_response(InternalError(), detail=str(exc))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return _error_response(InternalError(), detail=str(exc))


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": "IdeaFlow API",
        "environment": settings.environment,
        "timestamp": datetime.now(UTC).isoformat(),
    }
