"""FastAPI application entry point."""

import logging
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from kenya_auth.api import auth, diagnostics
from kenya_auth.config import get_settings
from kenya_auth.database import init_db
from kenya_auth.services.errors import CredentialError

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)-8s %(name)s - %(message)s",
    stream=sys.stdout,
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    # A missing database must not stop the API from serving; requests fail
    # with a store error until it is reachable.
    try:
        init_db()
        logger.info("Database tables ready")
    except SQLAlchemyError as e:
        logger.error(f"Table creation failed: {e}")
    yield


app = FastAPI(
    title="Kenya Auth API",
    description="User registration, login and bearer-token profile lookup",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(CredentialError)
async def credential_error_handler(request: Request, exc: CredentialError) -> JSONResponse:
    """Render credential failures as ``{"error": message}``."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message},
        headers=exc.headers,
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request bodies as client errors."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Invalid request body"},
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render anything unexpected as a generic server error."""
    logger.error(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Server error"},
    )


# Register routers
app.include_router(auth.router)
app.include_router(diagnostics.router)


@app.get("/")
async def root():
    """Service banner."""
    return {
        "message": "Kenya Auth API Running",
        "status": "OK",
        "database": "PostgreSQL",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}


if __name__ == "__main__":
    uvicorn.run(
        "kenya_auth.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
