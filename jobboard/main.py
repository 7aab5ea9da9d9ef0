"""Job board applicant API."""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from jobboard.core.exceptions import FRIENDLY_ERROR
from jobboard.core.storage import Storage
from jobboard.routers import account_router, auth_router, bookmarks_router, jobs_router

log_level = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Initializing application...")
    await Storage.init_models()
    logger.info("Application initialized")

    yield

    logger.info("Shutdown complete")


app = FastAPI(
    title="Job Board Applicant API",
    description="Applicant accounts, job search and bookmarks",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth_router)
app.include_router(account_router)
app.include_router(jobs_router)
app.include_router(bookmarks_router)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Report malformed bodies as 400 without echoing the payload."""
    locations = [".".join(str(part) for part in error["loc"]) for error in exc.errors()]
    logger.info(f"Rejected malformed request to {request.url.path}: {locations}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": FRIENDLY_ERROR},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Log unexpected failures and return a generic message."""
    logger.error(f"Unhandled error on {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": FRIENDLY_ERROR},
    )


@app.get("/api")
async def api_info():
    """API information endpoint."""
    return {
        "message": "Job Board Applicant API",
        "version": "1.0.0",
        "docs": "/docs",
        "status": "active",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "jobboard"}
