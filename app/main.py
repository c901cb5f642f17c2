"""
JobHub API - Main Application

FastAPI backend with:
- MongoDB for users, jobs, applications and contact inquiries
- Uniform {success, message, data, pagination} response envelope
- Identity supplied by an external provider (externalUserId)

Run: uvicorn app.main:app --reload --port 5000
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from pymongo.errors import PyMongoError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app import __version__
from app.api.routes import api_router
from app.core.config import get_settings
from app.core.exceptions import JobHubError
from app.core.logging_config import setup_logging
from app.core.responses import error_response
from app.db.mongodb import close_mongo_client, init_mongo_indexes, test_mongo_connection

settings = get_settings()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging and MongoDB indexes on startup; close the client on shutdown."""
    setup_logging(settings.log_level, settings.json_logs)
    logger.info("Starting JobHub API (%s)", settings.environment)
    try:
        init_mongo_indexes()
    except PyMongoError as e:
        logger.error("MongoDB index initialization failed: %s", e)
    yield
    close_mongo_client()
    logger.info("JobHub API stopped")


# Create FastAPI app
app = FastAPI(
    title="JobHub API",
    description="""
    Job-board backend.

    ## Features
    - **Users**: identity-provider sync, saved jobs
    - **Jobs**: create, search and view postings
    - **Applications**: apply, track status, employer applicant view
    - **Contact**: inquiries, stats and support responses
    """,
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH"],
    allow_headers=["Content-Type", "Authorization"],
)

# Include API routes
app.include_router(api_router, prefix="/api")


# ============================================================
# ERROR HANDLERS
# ============================================================

@app.exception_handler(JobHubError)
async def jobhub_error_handler(request: Request, exc: JobHubError):
    return error_response(exc.status_code, exc.message, errors=getattr(exc, "errors", None))


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = []
    for err in exc.errors():
        field = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        errors.append(f"{field}: {err.get('msg')}" if field else err.get("msg"))
    return error_response(400, "Validation error", errors=errors)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404 and exc.detail == "Not Found":
        return error_response(404, "Route not found", path=request.url.path, method=request.method)
    return error_response(exc.status_code, str(exc.detail))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    detail = None if settings.is_production else str(exc)
    return error_response(500, "Internal server error", error=detail)


# ============================================================
# ROOT & HEALTH
# ============================================================

@app.get("/", tags=["Health"])
def root():
    return {
        "message": "JobHub Backend API is running!",
        "version": __version__,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "endpoints": {
            "users": "/api/users",
            "jobs": "/api/jobs",
            "applications": "/api/applications",
            "contact": "/api/contact",
        },
    }


@app.get("/health", tags=["Health"])
def health_check():
    """Detailed health check."""
    return {
        "status": "OK",
        "database": "Connected" if test_mongo_connection() else "Disconnected",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
