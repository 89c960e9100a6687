import logging
import os
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from forum.database import create_tables
from forum.routers import auth, comment, post
from forum.schemas.base import FailureResponse
from forum.utils.errors import ForumError

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle startup and shutdown"""
    logger.info(" Creating database tables...")
    create_tables()
    logger.info(" Forum API ready")

    yield  # App is running

    logger.info("Forum API stopped")


# Simple settings
APP_NAME = "Forum Backend API"
APP_VERSION = "1.0.0"
CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]

# Create FastAPI app instance
app = FastAPI(
    title=APP_NAME,
    version=APP_VERSION,
    description="A moderated forum backend built with FastAPI and SQLAlchemy",
    docs_url="/docs",  # Swagger UI at /docs
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth.router, prefix="/api/v1")
app.include_router(post.router, prefix="/api/v1")
app.include_router(comment.router, prefix="/api/v1")


def _failure(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=FailureResponse(message=message).model_dump())


@app.exception_handler(ForumError)
async def forum_error_handler(request: Request, exc: ForumError):
    return _failure(exc.status_code, exc.message)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors:
        first = errors[0]
        # Drop the "body"/"query" prefix, keep the field name
        field = ".".join(str(part) for part in first.get("loc", ())[1:])
        message = f"{field}: {first.get('msg')}" if field else first.get("msg", "Invalid request")
    else:
        message = "Invalid request"
    logger.info(f"Rejected request to {request.url.path}: {message}")
    return _failure(400, message)


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.url.path}", exc_info=exc)
    return _failure(500, "Internal server error")


@app.get("/")
async def root():
    return {"message": "Welcome to the forum!"}


@app.get("/health")
async def health_check():
    return {"status": "healthy", "service": "forum-backend", "version": APP_VERSION}


# Run the app
if __name__ == "__main__":
    uvicorn.run(
        "forum.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
