import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.routers import brands, pronunciation
from config import settings
from services.pronunciation import get_catalog
from services.transcription_proxy import TranscriptionProxyError

logger = logging.getLogger(__name__)

APP_VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    get_catalog()
    if not settings.transcription_service_url:
        logger.info("TRANSCRIPTION_SERVICE_URL not set; audio proxy endpoints will return 503")
    yield

app = FastAPI(
    title=settings.app_name,
    description="Score car brand pronunciation attempts",
    version=APP_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(pronunciation.router, prefix="/api/v1/pronunciation", tags=["pronunciation"])
app.include_router(brands.router, prefix="/api/v1/brands", tags=["brands"])


@app.exception_handler(TranscriptionProxyError)
async def transcription_error_handler(request: Request, exc: TranscriptionProxyError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.error, "details": exc.details},
    )


@app.get("/")
async def root():
    return {
        "name": settings.app_name,
        "version": APP_VERSION,
        "status": "running",
    }


@app.get("/health")
async def health():
    return {"status": "healthy"}
