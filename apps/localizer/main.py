from __future__ import annotations

# File: apps/localizer/main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .settings import settings
from .parser import router as localization_router

logger = logging.getLogger(__name__)


app = FastAPI(title="Addon Localizer API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=list({
        str(settings.FRONTEND_BASE_URL or "").rstrip("/"),
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    } - {""}),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
def health():
    return {"status": "ok"}


app.include_router(localization_router)


@app.on_event("startup")
def startup_events():
    logger.info(
        "Localizer API ready excluded_subdirs=%s definition_files=%s",
        settings.excluded_subdirs,
        settings.definition_files,
    )
