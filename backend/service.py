"""
Backend Service Entrypoint

FastAPI application for the Job Tracker Data Service.
Loads settings, connects to the backing store on startup and mounts the
read-only collections router.
"""

import logging
from contextlib import asynccontextmanager
from typing import List

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from backend.api import collections
from backend.config import BackendSettings
from backend.database import dispose_engine, init_db
from shared.resources import advertised_endpoints

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Refuse to serve unless the storage URL is set and reachable
    settings = BackendSettings.from_env()
    init_db(settings.database_url)
    logger.info("Backend service startup complete")
    yield
    dispose_engine()
    logger.info("Backend service shutdown complete")


app = FastAPI(title="Job Tracker Backend API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(collections.router)


class ServiceInfo(BaseModel):
    message: str
    endpoints: List[str]


@app.get("/", response_model=ServiceInfo)
def root():
    return {
        "message": "Job Tracker Backend API is running!",
        "endpoints": advertised_endpoints(),
    }
