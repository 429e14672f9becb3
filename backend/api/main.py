from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.core.config import settings
from backend.api.routers import waste_match_router
from backend.api.routers.waste_match import _init_waste_match

logger = logging.getLogger(__name__)

VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the catalog at startup so the first request doesn't pay for it."""
    if not _init_waste_match():
        logger.warning("Starting without a catalog; endpoints will return 503 until it loads")

    yield  # Application runs here


app = FastAPI(title="Waste Match Inventory API", version=VERSION, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(waste_match_router)


@app.get("/api/health")
def health_check():
    return {"status": "ok", "version": VERSION}
