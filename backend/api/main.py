"""
FastAPI application entry point.

Run with: uvicorn api.main:app --reload
"""
import logging
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI

# Load environment variables from backend/.env (optional) before settings are read
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(env_path)

from api.routes import commands
from services.places_client import PlacesClient
from settings import get_settings, redact_url

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build settings and the shared places client; bad config aborts startup."""
    settings = get_settings()
    logger.info("Places search routed via proxy %s", redact_url(settings.proxy_url))
    with PlacesClient(settings) as client:
        app.state.places_client = client
        yield


# Create app
app = FastAPI(
    title="Nearby Places Bot API",
    description="Command endpoint answering `nearby <query>` for the chat bot",
    version="0.1.0",
    lifespan=lifespan,
)

# Include routers
app.include_router(commands.router, prefix="/commands", tags=["commands"])


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "Nearby Places Bot API"}
