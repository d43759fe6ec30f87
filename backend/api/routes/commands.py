"""
Bot command routes.

The chat dispatcher parses `nearby <query>` and posts the query here; the
returned string is forwarded to the chat channel as-is.
"""
import logging

from fastapi import APIRouter, Request
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel, Field

from services.nearby import NEARBY_COMMAND_HELP, answer_nearby_query

router = APIRouter()
logger = logging.getLogger(__name__)


class NearbyCommandRequest(BaseModel):
    query: str = Field(..., min_length=1, description="Free-text place query, e.g. 'coffee shop'")


class CommandResponse(BaseModel):
    command: str
    response: str


class CommandHelpResponse(BaseModel):
    command: str
    usage: str


@router.get("/nearby", response_model=CommandHelpResponse)
async def nearby_help():
    """Usage text for the nearby command."""
    return CommandHelpResponse(command="nearby", usage=NEARBY_COMMAND_HELP)


@router.post("/nearby", response_model=CommandResponse)
async def nearby(body: NearbyCommandRequest, request: Request):
    """
    Answer a nearby query with an HTML list of the 4 nearest places and a map.

    Upstream failures come back as the "error" response, not an HTTP error.
    """
    client = request.app.state.places_client
    # requests is blocking; keep it off the event loop
    html = await run_in_threadpool(answer_nearby_query, body.query, client)
    logger.info("nearby %r answered (%d chars)", body.query, len(html))
    return CommandResponse(command="nearby", response=html)
