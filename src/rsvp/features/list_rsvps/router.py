import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from src.rsvp.dependencies import get_rsvp_store
from src.rsvp.dtos import StorageError, StoredRSVP
from src.rsvp.repository.base import RSVPStore
from src.rsvp.urls import RSVP_URL

logger = logging.getLogger(__name__)

router = APIRouter()


class ListRSVPsResponse(BaseModel):
    success: bool
    rsvps: list[StoredRSVP]


@router.get(RSVP_URL, response_model=ListRSVPsResponse, response_model_exclude_none=True)
async def list_rsvps(store: RSVPStore = Depends(get_rsvp_store)):
    """
    Return every stored RSVP in submission order.
    Meant for the organizers; restrict access at the deployment level.
    """
    try:
        rsvps = await store.list_all()
    except StorageError:
        logger.exception("Failed to read RSVPs")
        return JSONResponse(
            status_code=500,
            content={"success": False, "message": "Internal server error"},
        )

    return ListRSVPsResponse(success=True, rsvps=rsvps)
