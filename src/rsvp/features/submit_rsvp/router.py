import asyncio
import logging
from dataclasses import asdict

from fastapi import APIRouter, BackgroundTasks, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from src.notifications.dispatcher import NotificationDispatcher
from src.rsvp.dependencies import get_notification_dispatcher, get_rsvp_store
from src.rsvp.dtos import FieldErrorDTO, InvalidSubmissionError, StorageError
from src.rsvp.repository.base import RSVPStore
from src.rsvp.urls import RSVP_URL
from src.rsvp.validation import validate_submission

logger = logging.getLogger(__name__)

router = APIRouter()


class SubmitRSVPResponse(BaseModel):
    success: bool
    message: str


class FieldErrorResponse(BaseModel):
    field: str
    code: str
    message: str


class InvalidRSVPResponse(SubmitRSVPResponse):
    errors: list[FieldErrorResponse]


def _server_error() -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content=SubmitRSVPResponse(success=False, message="Internal server error").model_dump(),
    )


@router.post(
    RSVP_URL,
    response_model=SubmitRSVPResponse,
    responses={400: {"model": InvalidRSVPResponse}, 500: {"model": SubmitRSVPResponse}},
)
async def submit_rsvp(
    request: Request,
    background_tasks: BackgroundTasks,
    store: RSVPStore = Depends(get_rsvp_store),
    dispatcher: NotificationDispatcher = Depends(get_notification_dispatcher),
):
    """
    Accept an RSVP from the website form.

    The submission is validated, appended to the store and only then handed to
    the notifiers as a background task, so email or webhook failures never
    change the response.
    """
    try:
        try:
            payload = await request.json()
        except ValueError:
            raise InvalidSubmissionError(
                [FieldErrorDTO(field="body", code="json_invalid", message="Body must be valid JSON")]
            ) from None
        submission = validate_submission(payload)
    except InvalidSubmissionError as e:
        logger.info(f"Rejected RSVP, invalid fields: {e.fields}")
        return JSONResponse(
            status_code=400,
            content=InvalidRSVPResponse(
                success=False,
                message="Invalid form data",
                errors=[FieldErrorResponse(**asdict(error)) for error in e.errors],
            ).model_dump(),
        )

    try:
        # Once started the append completes even if the client goes away
        stored = await asyncio.shield(store.append(submission))
    except StorageError:
        logger.exception("Failed to store RSVP")
        return _server_error()
    except Exception:
        logger.exception("Unexpected error while storing RSVP")
        return _server_error()

    logger.info(f"Stored RSVP {stored.id} (attendance={stored.attendance.value})")
    background_tasks.add_task(dispatcher.dispatch, stored)

    return SubmitRSVPResponse(success=True, message="RSVP submitted successfully")
