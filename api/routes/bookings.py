import logging
from typing import Annotated

from fastapi import APIRouter, Form, HTTPException, status
from fastapi.responses import RedirectResponse
from sqlalchemy.exc import SQLAlchemyError

from api.deps import BookingSessionDep, StoreDep
from database.store import RequiredFieldMissing
from schemas.booking import BookSessionRequest
from services.booking_service import InvalidPreferredTime, book_session, parse_preferred_time

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/submit-bookasession")
def submit_bookasession(
    store: StoreDep,
    session: BookingSessionDep,
    preferred_time: Annotated[str | None, Form()] = None,
    name: Annotated[str | None, Form()] = None,
    email: Annotated[str | None, Form()] = None,
    phone: Annotated[str | None, Form()] = None,
    subject: Annotated[str | None, Form()] = None,
    message: Annotated[str | None, Form()] = None,
):
    try:
        when = parse_preferred_time(preferred_time)
    except InvalidPreferredTime:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid date format for preferred time")

    payload = BookSessionRequest(
        name=name, email=email, phone=phone, subject=subject, preferred_time=when, message=message
    )
    try:
        book_session(store, session.user_id, payload)
    except RequiredFieldMissing as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    except SQLAlchemyError:
        logger.exception("Failed to book session for user %s", session.user_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error booking your session. Sorry for the inconvenience.",
        )

    return RedirectResponse(url="/dashboard", status_code=status.HTTP_303_SEE_OTHER)
