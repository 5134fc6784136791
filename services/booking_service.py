import logging
from datetime import datetime, timezone

from database.store import DocumentStore
from models.booked_session import BookedSession
from schemas.booking import BookSessionRequest

logger = logging.getLogger(__name__)


class InvalidPreferredTime(ValueError):
    pass


def parse_preferred_time(raw: str | None) -> datetime:
    """
    Parse an ISO 8601 date or date-time into a naive UTC datetime.

    "2025-06-01T10:00:00Z", "2025-06-01T12:00:00+02:00" and "2025-06-01T10:00"
    all resolve to 2025-06-01 10:00 UTC. Naive input is taken as UTC.
    """
    value = (raw or "").strip()
    if value[-1:] in ("Z", "z"):
        value = value[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(value)
        if parsed.tzinfo is not None:
            # Offsets at the calendar edges can push the UTC value out of range.
            parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    except (ValueError, OverflowError) as exc:
        raise InvalidPreferredTime(raw) from exc
    return parsed


def book_session(store: DocumentStore, user_id: str, payload: BookSessionRequest) -> BookedSession:
    booking = BookedSession(
        user_id=user_id,
        name=payload.name,
        email=payload.email,
        phone=payload.phone,
        subject=payload.subject,
        preferred_time=payload.preferred_time,
        message=payload.message,
    )
    booking = store.insert_booked_session(booking)
    logger.info("User %s booked session %s for %s", user_id, booking.id, booking.preferred_time.isoformat())
    return booking
