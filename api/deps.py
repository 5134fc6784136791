import logging
from collections.abc import Generator
from typing import Annotated

from fastapi import Cookie, Depends, File, HTTPException, Request, UploadFile, status
from fastapi.templating import Jinja2Templates
from sqlalchemy.orm import Session

from core.config import settings
from database.session import SessionLocal
from database.store import DocumentStore
from services.auth_service import read_session_token
from services.session_store import SessionData, SessionStore
from services.upload_service import save_upload

logger = logging.getLogger(__name__)

templates = Jinja2Templates(directory=str(settings.templates_dir))


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


DbDep = Annotated[Session, Depends(get_db)]


def get_store(db: DbDep) -> DocumentStore:
    return DocumentStore(db)


StoreDep = Annotated[DocumentStore, Depends(get_store)]


def get_session_store(request: Request) -> SessionStore:
    return request.app.state.session_store


SessionStoreDep = Annotated[SessionStore, Depends(get_session_store)]


# Request pipeline for protected routes, in order:
#   session check -> (store_image) -> route body
# Each step either passes its result along or raises HTTPException.


def session_required(detail: str):
    """Build a session check that rejects anonymous requests with `detail`."""

    def require_session(
        sessions: SessionStoreDep,
        session_cookie: Annotated[str | None, Cookie(alias=settings.session_cookie_name)] = None,
    ) -> SessionData:
        data = sessions.get(read_session_token(session_cookie))
        if data is None:
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)
        return data

    return require_session


DASHBOARD_LOGIN_REQUIRED = "You must be logged in to view this page"

require_dashboard_session = session_required(DASHBOARD_LOGIN_REQUIRED)
require_doubt_session = session_required("You must be logged in to submit a doubt")
require_booking_session = session_required("You must be logged in to book a session")

DashboardSessionDep = Annotated[SessionData, Depends(require_dashboard_session)]
DoubtSessionDep = Annotated[SessionData, Depends(require_doubt_session)]
BookingSessionDep = Annotated[SessionData, Depends(require_booking_session)]


def store_image(
    session: DoubtSessionDep,
    image: Annotated[UploadFile | None, File()] = None,
) -> str | None:
    # Depends on the session check so nothing touches disk for anonymous requests.
    try:
        return save_upload(image, settings.uploads_dir)
    except OSError:
        logger.exception("Failed to store upload for user %s", session.user_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Error submitting doubt")


ImagePathDep = Annotated[str | None, Depends(store_image)]
