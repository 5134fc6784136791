import logging
from typing import Annotated

from fastapi import APIRouter, Form, HTTPException, status
from fastapi.responses import RedirectResponse
from sqlalchemy.exc import SQLAlchemyError

from api.deps import DoubtSessionDep, ImagePathDep, StoreDep
from models.doubt import Doubt

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/submit-doubt")
def submit_doubt(
    store: StoreDep,
    session: DoubtSessionDep,
    image_path: ImagePathDep,
    doubt: Annotated[str | None, Form()] = None,
):
    try:
        record = store.insert_doubt(Doubt(user_id=session.user_id, doubt_text=doubt, image_path=image_path))
    except SQLAlchemyError:
        logger.exception("Failed to save doubt for user %s", session.user_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Error submitting doubt")

    logger.info("User %s submitted doubt %s", session.user_id, record.id)
    return RedirectResponse(url="/dashboard", status_code=status.HTTP_303_SEE_OTHER)
