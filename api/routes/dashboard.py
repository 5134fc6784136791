import logging

from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import HTMLResponse
from sqlalchemy.exc import SQLAlchemyError

from api.deps import DASHBOARD_LOGIN_REQUIRED, DashboardSessionDep, StoreDep, templates
from services.dashboard_service import build_dashboard

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/dashboard", response_class=HTMLResponse)
def dashboard(request: Request, store: StoreDep, session: DashboardSessionDep):
    try:
        view = build_dashboard(store, session.user_id)
    except SQLAlchemyError:
        logger.exception("Dashboard query failed for user %s", session.user_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Error fetching dashboard data")

    if view is None:
        # Session outlived its user record.
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=DASHBOARD_LOGIN_REQUIRED)

    return templates.TemplateResponse(
        request,
        "after_login_home.html",
        {"user": view.user, "doubts": view.doubts, "bookasessions": view.bookasessions},
    )
