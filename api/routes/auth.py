import logging
from typing import Annotated

from fastapi import APIRouter, Form, HTTPException, status
from fastapi.responses import PlainTextResponse, RedirectResponse
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from api.deps import SessionStoreDep, StoreDep
from core.config import settings
from database.store import DuplicateKey, RequiredFieldMissing
from schemas.auth import LoginRequest, SignupRequest
from services.account_service import InvalidCredentials, UserNotFound, authenticate, register_user
from services.auth_service import sign_session_token

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/signup", response_class=PlainTextResponse)
def signup(
    store: StoreDep,
    email: Annotated[str, Form()],
    password: Annotated[str, Form()],
    name: Annotated[str | None, Form()] = None,
    age: Annotated[str | None, Form()] = None,
    phone: Annotated[str | None, Form()] = None,
    domain: Annotated[str | None, Form()] = None,
    account_type: Annotated[str | None, Form(alias="accountType")] = None,
):
    try:
        payload = SignupRequest(
            name=name,
            email=email,
            age=age or None,
            phone=phone,
            password=password,
            domain=domain,
            account_type=account_type or None,
        )
    except ValidationError as ve:
        logger.info("Rejected signup for %s: %s", email, ve.errors())
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid signup details")

    try:
        register_user(store, payload)
    except DuplicateKey:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Email already exists. Please use a different one."
        )
    except RequiredFieldMissing as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    except SQLAlchemyError:
        logger.exception("Signup failed for %s", email)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Error signing up")

    return "User registered successfully"


@router.post("/login")
def login(
    store: StoreDep,
    sessions: SessionStoreDep,
    email: Annotated[str, Form()],
    password: Annotated[str, Form()],
):
    payload = LoginRequest(email=email, password=password)
    try:
        user = authenticate(store, payload)
    except UserNotFound:
        logger.warning("Login for unknown email %s", payload.normalized_email)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    except InvalidCredentials:
        logger.warning("Incorrect password for %s", payload.normalized_email)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Incorrect password")
    except SQLAlchemyError:
        logger.exception("Login failed for %s", payload.normalized_email)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Login failed")

    token = sessions.create(user_id=str(user.id), name=user.name)
    response = RedirectResponse(url="/dashboard", status_code=status.HTTP_303_SEE_OTHER)
    response.set_cookie(
        key=settings.session_cookie_name,
        value=sign_session_token(token),
        max_age=settings.session_ttl_seconds,
        httponly=True,
        samesite="lax",
    )
    logger.info("User %s logged in", user.id)
    return response
