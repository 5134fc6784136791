import logging

from database.store import DocumentStore, DuplicateKey
from models.user import User
from schemas.auth import LoginRequest, SignupRequest
from services.auth_service import hash_password, verify_password

logger = logging.getLogger(__name__)


class UserNotFound(Exception):
    pass


class InvalidCredentials(Exception):
    pass


def register_user(store: DocumentStore, payload: SignupRequest) -> User:
    # Email is stored as submitted; only login normalizes it.
    if store.find_user_by_email(payload.email):
        raise DuplicateKey("email", payload.email)

    user = User(
        name=payload.name,
        email=payload.email,
        age=payload.age,
        phone=payload.phone,
        hashed_password=hash_password(payload.password),
        domain=payload.domain,
        account_type=payload.account_type.value if payload.account_type else None,
    )
    user = store.insert_user(user)
    logger.info("Registered user %s (%s)", user.id, user.email)
    return user


def authenticate(store: DocumentStore, payload: LoginRequest) -> User:
    user = store.find_user_by_email(payload.normalized_email)
    if not user:
        raise UserNotFound(payload.normalized_email)
    if not verify_password(payload.password, user.hashed_password):
        raise InvalidCredentials(payload.normalized_email)
    return user
