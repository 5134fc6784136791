import logging

from jose import JWTError, jwt  # type: ignore
from passlib.context import CryptContext  # type: ignore

from core.config import settings

logger = logging.getLogger(__name__)

# PBKDF2 avoids the native bcrypt dependency; passlib salts and compares in constant time.
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, hashed: str) -> bool:
    # A corrupt or foreign hash reads as a mismatch to the caller.
    try:
        return pwd_context.verify(password, hashed)
    except (TypeError, ValueError):
        logger.warning("Stored password hash could not be verified", exc_info=True)
        return False


def sign_session_token(token: str) -> str:
    return jwt.encode({"sid": token}, settings.session_secret, algorithm=settings.session_algorithm)


def read_session_token(cookie: str | None) -> str | None:
    if not cookie:
        return None
    try:
        payload = jwt.decode(cookie, settings.session_secret, algorithms=[settings.session_algorithm])
    except JWTError:
        logger.debug("Rejected session cookie with invalid signature")
        return None
    sid = payload.get("sid")
    return sid if isinstance(sid, str) else None
