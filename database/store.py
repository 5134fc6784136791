import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from models.booked_session import BookedSession
from models.doubt import Doubt
from models.user import User

logger = logging.getLogger(__name__)


class DuplicateKey(Exception):
    def __init__(self, field: str, value: str):
        super().__init__(f"{field} already exists: {value}")
        self.field = field
        self.value = value


class RequiredFieldMissing(Exception):
    def __init__(self, field: str):
        super().__init__(f"Missing required field: {field}")
        self.field = field


class DocumentStore:
    """
    Find/insert access to the User, Doubt and BookedSession collections.

    Required and unique constraints are enforced here rather than left to the
    caller. Any other database failure propagates as SQLAlchemyError.
    """

    def __init__(self, db: Session):
        self.db = db

    # ---- users ----
    def find_user_by_email(self, email: str) -> User | None:
        return self.db.query(User).filter(User.email == email).first()

    def find_user_by_id(self, user_id: str) -> User | None:
        return self.db.query(User).filter(User.id == user_id).first()

    def insert_user(self, user: User) -> User:
        if not user.email:
            raise RequiredFieldMissing("email")
        if self.find_user_by_email(user.email):
            raise DuplicateKey("email", user.email)
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as exc:
            # Lost a race against a concurrent signup with the same email.
            self.db.rollback()
            raise DuplicateKey("email", user.email) from exc
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(user)
        return user

    # ---- doubts ----
    def insert_doubt(self, doubt: Doubt) -> Doubt:
        return self._insert(doubt)

    def find_doubts_by_user(self, user_id: str) -> list[Doubt]:
        return self.db.query(Doubt).filter(Doubt.user_id == user_id).order_by(Doubt.created_at.asc()).all()

    # ---- booked sessions ----
    def insert_booked_session(self, booking: BookedSession) -> BookedSession:
        if not booking.email:
            raise RequiredFieldMissing("email")
        return self._insert(booking)

    def find_booked_sessions_by_user(self, user_id: str) -> list[BookedSession]:
        return (
            self.db.query(BookedSession)
            .filter(BookedSession.user_id == user_id)
            .order_by(BookedSession.created_at.asc())
            .all()
        )

    def _insert(self, record):
        self.db.add(record)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(record)
        return record
