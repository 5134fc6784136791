from datetime import datetime

import pytest

from database.store import DocumentStore, DuplicateKey, RequiredFieldMissing
from models.booked_session import BookedSession
from models.doubt import Doubt
from models.user import User
from services.auth_service import hash_password


def _user(email="a@x.com", name="Asha"):
    return User(name=name, email=email, hashed_password=hash_password("p1"))


def test_insert_and_find_user(db):
    store = DocumentStore(db)
    user = store.insert_user(_user())

    assert store.find_user_by_email("a@x.com").id == user.id
    assert store.find_user_by_id(user.id).email == "a@x.com"
    assert store.find_user_by_email("b@x.com") is None
    assert store.find_user_by_id("missing") is None


def test_duplicate_email_is_rejected(db):
    store = DocumentStore(db)
    store.insert_user(_user())

    with pytest.raises(DuplicateKey) as exc_info:
        store.insert_user(_user(name="Impostor"))

    assert exc_info.value.field == "email"
    assert db.query(User).count() == 1


def test_email_is_required(db):
    store = DocumentStore(db)

    with pytest.raises(RequiredFieldMissing):
        store.insert_user(_user(email=""))
    with pytest.raises(RequiredFieldMissing):
        store.insert_booked_session(BookedSession(user_id="u", email=None, preferred_time=datetime(2025, 6, 1)))


def test_records_are_scoped_to_their_owner(db):
    store = DocumentStore(db)
    a = store.insert_user(_user("a@x.com"))
    b = store.insert_user(_user("b@x.com"))

    store.insert_doubt(Doubt(user_id=a.id, doubt_text="why?"))
    store.insert_booked_session(
        BookedSession(user_id=a.id, email="a@x.com", subject="Maths", preferred_time=datetime(2025, 6, 1, 10))
    )

    assert [d.doubt_text for d in store.find_doubts_by_user(a.id)] == ["why?"]
    assert len(store.find_booked_sessions_by_user(a.id)) == 1
    assert store.find_doubts_by_user(b.id) == []
    assert store.find_booked_sessions_by_user(b.id) == []


def test_doubt_defaults(db):
    store = DocumentStore(db)
    user = store.insert_user(_user())
    doubt = store.insert_doubt(Doubt(user_id=user.id, doubt_text="how?"))

    assert doubt.image_path is None
    assert isinstance(doubt.created_at, datetime)
