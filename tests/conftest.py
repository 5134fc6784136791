import os
import tempfile

# Settings are read at import time, so point them at a scratch directory first.
_TMP = tempfile.mkdtemp(prefix="doubtnlearn-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP, 'test.db')}"
os.environ["UPLOADS_DIR"] = os.path.join(_TMP, "uploads")
os.environ["SESSION_SECRET"] = "test-secret"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from core.config import settings  # noqa: E402
from database.session import SessionLocal, engine, init_db  # noqa: E402
from main import app  # noqa: E402
from models.base import Base  # noqa: E402

PASSWORD = "p1"


@pytest.fixture()
def client():
    Base.metadata.drop_all(bind=engine)
    app.state.session_store.clear()
    with TestClient(app) as c:
        yield c
    app.state.session_store.clear()


@pytest.fixture()
def db():
    Base.metadata.drop_all(bind=engine)
    init_db()
    with SessionLocal() as session:
        yield session


@pytest.fixture()
def register(client):
    def _register(email="a@x.com", password=PASSWORD, **fields):
        data = {"name": "Asha", "email": email, "password": password, "age": "19", "accountType": "Student"}
        data.update(fields)
        return client.post("/signup", data=data)

    return _register


@pytest.fixture()
def login(client):
    def _login(email="a@x.com", password=PASSWORD):
        return client.post("/login", data={"email": email, "password": password}, follow_redirects=False)

    return _login


@pytest.fixture()
def uploads_dir():
    return settings.uploads_dir
