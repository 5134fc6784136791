from services.session_store import SessionStore


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


def test_create_then_get_returns_identity():
    store = SessionStore(ttl_seconds=3600)
    token = store.create("user-1", "Asha")

    data = store.get(token)
    assert data is not None
    assert data.user_id == "user-1"
    assert data.name == "Asha"


def test_tokens_are_unique_and_opaque():
    store = SessionStore(ttl_seconds=3600)
    a = store.create("user-1", "Asha")
    b = store.create("user-1", "Asha")

    assert a != b
    assert "user-1" not in a


def test_unknown_or_empty_token_is_absent():
    store = SessionStore(ttl_seconds=3600)

    assert store.get("nope") is None
    assert store.get("") is None
    assert store.get(None) is None


def test_session_expires_after_ttl_regardless_of_use():
    clock = FakeClock()
    store = SessionStore(ttl_seconds=3600, clock=clock)
    token = store.create("user-1", "Asha")

    clock.now += 1800
    assert store.get(token) is not None
    clock.now += 1799
    assert store.get(token) is not None
    clock.now += 1
    assert store.get(token) is None
    assert len(store) == 0


def test_create_sweeps_expired_sessions():
    clock = FakeClock()
    store = SessionStore(ttl_seconds=60, clock=clock)
    store.create("user-1", "Asha")
    store.create("user-2", "Ravi")

    clock.now += 61
    fresh = store.create("user-3", "Meera")

    assert len(store) == 1
    assert store.get(fresh).user_id == "user-3"


def test_clear_drops_everything():
    store = SessionStore(ttl_seconds=60)
    token = store.create("user-1", None)
    store.clear()

    assert store.get(token) is None
