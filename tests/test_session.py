import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from mailconsole.core.session import TOKEN_KEY, PersistentStore, SessionContext, SessionState


@pytest.fixture()
def state_path(tmp_path):
    return tmp_path / "console_state.json"


def test_store_survives_restart(state_path):
    store = PersistentStore(state_path)
    store.set("token", "abc")
    store.set("locale", "en")

    reopened = PersistentStore(state_path)
    assert reopened.get("token") == "abc"
    assert reopened.get("locale") == "en"

    reopened.remove("token")
    assert PersistentStore(state_path).get("token") is None
    assert PersistentStore(state_path).get("locale") == "en"


def test_store_ignores_corrupt_file(state_path):
    state_path.write_text("{not json", encoding="utf-8")
    store = PersistentStore(state_path)
    assert store.get("token") is None
    store.set("token", "fresh")
    assert PersistentStore(state_path).get("token") == "fresh"


def test_session_transitions(state_path):
    session = SessionContext(PersistentStore(state_path))
    assert session.state is SessionState.UNAUTHENTICATED
    assert session.token is None

    session.sign_in("tok-1")
    assert session.state is SessionState.AUTHENTICATED
    assert session.token == "tok-1"
    assert PersistentStore(state_path).get(TOKEN_KEY) == "tok-1"

    session.expire()
    assert session.state is SessionState.UNAUTHENTICATED
    assert PersistentStore(state_path).get(TOKEN_KEY) is None

    # Expiring an already cleared session is harmless
    session.expire()
    assert session.token is None

    session.sign_in("tok-2")
    session.sign_out()
    assert not session.is_authenticated


def test_sign_in_rejects_blank_token(state_path):
    session = SessionContext(PersistentStore(state_path))
    with pytest.raises(ValueError):
        session.sign_in("   ")
    assert session.token is None
