from datetime import timedelta

from app.core.sessions import DatabaseSessionStore, hash_token, utcnow
from app.models.auth_session import AuthSession
from tests.helpers import create_user, login


def _expire_all_sessions(db):
    db.query(AuthSession).update(
        {AuthSession.expires_at: utcnow() - timedelta(minutes=1)}, synchronize_session=False
    )
    db.commit()


def test_store_keeps_only_token_hash(db_session):
    store = DatabaseSessionStore(ttl=timedelta(hours=24))
    user = create_user(db_session)

    token = store.create(db_session, user)
    db_session.commit()

    row = db_session.query(AuthSession).one()
    assert row.token_hash == hash_token(token)
    assert row.token_hash != token
    assert store.load(db_session, token).user_id == user.id


def test_store_load_unknown_or_empty_token(db_session):
    store = DatabaseSessionStore(ttl=timedelta(hours=24))
    assert store.load(db_session, "") is None
    assert store.load(db_session, "nope") is None


def test_store_ignores_expired_sessions(db_session):
    store = DatabaseSessionStore(ttl=timedelta(hours=24))
    token = store.create(db_session, create_user(db_session))
    db_session.commit()

    _expire_all_sessions(db_session)
    assert store.load(db_session, token) is None


def test_store_touch_extends_expiry(db_session):
    store = DatabaseSessionStore(ttl=timedelta(hours=1))
    token = store.create(db_session, create_user(db_session))
    db_session.commit()

    row = store.load(db_session, token)
    store.touch(db_session, row)
    db_session.commit()

    soon = utcnow() + timedelta(minutes=50)
    assert db_session.query(AuthSession).filter(AuthSession.expires_at > soon).count() == 1


def test_prune_removes_only_expired(db_session):
    store = DatabaseSessionStore(ttl=timedelta(hours=24))
    user = create_user(db_session)
    store.create(db_session, user)
    store.create(db_session, user)
    db_session.commit()
    _expire_all_sessions(db_session)
    live = store.create(db_session, user)
    db_session.commit()

    assert store.prune_expired(db_session) == 2
    db_session.commit()
    assert db_session.query(AuthSession).count() == 1
    assert store.load(db_session, live) is not None


def test_destroy(db_session):
    store = DatabaseSessionStore(ttl=timedelta(hours=24))
    token = store.create(db_session, create_user(db_session))
    db_session.commit()

    store.destroy(db_session, token)
    db_session.commit()
    assert store.load(db_session, token) is None


def test_expired_session_cookie_gets_401(client, db_session):
    login(client)
    assert client.get("/api/auth/me").status_code == 200

    _expire_all_sessions(db_session)
    assert client.get("/api/auth/me").status_code == 401


def test_authenticated_request_slides_expiry(client, db_session):
    login(client)
    db_session.query(AuthSession).update(
        {AuthSession.expires_at: utcnow() + timedelta(minutes=5)}, synchronize_session=False
    )
    db_session.commit()

    r = client.get("/api/funcionarios")
    assert r.status_code == 200
    assert "funcionarios_sid=" in r.headers["set-cookie"]

    later = utcnow() + timedelta(hours=23)
    assert db_session.query(AuthSession).filter(AuthSession.expires_at > later).count() == 1


def test_login_prunes_expired_sessions(client, db_session):
    login(client, user_id="u-1")
    login(client, user_id="u-2")
    _expire_all_sessions(db_session)

    login(client, user_id="u-3")
    assert db_session.query(AuthSession).count() == 1
