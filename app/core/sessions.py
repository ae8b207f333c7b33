"""
Server-side login sessions.

The browser holds an opaque random token in an HTTP-only cookie; the store
keeps only its sha256 together with the user and an explicit expiry. Every
authenticated request pushes the expiry forward by the TTL (sliding expiry).
"""
from __future__ import annotations

import hashlib
import logging
import secrets
from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone

from sqlalchemy.orm import Session

from app.core.config import settings
from app.models.auth_session import AuthSession
from app.models.user import User

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def hash_token(token: str) -> str:
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


class SessionStore(ABC):
    """Backing store for login sessions. Implementations must honour ttl."""

    def __init__(self, ttl: timedelta):
        self.ttl = ttl

    @abstractmethod
    def create(self, db: Session, user: User) -> str:
        """Start a session for user and return the raw cookie token."""

    @abstractmethod
    def load(self, db: Session, token: str) -> AuthSession | None:
        """Return the live session for token, or None if unknown or expired."""

    @abstractmethod
    def touch(self, db: Session, auth_session: AuthSession) -> None:
        """Extend the session by ttl from now."""

    @abstractmethod
    def destroy(self, db: Session, token: str) -> None:
        ...

    @abstractmethod
    def prune_expired(self, db: Session) -> int:
        """Delete expired sessions and return how many were removed."""


class DatabaseSessionStore(SessionStore):
    def create(self, db: Session, user: User) -> str:
        token = secrets.token_urlsafe(32)
        now = utcnow()
        db.add(
            AuthSession(
                token_hash=hash_token(token),
                user_id=user.id,
                created_at=now,
                last_seen_at=now,
                expires_at=now + self.ttl,
            )
        )
        db.flush()
        return token

    def load(self, db: Session, token: str) -> AuthSession | None:
        if not token:
            return None
        return (
            db.query(AuthSession)
            .filter(AuthSession.token_hash == hash_token(token), AuthSession.expires_at > utcnow())
            .one_or_none()
        )

    def touch(self, db: Session, auth_session: AuthSession) -> None:
        now = utcnow()
        auth_session.last_seen_at = now
        auth_session.expires_at = now + self.ttl
        db.flush()

    def destroy(self, db: Session, token: str) -> None:
        if not token:
            return
        db.query(AuthSession).filter(AuthSession.token_hash == hash_token(token)).delete(synchronize_session=False)

    def prune_expired(self, db: Session) -> int:
        removed = db.query(AuthSession).filter(AuthSession.expires_at <= utcnow()).delete(
            synchronize_session=False
        )
        if removed:
            logger.info("Pruned %d expired sessions", removed)
        return removed


session_store: SessionStore = DatabaseSessionStore(ttl=timedelta(hours=settings.SESSION_TTL_HOURS))


def get_session_store() -> SessionStore:
    return session_store
