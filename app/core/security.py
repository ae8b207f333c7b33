from fastapi import Cookie, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.sessions import SessionStore, get_session_store
from app.db.session import get_db
from app.models.user import User

AUTH_REQUIRED_MESSAGE = "Autenticação necessária"


def set_session_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite="lax",
        max_age=settings.session_ttl_seconds,
        path="/",
    )


def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(settings.SESSION_COOKIE_NAME, path="/")


def get_session_token(
    token: str | None = Cookie(default=None, alias=settings.SESSION_COOKIE_NAME),
) -> str | None:
    return token


def get_current_user(
    response: Response,
    token: str | None = Depends(get_session_token),
    db: Session = Depends(get_db),
    store: SessionStore = Depends(get_session_store),
) -> User:
    """
    Resolve the session cookie to its user and slide the session expiry.
    """
    auth_session = store.load(db, token) if token else None
    if not auth_session:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=AUTH_REQUIRED_MESSAGE)

    user = auth_session.user
    if not user or not user.is_active:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=AUTH_REQUIRED_MESSAGE)

    store.touch(db, auth_session)
    set_session_cookie(response, token)
    return user
