import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Body, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from app.core.identity import Identity, IdentityRejected, IdentityVerifier, get_identity_verifier
from app.core.security import clear_session_cookie, get_current_user, get_session_token, set_session_cookie
from app.core.sessions import SessionStore, get_session_store
from app.db.session import get_db
from app.models.user import User

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


def user_to_out(u: User) -> dict:
    return {"id": u.external_id, "name": u.full_name, "email": u.email}


def upsert_user(db: Session, identity: Identity) -> User:
    user = db.query(User).filter(User.external_id == identity.id).one_or_none()
    if user is None:
        user = User(external_id=identity.id, email=identity.email, full_name=identity.name)
        db.add(user)
    else:
        user.email = identity.email
        user.full_name = identity.name
    user.last_login_at = datetime.now(timezone.utc)
    db.flush()
    return user


@router.post("/login")
def login(
    response: Response,
    payload: dict | None = Body(default=None),
    db: Session = Depends(get_db),
    store: SessionStore = Depends(get_session_store),
    verifier: IdentityVerifier = Depends(get_identity_verifier),
):
    """
    Start a session from an identity assertion: {"token": "...", "user": {"id", "name", "email"}}.
    """
    payload = payload or {}
    token = payload.get("token")
    claimed = payload.get("user")
    if not token or not isinstance(claimed, dict):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Dados de autenticação inválidos")

    try:
        identity = verifier.verify(str(token), claimed)
    except IdentityRejected as e:
        logger.warning("Login rejected: %s", e)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Falha na autenticação")

    user = upsert_user(db, identity)
    if not user.is_active:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Usuário inativo")

    store.prune_expired(db)
    session_token = store.create(db, user)
    set_session_cookie(response, session_token)

    logger.info("User %s logged in", user.external_id)
    return {"user": user_to_out(user)}


@router.post("/logout")
def logout(
    response: Response,
    token: str | None = Depends(get_session_token),
    db: Session = Depends(get_db),
    store: SessionStore = Depends(get_session_store),
):
    if token:
        store.destroy(db, token)
    clear_session_cookie(response)
    return {"message": "Logout realizado com sucesso"}


@router.get("/me")
def me(current_user: User = Depends(get_current_user)):
    """Get the identity bound to the current session"""
    return {"user": user_to_out(current_user)}
