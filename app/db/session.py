import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.core.config import settings

logger = logging.getLogger(__name__)

_connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(settings.DATABASE_URL, pool_pre_ping=True, connect_args=_connect_args)

SessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
    expire_on_commit=False,
)

def get_db():
    """Request-scoped session: commit when the handler returns, roll back if it raises."""
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        logger.debug("Rolling back request transaction", exc_info=True)
        db.rollback()
        raise
    finally:
        db.close()
