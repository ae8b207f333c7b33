"""
Delete expired login sessions. Meant for cron; login also prunes opportunistically.

    python -m scripts.prune_sessions
"""
from dotenv import load_dotenv

load_dotenv()

from app.core.logging_config import setup_logging  # noqa: E402
from app.core.sessions import get_session_store  # noqa: E402
from app.db.session import SessionLocal  # noqa: E402


def main():
    setup_logging()
    db = SessionLocal()
    try:
        removed = get_session_store().prune_expired(db)
        db.commit()
        print(f"Removed {removed} expired sessions")
    finally:
        db.close()

if __name__ == "__main__":
    main()
