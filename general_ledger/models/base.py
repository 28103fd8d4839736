"""
Database engine, session management, and base model.

Every ORM model inherits from Base. Every request gets a session
from get_db(). Repositories flush into that session; the API layer
decides when to commit.
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase

from general_ledger.config import get_settings

settings = get_settings()

# --- Engine ---
# pool_pre_ping=True tests connections before handing them out,
# so a restarted database or a stale connection does not fail
# the first ledger write after it.
engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,
)

# --- Session Factory ---
# autocommit=False: a cancellation writes the cancelled original
# and its reversal, and both must land in the same commit.
# autoflush=False: SQL is only sent when a repository flushes.
SessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
)


class Base(DeclarativeBase):
    pass


# --- Dependency for FastAPI ---
def get_db():
    """
    Provide a database session for a single request.

    The try/finally guarantees the session is closed even when the
    endpoint raises, so connections are always returned to the pool.
    Anything not committed by the endpoint is discarded on close.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
