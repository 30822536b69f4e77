"""
Database session management.
"""
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from meshnode.core.config import settings
from meshnode.db.base import Base


def _engine_options(url: str) -> dict:
    """Connection options for the configured database backend."""
    if url.startswith("sqlite"):
        # Request threads share the same file; let SQLite wait on its write lock
        return {"connect_args": {"check_same_thread": False, "timeout": 30}}
    return {"pool_pre_ping": True, "pool_recycle": 3600}


engine = create_engine(
    settings.DATABASE_URL,
    echo=settings.DB_ECHO,
    **_engine_options(settings.DATABASE_URL)
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Session:
    """Dependency for getting database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None):
    """Initialize database tables."""
    # Models must be imported so their tables are registered on Base.metadata
    import meshnode.models  # noqa: F401
    Base.metadata.create_all(bind=bind or engine)
