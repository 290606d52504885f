from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from storefront.config import settings


def _connect_args(url: str) -> dict:
    # SQLite connections are shared across FastAPI's threadpool workers
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


engine = create_engine(
    settings.DATABASE_URL,
    connect_args=_connect_args(settings.DATABASE_URL),
    pool_pre_ping=True,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """
    FastAPI dependency that provides a database session and makes
    sure it is closed after the request.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
