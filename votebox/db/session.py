"""Database engine and session management."""
from contextlib import contextmanager
from typing import Generator, Union

from sqlalchemy import create_engine
from sqlalchemy.engine import URL, Engine, make_url
from sqlalchemy.orm import Session, sessionmaker

from votebox.core.config import Settings


def create_db_engine(url: Union[str, URL], settings: Settings) -> Engine:
    """
    Create the engine with a bounded connection pool.

    SQLite is used for local runs and tests; it gets no pool sizing and is
    allowed to be shared across the request worker threads.
    """
    url = make_url(url)
    if url.get_backend_name() == "sqlite":
        return create_engine(
            url,
            echo=False,
            connect_args={"check_same_thread": False},
        )

    return create_engine(
        url,
        pool_pre_ping=True,
        echo=False,
        pool_size=settings.DB_POOL_SIZE,        # Configurable via DB_POOL_SIZE env var
        max_overflow=settings.DB_MAX_OVERFLOW    # Configurable via DB_MAX_OVERFLOW env var
    )


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@contextmanager
def session_scope(factory: sessionmaker) -> Generator[Session, None, None]:
    """Context manager for getting a database session outside of a request."""
    db = factory()
    try:
        yield db
    finally:
        db.close()
