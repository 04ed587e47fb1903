"""Shared test fixtures and configuration."""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from votebox.bootstrap import initialize_schema, load_definitions
from votebox.core.config import Settings
from votebox.core.rate_limit import limiter
from votebox.main import create_app
from tests.utils import BANDS, POLLS, WEBSITES, write_rows


@pytest.fixture(autouse=True)
def disable_rate_limiting_for_tests(request):
    """Disable rate limiting for all tests except rate limiting tests."""
    if "rate_limit" in request.keywords:
        limiter.reset()
        yield
        limiter.reset()
    else:
        limiter.enabled = False
        yield
        limiter.enabled = True


@pytest.fixture
def data_dir(tmp_path):
    """A data directory holding both polls and their option definitions."""
    directory = tmp_path / "data"
    directory.mkdir()
    write_rows(directory / "polls.txt", POLLS)
    write_rows(directory / "bands-definition.txt", BANDS)
    write_rows(directory / "websites-definition.txt", WEBSITES)
    return directory


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite:///{tmp_path / 'votebox.db'}"


@pytest.fixture
def settings(data_dir, database_url):
    return Settings(DATA_DIR=data_dir, DATABASE_URL=database_url, _env_file=None)


@pytest.fixture
def db_engine(database_url):
    """Engine on a fresh SQLite file; tables are created by the initializer."""
    engine = create_engine(database_url, connect_args={"check_same_thread": False})
    yield engine
    engine.dispose()


@pytest.fixture
def registry(db_engine, data_dir):
    """Seed the database and return the resulting poll registry."""
    return initialize_schema(db_engine, load_definitions(data_dir))


@pytest.fixture
def db_session(db_engine, registry):
    """Create a new database session on the seeded database."""
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    """Test client; entering it runs startup seeding against the test database."""
    with TestClient(app) as test_client:
        yield test_client
