"""Integration tests for application startup failures."""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from votebox.core.config import Settings
from votebox.core.exceptions import ConfigurationError, DefinitionError
from votebox.main import create_app


def start(settings):
    with TestClient(create_app(settings)):
        pass


@pytest.mark.integration
class TestStartupFailures:
    """Startup must abort when the data or the database is unusable."""

    def test_missing_polls_file(self, data_dir, database_url):
        (data_dir / "polls.txt").unlink()
        settings = Settings(DATA_DIR=data_dir, DATABASE_URL=database_url, _env_file=None)

        with pytest.raises(DefinitionError, match="polls.txt"):
            start(settings)

    def test_missing_database_property(self, data_dir):
        (data_dir / "dbsettings.properties").write_text(
            "host=localhost\nport=5432\nname=votebox\nuser=votebox\n",
            encoding="utf-8",
        )
        settings = Settings(DATA_DIR=data_dir, DATABASE_URL=None, _env_file=None)

        with pytest.raises(ConfigurationError, match="Missing property: password"):
            start(settings)

    def test_missing_database_properties_file(self, data_dir):
        settings = Settings(DATA_DIR=data_dir, DATABASE_URL=None, _env_file=None)

        with pytest.raises(ConfigurationError, match="does not exist"):
            start(settings)

    def test_unreachable_database(self, data_dir, tmp_path):
        url = f"sqlite:///{tmp_path / 'no-such-dir' / 'votebox.db'}"
        settings = Settings(DATA_DIR=data_dir, DATABASE_URL=url, _env_file=None)

        with pytest.raises(OperationalError):
            start(settings)

    def test_valid_configuration_starts(self, settings):
        app = create_app(settings)

        with TestClient(app) as client:
            assert client.get("/health").status_code == 200
            assert len(app.state.registry) == 2
