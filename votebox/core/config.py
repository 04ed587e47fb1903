"""Application configuration."""
from pathlib import Path
from typing import Optional

from dotenv import dotenv_values
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL, make_url

from votebox.core.constants import DB_PROPERTIES, DB_SETTINGS_FILE
from votebox.core.exceptions import ConfigurationError


class DatabaseSettings(BaseModel):
    """Connection properties read from the database properties file."""

    host: str = Field(..., min_length=1)
    port: int
    name: str = Field(..., min_length=1)
    user: str = Field(..., min_length=1)
    password: str


def load_database_settings(path: Path) -> DatabaseSettings:
    """
    Read and validate a ``key=value`` database properties file.

    All of host, port, name, user and password must be present.

    Raises:
        ConfigurationError: if the file is missing or a key is absent or invalid
    """
    if not path.is_file():
        raise ConfigurationError(f"File {path} does not exist.")

    values = dotenv_values(path)
    missing = [key for key in DB_PROPERTIES if values.get(key) is None]
    if missing:
        raise ConfigurationError(f"Missing property: {', '.join(missing)}")

    try:
        return DatabaseSettings.model_validate(values)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid database properties in {path}: {e}") from e


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )

    # Definition files and the database properties file live here
    DATA_DIR: Path = Path("./data")
    DB_SETTINGS_FILE: str = DB_SETTINGS_FILE

    # Database - a full URL wins over the properties file
    DATABASE_URL: Optional[str] = None
    DB_DRIVER: str = "postgresql"

    # Database Connection Pool Configuration
    DB_POOL_SIZE: int = 5  # Connections kept open
    DB_MAX_OVERFLOW: int = 15  # Extra connections under load (total max: 20)

    # Application
    APP_TITLE: str = "Votebox"
    APP_DESCRIPTION: str = "Vote for your favourite band or website"
    APP_VERSION: str = "1.0.0"

    # Environment
    ENVIRONMENT: str = "development"  # development, staging, production

    # Logging
    LOG_LEVEL: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL

    # Voting
    VOTE_RATE_LIMIT: str = "60/minute"

    # Pie chart size in pixels
    CHART_WIDTH: int = 400
    CHART_HEIGHT: int = 300

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @property
    def db_settings_path(self) -> Path:
        return self.DATA_DIR / self.DB_SETTINGS_FILE

    def get_database_url(self) -> URL:
        """
        Get the database URL from DATABASE_URL or the properties file.

        Priority: DATABASE_URL > DATA_DIR/DB_SETTINGS_FILE
        """
        if self.DATABASE_URL:
            return make_url(self.DATABASE_URL)

        db = load_database_settings(self.db_settings_path)
        return URL.create(
            drivername=self.DB_DRIVER,
            username=db.user,
            password=db.password,
            host=db.host,
            port=db.port,
            database=db.name,
        )


settings = Settings()
