"""Pydantic schemas for views and responses."""
from votebox.schemas.poll import (
    BandOption,
    Option,
    OptionBase,
    OPTION_TYPES,
    PollRead,
    WebsiteOption,
)
from votebox.schemas.results import PollResults
from votebox.schemas.health import DatabaseHealth, HealthResponse

__all__ = [
    "BandOption",
    "Option",
    "OptionBase",
    "OPTION_TYPES",
    "PollRead",
    "WebsiteOption",
    "PollResults",
    "DatabaseHealth",
    "HealthResponse",
]
