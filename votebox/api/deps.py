"""Shared request dependencies."""
import re
from typing import Generator, Optional

from fastapi import Query, Request
from sqlalchemy.orm import Session

from votebox.bootstrap.registry import PollRegistry
from votebox.core.config import Settings
from votebox.core.exceptions import InvalidIdentifierError

ID_PATTERN = re.compile(r"[+-]?\d+")

# Identifiers are stored as signed 64-bit integers
ID_MIN = -(2**63)
ID_MAX = 2**63 - 1


def get_db(request: Request) -> Generator[Session, None, None]:
    """Yield a session bound to the application's connection pool."""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_registry(request: Request) -> PollRegistry:
    return request.app.state.registry


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def parse_id(name: str, value: Optional[str]) -> int:
    """
    Parse a numeric identifier from a query parameter.

    Only an optional sign followed by ASCII digits is accepted, with no
    surrounding whitespace or underscores.

    Raises:
        InvalidIdentifierError: if the value is missing, not an integer or
            outside the signed 64-bit range
    """
    if value is None or not value.isascii() or not ID_PATTERN.fullmatch(value):
        raise InvalidIdentifierError(name, value)

    parsed = int(value)
    if not ID_MIN <= parsed <= ID_MAX:
        raise InvalidIdentifierError(name, value)
    return parsed


def poll_id_param(poll_id: Optional[str] = Query(None, alias="pollID")) -> int:
    return parse_id("Poll ID", poll_id)


def option_id_param(option_id: Optional[str] = Query(None, alias="id")) -> int:
    return parse_id("ID", option_id)
