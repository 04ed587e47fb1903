"""Exception handlers rendering the error page."""
from fastapi import FastAPI, Request
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from votebox.api.templating import templates
from votebox.core.exceptions import DAOError, InvalidIdentifierError
from votebox.core.logging_config import get_logger

logger = get_logger(__name__)


async def invalid_identifier_handler(request: Request, exc: InvalidIdentifierError):
    """Malformed ids are a user error: show the error page with a 200."""
    logger.info("invalid_identifier", parameter=exc.parameter, value=exc.value)
    return templates.TemplateResponse(
        request,
        "error.html",
        {"error": str(exc)},
        status_code=200,
    )


async def dao_error_handler(request: Request, exc: DAOError):
    logger.error(
        "data_access_failed",
        error=str(exc),
        cause=repr(exc.__cause__) if exc.__cause__ else None,
    )
    return templates.TemplateResponse(
        request,
        "error.html",
        {"error": "The poll could not be loaded or the vote could not be recorded."},
        status_code=500,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(InvalidIdentifierError, invalid_identifier_handler)
    app.add_exception_handler(DAOError, dao_error_handler)
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
