"""HTTP middleware."""
from votebox.middleware.logging import LoggingMiddleware

__all__ = ["LoggingMiddleware"]
