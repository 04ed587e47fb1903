"""Health check schemas."""
from typing import Dict, Optional

from pydantic import BaseModel


class DatabaseHealth(BaseModel):
    status: str
    polls: Optional[int] = None
    pool: Optional[Dict[str, int]] = None


class HealthResponse(BaseModel):
    status: str
    environment: str
    version: str
    database: DatabaseHealth
