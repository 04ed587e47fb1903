"""HTTP routes."""
from fastapi import APIRouter

from votebox.api.routes import health, voting

router = APIRouter()

router.include_router(voting.router, tags=["Voting"])
router.include_router(health.router, tags=["Health"])
