"""API route modules."""

from .days import router as days_router
from .health import router as health_router
from .months import router as months_router
from .submissions import router as submissions_router

__all__ = ["days_router", "health_router", "months_router", "submissions_router"]
