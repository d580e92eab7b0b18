"""FastAPI routes for the order tracking backend."""

from pharmatrack.api.auth import router as auth_router
from pharmatrack.api.distribution import router as distribution_router
from pharmatrack.api.imports import router as imports_router
from pharmatrack.api.uploads import router as uploads_router

__all__ = ["auth_router", "distribution_router", "imports_router", "uploads_router"]
