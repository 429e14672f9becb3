"""
API Routers package.

Each module contains a FastAPI router for a specific domain.
"""

from .waste_match import router as waste_match_router

__all__ = [
    "waste_match_router",
]
