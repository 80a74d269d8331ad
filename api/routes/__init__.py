"""
API route handlers.
"""

from api.routes.email import router as email_router
from api.routes.archive import router as archive_router

__all__ = ["email_router", "archive_router"]
