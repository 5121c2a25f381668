"""
API Package

FastAPI routers and exception handlers.
"""
from hopper.api.singers import router as singers_router
from hopper.api.errors import register_error_handlers

__all__ = [
    "singers_router",
    "register_error_handlers",
]
