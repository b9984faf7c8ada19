"""HTTP layer (aiohttp.web)."""

from roma.web.app import create_app
from roma.web.middleware import error_middleware, logging_middleware
from roma.web.routes import ApiRoutes

__all__ = ["create_app", "ApiRoutes", "error_middleware", "logging_middleware"]
