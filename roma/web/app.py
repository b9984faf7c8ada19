"""aiohttp application assembly."""

from aiohttp import web

from roma.services.factory import ServiceFactory
from roma.web.middleware import error_middleware, logging_middleware
from roma.web.routes import ApiRoutes


def create_app(factory: ServiceFactory) -> web.Application:
    """
    Build the web application with all services wired in.

    Args:
        factory: Service factory configured from Settings

    Returns:
        aiohttp Application ready for AppRunner or TestServer
    """
    app = web.Application(middlewares=[logging_middleware, error_middleware])

    routes = ApiRoutes(
        crypto=factory.create_crypto_service(),
        narrator=factory.create_narrator(),
        analytics=factory.create_social_analytics(),
        orchestrator=factory.create_orchestrator(),
    )
    routes.setup_routes(app)

    return app
