"""
aiohttp middlewares.

logging_middleware: logs every request with its status and processing time.
error_middleware: converts exceptions into JSON error responses.

Exception handling priority:
1. HTTPException → passed through (aiohttp's own 404/405 etc.)
2. InvalidActionError → 400 {"error": "Invalid action"}
3. RomaError → 500 {"error": <user-facing message>}
4. Unknown errors → 500 {"error": "Internal server error"}, full traceback logged
"""

import logging
import time
from collections.abc import Awaitable, Callable

from aiohttp import web

from roma.core.exceptions import InvalidActionError, RomaError
from roma.templates.messages import ERROR_GENERIC

logger = logging.getLogger(__name__)

Handler = Callable[[web.Request], Awaitable[web.StreamResponse]]


@web.middleware
async def logging_middleware(request: web.Request, handler: Handler) -> web.StreamResponse:
    """Log method, path, status and elapsed time of every request."""
    start_time = time.monotonic()

    try:
        response = await handler(request)
    except Exception as e:
        elapsed = (time.monotonic() - start_time) * 1000
        logger.error(
            f"{request.method} {request.path} failed after {elapsed:.2f}ms: "
            f"{type(e).__name__}: {e}"
        )
        raise

    elapsed = (time.monotonic() - start_time) * 1000  # ms
    logger.info(f"{request.method} {request.path} -> {response.status} in {elapsed:.2f}ms")
    return response


@web.middleware
async def error_middleware(request: web.Request, handler: Handler) -> web.StreamResponse:
    """
    Global error handling middleware.

    Logs technical details and returns only the user-facing message.
    """
    try:
        return await handler(request)

    except web.HTTPException:
        raise

    except InvalidActionError as e:
        logger.warning(f"{type(e).__name__}: {e.technical_message}")
        return web.json_response({"error": e.message}, status=400)

    except RomaError as e:
        logger.error(f"{type(e).__name__}: {e.technical_message}")
        return web.json_response({"error": e.message}, status=500)

    except Exception as e:
        # Only RomaError messages are user-facing; str(e) stays in the log
        logger.exception(f"Unexpected error: {type(e).__name__}: {e}")
        return web.json_response({"error": ERROR_GENERIC}, status=500)
