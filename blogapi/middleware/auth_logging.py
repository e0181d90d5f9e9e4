from fastapi import Request
import logging
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("blogapi")

class AuthLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        path = request.url.path
        has_auth = "Authorization" in request.headers

        response = await call_next(request)

        # Log auth-related status codes
        if response.status_code in [401, 403]:
            logger.warning(
                f"Auth error: {response.status_code} on {request.method} {path} "
                f"({'with' if has_auth else 'without'} auth header)"
            )

        return response
