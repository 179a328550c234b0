"""API key middleware.

Checks the Authorization header on all /api/* paths except public ones.
Only the header format is enforced; the key itself is not verified.
"""

from __future__ import annotations

import logging

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

from apikey_auth.models.auth_models import AuthErrorResponse
from apikey_auth.services.auth import AUTH_SCHEME, get_api_key
from apikey_auth.services.auth_settings import get_public_paths, is_auth_enabled

logger = logging.getLogger(__name__)


class APIKeyAuthMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        path = request.url.path

        # Only protect /api/* paths
        if not path.startswith("/api/"):
            return await call_next(request)

        if path in get_public_paths():
            return await call_next(request)

        if not is_auth_enabled():
            return await call_next(request)

        result = get_api_key(request.headers)
        if result.error is not None:
            logger.info(
                "Rejected %s %s: %s", request.method, path, result.error.code
            )
            return JSONResponse(
                status_code=401,
                content=AuthErrorResponse(
                    detail=result.error.message, code=result.error.code
                ).model_dump(),
                headers={"WWW-Authenticate": AUTH_SCHEME},
            )

        request.state.api_key = result.key
        return await call_next(request)
