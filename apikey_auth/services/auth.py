"""API key extraction from request headers.

Expects ``Authorization: ApiKey <key>``. Extraction never raises for bad
input; it returns an APIKeyResult that carries one of the two
AuthHeaderError members on failure.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping

from fastapi import HTTPException, Request
from starlette.datastructures import Headers

from apikey_auth.models.auth_models import APIKeyError, APIKeyResult, AuthHeaderError

logger = logging.getLogger(__name__)

AUTH_HEADER = "Authorization"
AUTH_SCHEME = "ApiKey"

# HTTP optional whitespace (RFC 9110 OWS): space and horizontal tab only
_HTTP_WHITESPACE = " \t"
_FIELD_SEPARATOR = re.compile(r"[ \t]+")


def _authorization_value(headers: Headers | Mapping[str, str]) -> str:
    if isinstance(headers, Headers):
        return headers.get(AUTH_HEADER, "")
    name = AUTH_HEADER.lower()
    return next((v for k, v in headers.items() if k.lower() == name), "")


def get_api_key(headers: Headers | Mapping[str, str]) -> APIKeyResult:
    """Extract the API key from an ``Authorization: ApiKey <key>`` header.

    Header names are matched case-insensitively, both on Starlette Headers
    and on plain mappings. The scheme token is case-sensitive. Fields are
    separated by spaces and tabs; only the first field after the scheme is
    returned, verbatim. ``"ApiKey"`` alone is malformed but ``"ApiKey "``
    yields an empty key.
    """
    value = _authorization_value(headers)
    if not value:
        logger.debug("No %s header in request", AUTH_HEADER)
        return APIKeyResult.failure(AuthHeaderError.NO_AUTH_HEADER)

    fields = [f for f in _FIELD_SEPARATOR.split(value) if f]
    if not fields or fields[0] != AUTH_SCHEME:
        logger.debug("%s header does not use the %s scheme", AUTH_HEADER, AUTH_SCHEME)
        return APIKeyResult.failure(AuthHeaderError.MALFORMED_HEADER)

    if len(fields) >= 2:
        return APIKeyResult.success(fields[1])

    # Scheme only: trailing whitespace means an empty key, a bare token does not
    if value.rstrip(_HTTP_WHITESPACE) != value:
        return APIKeyResult.success("")
    logger.debug("%s header has no key after the scheme", AUTH_HEADER)
    return APIKeyResult.failure(AuthHeaderError.MALFORMED_HEADER)


def extract_api_key(request: Request) -> str | None:
    """Extract API key from Authorization: ApiKey header, or None."""
    result = get_api_key(request.headers)
    return result.key if result.ok else None


def require_api_key(request: Request) -> str:
    """FastAPI dependency: the API key, or 401 if the header is missing or malformed."""
    try:
        return get_api_key(request.headers).unwrap()
    except APIKeyError as e:
        raise HTTPException(
            status_code=401,
            detail=e.error.message,
            headers={"WWW-Authenticate": AUTH_SCHEME},
        ) from e
