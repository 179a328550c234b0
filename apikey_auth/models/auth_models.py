"""Pydantic models for API key extraction results and auth responses."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class AuthHeaderError(str, Enum):
    """Why an Authorization header could not yield an API key.

    Members are singletons, so callers compare with ``is`` or ``==``
    instead of matching message text.
    """

    NO_AUTH_HEADER = "no_auth_header"
    MALFORMED_HEADER = "malformed_header"

    @property
    def code(self) -> str:
        return self.value

    @property
    def message(self) -> str:
        return _ERROR_MESSAGES[self]

    def __str__(self) -> str:
        return self.message


_ERROR_MESSAGES: dict[AuthHeaderError, str] = {
    AuthHeaderError.NO_AUTH_HEADER: "no authorization header included",
    AuthHeaderError.MALFORMED_HEADER: "malformed authorization header",
}


class APIKeyError(Exception):
    """Raised by APIKeyResult.unwrap() when extraction failed."""

    def __init__(self, error: AuthHeaderError):
        super().__init__(error.message)
        self.error = error


class APIKeyResult(BaseModel):
    """Either a key (success) or an AuthHeaderError (failure), never both."""

    model_config = ConfigDict(frozen=True)

    key: str | None = None
    error: AuthHeaderError | None = None

    @classmethod
    def success(cls, key: str) -> APIKeyResult:
        return cls(key=key)

    @classmethod
    def failure(cls, error: AuthHeaderError) -> APIKeyResult:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> str:
        if self.error is not None:
            raise APIKeyError(self.error)
        # A success always carries a key, possibly ""
        return self.key or ""


class AuthErrorResponse(BaseModel):
    detail: str
    code: str


class InspectResponse(BaseModel):
    ok: bool
    code: str | None = None
    message: str | None = None
    key_length: int | None = None


class KeyInfoResponse(BaseModel):
    key_length: int
    fingerprint: str  # first 12 hex chars of sha256(key)
