"""Environment-driven switches for the API key middleware.

Auth is on by default. Set APIKEY_AUTH_DISABLED=true to turn it off (local
development). APIKEY_AUTH_PUBLIC_PATHS adds comma-separated paths that skip
the header check, on top of the built-in public paths.

Values are read on every call so tests can patch the environment.
"""

from __future__ import annotations

import os

DEFAULT_PUBLIC_PATHS = frozenset({"/api/health", "/api/auth/inspect"})


def is_auth_enabled() -> bool:
    return os.environ.get("APIKEY_AUTH_DISABLED", "").lower() != "true"


def get_public_paths() -> frozenset[str]:
    """Return the built-in public paths plus any configured extras."""
    extra = os.environ.get("APIKEY_AUTH_PUBLIC_PATHS", "")
    return DEFAULT_PUBLIC_PATHS | {p.strip() for p in extra.split(",") if p.strip()}
