import hashlib

from fastapi import APIRouter, Depends, Request

from apikey_auth.models.auth_models import InspectResponse, KeyInfoResponse
from apikey_auth.services.auth import get_api_key, require_api_key

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.get("/inspect", response_model=InspectResponse)
async def inspect(request: Request) -> InspectResponse:
    """Report what the Authorization header yields, without rejecting."""
    result = get_api_key(request.headers)
    if result.error is not None:
        return InspectResponse(
            ok=False,
            code=result.error.code,
            message=result.error.message,
        )
    return InspectResponse(ok=True, key_length=len(result.key or ""))


@router.get("/key", response_model=KeyInfoResponse)
async def key_info(api_key: str = Depends(require_api_key)) -> KeyInfoResponse:
    """Describe the caller's key by length and fingerprint. Never echoes it."""
    digest = hashlib.sha256(api_key.encode("utf-8")).hexdigest()
    return KeyInfoResponse(key_length=len(api_key), fingerprint=digest[:12])
