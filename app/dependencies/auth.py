"""
Authentication dependencies for FastAPI
Verification is delegated to the external auth service.
"""

from typing import Optional

from fastapi import Depends, Header, Request

from app.clients.auth_client import AuthVerifier, HttpAuthVerifier
from app.core.config import config
from app.models.user import User


def get_auth_verifier() -> AuthVerifier:
    """Get the verifier used for mutating endpoints"""
    return HttpAuthVerifier(config.auth_verify_url, timeout=config.auth_service_timeout)


async def get_current_user(
    request: Request,
    authorization: Optional[str] = Header(None),
    host: Optional[str] = Header(None),
    verifier: AuthVerifier = Depends(get_auth_verifier),
) -> User:
    """
    Dependency requiring a caller verified by the auth service.
    Raises AuthError (401) if verification fails; the endpoint body never runs.

    Usage:
        @router.post("")
        async def create_item(user: User = Depends(get_current_user)):
            pass
    """
    user_id = await verifier.verify(authorization, host)
    request.state.user_id = user_id
    return User(id=user_id)
