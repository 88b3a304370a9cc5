"""
Auth Service Client
Delegates credential verification to the external auth service.
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional

import httpx

from app.core.config import config
from app.core.errors import AuthError
from app.core.logger import logger


class AuthVerifier(ABC):
    """Verifies a caller's credentials and returns their user ID"""

    @abstractmethod
    async def verify(self, authorization: Optional[str], host: Optional[str]) -> str:
        """
        Verify the credentials of an inbound request.

        Args:
            authorization: The request's Authorization header, if any
            host: The request's Host header, if any

        Returns:
            The authenticated user's ID

        Raises:
            AuthError: If the credentials are rejected or cannot be checked
        """


class HttpAuthVerifier(AuthVerifier):
    """
    AuthVerifier calling GET {AUTH_SERVICE_URL}/auth/verify with the caller's
    Authorization and Host headers. There is no retry: any failure rejects
    the request.
    """

    def __init__(
        self,
        verify_url: str = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.verify_url = verify_url or config.auth_verify_url
        self.timeout = timeout
        self.transport = transport

    @staticmethod
    def _forwarded_headers(authorization: Optional[str], host: Optional[str]) -> Dict[str, str]:
        headers = {}
        if authorization is not None:
            headers["Authorization"] = authorization
        if host is not None:
            headers["Host"] = host
        return headers

    async def verify(self, authorization: Optional[str], host: Optional[str]) -> str:
        headers = self._forwarded_headers(authorization, host)

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(self.verify_url, headers=headers)
                response.raise_for_status()
                user_id = response.json()["userId"]
        except httpx.HTTPStatusError as e:
            logger.warning(
                f"Auth service rejected credentials with status {e.response.status_code}",
                metadata={"event": "auth_rejected", "status_code": e.response.status_code}
            )
            raise AuthError() from e
        except httpx.HTTPError as e:
            logger.error(
                "Auth service unreachable",
                error=e,
                metadata={"event": "auth_unreachable", "url": self.verify_url}
            )
            raise AuthError() from e
        except (ValueError, KeyError, TypeError) as e:
            # Body was not JSON, or not an object carrying userId
            logger.warning(
                "Auth service returned a malformed response",
                metadata={"event": "auth_malformed_response", "error": str(e)}
            )
            raise AuthError() from e

        if user_id is None:
            raise AuthError()

        logger.debug(f"Authentication successful for user: {user_id}")
        return str(user_id)
