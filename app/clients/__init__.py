"""
Clients for external services
"""

from .auth_client import AuthVerifier, HttpAuthVerifier

__all__ = [
    "AuthVerifier",
    "HttpAuthVerifier",
]
