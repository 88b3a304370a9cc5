"""
Identity of an authenticated caller
"""

from pydantic import BaseModel


class User(BaseModel):
    """User as reported by the external auth service"""

    id: str
