from pydantic import BaseModel
from typing import Optional


class UserSession(BaseModel):
    """Caller identity read from a verified access token."""
    user_id: str
    email: Optional[str] = None
    role: str = "authenticated"


class AdminCheckRequest(BaseModel):
    email: Optional[str] = None


class AdminCheckResponse(BaseModel):
    isAdmin: bool
    error: Optional[str] = None
