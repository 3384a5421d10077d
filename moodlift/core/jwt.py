"""Access token verification for sessions issued by the hosted auth service."""
from datetime import datetime, timedelta, timezone
from typing import Dict, Any
import logging
import jwt

from moodlift.config.settings import get_settings

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"


def _secret() -> str | None:
    return get_settings().supabase.jwt_secret


def decode_token(token: str) -> Dict[str, Any] | None:
    """Verify signature, expiry and audience; None when any check fails."""
    secret = _secret()
    if not secret:
        logger.warning("SUPABASE_JWT_SECRET is not set; rejecting bearer token")
        return None
    try:
        return jwt.decode(
            token,
            secret,
            algorithms=[ALGORITHM],
            audience=get_settings().supabase.jwt_audience,
        )
    except jwt.PyJWTError as e:
        logger.info(f"Rejected access token: {e}")
        return None


def create_access_token(subject: str, email: str | None = None, role: str = "authenticated",
                        expires_minutes: int = 60) -> str:
    """Issue a token shaped like the auth service's. Used by tests and local tooling."""
    secret = _secret()
    if not secret:
        raise RuntimeError("SUPABASE_JWT_SECRET must be set to issue tokens")
    now = datetime.now(timezone.utc)
    payload = {
        "sub": subject,
        "email": email,
        "role": role,
        "aud": get_settings().supabase.jwt_audience,
        "iat": now,
        "exp": now + timedelta(minutes=expires_minutes),
    }
    return jwt.encode(payload, secret, algorithm=ALGORITHM)
