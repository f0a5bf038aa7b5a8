"""
Authentication utilities - verifying identity-provider JWTs
"""
from datetime import datetime, timedelta, timezone
from typing import Optional, Dict
import logging
from jose import JWTError, jwt
from fastapi import HTTPException, status, Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from app.config.settings import settings

logger = logging.getLogger(__name__)

# JWT Bearer token
security = HTTPBearer(auto_error=False)

def _unauthorized() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

def create_access_token(data: Dict, expires_delta: Optional[timedelta] = None) -> str:
    """Create a JWT the way the identity provider signs them"""
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(hours=24))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)

def decode_access_token(token: str) -> Dict:
    """Decode and verify a JWT token"""
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError as e:
        logger.warning("JWT verification failed: %s", e)
        raise _unauthorized()

async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Dict:
    """Token payload of the signed-in user; the session must carry an email"""
    if credentials is None:
        raise _unauthorized()
    payload = decode_access_token(credentials.credentials)
    email = payload.get("email")
    if not isinstance(email, str) or not email.strip():
        logger.warning("Token rejected: payload has no email claim")
        raise _unauthorized()
    return payload
