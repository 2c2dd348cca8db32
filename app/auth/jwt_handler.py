import logging
from datetime import datetime, timezone, timedelta

from fastapi import HTTPException, Depends
from fastapi.security import OAuth2PasswordBearer
from jose import jwt, JWTError

from app.config import config
from app.models.user import UserRole

logger = logging.getLogger(__name__)

oauth2_scheme_access = OAuth2PasswordBearer(tokenUrl="api/auth/login")


def verify_jwt_token(token: str = Depends(oauth2_scheme_access)) -> dict:
    """
    Verify JWT access token for correctness and expiration time.

    Returns the caller as {"id", "email", "role"} with role parsed into UserRole.
    """
    try:
        payload = jwt.decode(token, config.JWT_SECRET_KEY, algorithms=[config.JWT_ALGORITHM])
    except JWTError as e:
        logger.warning(f"JWT verification error: {str(e)}")
        raise HTTPException(status_code=401, detail="Invalid or expired token.")

    # Check expiration
    exp = payload.get("exp")
    if exp is None:
        raise HTTPException(status_code=401, detail="Missing 'exp' field in token")
    if datetime.fromtimestamp(exp, tz=timezone.utc) < datetime.now(tz=timezone.utc):
        raise HTTPException(status_code=401, detail="Token has expired")

    try:
        role = UserRole(payload["role"])
        user_id = int(payload["id"])
    except (KeyError, TypeError, ValueError):
        logger.warning(f"Token payload is missing identity claims: {payload}")
        raise HTTPException(status_code=401, detail="Invalid or expired token.")

    return {"id": user_id, "email": payload.get("sub"), "role": role}


def create_access_token(data: dict, expires_delta: timedelta = None) -> str:
    """
    Create a new JWT access token.
    """
    to_encode = data.copy()
    if isinstance(to_encode.get("role"), UserRole):
        to_encode["role"] = to_encode["role"].value
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=config.JWT_ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, config.JWT_SECRET_KEY, algorithm=config.JWT_ALGORITHM)


def create_user_token(user) -> str:
    return create_access_token(data={"sub": user.email, "id": user.id, "role": user.role})
