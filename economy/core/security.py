"""Bearer token verification; the caller identity is issued by the platform's auth service."""
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from economy.core.config import Settings
from economy.interfaces.http.deps.container import get_app_settings
from economy.schemas import TokenData

security = HTTPBearer()

ADMIN_ROLES = {"admin", "super_admin"}


def create_access_token(
    settings: Settings,
    account_id: str,
    role: str = "user",
    expires_delta: Optional[timedelta] = None,
) -> str:
    expire_delta = expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    payload = {
        "sub": account_id,
        "role": role,
        "exp": datetime.now(timezone.utc) + expire_delta,
    }
    return jwt.encode(payload, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(settings: Settings, token: str) -> TokenData:
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Could not validate credentials") from exc

    account_id = payload.get("sub")
    role = payload.get("role") or "user"
    if not account_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Could not validate credentials")
    return TokenData(account_id=account_id, role=role)


async def get_current_identity(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    settings: Settings = Depends(get_app_settings),
) -> TokenData:
    return decode_access_token(settings, credentials.credentials)


async def get_current_account_id(identity: TokenData = Depends(get_current_identity)) -> str:
    return identity.account_id


async def get_current_admin(identity: TokenData = Depends(get_current_identity)) -> TokenData:
    if identity.role not in ADMIN_ROLES:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Administrator role required")
    return identity
