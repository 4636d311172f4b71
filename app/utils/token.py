from datetime import timedelta
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from pydantic import BaseModel

from app.config import Settings, get_app_settings
from app.exceptions import InvalidToken, Unauthenticated
from app.models.ids import utcnow
from app.models.user import User

bearer_scheme = HTTPBearer(auto_error=False)


class TokenIdentity(BaseModel):
    id: str
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None


def token_claims(user: User) -> dict:
    return {
        "id": user.id,
        "email": user.email,
        "firstName": user.first_name,
        "lastName": user.last_name,
    }


def create_access_token(
    data: dict,
    settings: Settings,
    expires_delta: Optional[timedelta] = None,
) -> str:
    lifetime = expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    claims = {**data, "exp": utcnow() + lifetime}
    return jwt.encode(claims, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str, settings: Settings) -> dict:
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError:
        raise InvalidToken()

    if not payload.get("id"):
        raise InvalidToken()
    return payload


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    settings: Settings = Depends(get_app_settings),
) -> TokenIdentity:
    """Resolve the bearer token into an identity without touching the store."""
    if credentials is None or not credentials.credentials:
        raise Unauthenticated()

    payload = decode_access_token(credentials.credentials, settings)

    return TokenIdentity(
        id=str(payload["id"]),
        email=payload.get("email", ""),
        first_name=payload.get("firstName"),
        last_name=payload.get("lastName"),
    )
