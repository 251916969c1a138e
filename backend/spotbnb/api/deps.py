# backend/spotbnb/api/deps.py
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from spotbnb.config import Settings
from spotbnb.db import get_db
from spotbnb.errors import AuthenticationError
from spotbnb.gateway import Gateway
from spotbnb.models.user import User
from spotbnb.security import decode_access_token

TOKEN_COOKIE = "token"

bearer_scheme = HTTPBearer(auto_error=False)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_gateway(db: Session = Depends(get_db)) -> Gateway:
    return Gateway(db)


def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    gateway: Gateway = Depends(get_gateway),
    settings: Settings = Depends(get_settings),
) -> Optional[User]:
    """Resolve the user from the ``token`` cookie or a bearer header; None when anonymous."""
    token = credentials.credentials if credentials else request.cookies.get(TOKEN_COOKIE)
    if not token:
        return None
    user_id = decode_access_token(token, settings)
    if user_id is None:
        return None
    return gateway.get_user(user_id)


def require_auth(user: Optional[User] = Depends(get_current_user)) -> User:
    if user is None:
        raise AuthenticationError("Authentication required")
    return user
