from typing import Optional

from fastapi import APIRouter, Depends, Response

from spotbnb.api.deps import TOKEN_COOKIE, get_current_user, get_gateway, get_settings
from spotbnb.config import Settings
from spotbnb.errors import AuthenticationError, ConflictError
from spotbnb.gateway import Gateway
from spotbnb.models.user import User
from spotbnb.schemas.commons import MessageOut
from spotbnb.schemas.user import LoginIn, SessionOut, SignupIn, UserOut
from spotbnb.security import create_access_token, hash_password, verify_password

router = APIRouter()


def _set_token_cookie(response: Response, user: User, settings: Settings) -> None:
    response.set_cookie(
        TOKEN_COOKIE,
        create_access_token(user.id, settings),
        max_age=settings.jwt_expires_in,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
    )


@router.post("/users", status_code=201)
def signup(
    payload: SignupIn,
    response: Response,
    gateway: Gateway = Depends(get_gateway),
    settings: Settings = Depends(get_settings),
) -> SessionOut:
    if gateway.get_user_by_email(payload.email) is not None:
        raise ConflictError(
            "User already exists",
            status=409,
            errors={"email": "User with that email already exists"},
        )
    user = gateway.add_user(
        first_name=payload.first_name,
        last_name=payload.last_name,
        email=payload.email,
        hashed_password=hash_password(payload.password, rounds=settings.bcrypt_rounds),
    )
    _set_token_cookie(response, user, settings)
    return SessionOut(user=UserOut.model_validate(user))


@router.post("/session")
def login(
    payload: LoginIn,
    response: Response,
    gateway: Gateway = Depends(get_gateway),
    settings: Settings = Depends(get_settings),
) -> SessionOut:
    user = gateway.get_user_by_email(payload.credential)
    if user is None or not verify_password(payload.password, user.hashed_password):
        raise AuthenticationError(
            "Invalid credentials",
            title="Login failed",
            errors={"credential": "The provided credentials were invalid."},
        )
    _set_token_cookie(response, user, settings)
    return SessionOut(user=UserOut.model_validate(user))


@router.get("/session")
def restore_session(user: Optional[User] = Depends(get_current_user)) -> SessionOut:
    return SessionOut(user=UserOut.model_validate(user) if user else None)


@router.delete("/session")
def logout(response: Response) -> MessageOut:
    response.delete_cookie(TOKEN_COOKIE)
    return MessageOut(message="success")
