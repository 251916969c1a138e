# backend/spotbnb/schemas/user.py
from typing import Optional

from pydantic import EmailStr, Field

from .commons import CamelModel


class SignupIn(CamelModel):
    email: EmailStr
    first_name: str = Field(min_length=1, max_length=50)
    last_name: str = Field(min_length=1, max_length=50)
    # bcrypt は 72 バイトまで
    password: str = Field(min_length=6, max_length=72)


class LoginIn(CamelModel):
    credential: str = Field(min_length=1)
    password: str = Field(min_length=1)


class OwnerOut(CamelModel):
    id: int
    first_name: str
    last_name: str


class UserOut(OwnerOut):
    email: str


class SessionOut(CamelModel):
    user: Optional[UserOut] = None
