# backend/spotbnb/schemas/review.py
import datetime as dt

from pydantic import Field

from .commons import CamelModel
from .spot import SpotOut
from .user import OwnerOut


class ReviewIn(CamelModel):
    review: str = Field(min_length=1)
    stars: int = Field(ge=1, le=5, strict=True)


class ReviewOut(CamelModel):
    id: int
    user_id: int
    spot_id: int
    review: str
    stars: int
    created_at: dt.datetime
    updated_at: dt.datetime


class ReviewImageIn(CamelModel):
    url: str = Field(min_length=1)


class ReviewImageOut(CamelModel):
    id: int
    url: str


class ReviewDetailOut(ReviewOut):
    user: OwnerOut = Field(alias="User")
    review_images: list[ReviewImageOut] = Field(default_factory=list, alias="ReviewImages")


class SpotReviewsOut(CamelModel):
    reviews: list[ReviewDetailOut] = Field(alias="Reviews")


class ReviewWithSpotOut(ReviewDetailOut):
    spot: SpotOut = Field(alias="Spot")


class UserReviewsOut(CamelModel):
    reviews: list[ReviewWithSpotOut] = Field(alias="Reviews")
