# backend/spotbnb/schemas/spot.py
from typing import Optional
import datetime as dt

from pydantic import Field

from .commons import CamelModel
from .user import OwnerOut


class SpotIn(CamelModel):
    address: str = Field(min_length=1)
    city: str = Field(min_length=1)
    state: str = Field(min_length=1)
    country: str = Field(min_length=1)
    lat: float = Field(ge=-90, le=90)
    lng: float = Field(ge=-180, le=180)
    name: str = Field(min_length=1, max_length=50)
    description: str = Field(min_length=1)
    price: float = Field(ge=0)


class SpotOut(CamelModel):
    id: int
    owner_id: int
    address: str
    city: str
    state: str
    country: str
    lat: float
    lng: float
    name: str
    description: str
    price: float
    created_at: dt.datetime
    updated_at: dt.datetime


class SpotListItemOut(SpotOut):
    # 未レビューは null
    avg_rating: Optional[float] = None


class SpotListOut(CamelModel):
    spots: list[SpotListItemOut] = Field(alias="Spots")
    page: int
    size: int
    total: int


class OwnedSpotsOut(CamelModel):
    spots: list[SpotOut] = Field(alias="Spots")


class SpotImageIn(CamelModel):
    url: str = Field(min_length=1)
    preview: bool = False


class SpotImageOut(CamelModel):
    id: int
    url: str
    preview: bool


class SpotDetailOut(SpotOut):
    num_reviews: int
    # 未レビューは 0
    avg_star_rating: float = 0
    spot_images: list[SpotImageOut] = Field(default_factory=list, alias="SpotImages")
    owner: OwnerOut = Field(alias="Owner")
