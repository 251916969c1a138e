# backend/spotbnb/schemas/booking.py
from typing import Union
import datetime as dt

from pydantic import Field, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from .commons import CamelModel
from .spot import SpotOut
from .user import OwnerOut


class BookingIn(CamelModel):
    start_date: dt.date
    end_date: dt.date

    @field_validator("end_date")
    @classmethod
    def end_after_start(cls, v: dt.date, info: ValidationInfo) -> dt.date:
        start = info.data.get("start_date")
        if start is not None and v <= start:
            raise PydanticCustomError("date_order", "endDate cannot be on or before startDate")
        return v


class BookingOut(CamelModel):
    id: int
    spot_id: int
    user_id: int
    start_date: dt.date
    end_date: dt.date
    created_at: dt.datetime
    updated_at: dt.datetime


class BookingOwnerView(BookingOut):
    user: OwnerOut = Field(alias="User")


class BookingPublicView(CamelModel):
    spot_id: int
    start_date: dt.date
    end_date: dt.date


class SpotBookingsOut(CamelModel):
    bookings: list[Union[BookingOwnerView, BookingPublicView]] = Field(alias="Bookings")


class BookingWithSpotOut(BookingOut):
    spot: SpotOut = Field(alias="Spot")


class UserBookingsOut(CamelModel):
    bookings: list[BookingWithSpotOut] = Field(alias="Bookings")
