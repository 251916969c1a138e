# backend/spotbnb/services/booking/validator.py
"""
Booking and authorization rules for spots.

Each function checks against freshly loaded data and raises an
``spotbnb.errors.ApiError`` subclass on the first rule that fails, so nothing
after a rejection runs. Input shape (dates parse, start before end, stars in
1..5) is checked by the request schemas before these are called.
"""

from __future__ import annotations

from datetime import date
import logging
from typing import Optional, Union

from spotbnb.errors import ConflictError, ForbiddenError, NotFoundError
from spotbnb.gateway import Gateway
from spotbnb.models.booking import Booking
from spotbnb.models.review import Review
from spotbnb.models.spot import Spot
from spotbnb.schemas.booking import BookingOwnerView, BookingPublicView

from .overlap import conflict_errors

logger = logging.getLogger(__name__)

SPOT_NOT_FOUND = "Spot couldn't be found"
BOOKING_CONFLICT = "Sorry, this spot is already booked for the specified dates"


def require_spot(spot: Optional[Spot]) -> Spot:
    if spot is None:
        raise NotFoundError(SPOT_NOT_FOUND)
    return spot


def authorize_spot_mutation(spot: Spot, requesting_user_id: int) -> None:
    """Only the owner may edit, delete or attach images to a spot."""
    if spot.owner_id != requesting_user_id:
        raise ForbiddenError("Forbidden")


def validate_booking_request(
    gateway: Gateway,
    spot: Optional[Spot],
    requesting_user_id: int,
    start_date: date,
    end_date: date,
) -> Booking:
    spot = require_spot(spot)
    if spot.owner_id == requesting_user_id:
        raise ForbiddenError("Spot must not belong to the current user")

    # 交差する予約だけを DB 側で絞り込む
    for existing in gateway.bookings_for_spot(spot.id, overlapping=(start_date, end_date)):
        errors = conflict_errors(start_date, end_date, existing.start_date, existing.end_date)
        if errors:
            logger.info(
                "booking %s..%s on spot %s conflicts with booking %s",
                start_date, end_date, spot.id, existing.id,
            )
            raise ConflictError(BOOKING_CONFLICT, errors=errors)

    return gateway.add_booking(
        spot_id=spot.id, user_id=requesting_user_id, start_date=start_date, end_date=end_date
    )


def validate_review_request(
    gateway: Gateway,
    spot: Optional[Spot],
    requesting_user_id: int,
    stars: int,
    text: str,
) -> Review:
    spot = require_spot(spot)
    if spot.owner_id == requesting_user_id:
        raise ForbiddenError("Forbidden: Can not review your own spot")
    if gateway.review_by(spot.id, requesting_user_id) is not None:
        raise ConflictError("User already has a review for this spot")
    return gateway.add_review(spot_id=spot.id, user_id=requesting_user_id, review=text, stars=stars)


def compute_average_rating(gateway: Gateway, spot_id: int) -> Optional[float]:
    """Mean of the spot's stars, or None when it has no reviews.

    Callers pick the "no reviews" sentinel: the spot detail renders 0, the spot
    list renders null.
    """
    stars = gateway.review_stars(spot_id)
    if not stars:
        return None
    return sum(stars) / len(stars)


def list_bookings_for_spot(
    gateway: Gateway, spot: Spot, requesting_user_id: int
) -> list[Union[BookingOwnerView, BookingPublicView]]:
    bookings = gateway.bookings_for_spot(spot.id)
    if spot.owner_id == requesting_user_id:
        return [BookingOwnerView.model_validate(b) for b in bookings]
    # 所有者以外には予約者を見せない
    return [
        BookingPublicView(spot_id=b.spot_id, start_date=b.start_date, end_date=b.end_date)
        for b in bookings
    ]
