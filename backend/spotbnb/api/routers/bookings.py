from fastapi import APIRouter, Depends

from spotbnb.api.deps import get_gateway, require_auth
from spotbnb.gateway import Gateway
from spotbnb.models.user import User
from spotbnb.schemas.booking import (
    BookingIn,
    BookingOut,
    BookingWithSpotOut,
    SpotBookingsOut,
    UserBookingsOut,
)
from spotbnb.services.booking.validator import (
    list_bookings_for_spot,
    require_spot,
    validate_booking_request,
)

router = APIRouter()


@router.get("/bookings/current")
def list_my_bookings(
    user: User = Depends(require_auth),
    gateway: Gateway = Depends(get_gateway),
) -> UserBookingsOut:
    rows = gateway.bookings_for_user(user.id)
    return UserBookingsOut(bookings=[BookingWithSpotOut.model_validate(b) for b in rows])


@router.get("/spots/{spot_id}/bookings")
def list_spot_bookings(
    spot_id: int,
    user: User = Depends(require_auth),
    gateway: Gateway = Depends(get_gateway),
) -> SpotBookingsOut:
    spot = require_spot(gateway.get_spot(spot_id))
    return SpotBookingsOut(bookings=list_bookings_for_spot(gateway, spot, user.id))


@router.post("/spots/{spot_id}/bookings", status_code=201)
def create_booking(
    spot_id: int,
    payload: BookingIn,
    user: User = Depends(require_auth),
    gateway: Gateway = Depends(get_gateway),
) -> BookingOut:
    booking = validate_booking_request(
        gateway, gateway.get_spot(spot_id), user.id, payload.start_date, payload.end_date
    )
    return BookingOut.model_validate(booking)
