# backend/spotbnb/gateway.py
"""
Persistence gateway: every read and write the routes and booking rules need,
wrapped around one SQLAlchemy session.

A gateway is built per request from the session the app hands out
(``spotbnb.api.deps.get_gateway``); nothing here holds module-level state.
Writes commit immediately.

The booking conflict check in ``spotbnb.services.booking.validator`` reads
then writes without isolation. Strict no-overlap under concurrent requests
needs a serializable transaction or an exclusion constraint in the store.
"""

from dataclasses import dataclass
from datetime import date
import logging
from typing import Any, Optional, Sequence

from sqlalchemy import func
from sqlalchemy.orm import Session

from spotbnb.models.booking import Booking
from spotbnb.models.review import Review
from spotbnb.models.review_image import ReviewImage
from spotbnb.models.spot import Spot
from spotbnb.models.spot_image import SpotImage
from spotbnb.models.user import User

logger = logging.getLogger(__name__)

SPOT_FIELDS = ("address", "city", "state", "country", "lat", "lng", "name", "description", "price")


@dataclass
class SpotFilters:
    min_lat: Optional[float] = None
    max_lat: Optional[float] = None
    min_lng: Optional[float] = None
    max_lng: Optional[float] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None


class Gateway:
    def __init__(self, db: Session):
        self.db = db

    def _save(self, obj):
        self.db.add(obj)
        self.db.commit()
        self.db.refresh(obj)
        return obj

    # --- users ---

    def get_user(self, user_id: int) -> Optional[User]:
        return self.db.get(User, user_id)

    def get_user_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(func.lower(User.email) == email.lower()).first()

    def add_user(self, *, first_name: str, last_name: str, email: str, hashed_password: str) -> User:
        user = self._save(
            User(first_name=first_name, last_name=last_name, email=email, hashed_password=hashed_password)
        )
        logger.info("created user %s", user.id)
        return user

    # --- spots ---

    def get_spot(self, spot_id: int) -> Optional[Spot]:
        return self.db.get(Spot, spot_id)

    def list_spots(self, filters: SpotFilters, page: int = 1, size: int = 20) -> list[Spot]:
        q = self.db.query(Spot)
        if filters.min_lat is not None:
            q = q.filter(Spot.lat >= filters.min_lat)
        if filters.max_lat is not None:
            q = q.filter(Spot.lat <= filters.max_lat)
        if filters.min_lng is not None:
            q = q.filter(Spot.lng >= filters.min_lng)
        if filters.max_lng is not None:
            q = q.filter(Spot.lng <= filters.max_lng)
        if filters.min_price is not None:
            q = q.filter(Spot.price >= filters.min_price)
        if filters.max_price is not None:
            q = q.filter(Spot.price <= filters.max_price)
        return q.order_by(Spot.id.asc()).limit(size).offset((page - 1) * size).all()

    def spots_owned_by(self, user_id: int) -> list[Spot]:
        return self.db.query(Spot).filter(Spot.owner_id == user_id).order_by(Spot.id.asc()).all()

    def add_spot(self, owner_id: int, fields: dict[str, Any]) -> Spot:
        spot = self._save(Spot(owner_id=owner_id, **{k: fields[k] for k in SPOT_FIELDS}))
        logger.info("user %s created spot %s", owner_id, spot.id)
        return spot

    def update_spot(self, spot: Spot, fields: dict[str, Any]) -> Spot:
        for key in SPOT_FIELDS:
            if key in fields:
                setattr(spot, key, fields[key])
        return self._save(spot)

    def delete_spot(self, spot: Spot) -> None:
        spot_id = spot.id
        self.db.delete(spot)
        self.db.commit()
        logger.info("deleted spot %s", spot_id)

    def add_spot_image(self, spot: Spot, url: str, preview: bool = False) -> SpotImage:
        return self._save(SpotImage(spot_id=spot.id, url=url, preview=preview))

    # --- bookings ---

    def bookings_for_spot(
        self, spot_id: int, overlapping: Optional[tuple[date, date]] = None
    ) -> list[Booking]:
        """Bookings on a spot, optionally only those intersecting [start, end] inclusive."""
        q = self.db.query(Booking).filter(Booking.spot_id == spot_id)
        if overlapping is not None:
            start, end = overlapping
            q = q.filter(Booking.start_date <= end, Booking.end_date >= start)
        return q.order_by(Booking.start_date.asc()).all()

    def bookings_for_user(self, user_id: int) -> list[Booking]:
        return self.db.query(Booking).filter(Booking.user_id == user_id).order_by(Booking.start_date.asc()).all()

    def add_booking(self, *, spot_id: int, user_id: int, start_date: date, end_date: date) -> Booking:
        booking = self._save(Booking(spot_id=spot_id, user_id=user_id, start_date=start_date, end_date=end_date))
        logger.info("user %s booked spot %s (%s..%s)", user_id, spot_id, start_date, end_date)
        return booking

    # --- reviews ---

    def get_review(self, review_id: int) -> Optional[Review]:
        return self.db.get(Review, review_id)

    def review_by(self, spot_id: int, user_id: int) -> Optional[Review]:
        return self.db.query(Review).filter(Review.spot_id == spot_id, Review.user_id == user_id).first()

    def reviews_for_spot(self, spot_id: int) -> list[Review]:
        return self.db.query(Review).filter(Review.spot_id == spot_id).order_by(Review.id.asc()).all()

    def reviews_by_user(self, user_id: int) -> list[Review]:
        return self.db.query(Review).filter(Review.user_id == user_id).order_by(Review.id.asc()).all()

    def review_stars(self, spot_id: int) -> list[int]:
        rows = self.db.query(Review.stars).filter(Review.spot_id == spot_id).all()
        return [stars for (stars,) in rows]

    def review_count(self, spot_id: int) -> int:
        return self.db.query(Review).filter(Review.spot_id == spot_id).count()

    def average_ratings(self, spot_ids: Sequence[int]) -> dict[int, float]:
        """AVG(stars) per spot; spots without reviews are absent from the result."""
        if not spot_ids:
            return {}
        rows = (
            self.db.query(Review.spot_id, func.avg(Review.stars))
            .filter(Review.spot_id.in_(list(spot_ids)))
            .group_by(Review.spot_id)
            .all()
        )
        return {spot_id: float(avg) for spot_id, avg in rows}

    def add_review(self, *, spot_id: int, user_id: int, review: str, stars: int) -> Review:
        obj = self._save(Review(spot_id=spot_id, user_id=user_id, review=review, stars=stars))
        logger.info("user %s reviewed spot %s (%s stars)", user_id, spot_id, stars)
        return obj

    def count_review_images(self, review_id: int) -> int:
        return self.db.query(ReviewImage).filter(ReviewImage.review_id == review_id).count()

    def add_review_image(self, review: Review, url: str) -> ReviewImage:
        return self._save(ReviewImage(review_id=review.id, url=url))
