from fastapi import APIRouter, Depends

from spotbnb.api.deps import get_gateway, require_auth
from spotbnb.errors import ForbiddenError, NotFoundError
from spotbnb.gateway import Gateway
from spotbnb.models.user import User
from spotbnb.schemas.review import (
    ReviewDetailOut,
    ReviewImageIn,
    ReviewImageOut,
    ReviewIn,
    ReviewOut,
    ReviewWithSpotOut,
    SpotReviewsOut,
    UserReviewsOut,
)
from spotbnb.services.booking.validator import require_spot, validate_review_request

router = APIRouter()

MAX_REVIEW_IMAGES = 10


@router.get("/reviews/current")
def list_my_reviews(
    user: User = Depends(require_auth),
    gateway: Gateway = Depends(get_gateway),
) -> UserReviewsOut:
    rows = gateway.reviews_by_user(user.id)
    return UserReviewsOut(reviews=[ReviewWithSpotOut.model_validate(r) for r in rows])


@router.post("/reviews/{review_id}/images", status_code=201)
def add_review_image(
    review_id: int,
    payload: ReviewImageIn,
    user: User = Depends(require_auth),
    gateway: Gateway = Depends(get_gateway),
) -> ReviewImageOut:
    review = gateway.get_review(review_id)
    if review is None:
        raise NotFoundError("Review couldn't be found")
    if review.user_id != user.id:
        raise ForbiddenError("Forbidden")
    if gateway.count_review_images(review.id) >= MAX_REVIEW_IMAGES:
        raise ForbiddenError("Maximum number of images for this resource was reached")
    image = gateway.add_review_image(review, payload.url)
    return ReviewImageOut.model_validate(image)


@router.get("/spots/{spot_id}/reviews")
def list_spot_reviews(spot_id: int, gateway: Gateway = Depends(get_gateway)) -> SpotReviewsOut:
    spot = require_spot(gateway.get_spot(spot_id))
    rows = gateway.reviews_for_spot(spot.id)
    return SpotReviewsOut(reviews=[ReviewDetailOut.model_validate(r) for r in rows])


@router.post("/spots/{spot_id}/reviews", status_code=201)
def create_review(
    spot_id: int,
    payload: ReviewIn,
    user: User = Depends(require_auth),
    gateway: Gateway = Depends(get_gateway),
) -> ReviewOut:
    review = validate_review_request(
        gateway, gateway.get_spot(spot_id), user.id, payload.stars, payload.review
    )
    return ReviewOut.model_validate(review)
