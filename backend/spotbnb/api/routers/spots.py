from typing import Optional

from fastapi import APIRouter, Depends, Query

from spotbnb.api.deps import get_gateway, require_auth
from spotbnb.gateway import Gateway, SpotFilters
from spotbnb.models.user import User
from spotbnb.schemas.commons import MessageOut
from spotbnb.schemas.spot import (
    OwnedSpotsOut,
    SpotDetailOut,
    SpotImageIn,
    SpotImageOut,
    SpotIn,
    SpotListItemOut,
    SpotListOut,
    SpotOut,
)
from spotbnb.schemas.user import OwnerOut
from spotbnb.services.booking.validator import (
    authorize_spot_mutation,
    compute_average_rating,
    require_spot,
)

router = APIRouter()

MAX_PAGE = 10_000
MAX_SIZE = 100


@router.get("")
@router.get("/", include_in_schema=False)
def list_spots(
    page: int = Query(1, ge=1, le=MAX_PAGE),
    size: int = Query(20, ge=1, le=MAX_SIZE),
    min_lat: Optional[float] = Query(None, alias="minLat", ge=-90, le=90),
    max_lat: Optional[float] = Query(None, alias="maxLat", ge=-90, le=90),
    min_lng: Optional[float] = Query(None, alias="minLng", ge=-180, le=180),
    max_lng: Optional[float] = Query(None, alias="maxLng", ge=-180, le=180),
    min_price: Optional[float] = Query(None, alias="minPrice", ge=0),
    max_price: Optional[float] = Query(None, alias="maxPrice", ge=0),
    gateway: Gateway = Depends(get_gateway),
) -> SpotListOut:
    filters = SpotFilters(
        min_lat=min_lat,
        max_lat=max_lat,
        min_lng=min_lng,
        max_lng=max_lng,
        min_price=min_price,
        max_price=max_price,
    )
    spots = gateway.list_spots(filters, page=page, size=size)
    # 一覧では未レビューのスポットは null
    ratings = gateway.average_ratings([s.id for s in spots])
    items = [
        SpotListItemOut(**SpotOut.model_validate(s).model_dump(), avg_rating=ratings.get(s.id))
        for s in spots
    ]
    return SpotListOut(spots=items, page=page, size=size, total=len(items))


@router.get("/current")
def list_owned_spots(
    user: User = Depends(require_auth),
    gateway: Gateway = Depends(get_gateway),
) -> OwnedSpotsOut:
    rows = gateway.spots_owned_by(user.id)
    return OwnedSpotsOut(spots=[SpotOut.model_validate(s) for s in rows])


@router.get("/{spot_id}")
def get_spot(spot_id: int, gateway: Gateway = Depends(get_gateway)) -> SpotDetailOut:
    spot = require_spot(gateway.get_spot(spot_id))
    avg = compute_average_rating(gateway, spot.id)
    return SpotDetailOut(
        **SpotOut.model_validate(spot).model_dump(),
        num_reviews=gateway.review_count(spot.id),
        # 詳細では未レビューは 0
        avg_star_rating=avg if avg is not None else 0,
        spot_images=[SpotImageOut.model_validate(i) for i in spot.spot_images],
        owner=OwnerOut.model_validate(spot.owner),
    )


@router.post("", status_code=201)
@router.post("/", status_code=201, include_in_schema=False)
def create_spot(
    payload: SpotIn,
    user: User = Depends(require_auth),
    gateway: Gateway = Depends(get_gateway),
) -> SpotOut:
    spot = gateway.add_spot(user.id, payload.model_dump())
    return SpotOut.model_validate(spot)


@router.put("/{spot_id}")
def update_spot(
    spot_id: int,
    payload: SpotIn,
    user: User = Depends(require_auth),
    gateway: Gateway = Depends(get_gateway),
) -> SpotOut:
    spot = require_spot(gateway.get_spot(spot_id))
    authorize_spot_mutation(spot, user.id)
    spot = gateway.update_spot(spot, payload.model_dump())
    return SpotOut.model_validate(spot)


@router.delete("/{spot_id}")
def delete_spot(
    spot_id: int,
    user: User = Depends(require_auth),
    gateway: Gateway = Depends(get_gateway),
) -> MessageOut:
    spot = require_spot(gateway.get_spot(spot_id))
    authorize_spot_mutation(spot, user.id)
    gateway.delete_spot(spot)
    return MessageOut(message="Successfully deleted")


@router.post("/{spot_id}/images", status_code=201)
def add_spot_image(
    spot_id: int,
    payload: SpotImageIn,
    user: User = Depends(require_auth),
    gateway: Gateway = Depends(get_gateway),
) -> SpotImageOut:
    spot = require_spot(gateway.get_spot(spot_id))
    authorize_spot_mutation(spot, user.id)
    image = gateway.add_spot_image(spot, payload.url, payload.preview)
    return SpotImageOut.model_validate(image)
