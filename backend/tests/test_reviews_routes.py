import pytest


@pytest.fixture
def owner(make_user):
    return make_user()


@pytest.fixture
def spot(make_spot, owner):
    return make_spot(owner)


def test_create_review(client, make_user, spot, auth_headers):
    guest = make_user()
    r = client.post(
        f"/api/spots/{spot.id}/reviews",
        json={"review": "This was an awesome spot!", "stars": 5},
        headers=auth_headers(guest),
    )
    assert r.status_code == 201
    body = r.json()
    assert body["userId"] == guest.id
    assert body["spotId"] == spot.id
    assert body["stars"] == 5


def test_second_review_rejected(client, make_user, spot, auth_headers):
    headers = auth_headers(make_user())
    payload = {"review": "Nice", "stars": 4}
    assert client.post(f"/api/spots/{spot.id}/reviews", json=payload, headers=headers).status_code == 201

    r = client.post(f"/api/spots/{spot.id}/reviews", json=payload, headers=headers)
    assert r.status_code == 403
    assert r.json()["message"] == "User already has a review for this spot"


def test_owner_cannot_review(client, spot, owner, auth_headers):
    r = client.post(
        f"/api/spots/{spot.id}/reviews",
        json={"review": "Mine is best", "stars": 5},
        headers=auth_headers(owner),
    )
    assert r.status_code == 403
    assert r.json()["message"] == "Forbidden: Can not review your own spot"


@pytest.mark.parametrize("stars", [0, 6, 3.5, "4"])
def test_review_stars_must_be_integer_1_to_5(client, make_user, spot, auth_headers, stars):
    r = client.post(
        f"/api/spots/{spot.id}/reviews",
        json={"review": "Hmm", "stars": stars},
        headers=auth_headers(make_user()),
    )
    assert r.status_code == 400
    assert r.json()["errors"] == {"stars": "Stars must be an integer from 1 to 5"}


def test_review_missing_spot(client, make_user, auth_headers):
    r = client.post(
        "/api/spots/999/reviews",
        json={"review": "Where?", "stars": 3},
        headers=auth_headers(make_user()),
    )
    assert r.status_code == 404


def test_spot_reviews_include_user_and_images(client, gateway, make_user, spot):
    guest = make_user(first_name="Rita", last_name="Reviewer")
    review = gateway.add_review(spot_id=spot.id, user_id=guest.id, review="Cozy", stars=4)
    gateway.add_review_image(review, "https://img.example.com/r.png")

    r = client.get(f"/api/spots/{spot.id}/reviews")
    assert r.status_code == 200
    [item] = r.json()["Reviews"]
    assert item["review"] == "Cozy"
    assert item["User"] == {"id": guest.id, "firstName": "Rita", "lastName": "Reviewer"}
    assert item["ReviewImages"][0]["url"] == "https://img.example.com/r.png"

    assert client.get("/api/spots/999/reviews").status_code == 404


def test_current_user_reviews(client, gateway, make_user, spot, auth_headers):
    guest = make_user()
    gateway.add_review(spot_id=spot.id, user_id=guest.id, review="Cozy", stars=4)
    r = client.get("/api/reviews/current", headers=auth_headers(guest))
    assert r.status_code == 200
    [item] = r.json()["Reviews"]
    assert item["Spot"]["id"] == spot.id
    assert item["ReviewImages"] == []


def test_review_images_author_only_and_capped(client, gateway, make_user, spot, auth_headers):
    author = make_user()
    review = gateway.add_review(spot_id=spot.id, user_id=author.id, review="Cozy", stars=4)
    url = f"/api/reviews/{review.id}/images"
    image = {"url": "https://img.example.com/r.png"}

    assert client.post(url, json=image, headers=auth_headers(make_user())).status_code == 403
    assert client.post("/api/reviews/999/images", json=image, headers=auth_headers(author)).status_code == 404

    for _ in range(10):
        r = client.post(url, json=image, headers=auth_headers(author))
        assert r.status_code == 201
        assert set(r.json()) == {"id", "url"}

    r = client.post(url, json=image, headers=auth_headers(author))
    assert r.status_code == 403
    assert r.json()["message"] == "Maximum number of images for this resource was reached"


def test_racing_duplicate_review_hits_unique_constraint(client, gateway, make_user, spot, auth_headers, monkeypatch):
    from spotbnb.gateway import Gateway

    guest = make_user()
    gateway.add_review(spot_id=spot.id, user_id=guest.id, review="First", stars=4)
    # the existence check misses the row a concurrent request just wrote
    monkeypatch.setattr(Gateway, "review_by", lambda self, spot_id, user_id: None)

    r = client.post(
        f"/api/spots/{spot.id}/reviews",
        json={"review": "Second", "stars": 2},
        headers=auth_headers(guest),
    )
    assert r.status_code == 400
    body = r.json()
    assert body["message"] == "Validation error"
    assert "UNIQUE" in body["errors"]["database"]
    assert len(gateway.reviews_for_spot(spot.id)) == 1
