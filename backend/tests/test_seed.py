from spotbnb.security import verify_password
from spotbnb.seed import seed_users


def test_seed_users_is_idempotent(gateway):
    assert seed_users(gateway, rounds=4) == 1
    assert seed_users(gateway, rounds=4) == 0
    user = gateway.get_user_by_email("johndoe@example.com")
    assert user.first_name == "John"
    assert user.hashed_password != "password123"
    assert verify_password("password123", user.hashed_password)
