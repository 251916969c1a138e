# backend/spotbnb/seed.py
"""Insert demo data: ``python -m spotbnb.seed``."""
import logging

from spotbnb.config import get_settings
from spotbnb.db import init_db, make_engine, make_session_factory
from spotbnb.gateway import Gateway
from spotbnb.main import configure_logging
from spotbnb.security import hash_password

logger = logging.getLogger(__name__)

DEMO_USERS = [
    {
        "first_name": "John",
        "last_name": "Doe",
        "email": "johndoe@example.com",
        "password": "password123",
    },
]


def seed_users(gateway: Gateway, rounds: int = 12) -> int:
    created = 0
    for demo in DEMO_USERS:
        if gateway.get_user_by_email(demo["email"]) is not None:
            continue
        gateway.add_user(
            first_name=demo["first_name"],
            last_name=demo["last_name"],
            email=demo["email"],
            hashed_password=hash_password(demo["password"], rounds=rounds),
        )
        created += 1
    return created


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    engine = make_engine(settings.database_url)
    init_db(engine)
    db = make_session_factory(engine)()
    try:
        created = seed_users(Gateway(db), rounds=settings.bcrypt_rounds)
    finally:
        db.close()
    logger.info("seeded %d demo user(s)", created)


if __name__ == "__main__":
    main()
