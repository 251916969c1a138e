from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from fastapi import Request
import logging

# モデル定義側の Base（spotbnb.models.base）を利用してメタデータを統一
from spotbnb.models.base import Base

logger = logging.getLogger(__name__)


def make_engine(database_url: str) -> Engine:
    is_sqlite = database_url.startswith("sqlite")
    kwargs: dict = {}
    if is_sqlite:
        kwargs["connect_args"] = {"check_same_thread": False}
        # インメモリ DB は接続を1本に固定しないとテーブルが消える
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
    return create_engine(database_url, **kwargs)


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(engine: Engine) -> None:
    # パッケージ配下の各モデルモジュールを明示 import してメタデータ登録を確実化
    import spotbnb.models.user  # noqa: F401
    import spotbnb.models.spot  # noqa: F401
    import spotbnb.models.spot_image  # noqa: F401
    import spotbnb.models.booking  # noqa: F401
    import spotbnb.models.review  # noqa: F401
    import spotbnb.models.review_image  # noqa: F401
    Base.metadata.create_all(bind=engine)
    logger.info("database schema ready (%s)", engine.url.render_as_string(hide_password=True))


def get_db(request: Request):
    db: Session = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
