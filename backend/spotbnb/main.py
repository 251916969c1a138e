import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from spotbnb.api.routers import bookings, reviews, session, spots
from spotbnb.config import Settings, get_settings
from spotbnb.db import init_db, make_engine, make_session_factory
from spotbnb.errors import register_error_handlers
from spotbnb.middleware.request_log import RequestLogMiddleware

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(), format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Spotbnb API", version="0.1.0")

    # エンジン・セッションはアプリ単位で保持（モジュール変数にしない）
    engine = make_engine(settings.database_url)
    init_db(engine)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = make_session_factory(engine)

    # CORS は開発時のみ
    if not settings.is_production:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=False,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    app.add_middleware(RequestLogMiddleware)
    register_error_handlers(app)

    @app.get("/health")
    def health():
        return {"ok": True}

    app.include_router(session.router,  prefix="/api",       tags=["session"])
    app.include_router(spots.router,    prefix="/api/spots", tags=["spots"])
    app.include_router(bookings.router, prefix="/api",       tags=["bookings"])
    app.include_router(reviews.router,  prefix="/api",       tags=["reviews"])

    logger.info("spotbnb app created (environment=%s)", settings.environment)
    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("spotbnb.main:create_app", factory=True, host="0.0.0.0", port=8000)
