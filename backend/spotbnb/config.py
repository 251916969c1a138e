# backend/spotbnb/config.py
from pathlib import Path
from typing import Literal

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _default_database_url() -> str:
    # コンテナでは /app/data、ローカルでは <repo root>/data に SQLite を置く
    container_data = Path("/app/data")
    if container_data.exists():
        db_path = container_data / "app.db"
    else:
        # backend/spotbnb/config.py → ../../.. = <repo root>
        repo_root = Path(__file__).resolve().parents[2]
        db_path = repo_root / "data" / "app.db"
    db_path.parent.mkdir(parents=True, exist_ok=True)
    return f"sqlite:///{db_path}"


DEV_JWT_SECRET = "spotbnb-dev-secret"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    environment: Literal["development", "production", "test"] = "development"
    database_url: str = Field(default_factory=_default_database_url)
    jwt_secret: SecretStr = SecretStr(DEV_JWT_SECRET)
    jwt_expires_in: int = 604800  # 1 week, seconds
    bcrypt_rounds: int = 12
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]

    @model_validator(mode="after")
    def require_real_secret_in_production(self) -> "Settings":
        if self.environment == "production" and self.jwt_secret.get_secret_value() == DEV_JWT_SECRET:
            raise ValueError("JWT_SECRET must be set in production")
        return self

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


def get_settings() -> Settings:
    return Settings()
