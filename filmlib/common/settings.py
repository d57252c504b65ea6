# filmlib/common/settings.py
from __future__ import annotations

from functools import lru_cache
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator, computed_field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _csv_to_list(v: str | List[str] | None) -> List[str]:
    if v is None:
        return []
    if isinstance(v, list):
        return [str(s).strip() for s in v if s and str(s).strip()]
    return [s.strip() for s in str(v).split(",") if s.strip()]


def _to_bool(v: str | bool | int | None, default: bool = False) -> bool:
    if isinstance(v, bool):
        return v
    if v is None:
        return default
    s = str(v).strip().lower()
    return s in {"1", "true", "yes", "y", "on"}


class APIConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 10011
    prefix: str = "/api"

    cors_allow_origins: List[str] = Field(default_factory=lambda: ["http://localhost:5173"])
    cors_allow_methods: List[str] = Field(default_factory=lambda: ["GET", "POST", "PATCH", "DELETE", "OPTIONS"])
    cors_allow_headers: List[str] = Field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = False

    @field_validator("cors_allow_origins", "cors_allow_methods", "cors_allow_headers", mode="before")
    @classmethod
    def _split_csv(cls, v):
        return _csv_to_list(v)


class DBConfig(BaseModel):
    driver: str = "postgresql+psycopg"
    host: str = "localhost"
    port: int = 5432
    name: str = "filmlibrary"
    user: str = "postgres"
    password: str = "testpassword"
    schema_name: str = Field(default="public", alias="DB_SCHEMA")
    echo: bool = False
    pool_size: int = 10
    max_overflow: int = 20
    pool_pre_ping: bool = True
    pool_recycle: int = 1800

    @computed_field  # type: ignore[misc]
    @property
    def effective_url(self) -> str:
        return f"{self.driver}://{self.user}:{self.password}@{self.host}:{self.port}/{self.name}"


DEV_JWT_SECRET = "filmlib-dev-only-signing-secret-change-me"
MIN_JWT_SECRET_LENGTH = 32

# Environments allowed to run on the built-in signing secret.
LOCAL_ENVS = frozenset({"development", "test"})


class AuthConfig(BaseModel):
    # Only usable in LOCAL_ENVS; Settings refuses it anywhere else.
    jwt_secret: str = DEV_JWT_SECRET
    jwt_algo: str = "HS256"
    token_ttl_hours: int = Field(72, ge=1)
    default_role: str = "user"


class Settings(BaseSettings):
    # -------- App / Env --------
    app_name: str = "filmlib"
    app_env: str = "development"  # development|test|staging|production
    log_level: str = "INFO"

    # -------- Sub-configs --------
    api: APIConfig = APIConfig()
    db: DBConfig = DBConfig()
    auth: AuthConfig = AuthConfig()

    # Optional single URL (if set, it takes precedence over db.*)
    database_url_override: Optional[str] = Field(default=None, alias="DATABASE_URL")

    # -------- Alembic / migrations --------
    alembic_version_table_schema: str = "public"

    # -------- Testcontainers / CI toggles --------
    use_testcontainers: bool = False
    test_db_image: str = "postgres:15-alpine"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("use_testcontainers", mode="before")
    @classmethod
    def _boolify(cls, v):
        return _to_bool(v)

    @model_validator(mode="after")
    def _require_deployed_secret(self):
        if self.app_env.strip().lower() in LOCAL_ENVS:
            return self
        secret = (self.auth.jwt_secret or "").strip()
        if not secret or secret == DEV_JWT_SECRET:
            raise ValueError("AUTH__JWT_SECRET must be set to a non-default value outside development")
        if len(secret) < MIN_JWT_SECRET_LENGTH:
            raise ValueError(f"AUTH__JWT_SECRET must be at least {MIN_JWT_SECRET_LENGTH} characters outside development")
        return self

    # ===== Convenience: DB URL & schema =====
    @computed_field  # type: ignore[misc]
    @property
    def database_url(self) -> str:
        return self.database_url_override or self.db.effective_url

    @computed_field  # type: ignore[misc]
    @property
    def db_schema(self) -> str:
        return self.db.schema_name


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Global settings accessor (cached). Use this everywhere you need config:
        from filmlib.common.settings import get_settings
        cfg = get_settings()
    """
    return Settings()  # pydantic_settings will read from .env automatically
