from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(Path(__file__).parent.parent.parent / ".env"),
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_env: str = "development"
    debug: bool = False
    log_level: str = "INFO"
    log_json: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Database
    database_url: str = "sqlite+aiosqlite:///./spendwarden.db"
    db_echo: bool = False
    db_timeout_seconds: float = 10.0

    # JWT
    jwt_secret: str = "change-me-in-production"
    jwt_algorithm: str = "HS256"
    jwt_access_expire_minutes: int = 30
    jwt_refresh_expire_days: int = 7

    # Money / amounts
    currency: str = "INR"
    currency_minor_unit: int = 2

    # Budgeting
    timezone: str = "UTC"
    default_points: int = 400
    category_inference_cross_user: bool = True
    admission_lock_limit_row: bool = True


settings = Settings()
