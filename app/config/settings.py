import os
from pathlib import Path

from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_PROJECT_ROOT = Path(__file__).parent.parent.parent


def get_database_url() -> str:
    """Get database URL, using absolute path for SQLite to avoid path resolution issues.

    SQLite is for local development only. Set DATABASE_URL to a PostgreSQL
    connection string for deployments.
    """
    db_url = os.getenv("DATABASE_URL", "")
    if db_url:
        logger.info("Using DATABASE_URL from environment")
        return db_url

    db_path = _PROJECT_ROOT / "gym_tracker.db"
    abs_path = db_path.resolve()
    db_url = f"sqlite:///{abs_path}"
    logger.warning(f"Using SQLite database (LOCAL DEV ONLY): {db_url}. Set DATABASE_URL to use PostgreSQL.")
    return db_url


def get_seed_catalog_path() -> str:
    """Default location of the static exercise/plan-category seed file."""
    return str((_PROJECT_ROOT / "data" / "seed" / "catalog.yaml").resolve())


class Settings(BaseSettings):
    database_url: str = Field(
        default_factory=get_database_url,
        validation_alias="DATABASE_URL",
    )
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_file: str | None = Field(default=None, validation_alias="LOG_FILE")
    seed_catalog_path: str = Field(
        default_factory=get_seed_catalog_path,
        validation_alias="SEED_CATALOG_PATH",
        description="YAML file with exercise categories, library exercises and plan categories",
    )
    seed_on_startup: bool = Field(
        default=True,
        validation_alias="SEED_ON_STARTUP",
        description="Load the seed catalog into the database when the API starts",
    )
    plan_frequency_adjustment: bool = Field(
        default=False,
        validation_alias="PLAN_FREQUENCY_ADJUSTMENT",
        description="Adjust sets/rest for weekly training frequency when generating plans",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that log level is one of the standard logging levels."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            logger.warning(f"Invalid LOG_LEVEL '{value}'. Valid levels are: {', '.join(valid_levels)}. Defaulting to INFO.")
            return "INFO"
        return upper_value

    @field_validator("seed_catalog_path")
    @classmethod
    def validate_seed_catalog_path(cls, value: str) -> str:
        """Warn early when the seed file is missing; seeding will be skipped."""
        if value and not Path(value).exists():
            logger.warning(f"SEED_CATALOG_PATH does not exist: {value}. The exercise catalog will not be seeded.")
        return value


settings = Settings()
