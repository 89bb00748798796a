from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "ImpactMap"
    debug: bool = False

    # API
    frontend_url: str = "http://localhost:5173"
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]

    # Load the bundled seed goals and solutions into the repository at startup
    seed_on_startup: bool = True  # env: SEED_ON_STARTUP


@lru_cache
def get_settings() -> Settings:
    return Settings()
