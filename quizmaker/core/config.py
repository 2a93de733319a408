"""Application configuration from environment."""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """App settings loaded from env / .env."""

    app_name: str = "Quizmaker"
    debug: bool = False

    # Database
    database_url: str = "sqlite:///./quizmaker.db"

    # Sessions (opaque bearer tokens stored in user_sessions)
    session_ttl_days: int = 1

    # bcrypt cost; 10 rounds verifies in roughly 50-150 ms
    password_hash_rounds: int = 10

    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


def get_settings() -> Settings:
    return Settings()
