# src/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    PROJECT_NAME: str = "Tweet Feed"
    DATABASE_URL: str = "sqlite+aiosqlite:///./tweets.db"
    TEST_DATABASE_URL: str = "sqlite+aiosqlite:///./test.db"
    CORS_ORIGINS: str = "http://localhost:3000"
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
