import os
from typing import List, Optional
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# Always load .env from root
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(__file__)))
load_dotenv(os.path.join(BASE_DIR, ".env"))


class Settings(BaseSettings):
    JWT_SECRET: str = os.getenv("JWT_SECRET", "change-me")
    JWT_ALGORITHM: str = os.getenv("JWT_ALGORITHM", "HS256")
    JWT_EXPIRE_MINUTES: int = int(os.getenv(
        "JWT_EXPIRE_MINUTES", 1440))  # 24 hours default

    DB_USER: Optional[str] = os.getenv("DB_USER")
    DB_PASS: Optional[str] = os.getenv("DB_PASS")
    DB_HOST: str = os.getenv("DB_HOST", "localhost")
    DB_PORT: str = os.getenv("DB_PORT", "5432")
    AUTH_DB_NAME: str = os.getenv("AUTH_DB_NAME", "pantry_auth")
    PANTRY_DB_NAME: str = os.getenv("PANTRY_DB_NAME", "pantry")

    # Full URLs win over the individual DB_* parts when set
    AUTH_DATABASE_URL: Optional[str] = os.getenv("AUTH_DATABASE_URL")
    PANTRY_DATABASE_URL: Optional[str] = os.getenv("PANTRY_DATABASE_URL")

    DB_POOL_SIZE: int = int(os.getenv("DB_POOL_SIZE", 2))
    DB_MAX_OVERFLOW: int = int(os.getenv("DB_MAX_OVERFLOW", 2))

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    CORS_ORIGINS: List[str] = [
        "http://localhost:5173",
        "http://localhost:8080",
    ]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


settings = Settings()


def _postgres_url(db_name: str) -> str:
    return (
        f"postgresql+psycopg2://{settings.DB_USER}:{settings.DB_PASS}@{settings.DB_HOST}:{settings.DB_PORT}/{db_name}"
    )


AUTH_DATABASE_URL = settings.AUTH_DATABASE_URL or _postgres_url(
    settings.AUTH_DB_NAME)

PANTRY_DATABASE_URL = settings.PANTRY_DATABASE_URL or _postgres_url(
    settings.PANTRY_DB_NAME)
