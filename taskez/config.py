from pydantic_settings import BaseSettings
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseSettings):
    database_url: str = "sqlite+aiosqlite:///./taskez.db"

    # Database
    DB_ECHO: bool = False
    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 10
    CREATE_TABLES_ON_STARTUP: bool = True

    # CORS
    CORS_ORIGIN_REGEX: str = "https?://.*"

    class Config:
        env_file = ".env"

settings = Settings()
