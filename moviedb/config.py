from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    # 🎯 Application
    APP_NAME: str = "MovieDatabase API"
    APP_VERSION: str = "1.0.0"
    APP_DESCRIPTION: str = "Record the movies you love"
    DEBUG: bool = False  # Enables /docs and detailed 500 messages

    # 🌐 Server
    HOST: str = '0.0.0.0'
    PORT: int = 8000

    # 🗄️ Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./movies.db"
    DB_ECHO: bool = False
    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 5

    # 🔒 CORS
    ALLOWED_ORIGINS: str = "*"

    # 📊 Logging
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        extra = 'ignore'

    @property
    def allowed_origins_list(self) -> List[str]:
        """Parse ALLOWED_ORIGINS string into list"""
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(',')]

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")


settings = Settings()
