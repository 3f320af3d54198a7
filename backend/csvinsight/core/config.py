"""Application configuration."""
from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    """Application settings."""
    
    # Application
    APP_NAME: str = "CSV Insight API"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    
    # Uploads (nothing is persisted, files are profiled in memory)
    MAX_UPLOAD_BYTES: int = 10 * 1024 * 1024
    
    # CORS
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]
    
    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
