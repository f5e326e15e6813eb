from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    # Local key-value file that stands in for the browser's storage
    STORE_URL: str = "sqlite:///./fishing_companion.db"

    OPENWEATHER_API_KEY: str = ""
    OPENWEATHER_URL: str = "https://api.openweathermap.org/data/2.5"
    SUNRISE_SUNSET_URL: str = "https://api.sunrise-sunset.org/json"
    WEATHER_API_TIMEOUT: float = 10.0

    MAX_CONCURRENT_WEATHER_REQUESTS: int = 10

    CORS_ORIGINS: List[str] = ["*"]

    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
