from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Application
    APP_NAME: str = "PointsDesk"
    APP_PORT: int = 9300
    DEBUG: bool = False

    # Points-management API
    API_BASE_URL: str = "http://localhost:8080/api"
    REQUEST_TIMEOUT_SECONDS: float = 30.0
    NORMAL_DELAY_SECONDS: float = 0.3  # simulated latency before every call

    # Notifications
    NOTIFICATION_TIMEOUT_SECONDS: float = 5.0

    # Logging
    LOGS_PATH: str = "/tmp/pointsdesk_logs"
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "POINTSDESK_"
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
