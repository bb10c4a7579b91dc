from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Настройки приложения"""

    # App
    APP_NAME: str = "Contact Inbox"
    DEBUG: bool = False
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    LOG_LEVEL: str = "INFO"

    # Static frontend
    PUBLIC_DIR: str = "public"

    # CORS
    BACKEND_CORS_ORIGINS: list = ["*"]

    # Validation
    MESSAGE_MIN_LENGTH: int = 5
    MESSAGE_MAX_LENGTH: int = 1000

    # Rate limiting
    RATE_LIMIT_MAX_SUBMISSIONS: int = 3
    RATE_LIMIT_WINDOW_SECONDS: float = 60
    TRUST_FORWARDED_FOR: bool = False  # брать адрес клиента из X-Forwarded-For

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
