from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    STORAGE_BACKEND: str = "redis"  # redis | memory | none
    REDIS_URL: str = "redis://localhost:6379/3"
    STORAGE_KEY_PREFIX: str = "hobbyclass:"
    SECRET_KEY: str = "dev-secret-hobbyclass"
    JWT_ALGORITHM: str = "HS256"
    SESSION_TTL_MINUTES: int = 60 * 24 * 7
    LOG_LEVEL: str = "INFO"
    RATE_LIMIT_PER_MINUTE: int = 60
    RATE_LIMIT_ENABLED: bool = True

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
