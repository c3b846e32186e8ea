from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # reset 時也會用同一個 seed，確保 random-board 可重現
    rng_seed: int = 2024
    route_prefix: str = "/12"
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]
    host: str = "0.0.0.0"
    port: int = 8000

    class Config:
        env_file = ".env"


@lru_cache()
def get_settings():
    return Settings()


settings = get_settings()
