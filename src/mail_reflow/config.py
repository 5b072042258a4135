from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Length of the depth-1 quote prefix "> "; narrower budgets cannot hold a quoted word.
MIN_WRAP_WIDTH = 2


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_env: str = "dev"
    app_host: str = "127.0.0.1"
    app_port: int = 8000

    server_name: str = "Hanumail"
    server_version: str = "0.1.0"

    log_level: str = "INFO"

    wrap_width: int = Field(default=78, gt=MIN_WRAP_WIDTH)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
