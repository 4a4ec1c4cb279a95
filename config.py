from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore'
    )

    users_file: Path = Path("users.txt")
    log_level: str = "INFO"

    def get_users_file_path(self) -> Path:
        return self.users_file.expanduser()


@lru_cache
def get_settings() -> Settings:
    return Settings()
