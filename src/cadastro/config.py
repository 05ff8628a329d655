from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Argon2id cost parameters for password encoding
    password_hash_time_cost: int = 2
    password_hash_memory_cost: int = 65536  # KiB, 64 MiB
    password_hash_parallelism: int = 2
    password_hash_len: int = 32
    password_salt_len: int = 16


@lru_cache
def get_settings() -> Settings:
    return Settings()
