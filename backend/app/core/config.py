from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
import os


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=os.getenv("ENV_FILE", ".env"), extra="ignore")

    app_name: str = Field(default="adif_json_bridge")
    app_env: str = Field(default="dev")
    log_level: str = Field(default="INFO")
    version: str = Field(default="0.1.0")
    # Static header written into every decoded document
    adif_version: str = Field(default="3.1.1")
    program_id: str = Field(default="adif-json-bridge")
    program_version: str = Field(default="0.1.0")
    # Threads used to decode the records of one document
    workers: int = Field(default=1, ge=1)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
