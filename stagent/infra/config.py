"""Application configuration via Pydantic Settings."""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Status cache
    status_max_age_seconds: int = Field(default=300, ge=0)  # 5 minutes

    # Agent
    agent_token_file: str = "AGENT_TOKEN"

    # App
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
