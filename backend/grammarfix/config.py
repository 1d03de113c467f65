"""Application configuration."""

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Development mode controls the log format
    dev_mode: bool = True

    # OpenAI chat completions (grammar fix)
    openai_api_key: str = ""
    openai_api_url: str = "https://api.openai.com/v1/chat/completions"
    openai_model: str = "gpt-4o-mini"

    # Generation parameters
    grammar_temperature: float = 0.3
    grammar_max_tokens: int = 1000

    # Connection setup fails fast, slow generations get more slack
    grammar_connect_timeout_seconds: float = 10.0
    grammar_read_timeout_seconds: float = 30.0

    # Logging
    log_level: str = "info"

    @field_validator("openai_api_key", mode="before")
    @classmethod
    def _strip_api_key(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip()
        return value

    @property
    def has_api_key(self) -> bool:
        return bool(self.openai_api_key)

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
