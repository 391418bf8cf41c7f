"""Configuration for fallible, loaded from environment variables."""

from pydantic_settings import BaseSettings

from fallible.constants import ENV_FILE, ENV_PREFIX


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    # Result behavior
    copy_on_override: bool = False

    # Logging Configuration
    log_level: str = "INFO"
    json_logs: bool = False

    model_config = {
        "env_prefix": ENV_PREFIX,
        "env_file": ENV_FILE,
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()
