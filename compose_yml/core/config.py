"""Runtime settings for compose_yml."""
import os
from dataclasses import dataclass
from typing import Optional

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass
class ComposeSettings:
    """Runtime configuration.

    Attributes:
        validate_schema: Run schema validation when reading and writing files
        env_file_name: Name of the dotenv file loaded next to a compose file
        log_file: Optional path for file logging
    """

    validate_schema: bool = True
    env_file_name: str = ".env"
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls) -> "ComposeSettings":
        """Create settings from environment variables.

        Environment variables:
            COMPOSE_YML_VALIDATE: "0"/"false" disables schema validation
            COMPOSE_YML_ENV_FILE: Name of the dotenv file (default: .env)
            COMPOSE_YML_LOG_FILE: Path to a log file
        """
        validate = os.getenv("COMPOSE_YML_VALIDATE")
        return cls(
            validate_schema=(
                cls.validate_schema if validate is None
                else validate.strip().lower() in _TRUE_VALUES
            ),
            env_file_name=os.getenv("COMPOSE_YML_ENV_FILE", cls.env_file_name),
            log_file=os.getenv("COMPOSE_YML_LOG_FILE", cls.log_file),
        )


_settings: Optional[ComposeSettings] = None


def get_settings() -> ComposeSettings:
    """Get the process-wide settings, loading them from the environment once."""
    global _settings
    if _settings is None:
        _settings = ComposeSettings.from_env()
    return _settings


def set_settings(settings: Optional[ComposeSettings]) -> None:
    """Override the process-wide settings; None reloads from the environment."""
    global _settings
    _settings = settings
