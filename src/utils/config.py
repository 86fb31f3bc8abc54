"""Configuration management for Pizza Service.

Loads environment variables from system environment and .env file.
Priority order: system environment > .env file > hardcoded defaults
"""

import os

from dotenv import load_dotenv


# Load .env file (if exists, silently continues if missing)
load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


class Config:
    """Application configuration loaded from environment variables."""

    def __init__(self) -> None:
        """Initialize configuration from environment variables."""
        # Output Format: "text" or "json". Default: "text"
        # "text": one description per line
        # "json": pizzas dumped as structured JSON
        self.OUTPUT_FORMAT: str = os.getenv("OUTPUT_FORMAT", "text").lower()
        # Log defaulted cheeses at INFO instead of DEBUG
        self.DEFAULT_CHEESE_WARNING: bool = _env_flag("DEFAULT_CHEESE_WARNING", "false")
        # Print the "what is this cheese made from?" section in the demo
        self.SHOW_CHEESE_ANALYSIS: bool = _env_flag("SHOW_CHEESE_ANALYSIS", "true")
        # Catalog cheese used by the analysis section: "standard" or "parmesan"
        self.ANALYSIS_CHEESE: str = os.getenv("ANALYSIS_CHEESE", "standard").lower()

    def validate(self) -> None:
        """Validate configuration values.

        Raises:
            ValueError: If an environment variable holds an unsupported value.
        """
        if self.OUTPUT_FORMAT not in ("text", "json"):
            raise ValueError(
                f"OUTPUT_FORMAT must be 'text' or 'json', got: {self.OUTPUT_FORMAT}"
            )
        if self.ANALYSIS_CHEESE not in ("standard", "parmesan"):
            raise ValueError(
                f"ANALYSIS_CHEESE must be 'standard' or 'parmesan', got: {self.ANALYSIS_CHEESE}"
            )


# Create module-level config instance and validate immediately
config = Config()
config.validate()
