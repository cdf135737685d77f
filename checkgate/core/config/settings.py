"""
Main configuration class that composes all configs.
"""

import logging
import os

from dotenv import load_dotenv

from checkgate.core.config.logging_config import LoggingConfig
from checkgate.core.config.repo_config import RepoConfig
from checkgate.rules.checklists import Checklist

# Load environment variables from a .env file
load_dotenv()

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class Config:
    """Main configuration class."""

    def __init__(self) -> None:
        self.repo_config = RepoConfig(
            base_path=os.getenv("CHECKGATE_CONFIG_BASE_PATH", ".checkgate"),
            rules_file=os.getenv("CHECKGATE_RULES_FILE", "rules.yaml"),
        )

        # Built-in checklist used when no rules file or explicit rule set is given
        self.default_checklist = os.getenv("CHECKGATE_DEFAULT_CHECKLIST", "default")

        self.logging = LoggingConfig(
            level=os.getenv("LOG_LEVEL", "INFO").upper(),
            format=os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
            file_path=os.getenv("LOG_FILE_PATH"),
        )

        # Development settings
        self.debug = os.getenv("DEBUG", "false").lower() == "true"
        self.environment = os.getenv("ENVIRONMENT", "development")

    @property
    def log_level(self) -> int:
        return logging.DEBUG if self.debug else getattr(logging, self.logging.level, logging.INFO)

    def validate(self) -> bool:
        """Validate configuration."""
        errors = []

        if self.default_checklist not in {checklist.value for checklist in Checklist}:
            errors.append(f"CHECKGATE_DEFAULT_CHECKLIST must be one of {[c.value for c in Checklist]}")

        if self.logging.level not in _LOG_LEVELS:
            errors.append(f"LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}")

        if not self.repo_config.rules_file:
            errors.append("CHECKGATE_RULES_FILE must not be empty")

        if errors:
            raise ValueError(f"Configuration errors: {', '.join(errors)}")

        return True


# Global config instance
config = Config()
