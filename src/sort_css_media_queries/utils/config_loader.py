"""Configuration loading and validation for the media query sorter.

This module loads the sorter configuration from YAML files, resolving
relative paths against the project root, and validates the sort policy and
logging settings.

Typical usage example:
    config = Config.load()
    errors = Config.validate(config)
    if errors:
        raise ConfigurationError(f"Configuration invalid: {errors}")
    configure_logging(config)
    ordered = sort_media_queries(queries, config=config)
"""

import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from ..sorting.comparator import SortPolicy
from .error_handlers import ConfigurationError, log_error_with_context

logger = logging.getLogger(__name__)

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class SortConfig:
    """Container for sorter configuration parameters.

    Attributes:
        sorting: Dictionary containing the sort policy.
        logging: Dictionary containing logging level and format.
    """

    def __init__(self, **config_dict: Dict[str, Any]) -> None:
        """Initialize SortConfig from configuration dictionary.

        Args:
            **config_dict: Configuration dictionary with required keys:
                sorting, logging.

        Raises:
            KeyError: If any required configuration section is missing.
            ConfigurationError: If a section is not a mapping.
        """
        required_keys = ["sorting", "logging"]

        missing_keys = [key for key in required_keys if key not in config_dict]
        if missing_keys:
            raise KeyError(f"Missing required configuration sections: {missing_keys}")

        for key in required_keys:
            section = config_dict[key]
            if section is not None and not isinstance(section, dict):
                raise ConfigurationError(
                    f"Configuration section must be a mapping, got {section!r}",
                    config_key=key,
                )

        self.sorting: Dict[str, Any] = config_dict["sorting"] or {}
        self.logging: Dict[str, Any] = config_dict["logging"] or {}

    @property
    def policy(self) -> str:
        return self.sorting.get("policy", SortPolicy.MOBILE_FIRST.value)


class Config:
    """Static utility class for loading and validating configuration files."""

    @staticmethod
    def load(config_path: Optional[str] = "config/sort_config.yaml") -> SortConfig:
        """Load sorter configuration from a YAML file.

        Relative paths resolve against the project root, four directories
        above this module. The shipped config/ directory is not packaged, so
        the default path only exists in a source or editable checkout;
        installed copies must pass an absolute path.

        Args:
            config_path: Path to the configuration YAML file, relative to the
                project root unless absolute. Defaults to
                "config/sort_config.yaml".

        Returns:
            SortConfig object containing the loaded configuration.

        Raises:
            FileNotFoundError: If the configuration file does not exist.
            ConfigurationError: If the file is not valid YAML, does not
                contain a dictionary, or has a section that is not a mapping.
            KeyError: If required configuration sections are missing.
        """
        # Project root is 4 levels up from this file
        project_root = Path(__file__).parent.parent.parent.parent
        config_file_path = project_root / config_path

        if not config_file_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_file_path}")

        try:
            with open(config_file_path, "r", encoding="utf-8") as f:
                config_dict = yaml.safe_load(f)
        except yaml.YAMLError as e:
            error = ConfigurationError(
                f"Failed to parse configuration file: {config_file_path}",
                original_error=e,
            )
            log_error_with_context(
                error, logger, {"stage": "configuration", "path": config_file_path}
            )
            raise error from e

        if not isinstance(config_dict, dict):
            raise ConfigurationError(
                "Configuration file must contain a YAML dictionary"
            )

        logger.info(f"Loaded configuration from {config_file_path}")
        return SortConfig(**config_dict)

    @staticmethod
    def validate(config: SortConfig) -> List[str]:
        """Validate the sort policy and logging settings.

        Args:
            config: SortConfig object to validate.

        Returns:
            List of error messages. Empty list if the configuration is valid.
        """
        errors: List[str] = []

        try:
            SortPolicy.from_string(str(config.policy))
        except ConfigurationError as e:
            errors.append(f"{e.config_key}: {e.message}")

        level = str(config.logging.get("level", "INFO")).upper()
        if level not in VALID_LOG_LEVELS:
            errors.append(f"logging.level: Unknown logging level: {level!r}")

        return errors


def configure_logging(config: Optional[SortConfig] = None) -> None:
    """Configure logging from the logging section of a config.

    Logs go to stderr with timestamp, logger name, level, and message.

    Args:
        config: Loaded configuration; INFO with the default format if None.

    Raises:
        ConfigurationError: If the configured level is unknown.
    """
    settings = config.logging if config is not None else {}
    level = str(settings.get("level", "INFO")).upper()

    if level not in VALID_LOG_LEVELS:
        raise ConfigurationError(
            f"Unknown logging level: {level!r}", config_key="logging.level"
        )

    logging.basicConfig(
        level=getattr(logging, level),
        format=settings.get("format", DEFAULT_LOG_FORMAT),
        handlers=[logging.StreamHandler(sys.stderr)],
    )
