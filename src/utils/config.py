"""
Configuration management for the Scale Compare application.

This module handles:
- Data directory configuration (where the JSON resources live)
- Supported languages and the user's locale
- Number formatting settings

Environment variables:
    SCALE_COMPARE_DATA_DIR: Directory holding units.json, labels.json and
        objects.json (default: the project's data/ directory)
    SCALE_COMPARE_LANGUAGES: Comma separated language codes (default: EN,FR)
    SCALE_COMPARE_LANG: Preferred language or locale (default: LANG, then
        the system locale)
"""

import locale
import logging
import os
from pathlib import Path
from typing import List, Mapping, Optional

from src.utils.constants import (
    APP_NAME,
    APP_VERSION,
    DEFAULT_SIGNIFICANT_DIGITS,
    LABELS_FILENAME,
    OBJECTS_FILENAME,
    SUPPORTED_LANGUAGES,
    UNITS_FILENAME,
)

logger = logging.getLogger(__name__)

ENV_DATA_DIR = "SCALE_COMPARE_DATA_DIR"
ENV_LANGUAGES = "SCALE_COMPARE_LANGUAGES"
ENV_LANG = "SCALE_COMPARE_LANG"


class Config:
    """
    Application configuration manager.

    Values are read from the environment once, at construction.
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        """
        Initialize configuration.

        Args:
            environ: Environment mapping to read from (defaults to os.environ)
        """
        env = os.environ if environ is None else environ
        self._app_name = APP_NAME
        self._app_version = APP_VERSION

        data_dir = env.get(ENV_DATA_DIR)
        self._data_dir = Path(data_dir) if data_dir else self._get_project_data_dir()

        languages = env.get(ENV_LANGUAGES)
        if languages:
            self._languages = [code.strip().upper() for code in languages.split(",") if code.strip()]
        else:
            self._languages = list(SUPPORTED_LANGUAGES)

        self._user_locale = env.get(ENV_LANG) or env.get("LANG") or self._get_system_locale()
        self._significant_digits = DEFAULT_SIGNIFICANT_DIGITS

    def _get_project_data_dir(self) -> Path:
        """
        Get the project's data directory.

        Returns:
            Path to project data/ directory
        """
        # src/utils/config.py -> project root
        project_root = Path(__file__).parent.parent.parent
        return project_root / "data"

    def _get_system_locale(self) -> Optional[str]:
        """Locale reported by the operating system, if any."""
        try:
            return locale.getlocale()[0]
        except ValueError:
            return None

    @property
    def app_name(self) -> str:
        """Application name."""
        return self._app_name

    @property
    def app_version(self) -> str:
        """Application version."""
        return self._app_version

    @property
    def data_dir(self) -> Path:
        """Directory holding the JSON resources."""
        return self._data_dir

    @property
    def units_path(self) -> Path:
        """Path to the units resource."""
        return self._data_dir / UNITS_FILENAME

    @property
    def labels_path(self) -> Path:
        """Path to the labels resource."""
        return self._data_dir / LABELS_FILENAME

    @property
    def objects_path(self) -> Path:
        """Path to the objects resource."""
        return self._data_dir / OBJECTS_FILENAME

    @property
    def languages(self) -> List[str]:
        """Supported language codes; the first one is the fallback."""
        return list(self._languages)

    @property
    def user_locale(self) -> Optional[str]:
        """User locale signal used to pick the initial language."""
        return self._user_locale

    @property
    def significant_digits(self) -> int:
        """Significant digits used when formatting sizes."""
        return self._significant_digits

    def __repr__(self) -> str:
        """String representation of config."""
        return f"Config(data_dir='{self._data_dir}', languages={self._languages})"


# Global configuration instance
_config_instance: Optional[Config] = None


def get_config() -> Config:
    """
    Get the global configuration instance.

    Returns:
        Config instance (created on first call)
    """
    global _config_instance

    if _config_instance is None:
        _config_instance = Config()
        logger.debug(f"Configuration loaded: {_config_instance!r}")

    return _config_instance


def reset_config():
    """
    Reset the global configuration instance.

    Useful for testing.
    """
    global _config_instance
    _config_instance = None
