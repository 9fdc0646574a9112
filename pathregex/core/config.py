"""Configuration management for pathregex.

Settings live in an optional INI file in the user's home directory and
can be overridden per invocation through environment variables.
"""

import os
import configparser
from pathlib import Path
from typing import Optional


TRUE_VALUES = ('1', 'true', 'yes', 'on')
FALSE_VALUES = ('0', 'false', 'no', 'off')


class Config:
    """
    Reads pathregex configuration.

    Priority order (highest to lowest):
    1. Environment variables (PATHREGEX_<SECTION>_<KEY>)
    2. Global config file (~/.pathregexconfig)
    3. Fallback value
    """

    GLOBAL_CONFIG_PATH = Path.home() / '.pathregexconfig'

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize Config reader.

        Args:
            config_path: Config file to read instead of the global one
        """
        self.config_path = config_path or self.GLOBAL_CONFIG_PATH
        self._config = None

    @property
    def config(self) -> configparser.ConfigParser:
        """Load and return the file configuration."""
        if self._config is None:
            self._config = configparser.ConfigParser()
            if self.config_path.exists():
                self._config.read(self.config_path)
        return self._config

    def get(self, section: str, key: str, fallback: Optional[str] = None) -> Optional[str]:
        """
        Get a configuration value.

        Args:
            section: Config section (e.g., 'color', 'core')
            key: Config key (e.g., 'ui', 'verbose')
            fallback: Default value if not found

        Returns:
            Configuration value or fallback
        """
        env_key = f"PATHREGEX_{section.upper()}_{key.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is not None:
            return env_value

        if self.config.has_option(section, key):
            return self.config.get(section, key)

        return fallback

    def get_bool(self, section: str, key: str, fallback: bool = False) -> bool:
        """Get a boolean value; unrecognised values yield the fallback."""
        value = self.get(section, key)
        if value is None:
            return fallback
        value = value.strip().lower()
        if value in TRUE_VALUES:
            return True
        if value in FALSE_VALUES:
            return False
        return fallback
