"""YAML configuration loading and validation.

This module loads the optional ``.devto-sync.yaml`` settings file. Every
setting has a default, so a missing default file simply yields the
default configuration.
"""

import os
from typing import Any, Dict, Optional
import yaml

from .errors import ConfigError, FilesystemError
from .models import SyncConfig


class ConfigLoader:
    """Handles configuration file loading and validation.

    Configuration file structure:
        api_url: "https://dev.to/api"
        per_page: 1000
        max_retries: 3
        retry_backoff: 1.0
        timeout: 30
        title_width: 50
    """

    DEFAULT_CONFIG_FILE = '.devto-sync.yaml'

    # Environment variable overriding api_url
    API_URL_ENV_VAR = 'DEVTO_API_URL'

    INT_FIELDS = ('per_page', 'max_retries', 'title_width')
    NUMBER_FIELDS = ('retry_backoff', 'timeout')
    KNOWN_FIELDS = {'api_url', *INT_FIELDS, *NUMBER_FIELDS}

    @classmethod
    def load(cls, config_path: Optional[str] = None) -> SyncConfig:
        """Load and parse configuration from a YAML file.

        Args:
            config_path: Path to the YAML configuration file. When None the
                default file is used if present.

        Returns:
            SyncConfig object with parsed configuration

        Raises:
            FilesystemError: If the file cannot be read
            ConfigError: If configuration is invalid or malformed
        """
        path = config_path
        if path is None:
            path = cls.DEFAULT_CONFIG_FILE
            if not os.path.exists(path):
                return cls._apply_env(SyncConfig())

        try:
            with open(path, 'r', encoding='utf-8') as f:
                content = f.read()
        except PermissionError:
            raise FilesystemError(
                path,
                'read',
                'Permission denied'
            )
        except Exception as e:
            raise FilesystemError(
                path,
                'read',
                str(e)
            )

        try:
            config_dict = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(
                f"Invalid YAML syntax: {str(e)}"
            )

        if config_dict is None:
            config_dict = {}

        if not isinstance(config_dict, dict):
            raise ConfigError(
                f"Configuration must be a YAML dictionary, got {type(config_dict).__name__}"
            )

        return cls._apply_env(cls._parse_config(config_dict))

    @classmethod
    def _parse_config(cls, config_dict: Dict[str, Any]) -> SyncConfig:
        """Parse and validate configuration dictionary.

        Raises:
            ConfigError: If configuration is invalid
        """
        unknown = set(config_dict) - cls.KNOWN_FIELDS
        if unknown:
            raise ConfigError(
                f"Unknown fields: {', '.join(sorted(unknown))}"
            )

        values: Dict[str, Any] = {}

        if 'api_url' in config_dict:
            api_url = config_dict['api_url']
            if not isinstance(api_url, str) or not api_url.strip():
                raise ConfigError("must be a non-empty string", 'api_url')
            if not api_url.startswith(('http://', 'https://')):
                raise ConfigError("must be an http(s) URL", 'api_url')
            values['api_url'] = api_url.strip().rstrip('/')

        for name in cls.INT_FIELDS:
            if name in config_dict:
                value = config_dict[name]
                if isinstance(value, bool) or not isinstance(value, int):
                    raise ConfigError("must be an integer", name)
                if value < 0 or (value == 0 and name != 'max_retries'):
                    raise ConfigError("must be positive", name)
                values[name] = value

        for name in cls.NUMBER_FIELDS:
            if name in config_dict:
                value = config_dict[name]
                if isinstance(value, bool) or not isinstance(value, (int, float)):
                    raise ConfigError("must be a number", name)
                if value < 0 or (value == 0 and name == 'timeout'):
                    raise ConfigError("must be positive", name)
                values[name] = value

        return SyncConfig(**values)

    @classmethod
    def _apply_env(cls, config: SyncConfig) -> SyncConfig:
        api_url = os.getenv(cls.API_URL_ENV_VAR)
        if api_url and api_url.strip():
            config.api_url = api_url.strip().rstrip('/')
        return config
