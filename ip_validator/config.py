"""
IPValidator Configuration Module

Centralized configuration management using INI-style config.conf file.

Configuration precedence (highest to lowest):
1. Environment variables (IPV_* for settings, IPVALIDATOR_* for paths)
2. config.conf file (INI format)
3. Default values

Config file search locations (first found wins):
1. Path specified in IPVALIDATOR_CONFIG_FILE environment variable
2. /etc/ipvalidator/config.conf (system-wide)
3. ~/.local/share/ipvalidator/config.conf (user-specific, XDG standard)
4. ./config.conf (current directory)
5. Built-in defaults (if no config file found)

The validators in ip_validator.core never read configuration; only the
CLI and regression harness do.

Author: IPValidator Project
License: GNU GPL v3
"""

from pydantic_settings import BaseSettings
from pydantic import Field, model_validator
from typing import Optional
from pathlib import Path
import logging
import os
import warnings
import configparser


# INI sections mapped to IPV_* keys ([paths] maps to IPVALIDATOR_*)
SETTING_SECTIONS = ['validation', 'output', 'logs']


def find_config_file() -> Optional[Path]:
    """
    Search for config.conf in standard locations.

    Returns:
        Path to config file if found, None otherwise
    """
    # Priority 1: Environment variable override
    env_config = os.environ.get('IPVALIDATOR_CONFIG_FILE')
    if env_config:
        path = Path(env_config)
        if path.exists():
            return path
        warnings.warn(f"IPVALIDATOR_CONFIG_FILE={env_config} does not exist")

    # Priority 2-4: Standard locations
    search_paths = [
        Path('/etc/ipvalidator/config.conf'),
        Path.home() / '.local' / 'share' / 'ipvalidator' / 'config.conf',
        Path('config.conf'),
    ]

    for path in search_paths:
        if path.exists():
            return path

    return None


def load_config_file() -> dict:
    """
    Load configuration from config.conf file.

    Returns:
        Flat dictionary keyed by IPV_* / IPVALIDATOR_* names
    """
    logger = logging.getLogger(__name__)
    config_file = find_config_file()

    if not config_file:
        logger.debug("No config.conf file found. Using environment variables and defaults.")
        return {}

    parser = configparser.ConfigParser(
        interpolation=configparser.ExtendedInterpolation()
    )

    try:
        parser.read(config_file)
        logger.debug(f"Loaded configuration from: {config_file}")
    except configparser.Error as e:
        logger.warning(f"Failed to parse {config_file}: {e}. Using defaults.")
        return {}

    config = {}

    # Paths section -> IPVALIDATOR_* keys
    if parser.has_section('paths'):
        for key, value in parser.items('paths'):
            # Strip inline comments (anything after #)
            value = value.split('#')[0].strip()
            config[f'IPVALIDATOR_{key.upper()}'] = os.path.expanduser(value)

    # All other sections -> IPV_* keys
    for section in SETTING_SECTIONS:
        if parser.has_section(section):
            for key, value in parser.items(section):
                value = value.split('#')[0].strip()
                config[f'IPV_{key.upper()}'] = value

    return config


def _parse_bool(value: str, field_name: str = "field") -> bool:
    """
    Parse boolean value from string with validation.

    Args:
        value: String value to parse
        field_name: Name of field for error messages

    Returns:
        Boolean value

    Raises:
        ValueError: If value is not a valid boolean string
    """
    value_lower = value.lower().strip()
    if value_lower in ('true', '1', 'yes', 'on'):
        return True
    elif value_lower in ('false', '0', 'no', 'off', ''):
        return False
    else:
        raise ValueError(
            f"Invalid boolean value for {field_name}: '{value}'. "
            f"Use: true/false, 1/0, yes/no, on/off"
        )


def _get_from_sources(key: str, config_dict: dict, env_prefix: str = 'IPV_') -> Optional[str]:
    """
    Get configuration value from multiple sources with precedence.

    Args:
        key: Configuration key (lowercase with underscores)
        config_dict: Configuration from config.conf file
        env_prefix: Environment variable prefix

    Returns:
        Configuration value or None
    """
    env_key = f"{env_prefix}{key.upper()}"

    # Priority 1: Environment variable
    env_value = os.environ.get(env_key)
    if env_value is not None:
        return env_value

    # Priority 2: Config file
    file_value = config_dict.get(env_key)
    if file_value is not None:
        return file_value

    # Priority 3: None (will use pydantic default)
    return None


def _xdg_state_base() -> Path:
    """Get XDG state directory for ipvalidator"""
    base = os.environ.get('XDG_STATE_HOME')
    if base:
        return Path(base) / 'ipvalidator'
    return Path.home() / '.local' / 'state' / 'ipvalidator'


class ValidatorConfig(BaseSettings):
    """
    Main configuration with validation.

    Configuration is loaded from:
    1. Environment variables (highest priority)
    2. config.conf file
    3. Default values (lowest priority)
    """

    # === Directory Paths ===
    logs_dir: str = Field(
        default="",
        description="Directory for application logs"
    )

    # === Validation Policy ===
    allow_leading_zeros: bool = Field(
        default=True,
        description="Accept zero-padded IPv4 octets such as 192.001.002.003"
    )

    # === Output ===
    color_output: bool = True
    verbose: bool = False

    # === Log Settings ===
    log_to_file: bool = False
    log_max_bytes: int = 10485760  # 10MB default
    log_backup_count: int = 5

    model_config = {
        'env_prefix': 'IPV_',
        'case_sensitive': False
    }

    @model_validator(mode='after')
    def resolve_settings(self):
        """Apply config.conf values that environment variables did not override"""
        logger = logging.getLogger(__name__)

        config_dict = load_config_file()

        if not self.logs_dir:
            value = _get_from_sources('logs_dir', config_dict, 'IPVALIDATOR_')
            self.logs_dir = value if value else str(_xdg_state_base() / 'logs')

        # Pydantic only reads from environment variables by default.
        # Values from config_dict must be applied explicitly.
        for field in ('allow_leading_zeros', 'color_output', 'verbose', 'log_to_file'):
            value_str = _get_from_sources(field, config_dict)
            if value_str is not None:
                try:
                    setattr(self, field, _parse_bool(value_str, field))
                except ValueError as e:
                    logger.warning(str(e))

        for field in ('log_max_bytes', 'log_backup_count'):
            value_str = _get_from_sources(field, config_dict)
            if value_str:
                try:
                    setattr(self, field, int(value_str))
                except ValueError:
                    logger.warning(f"Invalid integer value for {field}: {value_str}")

        return self

    def get_logs_dir(self) -> Path:
        """Get logs directory path"""
        return Path(self.logs_dir)

    def ensure_logs_dir(self) -> Path:
        """Create the logs directory if it doesn't exist"""
        path = self.get_logs_dir()
        if not path.exists():
            path.mkdir(parents=True, exist_ok=True)
            # mkdir(mode=X) is subject to umask with parents=True
            path.chmod(0o750)
            logging.getLogger(__name__).debug(f"Created logs directory: {path}")
        return path


# Global configuration instance (singleton pattern)
_config_instance = None


def get_config() -> ValidatorConfig:
    """
    Get global configuration instance with lazy initialization.

    Ensures configuration is loaded once and shared across modules.
    """
    global _config_instance
    if _config_instance is None:
        _config_instance = ValidatorConfig()
    return _config_instance


def reset_config():
    """Drop the cached configuration so the next get_config() reloads it."""
    global _config_instance
    _config_instance = None
