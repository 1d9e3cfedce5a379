"""serverconf — load, merge, and validate server configuration files."""

from serverconf.l1_entities.config import Config, ServerConfig
from serverconf.l1_entities.config_format import ConfigFormat
from serverconf.l1_entities.errors import (
    ConfigDecodeError,
    ConfigError,
    ConfigIOError,
    ConfigValidationError,
    InvalidFileTypeError,
)
from serverconf.l1_entities.violation import Violation
from serverconf.l2_use_cases.validate_config_use_case import (
    check_config,
    check_server_config,
    validate_config,
    validate_server_config,
)
from serverconf.l4_frameworks_and_drivers.config import default_config
from serverconf.l4_frameworks_and_drivers.container import load_from_file

__version__ = '0.1.0'

__all__ = [
    'Config',
    'ConfigDecodeError',
    'ConfigError',
    'ConfigFormat',
    'ConfigIOError',
    'ConfigValidationError',
    'InvalidFileTypeError',
    'ServerConfig',
    'Violation',
    'check_config',
    'check_server_config',
    'default_config',
    'load_from_file',
    'validate_config',
    'validate_server_config',
]
