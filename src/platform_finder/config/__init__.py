from .manager import ConfigError, ConfigManager, validate_config_schema
from .release_files import DEFAULT_RELEASE_FILES, ReleaseFile

__all__ = [
    "ConfigError",
    "ConfigManager",
    "DEFAULT_RELEASE_FILES",
    "ReleaseFile",
    "validate_config_schema",
]
