"""
configio: read and write configuration files in JSON, YAML, XML or TOML through
one interface, and resolve typed secrets out of a JSON vault file.

Usage:
    from configio import ContentFormat, read_config, write_config

    write_config("~/.config/app.yaml", ContentFormat.YAML, {"name": "x", "value": 1})
    cfg = read_config("~/.config/app.yaml", ContentFormat.YAML, {"env": "dev"}, model=AppConfig)
"""

from configio.config.config_loader import read_config, write_config
from configio.errors.errors import (
    INVALID_CONFIGURATION,
    ConfigioError,
    ConfigurationFileError,
    ErrorKind,
    VaultSecretError,
)
from configio.formats import (
    FormatManager,
    JsonManager,
    TomlManager,
    XmlManager,
    YamlManager,
    available_formats,
    get_manager,
    register_manager,
    unregister_manager,
)
from configio.types.formats import ContentFormat, Context
from configio.vault.vault import VaultConfig, VaultSecret, VaultSecrets

__all__ = [
    "INVALID_CONFIGURATION",
    "ConfigioError",
    "ConfigurationFileError",
    "ContentFormat",
    "Context",
    "ErrorKind",
    "FormatManager",
    "JsonManager",
    "TomlManager",
    "VaultConfig",
    "VaultSecret",
    "VaultSecretError",
    "VaultSecrets",
    "XmlManager",
    "YamlManager",
    "available_formats",
    "get_manager",
    "read_config",
    "register_manager",
    "unregister_manager",
    "write_config",
]
