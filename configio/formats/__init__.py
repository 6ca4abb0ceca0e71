from configio.formats.base import FormatManager
from configio.formats.json_manager import JsonManager
from configio.formats.registry import (
    available_formats,
    get_manager,
    register_manager,
    unregister_manager,
)
from configio.formats.toml_manager import TomlManager
from configio.formats.xml_manager import XmlManager
from configio.formats.yaml_manager import YamlManager

__all__ = [
    "FormatManager",
    "JsonManager",
    "TomlManager",
    "XmlManager",
    "YamlManager",
    "available_formats",
    "get_manager",
    "register_manager",
    "unregister_manager",
]
