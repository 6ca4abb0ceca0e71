"""
Runtime registry mapping content formats to manager classes.

The dispatch facade and vault alias resolution look managers up here, so a
new backend plugs in with `register_manager` without touching either.
"""

from __future__ import annotations

import logging
from typing import Optional

from configio.errors.errors import ConfigurationFileError
from configio.formats.base import FormatManager
from configio.formats.json_manager import JsonManager
from configio.formats.toml_manager import TomlManager
from configio.formats.xml_manager import XmlManager
from configio.formats.yaml_manager import YamlManager
from configio.types.formats import ContentFormat, Context

_LOGGER = logging.getLogger(__name__)

_MANAGERS: dict[ContentFormat, type[FormatManager]] = {
    ContentFormat.JSON: JsonManager,
    ContentFormat.YAML: YamlManager,
    ContentFormat.XML: XmlManager,
    ContentFormat.TOML: TomlManager,
}


def register_manager(fmt: ContentFormat | str, manager_cls: type[FormatManager]) -> None:
    """Install (or replace) the backend used for `fmt`."""
    if not (isinstance(manager_cls, type) and issubclass(manager_cls, FormatManager)):
        raise TypeError(f"{manager_cls!r} is not a FormatManager subclass")
    if fmt is None:
        # parse() would resolve None to the default (JSON)
        raise ValueError("register_manager needs an explicit content format")
    resolved = ContentFormat.parse(fmt)
    _MANAGERS[resolved] = manager_cls
    _LOGGER.debug(
        "format_manager_registered",
        extra={
            "event": "format_manager_registered",
            "format": resolved.value,
            "manager": manager_cls.__name__,
        },
    )


def unregister_manager(fmt: ContentFormat | str) -> None:
    _MANAGERS.pop(ContentFormat.parse(fmt), None)


def get_manager(
    fmt: ContentFormat | str | None, context: Optional[Context] = None
) -> type[FormatManager]:
    resolved = ContentFormat.parse(fmt, context)
    try:
        return _MANAGERS[resolved]
    except KeyError as exc:
        raise ConfigurationFileError(
            f"Unsupported content format: {resolved.value!r}",
            details=dict(context or {}),
        ) from exc


def available_formats() -> tuple[ContentFormat, ...]:
    return tuple(fmt for fmt in ContentFormat if fmt in _MANAGERS)
