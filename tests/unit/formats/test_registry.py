import io
import logging

import pytest

from configio.errors.errors import ConfigurationFileError
from configio.formats import (
    JsonManager,
    TomlManager,
    XmlManager,
    YamlManager,
    available_formats,
    get_manager,
    register_manager,
    unregister_manager,
)
from configio.types.formats import ContentFormat


class UpperJsonManager(JsonManager):
    """Test backend: JSON with upper-cased string values."""

    @classmethod
    def read_str(cls, content, context=None, *, model=None):
        data = super().read_str(content, context)
        return {k: v.upper() if isinstance(v, str) else v for k, v in data.items()}


def test_builtin_formats_are_registered():
    assert available_formats() == (
        ContentFormat.JSON,
        ContentFormat.YAML,
        ContentFormat.XML,
        ContentFormat.TOML,
    )
    assert get_manager(ContentFormat.JSON) is JsonManager
    assert get_manager("yaml") is YamlManager
    assert get_manager("XML") is XmlManager
    assert get_manager(ContentFormat.TOML) is TomlManager


def test_get_manager_defaults_to_json():
    assert get_manager(None) is JsonManager


def test_get_manager_unknown_format():
    with pytest.raises(ConfigurationFileError) as exc:
        get_manager("ini", {"env": "dev"})

    assert "Unsupported content format" in str(exc.value)
    assert exc.value.details == {"env": "dev"}


def test_register_replaces_backend(isolated_registry, caplog):
    with caplog.at_level(logging.DEBUG, logger="configio.formats.registry"):
        register_manager(ContentFormat.JSON, UpperJsonManager)

    assert get_manager(ContentFormat.JSON) is UpperJsonManager
    assert UpperJsonManager.read_str('{"a": "b"}') == {"a": "B"}
    assert any(getattr(r, "event", None) == "format_manager_registered" for r in caplog.records)


def test_register_rejects_non_manager(isolated_registry):
    with pytest.raises(TypeError):
        register_manager(ContentFormat.YAML, dict)  # type: ignore[arg-type]


def test_unregistered_format_is_unsupported(isolated_registry):
    unregister_manager("xml")

    assert ContentFormat.XML not in available_formats()
    with pytest.raises(ConfigurationFileError):
        get_manager(ContentFormat.XML)


def test_registered_backend_is_used_for_streams(isolated_registry):
    register_manager("toml", UpperJsonManager)

    manager = get_manager("toml")("cfg.toml")

    assert manager.read(io.BytesIO(b'{"a": 1}')) == {"a": 1}


def test_register_rejects_missing_format(isolated_registry):
    with pytest.raises(ValueError):
        register_manager(None, UpperJsonManager)  # type: ignore[arg-type]

    assert get_manager(ContentFormat.JSON) is JsonManager
