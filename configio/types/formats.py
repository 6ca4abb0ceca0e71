from __future__ import annotations

from enum import Enum
from typing import Any, Mapping, Optional, TypeAlias

from configio.errors.errors import ConfigurationFileError

# Caller-supplied error context; opaque passthrough data attached to error details.
Context: TypeAlias = Mapping[str, Any]


class ContentFormat(str, Enum):
    """Supported content formats."""

    JSON = "json"
    YAML = "yaml"
    XML = "xml"
    TOML = "toml"

    @classmethod
    def default(cls) -> ContentFormat:
        return cls.JSON

    @classmethod
    def parse(
        cls,
        value: ContentFormat | str | None,
        context: Optional[Context] = None,
    ) -> ContentFormat:
        """
        Resolve a format selector. None means the default (JSON); strings are
        matched case-insensitively against member values.
        """
        if value is None:
            return cls.default()
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise ConfigurationFileError(
            f"Unsupported content format: {value!r}",
            details=dict(context or {}),
        )
