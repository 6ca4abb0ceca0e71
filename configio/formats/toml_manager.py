from __future__ import annotations

import tomllib
from typing import Any, BinaryIO, Optional

import tomli_w

from configio.formats.base import READ_ERRORS, WRITE_ERRORS, FormatManager
from configio.types.formats import ContentFormat, Context
from configio.utils.utility import validate_as


class TomlManager(FormatManager):
    """
    TOML backend. tomllib has no streaming reader, so `read` buffers the whole
    stream into a string and decodes it the same way `read_str` does.
    Writes emit genuine TOML via tomli-w.

    TOML has no null and needs a table at the top level: writing None values
    or a bare list fails.
    """

    format = ContentFormat.TOML
    label = "TOML"

    def read(self, stream: BinaryIO, context: Optional[Context] = None, *, model: Any = Any) -> Any:
        try:
            return self._decode(stream.read().decode("utf-8"), model)
        except READ_ERRORS as err:
            raise self._read_error(err, context) from err

    def write(self, stream: BinaryIO, data: Any, context: Optional[Context] = None) -> None:
        try:
            plain = self._to_plain(data)
            if not isinstance(plain, dict):
                raise TypeError(f"TOML document must be a table, got {type(plain).__name__}")
            stream.write(tomli_w.dumps(plain).encode("utf-8"))
        except WRITE_ERRORS as err:
            raise self._write_error(err, context) from err

    @classmethod
    def read_str(cls, content: str, context: Optional[Context] = None, *, model: Any = Any) -> Any:
        try:
            return cls._decode(content, model)
        except READ_ERRORS as err:
            raise cls._content_error(err, context) from err

    @staticmethod
    def _decode(content: str, model: Any) -> Any:
        return validate_as(tomllib.loads(content), model)
