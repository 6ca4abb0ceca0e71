from __future__ import annotations

from typing import Any, BinaryIO, Optional

import yaml

from configio.formats.base import READ_ERRORS, WRITE_ERRORS, FormatManager
from configio.types.formats import ContentFormat, Context
from configio.utils.utility import validate_as


class YamlManager(FormatManager):
    """YAML backend (PyYAML safe loader/dumper)."""

    format = ContentFormat.YAML
    label = "YAML"

    def read(self, stream: BinaryIO, context: Optional[Context] = None, *, model: Any = Any) -> Any:
        try:
            return validate_as(yaml.safe_load(stream), model)
        except (yaml.YAMLError, *READ_ERRORS) as err:
            raise self._read_error(err, context) from err

    def write(self, stream: BinaryIO, data: Any, context: Optional[Context] = None) -> None:
        try:
            yaml.safe_dump(
                self._to_plain(data),
                stream,
                encoding="utf-8",
                allow_unicode=True,
                sort_keys=False,
            )
        except (yaml.YAMLError, *WRITE_ERRORS) as err:
            raise self._write_error(err, context) from err

    @classmethod
    def read_str(cls, content: str, context: Optional[Context] = None, *, model: Any = Any) -> Any:
        try:
            return validate_as(yaml.safe_load(content), model)
        except (yaml.YAMLError, *READ_ERRORS) as err:
            raise cls._content_error(err, context) from err
