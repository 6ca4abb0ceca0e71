from __future__ import annotations

import json
from typing import Any, BinaryIO, Optional

from configio.formats.base import READ_ERRORS, WRITE_ERRORS, FormatManager
from configio.types.formats import ContentFormat, Context
from configio.utils.utility import validate_as


class JsonManager(FormatManager):
    """JSON backend (stdlib json); writes are pretty-printed with a 2-space indent."""

    format = ContentFormat.JSON
    label = "JSON"

    def read(self, stream: BinaryIO, context: Optional[Context] = None, *, model: Any = Any) -> Any:
        try:
            return validate_as(json.load(stream), model)
        except READ_ERRORS as err:
            raise self._read_error(err, context) from err

    def write(self, stream: BinaryIO, data: Any, context: Optional[Context] = None) -> None:
        try:
            payload = json.dumps(self._to_plain(data), indent=2, ensure_ascii=False)
            stream.write(payload.encode("utf-8"))
        except WRITE_ERRORS as err:
            raise self._write_error(err, context) from err

    @classmethod
    def read_str(cls, content: str, context: Optional[Context] = None, *, model: Any = Any) -> Any:
        try:
            return validate_as(json.loads(content), model)
        except READ_ERRORS as err:
            raise cls._content_error(err, context) from err
