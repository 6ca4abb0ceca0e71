"""
Format manager contract.

A manager owns exactly one attribute (the file path) and implements the
format-specific parts (`read`, `write`, `read_str`). Opening/creating files
and the `read_config` / `write_config` compositions live here once.

Streams are binary: `open_file` returns a handle opened with "rb",
`create_file` one opened with "wb".
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, BinaryIO, ClassVar, Optional

from pydantic import ValidationError
from pydantic_core import to_jsonable_python

from configio.errors.errors import ConfigurationFileError
from configio.types.formats import ContentFormat, Context
from configio.utils.utility import extend_context, validation_error_parser

_LOGGER = logging.getLogger(__name__)

# Failures every backend translates into ConfigurationFileError. pydantic's
# ValidationError and the stdlib decode errors are ValueError subclasses.
READ_ERRORS: tuple[type[BaseException], ...] = (OSError, ValueError)
WRITE_ERRORS: tuple[type[BaseException], ...] = (OSError, ValueError, TypeError)


class FormatManager(ABC):
    """
    Uniform read/write/parse interface implemented once per content format.
    """

    # Backends may leave these unset: `label` then derives from the class name
    # ("IniManager" -> "INI") and `format` is left out of log records.
    format: ClassVar[Optional[ContentFormat]] = None
    label: ClassVar[str] = ""

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if not cls.label:
            cls.label = cls.__name__.removesuffix("Manager").upper() or cls.__name__

    def __init__(self, path: str) -> None:
        self._path = str(path)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(path={self._path!r})"

    @property
    def path(self) -> str:
        return self._path

    # --- files ---

    def open_file(self, context: Optional[Context] = None) -> BinaryIO:
        try:
            return open(self._path, "rb")
        except OSError as err:
            raise self._file_error(f"Failed to open file: {err}", err, context) from err

    def create_file(self, context: Optional[Context] = None) -> BinaryIO:
        try:
            return open(self._path, "wb")
        except OSError as err:
            raise self._file_error(f"Failed to create file: {err}", err, context) from err

    # --- format specific ---

    @abstractmethod
    def read(self, stream: BinaryIO, context: Optional[Context] = None, *, model: Any = Any) -> Any:
        """Decode `stream` into `model` (plain data when `model` is Any)."""

    @abstractmethod
    def write(self, stream: BinaryIO, data: Any, context: Optional[Context] = None) -> None:
        """Serialize `data` into `stream`."""

    @classmethod
    @abstractmethod
    def read_str(cls, content: str, context: Optional[Context] = None, *, model: Any = Any) -> Any:
        """Decode an in-memory document. Never touches the filesystem."""

    # --- compositions ---

    def read_config(self, context: Optional[Context] = None, *, model: Any = Any) -> Any:
        with self.open_file(context) as stream:
            return self.read(stream, context, model=model)

    def write_config(self, data: Any, context: Optional[Context] = None) -> Path:
        with self.create_file(context) as stream:
            self.write(stream, data, context)
        return Path(self._path)

    # --- error helpers ---

    def _file_error(
        self, message: str, err: BaseException, context: Optional[Context]
    ) -> ConfigurationFileError:
        details = extend_context(context, path=self._path, origin=str(err))
        if isinstance(err, ValidationError):
            details["validation_errors"] = validation_error_parser(err)
        _LOGGER.debug(
            "config_file_error",
            extra={
                "event": "config_file_error",
                "path": self._path,
                "format": self.format.value if self.format is not None else None,
                "manager": type(self).__name__,
                "error": message,
            },
        )
        return ConfigurationFileError(message, details=details)

    def _read_error(self, err: BaseException, context: Optional[Context]) -> ConfigurationFileError:
        return self._file_error(f"Invalid {self.label} file content: {err}", err, context)

    def _write_error(self, err: BaseException, context: Optional[Context]) -> ConfigurationFileError:
        return self._file_error(f"Failed to write {self.label} file: {err}", err, context)

    @classmethod
    def _content_error(cls, err: BaseException, context: Optional[Context]) -> ConfigurationFileError:
        details = extend_context(context, origin=str(err))
        if isinstance(err, ValidationError):
            details["validation_errors"] = validation_error_parser(err)
        return ConfigurationFileError(f"Invalid {cls.label} content: {err}", details=details)

    @staticmethod
    def _to_plain(data: Any) -> Any:
        # pydantic models, dataclasses, enums, paths, datetimes -> plain data
        return to_jsonable_python(data)
