"""
Purpose:
    - Read a configuration file into plain data or a typed model
    - Write data to a configuration file

The format is chosen by the caller (default JSON); the file suffix is never
inspected. A leading "~" in the path is expanded to the user's home.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Optional

from configio.formats.registry import get_manager
from configio.types.formats import ContentFormat, Context
from configio.utils.utility import expand_path, extend_context

_LOGGER = logging.getLogger(__name__)


def read_config(
    path: str | os.PathLike[str],
    format: ContentFormat | str | None = None,
    context: Optional[Context] = None,
    *,
    model: Any = Any,
) -> Any:
    resolved_path = expand_path(path)
    # format errors raised before a manager exists still name the file
    error_context = extend_context(context, path=resolved_path)
    fmt = ContentFormat.parse(format, error_context)
    _LOGGER.info(
        "config_read",
        extra={"event": "config_read", "path": resolved_path, "format": fmt.value},
    )
    manager = get_manager(fmt, error_context)(resolved_path)
    return manager.read_config(context, model=model)


def write_config(
    path: str | os.PathLike[str],
    format: ContentFormat | str | None = None,
    data: Any = None,
    context: Optional[Context] = None,
) -> Path:
    resolved_path = expand_path(path)
    error_context = extend_context(context, path=resolved_path)
    fmt = ContentFormat.parse(format, error_context)
    _LOGGER.info(
        "config_write",
        extra={"event": "config_write", "path": resolved_path, "format": fmt.value},
    )
    manager = get_manager(fmt, error_context)(resolved_path)
    return manager.write_config(data, context)
