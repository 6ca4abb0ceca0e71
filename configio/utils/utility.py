import copy
import os
from functools import lru_cache
from typing import Any, Mapping, Optional

from pydantic import ValidationError
from pydantic.type_adapter import TypeAdapter


def extend_context(context: Optional[Mapping[str, Any]], **extra: Any) -> dict[str, Any]:
    """
    Copy-on-extend: returns a new dict holding the caller's keys plus `extra`.
    The caller's mapping (and anything nested in it) is never mutated.
    """
    out: dict[str, Any] = copy.deepcopy(dict(context or {}))
    out.update(extra)
    return out


def expand_path(path: str | os.PathLike[str]) -> str:
    # Only a leading "~" is expanded; no other normalization.
    return os.path.expanduser(os.fspath(path))


@lru_cache(maxsize=256)
def _adapter(model: Any) -> TypeAdapter:
    return TypeAdapter(model)


def type_adapter(model: Any) -> TypeAdapter:
    """Cached TypeAdapter for `model`; unhashable annotations skip the cache."""
    try:
        hash(model)
    except TypeError:
        return TypeAdapter(model)
    return _adapter(model)


def validate_as(data: Any, model: Any = Any) -> Any:
    """
    Validate decoded document data into the caller's target type.

    `model=Any` returns the data untouched. Raises pydantic's ValidationError
    (a ValueError) on mismatch; nothing partially built is returned.
    """
    if model is Any:
        return data
    return type_adapter(model).validate_python(data)


def validation_error_parser(error: ValidationError) -> list[dict[str, Any]]:
    """
    Flatten a pydantic ValidationError into error details: one entry per
    failure, with the dotted field path ("$" for the document itself) and the
    type name of the rejected input rather than its value.
    """
    return [
        {
            "path": ".".join(map(str, err["loc"])) or "$",
            "message": err["msg"],
            "error_type": err["type"],
            "input_type": type(err.get("input")).__name__,
        }
        for err in error.errors(include_url=False, include_input=True)
    ]
