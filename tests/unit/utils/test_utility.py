from pathlib import Path
from typing import Any

import pytest
from pydantic import BaseModel, ValidationError

from configio.utils.utility import (
    expand_path,
    extend_context,
    type_adapter,
    validate_as,
    validation_error_parser,
)


class Point(BaseModel):
    x: int
    y: int


def test_extend_context_never_mutates_caller_mapping():
    ctx = {"env": "dev", "nested": {"a": 1}}

    out = extend_context(ctx, path="cfg.json")
    out["nested"]["a"] = 99

    assert ctx == {"env": "dev", "nested": {"a": 1}}
    assert out["path"] == "cfg.json"
    assert out["env"] == "dev"


def test_extend_context_accepts_none():
    assert extend_context(None, origin="boom") == {"origin": "boom"}


def test_expand_path_only_expands_leading_tilde(monkeypatch, tmp_path: Path):
    monkeypatch.setenv("HOME", str(tmp_path))

    assert expand_path("~/app.json") == str(tmp_path / "app.json")
    assert expand_path("cfg/~/app.json") == "cfg/~/app.json"
    assert expand_path(Path("relative.json")) == "relative.json"


def test_validate_as_any_returns_data_untouched():
    data = {"x": "1"}
    assert validate_as(data) is data
    assert validate_as(data, Any) is data


def test_validate_as_model_and_generic_types():
    assert validate_as({"x": "1", "y": 2}, Point) == Point(x=1, y=2)
    assert validate_as(["1", "2"], list[int]) == [1, 2]


def test_validation_error_parser_flattens_locations():
    with pytest.raises(ValidationError) as exc:
        validate_as({"x": "nope"}, Point)

    parsed = validation_error_parser(exc.value)
    paths = {item["path"] for item in parsed}
    assert paths == {"x", "y"}
    assert all(set(item) == {"path", "message", "error_type", "input_type"} for item in parsed)


def test_validation_error_parser_reports_input_type_not_value():
    with pytest.raises(ValidationError) as exc:
        validate_as({"x": "hunter2", "y": 1}, Point)

    (item,) = validation_error_parser(exc.value)

    assert item == {
        "path": "x",
        "message": item["message"],
        "error_type": "int_parsing",
        "input_type": "str",
    }
    assert "hunter2" not in repr(item)


def test_validation_error_parser_root_level_failure():
    with pytest.raises(ValidationError) as exc:
        validate_as("not a point", Point)

    (item,) = validation_error_parser(exc.value)

    assert item["path"] == "$"
    assert item["input_type"] == "str"


def test_type_adapter_is_cached_for_hashable_models():
    assert type_adapter(Point) is type_adapter(Point)
    assert type_adapter(list[int]).validate_python(["1"]) == [1]
