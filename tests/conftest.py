"""
Shared test fixtures.
"""

from __future__ import annotations

import io
from typing import Any

import pytest

from configio.formats import registry


class BrokenWriter(io.RawIOBase):
    """Binary stream whose writes always fail."""

    def writable(self) -> bool:
        return True

    def write(self, _buf: Any) -> int:
        raise OSError("write failed")


@pytest.fixture
def sample_context() -> dict[str, Any]:
    return {"env": "dev", "tags": {"team": "platform"}}


@pytest.fixture
def broken_writer() -> BrokenWriter:
    return BrokenWriter()


@pytest.fixture
def isolated_registry(monkeypatch):
    """Let a test register/unregister managers without leaking into others."""
    monkeypatch.setattr(registry, "_MANAGERS", dict(registry._MANAGERS))
    return registry
