from __future__ import annotations

import struct
import sys
from pathlib import Path
from typing import Callable

import pytest


def pytest_configure(config: pytest.Config) -> None:
    # Prefer the checkout over any installed copy of the package.
    root_str = str(Path(__file__).resolve().parents[1])
    if root_str not in sys.path:
        sys.path.insert(0, root_str)


@pytest.fixture
def m64_buffer() -> Callable[..., bytes]:
    """Build a raw movie: a zeroed header with the given controller flags, then the records."""
    from m64edit.layout import HEADER_SIZE

    def build(controller_flags: int, records: list[int] | None = None, header_size: int = HEADER_SIZE) -> bytes:
        buffer = bytearray(header_size)
        if header_size >= 0x24:
            struct.pack_into("<I", buffer, 0x20, controller_flags)
        for record in records or []:
            buffer += struct.pack("<I", record)
        return bytes(buffer)

    return build


@pytest.fixture
def log_messages():
    from m64edit import log

    messages: list[log.LogMessage] = []
    log.subscribers.append((messages.append, log.LogLevel.DEBUG))
    yield messages
    log.unsubscribe(messages.append)


@pytest.fixture(autouse=True)
def default_config(monkeypatch: pytest.MonkeyPatch) -> None:
    from m64edit import config

    monkeypatch.setattr(config, "strict_ascii", False)
