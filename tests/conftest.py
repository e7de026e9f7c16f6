import re
import sys
import types
import typing as t
from datetime import datetime

import pytest

from taglog import core, sinks
from taglog.formatters import ConsoleFormatter
from taglog.records import LogRecord
from taglog.sinks import BaseSink

FIXED_NOW = datetime(2024, 1, 2, 3, 4, 5, 678901)

_ANSI = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    return _ANSI.sub("", text)


class RecordingSink(BaseSink):
    """Keeps every record it receives, in order."""

    def __init__(self) -> None:
        super().__init__(ConsoleFormatter(use_color=False))
        self.records: list[LogRecord] = []
        self.closed = False

    def emit(self, record: LogRecord) -> None:
        with self._lock:
            self.records.append(record)

    def close(self) -> None:
        self.closed = True


class FailingSink(BaseSink):
    def __init__(self) -> None:
        super().__init__(ConsoleFormatter())

    def emit(self, record: LogRecord) -> None:
        raise RuntimeError("sink is down")

    def close(self) -> None:
        raise RuntimeError("sink is down")


class _FrozenDatetime(datetime):
    @classmethod
    def now(cls, tz=None):  # type: ignore[override]
        return FIXED_NOW


@pytest.fixture
def frozen_now(monkeypatch) -> datetime:
    """Pin the dispatcher clock."""
    monkeypatch.setattr(core, "datetime", _FrozenDatetime)
    return FIXED_NOW


@pytest.fixture
def recording_sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def fake_syslog(monkeypatch) -> types.SimpleNamespace:
    """Replace the syslog module with a recorder."""
    calls: list[tuple[t.Any, ...]] = []
    fake = types.SimpleNamespace(
        LOG_PID=0x01,
        LOG_USER=8,
        calls=calls,
        openlog=lambda *args, **kwargs: calls.append(("openlog", args, kwargs)),
        syslog=lambda priority, message: calls.append(("syslog", priority, message)),
        closelog=lambda: calls.append(("closelog",)),
    )
    monkeypatch.setitem(sys.modules, "syslog", fake)
    monkeypatch.setattr(sinks, "_syslog_openers", 0)
    return fake


@pytest.fixture(autouse=True)
def reset_process_logger():
    """Each test starts without a process-wide logger."""
    core.set_logger(None)
    yield
    core.set_logger(None)
