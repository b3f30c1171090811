"""Time-ordered identifiers for metrics and metric readings."""

from __future__ import annotations

import re
import secrets
import threading
import time
import uuid
from dataclasses import dataclass

from .errors import DomainError, InvalidMetricID, InvalidMetricReadingID

_HYPHENATED = (
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)
_UUID_TEXT = re.compile(
    rf"urn:uuid:{_HYPHENATED}|\{{{_HYPHENATED}\}}|{_HYPHENATED}|[0-9a-fA-F]{{32}}"
)

_MS_MASK = (1 << 48) - 1
_COUNTER_MAX = 0xFFF


class _Uuid7Generator:
    """Produces version 7 UUIDs that sort in creation order within a process."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._last_ms = -1
        self._counter = 0

    def __call__(self) -> uuid.UUID:
        with self._lock:
            now_ms = time.time_ns() // 1_000_000
            if now_ms > self._last_ms:
                self._last_ms = now_ms
                # Start low enough to leave room for increments in this millisecond.
                self._counter = secrets.randbits(11)
            else:
                self._counter += 1
                if self._counter > _COUNTER_MAX:
                    self._last_ms += 1
                    self._counter = 0
            millis, counter = self._last_ms, self._counter
        value = (
            (millis & _MS_MASK) << 80
            | 0x7 << 76
            | counter << 64
            | 0b10 << 62
            | secrets.randbits(62)
        )
        return uuid.UUID(int=value)


_generator = _Uuid7Generator()


def new_uuid7() -> uuid.UUID:
    """Return a fresh, time-ordered version 7 UUID."""
    return _generator()


def _version_nibble(value: uuid.UUID) -> int:
    return (value.int >> 76) & 0xF


def _parse_uuid7(text: str, invalid: type[DomainError]) -> uuid.UUID:
    """Parse a version 7 UUID, raising ``invalid`` otherwise."""
    if not _UUID_TEXT.fullmatch(text):
        raise invalid(text)
    value = uuid.UUID(text)
    if _version_nibble(value) != 7:
        raise invalid(text)
    return value


@dataclass(frozen=True, order=True)
class MetricID:
    """Identifier of a metric."""

    value: uuid.UUID

    @classmethod
    def generate(cls) -> MetricID:
        """Create a new identifier from the current time."""
        return cls(new_uuid7())

    @classmethod
    def parse(cls, text: str) -> MetricID:
        """Parse a version 7 UUID, raising InvalidMetricID otherwise."""
        return cls(_parse_uuid7(text, InvalidMetricID))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, order=True)
class MetricReadingID:
    """Identifier of a metric reading."""

    value: uuid.UUID

    @classmethod
    def generate(cls) -> MetricReadingID:
        """Create a new identifier from the current time."""
        return cls(new_uuid7())

    @classmethod
    def parse(cls, text: str) -> MetricReadingID:
        """Parse a version 7 UUID, raising InvalidMetricReadingID otherwise."""
        return cls(_parse_uuid7(text, InvalidMetricReadingID))

    def __str__(self) -> str:
        return str(self.value)