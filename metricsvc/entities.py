"""Domain entities: metrics and their readings."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from .errors import BusinessRuleViolation
from .identifiers import MetricID, MetricReadingID


@dataclass(frozen=True)
class MetricEntity:
    """A named metric with its expected input frequency."""

    id: MetricID
    name: str
    input_frequency: timedelta

    @classmethod
    def create(cls, name: str, input_frequency: timedelta) -> MetricEntity:
        """Create a metric with a fresh identifier."""
        if not name.strip():
            raise BusinessRuleViolation("metric name cannot be empty")
        return cls(id=MetricID.generate(), name=name, input_frequency=input_frequency)


@dataclass(frozen=True)
class MetricReadingEntity:
    """One value recorded for a metric, stamped in UTC."""

    id: MetricReadingID
    metric_id: MetricID
    value: float
    timestamp: datetime

    @classmethod
    def create(
        cls, metric_id: MetricID, value: float, timestamp: datetime
    ) -> MetricReadingEntity:
        """Create a reading with a fresh identifier; the timestamp is moved to UTC."""
        if value < 0.0:
            raise BusinessRuleViolation("metric reading value cannot be below zero")
        if timestamp.tzinfo is None or timestamp.utcoffset() is None:
            raise ValueError("timestamp must carry a UTC offset")
        return cls(
            id=MetricReadingID.generate(),
            metric_id=metric_id,
            value=float(value),
            timestamp=timestamp.astimezone(timezone.utc),
        )