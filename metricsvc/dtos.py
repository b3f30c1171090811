"""Request and response payloads for the HTTP interface."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Mapping

from .entities import MetricEntity, MetricReadingEntity
from .errors import InvalidTimestamp
from .http_errors import EmptyField, NegativeField
from .identifiers import MetricID

_U64_MAX = (1 << 64) - 1

_RFC3339 = re.compile(
    r"([0-9]{4})-([0-9]{2})-([0-9]{2})[Tt]([0-9]{2}):([0-9]{2}):([0-9]{2})"
    r"(?:\.([0-9]+))?(?:([Zz])|([+-])([0-9]{2}):([0-9]{2}))"
)


def format_timestamp(value: datetime) -> str:
    """Render an aware datetime in UTC as ``YYYY-MM-DD H:MM:SS.f +00``."""
    if value.tzinfo is None or value.utcoffset() is None:
        raise ValueError("timestamp must carry a UTC offset")
    utc = value.astimezone(timezone.utc)
    fraction = f"{utc.microsecond * 1000:09d}".rstrip("0") or "0"
    return (
        f"{utc.year:04d}-{utc.month:02d}-{utc.day:02d} "
        f"{utc.hour}:{utc.minute:02d}:{utc.second:02d}.{fraction} +00"
    )


def _parse_rfc3339(text: str) -> datetime:
    match = _RFC3339.fullmatch(text)
    if match is None:
        raise InvalidTimestamp(text)
    year, month, day, hour, minute, second = (int(g) for g in match.groups()[:6])
    fraction = match.group(7)
    microsecond = int(fraction[:6].ljust(6, "0")) if fraction else 0

    if match.group(8):
        offset = timezone.utc
    else:
        offset_hours, offset_minutes = int(match.group(10)), int(match.group(11))
        if offset_hours > 23 or offset_minutes > 59:
            raise InvalidTimestamp(text)
        delta = timedelta(hours=offset_hours, minutes=offset_minutes)
        offset = timezone(-delta if match.group(9) == "-" else delta)

    leap_second = second == 60
    if leap_second:
        second, microsecond = 59, 999_999

    try:
        value = datetime(
            year, month, day, hour, minute, second, microsecond, tzinfo=offset
        )
        utc = value.astimezone(timezone.utc)
    except (ValueError, OverflowError):
        raise InvalidTimestamp(text) from None

    if leap_second and (utc.hour, utc.minute) != (23, 59):
        raise InvalidTimestamp(text)
    return value


def _as_mapping(data: Any) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError("expected a JSON object")
    return data


def _required(data: Mapping[str, Any], name: str) -> Any:
    if name not in data:
        raise ValueError(f"missing field `{name}`")
    return data[name]


def _string(value: Any, name: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"field `{name}` must be a string")
    return value


def _number(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"field `{name}` must be a number")
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"field `{name}` must be a finite number")
    return number


def _unsigned(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field `{name}` must be an unsigned integer")
    if not 0 <= value <= _U64_MAX:
        raise ValueError(f"field `{name}` is out of range")
    return value


def _metric_fields(entity: MetricEntity) -> dict[str, Any]:
    return {
        "id": str(entity.id),
        "name": entity.name,
        "input_frequency_in_seconds": entity.input_frequency // timedelta(seconds=1),
    }


def _metric_body(id: str, name: str, input_frequency_in_seconds: int) -> dict[str, Any]:
    return {
        "id": id,
        "name": name,
        "input_frequency_in_seconds": input_frequency_in_seconds,
    }


@dataclass(frozen=True)
class CreateMetricRequest:
    """Payload for creating a metric."""

    name: str
    input_frequency_in_seconds: int | None = None

    @classmethod
    def from_json(cls, data: Any) -> CreateMetricRequest:
        """Build the request from decoded JSON, raising ValueError if malformed."""
        data = _as_mapping(data)
        name = _string(_required(data, "name"), "name")
        frequency = data.get("input_frequency_in_seconds")
        if frequency is not None:
            frequency = _unsigned(frequency, "input_frequency_in_seconds")
        return cls(name=name, input_frequency_in_seconds=frequency)

    def validate(self) -> None:
        """Raise EmptyField if the name is blank."""
        if not self.name.strip():
            raise EmptyField("name")

    def to_entity(self) -> MetricEntity:
        """Create the metric entity; a missing frequency means zero seconds."""
        frequency = timedelta(seconds=self.input_frequency_in_seconds or 0)
        return MetricEntity.create(self.name, frequency)


@dataclass(frozen=True)
class CreateMetricResponse:
    """Response to creating a metric."""

    id: str
    name: str
    input_frequency_in_seconds: int

    @classmethod
    def from_entity(cls, entity: MetricEntity) -> CreateMetricResponse:
        """Describe a metric entity."""
        return cls(**_metric_fields(entity))

    def to_dict(self) -> dict[str, Any]:
        """The JSON body of the response."""
        return _metric_body(self.id, self.name, self.input_frequency_in_seconds)


@dataclass(frozen=True)
class GetMetricResponse:
    """Response describing a stored metric."""

    id: str
    name: str
    input_frequency_in_seconds: int

    @classmethod
    def from_entity(cls, entity: MetricEntity) -> GetMetricResponse:
        """Describe a metric entity."""
        return cls(**_metric_fields(entity))

    def to_dict(self) -> dict[str, Any]:
        """The JSON body of the response."""
        return _metric_body(self.id, self.name, self.input_frequency_in_seconds)


@dataclass(frozen=True)
class CreateMetricReadingRequest:
    """Payload for recording a metric reading."""

    metric_id: str
    value: float
    timestamp: str | None = None

    @classmethod
    def from_json(cls, data: Any) -> CreateMetricReadingRequest:
        """Build the request from decoded JSON, raising ValueError if malformed."""
        data = _as_mapping(data)
        metric_id = _string(_required(data, "metric_id"), "metric_id")
        value = _number(_required(data, "value"), "value")
        timestamp = data.get("timestamp")
        if timestamp is not None:
            timestamp = _string(timestamp, "timestamp")
        return cls(metric_id=metric_id, value=value, timestamp=timestamp)

    def validate(self) -> None:
        """Raise EmptyField or NegativeField for obviously bad input."""
        if not self.metric_id.strip():
            raise EmptyField("metric_id")
        if self.value < 0.0:
            raise NegativeField("value")

    def to_entity(self) -> MetricReadingEntity:
        """Create the reading entity; a missing timestamp means now."""
        metric_id = MetricID.parse(self.metric_id)
        if self.timestamp is None:
            timestamp = datetime.now(timezone.utc)
        else:
            timestamp = _parse_rfc3339(self.timestamp)
        return MetricReadingEntity.create(metric_id, self.value, timestamp)


@dataclass(frozen=True)
class CreateMetricReadingResponse:
    """Response to recording a metric reading."""

    id: str
    metric_id: str
    value: float
    timestamp: str

    @classmethod
    def from_entity(cls, entity: MetricReadingEntity) -> CreateMetricReadingResponse:
        """Describe a reading entity."""
        return cls(
            id=str(entity.id),
            metric_id=str(entity.metric_id),
            value=entity.value,
            timestamp=format_timestamp(entity.timestamp),
        )

    def to_dict(self) -> dict[str, Any]:
        """The JSON body of the response."""
        return {
            "id": self.id,
            "metric_id": self.metric_id,
            "value": self.value,
            "timestamp": self.timestamp,
        }