from datetime import datetime, timedelta, timezone

import pytest

from metricsvc.entities import MetricEntity, MetricReadingEntity
from metricsvc.errors import BusinessRuleViolation
from metricsvc.identifiers import MetricID


def test_metric_create_keeps_fields():
    metric = MetricEntity.create("cpu", timedelta(seconds=30))
    assert metric.name == "cpu"
    assert metric.input_frequency == timedelta(seconds=30)
    assert metric.id.value.version == 7


def test_metric_create_assigns_distinct_ids():
    first = MetricEntity.create("cpu", timedelta(0))
    second = MetricEntity.create("cpu", timedelta(0))
    assert first.id != second.id


@pytest.mark.parametrize("name", ["", "   ", "\t\n"])
def test_metric_create_rejects_blank_name(name):
    with pytest.raises(BusinessRuleViolation) as info:
        MetricEntity.create(name, timedelta(0))
    assert str(info.value) == "metric name cannot be empty"


def test_reading_create_converts_to_utc():
    offset = timezone(timedelta(hours=2))
    local = datetime(2024, 5, 1, 12, 0, tzinfo=offset)
    metric_id = MetricID.generate()
    reading = MetricReadingEntity.create(metric_id, 1.5, local)
    assert reading.timestamp == local
    assert reading.timestamp.utcoffset() == timedelta(0)
    assert reading.metric_id == metric_id
    assert reading.value == 1.5


def test_reading_create_accepts_zero():
    reading = MetricReadingEntity.create(
        MetricID.generate(), 0.0, datetime.now(timezone.utc)
    )
    assert reading.value == 0.0


def test_reading_create_rejects_negative_value():
    with pytest.raises(BusinessRuleViolation) as info:
        MetricReadingEntity.create(
            MetricID.generate(), -0.1, datetime.now(timezone.utc)
        )
    assert str(info.value) == "metric reading value cannot be below zero"


def test_reading_create_rejects_naive_timestamp():
    with pytest.raises(ValueError):
        MetricReadingEntity.create(MetricID.generate(), 1.0, datetime(2024, 1, 1))


def test_readings_get_distinct_ids():
    metric_id = MetricID.generate()
    now = datetime.now(timezone.utc)
    first = MetricReadingEntity.create(metric_id, 1.0, now)
    second = MetricReadingEntity.create(metric_id, 1.0, now)
    assert first.id != second.id