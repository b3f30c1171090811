import dataclasses
from datetime import datetime, timedelta, timezone

import pytest

from metricsvc.entities import MetricEntity, MetricReadingEntity
from metricsvc.identifiers import MetricID
from metricsvc.repositories import (
    InMemoryMetricReadingRepository,
    InMemoryMetricRepository,
    MetricReadingRepository,
    MetricRepository,
)


def _metric(name="cpu"):
    return MetricEntity.create(name, timedelta(seconds=10))


def test_interfaces_cannot_be_instantiated():
    with pytest.raises(TypeError):
        MetricRepository()
    with pytest.raises(TypeError):
        MetricReadingRepository()


@pytest.mark.asyncio
async def test_create_then_get_by_id():
    repository = InMemoryMetricRepository()
    metric = _metric()
    stored = await repository.create_metric(metric)
    assert stored == metric
    assert await repository.get_metric_by_id(metric.id) == metric


@pytest.mark.asyncio
async def test_get_missing_returns_none():
    repository = InMemoryMetricRepository()
    await repository.create_metric(_metric())
    assert await repository.get_metric_by_id(MetricID.generate()) is None


@pytest.mark.asyncio
async def test_get_all_returns_every_metric():
    repository = InMemoryMetricRepository()
    metrics = [_metric(name) for name in ("cpu", "memory", "disk")]
    for metric in metrics:
        await repository.create_metric(metric)
    result = await repository.get_all_metrics()
    assert sorted(m.name for m in result) == ["cpu", "disk", "memory"]
    assert len(repository) == 3


@pytest.mark.asyncio
async def test_get_all_on_empty_repository():
    repository = InMemoryMetricRepository()
    assert await repository.get_all_metrics() == []


@pytest.mark.asyncio
async def test_create_with_same_id_replaces():
    repository = InMemoryMetricRepository()
    metric = _metric("cpu")
    renamed = dataclasses.replace(metric, name="load")
    await repository.create_metric(metric)
    await repository.create_metric(renamed)
    assert len(repository) == 1
    fetched = await repository.get_metric_by_id(metric.id)
    assert fetched.name == "load"


@pytest.mark.asyncio
async def test_create_metric_reading_stores_and_returns():
    repository = InMemoryMetricReadingRepository()
    reading = MetricReadingEntity.create(
        MetricID.generate(), 2.5, datetime.now(timezone.utc)
    )
    stored = await repository.create_metric_reading(reading)
    assert stored == reading
    assert len(repository) == 1


@pytest.mark.asyncio
async def test_readings_with_distinct_ids_accumulate():
    repository = InMemoryMetricReadingRepository()
    metric_id = MetricID.generate()
    now = datetime.now(timezone.utc)
    for value in (1.0, 2.0, 3.0):
        await repository.create_metric_reading(
            MetricReadingEntity.create(metric_id, value, now)
        )
    assert len(repository) == 3