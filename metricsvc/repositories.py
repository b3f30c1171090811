"""Storage interfaces for metrics and readings, with in-memory implementations."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .entities import MetricEntity, MetricReadingEntity
from .identifiers import MetricID


class MetricRepository(ABC):
    """Stores and retrieves metrics."""

    @abstractmethod
    async def create_metric(self, metric: MetricEntity) -> MetricEntity:
        """Store a metric and return it."""

    @abstractmethod
    async def get_metric_by_id(self, metric_id: MetricID) -> MetricEntity | None:
        """Return the metric with this identifier, or None."""

    @abstractmethod
    async def get_all_metrics(self) -> list[MetricEntity]:
        """Return every stored metric."""


class MetricReadingRepository(ABC):
    """Stores metric readings."""

    @abstractmethod
    async def create_metric_reading(
        self, metric_reading: MetricReadingEntity
    ) -> MetricReadingEntity:
        """Store a reading and return it."""


class InMemoryMetricRepository(MetricRepository):
    """Metrics kept in a dictionary keyed by identifier text."""

    def __init__(self) -> None:
        self._store: dict[str, MetricEntity] = {}

    def __len__(self) -> int:
        return len(self._store)

    async def create_metric(self, metric: MetricEntity) -> MetricEntity:
        self._store[str(metric.id)] = metric
        return metric

    async def get_metric_by_id(self, metric_id: MetricID) -> MetricEntity | None:
        return self._store.get(str(metric_id))

    async def get_all_metrics(self) -> list[MetricEntity]:
        return list(self._store.values())


class InMemoryMetricReadingRepository(MetricReadingRepository):
    """Readings kept in a dictionary keyed by identifier text."""

    def __init__(self) -> None:
        self._store: dict[str, MetricReadingEntity] = {}

    def __len__(self) -> int:
        return len(self._store)

    async def create_metric_reading(
        self, metric_reading: MetricReadingEntity
    ) -> MetricReadingEntity:
        self._store[str(metric_reading.id)] = metric_reading
        return metric_reading