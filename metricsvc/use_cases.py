"""Application operations on metrics and metric readings."""

from __future__ import annotations

from .dtos import (
    CreateMetricReadingRequest,
    CreateMetricReadingResponse,
    CreateMetricRequest,
    CreateMetricResponse,
    GetMetricResponse,
)
from .errors import BusinessRuleViolation
from .identifiers import MetricID
from .repositories import MetricReadingRepository, MetricRepository


class MetricUseCase:
    """Creates and looks up metrics."""

    def __init__(self, metric_repository: MetricRepository) -> None:
        self._metrics = metric_repository

    async def create_metric(self, request: CreateMetricRequest) -> CreateMetricResponse:
        """Create and store a metric."""
        metric = await self._metrics.create_metric(request.to_entity())
        return CreateMetricResponse.from_entity(metric)

    async def get_metric_by_id(self, metric_id: MetricID) -> GetMetricResponse | None:
        """Return the metric with this identifier, or None."""
        metric = await self._metrics.get_metric_by_id(metric_id)
        return None if metric is None else GetMetricResponse.from_entity(metric)

    async def get_all_metrics(self) -> list[GetMetricResponse]:
        """Return every stored metric."""
        metrics = await self._metrics.get_all_metrics()
        return [GetMetricResponse.from_entity(metric) for metric in metrics]


class MetricReadingUseCase:
    """Records readings for existing metrics."""

    def __init__(
        self,
        metric_repository: MetricRepository,
        metric_reading_repository: MetricReadingRepository,
    ) -> None:
        self._metrics = metric_repository
        self._readings = metric_reading_repository

    async def create_metric_reading(
        self, request: CreateMetricReadingRequest
    ) -> CreateMetricReadingResponse:
        """Store a reading; the metric it belongs to must exist."""
        reading = request.to_entity()
        if await self._metrics.get_metric_by_id(reading.metric_id) is None:
            raise BusinessRuleViolation(f"metric {reading.metric_id} not found")
        stored = await self._readings.create_metric_reading(reading)
        return CreateMetricReadingResponse.from_entity(stored)