"""HTTP server exposing metrics and metric readings."""

from __future__ import annotations

import argparse
import json
from typing import Any, Awaitable, Callable, Sequence

import uvicorn
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse, Response
from starlette.routing import Mount, Route

from .dtos import CreateMetricReadingRequest, CreateMetricRequest
from .errors import DomainError
from .http_errors import NotFound, PresentationError, from_domain_error
from .identifiers import MetricID
from .repositories import InMemoryMetricReadingRepository, InMemoryMetricRepository
from .use_cases import MetricReadingUseCase, MetricUseCase

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8089


class _BadPayload(Exception):
    """The request body could not be read as the expected JSON payload."""


def _accepts_json(content_type: str | None) -> bool:
    if not content_type:
        return False
    mime = content_type.split(";", 1)[0].strip().lower()
    if "/" not in mime:
        return False
    subtype = mime.split("/", 1)[1]
    return subtype == "json" or subtype.endswith("+json")


async def _read_json(request: Request) -> Any:
    if not _accepts_json(request.headers.get("content-type")):
        raise _BadPayload("Content type error")
    body = await request.body()
    try:
        return json.loads(body)
    except ValueError as exc:
        raise _BadPayload(f"Json deserialize error: {exc}") from None


async def _payload(request: Request, parse: Callable[[Any], Any]) -> Any:
    data = await _read_json(request)
    try:
        return parse(data)
    except ValueError as exc:
        raise _BadPayload(f"Json deserialize error: {exc}") from None


async def _create_metric(request: Request) -> Response:
    payload = await _payload(request, CreateMetricRequest.from_json)
    payload.validate()
    use_case: MetricUseCase = request.app.state.metric_use_case
    metric = await use_case.create_metric(payload)
    return JSONResponse(metric.to_dict())


async def _get_all_metrics(request: Request) -> Response:
    use_case: MetricUseCase = request.app.state.metric_use_case
    metrics = await use_case.get_all_metrics()
    return JSONResponse([metric.to_dict() for metric in metrics])


async def _get_metric_by_id(request: Request) -> Response:
    metric_id = MetricID.parse(request.path_params["id"])
    use_case: MetricUseCase = request.app.state.metric_use_case
    metric = await use_case.get_metric_by_id(metric_id)
    if metric is None:
        raise NotFound(f"metric {metric_id} not found")
    return JSONResponse(metric.to_dict())


async def _create_metric_reading(request: Request) -> Response:
    payload = await _payload(request, CreateMetricReadingRequest.from_json)
    payload.validate()
    use_case: MetricReadingUseCase = request.app.state.metric_reading_use_case
    reading = await use_case.create_metric_reading(payload)
    return JSONResponse(reading.to_dict())


async def _presentation_error(request: Request, exc: Exception) -> Response:
    assert isinstance(exc, PresentationError)
    return JSONResponse(exc.to_dict(), status_code=exc.status_code())


async def _domain_error(request: Request, exc: Exception) -> Response:
    assert isinstance(exc, DomainError)
    error = from_domain_error(exc)
    return JSONResponse(error.to_dict(), status_code=error.status_code())


async def _bad_payload(request: Request, exc: Exception) -> Response:
    return PlainTextResponse(str(exc), status_code=400)


_Handler = Callable[[Request, Exception], Awaitable[Response]]


def create_app(
    metric_use_case: MetricUseCase, metric_reading_use_case: MetricReadingUseCase
) -> Starlette:
    """Build the ASGI application around the given use cases."""
    routes = [
        Route("/metrics", _create_metric, methods=["POST"]),
        Route("/metrics", _get_all_metrics, methods=["GET"]),
        Mount(
            "/metrics/readings",
            routes=[Route("/", _create_metric_reading, methods=["POST"])],
        ),
        Route("/metrics/readings", _create_metric_reading, methods=["POST"]),
        Route("/metrics/{id}", _get_metric_by_id, methods=["GET"]),
    ]
    handlers: dict[Any, _Handler] = {
        PresentationError: _presentation_error,
        DomainError: _domain_error,
        _BadPayload: _bad_payload,
    }
    app = Starlette(routes=routes, exception_handlers=handlers)
    app.state.metric_use_case = metric_use_case
    app.state.metric_reading_use_case = metric_reading_use_case
    return app


def build_default_app() -> Starlette:
    """Build the application backed by in-memory repositories."""
    metric_repository = InMemoryMetricRepository()
    reading_repository = InMemoryMetricReadingRepository()
    return create_app(
        MetricUseCase(metric_repository),
        MetricReadingUseCase(metric_repository, reading_repository),
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Serve the application over HTTP."""
    parser = argparse.ArgumentParser(description="Serve the metrics HTTP API.")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)
    uvicorn.run(build_default_app(), host=args.host, port=args.port)
    return 0