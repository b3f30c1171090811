# metricsvc

A small HTTP service that keeps a registry of metrics and accepts readings
for them. It is built on Starlette and served with Uvicorn.

## Installation

```
pip install .
```

## Running

```
metricsvc
metricsvc --host 0.0.0.0 --port 9000
```

By default the service listens on `127.0.0.1:8089`. `--host` and `--port`
change the address.

## API

Request bodies must be JSON and sent with a JSON content type
(`application/json` or any `+json` type).

### `POST /metrics`

Register a metric.

```json
{"name": "cpu_load", "input_frequency_in_seconds": 60}
```

`name` is required and must not be blank. `input_frequency_in_seconds` is
optional, a non-negative integer, and defaults to `0`. The response holds
the new metric's `id` (a version 7 UUID), `name` and
`input_frequency_in_seconds`.

### `GET /metrics`

List every registered metric, as an array of the same objects.

### `GET /metrics/{id}`

Fetch one metric. An id that is not a version 7 UUID gives `400`; an
unknown id gives `404`.

### `POST /metrics/readings`

Record a reading for an existing metric.

```json
{"metric_id": "<metric id>", "value": 0.75, "timestamp": "2024-05-01T12:00:00Z"}
```

`metric_id` and `value` are required. `value` must not be negative.
`timestamp` is optional, in RFC 3339 form, and defaults to the current
time. A reading for an unknown metric gives `422`.

The response holds the reading's `id`, `metric_id`, `value` and
`timestamp`; the timestamp is given in UTC in the form
`2024-05-01 12:00:00.0 +00`.

### Errors

Validation and business-rule errors have a JSON body:

```json
{"error": "field 'name' cannot be empty"}
```

with status `400` for invalid input, `404` for a missing metric and `422`
when a business rule is broken. A body that is not JSON, is sent without a
JSON content type, or lacks a required field or has one of the wrong type
gives `400` with a plain-text message.

## Using it from Python

- `metricsvc.app.create_app(metric_use_case, metric_reading_use_case)`
  builds the Starlette application from a `MetricUseCase` and a
  `MetricReadingUseCase` (`metricsvc.use_cases`).
- `metricsvc.app.build_default_app()` wires those to
  `InMemoryMetricRepository` and `InMemoryMetricReadingRepository`
  (`metricsvc.repositories`).
- `MetricRepository` and `MetricReadingRepository` are the abstract async
  interfaces a different store would implement.
- `metricsvc.identifiers` provides `MetricID`, `MetricReadingID` and
  `new_uuid7()`; `metricsvc.entities` the `MetricEntity` and
  `MetricReadingEntity` domain objects; `metricsvc.dtos` the request and
  response payloads.

## Limitations

- Storage is in memory only: everything is lost when the service stops.
- Readings can be recorded but not read back; there is no endpoint or
  repository method that lists or queries them.

## Development

```
pip install -e ".[test]"
pytest
```