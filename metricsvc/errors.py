"""Errors raised by the domain layer."""


class DomainError(Exception):
    """Base class for every domain failure; ``message`` holds the text."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class InvalidMetricID(DomainError):
    """The text given is not a valid metric identifier."""

    def __init__(self, metric_id: str) -> None:
        self.metric_id = metric_id
        super().__init__(f"metric_id {metric_id} is invalid")


class InvalidMetricReadingID(DomainError):
    """The text given is not a valid metric reading identifier."""

    def __init__(self, metric_reading_id: str) -> None:
        self.metric_reading_id = metric_reading_id
        super().__init__(f"metric_reading_id {metric_reading_id} is invalid")


class InvalidTimestamp(DomainError):
    """The text given is not an RFC 3339 timestamp."""

    def __init__(self, timestamp: str) -> None:
        self.timestamp = timestamp
        super().__init__(
            f"{timestamp} is not a valid timestamp according to RFC3339"
        )


class BusinessRuleViolation(DomainError):
    """A domain rule rejected the operation."""