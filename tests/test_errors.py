import pytest

from metricsvc.errors import (
    BusinessRuleViolation,
    DomainError,
    InvalidMetricID,
    InvalidMetricReadingID,
    InvalidTimestamp,
)


def test_invalid_metric_id_message():
    error = InvalidMetricID("abc")
    assert error.message == "metric_id abc is invalid"
    assert str(error) == "metric_id abc is invalid"
    assert error.metric_id == "abc"


def test_invalid_metric_reading_id_message():
    error = InvalidMetricReadingID("xyz")
    assert str(error) == "metric_reading_id xyz is invalid"
    assert error.metric_reading_id == "xyz"


def test_invalid_timestamp_message():
    error = InvalidTimestamp("yesterday")
    assert str(error) == "yesterday is not a valid timestamp according to RFC3339"
    assert error.timestamp == "yesterday"


def test_business_rule_violation_keeps_message():
    error = BusinessRuleViolation("metric name cannot be empty")
    assert error.message == "metric name cannot be empty"
    assert str(error) == "metric name cannot be empty"


@pytest.mark.parametrize(
    "error",
    [
        InvalidMetricID("a"),
        InvalidMetricReadingID("b"),
        InvalidTimestamp("c"),
        BusinessRuleViolation("d"),
    ],
)
def test_all_errors_are_domain_errors(error):
    with pytest.raises(DomainError) as info:
        raise error
    assert info.value.message == str(error)