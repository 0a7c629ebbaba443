"""
Typed views of CloudWatch responses.

Responses are validated once at the client boundary so the rest of the
plugin works with attributes instead of raw dictionary lookups.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Mapping, Optional

from .constants import SERVICE_NAME_DIMENSION
from .errors import MalformedResponseError


def _require(payload: Any, field: str, context: str) -> Any:
    if not isinstance(payload, Mapping):
        raise MalformedResponseError(f"{context} must be an object, got {type(payload).__name__}")
    if field not in payload:
        raise MalformedResponseError.missing_field(field, context)
    return payload[field]


def _require_str(payload: Any, field: str, context: str) -> str:
    value = _require(payload, field, context)
    if not isinstance(value, str):
        raise MalformedResponseError(f"{context} field '{field}' must be a string", field=field)
    return value


def _parse_timestamp(value: Any) -> Optional[datetime]:
    if value is None:
        return None
    if isinstance(value, datetime):
        parsed = value
    else:
        try:
            parsed = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
        except ValueError as exc:
            raise MalformedResponseError(
                f"Datapoint field 'Timestamp' is not ISO-8601: {value!r}", field="Timestamp"
            ) from exc
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


@dataclass(frozen=True)
class Dimension:
    """A single Name/Value tag on a metric."""

    name: str
    value: str

    @classmethod
    def from_response(cls, payload: Any) -> "Dimension":
        return cls(
            name=_require_str(payload, "Name", "Dimension"),
            value=_require_str(payload, "Value", "Dimension"),
        )

    def to_request(self) -> dict[str, str]:
        return {"Name": self.name, "Value": self.value}


@dataclass(frozen=True)
class Metric:
    """A CloudWatch metric identified by namespace, name and dimensions."""

    namespace: str
    metric_name: str
    dimensions: tuple[Dimension, ...] = ()

    @classmethod
    def from_response(cls, payload: Any) -> "Metric":
        """Build a Metric from one entry of a ListMetrics ``Metrics`` list."""
        raw_dimensions = _require(payload, "Dimensions", "Metric")
        if not isinstance(raw_dimensions, list):
            raise MalformedResponseError("Metric field 'Dimensions' must be a list", field="Dimensions")
        return cls(
            namespace=_require_str(payload, "Namespace", "Metric"),
            metric_name=_require_str(payload, "MetricName", "Metric"),
            dimensions=tuple(Dimension.from_response(item) for item in raw_dimensions),
        )

    def dimension_value(self, name: str) -> Optional[str]:
        """Return the value of the first dimension called ``name``, if any."""
        for dimension in self.dimensions:
            if dimension.name == name:
                return dimension.value
        return None

    @property
    def service_name(self) -> Optional[str]:
        return self.dimension_value(SERVICE_NAME_DIMENSION)

    def dimensions_request(self) -> list[dict[str, str]]:
        return [dimension.to_request() for dimension in self.dimensions]


@dataclass(frozen=True)
class Datapoint:
    """One aggregated statistic value returned by GetMetricStatistics."""

    sum: float
    timestamp: Optional[datetime] = None
    unit: Optional[str] = None

    @classmethod
    def from_response(cls, payload: Any) -> "Datapoint":
        raw_sum = _require(payload, "Sum", "Datapoint")
        # bool is an int subclass
        if isinstance(raw_sum, bool) or not isinstance(raw_sum, (int, float)):
            raise MalformedResponseError("Datapoint field 'Sum' must be a number", field="Sum")
        return cls(
            sum=float(raw_sum),
            timestamp=_parse_timestamp(payload.get("Timestamp")),
            unit=payload.get("Unit"),
        )


@dataclass(frozen=True)
class TimeWindow:
    """Half-open UTC interval [start, end) queried as a single period."""

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if self.end <= self.start:
            raise ValueError(f"Time window end {self.end} must be after start {self.start}")

    @property
    def period(self) -> int:
        """Width of the single aggregation bucket, in seconds."""
        return int((self.end - self.start).total_seconds())
