"""
Prometheus metrics for system monitoring.
"""

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

registry = CollectorRegistry()


def get_registry() -> CollectorRegistry:
    """Get the registry all application metrics are bound to."""
    return registry


JOBS_CREATED = Counter(
    "jobs_created_total",
    "Total number of jobs created",
    ["job_type", "urgency"],
    registry=registry,
)

QUOTES_SUBMITTED = Counter(
    "quotes_submitted_total",
    "Total number of tiered quotes submitted",
    registry=registry,
)

JOB_STATUS_TRANSITIONS = Counter(
    "job_status_transitions_total",
    "Job status changes applied",
    ["from_status", "to_status"],
    registry=registry,
)

PHOTOS_UPLOADED = Counter(
    "photos_uploaded_total",
    "Total number of job photos uploaded",
    registry=registry,
)

REVIEWS_CREATED = Counter(
    "reviews_created_total",
    "Total number of reviews created",
    ["rating"],
    registry=registry,
)

EARNINGS_RECORDED = Counter(
    "earnings_recorded_total",
    "Earning ledger rows appended",
    registry=registry,
)

BADGES_UNLOCKED = Counter(
    "badges_unlocked_total",
    "Badges unlocked by plumbers",
    ["badge"],
    registry=registry,
)

API_REQUESTS = Counter(
    "api_requests_total",
    "Total number of API requests",
    ["method", "endpoint", "status_code"],
    registry=registry,
)

API_REQUEST_DURATION = Histogram(
    "api_request_duration_seconds",
    "Time spent processing API requests",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.5, 1.0, 2.0, 5.0],
    registry=registry,
)

ERRORS_TOTAL = Counter(
    "errors_total",
    "Total number of errors",
    ["error_type", "component"],
    registry=registry,
)


def get_metrics() -> bytes:
    """Render all metrics in the Prometheus text format."""
    return generate_latest(registry)


def get_metrics_content_type() -> str:
    return CONTENT_TYPE_LATEST
