import prometheus_client
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

# Guard against duplicated metric registration when the module is imported
# multiple times (for example, when running uvicorn with the reloader).
REQUEST_COUNT = getattr(prometheus_client, "user_records_REQUEST_COUNT", None)
REQUEST_LATENCY = getattr(prometheus_client, "user_records_REQUEST_LATENCY", None)
STORE_OPERATIONS = getattr(prometheus_client, "user_records_STORE_OPERATIONS", None)
STORE_OPERATION_DURATION = getattr(prometheus_client, "user_records_STORE_OPERATION_DURATION", None)
STORE_ERRORS = getattr(prometheus_client, "user_records_STORE_ERRORS", None)
RECORD_OUTCOMES = getattr(prometheus_client, "user_records_RECORD_OUTCOMES", None)

if REQUEST_COUNT is None:
    # HTTP Metrics
    REQUEST_COUNT = Counter(
        "http_requests_total", "Total HTTP requests", ["method", "endpoint", "http_status"]
    )
    REQUEST_LATENCY = Histogram(
        "http_request_latency_seconds", "HTTP request latency in seconds", ["method", "endpoint"]
    )

    # Store Metrics
    STORE_OPERATIONS = Counter(
        "store_operations_total", "Total record store operations", ["operation", "store_type"]
    )
    STORE_OPERATION_DURATION = Histogram(
        "store_operation_duration_seconds",
        "Record store operation duration in seconds",
        ["operation", "store_type"],
    )
    STORE_ERRORS = Counter(
        "store_errors_total", "Total failed record store operations", ["operation", "store_type"]
    )

    # Business Metrics
    RECORD_OUTCOMES = Counter(
        "user_record_outcomes_total",
        "User record operation outcomes",
        ["operation", "result"],  # result: ok or the error kind name
    )

    prometheus_client.user_records_REQUEST_COUNT = REQUEST_COUNT  # type: ignore[attr-defined]
    prometheus_client.user_records_REQUEST_LATENCY = REQUEST_LATENCY  # type: ignore[attr-defined]
    prometheus_client.user_records_STORE_OPERATIONS = STORE_OPERATIONS  # type: ignore[attr-defined]
    prometheus_client.user_records_STORE_OPERATION_DURATION = STORE_OPERATION_DURATION  # type: ignore[attr-defined]
    prometheus_client.user_records_STORE_ERRORS = STORE_ERRORS  # type: ignore[attr-defined]
    prometheus_client.user_records_RECORD_OUTCOMES = RECORD_OUTCOMES  # type: ignore[attr-defined]


def record_store_operation(
    operation: str, store_type: str, duration: float | None = None, failed: bool = False
) -> None:
    STORE_OPERATIONS.labels(operation=operation, store_type=store_type).inc()
    if duration is not None:
        STORE_OPERATION_DURATION.labels(operation=operation, store_type=store_type).observe(
            duration
        )
    if failed:
        STORE_ERRORS.labels(operation=operation, store_type=store_type).inc()


def metrics_response():
    data = generate_latest()
    return data, CONTENT_TYPE_LATEST
