"""Prometheus metrics for the Jobs API.

Metrics are exposed at the /metrics endpoint.

Metrics Categories:
- HTTP request metrics (latency, count, in-flight)
- Authentication metrics (login attempts)
- Job resource metrics (create, update, delete)
"""

from prometheus_client import Counter, Gauge, Histogram, Info

APP_INFO = Info("jobly_app", "Jobs API application information")

HTTP_REQUESTS_TOTAL = Counter(
    "jobly_http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status_code"],
)

HTTP_REQUEST_DURATION_SECONDS = Histogram(
    "jobly_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5),
)

HTTP_REQUESTS_IN_PROGRESS = Gauge(
    "jobly_http_requests_in_progress",
    "Number of HTTP requests currently in progress",
    ["method", "endpoint"],
)

AUTH_LOGIN_ATTEMPTS_TOTAL = Counter(
    "jobly_auth_login_attempts_total",
    "Total login attempts",
    ["status"],  # success, failure
)

JOB_MUTATIONS_TOTAL = Counter(
    "jobly_job_mutations_total",
    "Job postings created, updated or deleted",
    ["operation"],  # create, update, delete
)


def set_app_info(version: str, environment: str) -> None:
    """Set application info metric."""
    APP_INFO.info({"version": version, "environment": environment})


def normalize_endpoint(path: str) -> str:
    """Replace numeric path segments with ``{id}`` to bound label cardinality."""
    return "/".join("{id}" if part.isdigit() else part for part in path.split("/"))


def record_login_attempt(success: bool) -> None:
    """Record a login attempt."""
    AUTH_LOGIN_ATTEMPTS_TOTAL.labels(status="success" if success else "failure").inc()


def record_job_mutation(operation: str) -> None:
    """Record a successful job create, update or delete."""
    JOB_MUTATIONS_TOTAL.labels(operation=operation).inc()
