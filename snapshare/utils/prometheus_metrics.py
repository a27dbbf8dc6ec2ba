"""
Prometheus metrics for stability and business events.

- FastAPI: request count, latency (Instrumentator)
- Stability: exceptions_total, db_errors_total
- Business: entity_operations_total, login_total, login_duration_seconds
"""
import logging

from fastapi import FastAPI
from prometheus_client import REGISTRY, Counter, Histogram
from prometheus_fastapi_instrumentator import Instrumentator

logger = logging.getLogger(__name__)

# --- Stability ---
exceptions_total = Counter(
    "snapshare_exceptions_total",
    "Total unhandled exceptions",
    registry=REGISTRY,
)
db_errors_total = Counter(
    "snapshare_db_errors_total",
    "Total database session/transaction errors",
    registry=REGISTRY,
)

# --- Business ---
entity_operations_total = Counter(
    "snapshare_entity_operations_total",
    "Total CRUD operations by entity, operation and result",
    ["entity", "operation", "result"],  # result: success | not_found | failure
    registry=REGISTRY,
)
login_total = Counter(
    "snapshare_login_total",
    "Total photographer login attempts",
    ["result"],  # success | failure
    registry=REGISTRY,
)
login_duration_seconds = Histogram(
    "snapshare_login_duration_seconds",
    "Photographer login duration in seconds",
    ["result"],
    buckets=(0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5),
    registry=REGISTRY,
)


def record_operation(entity: str, operation: str, result: str = "success") -> None:
    """Increment entity_operations_total for one handled request."""
    entity_operations_total.labels(
        entity=entity, operation=operation, result=result
    ).inc()


def setup_prometheus(app: FastAPI) -> None:
    """Instrument HTTP handlers and expose /metrics."""
    Instrumentator(
        excluded_handlers=["/metrics", "/health"],
    ).instrument(app).expose(app, endpoint="/metrics", include_in_schema=False)
    logger.debug("Prometheus metrics exposed at /metrics")
