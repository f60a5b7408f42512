"""Prometheus metrics for the LinguaLink service.

Defines and exports metrics for monitoring:
- Translation requests by outcome (counter)
- Provider errors by code (counter)
- Language detection fallbacks (counter)
- Translation latency (histogram)
- Object store operations (counter)
"""

import logging

from prometheus_client import Counter, Histogram

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Translation Metrics
# -----------------------------------------------------------------------------

lingualink_translation_requests_total = Counter(
    "lingualink_translation_requests_total",
    "Total translation requests by outcome",
    labelnames=["outcome"],
)

lingualink_translation_errors_total = Counter(
    "lingualink_translation_errors_total",
    "Total translation failures by error code",
    labelnames=["code"],
)

lingualink_detection_fallbacks_total = Counter(
    "lingualink_detection_fallbacks_total",
    "Language detections that fell back to the caller's source language",
)

lingualink_translation_duration_seconds = Histogram(
    "lingualink_translation_duration_seconds",
    "Completion API translation latency in seconds",
    buckets=(0.1, 0.25, 0.5, 1.0, 2.0, 4.0, 8.0, float("inf")),
)

# -----------------------------------------------------------------------------
# Persistence Metrics
# -----------------------------------------------------------------------------

lingualink_store_operations_total = Counter(
    "lingualink_store_operations_total",
    "Object store operations by operation and status",
    labelnames=["operation", "status"],
)


# -----------------------------------------------------------------------------
# Helper Functions
# -----------------------------------------------------------------------------


def record_translation(outcome: str, duration_seconds: float | None = None) -> None:
    """Record a completed translation request.

    Args:
        outcome: "success", "identity" or "error"
        duration_seconds: Provider latency (only for calls that reached the provider)
    """
    lingualink_translation_requests_total.labels(outcome=outcome).inc()
    if duration_seconds is not None:
        lingualink_translation_duration_seconds.observe(duration_seconds)


def record_translation_error(code: str) -> None:
    """Record a translation failure by error code."""
    lingualink_translation_errors_total.labels(code=code).inc()
    logger.debug(f"Recorded translation error: {code}")


def record_detection_fallback() -> None:
    """Record a detection result that was discarded."""
    lingualink_detection_fallbacks_total.inc()


def record_store_operation(operation: str, success: bool) -> None:
    """Record an object store operation."""
    status = "success" if success else "error"
    lingualink_store_operations_total.labels(operation=operation, status=status).inc()
