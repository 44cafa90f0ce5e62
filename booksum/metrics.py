"""
Metrics collection module for the summarization pipeline.
Uses Prometheus metrics for tracking summarization performance and model loading.
"""

import time
import logging
import contextlib
from typing import Optional, Dict, Callable
from functools import wraps

from prometheus_client import Counter, Histogram, Gauge, start_http_server

logger = logging.getLogger(__name__)

# Counters
SUMMARIES_TOTAL = Counter(
    'summaries_total',
    'Total number of summarization calls',
    ['status']
)

MODEL_LOADS_TOTAL = Counter(
    'model_loads_total',
    'Total number of embedding model load attempts',
    ['status']
)

ERRORS_TOTAL = Counter(
    'errors_total',
    'Total number of errors',
    ['error_type']
)

# Histograms for timings
SUMMARIZE_TIME = Histogram(
    'summarize_time_seconds',
    'Time spent producing a summary'
)

EMBEDDING_TIME = Histogram(
    'embedding_time_seconds',
    'Time spent encoding sentences'
)

MODEL_LOAD_TIME = Histogram(
    'model_load_time_seconds',
    'Time spent loading the embedding model'
)

# Gauges for active calls
ACTIVE_SUMMARIES = Gauge(
    'active_summaries',
    'Number of summarization calls in progress'
)


def start_metrics_server(port: int = 8001) -> bool:
    """
    Start the Prometheus metrics server.

    Args:
        port: The port to run the server on

    Returns:
        True if server started successfully, False otherwise
    """
    try:
        start_http_server(port)
        logger.info(f"Metrics server started on port {port}")
        return True
    except OSError as e:
        logger.error(f"Failed to start metrics server: {str(e)}")
        return False


def increment_counter(counter, labels: Optional[Dict[str, str]] = None) -> None:
    """
    Increment a Prometheus counter, with labels when given.
    """
    if labels:
        counter.labels(**labels).inc()
    else:
        counter.inc()


def record_error(error_type: str) -> None:
    """
    Record an error in the metrics.

    Args:
        error_type: The type of error to record
    """
    increment_counter(ERRORS_TOTAL, {"error_type": error_type})


def record_summary(status: str = "success") -> None:
    """
    Record a summarization call in the metrics.

    Args:
        status: The status of the call ("success" or "failure")
    """
    increment_counter(SUMMARIES_TOTAL, {"status": status})


def record_model_load(status: str = "success") -> None:
    """Record an embedding model load attempt."""
    increment_counter(MODEL_LOADS_TOTAL, {"status": status})


def time_it(histogram, labels: Optional[Dict[str, str]] = None):
    """
    Decorator to measure and record the execution time of a function.

    Args:
        histogram: The Prometheus histogram to record the time in
        labels: Optional labels to apply to the histogram
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            start_time = time.time()
            try:
                return func(*args, **kwargs)
            finally:
                execution_time = time.time() - start_time
                if labels:
                    histogram.labels(**labels).observe(execution_time)
                else:
                    histogram.observe(execution_time)

        return wrapper
    return decorator


@contextlib.contextmanager
def time_it_context(histogram, labels: Optional[Dict[str, str]] = None):
    """
    Context manager to measure and record the execution time of a block of code.

    Args:
        histogram: The Prometheus histogram to record the time in
        labels: Optional labels to apply to the histogram
    """
    start_time = time.time()
    try:
        yield
    finally:
        execution_time = time.time() - start_time
        if labels:
            histogram.labels(**labels).observe(execution_time)
        else:
            histogram.observe(execution_time)


def time_summarize():
    """Time a summarization function and count it as active while it runs."""
    def decorator(func: Callable) -> Callable:
        timed = time_it(SUMMARIZE_TIME)(func)

        @wraps(func)
        def wrapper(*args, **kwargs):
            ACTIVE_SUMMARIES.inc()
            try:
                return timed(*args, **kwargs)
            finally:
                ACTIVE_SUMMARIES.dec()

        return wrapper
    return decorator


def time_embedding_context():
    """Context manager to time a sentence encoding block."""
    return time_it_context(EMBEDDING_TIME)


def time_model_load_context():
    """Context manager to time an embedding model load."""
    return time_it_context(MODEL_LOAD_TIME)
