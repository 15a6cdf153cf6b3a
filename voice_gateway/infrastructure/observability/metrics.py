"""Prometheus metrics for intent mix, answer coverage and latency"""

from prometheus_client import Counter, Histogram

# Interpretation metrics
intent_counter = Counter(
    "voice_intent_total",
    "Commands interpreted by detected intent",
    ["locale", "intent"],
)

unanswered_counter = Counter(
    "voice_unanswered_total",
    "Commands answered with the suggestions list",
    ["locale"],
)

interpret_duration_histogram = Histogram(
    "voice_interpret_duration_seconds",
    "Time spent interpreting one command",
    buckets=[0.001, 0.0025, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_interpretation(locale: str, intent: str, answered: bool, duration_seconds: float) -> None:
    """Record one interpreted command"""
    intent_counter.labels(locale=locale, intent=intent).inc()
    if not answered:
        unanswered_counter.labels(locale=locale).inc()
    interpret_duration_histogram.observe(duration_seconds)
