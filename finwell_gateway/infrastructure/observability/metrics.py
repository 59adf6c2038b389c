"""Prometheus metrics for monitoring risk distribution, stored profiles and generator health"""

from prometheus_client import Counter, Histogram

# Analysis metrics
analysis_counter = Counter(
    "finwell_analysis_total",
    "Profiles analyzed",
    ["risk_level"],  # very_low | low | medium | high | very_high
)

profiles_saved_counter = Counter(
    "finwell_profiles_saved_total",
    "Financial profiles persisted",
    ["source"],  # submitted | generated
)

# Generator metrics
generation_failures_counter = Counter(
    "finwell_generation_failures_total",
    "Failed profile generation attempts",
)

generation_latency_histogram = Histogram(
    "finwell_generation_latency_seconds",
    "Profile generator response time",
    buckets=[0.5, 1.0, 2.5, 5.0, 10.0, 30.0],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_analysis(risk_level: str, source: str) -> None:
    """Record a completed analysis and the profile it persisted"""
    analysis_counter.labels(risk_level=risk_level).inc()
    profiles_saved_counter.labels(source=source).inc()
