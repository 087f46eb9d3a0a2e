"""
Shared metrics for the session property rules.
"""

from prometheus_client import Counter


session_match_evaluations_total = Counter(
    "session_match_evaluations_total",
    "Total session match rule evaluations",
    ["result"]
)


def record_match_evaluation(matched: bool) -> None:
    """Count one rule evaluation by outcome."""
    session_match_evaluations_total.labels(
        result="matched" if matched else "rejected"
    ).inc()
