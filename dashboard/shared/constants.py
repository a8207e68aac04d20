"""Shared constants for the telemetry dashboard."""

from __future__ import annotations

from lapmetrics.models import Classification

NOT_AVAILABLE = "N/A"

# Red is always slower/worse, whatever the metric's polarity
DELTA_COLORS: dict[Classification, str] = {
    Classification.BETTER: "#2ECC71",
    Classification.WORSE: "#E74C3C",
    Classification.AT_REFERENCE: "#B388FF",
    Classification.UNAVAILABLE: "#888888",
}

# Arrows for previous-lap improvement: up is faster
IMPROVEMENT_MARKERS = {
    "faster": "▲",
    "slower": "▼",
    "same": "",
}

SPEED_UNIT = "kph"
