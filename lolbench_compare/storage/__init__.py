"""Record models and the directory loader for lolbench data."""

from .loader import load_measurements, load_run_plans
from .models import ComparisonRow, EventSummary, Measurement, PointEstimate, RunPlan

__all__ = [
    "ComparisonRow",
    "EventSummary",
    "Measurement",
    "PointEstimate",
    "RunPlan",
    "load_measurements",
    "load_run_plans",
]
