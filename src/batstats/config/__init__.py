"""Configuration helpers for metrics, reports and runtime defaults."""

from .metrics import Metric, get_metric, iter_metrics
from .reports import ReportBundle, ReportSection, get_report, iter_reports
from .settings import Settings

__all__ = [
    "Metric",
    "ReportBundle",
    "ReportSection",
    "Settings",
    "get_metric",
    "get_report",
    "iter_metrics",
    "iter_reports",
]
