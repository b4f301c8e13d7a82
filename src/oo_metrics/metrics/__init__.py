"""Metric values, names and records."""

from .models import Metric, sort_metrics
from .names import MetricName
from .value import NumericValue

__all__ = ["Metric", "MetricName", "NumericValue", "sort_metrics"]
