"""
oo-metrics - Inheritance and Encapsulation Metrics

Computes MOOD-style object-oriented design metrics (inheritance, hiding and
overriding counts and factors) for classes and interfaces of an
already-parsed codebase.
"""

__version__ = "0.1.0"

from .calculators import (
    Calculator,
    MethodAndAttributeInheritanceCalculator,
    RawTotalLinesOfCodeCalculator,
    calculate_codebase,
)
from .metrics import Metric, MetricName, NumericValue
from .model import AncestryGraph, Codebase, TypeDeclaration, load_codebase

__all__ = [
    "calculate_codebase",  # Main entry point
    "Calculator",
    "MethodAndAttributeInheritanceCalculator",
    "RawTotalLinesOfCodeCalculator",
    "Metric",
    "MetricName",
    "NumericValue",
    "AncestryGraph",
    "Codebase",
    "TypeDeclaration",
    "load_codebase",
]
