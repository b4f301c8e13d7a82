"""Metric calculators and their registry."""

from .base import Calculator
from .inheritance import (
    Attribute,
    MethodAndAttributeInheritanceCalculator,
    find_ancestors,
    flatten_attributes,
)
from .raw_lines import RawTotalLinesOfCodeCalculator
from .registry import (
    CALCULATOR_REGISTRY,
    CalculatorDefinition,
    build_calculators,
    calculate_codebase,
    calculate_type,
    get_definition,
    get_registry,
)

__all__ = [
    "Calculator",
    "Attribute",
    "MethodAndAttributeInheritanceCalculator",
    "RawTotalLinesOfCodeCalculator",
    "find_ancestors",
    "flatten_attributes",
    "CALCULATOR_REGISTRY",
    "CalculatorDefinition",
    "build_calculators",
    "calculate_codebase",
    "calculate_type",
    "get_definition",
    "get_registry",
]
