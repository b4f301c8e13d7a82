"""Raw total lines of code for a type declaration."""

from typing import FrozenSet

from ..metrics.models import Metric
from ..metrics.names import MetricName
from ..model.types import TypeDeclaration
from .base import Calculator


class RawTotalLinesOfCodeCalculator(Calculator):
    """Counts every line from the declaration's first line to its closing brace.

    Blank lines, comments and multi-line statements inside the declaration
    all count; package and import lines outside it do not. Types whose span
    was not recorded produce no metric.
    """

    name = "raw_total_lines"
    display_name = "Raw Total Lines of Code"
    description = "Lines spanned by the type declaration"

    def calculate(self, type_decl: TypeDeclaration) -> FrozenSet[Metric]:
        span = type_decl.span
        if span is None or span.begin_line is None or span.end_line is None:
            return frozenset()
        return frozenset(
            {
                Metric.of(
                    MetricName.RTLOC,
                    "Raw Total Lines of Code",
                    span.end_line - span.begin_line + 1,
                )
            }
        )
