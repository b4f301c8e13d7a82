"""Metric record produced by calculators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Union

from .names import MetricName
from .value import INTEGER, NumericValue


@dataclass(frozen=True)
class Metric:
    """One named measurement. Equality covers name, description and value."""

    name: MetricName
    description: str
    value: NumericValue

    @classmethod
    def of(
        cls, name: MetricName, description: str, value: Union[NumericValue, int, float]
    ) -> Metric:
        if not isinstance(value, NumericValue):
            value = NumericValue.of(value)
        return cls(name, description, value)

    def formatted_value(self, decimal_places: int = 4) -> str:
        return self.value.format(decimal_places)

    def to_dict(self, decimal_places: int = 4) -> dict[str, Any]:
        """Flatten for JSON output. Non-integer values are rounded floats."""
        if self.value.kind == INTEGER:
            value: Union[int, float] = self.value.to_python()  # type: ignore[assignment]
        else:
            value = round(self.value.to_float(), decimal_places)
        return {
            "name": self.name.value,
            "description": self.description,
            "value": value,
        }

    def __str__(self) -> str:
        return f"{self.name}: {self.value}"


def sort_metrics(metrics: Iterable[Metric]) -> List[Metric]:
    """Order metrics the way reports list them."""
    return sorted(metrics, key=lambda m: m.name.position)
