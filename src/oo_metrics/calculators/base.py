"""Base class for metric calculators."""

from abc import ABC, abstractmethod
from typing import FrozenSet

from ..metrics.models import Metric
from ..model.types import TypeDeclaration


class Calculator(ABC):
    name: str
    display_name: str
    description: str

    @abstractmethod
    def calculate(self, type_decl: TypeDeclaration) -> FrozenSet[Metric]: ...
