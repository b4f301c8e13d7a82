"""Calculator registry and batch orchestration.

Adding a calculator requires:
1. Implement a ``Calculator`` subclass.
2. Add a CalculatorDefinition entry to CALCULATOR_REGISTRY below.
The CLI and ``calculate_codebase`` pick it up automatically.
"""

from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Callable, Dict, FrozenSet, Iterable, List, Optional, Sequence

from ..exceptions import UnknownCalculatorError
from ..logging_config import get_logger
from ..metrics.models import Metric
from ..model.codebase import Codebase
from ..model.graph import AncestryGraph
from ..model.types import TypeDeclaration
from .base import Calculator
from .inheritance import MethodAndAttributeInheritanceCalculator
from .raw_lines import RawTotalLinesOfCodeCalculator

logger = get_logger(__name__)


@dataclass(frozen=True)
class CalculatorDefinition:
    name: str  # "raw_total_lines"
    display_name: str  # "Raw Total Lines of Code"
    description: str  # human-readable description
    factory: Callable[[AncestryGraph], Calculator]


CALCULATOR_REGISTRY: List[CalculatorDefinition] = [
    CalculatorDefinition(
        name=RawTotalLinesOfCodeCalculator.name,
        display_name=RawTotalLinesOfCodeCalculator.display_name,
        description=RawTotalLinesOfCodeCalculator.description,
        factory=lambda graph: RawTotalLinesOfCodeCalculator(),
    ),
    CalculatorDefinition(
        name=MethodAndAttributeInheritanceCalculator.name,
        display_name=MethodAndAttributeInheritanceCalculator.display_name,
        description=MethodAndAttributeInheritanceCalculator.description,
        factory=MethodAndAttributeInheritanceCalculator,
    ),
]


def get_registry() -> List[CalculatorDefinition]:
    """Return the current registry (snapshot)."""
    return list(CALCULATOR_REGISTRY)


def get_definition(name: str) -> CalculatorDefinition:
    """Look up a calculator by name."""
    for defn in CALCULATOR_REGISTRY:
        if defn.name == name:
            return defn
    raise UnknownCalculatorError(name, [d.name for d in CALCULATOR_REGISTRY])


def build_calculators(
    graph: AncestryGraph, names: Optional[Sequence[str]] = None
) -> List[Calculator]:
    """Instantiate the named calculators (all of them when ``names`` is empty)."""
    definitions = [get_definition(n) for n in names] if names else get_registry()
    return [defn.factory(graph) for defn in definitions]


def calculate_type(
    type_decl: TypeDeclaration, calculators: Iterable[Calculator]
) -> FrozenSet[Metric]:
    """Union of every calculator's metrics for one type."""
    metrics: set = set()
    for calculator in calculators:
        metrics.update(calculator.calculate(type_decl))
    return frozenset(metrics)


def calculate_codebase(
    codebase: Codebase,
    type_names: Optional[Sequence[str]] = None,
    names: Optional[Sequence[str]] = None,
    workers: Optional[int] = None,
) -> Dict[str, FrozenSet[Metric]]:
    """Compute metrics for each requested type independently.

    Args:
        codebase: Model holding the types and their ancestry graph
        type_names: Qualified names to measure (default: every type)
        names: Calculator names to run (default: all registered)
        workers: Thread count; None or 1 runs sequentially

    Returns:
        Dict mapping qualified type name to its metrics, in request order

    Raises:
        UnknownTypeError: If a requested type is not in the codebase
        UnknownCalculatorError: If a calculator name is not registered
    """
    targets = [codebase.get_type(n) for n in type_names] if type_names else list(codebase)
    calculators = build_calculators(codebase.graph, names)
    logger.debug(
        f"Calculating {len(calculators)} calculator(s) over {len(targets)} type(s), "
        f"workers={workers or 1}"
    )

    results: Dict[str, FrozenSet[Metric]] = {}
    if not workers or workers <= 1 or len(targets) < 2:
        for target in targets:
            results[target.qualified_name] = calculate_type(target, calculators)
        return results

    # Calculators only read the codebase, so targets can share them across threads
    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = {executor.submit(calculate_type, t, calculators): t for t in targets}
        for future in as_completed(futures):
            results[futures[future].qualified_name] = future.result()

    return {t.qualified_name: results[t.qualified_name] for t in targets}
