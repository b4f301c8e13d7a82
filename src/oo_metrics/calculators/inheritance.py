"""Method and attribute inheritance metrics.

For one target type, walks its full ancestry and classifies members:

- Inheritable: ancestor members with a body a subtype can actually reach.
  Interface methods count only with a default body, abstract-class methods
  only when not abstract, concrete-class methods always. Private ancestor
  attributes are never inheritable.
- Defined: members declared on the target itself that have a body.
- Overridden: defined methods whose signature (name + parameter types)
  matches an inheritable one; attributes match on (declared type, name).
- Hidden: non-public members.

Metrics (MOOD family):
- MIF: Mi / Ma, share of effective methods that are inherited
- MHF: PMd / Md, public share of defined methods
- PMR: (PMi + PMd) / Ma
- NMIR: Mi / Mit * 100
- AIF: Ai / Aa
- AHF: Av / Ad

Ratios whose denominator is zero are left out of the result.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, List, Set

from ..logging_config import get_logger
from ..metrics.models import Metric
from ..metrics.names import MetricName
from ..metrics.value import NumericValue
from ..model.graph import AncestryGraph
from ..model.types import Method, TypeDeclaration, Visibility
from .base import Calculator

logger = get_logger(__name__)


@dataclass(frozen=True)
class Attribute:
    """One flattened field. Two attributes are equal when type text and name match."""

    declared_type: str
    name: str
    declaring_type: str = field(compare=False)
    visibility: Visibility = field(compare=False)

    @property
    def is_private(self) -> bool:
        return self.visibility is Visibility.PRIVATE

    @property
    def is_publicish(self) -> bool:
        # package-private counts as public for attributes
        return self.visibility not in (Visibility.PRIVATE, Visibility.PROTECTED)


def find_ancestors(type_decl: TypeDeclaration, graph: AncestryGraph) -> Set[TypeDeclaration]:
    """Transitive parents of ``type_decl``; the graph must be acyclic."""
    ancestors: Set[TypeDeclaration] = set()
    stack: List[TypeDeclaration] = list(graph.parents_of(type_decl))

    while stack:
        current = stack.pop()
        if current in ancestors:
            continue
        ancestors.add(current)
        stack.extend(graph.parents_of(current))

    return ancestors


def flatten_attributes(type_decl: TypeDeclaration) -> FrozenSet[Attribute]:
    """Split each field group into one attribute per declared name."""
    attributes: Set[Attribute] = set()
    for group in type_decl.field_groups:
        visibility = group.visibility
        for name in group.names:
            attributes.add(
                Attribute(
                    declared_type=group.declared_type,
                    name=name,
                    declaring_type=type_decl.qualified_name,
                    visibility=visibility,
                )
            )
    return frozenset(attributes)


def is_inheritable(method: Method, declaring_type: TypeDeclaration) -> bool:
    """Whether an ancestor method has an implementation a subtype receives."""
    if declaring_type.is_interface:
        return method.is_default
    if declaring_type.is_abstract:
        return not method.is_abstract
    return True


def is_defined(method: Method, declaring_type: TypeDeclaration) -> bool:
    """Whether a method declared on the target carries its own body."""
    if method.is_abstract:
        return False
    return not declaring_type.is_interface or method.is_default


class MethodAndAttributeInheritanceCalculator(Calculator):
    name = "method_attribute_inheritance"
    display_name = "Method and Attribute Inheritance"
    description = "Inheritance, overriding and hiding counts and factors for methods and attributes"

    def __init__(self, graph: AncestryGraph):
        self.graph = graph

    def calculate(self, type_decl: TypeDeclaration) -> FrozenSet[Metric]:
        ancestors = find_ancestors(type_decl, self.graph)
        logger.debug(f"{type_decl}: {len(ancestors)} ancestor(s)")

        metrics = self._method_metrics(type_decl, ancestors)
        metrics.extend(self._attribute_metrics(type_decl, ancestors))
        return frozenset(metrics)

    def _method_metrics(
        self, type_decl: TypeDeclaration, ancestors: Set[TypeDeclaration]
    ) -> List[Metric]:
        inheritable = {
            method
            for ancestor in ancestors
            for method in ancestor.methods
            if is_inheritable(method, ancestor)
        }
        defined = {method for method in type_decl.methods if is_defined(method, type_decl)}

        inheritable_signatures = {m.signature for m in inheritable}
        overridden = {m for m in defined if m.signature in inheritable_signatures}
        overridden_signatures = {m.signature for m in overridden}

        inherited_not_overridden = {
            m
            for m in inheritable
            if m.signature not in overridden_signatures and not m.is_private
        }

        all_methods = defined | inherited_not_overridden
        public_defined = {m for m in defined if m.is_public}
        public_inherited = {m for m in inherited_not_overridden if m.is_public}
        # package-private inherited methods without a default body fall out of both counts
        hidden_inherited = {
            m
            for m in inherited_not_overridden - public_inherited
            if m.is_default or m.is_protected
        }
        hidden_defined = defined - public_defined

        metrics = [
            Metric.of(MetricName.Mit, "Number of Methods Inherited (Total)", len(inheritable)),
            Metric.of(
                MetricName.Mi,
                "Number of Methods Inherited and Not Overridden",
                len(inherited_not_overridden),
            ),
            Metric.of(MetricName.Md, "Number of Methods Defined", len(defined)),
            Metric.of(MetricName.Mo, "Number of Methods Overridden", len(overridden)),
            Metric.of(MetricName.Ma, "Number of Methods (All)", len(all_methods)),
            Metric.of(
                MetricName.PMi,
                "Number of Public Methods Inherited and Not Overridden",
                len(public_inherited),
            ),
            Metric.of(MetricName.PMd, "Number of Public Methods Defined", len(public_defined)),
            Metric.of(
                MetricName.HMi,
                "Number of Hidden Methods Inherited and Not Overridden",
                len(hidden_inherited),
            ),
            Metric.of(MetricName.HMd, "Number of Hidden Methods Defined", len(hidden_defined)),
        ]

        if inheritable:
            metrics.append(
                Metric.of(
                    MetricName.NMIR,
                    "Number of Methods Inherited Ratio",
                    NumericValue.of_rational(len(inherited_not_overridden), len(inheritable)).times(
                        NumericValue.of(100)
                    ),
                )
            )

        if all_methods:
            total = NumericValue.of(len(all_methods))
            metrics.append(
                Metric.of(
                    MetricName.MIF,
                    "Method Inheritance Factor",
                    NumericValue.of(len(inherited_not_overridden)).divide(total),
                )
            )
            public_methods = NumericValue.of(len(public_inherited)).plus(
                NumericValue.of(len(public_defined))
            )
            metrics.append(
                Metric.of(MetricName.PMR, "Public Methods Ratio", public_methods.divide(total))
            )
        else:
            logger.debug(f"{type_decl}: no methods, MIF and PMR omitted")

        if defined:
            metrics.append(
                Metric.of(
                    MetricName.MHF,
                    "Method Hiding Factor",
                    NumericValue.of(len(public_defined)).divide(NumericValue.of(len(defined))),
                )
            )

        return metrics

    def _attribute_metrics(
        self, type_decl: TypeDeclaration, ancestors: Set[TypeDeclaration]
    ) -> List[Metric]:
        inheritable = {
            attribute
            for ancestor in ancestors
            for attribute in flatten_attributes(ancestor)
            if not attribute.is_private
        }
        defined = set(flatten_attributes(type_decl))

        inherited_not_overridden = inheritable - defined
        overridden = inheritable & defined
        all_attributes = defined | inherited_not_overridden
        public_defined = {a for a in defined if a.is_publicish}

        metrics = [
            Metric.of(MetricName.Ait, "Number of Attributes Inherited (Total)", len(inheritable)),
            Metric.of(
                MetricName.Ai,
                "Number of Attributes Inherited and Not Overridden",
                len(inherited_not_overridden),
            ),
            Metric.of(MetricName.Ad, "Number of Attributes Defined", len(defined)),
            Metric.of(MetricName.Ao, "Number of Attributes Overridden", len(overridden)),
            Metric.of(MetricName.Aa, "Number of Attributes (All)", len(all_attributes)),
            Metric.of(MetricName.Av, "Number of Public Attributes Defined", len(public_defined)),
        ]

        if all_attributes:
            metrics.append(
                Metric.of(
                    MetricName.AIF,
                    "Attribute Inheritance Factor",
                    NumericValue.of(len(inherited_not_overridden)).divide(
                        NumericValue.of(len(all_attributes))
                    ),
                )
            )
        else:
            logger.debug(f"{type_decl}: no attributes, AIF omitted")

        if defined:
            metrics.append(
                Metric.of(
                    MetricName.AHF,
                    "Attribute Hiding Factor",
                    NumericValue.of(len(public_defined)).divide(NumericValue.of(len(defined))),
                )
            )

        return metrics
