"""Type and member declarations consumed by the calculators.

These are read-only snapshots of what a parser saw in source: a class or
interface with its declared methods and field groups. Nothing here is
derived; inheritance lives in ``AncestryGraph``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Optional, Tuple


class Visibility(Enum):
    """Declared access level. ``PACKAGE`` means no access modifier was written."""

    PUBLIC = "public"
    PROTECTED = "protected"
    PACKAGE = "package"
    PRIVATE = "private"

    @classmethod
    def from_modifiers(cls, modifiers: FrozenSet[str]) -> Visibility:
        for visibility in (cls.PUBLIC, cls.PROTECTED, cls.PRIVATE):
            if visibility.value in modifiers:
                return visibility
        return cls.PACKAGE


@dataclass(frozen=True)
class SourceSpan:
    """First and last source line of a declaration, when the parser kept them."""

    begin_line: Optional[int] = None
    end_line: Optional[int] = None


@dataclass(frozen=True)
class Method:
    """A method declared on exactly one type.

    ``declaring_type`` is the qualified name of that type. ``is_default``
    marks an interface method that carries a body.
    """

    name: str
    declaring_type: str
    parameter_types: Tuple[str, ...] = ()
    visibility: Visibility = Visibility.PACKAGE
    is_abstract: bool = False
    is_default: bool = False

    @property
    def signature(self) -> str:
        """Name plus parameter types, e.g. ``move(int, String)``."""
        return f"{self.name}({', '.join(self.parameter_types)})"

    @property
    def is_public(self) -> bool:
        return self.visibility is Visibility.PUBLIC

    @property
    def is_protected(self) -> bool:
        return self.visibility is Visibility.PROTECTED

    @property
    def is_private(self) -> bool:
        return self.visibility is Visibility.PRIVATE


@dataclass(frozen=True)
class FieldGroup:
    """One field declaration statement, e.g. ``private static int a, b;``."""

    declared_type: str
    names: Tuple[str, ...]
    modifiers: FrozenSet[str] = frozenset()

    @property
    def visibility(self) -> Visibility:
        return Visibility.from_modifiers(self.modifiers)


@dataclass(frozen=True)
class TypeDeclaration:
    """A class or interface. Identity is the qualified name."""

    qualified_name: str
    is_abstract: bool = field(default=False, compare=False)
    is_interface: bool = field(default=False, compare=False)
    methods: Tuple[Method, ...] = field(default=(), compare=False)
    field_groups: Tuple[FieldGroup, ...] = field(default=(), compare=False)
    span: Optional[SourceSpan] = field(default=None, compare=False)

    @property
    def simple_name(self) -> str:
        return self.qualified_name.rsplit(".", 1)[-1]

    def __str__(self) -> str:
        return self.qualified_name
