"""Ancestry graph over type declarations.

Edges are directed parent -> child: ``children[A]`` contains B means B
directly extends or implements A. The graph only answers direct questions;
transitive closure is left to whoever needs it.
"""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Set

from .types import TypeDeclaration


@dataclass
class AncestryGraph:
    """Direct-inheritance graph keyed by qualified type name.

    Must be acyclic in the subtype direction. Nothing here checks that, and
    metrics computed over a cyclic graph are meaningless.
    """

    nodes: Dict[str, TypeDeclaration] = field(default_factory=dict)
    children: Dict[str, Set[str]] = field(default_factory=dict)
    parents: Dict[str, Set[str]] = field(default_factory=dict)
    edge_count: int = 0

    # child name -> parent names that were declared but not present in the model
    unresolved: Dict[str, List[str]] = field(default_factory=dict)

    def add_type(self, type_decl: TypeDeclaration) -> None:
        name = type_decl.qualified_name
        self.nodes[name] = type_decl
        self.children.setdefault(name, set())
        self.parents.setdefault(name, set())

    def add_edge(self, parent: TypeDeclaration, child: TypeDeclaration) -> None:
        """Record that ``child`` is a direct subtype of ``parent``."""
        for type_decl in (parent, child):
            if type_decl.qualified_name not in self.nodes:
                self.add_type(type_decl)
        if child.qualified_name in self.children[parent.qualified_name]:
            return
        self.children[parent.qualified_name].add(child.qualified_name)
        self.parents[child.qualified_name].add(parent.qualified_name)
        self.edge_count += 1

    def parents_of(self, type_decl: TypeDeclaration) -> FrozenSet[TypeDeclaration]:
        """Direct parents (graph predecessors) only."""
        names = self.parents.get(type_decl.qualified_name, ())
        return frozenset(self.nodes[n] for n in names)

    def children_of(self, type_decl: TypeDeclaration) -> FrozenSet[TypeDeclaration]:
        """Direct subtypes (graph successors) only."""
        names = self.children.get(type_decl.qualified_name, ())
        return frozenset(self.nodes[n] for n in names)

    def __contains__(self, type_decl: object) -> bool:
        if isinstance(type_decl, TypeDeclaration):
            return type_decl.qualified_name in self.nodes
        return type_decl in self.nodes

    @property
    def types(self) -> List[TypeDeclaration]:
        return list(self.nodes.values())
