"""A parsed codebase: every known type plus their ancestry graph."""

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Tuple

from ..exceptions import UnknownTypeError
from .graph import AncestryGraph
from .types import TypeDeclaration


@dataclass
class Codebase:
    graph: AncestryGraph = field(default_factory=AncestryGraph)

    @classmethod
    def from_types(
        cls,
        types: Iterable[TypeDeclaration],
        edges: Iterable[Tuple[str, str]] = (),
    ) -> "Codebase":
        """Build from declarations and ``(parent_name, child_name)`` pairs."""
        graph = AncestryGraph()
        for type_decl in types:
            graph.add_type(type_decl)
        for parent_name, child_name in edges:
            if parent_name not in graph.nodes:
                raise UnknownTypeError(parent_name)
            if child_name not in graph.nodes:
                raise UnknownTypeError(child_name)
            graph.add_edge(graph.nodes[parent_name], graph.nodes[child_name])
        return cls(graph=graph)

    def get_type(self, qualified_name: str) -> TypeDeclaration:
        try:
            return self.graph.nodes[qualified_name]
        except KeyError:
            raise UnknownTypeError(qualified_name) from None

    @property
    def type_names(self) -> list[str]:
        return list(self.graph.nodes)

    def __iter__(self) -> Iterator[TypeDeclaration]:
        return iter(self.graph.nodes.values())

    def __len__(self) -> int:
        return len(self.graph.nodes)
