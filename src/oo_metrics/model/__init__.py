"""Read-only model of a parsed codebase: types, members and ancestry."""

from .codebase import Codebase
from .graph import AncestryGraph
from .loader import codebase_from_dict, load_codebase
from .types import FieldGroup, Method, SourceSpan, TypeDeclaration, Visibility

__all__ = [
    "AncestryGraph",
    "Codebase",
    "FieldGroup",
    "Method",
    "SourceSpan",
    "TypeDeclaration",
    "Visibility",
    "codebase_from_dict",
    "load_codebase",
]
