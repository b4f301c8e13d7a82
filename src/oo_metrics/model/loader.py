"""Load a codebase model from a JSON document.

The document describes already-parsed types::

    {
      "types": [
        {
          "name": "zoo.Dog",
          "abstract": false,
          "interface": false,
          "parents": ["zoo.Animal"],
          "span": {"begin": 3, "end": 40},
          "methods": [
            {"name": "move", "parameters": ["int"], "visibility": "public",
             "abstract": false, "default": false}
          ],
          "fields": [
            {"modifiers": ["private", "static"], "type": "int", "names": ["legs"]}
          ]
        }
      ]
    }

``parents`` lists superclasses and implemented interfaces alike. Parents
that are not themselves in the document (library types such as
``java.lang.Object``) are skipped and recorded in ``graph.unresolved``.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..exceptions import ModelLoadError
from ..logging_config import get_logger
from .codebase import Codebase
from .graph import AncestryGraph
from .types import FieldGroup, Method, SourceSpan, TypeDeclaration, Visibility

logger = get_logger(__name__)


def load_codebase(path: Union[str, Path]) -> Codebase:
    """Read and parse a JSON model file.

    Raises:
        ModelLoadError: If the file is missing, not JSON, or malformed
    """
    path = Path(path)
    if not path.exists():
        raise ModelLoadError(path, "file not found")
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ModelLoadError(path, f"invalid JSON: {e}")
    except OSError as e:
        raise ModelLoadError(path, str(e))

    return codebase_from_dict(data, source=path)


def codebase_from_dict(
    data: Dict[str, Any], source: Optional[Union[str, Path]] = None
) -> Codebase:
    """Build a codebase from an already-decoded model document."""
    if not isinstance(data, dict) or not isinstance(data.get("types"), list):
        raise ModelLoadError(source, "expected an object with a 'types' list")

    graph = AncestryGraph()
    declared_parents: Dict[str, List[str]] = {}

    for index, entry in enumerate(data["types"]):
        type_decl = _parse_type(entry, index, source)
        if type_decl.qualified_name in graph.nodes:
            raise ModelLoadError(source, f"duplicate type '{type_decl.qualified_name}'")
        graph.add_type(type_decl)
        declared_parents[type_decl.qualified_name] = _string_list(
            entry.get("parents", []), f"types[{index}].parents", source
        )

    for child_name, parent_names in declared_parents.items():
        child = graph.nodes[child_name]
        for parent_name in parent_names:
            parent = graph.nodes.get(parent_name)
            if parent is None:
                graph.unresolved.setdefault(child_name, []).append(parent_name)
                continue
            graph.add_edge(parent, child)

    if graph.unresolved:
        missing = sorted({p for names in graph.unresolved.values() for p in names})
        logger.warning(
            f"{len(missing)} parent type(s) not in model, ignored: {', '.join(missing)}"
        )

    logger.debug(f"Loaded {len(graph.nodes)} types, {graph.edge_count} inheritance edges")
    return Codebase(graph=graph)


def _parse_type(entry: Any, index: int, source: Optional[Union[str, Path]]) -> TypeDeclaration:
    where = f"types[{index}]"
    if not isinstance(entry, dict):
        raise ModelLoadError(source, f"{where} must be an object")
    name = entry.get("name")
    if not isinstance(name, str) or not name:
        raise ModelLoadError(source, f"{where}.name must be a non-empty string")

    methods = tuple(
        _parse_method(m, name, f"{where}.methods[{i}]", source)
        for i, m in enumerate(_list(entry.get("methods", []), f"{where}.methods", source))
    )
    field_groups = tuple(
        _parse_field_group(fg, f"{where}.fields[{i}]", source)
        for i, fg in enumerate(_list(entry.get("fields", []), f"{where}.fields", source))
    )

    span = None
    raw_span = entry.get("span")
    if raw_span is not None:
        if not isinstance(raw_span, dict):
            raise ModelLoadError(source, f"{where}.span must be an object")
        span = SourceSpan(
            begin_line=_optional_int(raw_span.get("begin"), f"{where}.span.begin", source),
            end_line=_optional_int(raw_span.get("end"), f"{where}.span.end", source),
        )

    return TypeDeclaration(
        qualified_name=name,
        is_abstract=_bool(entry.get("abstract", False), f"{where}.abstract", source),
        is_interface=_bool(entry.get("interface", False), f"{where}.interface", source),
        methods=methods,
        field_groups=field_groups,
        span=span,
    )


def _parse_method(
    entry: Any, declaring_type: str, where: str, source: Optional[Union[str, Path]]
) -> Method:
    if not isinstance(entry, dict):
        raise ModelLoadError(source, f"{where} must be an object")
    name = entry.get("name")
    if not isinstance(name, str) or not name:
        raise ModelLoadError(source, f"{where}.name must be a non-empty string")
    return Method(
        name=name,
        declaring_type=declaring_type,
        parameter_types=tuple(
            _string_list(entry.get("parameters", []), f"{where}.parameters", source)
        ),
        visibility=_visibility(entry.get("visibility"), where, source),
        is_abstract=_bool(entry.get("abstract", False), f"{where}.abstract", source),
        is_default=_bool(entry.get("default", False), f"{where}.default", source),
    )


def _parse_field_group(entry: Any, where: str, source: Optional[Union[str, Path]]) -> FieldGroup:
    if not isinstance(entry, dict):
        raise ModelLoadError(source, f"{where} must be an object")
    declared_type = entry.get("type")
    if not isinstance(declared_type, str) or not declared_type:
        raise ModelLoadError(source, f"{where}.type must be a non-empty string")
    return FieldGroup(
        declared_type=declared_type,
        names=tuple(_string_list(entry.get("names", []), f"{where}.names", source)),
        modifiers=frozenset(_string_list(entry.get("modifiers", []), f"{where}.modifiers", source)),
    )


def _visibility(value: Any, where: str, source: Optional[Union[str, Path]]) -> Visibility:
    if value is None:
        return Visibility.PACKAGE
    try:
        return Visibility(value)
    except ValueError:
        allowed = ", ".join(v.value for v in Visibility)
        raise ModelLoadError(source, f"{where}.visibility must be one of {allowed}, got {value!r}")


def _list(value: Any, where: str, source: Optional[Union[str, Path]]) -> list:
    if not isinstance(value, list):
        raise ModelLoadError(source, f"{where} must be a list")
    return value


def _string_list(value: Any, where: str, source: Optional[Union[str, Path]]) -> List[str]:
    items = _list(value, where, source)
    if not all(isinstance(item, str) for item in items):
        raise ModelLoadError(source, f"{where} must contain only strings")
    return items


def _optional_int(value: Any, where: str, source: Optional[Union[str, Path]]) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ModelLoadError(source, f"{where} must be an integer")
    return value


def _bool(value: Any, where: str, source: Optional[Union[str, Path]]) -> bool:
    if not isinstance(value, bool):
        raise ModelLoadError(source, f"{where} must be true or false")
    return value
