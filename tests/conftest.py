"""Shared test fixtures for oo-metrics tests."""

import pytest

from oo_metrics.model import Codebase, FieldGroup, Method, SourceSpan, TypeDeclaration, Visibility


def _method(owner, name, *params, visibility=Visibility.PUBLIC, abstract=False, default=False):
    return Method(
        name=name,
        declaring_type=owner,
        parameter_types=tuple(params),
        visibility=visibility,
        is_abstract=abstract,
        is_default=default,
    )


def _fields(declared_type, *names, modifiers=()):
    return FieldGroup(declared_type=declared_type, names=tuple(names), modifiers=frozenset(modifiers))


@pytest.fixture
def make_method():
    """Factory: make_method(owner, name, *param_types, visibility=, abstract=, default=)."""
    return _method


@pytest.fixture
def make_fields():
    """Factory: make_fields(declared_type, *names, modifiers=())."""
    return _fields


@pytest.fixture
def values():
    """Turn a metric set into {name: NumericValue} for assertions."""

    def _values(metrics):
        return {m.name.value: m.value for m in metrics}

    return _values


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep user and project config files and OO_METRICS_* vars out of tests."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    for key in ("CALCULATORS", "DECIMAL_PLACES", "WORKERS", "VERBOSITY"):
        monkeypatch.delenv(f"OO_METRICS_{key}", raising=False)


@pytest.fixture
def zoo():
    """Abstract Animal with abstract move() and concrete eat(); Dog overrides move()."""
    animal = TypeDeclaration(
        "zoo.Animal",
        is_abstract=True,
        methods=(
            _method("zoo.Animal", "move", abstract=True),
            _method("zoo.Animal", "eat"),
        ),
        field_groups=(
            _fields("String", "name", modifiers=("protected",)),
            _fields("int", "age", modifiers=("private",)),
        ),
        span=SourceSpan(1, 12),
    )
    dog = TypeDeclaration(
        "zoo.Dog",
        methods=(_method("zoo.Dog", "move"),),
        field_groups=(_fields("int", "legs", modifiers=("public",)),),
        span=SourceSpan(14, 20),
    )
    return Codebase.from_types([animal, dog], edges=[("zoo.Animal", "zoo.Dog")])


@pytest.fixture
def shapes():
    """Interface Shape with abstract area() and default describe(); Circle implements area()."""
    shape = TypeDeclaration(
        "geo.Shape",
        is_interface=True,
        methods=(
            _method("geo.Shape", "area", visibility=Visibility.PACKAGE, abstract=True),
            _method("geo.Shape", "describe", visibility=Visibility.PACKAGE, default=True),
        ),
    )
    circle = TypeDeclaration(
        "geo.Circle",
        methods=(_method("geo.Circle", "area"),),
        field_groups=(_fields("double", "radius", modifiers=("private", "final")),),
    )
    return Codebase.from_types([shape, circle], edges=[("geo.Shape", "geo.Circle")])


@pytest.fixture
def model_document():
    """JSON-ready model with a small class hierarchy and one library parent."""
    return {
        "types": [
            {
                "name": "zoo.Animal",
                "abstract": True,
                "parents": ["java.lang.Object"],
                "span": {"begin": 1, "end": 12},
                "methods": [
                    {"name": "move", "visibility": "public", "abstract": True},
                    {"name": "eat", "visibility": "public"},
                ],
                "fields": [{"modifiers": ["protected"], "type": "String", "names": ["name"]}],
            },
            {
                "name": "zoo.Dog",
                "parents": ["zoo.Animal"],
                "span": {"begin": 14, "end": 20},
                "methods": [
                    {"name": "move", "visibility": "public"},
                    {"name": "bark", "parameters": ["int"]},
                ],
                "fields": [
                    {"modifiers": ["public", "static"], "type": "int", "names": ["legs", "tails"]}
                ],
            },
        ]
    }
