"""Tests for pltyper/specs.py: typer registry."""

import pytest

from pltyper.errors import InputError, MappingError
from pltyper.specs import TYPER_SPECS, build_typer, normalize_typer_name
from pltyper.typers import (
    ElementIndexTyper,
    GninaIndexTyper,
    GninaVectorTyper,
    MappedAtomIndexTyper,
)


def test_normalize_typer_name():
    assert normalize_typer_name("GNINA") == "gnina"
    assert normalize_typer_name("gnina_vector") == "gnina-vector"


def test_normalize_invalid():
    with pytest.raises(InputError, match="Unsupported typer"):
        normalize_typer_name("smina")


def test_specs_kinds():
    assert TYPER_SPECS["gnina"].kind == "index"
    assert TYPER_SPECS["gnina-vector"].kind == "vector"


class TestBuildTyper:
    def test_gnina(self):
        typer = build_typer("gnina", use_covalent=True, strict=True)
        assert isinstance(typer, GninaIndexTyper)
        assert typer.use_covalent and typer.strict

    def test_element(self):
        typer = build_typer("element", max_element=36)
        assert isinstance(typer, ElementIndexTyper)
        assert typer.num_types() == 36
        assert build_typer("element").num_types() == 84

    def test_vector(self):
        typer = build_typer("gnina-vector", use_covalent=True)
        assert isinstance(typer, GninaVectorTyper)
        assert typer.index_typer.use_covalent

    def test_mapped(self, type_map_file):
        typer = build_typer("gnina", map_file=type_map_file)
        assert isinstance(typer, MappedAtomIndexTyper)
        assert typer.num_types() == 5

    def test_bad_map_file(self, tmp_path):
        path = tmp_path / "bad.types"
        path.write_text("Hydrogen Carbon\n")
        with pytest.raises(MappingError, match="'Carbon'"):
            build_typer("gnina", map_file=str(path))

    def test_vector_cannot_be_mapped(self, type_map_file):
        with pytest.raises(InputError, match="cannot be remapped"):
            build_typer("gnina-vector", map_file=type_map_file)
