"""Typer specs: named, stable entry points for building typers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional, Union

from .base import AtomIndexTyper, AtomVectorTyper
from .errors import InputError
from .mappers import FileAtomMapper
from .typers import ElementIndexTyper, GninaIndexTyper, GninaVectorTyper, MappedAtomIndexTyper


@dataclass(frozen=True)
class TyperSpec:
    name: str
    kind: str  # "index" or "vector"
    description: str


GNINA_SPEC = TyperSpec(
    name="gnina",
    kind="index",
    description="28 AutoDock4/XS atom types with XS or covalent radii",
)

ELEMENT_SPEC = TyperSpec(
    name="element",
    kind="index",
    description="Atomic number up to a maximum element, 0 otherwise",
)

GNINA_VECTOR_SPEC = TyperSpec(
    name="gnina-vector",
    kind="vector",
    description="Element one-hot plus gnina type constants and partial charge",
)

TYPER_SPECS: Mapping[str, TyperSpec] = {
    "gnina": GNINA_SPEC,
    "element": ELEMENT_SPEC,
    "gnina-vector": GNINA_VECTOR_SPEC,
}


def normalize_typer_name(name: str) -> str:
    key = str(name).lower().replace("_", "-")
    if key not in TYPER_SPECS:
        raise InputError(f"Unsupported typer: {name!r}. Allowed: {list(TYPER_SPECS)}")
    return key


def build_typer(
    name: str,
    map_file: Optional[str] = None,
    *,
    use_covalent: bool = False,
    strict: bool = False,
    max_element: Optional[int] = None,
) -> Union[AtomIndexTyper, AtomVectorTyper]:
    """Build a typer by name, optionally remapped through a mapping file.

    Args:
        name: One of TYPER_SPECS.
        map_file: Mapping file applied to an index typer's type names.
        use_covalent: Gnina typers report covalent instead of XS radii.
        strict: Gnina typers raise on elements without a type.
        max_element: Element typer size (default DEFAULT_MAX_ELEMENT).
    """
    spec = TYPER_SPECS[normalize_typer_name(name)]

    if spec.name == "element":
        typer = ElementIndexTyper() if max_element is None else ElementIndexTyper(max_element)
    else:
        typer = GninaIndexTyper(use_covalent=use_covalent, strict=strict)
        if spec.kind == "vector":
            typer = GninaVectorTyper(typer)

    if map_file is None:
        return typer
    if spec.kind != "index":
        raise InputError(f"Typer {spec.name!r} produces vectors and cannot be remapped")
    mapper = FileAtomMapper(map_file, typer.get_type_names())
    return MappedAtomIndexTyper(mapper, typer)
