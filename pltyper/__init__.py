"""pltyper - Atom typing for protein-ligand grid featurization."""

# --- Contracts ---
from .base import AtomIndexTyper, AtomVectorTyper, AtomIndexTypeMapper

# --- Typers ---
from .typers.gnina import GninaIndexTyper, GninaVectorTyper
from .typers.element import ElementIndexTyper
from .typers.mapped import MappedAtomIndexTyper

# --- Mappers ---
from .mappers.identity import IdentityAtomMapper
from .mappers.subset import SubsetAtomMapper
from .mappers.file import FileAtomMapper

# --- Molecule helpers ---
from .atoms import assign_partial_charges
from .featurize import type_molecule, vectorize_molecule
from .io.loaders import load_molecules

# --- Infrastructure ---
from .errors import (
    PltyperError, InputError, MappingError, UnknownElementError, DimensionError,
)
from .specs import TYPER_SPECS, TyperSpec, build_typer
from .constants import GninaTypeInfo, GNINA_TYPE_DATA
from . import constants

__version__ = "0.1.0"

__all__ = [
    "AtomIndexTyper", "AtomVectorTyper", "AtomIndexTypeMapper",
    "GninaIndexTyper", "GninaVectorTyper", "ElementIndexTyper", "MappedAtomIndexTyper",
    "IdentityAtomMapper", "SubsetAtomMapper", "FileAtomMapper",
    "assign_partial_charges", "type_molecule", "vectorize_molecule", "load_molecules",
    "PltyperError", "InputError", "MappingError", "UnknownElementError", "DimensionError",
    "TyperSpec", "TYPER_SPECS", "build_typer",
    "GninaTypeInfo", "GNINA_TYPE_DATA",
    "constants",
]
