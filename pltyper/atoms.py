"""
RDKit atom attribute access for atom typers.

Typers never perceive chemistry themselves. Everything they need (element,
aromaticity, hydrogen counts, formal charge, neighbours, partial charge and
radii) is read from RDKit atoms through the helpers below.
"""

from __future__ import annotations

import logging
import math

from rdkit import Chem
from rdkit.Chem import AllChem

from .constants import (
    HYDROGEN_ATOMIC_NUMBER,
    NON_HETERO_ATOMIC_NUMBERS,
    POLAR_HYDROGEN_PARTNERS,
    AMIDE_CENTER_ATOMIC_NUMBERS,
    AMIDE_TERMINAL_ATOMIC_NUMBERS,
    METAL_ATOMIC_NUMBERS,
    CHARGE_METHODS,
    DEFAULT_CHARGE_METHOD,
    PARTIAL_CHARGE_PROP,
    PARTIAL_CHARGE_PROPS,
)
from .errors import InputError

logger = logging.getLogger(__name__)

_PERIODIC_TABLE = Chem.GetPeriodicTable()


# =============================================================================
# Element level
# =============================================================================

def is_metal(atomic_number: int) -> bool:
    return atomic_number in METAL_ATOMIC_NUMBERS


def covalent_radius(atomic_number: int) -> float:
    """Covalent radius (Angstrom) from RDKit's periodic table."""
    return float(_PERIODIC_TABLE.GetRcovalent(atomic_number))


def element_symbol(atomic_number: int) -> str:
    return _PERIODIC_TABLE.GetElementSymbol(atomic_number)


# =============================================================================
# Atom level
# =============================================================================

def num_hydrogens(atom: Chem.Atom) -> int:
    """Attached hydrogens, counting implicit, explicit and H neighbour atoms."""
    return atom.GetTotalNumHs(includeNeighbors=True)


def num_connections(atom: Chem.Atom) -> int:
    """Bonded neighbours plus hydrogens not present as atoms."""
    return atom.GetDegree() + atom.GetTotalNumHs()


def num_heavy_neighbors(atom: Chem.Atom) -> int:
    return sum(1 for nbr in atom.GetNeighbors() if nbr.GetAtomicNum() != HYDROGEN_ATOMIC_NUMBER)


def bonded_to_heteroatom(atom: Chem.Atom) -> bool:
    return any(nbr.GetAtomicNum() not in NON_HETERO_ATOMIC_NUMBERS for nbr in atom.GetNeighbors())


def is_polar_hydrogen(atom: Chem.Atom) -> bool:
    return any(nbr.GetAtomicNum() in POLAR_HYDROGEN_PARTNERS for nbr in atom.GetNeighbors())


def is_hbond_donor(atom: Chem.Atom) -> bool:
    """N/O style donor: the atom carries at least one hydrogen."""
    return num_hydrogens(atom) > 0


def _is_amide_like(atom: Chem.Atom) -> bool:
    for nbr in atom.GetNeighbors():
        if nbr.GetAtomicNum() not in AMIDE_CENTER_ATOMIC_NUMBERS:
            continue
        for bond in nbr.GetBonds():
            if bond.GetBondType() != Chem.BondType.DOUBLE:
                continue
            other = bond.GetOtherAtom(nbr)
            if other.GetIdx() != atom.GetIdx() and other.GetAtomicNum() in AMIDE_TERMINAL_ATOMIC_NUMBERS:
                return True
    return False


def is_nitrogen_acceptor(atom: Chem.Atom) -> bool:
    """Whether a nitrogen has a lone pair free to accept a hydrogen bond.

    The lone pair is considered unavailable for cations, saturated (four
    connection) nitrogens, pyrrole-type aromatic nitrogens and amide-like
    nitrogens.
    """
    if atom.GetFormalCharge() > 0:
        return False
    if num_connections(atom) >= 4:
        return False
    if atom.GetIsAromatic() and (num_hydrogens(atom) > 0 or num_heavy_neighbors(atom) >= 3):
        return False
    return not _is_amide_like(atom)


def is_sulfur_acceptor(atom: Chem.Atom) -> bool:
    """AutoDock "SA": neutral or anionic, non aromatic, at most two connections."""
    return (
        atom.GetFormalCharge() <= 0
        and not atom.GetIsAromatic()
        and num_connections(atom) <= 2
    )


def partial_charge(atom: Chem.Atom) -> float:
    """First finite partial charge stored on the atom, 0.0 if none."""
    props = atom.GetPropsAsDict(includePrivate=True, includeComputed=True)
    for prop in PARTIAL_CHARGE_PROPS:
        if prop in props:
            value = float(props[prop])
            if math.isfinite(value):
                return value
    return 0.0


# =============================================================================
# Molecule level
# =============================================================================

def assign_partial_charges(mol: Chem.Mol, method: str = DEFAULT_CHARGE_METHOD) -> Chem.Mol:
    """Compute partial charges and store them on every atom.

    Args:
        mol: RDKit molecule. Modified in place.
        method: "gasteiger", "mmff94" or "none".

    Returns:
        The same molecule, for chaining.
    """
    method = method.lower()
    if method not in CHARGE_METHODS:
        raise InputError(f"Unsupported charge method: {method!r}. Allowed: {list(CHARGE_METHODS)}")
    if method == "none":
        return mol

    charges = None
    if method == "mmff94":
        props = AllChem.MMFFGetMoleculeProperties(mol)
        if props is not None:
            charges = [props.GetMMFFPartialCharge(i) for i in range(mol.GetNumAtoms())]
        else:
            logger.warning("MMFF94 parameters unavailable, falling back to Gasteiger charges")

    if charges is None:
        AllChem.ComputeGasteigerCharges(mol)
        charges = [atom.GetDoubleProp("_GasteigerCharge") for atom in mol.GetAtoms()]

    for atom, charge in zip(mol.GetAtoms(), charges):
        atom.SetDoubleProp(PARTIAL_CHARGE_PROP, float(charge) if math.isfinite(charge) else 0.0)
    return mol


__all__ = [
    "is_metal",
    "covalent_radius",
    "element_symbol",
    "num_hydrogens",
    "num_connections",
    "num_heavy_neighbors",
    "bonded_to_heteroatom",
    "is_polar_hydrogen",
    "is_hbond_donor",
    "is_nitrogen_acceptor",
    "is_sulfur_acceptor",
    "partial_charge",
    "assign_partial_charges",
]
