"""Per-molecule typing helpers producing arrays for grid/voxel consumers."""

from __future__ import annotations

from typing import Any, Dict

import numpy as np
import torch

from .base import AtomIndexTyper, AtomVectorTyper
from .errors import InputError


def _check_mol(mol) -> None:
    if mol is None or not hasattr(mol, "GetAtoms"):
        raise InputError(f"Expected an RDKit molecule, got {type(mol)!r}")


def type_molecule(mol, typer: AtomIndexTyper, as_tensor: bool = False) -> Dict[str, Any]:
    """Type every atom of a molecule with an index typer.

    Args:
        mol: RDKit molecule.
        typer: Index typer (possibly mapped).
        as_tensor: Return torch tensors instead of numpy arrays.

    Returns:
        Dict with "types" (N,) int64, "radii" (N,) float32 and "type_names".
    """
    _check_mol(mol)
    n_atoms = mol.GetNumAtoms()
    types = np.zeros(n_atoms, dtype=np.int64)
    radii = np.zeros(n_atoms, dtype=np.float32)
    for atom in mol.GetAtoms():
        idx = atom.GetIdx()
        types[idx], radii[idx] = typer.get_type(atom)

    if as_tensor:
        return {
            "types": torch.from_numpy(types),
            "radii": torch.from_numpy(radii),
            "type_names": typer.get_type_names(),
        }
    return {"types": types, "radii": radii, "type_names": typer.get_type_names()}


def vectorize_molecule(mol, typer: AtomVectorTyper, as_tensor: bool = False) -> Dict[str, Any]:
    """Type every atom of a molecule with a vector typer.

    Rows of the feature matrix are handed to the typer as its output buffer,
    so no per-atom allocation takes place.

    Returns:
        Dict with "features" (N, C) float32, "radii" (N,) float32 and "type_names".
    """
    _check_mol(mol)
    n_atoms = mol.GetNumAtoms()
    features = np.zeros((n_atoms, typer.num_types()), dtype=np.float32)
    radii = np.zeros(n_atoms, dtype=np.float32)
    for atom in mol.GetAtoms():
        idx = atom.GetIdx()
        radii[idx] = typer.get_type(atom, features[idx])

    if as_tensor:
        return {
            "features": torch.from_numpy(features),
            "radii": torch.from_numpy(radii),
            "type_names": typer.get_type_names(),
        }
    return {"features": features, "radii": radii, "type_names": typer.get_type_names()}


__all__ = ["type_molecule", "vectorize_molecule"]
