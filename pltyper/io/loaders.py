"""Unified molecule loaders for typing inputs."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, Union

from rdkit import Chem

from ..constants import IO_SUPPORTED_LIGAND_EXTENSIONS
from ..errors import InputError

logger = logging.getLogger(__name__)


def load_molecules(
    source: Union[str, Path, Chem.Mol],
    *,
    add_hs: bool = False,
) -> Iterator[Chem.Mol]:
    """Yield RDKit molecules from a file, a SMILES string or a molecule.

    SDF files yield every parsable record; unparsable records are skipped
    with a warning. Hydrogens present in the file are kept.

    Args:
        source: Path to a .sdf/.mol2/.mol/.pdb file, a SMILES string or a Mol.
        add_hs: Add explicit hydrogens to every molecule.
    """
    for mol in _iter_source(source):
        yield Chem.AddHs(mol) if add_hs else mol


def _iter_source(source) -> Iterator[Chem.Mol]:
    if hasattr(source, "GetNumAtoms"):
        yield source
        return
    if not isinstance(source, (str, Path)):
        raise InputError(f"Unsupported molecule input type: {type(source)!r}")

    path = Path(source)
    if not path.exists():
        mol = Chem.MolFromSmiles(str(source))
        if mol is None:
            raise InputError(f"Not a file or a valid SMILES string: '{source}'")
        yield mol
        return

    ext = path.suffix.lower()
    if ext not in IO_SUPPORTED_LIGAND_EXTENSIONS:
        raise InputError(f"Unsupported molecule file extension: {ext}")

    if ext == ".sdf":
        suppl = Chem.SDMolSupplier(str(path), removeHs=False)
        found = False
        for i, mol in enumerate(suppl):
            if mol is None:
                logger.warning(f"Skipping unparsable record {i} in {path}")
                continue
            found = True
            yield mol
        if not found:
            raise InputError(f"No molecules could be parsed from {path}")
        return

    loader = {
        ".mol": Chem.MolFromMolFile,
        ".mol2": Chem.MolFromMol2File,
        ".pdb": Chem.MolFromPDBFile,
    }[ext]
    mol = loader(str(path), removeHs=False)
    if mol is None:
        raise InputError(f"Failed to load molecule file: {path}")
    yield mol
