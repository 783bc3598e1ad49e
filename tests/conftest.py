"""Shared test fixtures for pltyper."""

import pytest
from rdkit import Chem

from pltyper.typers import GninaIndexTyper


def make_mol(smiles: str, add_hs: bool = False) -> Chem.Mol:
    mol = Chem.MolFromSmiles(smiles)
    assert mol is not None, f"Invalid test SMILES: {smiles}"
    return Chem.AddHs(mol) if add_hs else mol


@pytest.fixture
def gnina_typer() -> GninaIndexTyper:
    return GninaIndexTyper()


@pytest.fixture
def ethanol_smiles() -> str:
    return "CCO"


@pytest.fixture
def aspirin_smiles() -> str:
    return "CC(=O)Oc1ccccc1C(=O)O"


@pytest.fixture
def ethanol(ethanol_smiles) -> Chem.Mol:
    """Ethanol with explicit hydrogens."""
    return make_mol(ethanol_smiles, add_hs=True)


@pytest.fixture
def diverse_mols(aspirin_smiles):
    """Molecules covering every element family the gnina typer knows."""
    smiles = [
        aspirin_smiles,
        "CC(N)=O",
        "c1ccncc1",
        "c1cc[nH]c1",
        "C[NH3+]",
        "CS(C)(=O)=O",
        "CSC",
        "OP(=O)(O)O",
        "FC(Cl)(Br)I",
        "OB(O)c1ccccc1",
        "[Mg+2]",
        "[Zn+2]",
        "[Cu+2]",
        "C[Si](C)(C)C",
    ]
    return [make_mol(s, add_hs=True) for s in smiles]


@pytest.fixture
def type_map_file(tmp_path) -> str:
    """Mapping file collapsing gnina types to a handful of groups."""
    path = tmp_path / "reduced.types"
    path.write_text(
        "Hydrogen PolarHydrogen\n"
        "AliphaticCarbonXSHydrophobe AliphaticCarbonXSNonHydrophobe "
        "AromaticCarbonXSHydrophobe AromaticCarbonXSNonHydrophobe\n"
        "Nitrogen NitrogenXSDonor NitrogenXSDonorAcceptor NitrogenXSAcceptor\n"
        "Oxygen OxygenXSDonor OxygenXSDonorAcceptor OxygenXSAcceptor\n"
        "Fluorine Chlorine Bromine Iodine\n"
    )
    return str(path)
