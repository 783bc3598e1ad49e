"""Tests for pltyper/atoms.py: RDKit attribute access and partial charges."""

import math

import pytest
from rdkit import Chem

from pltyper.atoms import (
    assign_partial_charges,
    bonded_to_heteroatom,
    is_metal,
    is_nitrogen_acceptor,
    is_polar_hydrogen,
    is_sulfur_acceptor,
    num_connections,
    num_hydrogens,
    partial_charge,
)
from pltyper.constants import PARTIAL_CHARGE_PROP
from pltyper.errors import InputError

from conftest import make_mol


class TestAtomAttributes:
    def test_hydrogen_counts_implicit_and_explicit(self):
        implicit = make_mol("CN").GetAtomWithIdx(1)
        explicit = make_mol("CN", add_hs=True).GetAtomWithIdx(1)
        assert num_hydrogens(implicit) == num_hydrogens(explicit) == 2
        assert num_connections(implicit) == num_connections(explicit) == 3

    def test_heteroatom_neighbors(self):
        mol = make_mol("CCO")
        assert not bonded_to_heteroatom(mol.GetAtomWithIdx(0))
        assert bonded_to_heteroatom(mol.GetAtomWithIdx(1))

    def test_polar_hydrogen(self, ethanol):
        polar = [a for a in ethanol.GetAtoms() if a.GetAtomicNum() == 1 and is_polar_hydrogen(a)]
        assert len(polar) == 1
        assert polar[0].GetNeighbors()[0].GetSymbol() == "O"

    def test_metals(self):
        assert is_metal(30)
        assert is_metal(11)
        assert not is_metal(5)
        assert not is_metal(14)
        assert not is_metal(0)

    def test_nitrogen_acceptor(self):
        assert is_nitrogen_acceptor(make_mol("c1ccncc1").GetAtomWithIdx(3))
        assert not is_nitrogen_acceptor(make_mol("CC(N)=O").GetAtomWithIdx(2))
        assert not is_nitrogen_acceptor(make_mol("CC(N)=S").GetAtomWithIdx(2))
        assert not is_nitrogen_acceptor(make_mol("CS(N)(=O)=O").GetAtomWithIdx(2))

    def test_sulfur_acceptor(self):
        assert is_sulfur_acceptor(make_mol("CC(C)=S").GetAtomWithIdx(3))
        assert not is_sulfur_acceptor(make_mol("C[S+](C)C").GetAtomWithIdx(1))


class TestPartialCharges:
    def test_missing_is_zero(self):
        assert partial_charge(make_mol("CO").GetAtomWithIdx(1)) == 0.0

    def test_gasteiger(self, ethanol):
        assign_partial_charges(ethanol, "gasteiger")
        charges = [partial_charge(a) for a in ethanol.GetAtoms()]
        assert all(math.isfinite(c) for c in charges)
        assert sum(charges) == pytest.approx(0.0, abs=1e-4)
        for atom in ethanol.GetAtoms():
            assert atom.HasProp(PARTIAL_CHARGE_PROP)

    def test_mmff94(self):
        mol = make_mol("CCO", add_hs=True)
        assign_partial_charges(mol, "mmff94")
        oxygen = mol.GetAtomWithIdx(2)
        assert partial_charge(oxygen) < 0.0

    def test_none_leaves_atoms(self):
        mol = make_mol("CCO")
        assign_partial_charges(mol, "none")
        assert not mol.GetAtomWithIdx(2).HasProp(PARTIAL_CHARGE_PROP)

    def test_stored_gasteiger_is_read(self):
        mol = make_mol("CCO")
        atom = mol.GetAtomWithIdx(2)
        atom.SetDoubleProp("_GasteigerCharge", -0.4)
        assert partial_charge(atom) == pytest.approx(-0.4)

    def test_non_finite_skipped(self):
        atom = make_mol("CCO").GetAtomWithIdx(2)
        atom.SetDoubleProp(PARTIAL_CHARGE_PROP, float("nan"))
        atom.SetDoubleProp("_GasteigerCharge", -0.25)
        assert partial_charge(atom) == pytest.approx(-0.25)

    def test_invalid_method(self):
        with pytest.raises(InputError, match="Unsupported charge method"):
            assign_partial_charges(Chem.MolFromSmiles("C"), "am1bcc")
