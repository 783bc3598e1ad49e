"""Tests for pltyper/typers/gnina.py: GninaVectorTyper."""

import numpy as np
import pytest
import torch

from pltyper import constants as C
from pltyper.atoms import assign_partial_charges, partial_charge
from pltyper.errors import DimensionError
from pltyper.typers import GninaIndexTyper, GninaVectorTyper

from conftest import make_mol

N_ELEMENTS = C.NUM_GNINA_VECTOR_ELEMENTS
NAMES = C.GNINA_VECTOR_TYPE_NAMES
BOOLEAN_SLOTS = [NAMES.index(n) for n in ("XS_hydrophobe", "XS_donor", "XS_acceptor", "AD_heteroatom")]


class TestGninaVectorTyper:
    def test_layout(self):
        typer = GninaVectorTyper()
        assert typer.num_types() == 26
        names = typer.get_type_names()
        assert len(names) == 26
        assert names[:2] == ["Hydrogen", "Carbon"]
        assert names[16] == "GenericAtom"
        assert names[-1] == "PartialCharge"

    def test_one_hot_and_booleans(self, diverse_mols):
        typer = GninaVectorTyper()
        out = np.zeros(typer.num_types(), dtype=np.float32)
        for mol in diverse_mols:
            assign_partial_charges(mol)
            for atom in mol.GetAtoms():
                typer.get_type(atom, out)
                one_hot = out[:N_ELEMENTS]
                assert np.count_nonzero(one_hot) == 1
                assert one_hot.sum() == 1.0
                for slot in BOOLEAN_SLOTS:
                    assert out[slot] in (0.0, 1.0)

    def test_element_slots(self):
        typer = GninaVectorTyper()
        mol = make_mol("Oc1ccccc1CCl.[Cu+2]")
        expected = {"O": "Oxygen", "C": "Carbon", "Cl": "Chlorine", "Cu": "GenericAtom"}
        for atom in mol.GetAtoms():
            vec, _ = typer.get_vector(atom)
            assert NAMES[int(np.argmax(vec[:N_ELEMENTS]))] == expected[atom.GetSymbol()]

    def test_constants_copied(self):
        index_typer = GninaIndexTyper()
        typer = GninaVectorTyper(index_typer)
        mol = make_mol("CO")
        oxygen = mol.GetAtomWithIdx(1)
        vec, radius = typer.get_vector(oxygen)
        t, expected_radius = index_typer.get_type(oxygen)
        info = index_typer.get_info(t)
        assert radius == expected_radius
        assert vec[NAMES.index("AD_depth")] == pytest.approx(info.ad_depth)
        assert vec[NAMES.index("AD_solvation")] == pytest.approx(info.ad_solvation)
        assert vec[NAMES.index("AD_volume")] == pytest.approx(info.ad_volume)
        assert vec[NAMES.index("Radius")] == pytest.approx(expected_radius)
        assert vec[NAMES.index("XS_donor")] == 1.0
        assert vec[NAMES.index("XS_acceptor")] == 1.0
        assert vec[NAMES.index("XS_hydrophobe")] == 0.0
        assert vec[NAMES.index("AD_heteroatom")] == 1.0

    def test_fluorine_volume(self):
        vec, _ = GninaVectorTyper().get_vector(make_mol("CF").GetAtomWithIdx(1))
        assert vec[NAMES.index("Fluorine")] == 1.0
        assert vec[NAMES.index("AD_volume")] == pytest.approx(15.448)

    def test_covalent_radius_from_index_typer(self):
        typer = GninaVectorTyper(GninaIndexTyper(use_covalent=True))
        mol = make_mol("C")
        vec, radius = typer.get_vector(mol.GetAtomWithIdx(0))
        assert radius == pytest.approx(0.77)
        assert vec[NAMES.index("Radius")] == pytest.approx(0.77)

    def test_partial_charge_from_atom(self, ethanol):
        assign_partial_charges(ethanol)
        typer = GninaVectorTyper()
        for atom in ethanol.GetAtoms():
            vec, _ = typer.get_vector(atom)
            assert vec[-1] == pytest.approx(partial_charge(atom), abs=1e-6)
        oxygen = [a for a in ethanol.GetAtoms() if a.GetSymbol() == "O"][0]
        assert typer.get_vector(oxygen)[0][-1] < 0.0

    def test_no_charges_is_zero(self):
        typer = GninaVectorTyper()
        vec, _ = typer.get_vector(make_mol("CO").GetAtomWithIdx(1))
        assert vec[-1] == 0.0

    def test_buffer_fully_overwritten(self):
        typer = GninaVectorTyper()
        out = np.full(typer.num_types(), 7.0, dtype=np.float32)
        typer.get_type(make_mol("C").GetAtomWithIdx(0), out)
        assert 7.0 not in out
        assert out[NAMES.index("Carbon")] == 1.0
        assert out[NAMES.index("Hydrogen")] == 0.0

    def test_torch_buffer(self):
        typer = GninaVectorTyper()
        out = torch.zeros(typer.num_types())
        radius = typer.get_type(make_mol("C").GetAtomWithIdx(0), out)
        assert radius == pytest.approx(1.9)
        assert out[NAMES.index("Carbon")].item() == 1.0

    def test_wrong_buffer_size(self):
        typer = GninaVectorTyper()
        atom = make_mol("C").GetAtomWithIdx(0)
        with pytest.raises(DimensionError):
            typer.get_type(atom, np.zeros(25, dtype=np.float32))
        with pytest.raises(DimensionError):
            typer.get_type(atom, np.zeros((1, 26), dtype=np.float32))

    def test_list_buffer_rejected(self):
        typer = GninaVectorTyper()
        atom = make_mol("C").GetAtomWithIdx(0)
        with pytest.raises(DimensionError, match="array or tensor"):
            typer.get_type(atom, [0.0] * typer.num_types())
