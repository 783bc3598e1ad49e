"""
Gnina atom typers.

Gnina types are variants of the AutoDock4 types, split further by the X-Score
(XS) hydrophobe/donor/acceptor assignment. The index typer picks one of the
28 types of `GNINA_TYPE_DATA`; the vector typer decomposes that type into
element one-hot slots plus the type's physical constants.
"""

from typing import List, Optional, Sequence, Tuple

from ..atoms import (
    bonded_to_heteroatom,
    is_hbond_donor,
    is_metal,
    is_nitrogen_acceptor,
    is_polar_hydrogen,
    is_sulfur_acceptor,
    partial_charge,
)
from ..base import AtomIndexTyper, AtomVectorTyper
from ..constants import (
    GninaTypeInfo,
    GNINA_TYPE_DATA,
    NUM_GNINA_TYPES,
    GNINA_SINGLE_TYPE_ELEMENTS,
    HYDROGEN,
    POLAR_HYDROGEN,
    ALIPHATIC_CARBON_XS_HYDROPHOBE,
    ALIPHATIC_CARBON_XS_NON_HYDROPHOBE,
    AROMATIC_CARBON_XS_HYDROPHOBE,
    AROMATIC_CARBON_XS_NON_HYDROPHOBE,
    NITROGEN,
    NITROGEN_XS_DONOR,
    NITROGEN_XS_DONOR_ACCEPTOR,
    NITROGEN_XS_ACCEPTOR,
    OXYGEN_XS_DONOR_ACCEPTOR,
    OXYGEN_XS_ACCEPTOR,
    SULFUR,
    SULFUR_ACCEPTOR,
    GENERIC_METAL,
    HYDROGEN_ATOMIC_NUMBER,
    CARBON_ATOMIC_NUMBER,
    NITROGEN_ATOMIC_NUMBER,
    OXYGEN_ATOMIC_NUMBER,
    SULFUR_ATOMIC_NUMBER,
    GNINA_VECTOR_TYPE_NAMES,
    NUM_GNINA_VECTOR_TYPES,
    NUM_GNINA_VECTOR_ELEMENTS,
    GNINA_TYPE_TO_VECTOR_ELEMENT,
)
from ..errors import InputError, UnknownElementError


def _validate_type_data(data: Sequence[GninaTypeInfo]) -> Tuple[GninaTypeInfo, ...]:
    data = tuple(data)
    if len(data) != NUM_GNINA_TYPES:
        raise InputError(f"Gnina type table needs {NUM_GNINA_TYPES} entries, got {len(data)}")
    for i, info in enumerate(data):
        if info.type_id != i:
            raise InputError(f"Gnina type table entry {i} has type_id {info.type_id}")
    names = [info.name for info in data]
    if len(set(names)) != len(names):
        raise InputError("Gnina type names must be unique")
    return data


class GninaIndexTyper(AtomIndexTyper):
    """
    Calculate gnina types.

    Unknown elements (anything that is neither a typed element nor a metal)
    go to GenericMetal, the table's catch-all, unless `strict` is set, in
    which case they raise `UnknownElementError`.
    """

    def __init__(
        self,
        use_covalent: bool = False,
        data: Optional[Sequence[GninaTypeInfo]] = None,
        strict: bool = False,
    ):
        """
        Args:
            use_covalent: Report the covalent radius instead of the XS radius.
            data: Alternate type table (defaults to GNINA_TYPE_DATA).
            strict: Raise on elements without a gnina type.
        """
        self.use_covalent = use_covalent
        self.strict = strict
        self._data = GNINA_TYPE_DATA if data is None else _validate_type_data(data)

    def num_types(self) -> int:
        return NUM_GNINA_TYPES

    def get_type(self, atom) -> Tuple[int, float]:
        t = self._classify(atom)
        info = self._data[t]
        return t, (info.covalent_radius if self.use_covalent else info.xs_radius)

    def get_type_names(self) -> List[str]:
        return [info.name for info in self._data]

    def get_info(self, type_id: int) -> GninaTypeInfo:
        """Return the constant record for a gnina type."""
        return self._data[type_id]

    def _classify(self, atom) -> int:
        anum = atom.GetAtomicNum()

        if anum == HYDROGEN_ATOMIC_NUMBER:
            return POLAR_HYDROGEN if is_polar_hydrogen(atom) else HYDROGEN

        if anum == CARBON_ATOMIC_NUMBER:
            hydrophobe = not bonded_to_heteroatom(atom)
            if atom.GetIsAromatic():
                return AROMATIC_CARBON_XS_HYDROPHOBE if hydrophobe else AROMATIC_CARBON_XS_NON_HYDROPHOBE
            return ALIPHATIC_CARBON_XS_HYDROPHOBE if hydrophobe else ALIPHATIC_CARBON_XS_NON_HYDROPHOBE

        if anum == NITROGEN_ATOMIC_NUMBER:
            donor = is_hbond_donor(atom)
            acceptor = is_nitrogen_acceptor(atom)
            if donor and acceptor:
                return NITROGEN_XS_DONOR_ACCEPTOR
            if donor:
                return NITROGEN_XS_DONOR
            if acceptor:
                return NITROGEN_XS_ACCEPTOR
            return NITROGEN

        # every oxygen is an AutoDock acceptor
        if anum == OXYGEN_ATOMIC_NUMBER:
            return OXYGEN_XS_DONOR_ACCEPTOR if is_hbond_donor(atom) else OXYGEN_XS_ACCEPTOR

        if anum == SULFUR_ATOMIC_NUMBER:
            return SULFUR_ACCEPTOR if is_sulfur_acceptor(atom) else SULFUR

        t = GNINA_SINGLE_TYPE_ELEMENTS.get(anum)
        if t is not None:
            return t
        if self.strict and not is_metal(anum):
            raise UnknownElementError(f"No gnina type for atomic number {anum}")
        return GENERIC_METAL


class GninaVectorTyper(AtomVectorTyper):
    """
    Decompose gnina types into elements and properties.

    Element slots are one-hot; hydrophobe/donor/acceptor/heteroatom slots
    are 0.0 or 1.0; depth, solvation, volume, radius and partial charge are
    floats.
    """

    def __init__(self, index_typer: Optional[GninaIndexTyper] = None):
        self.index_typer = index_typer if index_typer is not None else GninaIndexTyper()

    def num_types(self) -> int:
        return NUM_GNINA_VECTOR_TYPES

    def get_type(self, atom, out) -> float:
        self._check_buffer(out)
        t, radius = self.index_typer.get_type(atom)
        info = self.index_typer.get_info(t)

        out[:] = 0.0
        out[GNINA_TYPE_TO_VECTOR_ELEMENT[t]] = 1.0

        i = NUM_GNINA_VECTOR_ELEMENTS
        out[i] = info.ad_depth
        out[i + 1] = info.ad_solvation
        out[i + 2] = info.ad_volume
        out[i + 3] = radius
        out[i + 4] = float(info.xs_hydrophobe)
        out[i + 5] = float(info.xs_donor)
        out[i + 6] = float(info.xs_acceptor)
        out[i + 7] = float(info.ad_heteroatom)
        out[i + 8] = partial_charge(atom)
        return radius

    def get_type_names(self) -> List[str]:
        return list(GNINA_VECTOR_TYPE_NAMES)
