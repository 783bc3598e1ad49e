"""
Gnina Atom Type Constants.

Variants of the AutoDock4 atom types extended with the X-Score (XS)
hydrophobe/donor/acceptor assignments. Each record carries the legacy
AutoDock force-field parameters used by docking scoring functions along with
the radii used to place atoms on a grid.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class GninaTypeInfo:
    """Constants for a single gnina atom type."""

    type_id: int
    name: str           # unique, longer than 2 characters
    ad_name: str        # AutoDock name, at most 2 characters
    atomic_number: int
    ad_radius: float
    ad_depth: float
    ad_solvation: float
    ad_volume: float
    covalent_radius: float
    xs_radius: float
    xs_hydrophobe: bool
    xs_donor: bool
    xs_acceptor: bool
    ad_heteroatom: bool


# =============================================================================
# Type Ids
# =============================================================================

HYDROGEN = 0
POLAR_HYDROGEN = 1
ALIPHATIC_CARBON_XS_HYDROPHOBE = 2
ALIPHATIC_CARBON_XS_NON_HYDROPHOBE = 3
AROMATIC_CARBON_XS_HYDROPHOBE = 4
AROMATIC_CARBON_XS_NON_HYDROPHOBE = 5
NITROGEN = 6
NITROGEN_XS_DONOR = 7
NITROGEN_XS_DONOR_ACCEPTOR = 8
NITROGEN_XS_ACCEPTOR = 9
OXYGEN = 10
OXYGEN_XS_DONOR = 11
OXYGEN_XS_DONOR_ACCEPTOR = 12
OXYGEN_XS_ACCEPTOR = 13
SULFUR = 14
SULFUR_ACCEPTOR = 15
PHOSPHORUS = 16
FLUORINE = 17
CHLORINE = 18
BROMINE = 19
IODINE = 20
MAGNESIUM = 21
MANGANESE = 22
ZINC = 23
CALCIUM = 24
IRON = 25
GENERIC_METAL = 26
BORON = 27

NUM_GNINA_TYPES = 28

# =============================================================================
# Type Table
# =============================================================================

# Nitrogen and oxygen subtypes only differ in their XS flags; carbon subtypes
# differ in hydrophobicity and (aromatic vs aliphatic) AutoDock solvation.
GNINA_TYPE_DATA = (
    GninaTypeInfo(0, "Hydrogen", "H", 1, 1.000, 0.020, 0.00051, 0.0000, 0.37, 0.37, False, False, False, False),
    GninaTypeInfo(1, "PolarHydrogen", "HD", 1, 1.000, 0.020, 0.00051, 0.0000, 0.37, 0.37, False, False, False, False),
    GninaTypeInfo(2, "AliphaticCarbonXSHydrophobe", "C", 6, 2.000, 0.150, -0.00143, 33.5103, 0.77, 1.90, True, False, False, False),
    GninaTypeInfo(3, "AliphaticCarbonXSNonHydrophobe", "C", 6, 2.000, 0.150, -0.00143, 33.5103, 0.77, 1.90, False, False, False, False),
    GninaTypeInfo(4, "AromaticCarbonXSHydrophobe", "A", 6, 2.000, 0.150, -0.00052, 33.5103, 0.77, 1.90, True, False, False, False),
    GninaTypeInfo(5, "AromaticCarbonXSNonHydrophobe", "A", 6, 2.000, 0.150, -0.00052, 33.5103, 0.77, 1.90, False, False, False, False),
    GninaTypeInfo(6, "Nitrogen", "N", 7, 1.750, 0.160, -0.00162, 22.4493, 0.75, 1.80, False, False, False, True),
    GninaTypeInfo(7, "NitrogenXSDonor", "N", 7, 1.750, 0.160, -0.00162, 22.4493, 0.75, 1.80, False, True, False, True),
    GninaTypeInfo(8, "NitrogenXSDonorAcceptor", "NA", 7, 1.750, 0.160, -0.00162, 22.4493, 0.75, 1.80, False, True, True, True),
    GninaTypeInfo(9, "NitrogenXSAcceptor", "NA", 7, 1.750, 0.160, -0.00162, 22.4493, 0.75, 1.80, False, False, True, True),
    GninaTypeInfo(10, "Oxygen", "O", 8, 1.600, 0.200, -0.00251, 17.1573, 0.73, 1.70, False, False, False, True),
    GninaTypeInfo(11, "OxygenXSDonor", "O", 8, 1.600, 0.200, -0.00251, 17.1573, 0.73, 1.70, False, True, False, True),
    GninaTypeInfo(12, "OxygenXSDonorAcceptor", "OA", 8, 1.600, 0.200, -0.00251, 17.1573, 0.73, 1.70, False, True, True, True),
    GninaTypeInfo(13, "OxygenXSAcceptor", "OA", 8, 1.600, 0.200, -0.00251, 17.1573, 0.73, 1.70, False, False, True, True),
    GninaTypeInfo(14, "Sulfur", "S", 16, 2.000, 0.200, -0.00214, 33.5103, 1.02, 2.00, False, False, False, True),
    # XS does not treat sulfur as an acceptor
    GninaTypeInfo(15, "SulfurAcceptor", "SA", 16, 2.000, 0.200, -0.00214, 33.5103, 1.02, 2.00, False, False, False, True),
    GninaTypeInfo(16, "Phosphorus", "P", 15, 2.100, 0.200, -0.00110, 38.7924, 1.06, 2.10, False, False, False, True),
    GninaTypeInfo(17, "Fluorine", "F", 9, 1.545, 0.080, -0.00110, 15.4480, 0.71, 1.50, True, False, False, True),
    GninaTypeInfo(18, "Chlorine", "Cl", 17, 2.045, 0.276, -0.00110, 35.8235, 0.99, 1.80, True, False, False, True),
    GninaTypeInfo(19, "Bromine", "Br", 35, 2.165, 0.389, -0.00110, 42.5661, 1.14, 2.00, True, False, False, True),
    GninaTypeInfo(20, "Iodine", "I", 53, 2.360, 0.550, -0.00110, 55.0585, 1.33, 2.20, True, False, False, True),
    GninaTypeInfo(21, "Magnesium", "Mg", 12, 0.650, 0.875, -0.00110, 1.5600, 1.30, 1.20, False, True, False, True),
    GninaTypeInfo(22, "Manganese", "Mn", 25, 0.650, 0.875, -0.00110, 2.1400, 1.39, 1.20, False, True, False, True),
    GninaTypeInfo(23, "Zinc", "Zn", 30, 0.740, 0.550, -0.00110, 1.7000, 1.31, 1.20, False, True, False, True),
    GninaTypeInfo(24, "Calcium", "Ca", 20, 0.990, 0.550, -0.00110, 2.7700, 1.74, 1.20, False, True, False, True),
    GninaTypeInfo(25, "Iron", "Fe", 26, 0.650, 0.010, -0.00110, 1.8400, 1.25, 1.20, False, True, False, True),
    # Catch-all for metals (and, unless a typer is strict, unknown elements)
    GninaTypeInfo(26, "GenericMetal", "M", 0, 1.200, 0.000, -0.00110, 22.4493, 1.75, 1.20, False, True, False, True),
    GninaTypeInfo(27, "Boron", "B", 5, 2.040, 0.180, -0.00110, 12.0520, 0.90, 1.92, True, False, False, True),
)

# Atomic number -> type id for elements with a single gnina type
GNINA_SINGLE_TYPE_ELEMENTS = {
    15: PHOSPHORUS,
    9: FLUORINE,
    17: CHLORINE,
    35: BROMINE,
    53: IODINE,
    12: MAGNESIUM,
    25: MANGANESE,
    30: ZINC,
    20: CALCIUM,
    26: IRON,
    5: BORON,
}

# =============================================================================
# Vector Type Layout
# =============================================================================

GNINA_VECTOR_ELEMENT_NAMES = [
    "Hydrogen", "Carbon", "Nitrogen", "Oxygen", "Sulfur", "Phosphorus",
    "Fluorine", "Chlorine", "Bromine", "Iodine",
    "Magnesium", "Manganese", "Zinc", "Calcium", "Iron",
    "Boron", "GenericAtom",
]
NUM_GNINA_VECTOR_ELEMENTS = len(GNINA_VECTOR_ELEMENT_NAMES)

GNINA_VECTOR_PROPERTY_NAMES = [
    "AD_depth", "AD_solvation", "AD_volume", "Radius",
    "XS_hydrophobe", "XS_donor", "XS_acceptor",
    "AD_heteroatom",
    "PartialCharge",
]

GNINA_VECTOR_TYPE_NAMES = GNINA_VECTOR_ELEMENT_NAMES + GNINA_VECTOR_PROPERTY_NAMES
NUM_GNINA_VECTOR_TYPES = len(GNINA_VECTOR_TYPE_NAMES)

# Gnina type id -> element one-hot slot
GNINA_TYPE_TO_VECTOR_ELEMENT = (
    0, 0,           # hydrogens
    1, 1, 1, 1,     # carbons
    2, 2, 2, 2,     # nitrogens
    3, 3, 3, 3,     # oxygens
    4, 4,           # sulfurs
    5,              # phosphorus
    6, 7, 8, 9,     # halogens
    10, 11, 12, 13, 14,
    16,             # generic metal -> generic atom
    15,             # boron
)
