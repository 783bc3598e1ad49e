"""
pltyper Constants Module.

Centralized constants for atom typing including:
- Gnina (AutoDock4/XS) atom type table and vector layout
- Element groupings (metals, heteroatoms, polar hydrogen partners)
- Runtime defaults for typers, mappers and IO
"""

# =============================================================================
# Gnina Types
# =============================================================================
from .gnina_types import (
    GninaTypeInfo,
    GNINA_TYPE_DATA,
    NUM_GNINA_TYPES,
    GNINA_SINGLE_TYPE_ELEMENTS,

    # Type ids
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
    OXYGEN,
    OXYGEN_XS_DONOR,
    OXYGEN_XS_DONOR_ACCEPTOR,
    OXYGEN_XS_ACCEPTOR,
    SULFUR,
    SULFUR_ACCEPTOR,
    PHOSPHORUS,
    FLUORINE,
    CHLORINE,
    BROMINE,
    IODINE,
    MAGNESIUM,
    MANGANESE,
    ZINC,
    CALCIUM,
    IRON,
    GENERIC_METAL,
    BORON,

    # Vector layout
    GNINA_VECTOR_ELEMENT_NAMES,
    NUM_GNINA_VECTOR_ELEMENTS,
    GNINA_VECTOR_PROPERTY_NAMES,
    GNINA_VECTOR_TYPE_NAMES,
    NUM_GNINA_VECTOR_TYPES,
    GNINA_TYPE_TO_VECTOR_ELEMENT,
)

# =============================================================================
# Element Constants
# =============================================================================
from .elements import (
    HYDROGEN_ATOMIC_NUMBER,
    CARBON_ATOMIC_NUMBER,
    NITROGEN_ATOMIC_NUMBER,
    OXYGEN_ATOMIC_NUMBER,
    SULFUR_ATOMIC_NUMBER,
    NON_HETERO_ATOMIC_NUMBERS,
    POLAR_HYDROGEN_PARTNERS,
    AMIDE_CENTER_ATOMIC_NUMBERS,
    AMIDE_TERMINAL_ATOMIC_NUMBERS,
    METAL_ATOMIC_NUMBERS,
)

# =============================================================================
# Runtime Defaults
# =============================================================================
from .runtime import (
    IO_SUPPORTED_LIGAND_EXTENSIONS,
    DEFAULT_MAX_ELEMENT,
    CATCHALL_TYPE_NAME,
    MAPPED_NAME_SEPARATOR,
    UNMAPPED_TYPE,
    CHARGE_METHODS,
    DEFAULT_CHARGE_METHOD,
    PARTIAL_CHARGE_PROP,
    PARTIAL_CHARGE_PROPS,
)
