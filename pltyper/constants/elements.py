"""
Element Constants.

Element groupings consulted by the atom typers when interpreting RDKit atoms.
"""

# =============================================================================
# Atomic Numbers
# =============================================================================

HYDROGEN_ATOMIC_NUMBER = 1
CARBON_ATOMIC_NUMBER = 6
NITROGEN_ATOMIC_NUMBER = 7
OXYGEN_ATOMIC_NUMBER = 8
SULFUR_ATOMIC_NUMBER = 16

# Neither carbon nor hydrogen => heteroatom
NON_HETERO_ATOMIC_NUMBERS = frozenset({HYDROGEN_ATOMIC_NUMBER, CARBON_ATOMIC_NUMBER})

# Hydrogens bonded to these can be donated (AutoDock "HD")
POLAR_HYDROGEN_PARTNERS = frozenset({NITROGEN_ATOMIC_NUMBER, OXYGEN_ATOMIC_NUMBER})

# A nitrogen bonded to one of these, which is in turn double bonded to an
# O/S, is amide-like and keeps its lone pair in conjugation.
AMIDE_CENTER_ATOMIC_NUMBERS = frozenset({CARBON_ATOMIC_NUMBER, SULFUR_ATOMIC_NUMBER})
AMIDE_TERMINAL_ATOMIC_NUMBERS = frozenset({OXYGEN_ATOMIC_NUMBER, SULFUR_ATOMIC_NUMBER})

# =============================================================================
# Metals
# =============================================================================

# Alkali, alkaline earth, transition, post-transition metals, lanthanides
# and actinides. Metalloids (B, Si, Ge, As, Sb, Te) are not metals here.
METAL_ATOMIC_NUMBERS = frozenset(
    [3, 4, 11, 12, 13]
    + list(range(19, 32))      # K .. Ga
    + list(range(37, 51))      # Rb .. Sn
    + list(range(55, 85))      # Cs .. Po
    + list(range(87, 119))     # Fr .. Og
)
