"""Element typer: the type id is the atomic number."""

from typing import List, Tuple

from ..atoms import covalent_radius, element_symbol
from ..base import AtomIndexTyper
from ..constants import CATCHALL_TYPE_NAME, DEFAULT_MAX_ELEMENT
from ..errors import InputError


class ElementIndexTyper(AtomIndexTyper):
    """
    Calculate element types.

    Any element with atomic number greater than or equal to `max_element`
    shares type zero with dummy atoms. There are many elements, so this is
    usually combined with a mapper that reduces to the organic subset.
    """

    def __init__(self, max_element: int = DEFAULT_MAX_ELEMENT):
        if max_element < 1:
            raise InputError(f"max_element must be >= 1, got {max_element}")
        self.max_element = int(max_element)

    def num_types(self) -> int:
        return self.max_element

    def get_type(self, atom) -> Tuple[int, float]:
        anum = atom.GetAtomicNum()
        t = anum if anum < self.max_element else 0
        return t, covalent_radius(anum)

    def get_type_names(self) -> List[str]:
        return [CATCHALL_TYPE_NAME] + [element_symbol(i) for i in range(1, self.max_element)]
