"""
Subset type mapper.

Maps atom types onto a provided subset, either one origin type per
destination type (direct) or several origin types per destination type
(grouped, i.e. surjective onto the explicit destinations).
"""

from __future__ import annotations

import logging
import numbers
from typing import Dict, List, Optional, Sequence, Union

from ..base import AtomIndexTypeMapper
from ..constants import CATCHALL_TYPE_NAME, MAPPED_NAME_SEPARATOR, UNMAPPED_TYPE
from ..errors import MappingError

logger = logging.getLogger(__name__)


def _as_groups(mapping: Sequence[Union[int, Sequence[int]]]) -> List[List[int]]:
    if len(mapping) == 0:
        raise MappingError("Subset mapping is empty")
    if all(isinstance(m, numbers.Integral) for m in mapping):
        return [[int(m)] for m in mapping]
    if any(isinstance(m, (numbers.Integral, str)) for m in mapping):
        raise MappingError("Subset mapping must be all type ids or all groups of type ids")
    return [[int(m) for m in group] for group in mapping]


class SubsetAtomMapper(AtomIndexTypeMapper):
    """
    Map atom types onto a provided subset.

    Indices of `mapping` are new types, values are old types (or groups of
    old types). If `include_catchall` is true, an extra last type is returned
    for anything not in the mapping, otherwise -1 is returned.

    Example:
        >>> halogens = SubsetAtomMapper([[17, 18, 19, 20]], include_catchall=True)
        >>> halogens.get_type(18), halogens.get_type(2)
        (0, 1)
    """

    def __init__(
        self,
        mapping: Sequence[Union[int, Sequence[int]]],
        include_catchall: bool = True,
        type_names: Optional[Sequence[str]] = None,
    ):
        """
        Args:
            mapping: Old type per new type, or a group of old types per new type.
            include_catchall: Append a catch-all type for unmapped old types.
            type_names: Names of the old types, used to name the new types.
        """
        groups = _as_groups(mapping)
        self._old2new: Dict[int, int] = {}
        for new_type, group in enumerate(groups):
            if not group:
                raise MappingError(f"New type {new_type} has no old types")
            for old_type in group:
                if old_type < 0:
                    raise MappingError(f"Invalid old type {old_type} for new type {new_type}")
                if old_type in self._old2new:
                    raise MappingError(
                        f"Old type {old_type} mapped to both {self._old2new[old_type]} and {new_type}"
                    )
                self._old2new[old_type] = new_type

        self.include_catchall = include_catchall
        self._num_new_types = len(groups) + (1 if include_catchall else 0)
        self._default_type = len(groups) if include_catchall else UNMAPPED_TYPE
        self._type_names = self._make_type_names(groups, type_names)
        logger.debug(
            f"Subset mapping onto {self._num_new_types} types "
            f"({len(self._old2new)} old types, catchall={include_catchall})"
        )

    def _make_type_names(self, groups: List[List[int]], type_names: Optional[Sequence[str]]) -> List[str]:
        if type_names is None:
            names = [str(i) for i in range(len(groups))]
        else:
            unknown = sorted(t for t in self._old2new if t >= len(type_names))
            if unknown:
                raise MappingError(f"Old types {unknown} have no name ({len(type_names)} names given)")
            names = [MAPPED_NAME_SEPARATOR.join(type_names[t] for t in group) for group in groups]
        if self.include_catchall:
            names.append(CATCHALL_TYPE_NAME)
        return names

    def num_types(self) -> int:
        return self._num_new_types

    def get_type(self, origin_type: int) -> int:
        return self._old2new.get(origin_type, self._default_type)

    def get_type_names(self) -> List[str]:
        return list(self._type_names)
