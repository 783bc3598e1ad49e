"""
File driven type mapper.

Each line of a mapping file specifies a single new type as a whitespace
separated list of old type names, for example::

    Hydrogen PolarHydrogen
    AliphaticCarbonXSHydrophobe AliphaticCarbonXSNonHydrophobe
    Fluorine Chlorine Bromine Iodine

Line order gives the new type ids. New type names are the old names of the
line joined with an underscore (e.g. ``Hydrogen_PolarHydrogen``).
"""

from __future__ import annotations

import io
import logging
import os
from pathlib import Path
from typing import Dict, List, Sequence, TextIO, Union

from ..base import AtomIndexTypeMapper
from ..constants import CATCHALL_TYPE_NAME, MAPPED_NAME_SEPARATOR, UNMAPPED_TYPE
from ..errors import MappingError

logger = logging.getLogger(__name__)


class FileAtomMapper(AtomIndexTypeMapper):
    """
    Map atom types based on a provided file.

    `type_names` must be the old type names properly indexed, normally the
    `get_type_names()` of the typer being mapped. Old types that no line
    mentions map to -1, or to a final "Other" type when `include_catchall`
    is set.
    """

    def __init__(
        self,
        source: Union[str, os.PathLike, TextIO],
        type_names: Sequence[str],
        include_catchall: bool = False,
    ):
        """
        Args:
            source: Path to a UTF-8 mapping file, or an open text stream.
            type_names: Old type names, indexed by old type id.
            include_catchall: Append a catch-all type for unmentioned old types.
        """
        self.old_type_names = list(type_names)
        self.include_catchall = include_catchall
        if isinstance(source, (str, os.PathLike)):
            path = Path(source)
            if not path.exists():
                raise MappingError(f"Mapping file not found: {path}")
            self.source_name = str(path)
            text = path.read_text(encoding="utf-8")
        else:
            self.source_name = getattr(source, "name", "<stream>")
            text = source.read()
        self._setup(text)

    @classmethod
    def from_string(
        cls,
        text: str,
        type_names: Sequence[str],
        include_catchall: bool = False,
    ) -> "FileAtomMapper":
        """Build a mapper from the text of a mapping file."""
        return cls(io.StringIO(text), type_names, include_catchall=include_catchall)

    def _setup(self, text: str) -> None:
        old_index: Dict[str, int] = {}
        for i, name in enumerate(self.old_type_names):
            if name in old_index:
                raise MappingError(f"Duplicate old type name {name!r}")
            old_index[name] = i

        lines = text.splitlines()
        if not lines:
            raise MappingError(f"{self.source_name}: mapping is empty")

        num_groups = len(lines)
        self._default_type = num_groups if self.include_catchall else UNMAPPED_TYPE
        self._old2new: List[int] = [self._default_type] * len(self.old_type_names)
        mapped: Dict[str, int] = {}
        self.new_type_names: List[str] = []

        for lineno, line in enumerate(lines, start=1):
            names = line.split()
            if not names:
                raise MappingError(f"{self.source_name}:{lineno}: blank line")
            for name in names:
                if name not in old_index:
                    raise MappingError(f"{self.source_name}:{lineno}: unknown type name {name!r}")
                if name in mapped:
                    raise MappingError(
                        f"{self.source_name}:{lineno}: type name {name!r} already mapped on line {mapped[name]}"
                    )
                mapped[name] = lineno
                self._old2new[old_index[name]] = lineno - 1
            self.new_type_names.append(MAPPED_NAME_SEPARATOR.join(names))

        if self.include_catchall:
            self.new_type_names.append(CATCHALL_TYPE_NAME)

        unmapped = [name for name in self.old_type_names if name not in mapped]
        logger.debug(
            f"{self.source_name}: mapped {len(mapped)} of {len(self.old_type_names)} types "
            f"onto {len(self.new_type_names)} types; unmapped: {unmapped}"
        )

    def num_types(self) -> int:
        return len(self.new_type_names)

    def get_type(self, origin_type: int) -> int:
        if 0 <= origin_type < len(self._old2new):
            return self._old2new[origin_type]
        return self._default_type

    def get_type_names(self) -> List[str]:
        return list(self.new_type_names)
