"""Identity (pass-through) type mapper."""

from typing import List

from ..base import AtomIndexTypeMapper


class IdentityAtomMapper(AtomIndexTypeMapper):
    """Leave types unchanged. Reports zero types so callers keep the origin space."""

    def get_type_names(self) -> List[str]:
        return []
