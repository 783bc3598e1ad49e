"""
Core Atom Typing Contracts for pltyper

Defines the abstract base classes shared by every typer and mapper:
1. Index typers  (atom -> category id + radius)
2. Vector typers (atom -> feature vector + radius)
3. Type mappers  (category id -> category id)

Implementations are read-only after construction, so a single instance can
type atoms from many threads at once.
"""

from abc import ABC, abstractmethod
from typing import List, Tuple

import numpy as np

from .errors import DimensionError


class AtomIndexTyper(ABC):
    """
    Reduces an atom to a numerical type index along with an atomic radius.
    """

    @abstractmethod
    def num_types(self) -> int:
        """Number of types (size of the category space)."""

    @abstractmethod
    def get_type(self, atom) -> Tuple[int, float]:
        """Return (type index, radius) for an RDKit atom."""

    @abstractmethod
    def get_type_names(self) -> List[str]:
        """Name of each type, indexed by type id. Not expected to be fast."""


class AtomVectorTyper(ABC):
    """
    Reduces an atom to a fixed length feature vector along with an atomic radius.
    """

    @abstractmethod
    def num_types(self) -> int:
        """Length of the feature vector."""

    @abstractmethod
    def get_type(self, atom, out) -> float:
        """Overwrite `out` with the atom's features and return its radius.

        Args:
            atom: RDKit atom.
            out: numpy array or torch tensor of shape (num_types(),), owned by
                the caller and reused across calls. Every slot is written.
        """

    @abstractmethod
    def get_type_names(self) -> List[str]:
        """Name of each vector dimension."""

    def get_vector(self, atom) -> Tuple[np.ndarray, float]:
        """Allocate a fresh float32 vector for `atom`; returns (vector, radius)."""
        out = np.zeros(self.num_types(), dtype=np.float32)
        radius = self.get_type(atom, out)
        return out, radius

    def _check_buffer(self, out) -> None:
        n = self.num_types()
        if not hasattr(out, "shape"):
            raise DimensionError(f"Type vector must be an array or tensor, got {type(out).__name__}")
        shape = tuple(out.shape)
        if shape != (n,):
            raise DimensionError(f"Type vector has shape {shape}, expected ({n},)")


class AtomIndexTypeMapper(ABC):
    """
    Maps between type indices.

    The defaults describe an identity mapping: `num_types()` returns 0 (no
    mapping, use the origin space unchanged) and `get_type` returns the
    origin type.
    """

    def num_types(self) -> int:
        return 0

    def get_type(self, origin_type: int) -> int:
        return origin_type

    @abstractmethod
    def get_type_names(self) -> List[str]:
        """Names of the mapped (destination) types."""
