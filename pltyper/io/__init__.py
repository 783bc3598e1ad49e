"""IO helpers."""

from .loaders import load_molecules

__all__ = ["load_molecules"]
