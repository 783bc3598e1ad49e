from .identity import IdentityAtomMapper
from .subset import SubsetAtomMapper
from .file import FileAtomMapper

__all__ = [
    "IdentityAtomMapper",
    "SubsetAtomMapper",
    "FileAtomMapper",
]
