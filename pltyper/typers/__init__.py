from .gnina import GninaIndexTyper, GninaVectorTyper
from .element import ElementIndexTyper
from .mapped import MappedAtomIndexTyper

__all__ = [
    "GninaIndexTyper",
    "GninaVectorTyper",
    "ElementIndexTyper",
    "MappedAtomIndexTyper",
]
