"""Composition of an index typer with a type mapper."""

from typing import Generic, List, Tuple, TypeVar

from ..base import AtomIndexTyper, AtomIndexTypeMapper

M = TypeVar("M", bound=AtomIndexTypeMapper)
T = TypeVar("T", bound=AtomIndexTyper)


class MappedAtomIndexTyper(AtomIndexTyper, Generic[M, T]):
    """
    Wrap an atom typer with a mapper.

    Atoms are typed by `typer` and the resulting type is remapped by `mapper`;
    the radius passes through unchanged. A mapper reporting zero types is a
    pass-through, in which case the typer's category space is exposed.
    """

    def __init__(self, mapper: M, typer: T):
        self.mapper = mapper
        self.typer = typer

    def num_types(self) -> int:
        n = self.mapper.num_types()
        return n if n > 0 else self.typer.num_types()

    def get_type(self, atom) -> Tuple[int, float]:
        t, radius = self.typer.get_type(atom)
        return self.mapper.get_type(t), radius

    def get_type_names(self) -> List[str]:
        if self.mapper.num_types() > 0:
            return self.mapper.get_type_names()
        return self.typer.get_type_names()
