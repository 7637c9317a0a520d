from __future__ import annotations
import sys


class Symbol:
    """An identifier. Two symbols are equal when their names are equal."""

    __slots__ = ("id",)

    def __init__(self, name: str):
        # Interned, so equal names share one string object
        self.id = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.id is other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id
