from __future__ import annotations
import sys


class Symbol:
    __slots__ = ("id",)

    def __init__(self, name: str):
        # Intern to ensure fast equality/hash and reduce memory
        self.id = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.id == other.id

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    def __hash__(self) -> int:
        return hash(self.id)

    def __setattr__(self, key, value):
        if hasattr(self, "id"):
            raise AttributeError("Symbol is immutable")
        object.__setattr__(self, key, value)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id
