"""
Interned symbols.

A Symbol is a name that has been registered in a SymbolTable. Asking a
table for the same text twice returns the same object, so symbols compare
and hash by identity.

DEFAULT_SYMBOLS is created once at import time and lives for the whole
process. Nothing is ever removed from it. Pass an explicit table to the
constructors in terms.py / formulas.py to keep a separate vocabulary.
"""

from typing import Optional

# passed by SymbolTable.intern; a direct Symbol(...) call does not have it
_INTERNING = object()


class Symbol:
    """A canonical name. Only SymbolTable creates these."""

    __slots__ = ("name",)

    def __init__(self, name: str, _token=None):
        if _token is not _INTERNING:
            raise TypeError("Symbols are created by SymbolTable.intern, not Symbol()")
        self.name = name

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name


class SymbolTable:
    """Registry mapping text to its unique Symbol."""

    def __init__(self, reserved=()):
        self._symbols = {}
        for name in reserved:
            self.intern(name)

    def intern(self, name: str) -> Symbol:
        if name is None:
            raise TypeError("Attempted to get a Symbol without a name")
        if not isinstance(name, str):
            raise TypeError(f"Symbol names must be str, got {type(name).__name__}")
        if name == "":
            raise ValueError("Attempted to get a Symbol with an empty name")
        symbol = self._symbols.get(name)
        if symbol is None:
            symbol = Symbol(name, _INTERNING)
            self._symbols[name] = symbol
        return symbol

    def __contains__(self, name) -> bool:
        return name in self._symbols

    def __len__(self) -> int:
        return len(self._symbols)

    def __repr__(self):
        return f"SymbolTable({len(self._symbols)} symbols)"


DEFAULT_SYMBOLS = SymbolTable(reserved=("and", "or", "not", "implies", "true", "false"))


def intern(name: str, table: Optional[SymbolTable] = None) -> Symbol:
    """Canonical Symbol for name, from table or the process-wide default."""
    if table is None:
        table = DEFAULT_SYMBOLS
    return table.intern(name)


def as_symbol(symbol, table: Optional[SymbolTable] = None) -> Symbol:
    """Accept a Symbol as-is, intern anything else."""
    if isinstance(symbol, Symbol):
        return symbol
    return intern(symbol, table)
