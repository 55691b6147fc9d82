"""Fixed, ordered symbol set the automaton may transition on."""

from __future__ import annotations

import string
from typing import Iterable, Iterator, Optional

from lexical_analyzer.automaton.states import ConfigurationError

DEFAULT_SYMBOLS = tuple(string.ascii_lowercase)


class Alphabet:
    """
    Ordered set of single-character symbols.

    Duplicates are dropped, keeping the first occurrence. The set is frozen
    after construction.
    """

    __slots__ = ("_symbols", "_lookup")

    def __init__(self, symbols: Optional[Iterable[str]] = None) -> None:
        """
        Initialize the alphabet.

        Args:
            symbols: Symbols in order; a plain string is split into characters.
                Defaults to ``a``..``z``.

        Raises:
            ConfigurationError: If a symbol is not exactly one character
        """
        if symbols is None:
            symbols = DEFAULT_SYMBOLS

        ordered: list[str] = []
        for symbol in symbols:
            if not isinstance(symbol, str) or len(symbol) != 1:
                raise ConfigurationError(
                    f"Alphabet symbols must be single characters, got {symbol!r}"
                )
            if symbol not in ordered:
                ordered.append(symbol)

        self._symbols = tuple(ordered)
        self._lookup = frozenset(ordered)

    @classmethod
    def from_range(cls, first: str, last: str) -> Alphabet:
        """Alphabet of every character from ``first`` to ``last`` inclusive."""
        return cls(chr(code) for code in range(ord(first), ord(last) + 1))

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._lookup

    def __iter__(self) -> Iterator[str]:
        return iter(self._symbols)

    def __len__(self) -> int:
        return len(self._symbols)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Alphabet):
            return self._symbols == other._symbols
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._symbols)

    def __repr__(self) -> str:
        return f"Alphabet({''.join(self._symbols)!r})"

    def to_list(self) -> list[str]:
        """Symbols in declared order, for persistence."""
        return list(self._symbols)
