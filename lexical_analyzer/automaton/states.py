"""State and error definitions for the word automaton."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

ROOT_STATE = 0


class AnalyzerError(Exception):
    """Base class for lexical analyzer errors."""

    pass


class InvalidArgumentError(AnalyzerError, ValueError):
    """An operation received an argument it cannot accept (e.g. an empty word)."""

    pass


class ConfigurationError(AnalyzerError):
    """The alphabet, dictionary or a restored snapshot are inconsistent."""

    pass


@dataclass
class AutomatonState:
    """A node of the transition graph, addressed by its index in the arena."""

    id: int
    transitions: dict[str, int] = field(default_factory=dict)
    accepting: bool = False

    def target(self, symbol: str) -> Optional[int]:
        """Id of the state reached on ``symbol``, or None."""
        return self.transitions.get(symbol)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "transitions": dict(self.transitions),
            "accepting": self.accepting,
        }


@dataclass(frozen=True)
class ScanCursor:
    """Position of a scan: state before the last step, current state, last symbol."""

    last_state: int = ROOT_STATE
    actual_state: int = ROOT_STATE
    actual_symbol: Optional[str] = None

    def advance(self, target: int, symbol: str) -> ScanCursor:
        """Cursor after stepping on ``symbol`` into ``target``."""
        return ScanCursor(
            last_state=self.actual_state,
            actual_state=target,
            actual_symbol=symbol,
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "last_state": self.last_state,
            "actual_state": self.actual_state,
            "actual_symbol": self.actual_symbol,
        }
