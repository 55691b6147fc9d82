"""Word automaton: alphabet, dictionary and the finite automaton built from them."""

from lexical_analyzer.automaton.alphabet import DEFAULT_SYMBOLS, Alphabet
from lexical_analyzer.automaton.dictionary import Dictionary
from lexical_analyzer.automaton.machine import FiniteAutomaton
from lexical_analyzer.automaton.states import (
    ROOT_STATE,
    AnalyzerError,
    AutomatonState,
    ConfigurationError,
    InvalidArgumentError,
    ScanCursor,
)

__all__ = [
    # Alphabet
    "Alphabet",
    "DEFAULT_SYMBOLS",
    # Dictionary
    "Dictionary",
    # Machine
    "FiniteAutomaton",
    # States
    "AutomatonState",
    "ScanCursor",
    "ROOT_STATE",
    # Errors
    "AnalyzerError",
    "InvalidArgumentError",
    "ConfigurationError",
]
