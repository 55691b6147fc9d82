"""Dictionary-driven word validation with a finite automaton."""

__version__ = "0.1.0"

from lexical_analyzer.analyzer import Analyzer, ValidationResult
from lexical_analyzer.automaton import (
    Alphabet,
    AnalyzerError,
    ConfigurationError,
    Dictionary,
    FiniteAutomaton,
    InvalidArgumentError,
)
from lexical_analyzer.storage import JsonFileStorage, MemoryStorage, Storage
from lexical_analyzer.tokenizer import Token, Tokenizer

__all__ = [
    "__version__",
    "Analyzer",
    "ValidationResult",
    "Alphabet",
    "Dictionary",
    "FiniteAutomaton",
    "AnalyzerError",
    "ConfigurationError",
    "InvalidArgumentError",
    "Storage",
    "MemoryStorage",
    "JsonFileStorage",
    "Token",
    "Tokenizer",
]
