"""Token and tokenizer for raw input text."""

from lexical_analyzer.tokenizer.token import Token
from lexical_analyzer.tokenizer.tokenizer import DEFAULT_PATTERN, Tokenizer

__all__ = ["Token", "Tokenizer", "DEFAULT_PATTERN"]
