"""Restartable sequence of tokens extracted from raw text."""

from __future__ import annotations

import re
from typing import Iterable, Iterator, Optional

from lexical_analyzer.tokenizer.token import Token

DEFAULT_PATTERN = r"\S+"


class Tokenizer:
    """
    Ordered, finite, restartable token source.

    Tokens are extracted eagerly with a regular expression. ``first``
    rewinds the cursor, ``next`` walks forward and returns None once the
    sequence is exhausted. None is the end marker; an empty Token is a
    value, so the two are never confused.
    """

    def __init__(
        self,
        text: str = "",
        pattern: str = DEFAULT_PATTERN,
        lowercase: bool = False,
    ) -> None:
        """
        Initialize the tokenizer.

        Args:
            text: Raw input
            pattern: Regular expression matching one token
            lowercase: Fold tokens to lower case
        """
        if lowercase:
            text = text.lower()
        self._tokens = [Token(match.group(0)) for match in re.finditer(pattern, text)]
        self._position = 0

    @classmethod
    def from_tokens(cls, words: Iterable[str]) -> Tokenizer:
        """Tokenizer over words that are already split."""
        tokenizer = cls()
        tokenizer._tokens = [Token(str(word)) for word in words]
        return tokenizer

    def is_empty(self) -> bool:
        """True if the input produced no tokens."""
        return not self._tokens

    def first(self) -> Optional[Token]:
        """Rewind and return the first token, or None if there is none."""
        self._position = 0
        if not self._tokens:
            return None
        return self._tokens[0]

    def next(self) -> Optional[Token]:
        """Return the token after the current one, or None when exhausted."""
        if self._position + 1 >= len(self._tokens):
            self._position = len(self._tokens)
            return None
        self._position += 1
        return self._tokens[self._position]

    def __iter__(self) -> Iterator[Token]:
        token = self.first()
        while token is not None:
            yield token
            token = self.next()

    def __len__(self) -> int:
        return len(self._tokens)

    def __repr__(self) -> str:
        return f"Tokenizer({[token.text for token in self._tokens]!r})"
