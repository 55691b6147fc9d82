"""Ordered set of known words."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator

from lexical_analyzer.automaton.states import InvalidArgumentError
from lexical_analyzer.utils.logging import get_logger

logger = get_logger("automaton.dictionary")


class Dictionary:
    """
    Set of words that keeps insertion order for deterministic export.

    Membership does not depend on order; ``to_list`` is stable for a given
    sequence of mutations.
    """

    def __init__(self, words: Iterable[str] = ()) -> None:
        # dict keys give an insertion-ordered set
        self._words: dict[str, None] = {}
        for word in words:
            self.add(word)

    @classmethod
    def from_file(cls, path: Path) -> Dictionary:
        """
        Load a dictionary with one word per line.

        Blank lines and lines starting with ``#`` are skipped.

        Args:
            path: Path to the word list

        Returns:
            Dictionary holding the words of the file
        """
        path = Path(path)
        words = []
        for line in path.read_text(encoding="utf-8").splitlines():
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            words.append(line)

        logger.debug("dictionary_loaded", path=str(path), words=len(words))
        return cls(words)

    def add(self, word: str) -> bool:
        """
        Insert a word if not already present.

        Returns:
            True if the word was inserted, False if it was already known

        Raises:
            InvalidArgumentError: If the word is empty
        """
        if not word:
            raise InvalidArgumentError("Dictionary.add expects a non empty word")
        if word in self._words:
            return False
        self._words[word] = None
        return True

    def remove(self, word: str) -> bool:
        """
        Delete a word if present.

        Returns:
            True if the word was removed, False if it was not found

        Raises:
            InvalidArgumentError: If the word is empty
        """
        if not word:
            raise InvalidArgumentError("Dictionary.remove expects a non empty word")
        if word not in self._words:
            return False
        del self._words[word]
        return True

    def to_list(self) -> list[str]:
        """Words in insertion order."""
        return list(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._words))

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"Dictionary({self.to_list()!r})"
