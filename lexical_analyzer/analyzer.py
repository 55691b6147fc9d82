"""Lexical analyzer: vocabulary maintenance and batch word validation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Mapping, Optional

from lexical_analyzer.automaton import (
    Alphabet,
    ConfigurationError,
    Dictionary,
    FiniteAutomaton,
    InvalidArgumentError,
)
from lexical_analyzer.storage import Storage
from lexical_analyzer.tokenizer import Token, Tokenizer
from lexical_analyzer.utils.logging import get_logger

if TYPE_CHECKING:
    from lexical_analyzer.config import AnalyzerConfig

logger = get_logger("analyzer")

# Word reported when the tokenizer produced nothing
NO_INPUT_WORD = "..."

# Snapshot keys written by Analyzer.save_state
KEY_LAST_STATE = "last_state"
KEY_ACTUAL_STATE = "actual_state"
KEY_ACTUAL_SYMBOL = "actual_simbol"
KEY_DICTIONARY = "dictionary"
KEY_ALPHABET = "alphabet"


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of validating one word.

    ``valid`` is None only for the placeholder returned when there was no
    input at all; a real token that fails is False.
    """

    word: str
    valid: Optional[bool]

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"word": self.word, "valid": self.valid}


class Analyzer:
    """
    Classifies tokens as known words or unknown ones.

    Owns exactly one FiniteAutomaton. Every vocabulary change rebuilds the
    automaton from scratch.
    """

    OPTIONS: Mapping[str, Any] = {}

    def __init__(self, options: Optional[Mapping[str, Any]] = None) -> None:
        """
        Initialize the analyzer.

        Args:
            options: Recognized keys are ``automaton`` (a prebuilt
                FiniteAutomaton, which wins over the others), ``alphabet``
                (default ``a``..``z``) and ``dictionary`` (default empty).
                Unknown keys are ignored.
        """
        options = {**self.OPTIONS, **(options or {})}

        automaton = options.get("automaton")
        if automaton is None:
            automaton = FiniteAutomaton(
                options.get("alphabet"),
                options.get("dictionary"),
            )
        self._automaton: FiniteAutomaton = automaton

    @classmethod
    def from_config(cls, config: AnalyzerConfig) -> Analyzer:
        """Create an analyzer from loaded configuration."""
        return cls(config.to_options())

    @classmethod
    def from_storage(cls, storage: Storage) -> Analyzer:
        """
        Recreate an analyzer from a snapshot written by ``save_state``.

        Missing keys fall back to the defaults; the cursor is restored only
        when both state ids are present.

        Raises:
            ConfigurationError: If the snapshot is inconsistent
        """
        alphabet = storage.get(KEY_ALPHABET)
        words = storage.get(KEY_DICTIONARY) or []

        analyzer = cls({
            "alphabet": Alphabet(alphabet) if alphabet is not None else None,
            "dictionary": Dictionary(words),
        })

        last_state = storage.get(KEY_LAST_STATE)
        actual_state = storage.get(KEY_ACTUAL_STATE)
        if last_state is not None and actual_state is not None:
            analyzer._automaton.restore_cursor(
                last_state,
                actual_state,
                storage.get(KEY_ACTUAL_SYMBOL),
            )

        logger.debug("state_restored", words=len(words))
        return analyzer

    def save_state(self, storage: Storage) -> None:
        """
        Write the automaton cursor, dictionary and alphabet into ``storage``.

        Args:
            storage: Session-style key-value store
        """
        automaton = self._automaton
        storage.set(KEY_LAST_STATE, automaton.last_state)
        storage.set(KEY_ACTUAL_STATE, automaton.actual_state)
        storage.set(KEY_ACTUAL_SYMBOL, automaton.actual_symbol)
        storage.set(KEY_DICTIONARY, automaton.dictionary.to_list())
        storage.set(KEY_ALPHABET, automaton.alphabet.to_list())

        logger.debug(
            "state_saved",
            actual_state=automaton.actual_state,
            words=len(automaton.dictionary),
        )

    def add_word(self, token: Token | str) -> None:
        """
        Add a word to the dictionary and rebuild the automaton.

        Raises:
            InvalidArgumentError: If the token is empty
            ConfigurationError: If the word uses a symbol outside the alphabet
        """
        word = str(token)
        if not word:
            raise InvalidArgumentError(
                "Analyzer.add_word expects a non empty Token, empty passed."
            )

        dictionary = self._automaton.dictionary
        added = dictionary.add(word)
        try:
            self._automaton.build()
        except ConfigurationError:
            # keep the dictionary buildable
            if added:
                dictionary.remove(word)
            raise

        logger.info("word_added", word=word, words=len(dictionary))

    def remove_word(self, token: Token | str) -> None:
        """
        Remove a word from the dictionary and rebuild the automaton.

        Raises:
            InvalidArgumentError: If the token is empty
        """
        word = str(token)
        if not word:
            raise InvalidArgumentError(
                "Analyzer.remove_word expects a non empty Token, empty passed."
            )

        removed = self._automaton.dictionary.remove(word)
        self._automaton.build()

        logger.info("word_removed", word=word, found=removed)

    def read_input(self, tokenizer: Tokenizer) -> list[ValidationResult]:
        """
        Validate every token of ``tokenizer`` in order.

        Returns:
            One result per token, or a single placeholder with ``valid=None``
            when the tokenizer is empty
        """
        if tokenizer.is_empty():
            self._automaton.restart()
            logger.debug("input_read", tokens=0)
            return [ValidationResult(word=NO_INPUT_WORD, valid=None)]

        results = []
        token = tokenizer.first()
        while token is not None:
            self._automaton.restart()
            valid = self._automaton.word_is_valid(token)
            results.append(ValidationResult(word=str(token), valid=valid))
            token = tokenizer.next()

        logger.info(
            "input_read",
            tokens=len(results),
            valid=sum(1 for result in results if result.valid),
        )
        return results

    def get_automaton(self) -> FiniteAutomaton:
        """Return the owned automaton (shared reference)."""
        return self._automaton
