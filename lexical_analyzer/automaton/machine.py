"""Deterministic finite automaton compiled from a dictionary of words."""

from __future__ import annotations

from typing import Iterable, Optional, Union

from lexical_analyzer.automaton.alphabet import Alphabet
from lexical_analyzer.automaton.dictionary import Dictionary
from lexical_analyzer.automaton.states import (
    ROOT_STATE,
    AutomatonState,
    ConfigurationError,
    ScanCursor,
)
from lexical_analyzer.utils.logging import get_logger

logger = get_logger("automaton.machine")


class FiniteAutomaton:
    """
    Word automaton over a fixed alphabet.

    States live in an arena indexed by integer id, state 0 being the root.
    Each dictionary word is a path from the root whose last state is
    accepting (trie construction). Scanning is symbol by symbol through
    ``restart``/``step``; the cursor is transient and reset per word.
    """

    def __init__(
        self,
        alphabet: Union[Alphabet, Iterable[str], None] = None,
        dictionary: Optional[Dictionary] = None,
    ) -> None:
        """
        Initialize and build the automaton.

        Args:
            alphabet: Admissible symbols (default ``a``..``z``)
            dictionary: Known words (default empty)

        Raises:
            ConfigurationError: If a dictionary word uses a symbol outside the alphabet
        """
        self.alphabet = alphabet if isinstance(alphabet, Alphabet) else Alphabet(alphabet)
        self.dictionary = dictionary if dictionary is not None else Dictionary()

        self._states: list[AutomatonState] = []
        self.cursor = ScanCursor()

        self.build()

    @property
    def last_state(self) -> int:
        """State before the most recent successful step."""
        return self.cursor.last_state

    @property
    def actual_state(self) -> int:
        """Current state."""
        return self.cursor.actual_state

    @property
    def actual_symbol(self) -> Optional[str]:
        """Last symbol consumed, None right after a restart."""
        return self.cursor.actual_symbol

    @property
    def state_count(self) -> int:
        return len(self._states)

    @property
    def states(self) -> tuple[AutomatonState, ...]:
        return tuple(self._states)

    def build(self) -> None:
        """
        Rebuild every state from the current dictionary.

        The previous arena is discarded, so removed words leave nothing
        behind. The cursor is restarted because old state ids are no longer
        meaningful.

        Raises:
            ConfigurationError: If a word uses a symbol outside the alphabet
        """
        states = [AutomatonState(id=ROOT_STATE)]

        for word in self.dictionary:
            current = states[ROOT_STATE]
            for symbol in word:
                if symbol not in self.alphabet:
                    raise ConfigurationError(
                        f"Word {word!r} uses symbol {symbol!r} outside the alphabet"
                    )
                target = current.target(symbol)
                if target is None:
                    target = len(states)
                    states.append(AutomatonState(id=target))
                    current.transitions[symbol] = target
                current = states[target]
            current.accepting = True

        self._states = states
        self.restart()

        logger.debug(
            "automaton_built",
            words=len(self.dictionary),
            states=len(states),
        )

    def restart(self) -> None:
        """Move the cursor back to the root."""
        self.cursor = ScanCursor()

    def step(self, symbol: str) -> bool:
        """
        Consume one symbol.

        Returns:
            True if the cursor advanced, False on a dead end (the cursor is
            left on the last state reached)
        """
        target = self._states[self.cursor.actual_state].target(symbol)
        if target is None:
            return self._backtrack(symbol)

        self.cursor = self.cursor.advance(target, symbol)
        return True

    def _backtrack(self, symbol: str) -> bool:
        """
        Look for an alternative path after a dead end on ``symbol``.

        A trie has at most one transition per symbol and state, so there is
        never an alternative.
        """
        return False

    def is_accepting(self) -> bool:
        """Whether the current state ends a dictionary word."""
        return self._states[self.cursor.actual_state].accepting

    def word_is_valid(self, token: object) -> bool:
        """
        Feed every symbol of ``token`` from the current cursor position.

        Callers restart the automaton first. Unknown symbols and dead ends
        make the word invalid; they are never errors.

        Args:
            token: Token or plain string

        Returns:
            True if every symbol was consumed and the final state is accepting
        """
        for symbol in str(token):
            if not self.step(symbol):
                return False
        return self.is_accepting()

    def accepts(self, word: object) -> bool:
        """Restart and validate ``word``."""
        self.restart()
        return self.word_is_valid(word)

    def restore_cursor(
        self,
        last_state: int,
        actual_state: int,
        actual_symbol: Optional[str] = None,
    ) -> None:
        """
        Put the cursor back where a saved snapshot left it.

        Raises:
            ConfigurationError: If a state id does not exist in this automaton
        """
        for name, state_id in (("last_state", last_state), ("actual_state", actual_state)):
            if not isinstance(state_id, int) or not 0 <= state_id < len(self._states):
                raise ConfigurationError(
                    f"Cannot restore {name}={state_id!r}: automaton has {len(self._states)} states"
                )

        self.cursor = ScanCursor(
            last_state=last_state,
            actual_state=actual_state,
            actual_symbol=actual_symbol or None,
        )

    def __repr__(self) -> str:
        return (
            f"FiniteAutomaton(words={len(self.dictionary)}, "
            f"states={len(self._states)}, cursor={self.cursor!r})"
        )
