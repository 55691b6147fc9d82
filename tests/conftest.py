from pathlib import Path

import pytest

from lexical_analyzer import Analyzer, Dictionary, FiniteAutomaton, MemoryStorage
from lexical_analyzer.utils.logging import configure_logging


@pytest.fixture
def dictionary() -> Dictionary:
    return Dictionary(["cat", "car", "cart", "dog"])


@pytest.fixture
def automaton(dictionary: Dictionary) -> FiniteAutomaton:
    return FiniteAutomaton(dictionary=dictionary)


@pytest.fixture
def analyzer() -> Analyzer:
    return Analyzer({"dictionary": Dictionary(["cat", "dog"])})


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def word_file(tmp_path: Path) -> Path:
    path = tmp_path / "words.txt"
    path.write_text("# animals\ncat\n\ndog\n  bird  \n", encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def reset_logging():
    # the CLI points structlog at the runner's stream, which is closed afterwards
    configure_logging()
    yield
    configure_logging()
