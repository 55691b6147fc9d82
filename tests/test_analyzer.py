import itertools

import pytest

from lexical_analyzer import (
    Alphabet,
    Analyzer,
    ConfigurationError,
    Dictionary,
    FiniteAutomaton,
    InvalidArgumentError,
    MemoryStorage,
    Token,
    Tokenizer,
    ValidationResult,
)


def all_words(alphabet, max_length):
    for length in range(1, max_length + 1):
        for letters in itertools.product(alphabet, repeat=length):
            yield "".join(letters)


def test_defaults():
    analyzer = Analyzer()
    automaton = analyzer.get_automaton()
    assert automaton.alphabet == Alphabet()
    assert len(automaton.dictionary) == 0


def test_prebuilt_automaton_wins_over_other_options():
    automaton = FiniteAutomaton(Alphabet("xy"), Dictionary(["xy"]))
    analyzer = Analyzer({
        "automaton": automaton,
        "alphabet": Alphabet("ab"),
        "dictionary": Dictionary(["ab"]),
        "unknown": 1,
    })
    assert analyzer.get_automaton() is automaton


def test_dictionary_option_is_shared():
    dictionary = Dictionary()
    analyzer = Analyzer({"dictionary": dictionary})
    analyzer.add_word(Token("cat"))
    assert "cat" in dictionary


def test_read_input_mixed_tokens(analyzer):
    results = analyzer.read_input(Tokenizer("cat dog zzz"))
    assert results == [
        ValidationResult("cat", True),
        ValidationResult("dog", True),
        ValidationResult("zzz", False),
    ]
    assert [result.to_dict() for result in results] == [
        {"word": "cat", "valid": True},
        {"word": "dog", "valid": True},
        {"word": "zzz", "valid": False},
    ]


def test_read_input_empty_tokenizer(analyzer):
    analyzer.get_automaton().step("c")
    results = analyzer.read_input(Tokenizer("   "))
    assert [result.to_dict() for result in results] == [{"word": "...", "valid": None}]
    assert analyzer.get_automaton().actual_state == 0


def test_read_input_restarts_per_token(analyzer):
    # without a restart "cat" would be scanned from the end of "ca"
    results = analyzer.read_input(Tokenizer.from_tokens(["ca", "cat"]))
    assert [result.valid for result in results] == [False, True]


def test_read_input_symbols_outside_alphabet(analyzer):
    results = analyzer.read_input(Tokenizer("Cat d0g ça"))
    assert [result.valid for result in results] == [False, False, False]


def test_added_words_are_valid(analyzer):
    for word in ["bird", "birds", "b"]:
        analyzer.add_word(Token(word))
        assert analyzer.get_automaton().accepts(word)
    assert analyzer.get_automaton().accepts("bir") is False


def test_removed_words_are_invalid(analyzer):
    analyzer.remove_word(Token("cat"))
    automaton = analyzer.get_automaton()
    assert automaton.accepts("cat") is False
    assert automaton.accepts("dog") is True
    assert automaton.dictionary.to_list() == ["dog"]


def test_remove_missing_word_is_a_no_op(analyzer):
    analyzer.remove_word(Token("cow"))
    assert analyzer.get_automaton().dictionary.to_list() == ["cat", "dog"]


def test_add_then_remove_restores_behaviour():
    analyzer = Analyzer({"alphabet": Alphabet("abc"), "dictionary": Dictionary(["ab", "abc"])})
    automaton = analyzer.get_automaton()
    words = list(all_words("abc", 4))
    before = {word: automaton.accepts(word) for word in words}

    analyzer.add_word(Token("abca"))
    assert automaton.accepts("abca") is True
    analyzer.remove_word(Token("abca"))

    assert {word: automaton.accepts(word) for word in words} == before
    assert automaton.state_count == 4


@pytest.mark.parametrize("method", ["add_word", "remove_word"])
def test_empty_token_is_rejected(analyzer, method):
    with pytest.raises(InvalidArgumentError):
        getattr(analyzer, method)(Token(""))
    assert analyzer.get_automaton().dictionary.to_list() == ["cat", "dog"]


def test_add_word_outside_alphabet_leaves_dictionary_unchanged(analyzer):
    with pytest.raises(ConfigurationError):
        analyzer.add_word(Token("Cat"))
    automaton = analyzer.get_automaton()
    assert automaton.dictionary.to_list() == ["cat", "dog"]
    assert automaton.accepts("cat") is True


def test_save_state_writes_fixed_keys(analyzer):
    storage = MemoryStorage()
    automaton = analyzer.get_automaton()
    automaton.restart()
    automaton.word_is_valid("do")

    analyzer.save_state(storage)

    assert storage.to_dict() == {
        "last_state": automaton.last_state,
        "actual_state": automaton.actual_state,
        "actual_simbol": "o",
        "dictionary": ["cat", "dog"],
        "alphabet": list("abcdefghijklmnopqrstuvwxyz"),
    }


def test_save_state_after_restart(analyzer, storage):
    analyzer.read_input(Tokenizer(""))
    analyzer.save_state(storage)
    assert storage.get("last_state") == 0
    assert storage.get("actual_state") == 0
    assert storage.get("actual_simbol") is None


def test_from_storage_round_trip(storage):
    original = Analyzer({"alphabet": Alphabet("abcdegost"), "dictionary": Dictionary(["cat", "dog"])})
    automaton = original.get_automaton()
    automaton.restart()
    automaton.word_is_valid("ca")
    original.save_state(storage)

    restored = Analyzer.from_storage(storage)
    restored_automaton = restored.get_automaton()

    assert restored_automaton.alphabet == automaton.alphabet
    assert restored_automaton.dictionary.to_list() == ["cat", "dog"]
    assert restored_automaton.cursor == automaton.cursor
    assert restored_automaton.step("t") is True
    assert restored_automaton.is_accepting()


def test_from_storage_empty_uses_defaults(storage):
    analyzer = Analyzer.from_storage(storage)
    automaton = analyzer.get_automaton()
    assert automaton.alphabet == Alphabet()
    assert len(automaton.dictionary) == 0


def test_from_storage_rejects_bad_cursor(storage):
    storage.set("dictionary", ["cat"])
    storage.set("last_state", 0)
    storage.set("actual_state", 40)
    with pytest.raises(ConfigurationError):
        Analyzer.from_storage(storage)


def test_from_storage_keeps_empty_alphabet(storage):
    Analyzer({"alphabet": Alphabet([])}).save_state(storage)
    assert storage.get("alphabet") == []

    automaton = Analyzer.from_storage(storage).get_automaton()
    assert automaton.alphabet == Alphabet([])
    assert len(automaton.alphabet) == 0
