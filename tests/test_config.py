from pathlib import Path

import pytest

from lexical_analyzer import Alphabet, Analyzer
from lexical_analyzer.config import AnalyzerConfig, load_config


def write_config(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "lexan.yaml"
    path.write_text(content, encoding="utf-8")
    return path


def test_defaults():
    config = AnalyzerConfig()
    assert config.validate().is_ok()
    options = config.to_options()
    assert options["alphabet"] is None
    assert len(options["dictionary"]) == 0


def test_load_config_without_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    result = load_config()
    assert result.is_ok()
    assert result.unwrap().dictionary == []


def test_from_yaml(tmp_path, word_file):
    path = write_config(
        tmp_path,
        "alphabet: abcdefghijklmnopqrstuvwxyz\n"
        "dictionary: [cow]\n"
        f"dictionary_file: {word_file.name}\n"
        "tokenizer:\n"
        "  pattern: '[a-z]+'\n"
        "  lowercase: true\n"
        "storage:\n"
        "  path: state/session.json\n"
        "logging:\n"
        "  level: debug\n"
        "  format: text\n",
    )

    config = AnalyzerConfig.from_yaml(path).unwrap()

    assert config.dictionary_file == word_file
    assert config.storage.path == tmp_path / "state" / "session.json"
    assert config.logging.level == "debug"
    assert config.load_dictionary().to_list() == ["cow", "cat", "dog", "bird"]

    analyzer = Analyzer.from_config(config)
    results = analyzer.read_input(config.make_tokenizer("Cow, BIRD and cats"))
    assert [(r.word, r.valid) for r in results] == [
        ("cow", True),
        ("bird", True),
        ("and", False),
        ("cats", False),
    ]


def test_alphabet_list(tmp_path):
    path = write_config(tmp_path, "alphabet: ['0', '1']\ndictionary: ['101']\n")
    config = AnalyzerConfig.from_yaml(path).unwrap()
    assert config.to_options()["alphabet"] == Alphabet("01")


@pytest.mark.parametrize(
    "content, field",
    [
        ("alphabet: 12\n", "alphabet"),
        ("alphabet: ['ab']\n", "alphabet"),
        ("dictionary: cat\n", "dictionary"),
        ("dictionary: ['']\n", "dictionary"),
        ("dictionary: [cat, null]\n", "dictionary"),
        ("dictionary: [cat, 12]\n", "dictionary"),
        ("tokenizer: [a]\n", "tokenizer"),
        ("storage: oops\n", "storage"),
        ("logging: 3\n", "logging"),
        ("tokenizer:\n  pattern: 5\n", "tokenizer.pattern"),
        ("logging:\n  level: 5\n", "logging.level"),
        ("dictionary_file: [a, b]\n", "unknown"),
        ("dictionary_file: missing.txt\n", "dictionary_file"),
        ("tokenizer:\n  pattern: '['\n", "tokenizer.pattern"),
        ("logging:\n  level: loud\n", "logging.level"),
        ("logging:\n  format: xml\n", "logging.format"),
        ("- a\n- b\n", "yaml"),
        ("key: [unclosed\n", "yaml"),
    ],
)
def test_invalid_config(tmp_path, content, field):
    result = AnalyzerConfig.from_yaml(write_config(tmp_path, content))
    assert result.is_err()
    assert result.unwrap_err().field == field


def test_missing_file(tmp_path):
    result = load_config(tmp_path / "nope.yaml")
    assert result.is_err()
    assert result.unwrap_err().field == "path"
