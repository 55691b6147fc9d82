"""Configuration for the lexical analyzer.

Configuration can be loaded from a YAML file and validated at startup. Every
value has a default, so an absent file yields a usable configuration.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

from lexical_analyzer.automaton import Alphabet, ConfigurationError, Dictionary
from lexical_analyzer.tokenizer import DEFAULT_PATTERN, Tokenizer
from lexical_analyzer.utils.result import ConfigError, Err, Ok, Result

DEFAULT_CONFIG_FILE = "lexan.yaml"
DEFAULT_STORAGE_PATH = ".lexan/session.json"
LOG_LEVELS = ("debug", "info", "warn", "warning", "error")


@dataclass
class TokenizerConfig:
    """How raw input is split into tokens."""

    pattern: str = DEFAULT_PATTERN
    lowercase: bool = False


@dataclass
class StorageConfig:
    """Where session snapshots are kept."""

    path: Path = field(default_factory=lambda: Path(DEFAULT_STORAGE_PATH))


@dataclass
class LoggingConfig:
    """Logging settings."""

    level: str = "warning"
    format: str = "json"


@dataclass
class AnalyzerConfig:
    """
    Complete analyzer configuration.

    ``alphabet`` of None means the default ``a``..``z``. Words come from the
    inline ``dictionary`` list followed by ``dictionary_file`` if set.
    """

    alphabet: Optional[list[str]] = None
    dictionary: list[str] = field(default_factory=list)
    dictionary_file: Optional[Path] = None

    tokenizer: TokenizerConfig = field(default_factory=TokenizerConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_yaml(cls, path: Path) -> Result["AnalyzerConfig", ConfigError]:
        """
        Load configuration from a YAML file.

        Relative ``dictionary_file`` and ``storage.path`` values are resolved
        against the directory holding the YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            Result with loaded config or error
        """
        path = Path(path)

        if not path.exists():
            return Err(ConfigError(
                field="path",
                message=f"Configuration file not found: {path}",
            ))

        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            return Err(ConfigError(
                field="yaml",
                message=f"Failed to parse YAML: {e}",
            ))
        except OSError as e:
            return Err(ConfigError(
                field="file",
                message=f"Failed to read config file: {e}",
            ))

        if not isinstance(data, dict):
            return Err(ConfigError(
                field="yaml",
                message=f"Expected a mapping at top level, got {type(data).__name__}",
            ))

        return cls.from_dict(data, base_dir=path.parent)

    @classmethod
    def from_dict(
        cls,
        data: dict[str, Any],
        base_dir: Optional[Path] = None,
    ) -> Result["AnalyzerConfig", ConfigError]:
        """
        Create configuration from a dictionary.

        Args:
            data: Configuration dictionary
            base_dir: Directory relative paths are resolved against

        Returns:
            Result with loaded config or error
        """
        try:
            alphabet = data.get("alphabet")
            if alphabet is not None:
                if isinstance(alphabet, str):
                    alphabet = list(alphabet)
                elif not isinstance(alphabet, list):
                    return Err(ConfigError(
                        field="alphabet",
                        message=f"Must be a string or a list, got {type(alphabet).__name__}",
                    ))
                alphabet = [str(symbol) for symbol in alphabet]

            words = data.get("dictionary") or []
            if not isinstance(words, list):
                return Err(ConfigError(
                    field="dictionary",
                    message=f"Must be a list of words, got {type(words).__name__}",
                ))
            for word in words:
                if not isinstance(word, str):
                    return Err(ConfigError(
                        field="dictionary",
                        message=f"Words must be strings, got {word!r}",
                    ))

            dictionary_file = data.get("dictionary_file")
            if dictionary_file is not None:
                dictionary_file = _resolve(Path(dictionary_file), base_dir)

            sections = {}
            for name in ("tokenizer", "storage", "logging"):
                section = data.get(name) or {}
                if not isinstance(section, dict):
                    return Err(ConfigError(
                        field=name,
                        message=f"Must be a mapping, got {type(section).__name__}",
                    ))
                sections[name] = section

            tokenizer_data = sections["tokenizer"]
            tokenizer = TokenizerConfig(
                pattern=tokenizer_data.get("pattern", DEFAULT_PATTERN),
                lowercase=bool(tokenizer_data.get("lowercase", False)),
            )

            storage_data = sections["storage"]
            storage = StorageConfig(
                path=_resolve(Path(storage_data.get("path", DEFAULT_STORAGE_PATH)), base_dir),
            )

            logging_data = sections["logging"]
            logging_config = LoggingConfig(
                level=logging_data.get("level", "warning"),
                format=logging_data.get("format", "json"),
            )

            config = cls(
                alphabet=alphabet,
                dictionary=list(words),
                dictionary_file=dictionary_file,
                tokenizer=tokenizer,
                storage=storage,
                logging=logging_config,
            )

        except Exception as e:
            return Err(ConfigError(
                field="unknown",
                message=f"Failed to parse configuration: {e}",
            ))

        validation_result = config.validate()
        if validation_result.is_err():
            return Err(validation_result.unwrap_err())

        return Ok(config)

    def validate(self) -> Result[None, ConfigError]:
        """
        Validate configuration values.

        Returns:
            Result indicating success or validation error
        """
        if self.alphabet is not None:
            try:
                Alphabet(self.alphabet)
            except ConfigurationError as e:
                return Err(ConfigError(field="alphabet", message=str(e)))

        if any(not word for word in self.dictionary):
            return Err(ConfigError(
                field="dictionary",
                message="Words must be non empty",
            ))

        if self.dictionary_file is not None and not self.dictionary_file.is_file():
            return Err(ConfigError(
                field="dictionary_file",
                message=f"Word list not found: {self.dictionary_file}",
            ))

        if not isinstance(self.tokenizer.pattern, str):
            return Err(ConfigError(
                field="tokenizer.pattern",
                message=f"Must be a string, got {self.tokenizer.pattern!r}",
            ))
        try:
            re.compile(self.tokenizer.pattern)
        except re.error as e:
            return Err(ConfigError(
                field="tokenizer.pattern",
                message=f"Invalid regular expression: {e}",
            ))

        level = self.logging.level
        if not isinstance(level, str) or level.lower() not in LOG_LEVELS:
            return Err(ConfigError(
                field="logging.level",
                message=f"Unknown level {self.logging.level!r}",
            ))
        if self.logging.format not in ("json", "text"):
            return Err(ConfigError(
                field="logging.format",
                message=f"Must be 'json' or 'text', got {self.logging.format!r}",
            ))

        return Ok(None)

    def load_dictionary(self) -> Dictionary:
        """Dictionary holding the inline words followed by the word list file."""
        dictionary = Dictionary(self.dictionary)
        if self.dictionary_file is not None:
            for word in Dictionary.from_file(self.dictionary_file):
                dictionary.add(word)
        return dictionary

    def to_options(self) -> dict[str, Any]:
        """
        Analyzer construction options.

        Raises:
            ConfigurationError: If a word uses a symbol outside the alphabet
        """
        return {
            "alphabet": Alphabet(self.alphabet) if self.alphabet is not None else None,
            "dictionary": self.load_dictionary(),
        }

    def make_tokenizer(self, text: str) -> Tokenizer:
        """Tokenizer over ``text`` using the configured pattern."""
        return Tokenizer(
            text,
            pattern=self.tokenizer.pattern,
            lowercase=self.tokenizer.lowercase,
        )


def _resolve(path: Path, base_dir: Optional[Path]) -> Path:
    if base_dir is None or path.is_absolute():
        return path
    return base_dir / path


def load_config(path: Optional[Path] = None) -> Result[AnalyzerConfig, ConfigError]:
    """
    Load configuration from the standard location.

    Args:
        path: YAML file (defaults to ./lexan.yaml); when the default file is
            absent the built-in defaults are used

    Returns:
        Result with loaded config or error
    """
    if path is None:
        default_path = Path(DEFAULT_CONFIG_FILE)
        if not default_path.exists():
            return Ok(AnalyzerConfig())
        path = default_path

    return AnalyzerConfig.from_yaml(Path(path))
