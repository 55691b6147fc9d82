"""CLI entry point for lexical-analyzer."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import NoReturn, Optional

import click

from lexical_analyzer import __version__
from lexical_analyzer.analyzer import KEY_DICTIONARY, Analyzer
from lexical_analyzer.automaton import ConfigurationError, InvalidArgumentError
from lexical_analyzer.config import AnalyzerConfig, load_config
from lexical_analyzer.storage import JsonFileStorage
from lexical_analyzer.utils.atomic import AtomicWriteError
from lexical_analyzer.utils.logging import configure_logging, get_logger, set_session_id
from lexical_analyzer.utils.result import ExitCode


class Context:
    """CLI context for sharing state between commands."""

    def __init__(self, config: AnalyzerConfig, storage_path: Path) -> None:
        self.config = config
        self.storage = JsonFileStorage(storage_path)
        self.logger = get_logger("cli")

    def load_analyzer(self, fresh: bool = False) -> Analyzer:
        """Analyzer from the session snapshot, or from configuration if there is none."""
        if not fresh and self.storage.get(KEY_DICTIONARY) is not None:
            return Analyzer.from_storage(self.storage)
        return Analyzer.from_config(self.config)


pass_context = click.make_pass_decorator(Context)


def output_json(data: dict) -> None:
    """Output JSON to stdout."""
    click.echo(json.dumps(data, indent=2, default=str))


def fail(message: str, code: int) -> NoReturn:
    """Report an error as JSON and exit with ``code``."""
    output_json({"status": "error", "message": message})
    sys.exit(code)


def save_session(ctx: Context, analyzer: Analyzer) -> None:
    """Write the analyzer snapshot, reporting a failed write as a storage error."""
    try:
        analyzer.save_state(ctx.storage)
    except AtomicWriteError as e:
        fail(str(e), ExitCode.STORAGE_ERROR)


@click.group()
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=False, path_type=Path),
    default=None,
    help="Path to YAML config file (default: ./lexan.yaml if present)",
)
@click.option(
    "--storage",
    "storage_path",
    type=click.Path(exists=False, path_type=Path),
    default=None,
    help="Path to the session snapshot file",
)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warn", "error"], case_sensitive=False),
    default=None,
    help="Logging level (overrides config)",
)
@click.option(
    "--log-format",
    type=click.Choice(["json", "text"], case_sensitive=False),
    default=None,
    help="Log format (overrides config)",
)
@click.option(
    "--session",
    default=None,
    help="Session ID attached to log events",
)
@click.version_option(version=__version__)
@click.pass_context
def cli(
    ctx: click.Context,
    config_path: Optional[Path],
    storage_path: Optional[Path],
    log_level: Optional[str],
    log_format: Optional[str],
    session: Optional[str],
) -> None:
    """
    Lexical analyzer - validate words against a dictionary automaton.

    Splits input text into tokens and reports, for each one, whether it is a
    word of the dictionary. The dictionary and the automaton position are
    kept in a session snapshot between invocations.
    """
    result = load_config(config_path)
    if result.is_err():
        fail(str(result.unwrap_err()), ExitCode.CONFIG_ERROR)
    config = result.unwrap()

    configure_logging(
        level=log_level or config.logging.level,
        format_type=log_format or config.logging.format,
    )
    if session:
        set_session_id(session)

    ctx.obj = Context(config=config, storage_path=storage_path or config.storage.path)


@cli.command()
@click.argument("text", required=False)
@click.option(
    "--file",
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Read input text from a file",
)
@click.option(
    "--save/--no-save",
    default=False,
    help="Write the automaton state to the session snapshot",
)
@click.option(
    "--fresh",
    is_flag=True,
    default=False,
    help="Ignore the session snapshot and start from configuration",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "text"]),
    default="json",
    help="Output format",
)
@pass_context
def validate(
    ctx: Context,
    text: Optional[str],
    input_file: Optional[Path],
    save: bool,
    fresh: bool,
    output_format: str,
) -> None:
    """Validate every word of TEXT (or --file, or stdin)."""
    if text is None:
        if input_file is not None:
            text = input_file.read_text(encoding="utf-8")
        else:
            text = click.get_text_stream("stdin").read()

    try:
        analyzer = ctx.load_analyzer(fresh=fresh)
    except ConfigurationError as e:
        fail(str(e), ExitCode.CONFIG_ERROR)

    results = analyzer.read_input(ctx.config.make_tokenizer(text))

    if save:
        save_session(ctx, analyzer)

    if output_format == "json":
        output_json({
            "status": "success",
            "results": [result.to_dict() for result in results],
        })
    else:
        for result in results:
            mark = {True: "ok", False: "unknown", None: "-"}[result.valid]
            click.echo(f"{result.word}\t{mark}")


@cli.command()
@click.argument("words", nargs=-1, required=True)
@pass_context
def add(ctx: Context, words: tuple[str, ...]) -> None:
    """Add WORDS to the session dictionary."""
    _mutate(ctx, words, remove=False)


@cli.command()
@click.argument("words", nargs=-1, required=True)
@pass_context
def remove(ctx: Context, words: tuple[str, ...]) -> None:
    """Remove WORDS from the session dictionary."""
    _mutate(ctx, words, remove=True)


def _mutate(ctx: Context, words: tuple[str, ...], remove: bool) -> None:
    try:
        analyzer = ctx.load_analyzer()
        for word in words:
            if remove:
                analyzer.remove_word(word)
            else:
                analyzer.add_word(word)
    except InvalidArgumentError as e:
        fail(str(e), ExitCode.INVALID_ARGUMENT)
    except ConfigurationError as e:
        fail(str(e), ExitCode.CONFIG_ERROR)

    save_session(ctx, analyzer)
    output_json({
        "status": "success",
        "dictionary": analyzer.get_automaton().dictionary.to_list(),
    })


@cli.command()
@pass_context
def show(ctx: Context) -> None:
    """Show the session snapshot."""
    output_json({
        "status": "success",
        "path": str(ctx.storage.path),
        "state": ctx.storage.to_dict(),
    })


@cli.command()
@pass_context
def reset(ctx: Context) -> None:
    """Delete the session snapshot."""
    ctx.storage.clear()
    ctx.logger.info("session_reset", path=str(ctx.storage.path))
    output_json({"status": "success"})


def main() -> None:
    """Main entry point."""
    try:
        cli()
    except Exception as e:
        logger = get_logger("cli")
        logger.error("cli_error", error=str(e))
        sys.exit(ExitCode.GENERAL_ERROR)


if __name__ == "__main__":
    main()
