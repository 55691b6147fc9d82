"""Utility modules for lexical-analyzer."""

from lexical_analyzer.utils.atomic import (
    AtomicWriteError,
    atomic_write,
    atomic_write_json,
)
from lexical_analyzer.utils.logging import (
    configure_logging,
    get_logger,
    set_session_id,
)
from lexical_analyzer.utils.result import (
    ConfigError,
    Err,
    ExitCode,
    Ok,
    Result,
    ResultError,
)

__all__ = [
    # Logging
    "configure_logging",
    "get_logger",
    "set_session_id",
    # Atomic writes
    "AtomicWriteError",
    "atomic_write",
    "atomic_write_json",
    # Result
    "Ok",
    "Err",
    "Result",
    "ResultError",
    "ConfigError",
    "ExitCode",
]
