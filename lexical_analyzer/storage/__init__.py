"""Key-value storage for automaton snapshots."""

from lexical_analyzer.storage.storage import JsonFileStorage, MemoryStorage, Storage

__all__ = ["Storage", "MemoryStorage", "JsonFileStorage"]
