"""Saved-state schema and JSON file persistence."""

from .schema import STATE_KEY, AnalysisState, EmailRecord
from .store import (
    PersistenceError,
    StateFormatError,
    StateWriteError,
    collection_from_state,
    collection_to_state,
    load_collection,
    load_state,
    save_collection,
    save_state,
)

__all__ = [
    "AnalysisState",
    "EmailRecord",
    "PersistenceError",
    "STATE_KEY",
    "StateFormatError",
    "StateWriteError",
    "collection_from_state",
    "collection_to_state",
    "load_collection",
    "load_state",
    "save_collection",
    "save_state",
]
