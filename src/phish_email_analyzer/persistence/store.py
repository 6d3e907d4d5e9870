"""JSON state file persistence for the email collection."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

from pydantic import ValidationError

from phish_email_analyzer.analysis.collection import EmailCollection
from phish_email_analyzer.analysis.events import EventRecorder
from phish_email_analyzer.errors import PersistenceError, StateFormatError, StateWriteError
from phish_email_analyzer.infra.logging_utils import get_logger
from phish_email_analyzer.persistence.schema import AnalysisState, EmailRecord
from phish_email_analyzer.scoring.scorer import score_message

logger = get_logger(__name__)


def collection_to_state(collection: EmailCollection) -> dict[str, Any]:
    state = AnalysisState(emails=[EmailRecord.from_message(email) for email in collection])
    return state.model_dump(by_alias=True)


def collection_from_state(
    payload: Mapping[str, Any] | None,
    recorder: EventRecorder | None = None,
) -> EmailCollection:
    """Rebuild a collection, re-scoring every email before insertion."""

    collection = EmailCollection(recorder=recorder)
    if not payload:
        return collection
    try:
        state = AnalysisState.model_validate(dict(payload))
    except ValidationError as exc:
        raise StateFormatError(f"invalid saved state: {exc.error_count()} error(s)") from exc
    for record in state.emails:
        message = record.to_message()
        score_message(message)
        collection.insert(message)
    return collection


def load_state(path: str | Path) -> dict[str, Any]:
    p = Path(path)
    if not p.exists():
        logger.info("no state file at %s, starting empty", p)
        return {}
    try:
        payload = json.loads(p.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise StateFormatError(f"state file {p} is not valid JSON: {exc.msg}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise PersistenceError(f"could not read state file {p}: {exc}") from exc
    if not isinstance(payload, dict):
        raise StateFormatError(f"state file {p} must contain a JSON object")
    return payload


def save_state(path: str | Path, state: Mapping[str, Any]) -> None:
    p = Path(path)
    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(dict(state), indent=4, ensure_ascii=True), encoding="utf-8")
    except OSError as exc:
        raise StateWriteError(f"could not write state file {p}: {exc}") from exc
    logger.info("saved state to %s", p)


def load_collection(path: str | Path, recorder: EventRecorder | None = None) -> EmailCollection:
    collection = collection_from_state(load_state(path), recorder=recorder)
    logger.info("loaded %d email(s) from %s", len(collection), path)
    return collection


def save_collection(path: str | Path, collection: EmailCollection) -> None:
    save_state(path, collection_to_state(collection))
