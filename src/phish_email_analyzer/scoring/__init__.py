"""Scoring utilities."""

from .rules import DEFAULT_WEIGHTS, FLAG_THRESHOLD, body_score, subject_score, url_score
from .scorer import ScoreResult, score_message, select_primary_indicator

__all__ = [
    "DEFAULT_WEIGHTS",
    "FLAG_THRESHOLD",
    "ScoreResult",
    "body_score",
    "score_message",
    "select_primary_indicator",
    "subject_score",
    "url_score",
]
