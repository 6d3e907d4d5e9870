"""Static sub-score rules for subject, body and URL."""

from __future__ import annotations

from typing import Dict

PHISHING_SUBJECT_PHRASES: tuple[str, ...] = ("urgent", "verify now", "limited offer")

DEFAULT_WEIGHTS: Dict[str, float] = {
    "subject_empty": 10.0,
    "subject_phishing_phrase": 30.0,
    "body_short": 25.0,
    "url_non_ascii": 20.0,
}

SHORT_BODY_LENGTH = 90
FLAG_THRESHOLD = 40.0
ASCII_MAX = 127


def _has_phishing_phrase(subject: str) -> bool:
    lowered = subject.lower()
    return any(phrase in lowered for phrase in PHISHING_SUBJECT_PHRASES)


def _first_non_ascii(url: str) -> int:
    for index, char in enumerate(url):
        if ord(char) > ASCII_MAX:
            return index
    return -1


def subject_score(subject: str) -> float:
    if not subject:
        return DEFAULT_WEIGHTS["subject_empty"]
    if _has_phishing_phrase(subject):
        return DEFAULT_WEIGHTS["subject_phishing_phrase"]
    return 0.0


def body_score(body: str) -> float:
    """An empty body counts as short."""

    if len(body) < SHORT_BODY_LENGTH:
        return DEFAULT_WEIGHTS["body_short"]
    return 0.0


def url_score(url: str) -> float:
    if not url:
        return 0.0
    if _first_non_ascii(url) >= 0:
        return DEFAULT_WEIGHTS["url_non_ascii"]
    return 0.0
