"""Risk scoring for a single email message."""

from __future__ import annotations

from dataclasses import dataclass

from phish_email_analyzer.domain.email.models import (
    BODY_INDICATOR,
    NOT_FLAGGED_INDICATOR,
    SUBJECT_INDICATOR,
    URL_INDICATOR,
    EmailMessage,
)
from phish_email_analyzer.infra.logging_utils import get_logger
from phish_email_analyzer.scoring.rules import FLAG_THRESHOLD, body_score, subject_score, url_score

logger = get_logger(__name__)


@dataclass(frozen=True)
class ScoreResult:
    risk_score: float
    flagged: bool
    primary_indicator: str
    subject_score: float = 0.0
    body_score: float = 0.0
    url_score: float = 0.0

    def breakdown(self) -> list[dict[str, float | str]]:
        return [
            {"factor": "subject", "contribution": self.subject_score},
            {"factor": "body", "contribution": self.body_score},
            {"factor": "url", "contribution": self.url_score},
        ]


def select_primary_indicator(subject: float, body: float, url: float) -> str:
    """Pick the indicator responsible for a flagged score.

    Ties go to subject first, then body. The chain mirrors the historical
    sequential comparison and is not a symmetric max.
    """

    if subject >= body and subject >= url and subject > 0:
        return SUBJECT_INDICATOR
    if body >= subject and body >= url and body > 0:
        return BODY_INDICATOR
    if url > 0:
        return URL_INDICATOR
    return NOT_FLAGGED_INDICATOR


def score_message(message: EmailMessage) -> ScoreResult:
    """Score ``message`` and write the derived fields back onto it."""

    subject = subject_score(message.subject)
    body = body_score(message.body)
    url = url_score(message.url)

    total = subject + body + url
    flagged = total >= FLAG_THRESHOLD
    indicator = select_primary_indicator(subject, body, url) if flagged else NOT_FLAGGED_INDICATOR

    message.risk_score = total
    message.flagged = flagged
    message.primary_indicator = indicator
    logger.debug(
        "scored email subject=%r subject=%.1f body=%.1f url=%.1f total=%.1f flagged=%s",
        message.subject,
        subject,
        body,
        url,
        total,
        flagged,
    )
    return ScoreResult(
        risk_score=total,
        flagged=flagged,
        primary_indicator=indicator,
        subject_score=subject,
        body_score=body,
        url_score=url,
    )
