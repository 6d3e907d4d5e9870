"""Ordered collection of scored emails and the statistics computed over it."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterator

from phish_email_analyzer.analysis.events import EventRecorder
from phish_email_analyzer.domain.email.models import (
    BODY_INDICATOR,
    RECOGNIZED_INDICATORS,
    SUBJECT_INDICATOR,
    URL_INDICATOR,
    EmailMessage,
)

NO_FLAGGED_INDICATOR = "None"
NO_FLAGGED_PERCENTAGES = "No flagged emails."
FLAGGED_PERCENTAGE_TEMPLATE = "{percentage}% of the emails are flagged."


def _one_decimal(value: float) -> str:
    # Half-up on the shortest decimal form, so 0.15 renders as 0.2.
    return str(Decimal(repr(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


class EmailCollection:
    """Emails in insertion order.

    Scoring is the caller's job; ``insert`` stores the message as given.
    Every query rescans the current contents. The aggregate queries go
    through ``flagged``, so each records its "Viewed all flagged emails"
    events on the recorder. The collection is not thread-safe; callers
    must serialize access.
    """

    def __init__(self, recorder: EventRecorder | None = None) -> None:
        self._emails: list[EmailMessage] = []
        self._recorder = recorder

    def _record(self, message: str) -> None:
        if self._recorder is not None:
            self._recorder.record(message)

    def _flagged(self) -> list[EmailMessage]:
        return [email for email in self._emails if email.flagged]

    def insert(self, message: EmailMessage) -> None:
        self._emails.append(message)
        self._record(f"Email added: {message.subject}")

    def all(self) -> list[EmailMessage]:
        emails = list(self._emails)
        self._record(f"Viewed all emails. Total emails: {len(emails)}")
        return emails

    def flagged(self) -> list[EmailMessage]:
        flagged = self._flagged()
        self._record(f"Viewed all flagged emails. Total flagged emails: {len(flagged)}")
        return flagged

    def indicator_counts(self) -> dict[str, int]:
        """Count flagged emails per recognized indicator; other values are skipped."""

        counts = {name: 0 for name in RECOGNIZED_INDICATORS}
        for email in self.flagged():
            if email.primary_indicator in counts:
                counts[email.primary_indicator] += 1
        return counts

    def most_common_indicator(self) -> str:
        if not self.flagged():
            return NO_FLAGGED_INDICATOR
        counts = self.indicator_counts()
        subject = counts[SUBJECT_INDICATOR]
        body = counts[BODY_INDICATOR]
        url = counts[URL_INDICATOR]
        if subject >= body and subject >= url:
            return SUBJECT_INDICATOR
        if body >= subject and body >= url:
            return BODY_INDICATOR
        return URL_INDICATOR

    def indicator_breakdown(self) -> dict[str, float]:
        total_flagged = len(self.flagged())
        if total_flagged == 0:
            return {}
        return {name: count * 100.0 / total_flagged for name, count in self.indicator_counts().items()}

    def indicator_percentages(self) -> str:
        breakdown = self.indicator_breakdown()
        if not breakdown:
            return NO_FLAGGED_PERCENTAGES
        return ", ".join(f"{name}: {percent}%" for name, percent in breakdown.items())

    def flagged_percentage(self) -> str:
        if not self._emails:
            return FLAGGED_PERCENTAGE_TEMPLATE.format(percentage="0.0")
        percentage = len(self._flagged()) * 100.0 / len(self._emails)
        self._record("Summary report computed")
        return FLAGGED_PERCENTAGE_TEMPLATE.format(percentage=_one_decimal(percentage))

    def __len__(self) -> int:
        return len(self._emails)

    def __iter__(self) -> Iterator[EmailMessage]:
        return iter(list(self._emails))
