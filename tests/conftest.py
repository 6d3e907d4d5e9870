from __future__ import annotations

import pytest

from phish_email_analyzer.analysis.collection import EmailCollection
from phish_email_analyzer.analysis.events import EventLog
from phish_email_analyzer.domain.email.models import EmailMessage
from phish_email_analyzer.scoring.scorer import score_message


@pytest.fixture
def make_email():
    def _make(sender: str = "", subject: str = "", body: str = "", url: str = "", *, scored: bool = True) -> EmailMessage:
        email = EmailMessage(sender=sender, subject=subject, body=body, url=url)
        if scored:
            score_message(email)
        return email

    return _make


@pytest.fixture
def safe_email(make_email) -> EmailMessage:
    # 25.0 from the short body only.
    return make_email("test@example.com", "Test Subject", "Test Body with safe content", "http://test.com")


@pytest.fixture
def subject_email(make_email) -> EmailMessage:
    return make_email(
        "phisher@example.com",
        "Urgent: Verify Now",
        "Please verify your account immediately.",
        "http://málicious.com",
    )


@pytest.fixture
def blank_email(make_email) -> EmailMessage:
    return make_email("empty@example.com")


@pytest.fixture
def body_email(make_email) -> EmailMessage:
    return make_email("another@example.com", "", "", "http://exámple.com")


@pytest.fixture
def event_log() -> EventLog:
    return EventLog()


@pytest.fixture
def populated_collection(make_email, safe_email, subject_email, blank_email, event_log) -> EmailCollection:
    """Four emails, one flagged. The last one was never scored."""

    collection = EmailCollection(recorder=event_log)
    collection.insert(safe_email)
    collection.insert(subject_email)
    collection.insert(blank_email)
    collection.insert(make_email(scored=False))
    event_log.clear()
    return collection
