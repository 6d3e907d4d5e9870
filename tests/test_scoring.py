from __future__ import annotations

import pytest

from phish_email_analyzer.domain.email.models import (
    BODY_INDICATOR,
    NOT_FLAGGED_INDICATOR,
    SUBJECT_INDICATOR,
    UNSCORED_INDICATOR,
    URL_INDICATOR,
    EmailMessage,
)
from phish_email_analyzer.scoring.rules import body_score, subject_score, url_score
from phish_email_analyzer.scoring.scorer import score_message, select_primary_indicator

LONG_BODY = (
    "It is intentionally made long enough to bypass the body scoring condition. "
    "Please verify your account immediately. This is a safe email body that avoids phishing triggers."
)


def test_unscored_email_has_default_derived_fields() -> None:
    email = EmailMessage(sender="a@example.com", subject="Urgent", body="", url="")
    assert email.risk_score == 0.0
    assert email.flagged is False
    assert email.primary_indicator == UNSCORED_INDICATOR


def test_all_empty_fields_score_below_threshold() -> None:
    email = EmailMessage()
    result = score_message(email)
    assert result.risk_score == 35.0
    assert result.flagged is False
    assert result.primary_indicator == NOT_FLAGGED_INDICATOR
    assert email.primary_indicator != UNSCORED_INDICATOR


def test_urgent_subject_with_non_ascii_url_is_flagged_on_subject() -> None:
    email = EmailMessage(sender="x@example.com", subject="URGENT account notice", body="", url="http://exаmple.com")
    result = score_message(email)
    assert result.risk_score == 75.0
    assert result.flagged is True
    assert result.primary_indicator == SUBJECT_INDICATOR
    assert (email.risk_score, email.flagged, email.primary_indicator) == (75.0, True, SUBJECT_INDICATOR)


def test_empty_subject_and_body_with_ascii_url_is_not_flagged() -> None:
    result = score_message(EmailMessage(url="http://example.com"))
    assert result.risk_score == 35.0
    assert result.flagged is False


def test_empty_subject_short_body_non_ascii_url_flags_body_length() -> None:
    result = score_message(EmailMessage(sender="another@example.com", url="http://exámple.com"))
    assert result.risk_score == 55.0
    assert result.primary_indicator == BODY_INDICATOR


def test_long_body_with_offer_subject() -> None:
    result = score_message(
        EmailMessage(subject="Limited Offer Today", body=LONG_BODY, url="http://málicious.com")
    )
    assert result.risk_score == 50.0
    assert result.flagged is True
    assert result.primary_indicator == SUBJECT_INDICATOR
    assert (result.subject_score, result.body_score, result.url_score) == (30.0, 0.0, 20.0)


@pytest.mark.parametrize(
    ("subject", "expected"),
    [
        ("", 10.0),
        ("Hello there", 0.0),
        ("Please VERIFY NOW", 30.0),
        ("limited offer inside", 30.0),
        ("Urgent: Verify Now", 30.0),
        ("verify your account", 0.0),
    ],
)
def test_subject_score(subject: str, expected: float) -> None:
    assert subject_score(subject) == expected


def test_body_score_boundary_at_ninety_characters() -> None:
    assert body_score("") == 25.0
    assert body_score("a" * 89) == 25.0
    assert body_score("a" * 90) == 0.0


def test_url_score_only_counts_non_ascii() -> None:
    assert url_score("") == 0.0
    assert url_score("http://example.com/\x7f") == 0.0
    assert url_score("http://éxample.com") == 20.0


def test_select_primary_indicator_tie_breaks() -> None:
    assert select_primary_indicator(25.0, 25.0, 0.0) == SUBJECT_INDICATOR
    assert select_primary_indicator(0.0, 20.0, 20.0) == BODY_INDICATOR
    assert select_primary_indicator(10.0, 0.0, 20.0) == URL_INDICATOR
    assert select_primary_indicator(0.0, 0.0, 0.0) == NOT_FLAGGED_INDICATOR


def test_scoring_is_idempotent() -> None:
    email = EmailMessage(subject="Verify now", body="short", url="http://ü.example")
    first = score_message(email)
    second = score_message(email)
    assert first == second
    assert email.risk_score == 75.0


def test_rescoring_recomputes_after_field_change() -> None:
    email = EmailMessage(subject="urgent", body="")
    assert score_message(email).flagged is True
    email.subject = "hello"
    email.body = LONG_BODY
    result = score_message(email)
    assert result.risk_score == 0.0
    assert email.flagged is False
    assert email.primary_indicator == NOT_FLAGGED_INDICATOR


def test_report_text() -> None:
    email = EmailMessage(subject="Urgent : Verify Now", body="Please verify your account immediately.", url="http://málicious.com")
    score_message(email)
    assert email.report() == (
        "Phishing Risk Score: 75.0, Flagged: true, Major Indicator: Common Phishing Word in Subject"
    )
    clean = EmailMessage(subject="Test Subject", body="Test Body with safe content", url="http://test.com")
    score_message(clean)
    assert clean.report() == "Phishing Risk Score: 25.0, Flagged: false, Major Indicator: None - not flagged"
