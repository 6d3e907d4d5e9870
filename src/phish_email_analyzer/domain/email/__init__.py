"""Email domain models."""

from phish_email_analyzer.domain.email.models import (
    BODY_INDICATOR,
    NOT_FLAGGED_INDICATOR,
    RECOGNIZED_INDICATORS,
    SUBJECT_INDICATOR,
    UNSCORED_INDICATOR,
    URL_INDICATOR,
    EmailMessage,
)

__all__ = [
    "BODY_INDICATOR",
    "EmailMessage",
    "NOT_FLAGGED_INDICATOR",
    "RECOGNIZED_INDICATORS",
    "SUBJECT_INDICATOR",
    "UNSCORED_INDICATOR",
    "URL_INDICATOR",
]
