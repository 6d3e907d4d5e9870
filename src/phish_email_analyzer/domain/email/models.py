"""Email domain models."""

from __future__ import annotations

from pydantic import BaseModel

SUBJECT_INDICATOR = "Common Phishing Word in Subject"
BODY_INDICATOR = "Body Length"
URL_INDICATOR = "Non-ASCII Character Identified in URL"
RECOGNIZED_INDICATORS: tuple[str, ...] = (SUBJECT_INDICATOR, BODY_INDICATOR, URL_INDICATOR)

UNSCORED_INDICATOR = "None"
NOT_FLAGGED_INDICATOR = "None - not flagged"


class EmailMessage(BaseModel):
    """One email under analysis plus the fields derived by the scorer.

    The derived fields hold their defaults until the message is scored.
    """

    sender: str = ""
    subject: str = ""
    body: str = ""
    url: str = ""
    risk_score: float = 0.0
    flagged: bool = False
    primary_indicator: str = UNSCORED_INDICATOR

    def report(self) -> str:
        flagged = "true" if self.flagged else "false"
        return (
            f"Phishing Risk Score: {self.risk_score}, "
            f"Flagged: {flagged}, "
            f"Major Indicator: {self.primary_indicator}"
        )
