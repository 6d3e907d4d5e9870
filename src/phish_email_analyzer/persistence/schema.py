"""Saved-state schema."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from phish_email_analyzer.domain.email.models import UNSCORED_INDICATOR, EmailMessage

STATE_KEY = "emails"


class EmailRecord(BaseModel):
    """One saved email. Raw text fields are required, derived fields are not."""

    model_config = ConfigDict(populate_by_name=True)

    sender: str
    subject: str
    body: str
    url: str
    phishing_risk_score: float = Field(default=0.0, alias="phishingRiskScore")
    flagged: bool = False
    major_indicator: str = Field(default=UNSCORED_INDICATOR, alias="majorIndicator")

    @classmethod
    def from_message(cls, message: EmailMessage) -> "EmailRecord":
        return cls(
            sender=message.sender,
            subject=message.subject,
            body=message.body,
            url=message.url,
            phishing_risk_score=message.risk_score,
            flagged=message.flagged,
            major_indicator=message.primary_indicator,
        )

    def to_message(self) -> EmailMessage:
        """Rebuild an unscored message; persisted derived fields are not trusted."""

        return EmailMessage(sender=self.sender, subject=self.subject, body=self.body, url=self.url)


class AnalysisState(BaseModel):
    emails: List[EmailRecord] = Field(default_factory=list)
