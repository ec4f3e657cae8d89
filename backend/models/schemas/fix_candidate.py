"""Remediation template attached to a check; turned into a FeedbackItem when the check fails."""

from pydantic import BaseModel

from models.responses import Severity


class FixCandidate(BaseModel):
    id: str
    check_id: str
    title: str
    severity: Severity
    reason: str
    action: str
    rationale_hint: str
