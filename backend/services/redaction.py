"""Strip contact details from text before it leaves the service."""

import re

EMAIL_RE = re.compile(r"\b[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}\b", re.IGNORECASE)
PHONE_RE = re.compile(r"(\+?\d{1,3}[\s.-]?)?(\(?\d{2,4}\)?[\s.-]?)?[\d\s.-]{7,}\d")
URL_RE = re.compile(r"\bhttps?://[^\s]+", re.IGNORECASE)


def redact_contact_info(text: str) -> str:
    """Replace emails, phone numbers and URLs with placeholders."""
    text = EMAIL_RE.sub("[redacted-email]", text)
    text = PHONE_RE.sub("[redacted-phone]", text)
    return URL_RE.sub("[redacted-url]", text)
