"""
Input sanitization.

Redacts patient identifiers before text is sent to any external service.
"""

import re

REDACTED_PATIENT = "patient: [redacted]"

# "patient:" followed by one identifier token
PATIENT_ID_RE = re.compile(r'patient:\s*\w+', re.IGNORECASE)


def sanitize(text: str) -> str:
    """
    Redact "patient: <identifier>" occurrences.

    Idempotent: "[redacted]" is not a word token, so already sanitized text
    is returned unchanged.

    Example:
        >>> sanitize("The Patient: John has heart pain")
        'The patient: [redacted] has heart pain'
    """
    if not text:
        return text
    return PATIENT_ID_RE.sub(REDACTED_PATIENT, text)
