"""
Translation pipeline exceptions.

Sanitizer, term protection and validator never raise for string input;
these errors come from the request boundary and the fallback chain.
"""

from typing import List


class InputValidationError(Exception):
    """Request is missing required fields or has invalid values."""

    def __init__(self, message: str, code: str = "missing_fields", fields: List[str] = None):
        super().__init__(message)
        self.code = code
        self.fields = fields or []


class TranslationExhaustedError(Exception):
    """Every model in the fallback chain returned empty text."""

    def __init__(self, model_chain: List[str]):
        super().__init__("No translation model produced output")
        self.code = "translation_exhausted"
        self.model_chain = list(model_chain)
