"""
Protection module - Keeping sensitive and clinical content intact

This module provides:
- sanitizer: PII redaction before text leaves the process
- glossary: Immutable per-language medical term index
- terms: Placeholder substitution (pre_process, post_process)
"""

from medtranslate.protection.sanitizer import sanitize
from medtranslate.protection.glossary import (
    GlossaryError,
    GlossaryIndex,
    load_glossary,
)
from medtranslate.protection.terms import (
    GlossaryEntry,
    PlaceholderMapping,
    make_placeholder,
    pre_process,
    post_process,
)
