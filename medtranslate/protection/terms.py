"""
Glossary Term Protection - Placeholder Substitution

This module shields known medical terms from the translation model:
- pre_process: replace glossary terms with placeholders before translation
- post_process: replace placeholders with the target-language glossary term

Placeholders are deterministic (GLOSSARY_ + uppercased term) and contain only
word characters, so they never occur in ordinary text and are never
re-matched by a shorter term.
"""

import re
from dataclasses import dataclass
from typing import List, Tuple

from medtranslate.logger import get_logger
from medtranslate.protection.glossary import GlossaryIndex, make_placeholder

logger = get_logger(__name__)


@dataclass(frozen=True)
class GlossaryEntry:
    """One placeholder substitution made during pre-processing."""
    placeholder: str
    term: str


# Ordered, per-request; never shared between requests
PlaceholderMapping = List[GlossaryEntry]


def _term_pattern(term: str) -> re.Pattern:
    # Whole-word match; lookarounds instead of \b so terms ending in
    # non-word characters still match
    return re.compile(rf'(?<!\w){re.escape(term)}(?!\w)', re.IGNORECASE)


def pre_process(text: str, glossary: GlossaryIndex) -> Tuple[str, PlaceholderMapping]:
    """
    Replace known base-language terms with placeholders.

    Args:
        text: Sanitized source text
        glossary: Glossary index providing the known terms

    Returns:
        Tuple of (processed_text, mapping)

    Example:
        >>> text, mapping = pre_process("heart pain", glossary)
        >>> text
        'GLOSSARY_HEART pain'
        >>> mapping
        [GlossaryEntry(placeholder='GLOSSARY_HEART', term='heart')]
    """
    mapping: PlaceholderMapping = []
    if not text:
        return text, mapping

    processed_text = text

    # Longest first so a shorter term can't split a longer one; sorted()
    # is stable, so equal lengths keep configuration order
    sorted_terms = sorted(glossary.known_terms(), key=len, reverse=True)

    for term in sorted_terms:
        pattern = _term_pattern(term)
        placeholder = make_placeholder(term)
        processed_text, count = pattern.subn(placeholder, processed_text)
        if count:
            mapping.append(GlossaryEntry(placeholder=placeholder, term=term))
            logger.debug(f"Protected term '{term}' ({count} occurrence(s)) as {placeholder}")

    return processed_text, mapping


def post_process(
    translated_text: str,
    mapping: PlaceholderMapping,
    target_lang: str,
    glossary: GlossaryIndex,
) -> str:
    """
    Restore placeholders as target-language glossary terms.

    Every occurrence is replaced, case-insensitively, including placeholders
    the model repeated or re-cased. Terms missing from the target glossary are
    restored unchanged.
    """
    if not translated_text or not mapping:
        return translated_text

    restored_text = translated_text

    for entry in mapping:
        resolved = glossary.resolve(entry.term, target_lang)
        pattern = re.compile(re.escape(entry.placeholder), re.IGNORECASE)
        restored_text = pattern.sub(lambda _match: resolved, restored_text)

    return restored_text
