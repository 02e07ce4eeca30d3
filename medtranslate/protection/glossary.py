"""
Glossary Index

Immutable per-language lookup of medical terms. The base language entry
lists every term the pipeline recognizes, in configuration order; other
languages map those canonical (lowercase) terms to their equivalents and
may be partial.

The index is built once at startup and shared read-only by all requests.
"""

import json
import re
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

from medtranslate import language_codes as lc
from medtranslate.config import DEFAULT_BASE_LANGUAGE
from medtranslate.logger import get_logger

logger = get_logger(__name__)

_EMPTY_TERMS: Mapping[str, str] = MappingProxyType({})

PLACEHOLDER_PREFIX = "GLOSSARY_"

_NON_WORD_RE = re.compile(r'\W+')


class GlossaryError(Exception):
    """Raised when glossary data cannot be loaded or is malformed."""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


def make_placeholder(term: str) -> str:
    """
    Build the placeholder for a term.

    Example:
        >>> make_placeholder("blood pressure")
        'GLOSSARY_BLOOD_PRESSURE'
    """
    return PLACEHOLDER_PREFIX + _NON_WORD_RE.sub('_', term.strip().upper()).strip('_')


class GlossaryIndex:
    """Read-only mapping of language code -> {canonical term: equivalent term}."""

    def __init__(self, entries: Mapping[str, Mapping[str, str]], base_language: str = DEFAULT_BASE_LANGUAGE):
        self._base_language = lc.normalize_language_code(base_language)
        frozen = {}
        for lang, terms in entries.items():
            # Keys are lowercased; dict preserves the configuration order
            frozen[lc.normalize_language_code(lang)] = MappingProxyType(
                {term.strip().lower(): translation for term, translation in terms.items() if term and term.strip()}
            )
        self._entries = MappingProxyType(frozen)
        self._known_terms: Tuple[str, ...] = tuple(self._entries.get(self._base_language, _EMPTY_TERMS).keys())
        self._check_placeholders()

    def _check_placeholders(self) -> None:
        # Each known term must own its placeholder or restoring would be ambiguous
        seen: Dict[str, str] = {}
        for term in self._known_terms:
            placeholder = make_placeholder(term)
            if placeholder in seen:
                raise GlossaryError(
                    f"Glossary terms '{seen[placeholder]}' and '{term}' map to the same placeholder {placeholder}"
                )
            seen[placeholder] = term

    @classmethod
    def from_mapping(cls, entries: Mapping[str, Mapping[str, str]], base_language: str = DEFAULT_BASE_LANGUAGE) -> "GlossaryIndex":
        return cls(entries, base_language=base_language)

    @property
    def base_language(self) -> str:
        return self._base_language

    def languages(self) -> Tuple[str, ...]:
        return tuple(self._entries.keys())

    def has_language(self, lang: str) -> bool:
        return any(code in self._entries for code in lc.lookup_chain(lang))

    def terms_for(self, lang: str) -> Mapping[str, str]:
        """
        Terms for a language.

        Region codes fall back to their base language ('es-MX' -> 'es').
        An unknown language yields an empty mapping, not an error.
        """
        for code in lc.lookup_chain(lang):
            terms = self._entries.get(code)
            if terms is not None:
                return terms
        return _EMPTY_TERMS

    def known_terms(self) -> Tuple[str, ...]:
        """Base-language terms in configuration order."""
        return self._known_terms

    def resolve(self, term: str, lang: str) -> str:
        """Equivalent of a term in the given language, or the term itself."""
        return self.terms_for(lang).get(term.lower(), term)

    def __repr__(self) -> str:
        return f"GlossaryIndex(languages={list(self.languages())}, known_terms={len(self._known_terms)})"


def _read_glossary_file(path: Path) -> Dict[str, str]:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise GlossaryError(f"Invalid JSON in glossary file {path.name}: {e}", path=path)

    terms = data.get('terms') if isinstance(data, dict) else None
    if not isinstance(terms, dict):
        raise GlossaryError(f"Glossary file {path.name} must contain a 'terms' object", path=path)

    for term, translation in terms.items():
        if not isinstance(translation, str):
            raise GlossaryError(
                f"Glossary file {path.name}: translation for '{term}' must be a string",
                path=path,
            )
    return terms


def load_glossary(directory: Path, base_language: str = DEFAULT_BASE_LANGUAGE) -> GlossaryIndex:
    """
    Load every <lang>.json file in a directory into a GlossaryIndex.

    File format:
        {"terms": {"heart": "corazón", "liver": "hígado"}}

    Raises:
        GlossaryError: If the directory or the base language file is missing,
            or any file is malformed,
            or two base-language terms share a placeholder.
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise GlossaryError(f"Glossary directory not found: {directory}", path=directory)

    entries = {}
    for path in sorted(directory.glob('*.json')):
        entries[path.stem] = _read_glossary_file(path)
        logger.debug(f"Loaded {len(entries[path.stem])} glossary terms for '{path.stem}'")

    index = GlossaryIndex(entries, base_language=base_language)
    if not index.known_terms():
        raise GlossaryError(
            f"Base language glossary '{index.base_language}.json' is missing or empty in {directory}",
            path=directory,
        )

    logger.info(
        f"Glossary loaded: {len(index.known_terms())} terms, languages: {', '.join(index.languages())}"
    )
    return index
