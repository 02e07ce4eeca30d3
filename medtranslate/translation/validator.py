"""
Translation Validation Module

Heuristic checks comparing the sanitized source with the final translation:
- Dosage preservation (number + unit, order-sensitive)
- Anatomical term fidelity (against the target-language glossary)
- Unit validity

Warnings are advisory. Validation never raises and never blocks output.
"""

import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from medtranslate.logger import get_logger
from medtranslate.protection.glossary import GlossaryIndex

logger = get_logger(__name__)

DOSAGE_RE = re.compile(r'\d+\s*(?:mg|mL|g|μg|mcg|IU)\b', re.IGNORECASE)

ANATOMICAL_TERMS = ("heart", "liver", "kidney")

# Detection pattern and allow-list are separate settings. With these
# defaults every detected unit is allowed, so the check reports nothing.
UNIT_PATTERN = r"(mg|mL|g)"
ALLOWED_UNITS = ("mg", "mL", "g")

DOSAGE_WARNING = "Potential dosage discrepancy detected"
ANATOMY_WARNING = "Anatomical term '{term}' might be mistranslated"
UNITS_WARNING = "Invalid units detected: {units}"


@dataclass(frozen=True)
class ValidationRules:
    """Vocabulary and unit settings for validate_translation()."""
    anatomical_terms: Tuple[str, ...] = ANATOMICAL_TERMS
    unit_pattern: str = UNIT_PATTERN
    allowed_units: Tuple[str, ...] = ALLOWED_UNITS

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "ValidationRules":
        section = config.get('validation', {}) or {}
        return cls(
            anatomical_terms=tuple(section.get('anatomical_terms', ANATOMICAL_TERMS)),
            unit_pattern=section.get('unit_pattern', UNIT_PATTERN),
            allowed_units=tuple(section.get('allowed_units', ALLOWED_UNITS)),
        )


def extract_dosages(text: str) -> List[str]:
    """
    All dosage expressions in order of appearance, duplicates kept.

    Example:
        >>> extract_dosages("Take 500 mg, then 250mg")
        ['500 mg', '250mg']
    """
    return [match.group(0) for match in DOSAGE_RE.finditer(text or "")]


def check_dosages(source: str, translation: str) -> Optional[str]:
    """
    Compare dosage sequences literally.

    Reordering dosages also triggers the warning: sequences are compared,
    not multisets.
    """
    if ",".join(extract_dosages(source)) != ",".join(extract_dosages(translation)):
        return DOSAGE_WARNING
    return None


def check_anatomical_terms(
    source: str,
    translation: str,
    target_lang: str,
    glossary: Optional[GlossaryIndex] = None,
    anatomical_terms: Tuple[str, ...] = ANATOMICAL_TERMS,
) -> List[str]:
    """Warn for each vocabulary term present in the source whose target equivalent is missing."""
    warnings = []
    source_lower = (source or "").lower()
    translation_lower = (translation or "").lower()

    for term in anatomical_terms:
        if term.lower() not in source_lower:
            continue
        expected = glossary.resolve(term, target_lang) if glossary is not None else term
        if expected.lower() not in translation_lower:
            warnings.append(ANATOMY_WARNING.format(term=term))

    return warnings


def check_units(
    translation: str,
    unit_pattern: str = UNIT_PATTERN,
    allowed_units: Tuple[str, ...] = ALLOWED_UNITS,
) -> Optional[str]:
    """Flag detected units that are not in the allow-list (case-insensitive)."""
    try:
        pattern = re.compile(unit_pattern, re.IGNORECASE)
    except re.error as e:
        logger.error(f"Invalid unit pattern {unit_pattern!r}: {e}")
        return None

    allowed = {unit.lower() for unit in allowed_units}
    invalid_units = [
        match.group(0) for match in pattern.finditer(translation or "")
        if match.group(0).lower() not in allowed
    ]
    if invalid_units:
        return UNITS_WARNING.format(units=", ".join(invalid_units))
    return None


def validate_translation(
    source: str,
    translation: str,
    target_lang: str,
    glossary: Optional[GlossaryIndex] = None,
    rules: Optional[ValidationRules] = None,
) -> List[str]:
    """
    Run all checks and return warnings in fixed order.

    Order: dosage, then anatomical terms (vocabulary order), then units.

    Args:
        source: Sanitized source text
        translation: Final (post-processed) translation
        target_lang: Target language code
        glossary: Glossary used to resolve expected anatomical terms
        rules: Vocabulary and unit settings (module defaults if omitted)

    Returns:
        List of warning strings; empty when nothing was found
    """
    rules = rules or ValidationRules()
    warnings: List[str] = []

    dosage_warning = check_dosages(source, translation)
    if dosage_warning:
        warnings.append(dosage_warning)

    warnings.extend(
        check_anatomical_terms(source, translation, target_lang, glossary, rules.anatomical_terms)
    )

    units_warning = check_units(translation, rules.unit_pattern, rules.allowed_units)
    if units_warning:
        warnings.append(units_warning)

    if warnings:
        logger.info(f"Validation produced {len(warnings)} warning(s) for target '{target_lang}'")
    return warnings
