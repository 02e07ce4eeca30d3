"""
Translation module - Core translation functionality

This module provides:
- TranslationPipeline: sanitize -> protect -> translate -> restore -> validate
- translate_with_fallback: ordered model fallback chain
- Validation functions for translation quality
"""

from medtranslate.translation.exceptions import InputValidationError, TranslationExhaustedError
from medtranslate.translation.orchestrator import TranslationAttempt, translate_with_fallback
from medtranslate.translation.validator import (
    ValidationRules,
    extract_dosages,
    check_dosages,
    check_anatomical_terms,
    check_units,
    validate_translation,
)
from medtranslate.translation.pipeline import (
    TranslationPipeline,
    TranslationResult,
    parse_translate_request,
)
