"""
Translation Pipeline

Wires the stages together for one request:

    raw text -> sanitize -> pre_process -> fallback chain
             -> post_process -> validate -> TranslationResult
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

from medtranslate import language_codes as lc
from medtranslate.config import load_config, get_model_chain, DEFAULT_BASE_LANGUAGE
from medtranslate.logger import get_logger
from medtranslate.protection.glossary import GlossaryIndex, load_glossary
from medtranslate.protection.sanitizer import sanitize
from medtranslate.protection.terms import pre_process, post_process
from medtranslate.translation.exceptions import InputValidationError, TranslationExhaustedError
from medtranslate.translation.orchestrator import translate_with_fallback
from medtranslate.translation.validator import ValidationRules, validate_translation

logger = get_logger(__name__)


@dataclass(frozen=True)
class TranslationResult:
    """Externally visible result of one translation request."""
    translated_text: str
    warnings: Tuple[str, ...]
    model_used: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "translatedText": self.translated_text,
            "warnings": list(self.warnings),
            "modelUsed": self.model_used,
        }


def parse_translate_request(data: Any, supported_languages: Optional[Sequence[str]] = None) -> Tuple[str, str]:
    """
    Extract (text, targetLang) from a request body.

    Raises:
        InputValidationError: If a field is missing/blank, or targetLang is
            not in supported_languages (when given)
    """
    if not isinstance(data, dict):
        data = {}

    text = data.get("text")
    target_lang = data.get("targetLang")

    missing = [
        name for name, value in (("text", text), ("targetLang", target_lang))
        if not isinstance(value, str) or not value.strip()
    ]
    if missing:
        raise InputValidationError("Missing required fields", fields=missing)

    if supported_languages:
        supported = {lc.normalize_language_code(code) for code in supported_languages}
        if lc.normalize_language_code(target_lang) not in supported:
            raise InputValidationError(
                "Unsupported target language",
                code="unsupported_language",
                fields=["targetLang"],
            )

    return text, target_lang.strip()


class TranslationPipeline:
    """Glossary-protected translation with fallback and validation."""

    def __init__(
        self,
        glossary: GlossaryIndex,
        translator,
        model_chain: Sequence[str],
        rules: Optional[ValidationRules] = None,
        fail_on_exhausted: bool = False,
    ):
        if not model_chain:
            raise ValueError("model_chain must contain at least one model identifier")
        self.glossary = glossary
        self.translator = translator
        self.model_chain: List[str] = list(model_chain)
        self.rules = rules or ValidationRules()
        self.fail_on_exhausted = fail_on_exhausted

    @classmethod
    def from_config(
        cls,
        config: Optional[Dict[str, Any]] = None,
        glossary: Optional[GlossaryIndex] = None,
        translator=None,
    ) -> "TranslationPipeline":
        """Build a pipeline from configuration, loading the glossary and AI service as needed."""
        config = config if config is not None else load_config()
        translation_config = config.get('translation', {})

        if glossary is None:
            glossary = load_glossary(
                Path(config['glossary_dir']),
                base_language=translation_config.get('base_language', DEFAULT_BASE_LANGUAGE),
            )

        if translator is None:
            from medtranslate.ai.service import AIService
            translator = AIService(config=config)

        return cls(
            glossary=glossary,
            translator=translator,
            model_chain=get_model_chain(config),
            rules=ValidationRules.from_config(config),
            fail_on_exhausted=bool(translation_config.get('fail_on_exhausted', False)),
        )

    def run(self, text: str, target_lang: str) -> TranslationResult:
        """
        Translate one utterance.

        Raises:
            TranslationExhaustedError: If every model failed and
                fail_on_exhausted is set; otherwise an empty translation is
                returned
        """
        sanitized_text = sanitize(text)
        processed_text, mapping = pre_process(sanitized_text, self.glossary)
        logger.debug(f"Protected {len(mapping)} glossary term(s) before translation")

        attempt = translate_with_fallback(processed_text, target_lang, self.model_chain, self.translator)
        if not attempt.succeeded and self.fail_on_exhausted:
            raise TranslationExhaustedError(self.model_chain)

        final_translation = post_process(attempt.translated_text, mapping, target_lang, self.glossary)
        warnings = validate_translation(
            sanitized_text,
            final_translation,
            target_lang,
            glossary=self.glossary,
            rules=self.rules,
        )

        logger.info(f"Translated to '{target_lang}' with {attempt.model_id} ({len(warnings)} warning(s))")
        return TranslationResult(
            translated_text=final_translation,
            warnings=tuple(warnings),
            model_used=attempt.model_id,
        )
