"""
Translation Orchestrator

Drives the Translator capability through an ordered fallback chain of model
identifiers. Attempts run sequentially, one pass through the chain, with no
retries and no caching.
"""

from dataclasses import dataclass
from typing import Sequence

from medtranslate.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class TranslationAttempt:
    """Outcome of one call to the translator; empty text means the attempt failed."""
    model_id: str
    translated_text: str

    @property
    def succeeded(self) -> bool:
        return bool(self.translated_text)


def translate_with_fallback(
    processed_text: str,
    target_lang: str,
    model_chain: Sequence[str],
    translator,
) -> TranslationAttempt:
    """
    Try each model in order until one returns non-empty text.

    Args:
        processed_text: Sanitized, placeholder-protected text
        target_lang: Target language code
        model_chain: Ordered model identifiers (at least one)
        translator: Object with translate(text, target_language, model_id) -> str

    Returns:
        The first successful attempt, or the last (empty) attempt if every
        model failed

    Raises:
        ValueError: If model_chain is empty
    """
    if not model_chain:
        raise ValueError("model_chain must contain at least one model identifier")

    attempt = None
    for index, model_id in enumerate(model_chain):
        if index > 0:
            logger.info(f"Falling back to model {model_id} ({index + 1}/{len(model_chain)})")

        translated_text = translator.translate(processed_text, target_lang, model_id) or ""
        attempt = TranslationAttempt(model_id=model_id, translated_text=translated_text)

        if attempt.succeeded:
            logger.debug(f"Model {model_id} produced {len(translated_text)} chars")
            return attempt

        logger.warning(f"Model {model_id} returned no translation")

    logger.error(f"All {len(model_chain)} model(s) in the fallback chain returned empty text")
    return attempt
