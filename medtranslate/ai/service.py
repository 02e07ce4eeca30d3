"""
AI Translation Service Module

This module provides the Translator capability used by the pipeline:
- AIService.translate(text, target_language, model_id) -> str
- Configuration validation

Any backend failure is logged and reported as an empty string, which is the
only failure signal the fallback chain consumes.

For the HTTP calls themselves, see ai/providers.py
"""

from typing import Dict, Any, List, Optional

import httpx

from medtranslate.config import (
    load_config,
    get_provider_config,
    get_model_chain,
    resolve_api_key,
    BUILTIN_PROVIDERS,
    BUILTIN_PROVIDER_DISPLAY_NAMES,
    DEFAULT_SYSTEM_MESSAGE,
)
from medtranslate.logger import get_logger
from medtranslate import language_codes as lc
from medtranslate.ai.exceptions import TranslationError

logger = get_logger(__name__)


def _provider_display(provider: str) -> str:
    return BUILTIN_PROVIDER_DISPLAY_NAMES.get(provider, provider.replace('-', ' ').title())


def validate_ai_config(config: Optional[Dict[str, Any]] = None, provider_override: Optional[str] = None) -> None:
    """
    Validate that AI provider configuration is properly set up.

    Args:
        config: Configuration dict (loaded from file if omitted)
        provider_override: Optional provider to validate instead of the default.

    Raises:
        TranslationError: If configuration is invalid or missing, with code and details.
    """
    config = config if config is not None else load_config()
    provider = provider_override if provider_override else config.get('ai_provider', 'groq')

    provider_config = get_provider_config(config, provider)
    if not provider_config:
        kind = "AI provider" if provider in BUILTIN_PROVIDERS else "Custom AI provider"
        raise TranslationError(
            f"{kind} '{provider}' configuration not found",
            code="ai_config_missing",
            details={"provider": provider}
        )

    if not resolve_api_key(provider_config):
        env_name = provider_config.get('api_key_env')
        hint = f" Set it in the config file or the {env_name} environment variable." if env_name else ""
        raise TranslationError(
            f"{_provider_display(provider)} API key not configured.{hint}",
            code="ai_config_missing",
            details={"provider": provider, "missing_field": "api_key"}
        )

    if not get_model_chain(config, provider):
        raise TranslationError(
            f"{_provider_display(provider)} model not configured",
            code="ai_config_missing",
            details={"provider": provider, "missing_field": "models"}
        )

    if provider not in BUILTIN_PROVIDERS and not provider_config.get('api_url'):
        raise TranslationError(
            f"Custom provider '{provider}' API URL not configured",
            code="ai_config_missing",
            details={"provider": provider, "missing_field": "api_url"}
        )


class AIService:
    """AI service for translation."""

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        provider_override: Optional[str] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.config = config if config is not None else load_config()
        # Use provider_override if specified, otherwise use config default
        self.provider = provider_override if provider_override else self.config.get('ai_provider', 'groq')
        self.provider_config = get_provider_config(self.config, self.provider)
        self.api_key = resolve_api_key(self.provider_config)
        self.translation_config = self.config.get('translation', {})
        # Test hook: lets tests route requests through httpx.MockTransport
        self.transport = transport
        logger.info(f"Initialized AI service with provider: {self.provider}")

    @property
    def model_chain(self) -> List[str]:
        """Ordered model identifiers to try; the first is the primary model."""
        return get_model_chain(self.config, self.provider)

    def get_system_message(self, target_language_name: str) -> str:
        """System message from config (or default) with the target language filled in."""
        template = self.translation_config.get('system_message') or DEFAULT_SYSTEM_MESSAGE
        try:
            return template.format(target_language_name=target_language_name)
        except (KeyError, IndexError, ValueError, AttributeError):
            logger.warning("Invalid system_message template in config, using default")
            return DEFAULT_SYSTEM_MESSAGE.format(target_language_name=target_language_name)

    def translate(self, text: str, target_language: str, model_id: str) -> str:
        """
        Translate text with one model.

        Args:
            text: Text to translate (already sanitized and placeholder-protected)
            target_language: Target language code (e.g. 'es', 'fr-FR')
            model_id: Model identifier to call

        Returns:
            Translated text, or "" if the call failed for any reason
        """
        from medtranslate.ai.providers import call_chat_completion_api

        target_language_name = lc.get_language_label(target_language)

        try:
            return call_chat_completion_api(self, text, target_language_name, model_id)
        except TranslationError as e:
            logger.warning(f"Model {model_id} failed: {e}")
            return ""
