"""
AI Module

This module provides the Translator capability backed by chat-completion APIs.
"""

from medtranslate.ai.exceptions import TranslationError
from medtranslate.ai.service import AIService, validate_ai_config

__all__ = ['TranslationError', 'AIService', 'validate_ai_config']
