"""Web application package for medtranslate."""

from typing import Any, Dict, Optional

from flask import Flask

from medtranslate.config import load_config
from medtranslate.logger import refresh_log_mode
from medtranslate.protection.glossary import GlossaryIndex


def create_app(
    config: Optional[Dict[str, Any]] = None,
    glossary: Optional[GlossaryIndex] = None,
    translator=None,
) -> Flask:
    """
    Application factory for the web interface.

    The glossary is loaded once here and shared read-only by all requests.
    Pass a glossary or translator to override the configured ones.
    """
    from medtranslate.translation.pipeline import TranslationPipeline

    config = config if config is not None else load_config()
    refresh_log_mode(config.get("log_mode"))
    pipeline = TranslationPipeline.from_config(config, glossary=glossary, translator=translator)

    from .app import build_app  # Import here to avoid circular imports

    return build_app(config, pipeline)


__all__ = ["create_app"]
