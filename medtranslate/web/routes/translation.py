"""Translation API routes."""

from __future__ import annotations

from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request

from medtranslate.config import get_supported_languages
from medtranslate.logger import get_logger
import medtranslate.language_codes as lc
from medtranslate.translation.exceptions import InputValidationError, TranslationExhaustedError
from medtranslate.translation.pipeline import parse_translate_request

translation_bp = Blueprint("translation", __name__)
logger = get_logger(__name__)


def _get_pipeline():
    return current_app.extensions["translation_pipeline"]


def _get_config() -> Dict[str, Any]:
    return current_app.extensions["medtranslate_config"]


@translation_bp.post("/translate")
def translate_text():
    """Translate a medical utterance with glossary protection and validation."""
    data: Dict[str, Any] = request.get_json(silent=True) or {}

    try:
        text, target_lang = parse_translate_request(data, get_supported_languages(_get_config()))
    except InputValidationError as e:
        logger.warning("Rejected translation request: %s (%s)", e, ", ".join(e.fields))
        if e.code == "missing_fields":
            return jsonify({"error": str(e)}), 400
        return jsonify({"error": str(e), "code": e.code}), 400

    try:
        result = _get_pipeline().run(text, target_lang)
    except TranslationExhaustedError as e:
        logger.error("Translation exhausted for target %s: %s", target_lang, ", ".join(e.model_chain))
        return jsonify({"error": str(e), "code": e.code}), 502
    except Exception as e:
        logger.exception("Translation error: %s", e)
        return jsonify({"error": "Translation failed"}), 500

    return jsonify(result.to_dict())


@translation_bp.get("/languages")
def list_languages():
    """List the configured target languages."""
    languages = [
        {"code": code, "name": lc.get_language_label(code)}
        for code in get_supported_languages(_get_config())
    ]
    return jsonify({"languages": languages})
