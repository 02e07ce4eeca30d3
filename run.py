"""Project root entry point for launching the translation API."""

from __future__ import annotations

import os


def main():
    from medtranslate.ai.service import validate_ai_config, TranslationError
    from medtranslate.config import load_config
    from medtranslate.logger import get_logger
    from medtranslate.web import create_app

    logger = get_logger("medtranslate.run")
    config = load_config()

    try:
        validate_ai_config(config)
    except TranslationError as e:
        # Still start: every request will report an empty translation until fixed
        logger.warning("AI configuration incomplete: %s", e)

    app = create_app(config)
    port = int(os.environ.get("MEDTRANSLATE_PORT", "5500"))
    app.run(host="0.0.0.0", port=port, debug=os.environ.get("MEDTRANSLATE_DEBUG") == "1")


if __name__ == "__main__":
    main()
