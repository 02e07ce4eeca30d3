import copy
import json
import os
from pathlib import Path
from typing import Dict, Any, List, Optional

from medtranslate.logger import get_logger

logger = get_logger(__name__)

# Translation configuration constants
DEFAULT_BASE_LANGUAGE = "en"
DEFAULT_SYSTEM_MESSAGE = (
    "Translate medical text to {target_language_name} exactly. "
    "Preserve numbers, units, and medical terms. "
    "Copy any token starting with GLOSSARY_ unchanged."
)

# Provider configuration constants
BUILTIN_PROVIDERS = ["groq", "openai"]

BUILTIN_PROVIDER_DISPLAY_NAMES = {
    "groq": "Groq",
    "openai": "OpenAI",
}

PROVIDER_DEFAULTS = {
    "timeout": 30
}

API_KEY_PLACEHOLDER = "YOUR_API_KEY_HERE"

# Get base directory (project root)
BASE_DIR = Path(__file__).parent.parent
CONFIG_DIR = BASE_DIR / "config"
CONFIG_FILE = CONFIG_DIR / "config.json"
GLOSSARY_DIR = BASE_DIR / "data" / "glossary"

CONFIG_ENV_VAR = "MEDTRANSLATE_CONFIG"

# Default configuration templates
DEFAULT_CONFIG = {
    "ai_provider": "groq",
    "groq": {
        "api_key": API_KEY_PLACEHOLDER,
        "api_key_env": "GROQ_API_KEY",
        "models": ["llama3-70b-8192", "mixtral-8x7b-32768"],  # Fallback chain, first is primary
        "timeout": 30,
        "api_url": "https://api.groq.com/openai/v1/chat/completions"
    },
    "openai": {
        "api_key": API_KEY_PLACEHOLDER,
        "api_key_env": "OPENAI_API_KEY",
        "models": ["gpt-4o-mini", "gpt-4o"],
        "timeout": 30,
        "api_url": "https://api.openai.com/v1/chat/completions"
    },
    "translation": {
        "base_language": DEFAULT_BASE_LANGUAGE,
        "system_message": DEFAULT_SYSTEM_MESSAGE,
        "temperature": 0.1,
        "max_tokens": 1024,
        "fail_on_exhausted": False,
        "supported_languages": ["en", "en-US", "es", "es-ES", "fr", "fr-FR"]
    },
    "validation": {
        "anatomical_terms": ["heart", "liver", "kidney"],
        "unit_pattern": r"(mg|mL|g)",
        "allowed_units": ["mg", "mL", "g"]
    },
    "glossary_dir": str(GLOSSARY_DIR),
    "log_mode": "info"
}


def get_config_path() -> Path:
    """Resolve the config file path, honouring the MEDTRANSLATE_CONFIG override."""
    override = os.environ.get(CONFIG_ENV_VAR)
    return Path(override) if override else CONFIG_FILE


def merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge user configuration over defaults.

    Dict sections are merged key by key (one level deep), everything else
    is replaced outright. Neither argument is modified.
    """
    merged = copy.deepcopy(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key].update(copy.deepcopy(value))
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def load_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Load the configuration file, falling back to defaults."""
    config_path = Path(path) if path else get_config_path()

    if not config_path.exists():
        logger.debug(f"No config file at {config_path}, using defaults")
        return copy.deepcopy(DEFAULT_CONFIG)

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            user_config = json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f"Failed to parse config file {config_path}: {e}")
        logger.warning("Using default configuration")
        return copy.deepcopy(DEFAULT_CONFIG)

    if not isinstance(user_config, dict):
        logger.error(f"Config file {config_path} must contain a JSON object")
        logger.warning("Using default configuration")
        return copy.deepcopy(DEFAULT_CONFIG)

    logger.debug(f"Configuration loaded from {config_path}")
    return merge_config(DEFAULT_CONFIG, user_config)


def get_provider_config(config: Dict[str, Any], provider: Optional[str] = None) -> Dict[str, Any]:
    """Return the section for the given (or active) provider, with defaults applied."""
    provider = provider or config.get('ai_provider', 'groq')
    section = config.get(provider)
    if not isinstance(section, dict):
        return {}
    return {**PROVIDER_DEFAULTS, **section}


def resolve_api_key(provider_config: Dict[str, Any]) -> str:
    """
    Resolve the API key for a provider.

    An explicit key in the config wins; otherwise the variable named by
    'api_key_env' is read from the environment.
    """
    api_key = provider_config.get('api_key', '')
    if api_key and api_key != API_KEY_PLACEHOLDER:
        return api_key

    env_name = provider_config.get('api_key_env')
    if env_name:
        return os.environ.get(env_name, '')
    return ''


def get_model_chain(config: Dict[str, Any], provider: Optional[str] = None) -> List[str]:
    """Return the ordered fallback chain of model identifiers for a provider."""
    provider_config = get_provider_config(config, provider)
    models = provider_config.get('models', [])
    if isinstance(models, str):
        models = [models]
    chain = [m for m in models if m and isinstance(m, str)]

    # Legacy single 'model' field
    if not chain and provider_config.get('model'):
        chain = [provider_config['model']]
    return chain


def get_supported_languages(config: Dict[str, Any]) -> List[str]:
    """Return the configured list of target languages."""
    return list(config.get('translation', {}).get('supported_languages', []))
