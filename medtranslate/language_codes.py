"""
Language code mappings and utilities.

Standards:
- ISO 639-1: 2-letter language codes (en, es, fr)
- BCP 47: Language + Region codes (en-US, es-MX, fr-CA)

Target languages arrive from clients in either form. Glossaries are keyed
by the most specific code available, so lookups try the exact code first
and then its base language (see lookup_chain()).
"""

from typing import Optional, List

# ISO 639-1 language codes (2-letter)
# Source: https://en.wikipedia.org/wiki/List_of_ISO_639-1_codes
ISO_639_1 = {
    'am': 'Amharic',
    'ar': 'Arabic',
    'bn': 'Bengali',
    'de': 'German',
    'el': 'Greek',
    'en': 'English',
    'es': 'Spanish',
    'fa': 'Persian',
    'fr': 'French',
    'ha': 'Hausa',
    'hi': 'Hindi',
    'ht': 'Haitian Creole',
    'it': 'Italian',
    'ja': 'Japanese',
    'ko': 'Korean',
    'nl': 'Dutch',
    'pl': 'Polish',
    'ps': 'Pashto',
    'pt': 'Portuguese',
    'ro': 'Romanian',
    'ru': 'Russian',
    'so': 'Somali',
    'sw': 'Swahili',
    'ta': 'Tamil',
    'tl': 'Tagalog',
    'tr': 'Turkish',
    'uk': 'Ukrainian',
    'ur': 'Urdu',
    'vi': 'Vietnamese',
    'zh': 'Chinese',
}

# BCP 47 language-region codes (common variants)
BCP_47_VARIANTS = {
    'en-US': 'English (United States)',
    'en-GB': 'English (United Kingdom)',

    'es-ES': 'Spanish (Spain)',
    'es-MX': 'Spanish (Mexico)',
    'es-US': 'Spanish (United States)',

    'fr-FR': 'French (France)',
    'fr-CA': 'French (Canada)',

    'pt-BR': 'Portuguese (Brazil)',
    'pt-PT': 'Portuguese (Portugal)',

    'zh-CN': 'Chinese (Simplified, China)',
    'zh-TW': 'Chinese (Traditional, Taiwan)',
}

# Combined mapping
ALL_LANGUAGE_CODES = {**ISO_639_1, **BCP_47_VARIANTS}


def normalize_language_code(code: str) -> str:
    """
    Normalize casing and separators of a language code.

    Examples:
        >>> normalize_language_code('es_mx')
        'es-MX'
        >>> normalize_language_code(' FR ')
        'fr'
    """
    code = code.strip().replace('_', '-')
    if '-' not in code:
        return code.lower()
    language, region = code.split('-', 1)
    return f"{language.lower()}-{region.upper()}"


def get_language_name(code: str) -> Optional[str]:
    """
    Get the full language name from code.

    Examples:
        >>> get_language_name('es')
        'Spanish'
        >>> get_language_name('fr-CA')
        'French (Canada)'
    """
    return ALL_LANGUAGE_CODES.get(code)


def get_language_label(code: str) -> str:
    """Human-readable label for prompts: the language name, or the code itself if unknown."""
    normalized = normalize_language_code(code)
    return (
        get_language_name(normalized)
        or get_language_name(extract_base_language(normalized))
        or code
    )


def extract_base_language(code: str) -> str:
    """
    Extract base language from code (remove region).

    Examples:
        >>> extract_base_language('es-MX')
        'es'
        >>> extract_base_language('fr')
        'fr'
    """
    return code.split('-')[0]


def lookup_chain(code: str) -> List[str]:
    """
    Codes to try, most specific first, when resolving per-language data.

    Examples:
        >>> lookup_chain('es-MX')
        ['es-MX', 'es']
        >>> lookup_chain('es')
        ['es']
    """
    normalized = normalize_language_code(code)
    base = extract_base_language(normalized)
    return [normalized] if base == normalized else [normalized, base]
