"""
AI Provider API Implementations

All supported backends (Groq, OpenAI, and custom providers) speak the
OpenAI-compatible chat-completions protocol, so one call implementation
serves them all.

Each function takes an AIService instance; errors are raised as
TranslationError and mapped to empty output by the service.
"""

from typing import Any
import httpx

from medtranslate.logger import get_logger
from medtranslate.ai.exceptions import TranslationError

logger = get_logger(__name__)


def get_httpx_timeout(timeout_config: Any) -> httpx.Timeout:
    """
    Convert timeout configuration to httpx.Timeout object.

    Every attempt in the fallback chain is bounded by this timeout.

    Args:
        timeout_config: Either a number (read timeout) or a dict with
            connect, write, read, pool keys

    Returns:
        httpx.Timeout object
    """
    if isinstance(timeout_config, dict):
        return httpx.Timeout(
            connect=timeout_config.get('connect', 10.0),
            write=timeout_config.get('write', 30.0),
            read=timeout_config.get('read', 30.0),
            pool=timeout_config.get('pool', 10.0),
        )
    else:
        timeout_value = float(timeout_config) if timeout_config else 30.0
        return httpx.Timeout(
            connect=10.0,
            write=30.0,
            read=timeout_value,
            pool=10.0,
        )


def handle_http_error(e: httpx.HTTPStatusError, provider: str):
    """Handle HTTP errors with detailed messages."""
    status_code = e.response.status_code
    error_text = "Unknown error"

    try:
        error_json = e.response.json()
        if isinstance(error_json, dict) and "error" in error_json:
            error_detail = error_json["error"]
            if isinstance(error_detail, dict):
                error_text = error_detail.get("message", str(error_detail))
            else:
                error_text = str(error_detail)
    except ValueError:
        error_text = e.response.text[:500] if e.response.text else "No details"

    raise TranslationError(
        f"{provider} API error ({status_code}): {error_text}",
        code="provider_http_error",
        details={"provider": provider, "status_code": status_code},
    )


def build_messages(service, text: str, target_language_name: str) -> list:
    """Chat messages for a single translation request."""
    system_message = service.get_system_message(target_language_name)
    return [
        {"role": "system", "content": system_message},
        {"role": "user", "content": text},
    ]


def call_chat_completion_api(service, text: str, target_language_name: str, model: str) -> str:
    """
    Call an OpenAI-compatible chat-completions endpoint.

    Returns:
        The stripped message content (may be empty)

    Raises:
        TranslationError: On configuration, transport, HTTP or format errors
    """
    provider = service.provider
    provider_config = service.provider_config
    api_key = service.api_key
    api_url = provider_config.get('api_url', '')
    timeout = provider_config.get('timeout', 30)

    if not api_key:
        raise TranslationError(f"{provider} API key not configured", code="ai_config_missing")

    if not api_url:
        raise TranslationError(f"{provider} API URL not configured", code="ai_config_missing")

    headers = {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json"
    }

    logger.debug(f"  Calling {provider} API (model: {model}, url: {api_url})...")

    try:
        body = {
            "model": model,
            "messages": build_messages(service, text, target_language_name),
            "temperature": service.translation_config.get('temperature', 0.1),
            "max_tokens": service.translation_config.get('max_tokens', 1024),
        }

        httpx_timeout = get_httpx_timeout(timeout)
        with httpx.Client(timeout=httpx_timeout, transport=service.transport) as client:
            response = client.post(api_url, headers=headers, json=body)
            response.raise_for_status()

            result = response.json()

            usage = result.get('usage') or {}

            choices = result.get('choices') or []
            if choices:
                content = (choices[0].get('message') or {}).get('content') or ''
                logger.debug(f"  Received {len(content)} chars from {provider} (prompt_tokens: {usage.get('prompt_tokens', 0)}, completion_tokens: {usage.get('completion_tokens', 0)})")
                return content.strip()

            raise TranslationError(f"No content in {provider} response", code="provider_bad_response")

    except httpx.HTTPStatusError as e:
        handle_http_error(e, provider)
    except httpx.TimeoutException:
        raise TranslationError(f"{provider} API request timeout", code="provider_timeout")
    except TranslationError:
        raise
    except Exception as e:
        raise TranslationError(f"{provider} API call failed: {e}", code="provider_error")
