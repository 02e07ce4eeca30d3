from __future__ import annotations

import json

from medtranslate import config as config_module
from medtranslate.config import (
    DEFAULT_CONFIG,
    get_model_chain,
    get_supported_languages,
    load_config,
    merge_config,
    resolve_api_key,
)


def test_load_config_without_file_returns_defaults(tmp_path):
    cfg = load_config(tmp_path / "absent.json")

    assert cfg == DEFAULT_CONFIG
    cfg["groq"]["models"].append("mutated")
    assert "mutated" not in DEFAULT_CONFIG["groq"]["models"]


def test_load_config_merges_sections(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"groq": {"models": ["only-model"]}, "log_mode": "debug"}), encoding="utf-8")

    cfg = load_config(path)

    assert cfg["groq"]["models"] == ["only-model"]
    assert cfg["groq"]["api_url"] == DEFAULT_CONFIG["groq"]["api_url"]
    assert cfg["log_mode"] == "debug"


def test_load_config_with_invalid_json_uses_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{broken", encoding="utf-8")
    assert load_config(path) == DEFAULT_CONFIG


def test_load_config_honours_env_override(tmp_path, monkeypatch):
    path = tmp_path / "custom.json"
    path.write_text(json.dumps({"ai_provider": "openai"}), encoding="utf-8")
    monkeypatch.setenv(config_module.CONFIG_ENV_VAR, str(path))

    assert load_config()["ai_provider"] == "openai"


def test_merge_config_does_not_modify_inputs():
    base = {"section": {"a": 1}}
    merged = merge_config(base, {"section": {"b": 2}})
    assert merged == {"section": {"a": 1, "b": 2}}
    assert base == {"section": {"a": 1}}


def test_model_chain_from_models_list(config):
    assert get_model_chain(config) == ["primary-model", "secondary-model"]
    assert get_model_chain(config, "openai") == ["gpt-4o-mini", "gpt-4o"]


def test_model_chain_legacy_single_model():
    cfg = {"ai_provider": "custom", "custom": {"model": "legacy-model"}}
    assert get_model_chain(cfg) == ["legacy-model"]


def test_model_chain_unknown_provider_is_empty():
    assert get_model_chain({"ai_provider": "missing"}) == []


def test_resolve_api_key_prefers_explicit_key(monkeypatch):
    monkeypatch.setenv("GROQ_API_KEY", "from-env")
    assert resolve_api_key({"api_key": "explicit", "api_key_env": "GROQ_API_KEY"}) == "explicit"


def test_resolve_api_key_reads_environment(monkeypatch):
    monkeypatch.setenv("GROQ_API_KEY", "from-env")
    assert resolve_api_key({"api_key": "YOUR_API_KEY_HERE", "api_key_env": "GROQ_API_KEY"}) == "from-env"


def test_resolve_api_key_missing(monkeypatch):
    monkeypatch.delenv("GROQ_API_KEY", raising=False)
    assert resolve_api_key({"api_key": "YOUR_API_KEY_HERE", "api_key_env": "GROQ_API_KEY"}) == ""


def test_supported_languages(config):
    assert "es" in get_supported_languages(config)
