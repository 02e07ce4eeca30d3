from __future__ import annotations

import copy
import sys
from pathlib import Path

import pytest

# Make package importable when running tests from the project root without installing.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from medtranslate.config import CONFIG_ENV_VAR, DEFAULT_CONFIG  # noqa: E402
from medtranslate.protection.glossary import GlossaryIndex  # noqa: E402

GLOSSARY_DATA = {
    "en": {
        "heart": "heart",
        "liver": "liver",
        "kidney": "kidney",
        "heart attack": "heart attack",
        "blood pressure": "blood pressure",
        "ibuprofen": "ibuprofen",
    },
    "es": {
        "heart": "corazón",
        "liver": "hígado",
        "kidney": "riñón",
        "heart attack": "infarto",
        "blood pressure": "presión arterial",
        "ibuprofen": "ibuprofeno",
    },
    "fr": {
        "heart": "cœur",
    },
}


class FakeTranslator:
    """Translator returning canned output per model; an Exception value is raised."""

    def __init__(self, responses=None, default=""):
        self.responses = responses or {}
        self.default = default
        self.calls = []

    def translate(self, text, target_language, model_id):
        self.calls.append((text, target_language, model_id))
        response = self.responses.get(model_id, self.default)
        if isinstance(response, Exception):
            raise response
        if callable(response):
            return response(text)
        return response


@pytest.fixture(autouse=True)
def isolated_config_file(tmp_path, monkeypatch):
    """Never pick up a developer's config/config.json during tests."""
    monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "missing-config.json"))


@pytest.fixture
def glossary() -> GlossaryIndex:
    return GlossaryIndex.from_mapping(GLOSSARY_DATA)


@pytest.fixture
def config() -> dict:
    cfg = copy.deepcopy(DEFAULT_CONFIG)
    cfg["groq"]["api_key"] = "test-key"
    cfg["groq"]["models"] = ["primary-model", "secondary-model"]
    return cfg


@pytest.fixture
def fake_translator_cls():
    return FakeTranslator
