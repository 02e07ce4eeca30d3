from __future__ import annotations

import pytest

from medtranslate.web import create_app


@pytest.fixture
def translator(fake_translator_cls):
    return fake_translator_cls(
        {"primary-model": "Dolor de GLOSSARY_HEART, tomar 500 mg GLOSSARY_IBUPROFEN"}
    )


@pytest.fixture
def client(config, glossary, translator):
    app = create_app(config, glossary=glossary, translator=translator)
    app.config["TESTING"] = True
    return app.test_client()


def test_translate_success(client):
    response = client.post(
        "/api/translate",
        json={"text": "patient: John has heart pain, take 500 mg ibuprofen", "targetLang": "es"},
    )

    assert response.status_code == 200
    assert response.get_json() == {
        "translatedText": "Dolor de corazón, tomar 500 mg ibuprofeno",
        "warnings": [],
        "modelUsed": "primary-model",
    }


def test_translate_missing_fields(client, translator):
    response = client.post("/api/translate", json={"text": "heart pain"})

    assert response.status_code == 400
    assert response.get_json() == {"error": "Missing required fields"}
    assert translator.calls == []


def test_translate_non_json_body(client):
    response = client.post("/api/translate", data="text=hi", content_type="text/plain")
    assert response.status_code == 400


def test_translate_unsupported_language(client, translator):
    response = client.post("/api/translate", json={"text": "heart pain", "targetLang": "de"})

    assert response.status_code == 400
    assert response.get_json()["code"] == "unsupported_language"
    assert translator.calls == []


@pytest.mark.parametrize("method", ["get", "put", "delete"])
def test_translate_wrong_method(client, method):
    response = getattr(client, method)("/api/translate")

    assert response.status_code == 405
    assert response.get_json() == {"error": "Method not allowed"}


def test_unexpected_failure_hides_details(config, glossary, fake_translator_cls):
    translator = fake_translator_cls({"primary-model": RuntimeError("secret internals")})
    client = create_app(config, glossary=glossary, translator=translator).test_client()

    response = client.post("/api/translate", json={"text": "heart pain", "targetLang": "es"})

    assert response.status_code == 500
    assert response.get_json() == {"error": "Translation failed"}
    assert "secret" not in response.get_data(as_text=True)


def test_exhausted_chain_default_is_success_with_empty_text(config, glossary, fake_translator_cls):
    client = create_app(config, glossary=glossary, translator=fake_translator_cls()).test_client()

    response = client.post("/api/translate", json={"text": "Hello", "targetLang": "es"})

    assert response.status_code == 200
    assert response.get_json() == {"translatedText": "", "warnings": [], "modelUsed": "secondary-model"}


def test_exhausted_chain_strict_mode(config, glossary, fake_translator_cls):
    config["translation"]["fail_on_exhausted"] = True
    client = create_app(config, glossary=glossary, translator=fake_translator_cls()).test_client()

    response = client.post("/api/translate", json={"text": "Hello", "targetLang": "es"})

    assert response.status_code == 502
    assert response.get_json()["code"] == "translation_exhausted"


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.get_json() == {"status": "ok"}


def test_languages(client):
    languages = client.get("/api/languages").get_json()["languages"]
    assert {"code": "es", "name": "Spanish"} in languages
    assert {"code": "fr-FR", "name": "French (France)"} in languages
