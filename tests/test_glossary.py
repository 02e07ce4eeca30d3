from __future__ import annotations

import json

import pytest

from medtranslate.config import GLOSSARY_DIR
from medtranslate.protection.glossary import GlossaryError, GlossaryIndex, load_glossary


def test_known_terms_follow_configuration_order(glossary):
    assert glossary.known_terms() == (
        "heart",
        "liver",
        "kidney",
        "heart attack",
        "blood pressure",
        "ibuprofen",
    )


def test_terms_for_missing_language_is_empty(glossary):
    assert dict(glossary.terms_for("de")) == {}
    assert glossary.resolve("heart", "de") == "heart"


def test_terms_for_region_code_falls_back_to_base_language(glossary):
    assert glossary.terms_for("es-MX")["heart"] == "corazón"
    assert glossary.has_language("es-MX")
    assert not glossary.has_language("de-DE")


def test_resolve_falls_back_to_term_for_partial_language(glossary):
    assert glossary.resolve("heart", "fr") == "cœur"
    assert glossary.resolve("liver", "fr") == "liver"


def test_keys_are_lowercased():
    index = GlossaryIndex.from_mapping({"en": {"Heart": "Heart"}, "es": {"HEART": "corazón"}})
    assert index.known_terms() == ("heart",)
    assert index.resolve("Heart", "es") == "corazón"


def test_glossary_is_read_only(glossary):
    with pytest.raises(TypeError):
        glossary.terms_for("es")["heart"] = "otro"


def test_glossary_is_not_affected_by_source_mutation():
    source = {"en": {"heart": "heart"}}
    index = GlossaryIndex.from_mapping(source)
    source["en"]["liver"] = "liver"
    assert index.known_terms() == ("heart",)


def _write(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")


def test_load_glossary_reads_every_language(tmp_path):
    _write(tmp_path / "en.json", {"terms": {"heart": "heart", "liver": "liver"}})
    _write(tmp_path / "es.json", {"terms": {"heart": "corazón"}})

    index = load_glossary(tmp_path)

    assert set(index.languages()) == {"en", "es"}
    assert index.known_terms() == ("heart", "liver")
    assert index.resolve("heart", "es") == "corazón"


def test_load_glossary_requires_base_language(tmp_path):
    _write(tmp_path / "es.json", {"terms": {"heart": "corazón"}})
    with pytest.raises(GlossaryError):
        load_glossary(tmp_path)


def test_load_glossary_rejects_invalid_json(tmp_path):
    (tmp_path / "en.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(GlossaryError) as exc_info:
        load_glossary(tmp_path)
    assert exc_info.value.path == tmp_path / "en.json"


def test_load_glossary_rejects_legacy_array_format(tmp_path):
    _write(tmp_path / "en.json", {"medicalTerms": ["heart", "liver"]})
    with pytest.raises(GlossaryError):
        load_glossary(tmp_path)


def test_load_glossary_rejects_missing_directory(tmp_path):
    with pytest.raises(GlossaryError):
        load_glossary(tmp_path / "nope")


def test_terms_sharing_a_placeholder_are_rejected():
    with pytest.raises(GlossaryError) as exc_info:
        GlossaryIndex.from_mapping({"en": {"blood pressure": "blood pressure", "blood-pressure": "blood pressure"}})

    assert "GLOSSARY_BLOOD_PRESSURE" in str(exc_info.value)


def test_load_glossary_rejects_placeholder_collision(tmp_path):
    _write(tmp_path / "en.json", {"terms": {"covid-19": "covid-19", "covid 19": "covid 19"}})
    with pytest.raises(GlossaryError):
        load_glossary(tmp_path)


def test_placeholder_collision_only_checked_for_base_language():
    index = GlossaryIndex.from_mapping(
        {"en": {"blood pressure": "blood pressure"}, "es": {"blood pressure": "presión arterial", "blood-pressure": "presión"}}
    )
    assert index.known_terms() == ("blood pressure",)


def test_bundled_glossary_loads():
    index = load_glossary(GLOSSARY_DIR)
    assert "heart" in index.known_terms()
    assert index.resolve("heart", "es") == "corazón"
