"""
Testing the word catalog.
"""

import json

import pytest

from urdle.config.game_settings import validate_word_list_integrity
from urdle.models.errors import ConfigurationError
from urdle.services.catalog import WordCatalog


def test_bundled_catalog_loads_in_order(catalog):
    assert len(catalog) == 20
    assert catalog.get(0) == "طاہر"
    assert catalog.get(19) == "زاہد"
    assert catalog.word_length == 4


def test_membership(catalog):
    assert catalog.contains("مندر")
    assert "مندر" in catalog
    assert not catalog.contains("ABCD")
    assert not catalog.contains("مند")
    assert 42 not in catalog


def test_get_is_bounds_checked(catalog):
    with pytest.raises(IndexError):
        catalog.get(20)
    with pytest.raises(IndexError):
        catalog.get(-1)


def test_order_is_kept_exactly():
    words = ["WXYZ", "ABCD", "MNOP"]
    assert list(WordCatalog(words)) == words


def test_empty_catalog_is_a_configuration_error():
    with pytest.raises(ConfigurationError):
        WordCatalog([])


def test_duplicates_are_rejected_not_dropped():
    with pytest.raises(ConfigurationError) as exc_info:
        WordCatalog(["ABCD", "WXYZ", "ABCD"])
    assert "ABCD" in str(exc_info.value)


def test_wrong_length_word_is_rejected():
    with pytest.raises(ConfigurationError):
        WordCatalog(["ABCD", "ABCDE"])


def test_other_word_lengths_can_be_configured():
    catalog = WordCatalog(["HELLO", "WORLD"], word_length=5)
    assert catalog.contains("HELLO")


def test_from_json_missing_file(tmp_path):
    with pytest.raises(ConfigurationError):
        WordCatalog.from_json(str(tmp_path / "missing.json"))


def test_from_json_malformed(tmp_path):
    path = tmp_path / "words.json"
    path.write_text("[not json", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        WordCatalog.from_json(str(path))


def test_from_json_must_be_a_list(tmp_path):
    path = tmp_path / "words.json"
    path.write_text(json.dumps({"words": ["ABCD"]}), encoding="utf-8")
    with pytest.raises(ConfigurationError):
        WordCatalog.from_json(str(path))


def test_from_json_custom_file(tmp_path):
    path = tmp_path / "words.json"
    path.write_text(json.dumps(["ABCD", "WXYZ"]), encoding="utf-8")
    catalog = WordCatalog.from_json(str(path))
    assert list(catalog) == ["ABCD", "WXYZ"]


def test_validate_word_list_integrity_accepts_bundled_words(catalog):
    assert validate_word_list_integrity(list(catalog)) is True


def test_word_statistics(catalog):
    stats = catalog.get_word_statistics()
    assert stats["total_words"] == 20
    assert sum(stats["letter_frequency"].values()) == 80
    assert len(stats["most_common_letters"]) == 5
    # alef appears in most words of the list
    assert stats["most_common_letters"][0][0] == "ا"
