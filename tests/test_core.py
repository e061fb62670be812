"""
Tests for the dictionary loader, the word resolver and the symbol catalog loader.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from conftest import SAMPLE_WORDS, write_resource
from word2ipa.core import (
    Dictionary,
    EmptyDictionary,
    EncodingError,
    IpaSymbolEntry,
    LoadError,
    MalformedJson,
    ResourceMissing,
    WordNotFound,
    available_locales,
    find_symbol,
    load_dictionary,
    load_dictionary_file,
    load_symbol_catalog,
    normalize_word,
    parse_dictionary,
    parse_symbol_catalog,
    resolve,
)


# ---------------------------------------------------------------------------
# Dictionary loader
# ---------------------------------------------------------------------------


class TestLoadDictionary:
    def test_loads_first_block(self, resource_root: Path) -> None:
        dictionary = load_dictionary("en_US", resource_root)
        assert isinstance(dictionary, Dictionary)
        assert dictionary.locale == "en_US"
        assert dictionary.words == SAMPLE_WORDS
        assert len(dictionary) == len(SAMPLE_WORDS)

    def test_extra_blocks_are_kept_but_unused(self, tmp_path: Path) -> None:
        write_resource(tmp_path, "dicts/xx.json", {"entries": [{"a": "ə"}, {"b": "bi"}]})
        dictionary = load_dictionary("xx", tmp_path)
        assert len(dictionary.entries) == 2
        assert dictionary.words == {"a": "ə"}

    def test_missing_locale(self, resource_root: Path) -> None:
        with pytest.raises(ResourceMissing):
            load_dictionary("fr_FR", resource_root)

    def test_invalid_utf8(self, tmp_path: Path) -> None:
        write_resource(tmp_path, "dicts/bad.json", b'{"entries": [{"caf\xe9": "x"}]}')
        with pytest.raises(EncodingError):
            load_dictionary("bad", tmp_path)

    def test_invalid_json(self, tmp_path: Path) -> None:
        write_resource(tmp_path, "dicts/bad.json", '{"entries": [')
        with pytest.raises(MalformedJson):
            load_dictionary("bad", tmp_path)

    @pytest.mark.parametrize(
        "content",
        [
            [],
            {"words": {}},
            {"entries": {"hello": "h"}},
            {"entries": ["hello"]},
            {"entries": [{"hello": 1}]},
        ],
    )
    def test_wrong_shape_is_malformed(self, tmp_path: Path, content) -> None:
        write_resource(tmp_path, "dicts/bad.json", content)
        with pytest.raises(MalformedJson):
            load_dictionary("bad", tmp_path)

    def test_zero_blocks_is_empty_dictionary(self, tmp_path: Path) -> None:
        write_resource(tmp_path, "dicts/empty.json", {"entries": []})
        with pytest.raises(EmptyDictionary):
            load_dictionary("empty", tmp_path)

    def test_empty_first_block_is_valid(self, tmp_path: Path) -> None:
        write_resource(tmp_path, "dicts/none.json", {"entries": [{}]})
        assert load_dictionary("none", tmp_path).words == {}

    def test_errors_are_distinguishable_load_errors(self) -> None:
        kinds = [ResourceMissing, EncodingError, MalformedJson, EmptyDictionary]
        for kind in kinds:
            assert issubclass(kind, LoadError)
        assert len(set(kinds)) == 4

    def test_idempotent(self, resource_root: Path) -> None:
        assert load_dictionary("en_US", resource_root) == load_dictionary("en_US", resource_root)

    def test_bundled_dictionary(self) -> None:
        dictionary = load_dictionary("en_US")
        assert len(dictionary) > 0
        assert all(word == word.lower() for word in dictionary.words)

    def test_load_dictionary_file(self, tmp_path: Path) -> None:
        path = write_resource(tmp_path, "custom.json", {"entries": [{"moon": "mun"}]})
        dictionary = load_dictionary_file(str(path))
        assert dictionary.locale == "custom"
        assert dictionary.words == {"moon": "mun"}

    def test_load_dictionary_file_missing(self, tmp_path: Path) -> None:
        with pytest.raises(ResourceMissing):
            load_dictionary_file(str(tmp_path / "nope.json"))


def test_parse_dictionary_reports_resource_name() -> None:
    with pytest.raises(EmptyDictionary) as exc_info:
        parse_dictionary({"entries": []}, "en_US", "dicts/en_US.json")
    assert exc_info.value.resource == "dicts/en_US.json"
    assert "dicts/en_US.json" in str(exc_info.value)


def test_available_locales(resource_root: Path) -> None:
    write_resource(resource_root, "dicts/de_DE.json", {"entries": [{}]})
    assert available_locales(resource_root) == ["de_DE", "en_US"]


def test_available_locales_without_dicts_dir(tmp_path: Path) -> None:
    assert available_locales(tmp_path) == []


# ---------------------------------------------------------------------------
# Word resolver
# ---------------------------------------------------------------------------


class TestResolve:
    def test_every_stored_word_resolves(self, mapping: dict) -> None:
        for word, ipa in mapping.items():
            assert resolve(normalize_word(word), mapping) == ipa

    def test_hello_scenario(self, mapping: dict) -> None:
        block = {"hello": "h ə l oʊ"}
        assert resolve("HELLO", block) == "h ə l oʊ"
        with pytest.raises(WordNotFound) as exc_info:
            resolve("goodbye", block)
        assert exc_info.value.word == "goodbye"

    @pytest.mark.parametrize("query", ["cat", "Cat", "CAT", "cAt"])
    def test_case_insensitive(self, mapping: dict, query: str) -> None:
        assert resolve(query, mapping) == "kæt"

    def test_not_found_keeps_original_query(self, mapping: dict) -> None:
        with pytest.raises(WordNotFound) as exc_info:
            resolve("Dragon", mapping)
        assert exc_info.value.word == "Dragon"
        assert str(exc_info.value) == "Word 'Dragon' not found."

    def test_non_ascii_lowercasing(self, mapping: dict) -> None:
        assert resolve("STRASSE".lower(), {"strasse": "x"}) == "x"
        assert resolve("Straße", mapping) == "ʃtʁaːsə"

    def test_no_trimming_in_resolver(self, mapping: dict) -> None:
        with pytest.raises(WordNotFound):
            resolve(" cat ", mapping)

    def test_deterministic(self, mapping: dict) -> None:
        assert resolve("Ship", mapping) == resolve("Ship", mapping)

    def test_does_not_mutate_mapping(self, mapping: dict) -> None:
        before = dict(mapping)
        resolve("cat", mapping)
        with pytest.raises(WordNotFound):
            resolve("dog", mapping)
        assert mapping == before


@pytest.mark.parametrize("word", ["cat", "CAT", "Straße", "İstanbul", "ΣΊΣΥΦΟΣ", "ǅemal", ""])
def test_normalize_word_idempotent(word: str) -> None:
    once = normalize_word(word)
    assert normalize_word(once) == once


# ---------------------------------------------------------------------------
# Symbol catalog loader
# ---------------------------------------------------------------------------


class TestLoadSymbolCatalog:
    def test_loads_entries_in_order(self, resource_root: Path) -> None:
        catalog = load_symbol_catalog(resource_root)
        assert [entry.symbol for entry in catalog] == ["ʃ", "θ"]
        assert catalog[0] == IpaSymbolEntry(
            symbol="ʃ",
            sound="sh",
            description="voiceless postalveolar fricative",
            examples=["ship", "wish"],
            ipa_examples=["ʃɪp", "wɪʃ"],
        )

    def test_empty_array_is_not_an_error(self, tmp_path: Path) -> None:
        write_resource(tmp_path, "dicts/ipa_lookup_table.json", [])
        assert load_symbol_catalog(tmp_path) == []

    def test_missing(self, tmp_path: Path) -> None:
        with pytest.raises(ResourceMissing):
            load_symbol_catalog(tmp_path)

    def test_invalid_utf8(self, tmp_path: Path) -> None:
        write_resource(tmp_path, "dicts/ipa_lookup_table.json", b"[\xff]")
        with pytest.raises(EncodingError):
            load_symbol_catalog(tmp_path)

    def test_invalid_json(self, tmp_path: Path) -> None:
        write_resource(tmp_path, "dicts/ipa_lookup_table.json", "[{")
        with pytest.raises(MalformedJson):
            load_symbol_catalog(tmp_path)

    def test_top_level_object_is_malformed(self, tmp_path: Path) -> None:
        write_resource(tmp_path, "dicts/ipa_lookup_table.json", {"entries": []})
        with pytest.raises(MalformedJson):
            load_symbol_catalog(tmp_path)

    def test_missing_field_is_malformed(self) -> None:
        with pytest.raises(MalformedJson):
            parse_symbol_catalog([{"symbol": "ʃ", "sound": "sh", "examples": [], "ipa_examples": []}])

    def test_bundled_catalog(self) -> None:
        catalog = load_symbol_catalog()
        assert len(catalog) > 0
        assert find_symbol(catalog, "ʃ") is not None


def test_example_pairs_truncate_to_shorter() -> None:
    entry = IpaSymbolEntry(
        symbol="θ",
        sound="th",
        description="voiceless dental fricative",
        examples=["thin", "bath", "three"],
        ipa_examples=["θɪn", "bæθ"],
    )
    assert entry.example_pairs() == [("thin", "θɪn"), ("bath", "bæθ")]


def test_find_symbol_missing(resource_root: Path) -> None:
    assert find_symbol(load_symbol_catalog(resource_root), "ʒ") is None


def _unreadable(*args, **kwargs):
    raise PermissionError(13, "Permission denied")


def test_load_json_file_unreadable(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = write_resource(tmp_path, "locked.json", {"entries": [{"moon": "mun"}]})
    monkeypatch.setattr("word2ipa.core.open", _unreadable, raising=False)
    with pytest.raises(ResourceMissing) as exc_info:
        load_dictionary_file(str(path))
    assert isinstance(exc_info.value.__cause__, PermissionError)
