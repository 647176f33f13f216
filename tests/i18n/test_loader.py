# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Tests for catalog loading from properties, YAML and JSON files."""

from pathlib import Path

import pytest

from msgfly.i18n.loader import discover_locales, load_catalog, load_catalog_set
from msgfly.kernel.exceptions import CatalogLoadError


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


class TestLoadCatalog:
    def test_properties(self, tmp_path):
        path = _write(tmp_path / "messages.properties", "hello=안녕\nhello.name=안녕 {0}\n")
        catalog = load_catalog(path)
        assert catalog.get("hello") == "안녕"
        assert catalog.get("hello.name") == "안녕 {0}"
        assert catalog.locale is None
        assert catalog.source == str(path)

    def test_yaml_nested_keys_flattened(self, tmp_path):
        path = _write(tmp_path / "messages_en.yaml", "greeting:\n  hello: 'Hello, {0}!'\ncount: 3\n")
        catalog = load_catalog(path, locale="en")
        assert catalog.get("greeting.hello") == "Hello, {0}!"
        assert catalog.get("count") == "3"
        assert catalog.locale == "en"

    def test_json(self, tmp_path):
        path = _write(tmp_path / "messages.json", '{"a": {"b": "c"}}')
        assert load_catalog(path).get("a.b") == "c"

    def test_empty_yaml(self, tmp_path):
        path = _write(tmp_path / "messages.yml", "")
        assert len(load_catalog(path)) == 0

    def test_invalid_yaml(self, tmp_path):
        path = _write(tmp_path / "messages.yaml", "a: [unclosed\n")
        with pytest.raises(CatalogLoadError) as exc_info:
            load_catalog(path)
        assert exc_info.value.path == str(path)
        assert exc_info.value.code == "CATALOG_LOAD_FAILED"

    def test_invalid_json(self, tmp_path):
        path = _write(tmp_path / "messages.json", "{not json")
        with pytest.raises(CatalogLoadError):
            load_catalog(path)

    def test_non_mapping_top_level(self, tmp_path):
        path = _write(tmp_path / "messages.yaml", "- a\n- b\n")
        with pytest.raises(CatalogLoadError, match="mapping"):
            load_catalog(path)

    def test_malformed_properties_escape(self, tmp_path):
        path = _write(tmp_path / "messages.properties", "a=\\uZZZZ\n")
        with pytest.raises(CatalogLoadError, match="Malformed"):
            load_catalog(path)

    def test_duplicate_properties_key_last_wins(self, tmp_path):
        path = _write(tmp_path / "messages.properties", "a=1\na=2\n")
        assert load_catalog(path).get("a") == "2"

    def test_unsupported_extension(self, tmp_path):
        path = _write(tmp_path / "messages.txt", "a=1")
        with pytest.raises(CatalogLoadError, match="unsupported"):
            load_catalog(path)


class TestLoadCatalogSet:
    def test_default_and_locale_catalogs(self, tmp_path):
        _write(tmp_path / "messages.properties", "hello=안녕\n")
        _write(tmp_path / "messages_en.properties", "hello=hello\n")
        catalogs = load_catalog_set(tmp_path, "messages", ["en"])
        assert catalogs.default.get("hello") == "안녕"
        assert catalogs.catalog_for("en").get("hello") == "hello"

    def test_locale_without_file_is_skipped(self, tmp_path):
        _write(tmp_path / "messages.properties", "hello=안녕\n")
        catalogs = load_catalog_set(tmp_path, "messages", ["ko"])
        assert catalogs.locales == frozenset()

    def test_missing_default_gives_empty_catalog(self, tmp_path):
        _write(tmp_path / "messages_en.properties", "hello=hello\n")
        catalogs = load_catalog_set(tmp_path, "messages", ["en"])
        assert len(catalogs.default) == 0
        assert catalogs.catalog_for("en").get("hello") == "hello"

    def test_properties_preferred_over_yaml(self, tmp_path):
        _write(tmp_path / "messages.properties", "a=properties\n")
        _write(tmp_path / "messages.yaml", "a: yaml\n")
        assert load_catalog_set(tmp_path, "messages", []).default.get("a") == "properties"

    def test_locales_discovered_when_not_given(self, tmp_path):
        _write(tmp_path / "messages.properties", "a=default\n")
        _write(tmp_path / "messages_en.properties", "a=en\n")
        _write(tmp_path / "messages_pt-BR.json", '{"a": "pt"}')
        catalogs = load_catalog_set(tmp_path, "messages")
        assert catalogs.locales == frozenset({"en", "pt_BR"})
        assert catalogs.catalog_for("pt_BR").get("a") == "pt"

    def test_locale_spelling_normalised(self, tmp_path):
        _write(tmp_path / "messages.properties", "")
        _write(tmp_path / "messages_en_US.properties", "a=us\n")
        catalogs = load_catalog_set(tmp_path, "messages", ["en-us"])
        assert catalogs.catalog_for("en_US").get("a") == "us"

    def test_encoding(self, tmp_path):
        (tmp_path / "messages.properties").write_bytes("hello=안녕\n".encode("euc-kr"))
        catalogs = load_catalog_set(tmp_path, "messages", [], encoding="euc-kr")
        assert catalogs.default.get("hello") == "안녕"


class TestDiscoverLocales:
    def test_lists_sorted_locales(self, tmp_path):
        for name in ("messages.properties", "messages_ko.yaml", "messages_en.properties", "other_fr.properties"):
            _write(tmp_path / name, "")
        assert discover_locales(tmp_path, "messages") == ["en", "ko"]

    def test_ignores_unknown_extensions(self, tmp_path):
        _write(tmp_path / "messages_en.bak", "")
        assert discover_locales(tmp_path, "messages") == []

    def test_missing_directory(self, tmp_path):
        assert discover_locales(tmp_path / "nope", "messages") == []


class TestUnreadableCatalogs:
    def test_wrong_encoding_raises_load_error(self, tmp_path):
        path = tmp_path / "messages.properties"
        path.write_bytes(b"hello=\xb0\xa1\n")
        with pytest.raises(CatalogLoadError) as exc_info:
            load_catalog(path)
        assert exc_info.value.path == str(path)

    def test_wrong_encoding_in_catalog_set(self, tmp_path):
        (tmp_path / "messages.properties").write_bytes(b"hello=\xb0\xa1\n")
        with pytest.raises(CatalogLoadError):
            load_catalog_set(tmp_path, "messages", [])


class TestYamlLeavesAndKeys:
    def test_empty_value_defines_no_message(self, tmp_path):
        path = _write(tmp_path / "messages.yaml", "hello:\ngreeting:\n  bye:\n  hi: hi\n")
        catalog = load_catalog(path)
        assert "hello" not in catalog
        assert "greeting.bye" not in catalog
        assert catalog.get("greeting.hi") == "hi"

    def test_json_null_defines_no_message(self, tmp_path):
        path = _write(tmp_path / "messages.json", '{"a": null, "b": "x"}')
        assert load_catalog(path).codes() == frozenset({"b"})

    def test_boolean_key_rejected(self, tmp_path):
        path = _write(tmp_path / "messages.yaml", "yes: agreed\n")
        with pytest.raises(CatalogLoadError, match="not text"):
            load_catalog(path)

    def test_quoted_boolean_word_is_a_code(self, tmp_path):
        path = _write(tmp_path / "messages.yaml", "'yes': agreed\n")
        assert load_catalog(path).get("yes") == "agreed"

    def test_numeric_key_kept_as_text(self, tmp_path):
        path = _write(tmp_path / "messages.yaml", "errors:\n  404: Not found\n")
        assert load_catalog(path).get("errors.404") == "Not found"


class TestSiblingBundles:
    def test_non_locale_suffix_not_discovered(self, tmp_path):
        for name in ("messages.properties", "messages_errors.properties", "messages_en.properties"):
            _write(tmp_path / name, "")
        assert discover_locales(tmp_path, "messages") == ["en"]

    def test_sibling_bundle_not_loaded_as_locale(self, tmp_path):
        _write(tmp_path / "messages.properties", "hello=안녕\n")
        _write(tmp_path / "messages_errors.properties", "hello=boom\n")
        catalogs = load_catalog_set(tmp_path, "messages")
        assert catalogs.locales == frozenset()

    def test_numeric_region_and_variant_discovered(self, tmp_path):
        for name in ("messages_es-419.json", "messages_ja_JP_JP.properties"):
            _write(tmp_path / name, "{}" if name.endswith(".json") else "")
        assert discover_locales(tmp_path, "messages") == ["es_419", "ja_JP_JP"]
