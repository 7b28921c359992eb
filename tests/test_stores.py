"""Resource store tests."""

import pytest

from uistrings.errors import StoreUnavailableError
from uistrings.models import Locale
from uistrings.stores import DictResourceStore, YamlResourceStore


class TestDictResourceStore:
    """DictResourceStore unit tests."""

    def test_lookup_exact_locale_only(self):
        store = DictResourceStore({
            "": {"OutputType": "Output Type"},
            "fr": {"OutputType": "Type de sortie"},
        })

        assert store.lookup("OutputType", Locale.NEUTRAL) == "Output Type"
        assert store.lookup("OutputType", Locale("fr")) == "Type de sortie"
        assert store.lookup("OutputType", Locale("fr", "CA")) is None
        assert store.lookup("Exe", Locale.NEUTRAL) is None

    def test_tags_normalized(self):
        store = DictResourceStore({"fr_ca": {"Exe": "Application console"}})
        assert store.lookup("Exe", Locale("fr", "CA")) == "Application console"
        assert Locale("fr", "CA") in store

    def test_input_is_copied(self):
        """Test later edits to the source dicts are not visible."""
        table = {"Exe": "Console Application"}
        store = DictResourceStore({"": table})
        table["Exe"] = "changed"
        table["Library"] = "Class Library"

        assert store.lookup("Exe", Locale.NEUTRAL) == "Console Application"
        assert store.keys(Locale.NEUTRAL) == {"Exe"}

    def test_duplicate_locale_tags(self):
        """Test tags that normalize to the same locale are rejected."""
        with pytest.raises(ValueError, match="Duplicate"):
            DictResourceStore({
                "fr_ca": {"Exe": "Application console"},
                "fr-CA": {"Library": "Bibliothèque de classes"},
            })

    def test_values_must_be_strings(self):
        with pytest.raises(ValueError, match="WarningLevel"):
            DictResourceStore({"": {"WarningLevel": 4}})

    def test_empty_store(self):
        store = DictResourceStore()
        assert store.locales() == []
        assert store.keys(Locale.NEUTRAL) == set()


class TestYamlResourceStore:
    """YamlResourceStore unit tests."""

    def test_loads_bundle(self, bundle_dir):
        store = YamlResourceStore(bundle_dir)

        assert set(store.locales()) == {Locale.NEUTRAL, Locale("fr"), Locale("fr", "CA")}
        assert store.lookup("BraceMatchStatus", Locale.NEUTRAL) == "Matches: {0}"
        assert store.lookup("OutputType", Locale("fr")) == "Type de sortie"
        assert store.lookup("Exe", Locale("fr", "CA")) == "Application console"
        assert store.keys(Locale("fr")) == {"OutputType"}

    def test_ignores_unrelated_files(self, bundle_dir):
        (bundle_dir / "other.yaml").write_text("Exe: Other\n", encoding="utf-8")
        (bundle_dir / "ui_strings.txt").write_text("not yaml", encoding="utf-8")
        (bundle_dir / "ui_stringsx.de.yaml").write_text("Exe: Konsole\n", encoding="utf-8")

        store = YamlResourceStore(bundle_dir)
        assert len(store.locales()) == 3

    def test_yml_suffix(self, bundle_dir):
        (bundle_dir / "ui_strings.de.yml").write_text("Exe: Konsolenanwendung\n", encoding="utf-8")

        store = YamlResourceStore(bundle_dir)
        assert store.lookup("Exe", Locale("de")) == "Konsolenanwendung"

    def test_custom_base_name(self, tmp_path):
        (tmp_path / "compiler.yaml").write_text("MaxErrorsReached: too many errors\n", encoding="utf-8")

        store = YamlResourceStore(tmp_path, base_name="compiler")
        assert store.lookup("MaxErrorsReached", Locale.NEUTRAL) == "too many errors"

    def test_empty_locale_file(self, bundle_dir):
        (bundle_dir / "ui_strings.de.yaml").write_text("", encoding="utf-8")

        store = YamlResourceStore(bundle_dir)
        assert store.keys(Locale("de")) == set()

    def test_missing_directory(self, tmp_path):
        with pytest.raises(StoreUnavailableError) as exc_info:
            YamlResourceStore(tmp_path / "missing")
        assert exc_info.value.source == str(tmp_path / "missing")

    def test_missing_neutral_table(self, tmp_path):
        (tmp_path / "ui_strings.fr.yaml").write_text("Exe: Application\n", encoding="utf-8")

        with pytest.raises(StoreUnavailableError, match="Neutral table"):
            YamlResourceStore(tmp_path)

    def test_invalid_yaml(self, bundle_dir):
        (bundle_dir / "ui_strings.de.yaml").write_text("Exe: [unclosed\n", encoding="utf-8")

        with pytest.raises(StoreUnavailableError):
            YamlResourceStore(bundle_dir)

    def test_top_level_must_be_mapping(self, bundle_dir):
        (bundle_dir / "ui_strings.de.yaml").write_text("- Exe\n- Library\n", encoding="utf-8")

        with pytest.raises(StoreUnavailableError, match="mapping"):
            YamlResourceStore(bundle_dir)

    def test_values_must_be_strings(self, bundle_dir):
        (bundle_dir / "ui_strings.de.yaml").write_text("WarningLevel: 4\n", encoding="utf-8")

        with pytest.raises(StoreUnavailableError, match="WarningLevel"):
            YamlResourceStore(bundle_dir)

    def test_file_name_without_locale_is_skipped(self, bundle_dir):
        """Test stray bundle-prefixed files do not take the store down."""
        (bundle_dir / "ui_strings.not-a-locale!.yaml").write_text("Exe: x\n", encoding="utf-8")
        (bundle_dir / "ui_strings.backup-2024.yaml").write_text("Exe: old\n", encoding="utf-8")

        store = YamlResourceStore(bundle_dir)

        assert set(store.locales()) == {Locale.NEUTRAL, Locale("fr"), Locale("fr", "CA")}
        assert store.lookup("Exe", Locale.NEUTRAL) == "Console Application"

    def test_script_and_region_file_name(self, bundle_dir):
        (bundle_dir / "ui_strings.zh-Hant-TW.yaml").write_text("Exe: 主控台應用程式\n", encoding="utf-8")

        store = YamlResourceStore(bundle_dir)
        assert store.lookup("Exe", Locale("zh", "TW", "Hant")) == "主控台應用程式"

    def test_duplicate_locale_table(self, bundle_dir):
        (bundle_dir / "ui_strings.fr.yml").write_text("Exe: Application\n", encoding="utf-8")

        with pytest.raises(StoreUnavailableError, match="Duplicate"):
            YamlResourceStore(bundle_dir)
