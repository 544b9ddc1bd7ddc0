"""Tests for infrastructure.i18n.loader module."""

import pytest

from infrastructure.i18n import YAMLTranslationLoader
from tests.factories.i18n import write_locale_file


@pytest.mark.unit
class TestYAMLTranslationLoader:
    """Tests for YAMLTranslationLoader."""

    def test_loader_initialization(self, shop_root):
        """YAMLTranslationLoader defaults the root id to the directory name."""
        loader = YAMLTranslationLoader(shop_root)
        assert loader.root_dir == shop_root
        assert loader.root_id == "shop"
        assert loader.locale_glob == "config/locales/**/*.yml"

    def test_loader_explicit_root_id(self, shop_root):
        loader = YAMLTranslationLoader(shop_root, root_id="storefront")
        assert loader.root_id == "storefront"

    def test_loader_initialization_nonexistent_directory(self, tmp_path):
        """YAMLTranslationLoader raises ValueError for missing directory."""
        with pytest.raises(ValueError):
            YAMLTranslationLoader(tmp_path / "nonexistent")

    def test_find_files_recursive_and_sorted(self, shop_root):
        loader = YAMLTranslationLoader(shop_root)
        files = [
            path.relative_to(shop_root / "config" / "locales").as_posix()
            for path in loader.find_files()
        ]
        assert files == ["en.yml", "fr.yml", "models/user.en.yml"]

    def test_find_files_custom_glob(self, shop_root):
        loader = YAMLTranslationLoader(shop_root, locale_glob="config/locales/*.yml")
        assert [path.name for path in loader.find_files()] == ["en.yml", "fr.yml"]

    def test_load_file(self, shop_root):
        loader = YAMLTranslationLoader(shop_root)
        data = loader.load_file(shop_root / "config" / "locales" / "en.yml")
        assert data["en"]["users"]["show"]["title"] == "Profile (en)"

    def test_load_file_invalid_yaml(self, shop_root):
        path = shop_root / "config" / "locales" / "broken.yml"
        path.write_text("en:\n  key: [unclosed\n", encoding="utf-8")
        loader = YAMLTranslationLoader(shop_root)
        assert loader.load_file(path) is None

    def test_load_file_empty(self, shop_root):
        path = shop_root / "config" / "locales" / "empty.yml"
        path.write_text("", encoding="utf-8")
        loader = YAMLTranslationLoader(shop_root)
        assert loader.load_file(path) is None

    def test_load_file_not_a_mapping(self, shop_root):
        path = write_locale_file(shop_root, "config/locales/list.yml", ["a", "b"])
        loader = YAMLTranslationLoader(shop_root)
        assert loader.load_file(path) is None

    def test_load_file_missing(self, shop_root):
        loader = YAMLTranslationLoader(shop_root)
        assert loader.load_file(shop_root / "config" / "locales" / "nope.yml") is None

    def test_load_all_yields_contributions_under_root(self, shop_root):
        loader = YAMLTranslationLoader(shop_root)
        contributions = list(loader.load_all())

        assert [root_id for root_id, _ in contributions] == ["shop", "shop", "shop"]
        assert list(contributions[0][1]) == ["en"]
        assert list(contributions[1][1]) == ["fr"]
        assert contributions[2][1] == {
            "en": {"activerecord": {"models": {"user": "User"}}}
        }

    def test_load_all_skips_broken_files(self, shop_root):
        (shop_root / "config" / "locales" / "broken.yml").write_text(
            "en: [unclosed\n", encoding="utf-8"
        )
        loader = YAMLTranslationLoader(shop_root)
        assert len(list(loader.load_all())) == 3

    def test_owns(self, shop_root, admin_root):
        loader = YAMLTranslationLoader(shop_root)
        assert loader.owns(shop_root / "config" / "locales" / "en.yml")
        assert loader.owns(shop_root / "app" / "views" / "users" / "show.html.erb")
        assert not loader.owns(admin_root / "config" / "locales" / "de.yml")

    def test_read_root_config(self, shop_root):
        loader = YAMLTranslationLoader(shop_root)
        assert "config.i18n.default_locale = :fr" in loader.read_root_config()

    def test_read_root_config_joins_files(self, shop_root):
        initializer = shop_root / "config" / "initializers" / "locale.rb"
        initializer.parent.mkdir(parents=True)
        initializer.write_text("I18n.available_locales = [:en, :fr]", encoding="utf-8")

        text = YAMLTranslationLoader(shop_root).read_root_config()

        assert text.index("default_locale") < text.index("available_locales")

    def test_read_root_config_missing(self, admin_root):
        assert YAMLTranslationLoader(admin_root).read_root_config() is None
