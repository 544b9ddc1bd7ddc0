import pytest

from tests.factories.i18n import (
    make_greeting_tree,
    make_store,
    make_translation_data,
    make_workspace_root,
)


@pytest.fixture
def greeting_store():
    """Store holding the greeting tree under the root "root"."""
    return make_store({"root": make_greeting_tree()})


@pytest.fixture
def shop_root(tmp_path):
    """Create a workspace root "shop" with en and fr files split by namespace.

    Returns a directory structure like:
    - shop/config/locales/en.yml
    - shop/config/locales/fr.yml
    - shop/config/locales/models/user.en.yml
    - shop/config/application.rb (default locale directive :fr)
    """
    return make_workspace_root(
        tmp_path,
        "shop",
        locale_files={
            "en.yml": make_translation_data("en"),
            "fr.yml": make_translation_data("fr"),
            "models/user.en.yml": {
                "en": {"activerecord": {"models": {"user": "User"}}}
            },
        },
        application_rb=(
            "module Shop\n"
            "  class Application < Rails::Application\n"
            "    config.i18n.default_locale = :fr\n"
            "  end\n"
            "end\n"
        ),
    )


@pytest.fixture
def admin_root(tmp_path):
    """Create a workspace root "admin" with only a German locale file."""
    return make_workspace_root(
        tmp_path,
        "admin",
        locale_files={"de.yml": {"de": {"hello": "Hallo"}}},
    )
