"""Fixtures for server integration tests."""

import pytest

from infrastructure.configuration import I18nSettings, Settings


@pytest.fixture
def workspace_settings(shop_root, admin_root):
    """Settings pointing at the shop and admin workspace roots."""
    return Settings(
        GIT_SHA="abc123",
        i18n=I18nSettings(I18N_WORKSPACE_ROOTS=[str(shop_root), str(admin_root)]),
    )
