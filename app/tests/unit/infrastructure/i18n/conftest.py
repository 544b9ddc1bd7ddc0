"""Feature-level fixtures for i18n system tests.

Provides pre-wired stores, detectors and translators. Workspace roots on
disk (shop_root, admin_root) come from the top-level conftest.
"""

import pytest

from infrastructure.i18n import DefaultLocaleDetector, Translator
from tests.factories.i18n import make_store, make_translation_data


@pytest.fixture
def sample_store():
    """Store with two roots: "shop" (en, fr) and "admin" (de)."""
    shop = make_translation_data("en")
    shop.update(make_translation_data("fr"))
    return make_store({"shop": shop, "admin": {"de": {"hello": "Hallo"}}})


@pytest.fixture
def detector(sample_store):
    return DefaultLocaleDetector(sample_store)


@pytest.fixture
def translator(sample_store, detector):
    return Translator(sample_store, detector)
