"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_greeting_tree,
    make_store,
    make_translation_data,
    write_locale_file,
    make_workspace_root,
)

__all__ = [
    "make_greeting_tree",
    "make_store",
    "make_translation_data",
    "write_locale_file",
    "make_workspace_root",
]
