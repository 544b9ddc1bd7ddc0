"""Tests for infrastructure.i18n.lookup module."""

import pytest

from infrastructure.i18n.lookup import generate_lookup_map, is_addressable
from infrastructure.i18n.models import TranslationBranch, build_node


def _resolve_by_traversal(tree, key):
    node = tree
    for segment in key.split("."):
        node = node.get(segment)
    return node.value


@pytest.mark.unit
class TestGenerateLookupMap:
    """Tests for generate_lookup_map()."""

    def test_empty_tree(self):
        assert generate_lookup_map(TranslationBranch()) == {}

    def test_flattens_every_leaf(self):
        """Every leaf appears under its dot-joined path."""
        tree = build_node(
            {
                "root": {
                    "en": {
                        "greeting": {"formal": "Good day", "casual": "Hi"},
                        "bye": "Bye",
                    },
                    "fr": {"bye": "Au revoir"},
                }
            }
        )
        assert generate_lookup_map(tree) == {
            "root.en.greeting.formal": "Good day",
            "root.en.greeting.casual": "Hi",
            "root.en.bye": "Bye",
            "root.fr.bye": "Au revoir",
        }

    def test_branches_are_not_entries(self):
        tree = build_node({"root": {"en": {"greeting": {"casual": "Hi"}}}})
        lookup_map = generate_lookup_map(tree)
        assert "root.en.greeting" not in lookup_map
        assert "root.en" not in lookup_map

    def test_entries_match_tree_traversal(self):
        """Looking up any produced key matches traversing the tree."""
        tree = build_node(
            {
                "a": {"en": {"x": {"y": {"z": "deep"}}, "w": "shallow"}},
                "b": {"de": {"x": "B"}},
            }
        )
        for key, value in generate_lookup_map(tree).items():
            assert _resolve_by_traversal(tree, key) == value

    def test_deterministic(self):
        tree = build_node({"root": {"en": {"a": "A", "b": {"c": "C"}}}})
        assert generate_lookup_map(tree) == generate_lookup_map(tree)

    def test_dotted_root_identifier_is_kept(self):
        """Root identifiers are opaque and may contain dots."""
        tree = build_node({"my.site": {"en": {"hi": "Hi"}}})
        assert generate_lookup_map(tree) == {"my.site.en.hi": "Hi"}

    def test_unaddressable_segments_are_skipped(self):
        """Leaves under dotted or empty segments cannot be addressed."""
        tree = build_node(
            {"root": {"en": {"a.b": "dotted", "": {"x": "empty"}, "ok": "OK"}}}
        )
        assert generate_lookup_map(tree) == {"root.en.ok": "OK"}


@pytest.mark.unit
@pytest.mark.parametrize(
    "segment,expected",
    [("title", True), ("", False), ("a.b", False), ("with-dash", True)],
)
def test_is_addressable(segment, expected):
    assert is_addressable(segment) is expected
