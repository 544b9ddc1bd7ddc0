"""Flat lookup map generation.

Derives a mapping of fully-qualified dotted key to leaf text from the
translation tree. The map is a cache: it is always rebuilt from scratch
from the tree and never patched incrementally.
"""

from typing import Dict, List

from infrastructure.i18n.models import TranslationBranch, TranslationLeaf

KEY_SEPARATOR = "."


def is_addressable(segment: str) -> bool:
    """Check whether a key segment can be reached by a dotted key.

    Args:
        segment: Key segment below the root level.

    Returns:
        False for empty segments and segments containing the separator.
    """
    return bool(segment) and KEY_SEPARATOR not in segment


def generate_lookup_map(tree: TranslationBranch) -> Dict[str, str]:
    """Flatten the translation tree into a dotted-key lookup map.

    Walks the tree depth-first and records every leaf under the dot-joined
    path from the tree root. Branches never become entries.

    Top-level keys are root identifiers and are taken verbatim. Below the
    root level, leaves under an empty segment or a segment containing ``.``
    are skipped: splitting their joined key would not lead back to them.
    Dotted root identifiers (e.g. a folder named "my.site") are the one
    exception: "my.site.en.hi" does not split back into its path, so such
    entries are only reachable through the map itself and through
    resolution, which never splits the root identifier.

    Args:
        tree: Tree whose top-level keys are root identifiers.

    Returns:
        Dict mapping fully-qualified key to leaf text.

    Example:
        tree = build_node({"shop": {"en": {"hello": "Hello"}}})
        generate_lookup_map(tree)  # {"shop.en.hello": "Hello"}
    """
    lookup_map: Dict[str, str] = {}
    for root_id, root_node in tree.children.items():
        _walk(root_node, [root_id], lookup_map)
    return lookup_map


def _walk(node, path: List[str], lookup_map: Dict[str, str]) -> None:
    if isinstance(node, TranslationLeaf):
        lookup_map[KEY_SEPARATOR.join(path)] = node.value
        return

    for segment, child in node.children.items():
        if not is_addressable(segment):
            continue
        path.append(segment)
        _walk(child, path, lookup_map)
        path.pop()
