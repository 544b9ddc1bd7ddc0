"""Translation tree store.

Owns the merged ``root -> locale -> nested keys -> text`` tree and the flat
lookup map derived from it.
"""

import threading
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Sequence

from infrastructure.i18n.lookup import generate_lookup_map
from infrastructure.i18n.models import (
    TranslationBranch,
    TranslationNode,
    build_node,
)
from infrastructure.logging import get_module_logger

logger = get_module_logger()

DEFAULT_FALLBACK_LOCALE = "en"


def merge_nodes(existing: TranslationBranch, incoming: TranslationBranch) -> None:
    """Deep-merge ``incoming`` into ``existing`` in place.

    Branches present on both sides are merged recursively. Anything else
    present in ``incoming`` replaces what ``existing`` holds at that key
    (last write wins, including leaf/branch conflicts). Keys only present
    in ``existing`` are left untouched, so a merge never deletes.

    Args:
        existing: Branch owned by the store.
        incoming: Freshly built branch; its nodes are adopted, not copied.
    """
    for segment, node in incoming.children.items():
        current = existing.children.get(segment)
        if isinstance(current, TranslationBranch) and isinstance(
            node, TranslationBranch
        ):
            merge_nodes(current, node)
        else:
            existing.children[segment] = node


class TranslationTreeStore:
    """Merged translation tree for all workspace roots.

    Every merge regenerates the lookup map. Merge and regeneration run as one
    critical section; the new map is built before it replaces the old one.
    Keys removed from a re-loaded file are never pruned: they stay until
    reset() is called.

    Attributes:
        fallback_locale: Locale returned by get_first_locale() for a root
            without locales.
    """

    def __init__(self, fallback_locale: str = DEFAULT_FALLBACK_LOCALE):
        self.fallback_locale = fallback_locale
        self._tree = TranslationBranch()
        self._lookup_map: Dict[str, str] = {}
        self._lock = threading.RLock()

    def reset(self) -> None:
        """Clear all merged state."""
        with self._lock:
            self._tree = TranslationBranch()
            self._lookup_map = {}
        logger.info("translation_tree_reset")

    def merge(self, root_id: str, subtree: Any) -> bool:
        """Deep-merge a contribution under a workspace root.

        Args:
            root_id: Workspace root identifier.
            subtree: Parsed mapping (``locale -> nested keys``) or a
                TranslationBranch.

        Returns:
            True if the contribution was merged, False if it was dropped.
        """
        node = build_node(subtree, root_id)
        if not isinstance(node, TranslationBranch):
            logger.warning(
                "invalid_translation_contribution",
                root_id=root_id,
                value_type=type(subtree).__name__,
            )
            return False

        with self._lock:
            merge_nodes(self._tree, TranslationBranch(children={root_id: node}))
            self._lookup_map = generate_lookup_map(self._tree)

        logger.debug(
            "translations_merged",
            root_id=root_id,
            locale_count=len(node),
            lookup_size=len(self._lookup_map),
        )
        return True

    def get_workspace_root_ids(self) -> List[str]:
        """Return root identifiers in the order they were first registered."""
        return self._tree.keys()

    def has_root(self, root_id: str) -> bool:
        return root_id in self._tree

    def get_locales(self, root_id: str) -> List[str]:
        """Return the locales registered under a root, in registration order."""
        root = self._tree.get(root_id)
        if not isinstance(root, TranslationBranch):
            return []
        return root.keys()

    def has_locale(self, root_id: str, locale: str) -> bool:
        """Check whether ``root_id.locale`` exists in the tree.

        Args:
            root_id: Workspace root identifier.
            locale: Locale identifier.

        Returns:
            True if the locale key exists under the root, False otherwise.
        """
        root = self._tree.get(root_id)
        return isinstance(root, TranslationBranch) and locale in root

    def get_first_locale(self, root_id: str) -> str:
        """Return the first locale registered under a root.

        Args:
            root_id: Workspace root identifier.

        Returns:
            First locale key, or the fallback locale if the root has none.
        """
        locales = self.get_locales(root_id)
        if locales:
            return locales[0]
        return self.fallback_locale

    def lookup_key(self, full_key: str) -> Optional[str]:
        """Fast path: exact lookup of a fully-qualified key."""
        return self._lookup_map.get(full_key)

    def get_node(self, segments: Sequence[str]) -> Optional[TranslationNode]:
        """Fallback path: walk the tree segment by segment.

        Args:
            segments: Key segments starting with the root identifier.

        Returns:
            The node at the end of the path, or None as soon as a link is
            missing or a leaf is reached before the path ends.
        """
        node: Optional[TranslationNode] = self._tree
        for segment in segments:
            if not isinstance(node, TranslationBranch):
                return None
            node = node.get(segment)
            if node is None:
                return None
        return node

    def get_keys_starting_with(self, prefix: str) -> List[str]:
        """Return fully-qualified lookup keys beginning with ``prefix``."""
        return [key for key in self._lookup_map if key.startswith(prefix)]

    @property
    def lookup_map(self) -> Mapping[str, str]:
        """Read-only view of the current lookup map."""
        return MappingProxyType(self._lookup_map)

    def to_dict(self) -> Dict[str, Any]:
        return self._tree.to_dict()
