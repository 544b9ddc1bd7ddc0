"""Translation key resolution.

Resolves dotted keys against the translation tree: exact lookup-map match
first, then a walk through the tree. A key that stops at a branch yields
the leaf completions one level below it.
"""

from typing import List, Optional

from infrastructure.i18n.lookup import KEY_SEPARATOR
from infrastructure.i18n.models import TranslationBranch, TranslationLeaf
from infrastructure.i18n.resolvers import DefaultLocaleDetector
from infrastructure.i18n.tree import TranslationTreeStore
from infrastructure.logging import get_module_logger

logger = get_module_logger()


def make_key_parts(raw_key: str, locale: str, root_id: str) -> List[str]:
    """Compose the segments of a fully-qualified key.

    Args:
        raw_key: Dotted key as written in source (e.g. "users.show.title").
        locale: Locale identifier.
        root_id: Workspace root identifier.

    Returns:
        ``[root_id, locale, *segments]`` with empty segments removed.
    """
    parts = [root_id, locale] + raw_key.split(KEY_SEPARATOR)
    return [part for part in parts if part]


def format_candidates(branch: TranslationBranch) -> str:
    """Flatten a branch into ``key: text`` lines for display.

    Only children that are leaves are listed; a child that is itself a
    branch means more than the last key segment is missing, so it is
    skipped.

    Args:
        branch: Branch the key resolved to.

    Returns:
        Newline-joined candidate lines, or an empty string if no child is
        a leaf.
    """
    lines = [
        f"{key}: {child.value}"
        for key, child in branch.children.items()
        if isinstance(child, TranslationLeaf)
    ]
    return "\n".join(lines)


class Translator:
    """Resolves translation keys for a workspace root.

    Borrows the tree store and the default locale detector; holds no state
    of its own, so results only change when the store does.

    Attributes:
        store: Tree store providing the lookup map and the tree.
        detector: Detector supplying a root's default locale.
    """

    def __init__(
        self,
        store: TranslationTreeStore,
        detector: DefaultLocaleDetector,
    ):
        """Initialize Translator.

        Args:
            store: TranslationTreeStore to resolve against.
            detector: DefaultLocaleDetector used when no locale is given.
        """
        self.store = store
        self.detector = detector

    def resolve(
        self,
        raw_key: Optional[str],
        locale: Optional[str],
        root_id: str,
    ) -> Optional[str]:
        """Resolve a dotted key to text.

        Args:
            raw_key: Dotted key (e.g. "greeting.casual").
            locale: Locale to resolve in; the root's default locale if None.
            root_id: Workspace root identifier.

        Returns:
            The leaf text for a full key, the ``key: text`` candidate lines
            when the key stops at a branch (possibly an empty string), or
            None when there is nothing to resolve or the key is absent.
        """
        if raw_key is None or not raw_key.strip():
            return None

        if not self.store.has_root(root_id):
            logger.debug("unknown_workspace_root", key=raw_key, root_id=root_id)
            return None

        if not locale:
            locale = self.detector.get_default_locale_for_root(root_id)

        key_parts = make_key_parts(raw_key, locale, root_id)
        full_key = KEY_SEPARATOR.join(key_parts)

        simple_lookup_result = self.store.lookup_key(full_key)
        if simple_lookup_result is not None:
            logger.debug(
                "resolved_from_lookup_map",
                key=raw_key,
                full_key=full_key,
            )
            return simple_lookup_result

        node = self.store.get_node(key_parts)
        logger.debug(
            "resolved_from_tree",
            key=raw_key,
            full_key=full_key,
            found=node is not None,
        )
        if isinstance(node, TranslationLeaf):
            return node.value
        if isinstance(node, TranslationBranch):
            return format_candidates(node)
        return None

    def has_translation(
        self,
        raw_key: Optional[str],
        locale: Optional[str],
        root_id: str,
    ) -> bool:
        """Check whether a key resolves to usable text.

        An empty candidate list counts as not usable.
        """
        return bool(self.resolve(raw_key, locale, root_id))
