"""Translation models for i18n system.

Defines the translation tree node types. A node is either a leaf holding a
translated string or a branch mapping key segments to further nodes.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union

import structlog

logger = structlog.get_logger().bind(component="i18n.models")


@dataclass(frozen=True)
class TranslationLeaf:
    """Terminal node of the translation tree.

    Attributes:
        value: Translated text.
    """

    value: str

    def to_dict(self) -> str:
        return self.value


@dataclass
class TranslationBranch:
    """Non-terminal node of the translation tree.

    Children keep insertion order, which is the order keys were first
    contributed. The first locale registered under a root is therefore the
    first child of that root's branch.

    Attributes:
        children: Mapping of key segment to child node.
    """

    children: Dict[str, "TranslationNode"] = field(default_factory=dict)

    def get(self, segment: str) -> Optional["TranslationNode"]:
        """Return the child for a key segment, or None if absent."""
        return self.children.get(segment)

    def keys(self) -> list:
        return list(self.children.keys())

    def to_dict(self) -> Dict[str, Any]:
        """Return the plain nested-dict view of this branch.

        Returns:
            Nested dict with strings at the leaves.
        """
        return {key: child.to_dict() for key, child in self.children.items()}

    def __len__(self) -> int:
        return len(self.children)

    def __contains__(self, segment: object) -> bool:
        return segment in self.children


TranslationNode = Union[TranslationLeaf, TranslationBranch]


def build_node(raw: Any, path: str = "") -> Optional[TranslationNode]:
    """Convert parsed YAML data into translation nodes.

    Strings become leaves and mappings become branches. Any other value
    (numbers, booleans, lists, None) is an invalid contribution: it is dropped
    and a warning is logged. Mapping keys are coerced with str() because YAML
    parses keys such as ``1`` or ``yes`` into non-string values.

    Args:
        raw: Parsed value (typically the result of yaml.safe_load).
        path: Dotted path of the value, for logging.

    Returns:
        TranslationNode, or None if the value is not a valid contribution.
    """
    if isinstance(raw, TranslationLeaf):
        return raw

    if isinstance(raw, TranslationBranch):
        return copy_node(raw)

    if isinstance(raw, str):
        return TranslationLeaf(raw)

    if isinstance(raw, dict):
        branch = TranslationBranch()
        for key, value in raw.items():
            segment = str(key)
            child_path = f"{path}.{segment}" if path else segment
            child = build_node(value, child_path)
            if child is not None:
                branch.children[segment] = child
        return branch

    logger.warning(
        "invalid_translation_value",
        path=path,
        value_type=type(raw).__name__,
    )
    return None


def copy_node(node: TranslationNode) -> TranslationNode:
    """Deep copy a node so that the store never aliases caller data."""
    if isinstance(node, TranslationLeaf):
        return node
    return TranslationBranch(
        children={key: copy_node(child) for key, child in node.children.items()}
    )
