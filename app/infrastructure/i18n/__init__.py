"""i18n system - translation key resolution across workspace roots.

Merges the locale trees of several workspace roots into one tree, keeps a
flat lookup map of fully-qualified keys, detects each root's default locale
and resolves dotted keys to text.

Main components:
- models: TranslationLeaf, TranslationBranch, build_node
- tree: TranslationTreeStore
- lookup: generate_lookup_map
- resolvers: DefaultLocaleDetector
- translator: Translator (key resolution)
- loader: YAMLTranslationLoader
- keys: lazy-lookup key helpers
- service: I18nService facade
"""

from infrastructure.i18n.keys import is_valid_key, make_absolute_key
from infrastructure.i18n.loader import YAMLTranslationLoader
from infrastructure.i18n.lookup import generate_lookup_map
from infrastructure.i18n.models import (
    TranslationBranch,
    TranslationLeaf,
    TranslationNode,
    build_node,
)
from infrastructure.i18n.resolvers import DefaultLocaleDetector
from infrastructure.i18n.service import I18nService
from infrastructure.i18n.translator import Translator, format_candidates
from infrastructure.i18n.tree import TranslationTreeStore

__all__ = [
    "TranslationLeaf",
    "TranslationBranch",
    "TranslationNode",
    "build_node",
    "TranslationTreeStore",
    "generate_lookup_map",
    "DefaultLocaleDetector",
    "Translator",
    "format_candidates",
    "YAMLTranslationLoader",
    "is_valid_key",
    "make_absolute_key",
    "I18nService",
]
