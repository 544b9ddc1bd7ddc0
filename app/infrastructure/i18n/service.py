"""Translation lookup service.

Provides an explicitly constructed engine that owns the tree store, the
default locale detector and the translator for a set of workspace roots.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from infrastructure.i18n.keys import is_valid_key, make_absolute_key
from infrastructure.i18n.loader import YAMLTranslationLoader
from infrastructure.i18n.resolvers import DefaultLocaleDetector
from infrastructure.i18n.translator import Translator
from infrastructure.i18n.tree import DEFAULT_FALLBACK_LOCALE, TranslationTreeStore
from infrastructure.logging import bind_root_context, get_module_logger

logger = get_module_logger()


class I18nService:
    """Translation lookup engine for a set of workspace roots.

    Updates (load, reload_file, merge) must be serialized by the owner;
    lookups may run freely between updates.

    Usage:
        service = I18nService()
        service.register_root(Path("/src/shop"))
        service.load()

        service.resolve("users.show.title", None, "shop")
        service.resolve_for_file(".title", "/src/shop/app/views/users/show.html.haml")

    Attributes:
        store: Merged translation tree and lookup map.
        detector: Default locale detector.
        translator: Key resolution engine.
        loaders: Registered root loaders by root identifier.
    """

    def __init__(
        self,
        store: Optional[TranslationTreeStore] = None,
        detector: Optional[DefaultLocaleDetector] = None,
        translator: Optional[Translator] = None,
        fallback_locale: str = DEFAULT_FALLBACK_LOCALE,
    ):
        """Initialize translation lookup service.

        Args:
            store: Optional pre-built tree store.
            detector: Optional detector; must consult the same store.
            translator: Optional translator; must borrow the same store.
            fallback_locale: Fallback locale of a newly created store.
        """
        self.store = store or TranslationTreeStore(fallback_locale=fallback_locale)
        self.detector = detector or DefaultLocaleDetector(self.store)
        self.translator = translator or Translator(self.store, self.detector)
        self.loaders: Dict[str, YAMLTranslationLoader] = {}

    def register_root(
        self,
        root_dir: Union[str, Path],
        root_id: Optional[str] = None,
        **loader_options: Any,
    ) -> YAMLTranslationLoader:
        """Register a workspace root to be loaded by load().

        Args:
            root_dir: Workspace root directory.
            root_id: Root identifier; defaults to the directory name.
            **loader_options: Passed to YAMLTranslationLoader.

        Returns:
            The loader created for the root.

        Raises:
            ValueError: If root_dir does not exist.
        """
        loader = YAMLTranslationLoader(Path(root_dir), root_id=root_id, **loader_options)
        if loader.root_id in self.loaders:
            logger.warning("workspace_root_replaced", root_id=loader.root_id)
        self.loaders[loader.root_id] = loader
        return loader

    def load(self) -> Dict[str, str]:
        """Rebuild the tree from every registered root.

        Resets the store, merges every locale file, registers each root's
        configuration text and runs a default locale detection pass.

        Returns:
            Dict mapping root identifier to its detected default locale.
        """
        self.store.reset()
        for root_id, loader in self.loaders.items():
            with bind_root_context(root_id=root_id):
                for contribution_root, mapping in loader.load_all():
                    self.store.merge(contribution_root, mapping)
                self.detector.set_root_config(root_id, loader.read_root_config())

        locales = self.detector.detect_all(self.store.get_workspace_root_ids())
        logger.info(
            "translations_loaded",
            root_count=len(self.loaders),
            key_count=len(self.store.lookup_map),
        )
        return locales

    def reload_file(self, path: Union[str, Path]) -> bool:
        """Merge a changed locale file into the tree.

        Keys deleted from the file are not pruned; they remain until the
        next load().

        Args:
            path: Changed file.

        Returns:
            True if the file belongs to a registered root and was merged.
        """
        path = Path(path)
        loader = self._find_loader(path)
        if loader is None:
            logger.warning("locale_file_outside_roots", file=str(path))
            return False

        with bind_root_context(root_id=loader.root_id, trigger="file_changed"):
            mapping = loader.load_file(path)
            if mapping is None:
                return False
            return self.merge(loader.root_id, mapping)

    def merge(self, root_id: str, mapping: Any) -> bool:
        """Merge an already parsed contribution under a root.

        When the root's locale list changes, its cached default locale is
        dropped and re-detected on next access.
        """
        locales_before = self.store.get_locales(root_id)
        merged = self.store.merge(root_id, mapping)
        if merged and self.store.get_locales(root_id) != locales_before:
            self.detector.invalidate(root_id)
            logger.info("root_locales_changed", root_id=root_id)
        return merged

    def resolve(
        self,
        raw_key: Optional[str],
        locale: Optional[str],
        root_id: str,
    ) -> Optional[str]:
        """Resolve a dotted key; see Translator.resolve()."""
        return self.translator.resolve(raw_key, locale, root_id)

    def resolve_for_file(
        self,
        raw_key: Optional[str],
        file_path: Union[str, Path],
        locale: Optional[str] = None,
    ) -> Optional[str]:
        """Resolve a key as written in a template file.

        The root is the registered root containing the file, and lazy-lookup
        keys (".title") are made absolute from the template path.

        Args:
            raw_key: Key as written in the template.
            file_path: Template the key appears in.
            locale: Locale to resolve in; the root's default locale if None.

        Returns:
            Resolved text, or None.
        """
        if not is_valid_key(raw_key):
            return None

        loader = self._find_loader(Path(file_path))
        if loader is None:
            logger.debug("template_outside_roots", file=str(file_path))
            return None

        relative_path = Path(file_path).resolve().relative_to(loader.root_dir.resolve())
        key = make_absolute_key(raw_key, relative_path)
        return self.translator.resolve(key, locale, loader.root_id)

    def get_default_locale_for_root(self, root_id: str) -> str:
        return self.detector.get_default_locale_for_root(root_id)

    def get_workspace_root_ids(self) -> List[str]:
        return self.store.get_workspace_root_ids()

    def get_keys_starting_with(self, prefix: str) -> List[str]:
        return self.store.get_keys_starting_with(prefix)

    def _find_loader(self, path: Path) -> Optional[YAMLTranslationLoader]:
        # Nested roots: the deepest root containing the file wins
        owners = [loader for loader in self.loaders.values() if loader.owns(path)]
        if not owners:
            return None
        return max(owners, key=lambda loader: len(loader.root_dir.resolve().parts))
