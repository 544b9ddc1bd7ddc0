"""Default locale detection for workspace roots.

Determines which locale a root falls back to when a caller does not name
one: an explicit directive in the root's configuration text wins, then the
first locale registered in the root's tree, then the store's fallback
locale.
"""

import re
from typing import Dict, Iterable, Optional

import structlog
from infrastructure.i18n.tree import TranslationTreeStore

logger = structlog.get_logger().bind(component="i18n.resolver")

# Matches e.g. `config.i18n.default_locale = :de` or `I18n.default_locale = "pt-BR"`
DEFAULT_LOCALE_DIRECTIVE = re.compile(
    r"i18n\.default_locale\s*=\s*(?::[\"']?|[\"'])([A-Za-z]{2,8}(?:[-_][A-Za-z0-9]{1,8})*)",
    re.IGNORECASE,
)


def _strip_comment(line: str) -> str:
    """Cut a Ruby line at its first `#` outside a string literal."""
    quote = None
    for index, char in enumerate(line):
        if quote:
            if char == quote:
                quote = None
        elif char in "\"'":
            quote = char
        elif char == "#":
            return line[:index]
    return line


def find_default_locale_directive(config_text: Optional[str]) -> Optional[str]:
    """Search free-form configuration text for a default-locale directive.

    The search is best effort: comments (whole-line or trailing) are ignored and the
    first matching assignment wins. Anything unrecognisable yields None.

    Args:
        config_text: Configuration file content (e.g. config/application.rb).

    Returns:
        Locale identifier without quoting or symbol punctuation, or None.
    """
    if not config_text:
        return None

    for line in config_text.splitlines():
        stripped = _strip_comment(line).strip()
        if not stripped:
            continue
        match = DEFAULT_LOCALE_DIRECTIVE.search(stripped)
        if match:
            return match.group(1)

    return None


class DefaultLocaleDetector:
    """Detects and caches the default locale of every workspace root.

    Detection is side-effect free on the tree, so a root's record can be
    recomputed at any time. Records are cached until the next detection
    pass or invalidate().

    Attributes:
        store: Tree store consulted for registered locales.
    """

    def __init__(self, store: TranslationTreeStore):
        """Initialize default locale detector.

        Args:
            store: Tree store consulted for the first-registered locale.
        """
        self.store = store
        self._root_configs: Dict[str, str] = {}
        self._default_locales: Dict[str, str] = {}

    def set_root_config(self, root_id: str, config_text: Optional[str]) -> None:
        """Register (or clear) the configuration text of a root."""
        self._default_locales.pop(root_id, None)
        if config_text is None:
            self._root_configs.pop(root_id, None)
        else:
            self._root_configs[root_id] = config_text

    def detect_default_locale(
        self,
        root_id: str,
        root_config_text: Optional[str] = None,
    ) -> str:
        """Determine the default locale of a root.

        Resolution order:
        1. Directive in root_config_text (if present and recognisable)
        2. First locale registered under the root
        3. The store's fallback locale

        Args:
            root_id: Workspace root identifier.
            root_config_text: Free-form configuration text of the root.

        Returns:
            Locale identifier.
        """
        log = logger.bind(root_id=root_id)

        locale = find_default_locale_directive(root_config_text)
        if locale:
            if not self.store.has_locale(root_id, locale):
                log.warning("default_locale_has_no_translations", locale=locale)
            log.info("resolved_from_directive", locale=locale)
            return locale

        locale = self.store.get_first_locale(root_id)
        log.info("resolved_from_tree", locale=locale)
        return locale

    def detect_all(self, root_ids: Iterable[str]) -> Dict[str, str]:
        """Run a detection pass and replace the cached records.

        Args:
            root_ids: Roots to detect the default locale for.

        Returns:
            Dict mapping root identifier to its default locale.
        """
        self._default_locales = {
            root_id: self.detect_default_locale(
                root_id, self._root_configs.get(root_id)
            )
            for root_id in root_ids
        }
        logger.info("default_locales_detected", locales=self._default_locales)
        return dict(self._default_locales)

    def get_default_locale_for_root(self, root_id: str) -> str:
        """Return the cached default locale, detecting it on first access.

        Args:
            root_id: Workspace root identifier.

        Returns:
            Locale identifier.
        """
        locale = self._default_locales.get(root_id)
        if locale is None:
            locale = self.detect_default_locale(
                root_id, self._root_configs.get(root_id)
            )
            self._default_locales[root_id] = locale
        return locale

    def invalidate(self, root_id: Optional[str] = None) -> None:
        """Drop cached records so that the next access re-detects.

        Args:
            root_id: Root to invalidate, or None for every root.
        """
        if root_id is None:
            self._default_locales.clear()
        else:
            self._default_locales.pop(root_id, None)
