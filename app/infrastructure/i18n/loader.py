"""Translation loading for workspace roots.

Reads a root's YAML locale files and configuration text and hands them to
the tree store as ``(root_id, mapping)`` contributions.
"""

from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple

import yaml

import structlog

logger = structlog.get_logger()

DEFAULT_LOCALE_FILE_GLOB = "config/locales/**/*.yml"
DEFAULT_ROOT_CONFIG_FILES = ("config/application.rb", "config/initializers/locale.rb")


class YAMLTranslationLoader:
    """Loader for the YAML locale files of one workspace root.

    Expects Rails-style files whose top-level keys are locales:

        en:
          users:
            show:
              title: "Profile"

    Attributes:
        root_dir: Workspace root directory.
        root_id: Root identifier the contributions are merged under.
        locale_glob: Glob of locale files, relative to root_dir.
        config_files: Files searched for the default-locale directive.
    """

    def __init__(
        self,
        root_dir: Path,
        root_id: Optional[str] = None,
        locale_glob: str = DEFAULT_LOCALE_FILE_GLOB,
        config_files: Sequence[str] = DEFAULT_ROOT_CONFIG_FILES,
    ):
        """Initialize YAML translation loader.

        Args:
            root_dir: Workspace root directory.
            root_id: Root identifier; defaults to the directory name.
            locale_glob: Glob of locale files inside the root.
            config_files: Root-relative configuration files.

        Raises:
            ValueError: If root_dir does not exist.
        """
        self.root_dir = Path(root_dir)
        if not self.root_dir.is_dir():
            raise ValueError(f"Workspace root not found: {self.root_dir}")

        self.root_id = root_id or self.root_dir.resolve().name
        self.locale_glob = locale_glob
        self.config_files = tuple(config_files)

        logger.info(
            "initialized_yaml_loader",
            root_id=self.root_id,
            root_dir=str(self.root_dir),
            locale_glob=locale_glob,
        )

    def find_files(self) -> List[Path]:
        """List the root's locale files in a stable order."""
        return sorted(
            path for path in self.root_dir.glob(self.locale_glob) if path.is_file()
        )

    def owns(self, path: Path) -> bool:
        """Check whether a file lies inside this loader's root."""
        try:
            Path(path).resolve().relative_to(self.root_dir.resolve())
        except ValueError:
            return False
        return True

    def load_file(self, path: Path) -> Optional[Dict[str, Any]]:
        """Parse one locale file.

        Args:
            path: YAML file to parse.

        Returns:
            The parsed mapping, or None if the file cannot be read, is not
            valid YAML, or does not hold a mapping.
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error("yaml_parse_error", file=str(path), error=str(e))
            return None
        except (OSError, UnicodeDecodeError) as e:
            logger.error("locale_file_unreadable", file=str(path), error=str(e))
            return None

        if data is None:
            logger.info("empty_locale_file", file=str(path))
            return None

        if not isinstance(data, dict):
            logger.warning(
                "invalid_yaml_format",
                file=str(path),
                expected="dict",
                actual=type(data).__name__,
            )
            return None

        logger.debug("locale_file_loaded", file=str(path), locale_count=len(data))
        return data

    def load_all(self) -> Iterator[Tuple[str, Dict[str, Any]]]:
        """Yield a ``(root_id, mapping)`` contribution for every loadable file."""
        files = self.find_files()
        loaded = 0
        for path in files:
            data = self.load_file(path)
            if data is not None:
                loaded += 1
                yield self.root_id, data

        logger.info(
            "loaded_translations",
            root_id=self.root_id,
            file_count=len(files),
            loaded_count=loaded,
        )

    def read_root_config(self) -> Optional[str]:
        """Read the root's configuration files.

        Returns:
            Content of the existing configuration files joined by newlines,
            or None if none exists.
        """
        texts = []
        for relative in self.config_files:
            path = self.root_dir / relative
            if not path.is_file():
                continue
            try:
                texts.append(path.read_text(encoding="utf-8"))
            except (OSError, UnicodeDecodeError) as e:
                logger.warning("root_config_unreadable", file=str(path), error=str(e))

        if not texts:
            return None
        return "\n".join(texts)
