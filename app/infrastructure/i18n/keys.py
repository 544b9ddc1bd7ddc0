"""Helpers for keys as written in view templates.

Rails views may use lazy lookup: a key starting with ``.`` is relative to
the view it appears in, e.g. ``.title`` in ``app/views/users/show.html.haml``
means ``users.show.title``.
"""

import re
from pathlib import PurePath
from typing import Optional, Union

VIEWS_DIR = ("app", "views")

_VALID_KEY = re.compile(r"^[\w\-?!.]+$")


def is_valid_key(key: Optional[str]) -> bool:
    """Check whether a string looks like a translation key.

    Args:
        key: Candidate key text.

    Returns:
        True for non-empty keys made of word characters, ``-``, ``?``, ``!``
        and dots that contain at least one non-dot character.
    """
    if not key:
        return False
    return bool(_VALID_KEY.match(key)) and bool(key.strip("."))


def is_relative_key(key: str) -> bool:
    return key.startswith(".")


def view_key_prefix(file_path: Union[str, PurePath]) -> Optional[str]:
    """Derive the lazy-lookup prefix of a view file.

    Args:
        file_path: Path of the template.

    Returns:
        Dotted prefix (e.g. "users.form" for app/views/users/_form.html.erb),
        or None if the file is not inside an ``app/views`` directory.
    """
    parts = PurePath(file_path).parts
    for index in range(len(parts) - len(VIEWS_DIR), -1, -1):
        if tuple(parts[index : index + len(VIEWS_DIR)]) == VIEWS_DIR:
            view_parts = list(parts[index + len(VIEWS_DIR) :])
            break
    else:
        return None

    if not view_parts:
        return None

    # "_form.html.haml" -> "form"
    template = view_parts[-1].split(".")[0].lstrip("_")
    segments = view_parts[:-1] + [template]
    return ".".join(segment for segment in segments if segment)


def make_absolute_key(key: str, file_path: Union[str, PurePath, None] = None) -> str:
    """Turn a lazy-lookup key into an absolute key.

    Args:
        key: Key as written in the template.
        file_path: Path of the template the key appears in.

    Returns:
        The absolute key. Absolute keys are returned unchanged; relative
        keys outside a views directory lose their leading dot.
    """
    if not is_relative_key(key):
        return key

    prefix = view_key_prefix(file_path) if file_path is not None else None
    if not prefix:
        return key.lstrip(".")
    return f"{prefix}{key}"
