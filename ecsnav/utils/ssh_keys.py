"""SSH key path resolution."""

from __future__ import annotations

from pathlib import Path

from ecsnav.constants.defaults import SSH_KEY_DIR_DEFAULT


def resolve_key_path(location: str, key_dir: str = SSH_KEY_DIR_DEFAULT) -> str:
    """Resolve an SSH key option to a path.

    An existing path is returned as is (expanded); anything else is looked
    up by name inside ``key_dir``. Returns "" for an empty option.
    """
    if not location:
        return ""
    candidate = Path(location).expanduser()
    if candidate.exists():
        return str(candidate)
    return str(Path(key_dir).expanduser() / location)
