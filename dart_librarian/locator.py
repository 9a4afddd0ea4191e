"""Find the ``lib`` directory a Dart source file belongs to."""

from __future__ import annotations

from pathlib import Path


def locate_lib_root(path: str | Path, lib_dir_name: str = "lib") -> Path | None:
    """Walk up from ``path`` to the nearest ancestor named ``lib_dir_name``.

    Only the path string is inspected; the directories need not exist.
    Returns None once the filesystem root is reached.
    """
    current = Path(path).parent
    while current != current.parent:
        if current.name == lib_dir_name:
            return current
        current = current.parent
    return None


def is_in_lib_folder(path: str | Path, lib_dir_name: str = "lib") -> bool:
    return locate_lib_root(path, lib_dir_name) is not None
