"""Path helpers: normalization, base directory and upward search."""

from __future__ import annotations

import os
import sys
from collections.abc import Awaitable, Callable

from resources_path.runtime.filesystem import directory_exists

ExistsCheck = Callable[[str], Awaitable[bool]]

_SEPARATORS = os.sep + (os.altsep or "")


def normalize_dir(path: str) -> str:
    """Return ``path`` fully qualified with trailing separators removed.

    Symlinks are left alone. A filesystem root keeps its separator so the
    result is still an absolute path.
    """
    full = os.path.abspath(path)
    if os.path.dirname(full) == full:
        return full
    return full.rstrip(_SEPARATORS)


def process_base_directory() -> str:
    """Directory the running application was launched from.

    Frozen bundles use the executable's directory, scripts use the directory
    of ``__main__``; interactive sessions fall back to the working directory.
    """
    if getattr(sys, "frozen", False):
        return normalize_dir(os.path.dirname(sys.executable))

    main = sys.modules.get("__main__")
    main_file = getattr(main, "__file__", None)
    if main_file:
        return normalize_dir(os.path.dirname(os.path.abspath(main_file)))

    return normalize_dir(os.getcwd())


async def find_up(
    start_dir: str,
    target_name: str,
    bound: str | None = None,
    exists: ExistsCheck = directory_exists,
) -> str | None:
    """Walk up from ``start_dir`` looking for a ``target_name`` child directory.

    The nearest ancestor wins. When ``bound`` is given the walk stops after
    checking the bound directory's own child; the comparison is
    case-insensitive.
    """
    current = normalize_dir(start_dir)
    stop = normalize_dir(bound).casefold() if bound is not None else None

    while True:
        candidate = os.path.join(current, target_name)
        if await exists(candidate):
            return candidate

        if stop is not None and current.casefold() == stop:
            return None

        parent = os.path.dirname(current)
        if parent == current:
            return None

        current = normalize_dir(parent)
