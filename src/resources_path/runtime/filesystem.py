"""Filesystem probe used by every resolution step."""

from __future__ import annotations

import asyncio
import logging
import os

logger = logging.getLogger(__name__)


def is_directory(path: str) -> bool:
    """Return True if ``path`` is an existing directory.

    Permission and other OS errors count as "not there".
    """
    try:
        return os.path.isdir(path)
    except (OSError, ValueError) as exc:
        logger.debug("Directory check failed for %s: %s", path, exc)
        return False


async def directory_exists(path: str) -> bool:
    """Async wrapper around :func:`is_directory`, run off the event loop."""
    return await asyncio.to_thread(is_directory, path)
