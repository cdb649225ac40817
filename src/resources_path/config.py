"""Resolution settings: folder name and the environment variables consulted.

:func:`load_env_file` lets a ``.env`` file supply ``RESOURCES_DIR`` and
friends; the CLI calls it on startup, library users opt in.
"""

from __future__ import annotations

import logging
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)

FOLDER_NAME = "Resources"

# Highest-priority override: an explicit directory path.
OVERRIDE_ENV = "RESOURCES_DIR"

# CI checkout root; caps the upward search on GitHub Actions runners.
WORKSPACE_ENV = "GITHUB_WORKSPACE"

HOME_ENV = "HOME"

# Azure App Service / Functions deployment layout under $HOME.
MANAGED_HOST_SUBPATH = ("site", "wwwroot")


def load_env_file(path: Path | str | None = None) -> Path | None:
    """Load a ``.env`` file without overriding variables already set.

    With no ``path``, search upward from the working directory. Returns the
    file that was loaded, or None when there was nothing to load.
    """
    if path is None:
        found = find_dotenv(usecwd=True)
        if not found:
            logger.debug("No .env file found from %s", Path.cwd())
            return None
        env_path = Path(found)
    else:
        env_path = Path(path)

    loaded = load_dotenv(env_path, override=False)
    logger.debug("Loaded .env from %s (exists=%s)", env_path, env_path.exists())
    return env_path if loaded else None
