"""Runtime environment classifier.

Answers "where are we running?" for the resolver: Azure Functions, Azure App
Service, GitHub Actions, or a generic container. Everything is read from the
environment mapping and a handful of well-known marker files, both injectable
so tests never depend on the machine they run on.
"""

from __future__ import annotations

import asyncio
import logging
import os
from collections.abc import Mapping
from pathlib import Path

from resources_path.core.models import EnvironmentReport

logger = logging.getLogger(__name__)

_CONTAINER_CGROUP_MARKERS = ("docker", "kubepods", "containerd", "libpod", "lxc")


def _is_truthy(value: str | None) -> bool:
    return (value or "").strip().lower() in {"1", "true", "yes"}


class RuntimeEnvironment:
    """Environment signals, read lazily from ``environ`` and ``root``."""

    def __init__(self, environ: Mapping[str, str] | None = None, root: Path | str = "/"):
        self._environ = environ if environ is not None else os.environ
        self._root = Path(root)
        self._container: bool | None = None

    def getenv(self, name: str) -> str | None:
        """Return the variable's value, treating blank values as unset."""
        value = self._environ.get(name)
        if value is None or not value.strip():
            return None
        return value

    @property
    def is_azure_function(self) -> bool:
        return bool(
            self.getenv("FUNCTIONS_WORKER_RUNTIME")
            or self.getenv("AZURE_FUNCTIONS_ENVIRONMENT")
        )

    @property
    def is_azure_app_service(self) -> bool:
        # Functions also set WEBSITE_*; keep the two signals distinct.
        if self.is_azure_function:
            return False
        return bool(self.getenv("WEBSITE_SITE_NAME") and self.getenv("WEBSITE_INSTANCE_ID"))

    @property
    def is_github_action(self) -> bool:
        return _is_truthy(self.getenv("GITHUB_ACTIONS"))

    async def is_container(self) -> bool:
        """Detect a container runtime. The answer is memoized per instance."""
        if self._container is None:
            self._container = await asyncio.to_thread(self._detect_container)
        return self._container

    def _detect_container(self) -> bool:
        if _is_truthy(self.getenv("DOTNET_RUNNING_IN_CONTAINER")):
            return True
        if self.getenv("container") or self.getenv("KUBERNETES_SERVICE_HOST"):
            return True

        for marker in (".dockerenv", "run/.containerenv"):
            if (self._root / marker).exists():
                logger.debug("Container marker found: %s", self._root / marker)
                return True

        cgroup = self._root / "proc" / "1" / "cgroup"
        try:
            content = cgroup.read_text(encoding="utf-8", errors="replace")
        except OSError:
            return False
        found = any(marker in content for marker in _CONTAINER_CGROUP_MARKERS)
        logger.debug("cgroup container markers in %s: %s", cgroup, found)
        return found

    async def report(self) -> EnvironmentReport:
        return EnvironmentReport(
            is_azure_function=self.is_azure_function,
            is_azure_app_service=self.is_azure_app_service,
            is_github_action=self.is_github_action,
            is_container=await self.is_container(),
        )
