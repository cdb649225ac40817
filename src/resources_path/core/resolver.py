"""Resources directory resolution: single source of truth for bundled assets.

The resolver tries each convention in priority order and stops at the first
directory that exists:

1. ``RESOURCES_DIR`` override
2. ``<base dir>/Resources`` (build output)
3. ``$HOME/site/wwwroot/Resources`` on Azure Functions / App Service
4. nearest ``Resources`` above the working directory, bounded by
   ``GITHUB_WORKSPACE``, then ``$GITHUB_WORKSPACE/Resources`` (GitHub Actions)
5. ``<base dir>/Resources`` again inside containers
6. nearest ``Resources`` above the working directory, unbounded
7. ``$HOME/site/wwwroot/Resources`` anywhere
8. ``<base dir>/Resources`` even though it does not exist

The result is published once per resolver. Concurrent first callers each run
the chain; the first to publish wins and everyone returns the winner.
"""

from __future__ import annotations

import asyncio
import logging
import os
from collections.abc import Awaitable, Callable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from functools import lru_cache

from resources_path.config import (
    FOLDER_NAME,
    HOME_ENV,
    MANAGED_HOST_SUBPATH,
    OVERRIDE_ENV,
    WORKSPACE_ENV,
)
from resources_path.core.cache import AtomicSlot
from resources_path.core.models import ProbeName, Resolution
from resources_path.core.paths import (
    ExistsCheck,
    find_up,
    normalize_dir,
    process_base_directory,
)
from resources_path.runtime.environment import RuntimeEnvironment
from resources_path.runtime.filesystem import directory_exists

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Context:
    base_resources: str
    cwd: str


class ResourcesPathResolver:
    """Resolves and caches the absolute path of the ``Resources`` directory."""

    def __init__(
        self,
        environment: RuntimeEnvironment | None = None,
        exists: ExistsCheck = directory_exists,
        base_dir: str | None = None,
        cwd: str | None = None,
        folder_name: str = FOLDER_NAME,
    ):
        self._env = environment or RuntimeEnvironment()
        self._exists = exists
        self._base_dir = base_dir
        self._cwd = cwd
        self._folder_name = folder_name
        self._cache = AtomicSlot()
        self._probes: tuple[tuple[ProbeName, Callable[[_Context], Awaitable[str | None]]], ...] = (
            (ProbeName.OVERRIDE, self._probe_override),
            (ProbeName.BUILD_OUTPUT, self._probe_build_output),
            (ProbeName.MANAGED_HOST, self._probe_managed_host),
            (ProbeName.CI, self._probe_ci),
            (ProbeName.CONTAINER, self._probe_container),
            (ProbeName.ANCESTOR_SEARCH, self._probe_ancestor_search),
            (ProbeName.HOME_CONVENTION, self._probe_home_convention),
        )

    @property
    def environment(self) -> RuntimeEnvironment:
        """The environment classifier gating the probes."""
        return self._env

    @property
    def cached(self) -> str | None:
        """The published path, or None if nothing has resolved yet."""
        return self._cache.get()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def get(self) -> str:
        """Return the absolute path of the Resources directory.

        The path may not exist when no convention matched; see
        :meth:`resolve` for which probe produced it.
        """
        cached = self._cache.get()
        if cached is not None:
            return cached

        resolution = await self.resolve()
        if self._cache.try_set(resolution.path):
            return resolution.path

        winner = self._cache.get()
        logger.debug(
            "Another caller published %s first (ours was %s)", winner, resolution.path
        )
        return winner

    async def get_resource_file_path(self, file_name: str) -> str:
        """Absolute path to ``file_name`` under the Resources directory."""
        return os.path.join(await self.get(), file_name)

    def get_sync(self) -> str:
        """Blocking :meth:`get`; the fallback path may not exist.

        Inside a running event loop the resolution runs on a worker thread
        with its own loop, blocking the caller until it finishes.
        """
        cached = self._cache.get()
        if cached is not None:
            return cached
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            return asyncio.run(self.get())
        with ThreadPoolExecutor(max_workers=1) as pool:
            return pool.submit(lambda: asyncio.run(self.get())).result()

    def get_resource_file_path_sync(self, file_name: str) -> str:
        """Blocking :meth:`get_resource_file_path`; the file may not exist."""
        return os.path.join(self.get_sync(), file_name)

    async def resolve(self) -> Resolution:
        """Run the probe chain without touching the cache."""
        base_dir = self._base_dir if self._base_dir is not None else process_base_directory()
        ctx = _Context(
            base_resources=os.path.join(normalize_dir(base_dir), self._folder_name),
            cwd=self._cwd if self._cwd is not None else os.getcwd(),
        )

        for name, probe in self._probes:
            path = await probe(ctx)
            if path is not None:
                logger.debug("Resources directory found by %s probe: %s", name.value, path)
                return Resolution(path=path, probe=name)

        logger.debug("No Resources directory found; falling back to %s", ctx.base_resources)
        return Resolution(path=ctx.base_resources, probe=ProbeName.FALLBACK, exists=False)

    # ------------------------------------------------------------------
    # Probes, in priority order
    # ------------------------------------------------------------------

    async def _probe_override(self, ctx: _Context) -> str | None:
        override = self._env.getenv(OVERRIDE_ENV)
        if override and await self._exists(override):
            return normalize_dir(override)
        return None

    async def _probe_build_output(self, ctx: _Context) -> str | None:
        if await self._exists(ctx.base_resources):
            return ctx.base_resources
        return None

    async def _probe_managed_host(self, ctx: _Context) -> str | None:
        if not (self._env.is_azure_function or self._env.is_azure_app_service):
            return None
        return await self._probe_home_convention(ctx)

    async def _probe_ci(self, ctx: _Context) -> str | None:
        if not self._env.is_github_action:
            return None

        workspace = self._env.getenv(WORKSPACE_ENV)
        bound = None
        if workspace and await self._exists(workspace):
            bound = normalize_dir(workspace)

        found = await find_up(ctx.cwd, self._folder_name, bound, exists=self._exists)
        if found is not None:
            return found

        if bound is not None:
            candidate = os.path.join(bound, self._folder_name)
            if await self._exists(candidate):
                return candidate
        return None

    async def _probe_container(self, ctx: _Context) -> str | None:
        if not await self._env.is_container():
            return None
        return await self._probe_build_output(ctx)

    async def _probe_ancestor_search(self, ctx: _Context) -> str | None:
        return await find_up(ctx.cwd, self._folder_name, exists=self._exists)

    async def _probe_home_convention(self, ctx: _Context) -> str | None:
        home = self._env.getenv(HOME_ENV)
        if not home:
            return None
        candidate = os.path.join(home, *MANAGED_HOST_SUBPATH, self._folder_name)
        if await self._exists(candidate):
            return candidate
        return None


@lru_cache(maxsize=1)
def get_default_resolver() -> ResourcesPathResolver:
    """The process-wide resolver, reading the real environment."""
    return ResourcesPathResolver()


async def get_resources_dir() -> str:
    return await get_default_resolver().get()


async def get_resource_file_path(file_name: str) -> str:
    return await get_default_resolver().get_resource_file_path(file_name)
