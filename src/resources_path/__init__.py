"""Locate the bundled ``Resources`` directory across dev, CI, containers and cloud hosts."""

from __future__ import annotations

from resources_path.core.models import EnvironmentReport, ProbeName, Resolution
from resources_path.core.resolver import (
    ResourcesPathResolver,
    get_default_resolver,
    get_resource_file_path,
    get_resources_dir,
)
from resources_path.runtime.environment import RuntimeEnvironment

__all__ = [
    "EnvironmentReport",
    "ProbeName",
    "Resolution",
    "ResourcesPathResolver",
    "RuntimeEnvironment",
    "get_default_resolver",
    "get_resource_file_path",
    "get_resources_dir",
]
