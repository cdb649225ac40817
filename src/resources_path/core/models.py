from __future__ import annotations

import enum

from pydantic import BaseModel


class ProbeName(str, enum.Enum):
    """Resolution steps, in the order they are tried."""

    OVERRIDE = "override"
    BUILD_OUTPUT = "build_output"
    MANAGED_HOST = "managed_host"
    CI = "ci"
    CONTAINER = "container"
    ANCESTOR_SEARCH = "ancestor_search"
    HOME_CONVENTION = "home_convention"
    FALLBACK = "fallback"


class Resolution(BaseModel, frozen=True):
    path: str
    probe: ProbeName
    exists: bool = True


class EnvironmentReport(BaseModel):
    is_azure_function: bool = False
    is_azure_app_service: bool = False
    is_github_action: bool = False
    is_container: bool = False
