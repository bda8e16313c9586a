"""
Runtime settings and build metadata.
"""

import os
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Mapping, Optional

from pydantic import BaseModel, Field, ValidationError

from simplefin_cli import __version__
from simplefin_cli.core.exceptions import ConfigurationError

DISTRIBUTION_NAME = "simplefin-cli"
DEFAULT_TIMEOUT = 30.0


class Settings(BaseModel):
    """Options for a single run, from CLI flags or SF_* environment variables."""

    url: str
    proxy: Optional[str] = None
    out: Optional[Path] = None
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    verbose: bool = False

    @classmethod
    def load(cls, **values: object) -> "Settings":
        """
        Build settings, turning validation failures into ConfigurationError.

        Empty strings (an exported but blank SF_PROXY, say) count as unset.
        """
        cleaned = {key: value for key, value in values.items() if value not in (None, "")}
        try:
            return cls(**cleaned)
        except ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
            )
            raise ConfigurationError(f"invalid settings: {problems}") from e


class BuildInfo(BaseModel):
    """Version, commit and build time, printed by `sf version`."""

    model_config = {"frozen": True}

    version: str = __version__
    commit: str = "none"
    build_time: str = "unknown"

    @classmethod
    def current(cls, environ: Optional[Mapping[str, str]] = None) -> "BuildInfo":
        """
        Collect build metadata for the running installation.

        The version comes from the installed distribution, falling back to
        the package's own version. Release builds inject the commit and
        build time through SF_BUILD_COMMIT and SF_BUILD_TIME.
        """
        environ = os.environ if environ is None else environ
        try:
            installed = version(DISTRIBUTION_NAME)
        except PackageNotFoundError:
            installed = __version__

        return cls(
            version=installed,
            commit=environ.get("SF_BUILD_COMMIT") or "none",
            build_time=environ.get("SF_BUILD_TIME") or "unknown",
        )


def format_version(build_info: BuildInfo) -> str:
    """Render build metadata the way `sf version` prints it."""
    return (
        f"Version: {build_info.version}\n"
        f"Commit: {build_info.commit}\n"
        f"Built at: {build_info.build_time}\n"
    )
