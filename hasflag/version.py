"""Distribution version for hasflag."""

from __future__ import annotations

from importlib import metadata

__all__ = ["DISTRIBUTION", "__version__", "resolve_version"]

DISTRIBUTION = "hasflag"
_SOURCE_VERSION = "5.0.1"


def resolve_version(distribution: str = DISTRIBUTION) -> str:
    """Installed version of ``distribution``, or the source-tree version."""

    try:
        return metadata.version(distribution)
    except metadata.PackageNotFoundError:
        return _SOURCE_VERSION


__version__ = resolve_version()
