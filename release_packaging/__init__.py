"""Release packaging utilities for cross-compiled logstasher binaries."""

from importlib.metadata import PackageNotFoundError, version

from .build import Command, TargetResult, build_release, build_target
from .build_config import DEFAULT_TARGETS, ArchiveKind, BuildTarget, ReleaseConfig

try:
    __version__ = version("logstasher-release")
except PackageNotFoundError:  # pragma: no cover - package metadata absent in dev
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "build_release",
    "build_target",
    "Command",
    "TargetResult",
    "ArchiveKind",
    "BuildTarget",
    "ReleaseConfig",
    "DEFAULT_TARGETS",
]
