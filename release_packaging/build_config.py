"""Release configuration dataclasses."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path
from typing import Iterable, List

from dotenv import load_dotenv


class ArchiveKind(str, Enum):
    ZIP = "zip"
    TAR_GZ = "tar.gz"

    @property
    def extension(self) -> str:
        return f".{self.value}"


@dataclass(frozen=True, slots=True)
class BuildTarget:
    """One cross-compiled release artifact."""

    operating_system: str
    architecture: str
    archive_kind: ArchiveKind
    suffix: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "archive_kind", ArchiveKind(self.archive_kind))

    @property
    def key(self) -> str:
        return self.suffix.lstrip("_")

    @property
    def is_windows(self) -> bool:
        return self.operating_system == "windows"

    def executable_name(self, project_name: str) -> str:
        return f"{project_name}.exe" if self.is_windows else project_name

    def archive_name(self, project_name: str) -> str:
        return f"{project_name}{self.suffix}{self.archive_kind.extension}"


DEFAULT_TARGETS: tuple[BuildTarget, ...] = (
    BuildTarget("darwin", "amd64", ArchiveKind.ZIP, "_osx"),
    BuildTarget("linux", "amd64", ArchiveKind.TAR_GZ, "_linux_amd64"),
    BuildTarget("windows", "amd64", ArchiveKind.ZIP, "_win"),
)

DEFAULT_PROJECT_NAME = "logstasher"
DEFAULT_OUTPUT_DIR = "release"


@dataclass(slots=True)
class ReleaseConfig:
    """Top-level configuration describing the release run."""

    project_name: str
    base_dir: Path
    output_dir: Path
    targets: List[BuildTarget] = field(default_factory=list)

    @classmethod
    def default(cls, base_dir: Path) -> "ReleaseConfig":
        return cls(
            project_name=DEFAULT_PROJECT_NAME,
            base_dir=base_dir,
            output_dir=base_dir / DEFAULT_OUTPUT_DIR,
            targets=list(DEFAULT_TARGETS),
        )

    @classmethod
    def from_env(cls, base_dir: Path) -> "ReleaseConfig":
        """Build the default configuration with environment overrides applied.

        A ``.env`` file in ``base_dir`` is loaded first without overriding
        variables already present in the process environment. Loaded values
        stay in ``os.environ`` for the rest of the process, so a stray
        ``RELEASE_OUTPUT_DIR`` or ``RELEASE_PROJECT_NAME`` there changes the
        archive paths.
        """

        load_dotenv(base_dir / ".env", override=False)
        config = cls.default(base_dir)

        project_name = os.getenv("RELEASE_PROJECT_NAME")
        if project_name:
            config.project_name = project_name

        output_dir = os.getenv("RELEASE_OUTPUT_DIR")
        if output_dir:
            config.output_dir = base_dir / Path(output_dir).expanduser()

        return config

    def select(self, keys: Iterable[str] | None) -> "ReleaseConfig":
        if not keys:
            return replace(self, targets=list(self.targets))
        wanted = set(keys)
        known = {target.key for target in self.targets}
        unknown = sorted(wanted - known)
        if unknown:
            raise ValueError(f"Unknown target {', '.join(unknown)}")
        return replace(self, targets=[target for target in self.targets if target.key in wanted])

    @property
    def target_keys(self) -> list[str]:
        return [target.key for target in self.targets]
