"""Cross-compile and archive orchestration for release artifacts."""

from __future__ import annotations

import os
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Mapping

from loguru import logger

from .build_config import ArchiveKind, BuildTarget, ReleaseConfig


@dataclass(frozen=True, slots=True)
class Command:
    """An external invocation plus the environment variables it adds."""

    argv: List[str]
    env: Dict[str, str] = field(default_factory=dict)

    def __str__(self) -> str:
        prefix = [f"{name}={value}" for name, value in self.env.items()]
        return " ".join([*prefix, *self.argv])


@dataclass(frozen=True, slots=True)
class TargetResult:
    target: BuildTarget
    archive_path: Path
    compiled: bool
    archived: bool

    @property
    def success(self) -> bool:
        return self.compiled and self.archived


CommandRunner = Callable[[Command, Path], bool]

ARCHIVER_ARGS: Dict[ArchiveKind, List[str]] = {
    ArchiveKind.ZIP: ["zip"],
    ArchiveKind.TAR_GZ: ["tar", "cvzf"],
}


def compile_command(config: ReleaseConfig, target: BuildTarget) -> Command:
    executable = target.executable_name(config.project_name)
    return Command(
        argv=["go", "build", "-o", executable],
        env={"GOOS": target.operating_system, "GOARCH": target.architecture},
    )


def archive_command(config: ReleaseConfig, target: BuildTarget) -> Command:
    executable = target.executable_name(config.project_name)
    archive = _display_path(archive_path(config, target), config.base_dir)
    return Command(argv=[*ARCHIVER_ARGS[target.archive_kind], archive, executable])


def archive_path(config: ReleaseConfig, target: BuildTarget) -> Path:
    return config.output_dir / target.archive_name(config.project_name)


def run_command(command: Command, cwd: Path, base_env: Mapping[str, str] | None = None) -> bool:
    """Run ``command`` in ``cwd`` and report whether it exited cleanly.

    A command that cannot be started at all counts as a failure rather than
    raising.
    """

    env = {**(os.environ if base_env is None else base_env), **command.env}
    try:
        result = subprocess.run(command.argv, cwd=cwd, env=env, check=False)
    except OSError as exc:
        logger.error("Unable to start {}: {}", command.argv[0], exc)
        return False
    if result.returncode != 0:
        logger.debug("{} exited with status {}", command.argv[0], result.returncode)
    return result.returncode == 0


def prepare_output_dir(output_dir: Path) -> None:
    output_dir.mkdir(parents=True, exist_ok=True)


def build_target(
    config: ReleaseConfig,
    target: BuildTarget,
    runner: CommandRunner = run_command,
) -> TargetResult:
    build_cmd = compile_command(config, target)
    logger.info("Building: {}", build_cmd)
    compiled = runner(build_cmd, config.base_dir)
    _report(compiled)

    deploy_cmd = archive_command(config, target)
    logger.info("Deploying: {}", deploy_cmd)
    archived = runner(deploy_cmd, config.base_dir)
    _report(archived)

    return TargetResult(
        target=target,
        archive_path=archive_path(config, target),
        compiled=compiled,
        archived=archived,
    )


def build_release(config: ReleaseConfig, runner: CommandRunner = run_command) -> list[TargetResult]:
    prepare_output_dir(config.output_dir)
    return [build_target(config, target, runner) for target in config.targets]


def _report(succeeded: bool) -> None:
    if succeeded:
        logger.success("{}", succeeded)
    else:
        logger.error("{}", succeeded)


def _display_path(path: Path, base_dir: Path) -> str:
    try:
        return path.relative_to(base_dir).as_posix()
    except ValueError:
        return str(path)
