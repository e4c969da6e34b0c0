"""Resolution of the command-line target file and repository root."""

from pathlib import Path
from typing import Optional, Tuple

import click

from ...core.config import ConfigManager, TestFinderConfig
from ...exceptions import PathOutsideRepositoryError, RepositoryRootNotFoundError
from ...services import absolute_path, find_repository_root


def load_config(ctx: click.Context) -> TestFinderConfig:
    """Configuration for the running command, loaded once per invocation."""
    obj = ctx.ensure_object(dict)
    if obj.get("config") is None:
        obj["config"] = ConfigManager(obj.get("config_file")).load_config()
    return obj["config"]


def resolve_target(path: Path, root: Optional[Path] = None) -> Tuple[Path, Path]:
    """Absolute active file and repository root for a command invocation.

    Symlinks are kept: a linked source file maps by the name it was opened as.

    Raises:
        RepositoryRootNotFoundError: no root given and none could be discovered
        PathOutsideRepositoryError: the file is not under the root
    """
    active_file = absolute_path(path)

    if root is not None:
        repo_root = absolute_path(root)
    else:
        repo_root = find_repository_root(active_file)
        if repo_root is None:
            raise RepositoryRootNotFoundError(active_file)

    if active_file == repo_root or repo_root not in active_file.parents:
        raise PathOutsideRepositoryError(active_file, repo_root)

    return active_file, repo_root
