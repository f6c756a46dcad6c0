"""Writes new and changed template files onto a target checkout's working tree."""

import shutil
from pathlib import Path
from typing import Sequence

import structlog

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def _resolve(root: Path, relative_path: str) -> Path:
    return root.joinpath(*relative_path.split("/"))


def materialize_files(
    template_dir: Path | str,
    target_root: Path | str,
    new_files: Sequence[str],
    changed_files: Sequence[str],
) -> None:
    """Copy new and changed template files into the target working tree.

    New files get their missing parent directories created. Changed files are
    overwritten in place. The first failure is raised as is; files written
    before it are left behind, so the caller must not push a tree that failed
    to materialize.

    Args:
        template_dir: Template root directory.
        target_root: Root of the target repository's working tree.
        new_files: Relative paths, with forward slashes, absent from the target.
        changed_files: Relative paths, with forward slashes, whose content differs in the target.

    Raises:
        OSError: If a source file cannot be read or a destination cannot be written.
    """
    template_root = Path(template_dir)
    target_root_path = Path(target_root)

    for relative_path in new_files:
        destination = _resolve(target_root_path, relative_path)
        destination.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(_resolve(template_root, relative_path), destination)
        logger.debug("Added file from template", file=relative_path, destination=str(destination))

    for relative_path in changed_files:
        destination = _resolve(target_root_path, relative_path)
        shutil.copyfile(_resolve(template_root, relative_path), destination)
        logger.debug("Updated file from template", file=relative_path, destination=str(destination))

    logger.info(
        "Materialized template files",
        target_root=str(target_root_path),
        new_file_count=len(new_files),
        changed_file_count=len(changed_files),
    )
