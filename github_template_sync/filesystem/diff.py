"""Classifies template files as new, changed, or unchanged relative to a target checkout."""

import hashlib
import stat
from pathlib import Path
from typing import Iterable

import structlog

from github_template_sync.filesystem.models import FilesDiff
from github_template_sync.utils.constants import HASH_CHUNK_SIZE

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def normalize_template_path(template_file: Path | str, strip_prefix: str) -> str:
    """Map a template file path to its relative location inside a target checkout.

    Both the path and the prefix are converted to forward slashes first, so
    ``templates\\a\\b.txt`` and ``templates/a/b.txt`` map to the same result.

    Raises:
        ValueError: If the file does not live under the prefix.
    """
    file_path = str(template_file).replace("\\", "/")
    prefix = strip_prefix.replace("\\", "/")
    if prefix and not prefix.endswith("/"):
        prefix = f"{prefix}/"
    if not file_path.startswith(prefix):
        raise ValueError(f"Template file {file_path!r} is not located under {prefix!r}")
    relative_path = file_path[len(prefix) :]
    if not relative_path:
        raise ValueError(f"Template file {file_path!r} has no path below {prefix!r}")
    return relative_path


def file_digest(path: Path) -> str:
    """Return the SHA-256 hex digest of a file's content."""
    digest = hashlib.sha256()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(HASH_CHUNK_SIZE), b""):
            digest.update(chunk)
    return digest.hexdigest()


def files_have_same_content(first: Path, second: Path) -> bool:
    """Compare two files byte for byte, using their sizes first and SHA-256 digests second."""
    if first.stat().st_size != second.stat().st_size:
        return False
    return file_digest(first) == file_digest(second)


def compute_files_diff(template_files: Iterable[Path | str], target_root: Path | str, strip_prefix: str) -> FilesDiff:
    """Classify each template file relative to the corresponding path in a target checkout.

    Args:
        template_files: Template file paths, typically from ``enumerate_files``.
        target_root: Root of the target repository's working tree.
        strip_prefix: Template root prefix removed from each file path.

    Returns:
        A FilesDiff partitioning every template file into new, changed, or unchanged.

    Raises:
        ValueError: If a template file does not live under ``strip_prefix``.
        OSError: If a template or target file cannot be stat'ed or read for any
            reason other than the target being absent.
    """
    target_root_path = Path(target_root)
    new_files: list[str] = []
    changed_files: list[str] = []
    unchanged_files: list[str] = []

    for template_file in template_files:
        template_path = Path(template_file)
        if stat.S_ISDIR(template_path.stat().st_mode):
            logger.debug("Skipping directory in template file set", template_file=str(template_path))
            continue

        relative_path = normalize_template_path(template_file, strip_prefix)

        target_path = target_root_path.joinpath(*relative_path.split("/"))
        try:
            target_stat = target_path.stat()
        except FileNotFoundError:
            new_files.append(relative_path)
            continue

        if stat.S_ISDIR(target_stat.st_mode):
            raise IsADirectoryError(f"Target path exists as a directory but the template provides a file: {target_path}")

        if files_have_same_content(template_path, target_path):
            unchanged_files.append(relative_path)
        else:
            changed_files.append(relative_path)

    logger.debug(
        "Computed files diff",
        target_root=str(target_root_path),
        new_files=new_files,
        changed_files=changed_files,
        unchanged_file_count=len(unchanged_files),
    )
    return FilesDiff(new_files=new_files, changed_files=changed_files, unchanged_files=unchanged_files)
