"""Enumerates the regular files under a template directory."""

import os
import stat
from pathlib import Path

import structlog

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def _raise_walk_error(error: OSError) -> None:
    raise error


def enumerate_files(root: Path | str) -> list[Path]:
    """Recursively list every regular file under a root directory.

    Directory symlinks are not followed. A symlink is accepted only when it
    resolves to a regular file. Any problem while walking aborts the whole
    enumeration, since an incomplete file list would silently under-sync.

    Args:
        root: Directory to enumerate.

    Returns:
        Paths of all regular files below ``root``, joined onto ``root`` and sorted lexically.

    Raises:
        FileNotFoundError: If the root does not exist.
        NotADirectoryError: If the root is not a directory.
        OSError: If a directory cannot be read or a symlink does not point at a regular file.
    """
    root_path = Path(root)
    if not root_path.exists():
        raise FileNotFoundError(f"Template directory not found: {root_path.absolute()}")
    if not root_path.is_dir():
        raise NotADirectoryError(f"Template path is not a directory: {root_path.absolute()}")

    files: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root_path, onerror=_raise_walk_error, followlinks=False):
        directory = Path(dirpath)
        # os.walk lists directory symlinks under dirnames without descending into them.
        for name in dirnames:
            candidate = directory / name
            if candidate.is_symlink():
                raise OSError(f"Refusing to enumerate symlinked directory: {candidate}")
        for name in filenames:
            candidate = directory / name
            # stat() follows symlinks; a dangling link raises FileNotFoundError here.
            mode = candidate.stat().st_mode
            if not stat.S_ISREG(mode):
                raise OSError(f"Template path is not a regular file: {candidate}")
            files.append(candidate)

    files.sort(key=lambda path: path.as_posix())
    logger.debug("Enumerated template files", root=str(root_path), file_count=len(files))
    return files
