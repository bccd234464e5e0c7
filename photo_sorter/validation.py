"""
Checks that must pass before any file is touched.
"""
import logging
from pathlib import Path

from .exceptions import SetupError


def _is_empty(folder: Path) -> bool:
    return next(folder.iterdir(), None) is None


def validate_source(src_root: Path):
    if not src_root.exists():
        raise SetupError(f"Source directory does not exist: {src_root}")
    if not src_root.is_dir():
        raise SetupError(f"Source is not a directory: {src_root}")
    try:
        if _is_empty(src_root):
            raise SetupError(f"Source directory is empty: {src_root}")
    except OSError as e:
        raise SetupError(f"Cannot read source directory {src_root}: {e}") from e


def prepare_target(dest_root: Path):
    """The target must be an empty directory, or is created if missing."""
    if dest_root.exists():
        if not dest_root.is_dir():
            raise SetupError(f"Target is not a directory: {dest_root}")
        try:
            if not _is_empty(dest_root):
                raise SetupError(f"Target directory is not empty: {dest_root}")
        except OSError as e:
            raise SetupError(f"Cannot read target directory {dest_root}: {e}") from e
        return

    try:
        dest_root.mkdir(parents=True)
    except OSError as e:
        raise SetupError(
            f"Cannot create target directory {dest_root}, check the permissions: {e}"
        ) from e
    logging.info(f"Created target directory {dest_root}")


def validate(src_root: Path, dest_root: Path):
    validate_source(src_root)
    prepare_target(dest_root)
