"""Filesystem primitives for materializing a project tree."""
import shutil
from pathlib import Path

from create_standard.core.logger import get_logger

logger = get_logger(__name__)


def copy_entry(src: Path, dest: Path) -> None:
    """Copy a file or directory tree onto ``dest``.

    Directories are merged into any existing destination. A file replaces
    whatever is at ``dest``, including a directory.
    """
    if src.is_dir():
        copy_tree(src, dest)
    else:
        if dest.is_dir() and not dest.is_symlink():
            shutil.rmtree(dest)
        shutil.copy2(src, dest)
        logger.debug(f"Copied {src} -> {dest}")


def copy_tree(src_dir: Path, dest_dir: Path) -> None:
    """Copy every child of ``src_dir`` into ``dest_dir``, creating it if needed."""
    dest_dir.mkdir(parents=True, exist_ok=True)
    for child in src_dir.iterdir():
        copy_entry(child, dest_dir / child.name)


def is_empty_dir(path: Path) -> bool:
    """Return True if the existing directory ``path`` has no entries."""
    return next(path.iterdir(), None) is None


def clear_dir(directory: Path) -> None:
    """Delete everything inside ``directory`` but keep the directory itself.

    A missing directory is left alone. Symlinks are removed, never followed.
    """
    if not directory.exists():
        return

    for entry in directory.iterdir():
        if entry.is_dir() and not entry.is_symlink():
            clear_dir(entry)
            entry.rmdir()
        else:
            entry.unlink()
    logger.debug(f"Emptied {directory}")
