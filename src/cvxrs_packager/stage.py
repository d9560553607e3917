"""Filesystem steps that assemble the distribution directory."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from .errors import FilesystemFailure


def ensure_dir(path: Path) -> None:
    """Create `path` and its parents; an existing directory is fine."""
    try:
        Path(path).mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FilesystemFailure("create directory", path, e) from e


def copy_file(src: Path, dest: Path) -> None:
    """Copy a single file, replacing whatever is at `dest`."""
    logging.info(f"Copying {src} -> {dest}")
    try:
        shutil.copy2(src, dest)
    except OSError as e:
        raise FilesystemFailure("copy", dest, e, source=src) from e


def copy_tree(src: Path, dest: Path) -> None:
    """Recursively copy `src` into `dest`, overwriting files that already exist."""
    logging.info(f"Copying {src}/ -> {dest}/")
    try:
        shutil.copytree(src, dest, dirs_exist_ok=True)
    except OSError as e:
        # includes shutil.Error, which collects per-file failures
        raise FilesystemFailure("copy", src, e) from e
