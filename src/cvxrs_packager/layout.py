"""Paths derived from the workspace root for a single packaging run."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .config import PackagerConfig

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


@dataclass(frozen=True)
class PackageLayout:
    """Where the build output lives and where the package is assembled."""

    workspace_root: Path
    target_dir: Path
    dist_dir: Path
    exe_source: Path
    exe_dest: Path
    examples_source: Path
    examples_dest: Path

    @classmethod
    def from_workspace(cls, workspace_root: Path, config: Optional[PackagerConfig] = None) -> "PackageLayout":
        config = config or PackagerConfig()
        root = Path(workspace_root)
        target_dir = root / "target" / config.profile_dir
        dist_dir = root / config.dist_dir / config.app_name
        return cls(
            workspace_root=root,
            target_dir=target_dir,
            dist_dir=dist_dir,
            exe_source=target_dir / f"{config.artifact}{config.exe_suffix}",
            exe_dest=dist_dir / f"{config.app_name}{config.exe_suffix}",
            examples_source=root / config.examples_dir,
            examples_dest=dist_dir / "examples",
        )


def _declares_workspace(manifest: Path) -> bool:
    try:
        with open(manifest, "rb") as f:
            data = tomllib.load(f)
    except OSError:
        return False
    except tomllib.TOMLDecodeError as e:
        logging.warning(f"Skipping unparsable manifest {manifest}: {e}")
        return False
    return "workspace" in data


def find_workspace_root(start: Optional[Path] = None) -> Path:
    """
    Walk up from `start` to the first Cargo.toml declaring `[workspace]`.

    Falls back to `start` itself when no workspace manifest is found.
    """
    start = Path(start or Path.cwd()).resolve()
    for candidate in (start, *start.parents):
        manifest = candidate / "Cargo.toml"
        if manifest.is_file() and _declares_workspace(manifest):
            logging.debug(f"Found workspace manifest: {manifest}")
            return candidate
    logging.debug(f"No workspace manifest above {start}, using it as the root")
    return start
