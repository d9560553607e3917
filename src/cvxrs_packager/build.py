#!/usr/bin/env python3
"""
Release build of the GUI crate through the external build tool
"""

import logging
import subprocess
from pathlib import Path

from .config import PackagerConfig
from .errors import BuildFailure


def run_build(workspace_root: Path, config: PackagerConfig) -> None:
    """Run the build tool in the workspace root, raising BuildFailure on error"""
    cmd = config.build_command()

    logging.info(f"Building {config.build_package} ({config.profile})...")
    logging.info(f"Command: {' '.join(cmd)}")

    try:
        # build output streams straight to the operator's terminal
        subprocess.run(cmd, cwd=str(workspace_root), check=True)
    except subprocess.CalledProcessError as e:
        raise BuildFailure(cmd, e.returncode, e.stderr) from e
    except FileNotFoundError as e:
        raise BuildFailure(cmd, None) from e

    logging.info("Build successful!")
