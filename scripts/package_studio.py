#!/usr/bin/env python3
"""
Package cvxrs-studio from the workspace this script lives in.
Copy it into the Rust workspace's scripts/ folder; the workspace root is its parent.
"""

from pathlib import Path

from cvxrs_packager.packager import main

if __name__ == "__main__":
    main(workspace_root=Path(__file__).resolve().parent.parent)
