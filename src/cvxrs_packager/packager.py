#!/usr/bin/env python3

import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

from .build import run_build
from .config import PackagerConfig, create_default_config_file
from .errors import ArtifactNotFound, PackagingError
from .layout import PackageLayout, find_workspace_root
from .stage import copy_file, copy_tree, ensure_dir


@dataclass(frozen=True)
class PackageResult:
    """What a successful run produced."""

    dist_dir: Path
    executable: Path
    examples: Path


def package(
    skip_build: bool = False,
    workspace_root: Optional[Path] = None,
    config: Optional[PackagerConfig] = None,
) -> PackageResult:
    """
    Build (unless skipped) and stage cvxrs-studio into the distribution directory.

    The steps run in a fixed order and the first failure aborts the run, so a
    failed build or a missing artifact never creates the distribution directory.
    """
    config = config or PackagerConfig()
    layout = PackageLayout.from_workspace(workspace_root or find_workspace_root(), config)
    logging.debug(f"Workspace root: {layout.workspace_root}")

    if not skip_build:
        run_build(layout.workspace_root, config)

    # checked even after a successful build
    if not layout.exe_source.is_file():
        raise ArtifactNotFound(layout.exe_source)

    ensure_dir(layout.dist_dir)
    copy_file(layout.exe_source, layout.exe_dest)
    copy_tree(layout.examples_source, layout.examples_dest)

    print(f"Package created at: {layout.dist_dir}")
    print(f"Create a shortcut or launcher pointing to: {layout.exe_dest}")

    return PackageResult(
        dist_dir=layout.dist_dir,
        executable=layout.exe_dest,
        examples=layout.examples_dest,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Build cvxrs-studio and stage it with its examples into dist/",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    build_group = parser.add_argument_group("Build")
    build_group.add_argument(
        "--skip-build",
        action="store_true",
        help="Package the existing artifact without running the build tool"
    )
    build_group.add_argument(
        "-w", "--workspace",
        type=Path,
        help="Workspace root (default: nearest Cargo.toml declaring [workspace])"
    )

    config_group = parser.add_argument_group("Configuration")
    config_group.add_argument(
        "-c", "--config",
        help="Configuration file path (YAML format)"
    )
    config_group.add_argument(
        "--create-config",
        nargs="?",
        const="-",
        metavar="FILE",
        help="Write the effective configuration to FILE (stdout when omitted) and exit"
    )

    info_group = parser.add_argument_group("Information")
    info_group.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )
    return parser


def main(argv=None, workspace_root: Optional[Path] = None):
    """Main entry point for the cvxrs-package command"""
    parser = build_parser()
    args = parser.parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=log_level, format='%(message)s')

    try:
        config = PackagerConfig(config_file=args.config)
        if args.config:
            logging.info(f"Loaded configuration from: {args.config}")
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"Failed to load configuration: {e}", file=sys.stderr)
        sys.exit(1)

    if args.create_config == "-":
        config.dump(sys.stdout)
        return
    if args.create_config:
        try:
            create_default_config_file(args.create_config, config)
        except OSError:
            sys.exit(1)
        return

    try:
        package(
            skip_build=args.skip_build,
            workspace_root=args.workspace or workspace_root,
            config=config,
        )
    except PackagingError as e:
        logging.error(f"Packaging failed: {e}")
        if args.verbose:
            import traceback
            traceback.print_exc()
        sys.exit(e.exit_code)
    except KeyboardInterrupt:
        print("\nInterrupted")
        sys.exit(130)


if __name__ == "__main__":
    main()
