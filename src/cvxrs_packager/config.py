#!/usr/bin/env python3

import yaml
import logging
import os
import sys
from typing import Any, Dict, List, Optional


DEFAULT_BUILD_TOOL = "cargo"
DEFAULT_BUILD_PACKAGE = "cvxrs-gui"
DEFAULT_PROFILE = "release"
DEFAULT_ARTIFACT = "cvxrs-gui"
DEFAULT_APP_NAME = "cvxrs-studio"
DEFAULT_DIST_DIR = "dist"
DEFAULT_EXAMPLES_DIR = "examples"

# cargo's built-in profiles that do not build into target/<profile>
BUILTIN_PROFILE_DIRS = {
    "dev": "debug",
    "test": "debug",
    "bench": "release",
}


def default_exe_suffix() -> str:
    """Suffix cargo gives to binaries on this platform."""
    return ".exe" if sys.platform == "win32" else ""


class PackagerConfig:
    """Configuration for building and staging cvxrs-studio"""

    KNOWN_KEYS = ('build', 'artifact', 'app_name', 'dist_dir', 'examples_dir')
    KNOWN_BUILD_KEYS = ('tool', 'package', 'profile', 'args')

    def __init__(self, config_file: str = None, config_dict: dict = None):
        self.build_tool: str = DEFAULT_BUILD_TOOL
        self.build_package: str = DEFAULT_BUILD_PACKAGE
        self.profile: str = DEFAULT_PROFILE
        self.build_args: List[str] = []
        self.artifact: str = DEFAULT_ARTIFACT
        self.app_name: str = DEFAULT_APP_NAME
        self.dist_dir: str = DEFAULT_DIST_DIR
        self.examples_dir: str = DEFAULT_EXAMPLES_DIR
        self.exe_suffix: str = default_exe_suffix()

        if config_file:
            self.load_from_file(config_file)
        elif config_dict:
            self.load_from_dict(config_dict)

    def load_from_file(self, config_file: str):
        """Load configuration from YAML file"""
        try:
            _, ext = os.path.splitext(config_file)
            if ext.lower() not in ['.yaml', '.yml']:
                raise ValueError("Only YAML configuration files (.yaml or .yml) are supported")

            with open(config_file, 'r') as f:
                config_data = yaml.safe_load(f) or {}
        except FileNotFoundError:
            logging.error(f"Configuration file not found: {config_file}")
            raise
        except yaml.YAMLError as e:
            logging.error(f"Invalid configuration file format: {e}")
            raise

        if not isinstance(config_data, dict):
            raise ValueError(f"Configuration root must be a mapping, got {type(config_data).__name__}")
        self.load_from_dict(config_data)

    def load_from_dict(self, config_data: dict):
        """Load configuration from dictionary"""
        for key in config_data:
            if key not in self.KNOWN_KEYS:
                logging.warning(f"Ignoring unknown configuration key: {key}")

        build_config = config_data.get('build') or {}
        if not isinstance(build_config, dict):
            raise ValueError("'build' must be a mapping")
        for key in build_config:
            if key not in self.KNOWN_BUILD_KEYS:
                logging.warning(f"Ignoring unknown build key: {key}")

        self.build_tool = self._get_str(build_config, 'tool', self.build_tool)
        self.build_package = self._get_str(build_config, 'package', self.build_package)
        self.profile = self._get_str(build_config, 'profile', self.profile)

        extra_args = build_config.get('args', self.build_args)
        if not isinstance(extra_args, list):
            raise ValueError("'build.args' must be a list")
        self.build_args = [str(arg) for arg in extra_args]

        self.artifact = self._get_str(config_data, 'artifact', self.artifact)
        self.app_name = self._get_str(config_data, 'app_name', self.app_name)
        self.dist_dir = self._get_str(config_data, 'dist_dir', self.dist_dir)
        self.examples_dir = self._get_str(config_data, 'examples_dir', self.examples_dir)

    @staticmethod
    def _get_str(data: Dict[str, Any], key: str, default: str) -> str:
        """Fetch a non-empty string value, keeping the default when absent."""
        value = data.get(key)
        if value is None:
            return default
        if not isinstance(value, str) or not value.strip():
            raise ValueError(f"'{key}' must be a non-empty string, got {value!r}")
        return value.strip()

    @property
    def profile_dir(self) -> str:
        """Directory name cargo uses under target/ for the selected profile."""
        return BUILTIN_PROFILE_DIRS.get(self.profile, self.profile)

    def build_command(self) -> List[str]:
        """Command line that produces the GUI artifact"""
        cmd = [self.build_tool, "build"]
        if self.profile == "release":
            cmd.append("--release")
        else:
            cmd.extend(["--profile", self.profile])
        cmd.extend(["-p", self.build_package])
        cmd.extend(self.build_args)
        return cmd

    def to_dict(self) -> dict:
        return {
            "build": {
                "tool": self.build_tool,
                "package": self.build_package,
                "profile": self.profile,
                "args": list(self.build_args),
            },
            "artifact": self.artifact,
            "app_name": self.app_name,
            "dist_dir": self.dist_dir,
            "examples_dir": self.examples_dir,
        }

    def dump(self, stream=None):
        """Serialize the configuration as YAML to `stream`, or return it as a string"""
        return yaml.safe_dump(self.to_dict(), stream, sort_keys=False)


def create_default_config_file(filename: str = "packager.yaml", config: Optional[PackagerConfig] = None):
    """Write `config` (the defaults when omitted) to a YAML file"""
    config = config or PackagerConfig()

    try:
        with open(filename, 'w') as f:
            config.dump(f)
        logging.info(f"Created configuration file: {filename}")
    except IOError as e:
        logging.error(f"Failed to create configuration file: {e}")
        raise
