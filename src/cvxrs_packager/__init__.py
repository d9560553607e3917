"""cvxrs-studio build and packaging helper."""

from .config import PackagerConfig
from .errors import ArtifactNotFound, BuildFailure, FilesystemFailure, PackagingError
from .layout import PackageLayout, find_workspace_root
from .packager import PackageResult, main, package

__all__ = [
    "PackagerConfig",
    "PackageLayout",
    "PackageResult",
    "PackagingError",
    "BuildFailure",
    "ArtifactNotFound",
    "FilesystemFailure",
    "find_workspace_root",
    "package",
    "main",
]
