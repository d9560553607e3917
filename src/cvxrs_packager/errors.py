"""Errors raised while building and staging the cvxrs-studio package."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence


class PackagingError(Exception):
    """Base class for every fatal packaging failure."""

    exit_code = 1


class BuildFailure(PackagingError):
    """Raised when the build tool exits non-zero or cannot be started."""

    def __init__(self, command: Sequence[str], returncode: Optional[int], stderr: Optional[str] = None):
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr
        if returncode is None:
            message = f"Build tool not found: {self.command[0]}"
        else:
            message = f"Build failed with exit code {returncode}: {' '.join(self.command)}"
        super().__init__(message)

    @property
    def exit_code(self) -> int:
        # surface the tool's own status when there is one
        return self.returncode if self.returncode else 1


class ArtifactNotFound(PackagingError):
    """Raised when the compiled executable is not where the build should put it."""

    def __init__(self, path: Path):
        self.path = Path(path)
        super().__init__(
            f"Executable not found at {self.path}. "
            "Did the build complete successfully?"
        )


class FilesystemFailure(PackagingError):
    """Raised when creating a directory or copying into the package fails."""

    def __init__(self, action: str, path: Path, error: OSError, source: Optional[Path] = None):
        self.action = action
        self.path = Path(path)
        self.source = Path(source) if source is not None else None
        self.error = error
        if self.source is not None:
            message = f"Failed to {action} {self.source} to {self.path}: {error}"
        else:
            message = f"Failed to {action} {self.path}: {error}"
        super().__init__(message)
