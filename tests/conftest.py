import subprocess
from pathlib import Path

import pytest

from cvxrs_packager.config import PackagerConfig
from cvxrs_packager.layout import PackageLayout


@pytest.fixture
def config():
    return PackagerConfig()


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """A fake cargo workspace with an examples tree and no build output."""
    root = tmp_path / "cvxrs"
    root.mkdir()
    (root / "Cargo.toml").write_text('[workspace]\nmembers = ["crates/*"]\n')
    examples = root / "examples"
    examples.mkdir()
    (examples / "foo.txt").write_text("hello from foo\n")
    (examples / "nested").mkdir()
    (examples / "nested" / "box_qp.json").write_text('{"kind": "qp"}\n')
    return root


@pytest.fixture
def layout(workspace: Path, config: PackagerConfig) -> PackageLayout:
    return PackageLayout.from_workspace(workspace, config)


@pytest.fixture
def artifact(layout: PackageLayout) -> Path:
    """Place a compiled artifact where the release build would leave it."""
    layout.target_dir.mkdir(parents=True)
    layout.exe_source.write_bytes(b"\x7fELF fake gui binary")
    return layout.exe_source


@pytest.fixture
def build_ok(mocker):
    return mocker.patch(
        "cvxrs_packager.build.subprocess.run",
        return_value=subprocess.CompletedProcess(args=[], returncode=0),
    )
