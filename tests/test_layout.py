import pytest

from cvxrs_packager.config import PackagerConfig
from cvxrs_packager.layout import PackageLayout, find_workspace_root


def test_layout_paths(tmp_path):
    config = PackagerConfig()
    config.exe_suffix = ".exe"

    layout = PackageLayout.from_workspace(tmp_path, config)

    assert layout.target_dir == tmp_path / "target" / "release"
    assert layout.dist_dir == tmp_path / "dist" / "cvxrs-studio"
    assert layout.exe_source == tmp_path / "target" / "release" / "cvxrs-gui.exe"
    assert layout.exe_dest == tmp_path / "dist" / "cvxrs-studio" / "cvxrs-studio.exe"
    assert layout.examples_source == tmp_path / "examples"
    assert layout.examples_dest == tmp_path / "dist" / "cvxrs-studio" / "examples"


def test_layout_without_suffix(tmp_path):
    config = PackagerConfig()
    config.exe_suffix = ""

    layout = PackageLayout.from_workspace(tmp_path, config)

    assert layout.exe_source.name == "cvxrs-gui"
    assert layout.exe_dest.name == "cvxrs-studio"


def test_find_workspace_root_skips_member_manifests(workspace):
    member = workspace / "crates" / "gui"
    member.mkdir(parents=True)
    (member / "Cargo.toml").write_text('[package]\nname = "cvxrs-gui"\n')

    assert find_workspace_root(member) == workspace.resolve()


def test_find_workspace_root_falls_back_to_start(tmp_path):
    start = tmp_path / "loose"
    start.mkdir()
    assert find_workspace_root(start) == start.resolve()


@pytest.mark.parametrize("manifest", [
    '[workspace] # cvxrs\nmembers = ["crates/*"]\n',
    '[workspace.package]\nversion = "0.1.0"\n',
    '[workspace.dependencies]\nanyhow = "1"\n',
])
def test_find_workspace_root_accepts_any_workspace_table(tmp_path, manifest):
    root = tmp_path / "cvxrs"
    member = root / "crates" / "gui"
    member.mkdir(parents=True)
    (root / "Cargo.toml").write_text(manifest)
    (member / "Cargo.toml").write_text('[package]\nname = "cvxrs-gui"\n')

    assert find_workspace_root(member) == root.resolve()


def test_find_workspace_root_ignores_workspace_mentions_outside_tables(tmp_path):
    root = tmp_path / "cvxrs"
    root.mkdir()
    (root / "Cargo.toml").write_text('[package]\nname = "solo"\ndescription = "[workspace]"\n')

    assert find_workspace_root(root) == root.resolve()


def test_find_workspace_root_skips_unparsable_manifest(tmp_path, caplog):
    root = tmp_path / "cvxrs"
    member = root / "crates" / "gui"
    member.mkdir(parents=True)
    (root / "Cargo.toml").write_text('[workspace]\nmembers = ["crates/*"]\n')
    (member / "Cargo.toml").write_text('[workspace\nbroken = \n')

    with caplog.at_level("WARNING"):
        assert find_workspace_root(member) == root.resolve()
    assert "unparsable" in caplog.text
