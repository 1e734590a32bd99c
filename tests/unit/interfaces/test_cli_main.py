"""Unit tests for the layerpak CLI."""

from __future__ import annotations

from pathlib import Path

import pytest

from layerpak.components.layers.dependency_layer_comp import dependency_metadata
from layerpak.components.layers.layer_store_comp import LayerStore
from layerpak.helpers.dto.buildpack_dto import BuildpackDependency, BuildpackDependencyLicense
from layerpak.helpers.dto.layer_dto import Layer
from layerpak.interfaces.cli.cli_main import build_parser, main
from layerpak.interfaces.cli.commands.check_cli import EXIT_ERROR, EXIT_REBUILD, EXIT_REUSED

BUILDPACK_TOML = """\
api = "0.5"

[buildpack]
id = "example/node"
name = "Example Node Buildpack"
version = "1.2.3"

[[metadata.dependencies]]
id = "node"
name = "Node.js"
version = "14.0.0"
uri = "https://example.com/node-v14.0.0.tar.gz"
sha256 = "bbb"
stacks = ["io.buildpacks.stacks.bionic"]

  [[metadata.dependencies.licenses]]
  type = "MIT"
  uri = "https://example.com/node/LICENSE"
"""

NODE = BuildpackDependency(
    id="node",
    name="Node.js",
    version="14.0.0",
    uri="https://example.com/node-v14.0.0.tar.gz",
    sha256="bbb",
    stacks=("io.buildpacks.stacks.bionic",),
    licenses=(BuildpackDependencyLicense(type="MIT", uri="https://example.com/node/LICENSE"),),
)


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for key in ("LAYERPAK_CONFIG", "LAYERPAK_LAYERS_DIR", "LAYERPAK_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def buildpack_toml(tmp_path: Path) -> Path:
    path = tmp_path / "buildpack.toml"
    path.write_text(BUILDPACK_TOML)
    return path


class TestParser:
    """Argument parsing."""

    @pytest.mark.unit
    def test_no_command_prints_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([]) == 0
        assert "usage: layerpak" in capsys.readouterr().out

    @pytest.mark.unit
    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["--version"])

        assert exc_info.value.code == 0
        assert capsys.readouterr().out.startswith("layerpak ")


class TestCheck:
    """layerpak check."""

    @pytest.mark.unit
    def test_missing_layer_would_rebuild(self, buildpack_toml: Path, layers_dir: Path) -> None:
        assert main(["check", str(buildpack_toml), str(layers_dir), "node"]) == EXIT_REBUILD

    @pytest.mark.unit
    def test_current_layer_is_reused(
        self, buildpack_toml: Path, layers_dir: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        LayerStore(layers_dir).save(Layer(name="node", path=layers_dir / "node", metadata=dependency_metadata(NODE)))

        assert main(["check", str(buildpack_toml), str(layers_dir), "node"]) == EXIT_REUSED
        assert "would be reused" in capsys.readouterr().out

    @pytest.mark.unit
    def test_custom_layer_name(self, buildpack_toml: Path, layers_dir: Path) -> None:
        LayerStore(layers_dir).save(Layer(name="runtime", path=layers_dir / "runtime", metadata=dependency_metadata(NODE)))

        assert main(["check", str(buildpack_toml), str(layers_dir), "node", "--layer", "runtime"]) == EXIT_REUSED

    @pytest.mark.unit
    def test_check_does_not_touch_layer(self, buildpack_toml: Path, layers_dir: Path) -> None:
        main(["check", str(buildpack_toml), str(layers_dir), "node"])

        assert not (layers_dir / "node").exists()

    @pytest.mark.unit
    def test_unknown_dependency(self, buildpack_toml: Path, layers_dir: Path) -> None:
        assert main(["check", str(buildpack_toml), str(layers_dir), "python"]) == EXIT_ERROR

    @pytest.mark.unit
    def test_unsupported_stack(self, buildpack_toml: Path, layers_dir: Path) -> None:
        args = ["check", str(buildpack_toml), str(layers_dir), "node", "--stack", "io.buildpacks.stacks.tiny"]
        assert main(args) == EXIT_ERROR

    @pytest.mark.unit
    def test_corrupt_record(self, buildpack_toml: Path, layers_dir: Path) -> None:
        (layers_dir / "node.yaml").write_text("metadata: [unclosed\n")

        assert main(["check", str(buildpack_toml), str(layers_dir), "node"]) == EXIT_ERROR


class TestDependencies:
    """layerpak dependencies."""

    @pytest.mark.unit
    def test_lists_dependencies(self, buildpack_toml: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["dependencies", str(buildpack_toml)]) == 0

        out = capsys.readouterr().out
        assert "node" in out
        assert "14.0.0" in out

    @pytest.mark.unit
    def test_missing_descriptor(self, tmp_path: Path) -> None:
        assert main(["dependencies", str(tmp_path / "absent.toml")]) == 1


class TestInspect:
    """layerpak inspect."""

    @pytest.mark.unit
    def test_empty_layers_dir(self, layers_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["inspect", str(layers_dir)]) == 0
        assert "No layer records" in capsys.readouterr().out

    @pytest.mark.unit
    def test_shows_layer(self, layers_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        LayerStore(layers_dir).save(
            Layer(name="node", path=layers_dir / "node", metadata={"id": "node", "version": "14.0.0"}, launch=True)
        )

        assert main(["inspect", str(layers_dir), "--name", "node"]) == 0

        out = capsys.readouterr().out
        assert "Layer node" in out
        assert "launch" in out
        assert "14.0.0" in out

    @pytest.mark.unit
    def test_layers_dir_from_config(
        self, layers_dir: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("LAYERPAK_LAYERS_DIR", str(layers_dir))

        assert main(["inspect"]) == 0
        assert "No layer records" in capsys.readouterr().out

    @pytest.mark.unit
    def test_no_layers_dir(self) -> None:
        assert main(["inspect"]) == 1

    @pytest.mark.unit
    def test_corrupt_record(self, layers_dir: Path) -> None:
        (layers_dir / "node.yaml").write_text("- not a mapping\n")

        assert main(["inspect", str(layers_dir)]) == 1
