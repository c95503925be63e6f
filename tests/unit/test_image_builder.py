import pytest
from convoy.BUILDERS.image_builder import ImageBuilder
from convoy.errors import DirectoryError, ImageBuildError


class FakeRunner:
    def __init__(self, exit_code=0):
        self.exit_code = exit_code
        self.calls = []

    def run(self, command, working_dir=None):
        self.calls.append((command, working_dir))
        return self.exit_code


def test_build_args_without_version():
    assert ImageBuilder.build_args("") == ["build", ".", "-t", "convoy:local"]
    assert "--build-arg" not in ImageBuilder.build_args()

def test_build_args_with_version():
    assert ImageBuilder.build_args("1.26") == [
        "build", "--build-arg", "ENVOY_VERSION=v1.26-latest", ".", "-t", "convoy:local",
    ]

def test_build_runs_in_context_dir(tmp_path):
    runner = FakeRunner()
    tag = ImageBuilder(tool="docker", runner=runner).build(str(tmp_path), "1.27")
    assert tag == "convoy:local"
    command, cwd = runner.calls[0]
    assert command[0] == "docker"
    assert "ENVOY_VERSION=v1.27-latest" in command
    assert cwd == str(tmp_path)

def test_tool_from_environment(monkeypatch):
    monkeypatch.setenv("CONVOY_DOCKER", "podman")
    assert ImageBuilder().tool == "podman"
    monkeypatch.delenv("CONVOY_DOCKER")
    assert ImageBuilder().tool == "docker"

def test_build_failure(tmp_path):
    with pytest.raises(ImageBuildError):
        ImageBuilder(tool="docker", runner=FakeRunner(exit_code=1)).build(str(tmp_path))

def test_missing_context_dir(tmp_path):
    runner = FakeRunner()
    with pytest.raises(DirectoryError):
        ImageBuilder(tool="docker", runner=runner).build(str(tmp_path / "missing"))
    assert runner.calls == []
