import pytest
from pydantic import ValidationError
from convoy.errors import NativeBuildError
from convoy.MANAGERS.build_orchestrator import BuildOrchestrator
from convoy.MODELS.build_config import BuildConfig, BuildContext


class FakeConsulBuilder:
    def __init__(self, fail=False):
        self.fail = fail

    def build(self):
        if self.fail:
            raise NativeBuildError("failed to build consul")
        return b"consul"


class FakeContextBuilder:
    def __init__(self):
        self.received = []

    def assemble(self, consul_bytes):
        self.received.append(consul_bytes)
        return BuildContext(path="/tmp/convoy-build123", files=["Dockerfile", "entrypoint.sh", "consul"])


class FakeImageBuilder:
    def __init__(self):
        self.calls = []

    def build(self, context_dir, envoy_version=""):
        self.calls.append((context_dir, envoy_version))
        return "convoy:local"


def test_run_passes_artifact_and_version_through():
    context_builder = FakeContextBuilder()
    image_builder = FakeImageBuilder()
    orchestrator = BuildOrchestrator(
        BuildConfig(consul_location="/src/consul", envoy_version="1.26"),
        consul_builder=FakeConsulBuilder(),
        context_builder=context_builder,
        image_builder=image_builder,
    )
    assert orchestrator.run() == "convoy:local"
    assert context_builder.received == [b"consul"]
    assert image_builder.calls == [("/tmp/convoy-build123", "1.26")]

def test_native_build_failure_stops_pipeline():
    context_builder = FakeContextBuilder()
    image_builder = FakeImageBuilder()
    orchestrator = BuildOrchestrator(
        BuildConfig(consul_location="/src/consul"),
        consul_builder=FakeConsulBuilder(fail=True),
        context_builder=context_builder,
        image_builder=image_builder,
    )
    with pytest.raises(NativeBuildError):
        orchestrator.run()
    assert context_builder.received == []
    assert image_builder.calls == []

def test_build_config_requires_location():
    with pytest.raises(ValidationError):
        BuildConfig(consul_location="")
