"""
Pytest fixtures and configuration for the test suite.

Strategy:
- Real filesystem under tmp_path for layer directories
- Recording status logger instead of console output
- In-memory dependency cache serving BytesIO artifacts
"""

from __future__ import annotations

import io
import sys
from pathlib import Path

import pytest

# Add project root to path so tests can import layerpak package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from layerpak.helpers.dto.buildpack_dto import (  # noqa: E402
    BuildpackDependency,
    BuildpackDependencyLicense,
    BuildpackInfo,
)
from layerpak.helpers.dto.layer_dto import BuildpackPlan, Layer  # noqa: E402

NODE_ARTIFACT = b"node-v14.0.0-linux-x64.tar.gz contents"


class RecordingStatusLogger:
    """Plain status sink: keeps the text of every message for assertions."""

    def __init__(self) -> None:
        self.headers: list[str] = []
        self.bodies: list[str] = []
        self.debugs: list[str] = []

    def header(self, message: object) -> None:
        self.headers.append(str(message))

    def body(self, message: object) -> None:
        self.bodies.append(str(message))

    def debug(self, message: object) -> None:
        self.debugs.append(str(message))


class TrackingStream(io.BytesIO):
    """BytesIO that remembers it was closed (BytesIO refuses reads after close)."""

    def __init__(self, data: bytes) -> None:
        super().__init__(data)
        self.was_closed = False

    def close(self) -> None:
        self.was_closed = True
        super().close()


class FakeDependencyCache:
    """Dependency cache serving in-memory artifacts."""

    def __init__(self, artifacts: dict[str, bytes] | None = None, error: Exception | None = None) -> None:
        self.artifacts = artifacts or {}
        self.error = error
        self.requests: list[BuildpackDependency] = []
        self.streams: list[TrackingStream] = []

    def artifact(self, dependency: BuildpackDependency) -> TrackingStream:
        self.requests.append(dependency)
        if self.error is not None:
            raise self.error
        stream = TrackingStream(self.artifacts.get(dependency.id, b""))
        self.streams.append(stream)
        return stream


@pytest.fixture
def layers_dir(tmp_path: Path) -> Path:
    """Layers root directory."""
    path = tmp_path / "layers"
    path.mkdir()
    return path


@pytest.fixture
def layer(layers_dir: Path) -> Layer:
    """Fresh layer with no metadata and no directory yet."""
    return Layer(name="test-layer", path=layers_dir / "test-layer")


@pytest.fixture
def plan() -> BuildpackPlan:
    return BuildpackPlan()


@pytest.fixture
def status_logger() -> RecordingStatusLogger:
    return RecordingStatusLogger()


@pytest.fixture
def node_dependency() -> BuildpackDependency:
    """Node.js dependency descriptor."""
    return BuildpackDependency(
        id="node",
        name="Node.js",
        version="14.0.0",
        uri="https://example.com/node-v14.0.0-linux-x64.tar.gz",
        sha256="abc123def4567890abc123def4567890abc123def4567890abc123def4567890",
        stacks=("io.buildpacks.stacks.bionic",),
        licenses=(BuildpackDependencyLicense(type="MIT", uri="https://example.com/node/LICENSE"),),
    )


@pytest.fixture
def dependency_cache() -> FakeDependencyCache:
    return FakeDependencyCache({"node": NODE_ARTIFACT, "jdk": b"jdk archive"})


@pytest.fixture
def helper_info() -> BuildpackInfo:
    return BuildpackInfo(id="example/node", name="Example Node Buildpack", version="1.2.3", clear_environment=False)


@pytest.fixture
def helper_binary(tmp_path: Path) -> Path:
    """Helper application shipped inside the buildpack."""
    path = tmp_path / "buildpack" / "bin" / "helper"
    path.parent.mkdir(parents=True)
    path.write_bytes(b"#!/bin/sh\necho helper\n")
    return path


@pytest.fixture
def failing_cache() -> FakeDependencyCache:
    """Dependency cache whose downloads always fail."""
    return FakeDependencyCache(error=ConnectionError("connection refused"))
