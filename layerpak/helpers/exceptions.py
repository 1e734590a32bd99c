"""Custom exceptions raised by layer contribution.

Rules:
- Every exception keeps the identifiers needed to act on it as attributes.
- Underlying causes are chained with ``raise ... from``; ``cause`` mirrors it.
- No I/O, no config loading, no complex logic.
"""

from __future__ import annotations

from pathlib import Path


class LayerpakError(Exception):
    """Base class for all layerpak errors."""


class MetadataDecodeError(LayerpakError):
    """Raised when stored layer metadata cannot be decoded into the expected shape."""

    def __init__(self, layer_name: str, cause: BaseException | str) -> None:
        self.layer_name = layer_name
        self.cause = cause
        super().__init__(f"unable to decode metadata for layer {layer_name}: {cause}")


class MetadataEncodeError(LayerpakError):
    """Raised when expected metadata cannot be encoded into a layer record."""

    def __init__(self, layer_name: str, cause: BaseException | str) -> None:
        self.layer_name = layer_name
        self.cause = cause
        super().__init__(f"unable to encode metadata for layer {layer_name}: {cause}")


class LayerIOError(LayerpakError):
    """Raised when a layer directory or record cannot be removed, created or written."""

    def __init__(self, path: str | Path, action: str, cause: BaseException | str) -> None:
        self.path = Path(path)
        self.action = action
        self.cause = cause
        super().__init__(f"unable to {action} {path}: {cause}")


class ArtifactFetchError(LayerpakError):
    """Raised when the dependency cache cannot provide a dependency artifact."""

    def __init__(self, dependency_id: str, cause: BaseException | str) -> None:
        self.dependency_id = dependency_id
        self.cause = cause
        super().__init__(f"unable to get dependency {dependency_id}: {cause}")


class ArtifactOpenError(LayerpakError):
    """Raised when a local helper artifact cannot be opened."""

    def __init__(self, path: str | Path, cause: BaseException | str) -> None:
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"unable to open {path}: {cause}")


class BuildError(LayerpakError):
    """Optional typed failure for build functions.

    Contributors never raise or wrap this themselves: whatever a build
    function raises propagates unchanged.
    """


class BuildpackDescriptorError(LayerpakError):
    """Raised when a buildpack.toml cannot be read or validated."""

    def __init__(self, path: str | Path, cause: BaseException | str) -> None:
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"invalid buildpack descriptor {path}: {cause}")


class ConfigError(LayerpakError):
    """Raised when a configuration value cannot be used."""

    def __init__(self, key: str, value: object, reason: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"invalid config value {key}={value!r}: {reason}")
