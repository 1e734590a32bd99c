"""
Helpers package.
"""

from .dto.buildpack_dto import BuildpackDependency, BuildpackDependencyLicense, BuildpackInfo
from .dto.layer_dto import BuildpackPlan, BuildpackPlanEntry, Layer
from .exceptions import (
    ArtifactFetchError,
    ArtifactOpenError,
    BuildError,
    BuildpackDescriptorError,
    ConfigError,
    LayerIOError,
    LayerpakError,
    MetadataDecodeError,
    MetadataEncodeError,
)
from .metadata_helper import canonicalize, decode_into_shape, deep_equal

__all__ = [
    "ArtifactFetchError",
    "ArtifactOpenError",
    "BuildError",
    "BuildpackDependency",
    "BuildpackDependencyLicense",
    "BuildpackDescriptorError",
    "BuildpackInfo",
    "BuildpackPlan",
    "BuildpackPlanEntry",
    "ConfigError",
    "Layer",
    "LayerIOError",
    "LayerpakError",
    "MetadataDecodeError",
    "MetadataEncodeError",
    "canonicalize",
    "decode_into_shape",
    "deep_equal",
]
