"""
layerpak - layer contribution with metadata based cache avoidance.

Typical use from a build step:

    plan = BuildpackPlan()
    contributor = DependencyLayerContributor(dependency, cache, layer, plan)
    layer = contributor.contribute(expand_archive)
"""

from layerpak.__version__ import __version__
from layerpak.components.infrastructure.status_logger_comp import NullStatusLogger, StatusLogger, StatusSink
from layerpak.components.layers import (
    DependencyCache,
    DependencyLayerContributor,
    HelperLayerContributor,
    LayerContributor,
    LayerStore,
)
from layerpak.helpers.dto import (
    BuildpackDependency,
    BuildpackDependencyLicense,
    BuildpackInfo,
    BuildpackPlan,
    BuildpackPlanEntry,
    Layer,
)
from layerpak.helpers.exceptions import (
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
    "DependencyCache",
    "DependencyLayerContributor",
    "HelperLayerContributor",
    "Layer",
    "LayerContributor",
    "LayerIOError",
    "LayerStore",
    "LayerpakError",
    "MetadataDecodeError",
    "MetadataEncodeError",
    "NullStatusLogger",
    "StatusLogger",
    "StatusSink",
    "__version__",
]
