"""Dependency layer contribution.

Adapts a BuildpackDependency and a dependency cache to the generic
LayerContributor: records the dependency in the build plan, derives the
canonical metadata the layer is keyed on, and hands the cached artifact to
the caller's build function on a cache miss.
"""

from __future__ import annotations

import contextlib
import logging
from collections.abc import Callable
from typing import Any, BinaryIO, Protocol

from layerpak.components.infrastructure.status_logger_comp import StatusSink
from layerpak.components.layers.layer_contributor_comp import DEFAULT_DIRECTORY_MODE, LayerContributor
from layerpak.helpers.dto.buildpack_dto import BuildpackDependency
from layerpak.helpers.dto.layer_dto import BuildpackPlan, BuildpackPlanEntry, Layer
from layerpak.helpers.exceptions import ArtifactFetchError

logger = logging.getLogger(__name__)

DependencyLayerFunc = Callable[[BinaryIO, Layer], Layer]


class DependencyCache(Protocol):
    """Source of dependency artifacts (download, checksum verification and storage live behind it)."""

    def artifact(self, dependency: BuildpackDependency) -> BinaryIO: ...


def dependency_licenses(dependency: BuildpackDependency) -> list[dict[str, Any]]:
    """Flatten licenses into ``{type, uri}`` mappings, keeping input order."""
    return [{"type": lic.type, "uri": lic.uri} for lic in dependency.licenses]


def dependency_metadata(dependency: BuildpackDependency) -> dict[str, Any]:
    """Canonical metadata a layer holding ``dependency`` is keyed on."""
    return {
        "id": dependency.id,
        "name": dependency.name,
        "version": dependency.version,
        "uri": dependency.uri,
        "sha256": dependency.sha256,
        "stacks": list(dependency.stacks),
        "licenses": dependency_licenses(dependency),
    }


def dependency_plan_entry(dependency: BuildpackDependency) -> BuildpackPlanEntry:
    """Build plan provenance record for ``dependency``."""
    return BuildpackPlanEntry(
        name=dependency.id,
        version=dependency.version,
        metadata={
            "name": dependency.name,
            "uri": dependency.uri,
            "sha256": dependency.sha256,
            "stacks": list(dependency.stacks),
            "licenses": dependency_licenses(dependency),
        },
    )


class DependencyLayerContributor:
    """
    Contributes a layer for a BuildpackDependency.

    Construction appends the dependency to ``plan`` unconditionally: provenance
    is recorded whether or not the layer is later reused.
    """

    def __init__(
        self,
        dependency: BuildpackDependency,
        cache: DependencyCache,
        layer: Layer,
        plan: BuildpackPlan,
        logger: StatusSink | None = None,
        directory_mode: int = DEFAULT_DIRECTORY_MODE,
    ) -> None:
        self.dependency = dependency
        self.dependency_cache = cache

        plan.entries.append(dependency_plan_entry(dependency))

        self.layer_contributor = LayerContributor(
            f"{dependency.name} {dependency.version}",
            dependency_metadata(dependency),
            layer,
            logger=logger,
            directory_mode=directory_mode,
        )

    @property
    def layer(self) -> Layer:
        return self.layer_contributor.layer

    def is_cached(self) -> bool:
        return self.layer_contributor.is_cached()

    def contribute(self, build: DependencyLayerFunc) -> Layer:
        """
        Contribute the dependency layer.

        On a cache miss the artifact is requested after the layer directory has
        been cleared. If the fetch fails the directory is left empty and the
        stored metadata is not rewritten, so the next contribution retries.

        Raises:
            ArtifactFetchError: The dependency cache could not provide the artifact
        """

        def _build(layer: Layer) -> Layer:
            try:
                artifact = self.dependency_cache.artifact(self.dependency)
            except Exception as e:
                raise ArtifactFetchError(self.dependency.id, e) from e

            with contextlib.closing(artifact):
                logger.debug("[layers] Contributing %s from cached artifact", self.dependency.id)
                return build(artifact, layer)

        return self.layer_contributor.contribute(_build)
