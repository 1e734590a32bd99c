"""Helper layer contribution.

Same contract as dependency layers, but the artifact is a helper application
shipped inside the buildpack rather than a cached download.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path
from typing import Any, BinaryIO

from layerpak.components.infrastructure.status_logger_comp import StatusSink
from layerpak.components.layers.layer_contributor_comp import DEFAULT_DIRECTORY_MODE, LayerContributor
from layerpak.helpers.dto.buildpack_dto import BuildpackInfo
from layerpak.helpers.dto.layer_dto import BuildpackPlan, BuildpackPlanEntry, Layer
from layerpak.helpers.exceptions import ArtifactOpenError

HelperLayerFunc = Callable[[BinaryIO, Layer], Layer]


def helper_metadata(info: BuildpackInfo) -> dict[str, Any]:
    """Canonical metadata a helper layer is keyed on."""
    return {
        "id": info.id,
        "name": info.name,
        "version": info.version,
        "clear-env": info.clear_environment,
    }


class HelperLayerContributor:
    """Contributes a layer for a buildpack helper application."""

    def __init__(
        self,
        path: str | Path,
        name: str,
        info: BuildpackInfo,
        layer: Layer,
        plan: BuildpackPlan,
        logger: StatusSink | None = None,
        directory_mode: int = DEFAULT_DIRECTORY_MODE,
    ) -> None:
        self.path = Path(path)

        plan.entries.append(
            BuildpackPlanEntry(
                name=os.path.basename(self.path),
                version=info.version,
                metadata={"id": info.id, "version": info.version},
            )
        )

        self.layer_contributor = LayerContributor(
            f"{name} {info.version}",
            helper_metadata(info),
            layer,
            logger=logger,
            directory_mode=directory_mode,
        )

    @property
    def layer(self) -> Layer:
        return self.layer_contributor.layer

    def is_cached(self) -> bool:
        return self.layer_contributor.is_cached()

    def contribute(self, build: HelperLayerFunc) -> Layer:
        """
        Contribute the helper layer, opening the helper on a cache miss.

        Raises:
            ArtifactOpenError: The helper application cannot be opened
        """

        def _build(layer: Layer) -> Layer:
            try:
                artifact = open(self.path, "rb")  # noqa: SIM115
            except OSError as e:
                raise ArtifactOpenError(self.path, e) from e

            with artifact:
                return build(artifact, layer)

        return self.layer_contributor.contribute(_build)
