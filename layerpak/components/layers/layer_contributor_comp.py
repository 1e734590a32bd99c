"""Layer contribution engine.

Decides whether an existing layer can be reused or must be rebuilt by
comparing its stored metadata with the metadata a rebuild would record.
Any difference in an expected field (version bump, new checksum, changed
flag) triggers a full rebuild: the directory is removed, recreated empty,
and handed to the caller's build function. A layer is never patched in place.
"""

from __future__ import annotations

import copy
import dataclasses
import logging
import os
import shutil
from collections.abc import Callable, Mapping
from typing import Any

from rich.text import Text

from layerpak.components.infrastructure.status_logger_comp import (
    COLOR_CONTRIBUTE,
    COLOR_NAME,
    COLOR_REUSE,
    StatusLogger,
    StatusSink,
)
from layerpak.helpers.dto.layer_dto import Layer
from layerpak.helpers.exceptions import LayerIOError, MetadataDecodeError, MetadataEncodeError
from layerpak.helpers.metadata_helper import canonicalize, decode_into_shape, deep_equal

logger = logging.getLogger(__name__)

DEFAULT_DIRECTORY_MODE = 0o755

LayerFunc = Callable[[Layer], Layer]


class LayerContributor:
    """
    Contributes a layer with consistent logging and cache avoidance.

    Attributes:
        name: User readable name of the contribution
        expected_metadata: Canonical metadata a rebuilt layer would record
        layer: Layer being contributed; replaced by the rebuilt layer after a miss
    """

    def __init__(
        self,
        name: str,
        expected_metadata: Mapping[str, Any],
        layer: Layer,
        logger: StatusSink | None = None,
        directory_mode: int = DEFAULT_DIRECTORY_MODE,
    ) -> None:
        self.name = name
        self.expected_metadata = copy.deepcopy(dict(expected_metadata))
        self.layer = layer
        self.directory_mode = directory_mode
        self._status = logger if logger is not None else StatusLogger()

    def is_cached(self) -> bool:
        """
        Whether the layer's stored metadata matches the expected metadata.

        Side-effect free: nothing is logged to the status sink and the
        filesystem is not touched.

        Raises:
            MetadataDecodeError: If the stored metadata cannot be decoded
        """
        try:
            actual = decode_into_shape(self.layer.metadata, self.expected_metadata)
        except TypeError as e:
            raise MetadataDecodeError(self.layer.name, e) from e

        return deep_equal(self.expected_metadata, actual)

    def contribute(self, build: LayerFunc) -> Layer:
        """
        Reuse the layer if it is current, otherwise rebuild it with ``build``.

        Args:
            build: Populates the (empty) layer directory and returns the layer

        Returns:
            The unchanged layer on a cache hit, the rebuilt layer otherwise

        Raises:
            MetadataDecodeError: Stored metadata cannot be decoded (no changes made)
            LayerIOError: The layer directory cannot be removed or created
            MetadataEncodeError: Expected metadata cannot be recorded
            Exception: Whatever ``build`` raises, unchanged
        """
        if self.is_cached():
            self._status.header(Text.assemble((self.name, COLOR_NAME), ": ", ("Reusing", COLOR_REUSE), " cached layer"))
            return self.layer

        self._status.header(
            Text.assemble((self.name, COLOR_NAME), ": ", ("Contributing", COLOR_CONTRIBUTE), " to layer")
        )
        self._reset_directory()

        layer = build(dataclasses.replace(self.layer, metadata={}))

        try:
            expected = canonicalize(self.expected_metadata)
        except TypeError as e:
            raise MetadataEncodeError(self.layer.name, e) from e

        # Fields added by the build function are kept; expected keys win.
        layer.metadata = {**layer.metadata, **expected}
        self.layer = layer
        logger.debug("[layers] Recorded metadata for %s: %s", layer.name, sorted(expected))
        return layer

    def _reset_directory(self) -> None:
        """Remove whatever is at the layer path (if present) and recreate it as an empty directory."""
        path = self.layer.path

        try:
            # Symlinks are removed, never followed
            if os.path.islink(path) or not os.path.isdir(path):
                os.unlink(path)
            else:
                shutil.rmtree(path)
        except FileNotFoundError:
            pass
        except OSError as e:
            raise LayerIOError(path, "remove existing layer directory", e) from e

        try:
            os.makedirs(path, mode=self.directory_mode)
        except OSError as e:
            raise LayerIOError(path, "create layer directory", e) from e

        self._status.debug(Text(f"Cleared layer directory {path}"))
