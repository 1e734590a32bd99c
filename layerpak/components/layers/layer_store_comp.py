"""Layer store component.

Host-side persistence of layer records. Each layer ``<name>`` owns the
directory ``<layers_dir>/<name>`` and a record ``<layers_dir>/<name>.yaml``:

    types:
      build: false
      cache: true
      launch: true
    metadata:
      id: node
      version: 14.0.0
      ...

Metadata is canonicalized on write, so what is read back decodes into the same
shape LayerContributor compares against.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from layerpak.helpers.dto.layer_dto import Layer
from layerpak.helpers.exceptions import LayerIOError, MetadataDecodeError, MetadataEncodeError
from layerpak.helpers.metadata_helper import canonicalize

logger = logging.getLogger(__name__)

RECORD_SUFFIX = ".yaml"


class LayerStore:
    """Loads and saves layer records under a layers root directory."""

    def __init__(self, layers_dir: str | Path) -> None:
        self.layers_dir = Path(layers_dir)

    def record_path(self, name: str) -> Path:
        return self.layers_dir / f"{name}{RECORD_SUFFIX}"

    def names(self) -> list[str]:
        """Sorted names of layers that have a stored record."""
        if not self.layers_dir.is_dir():
            return []
        return sorted(p.name[: -len(RECORD_SUFFIX)] for p in self.layers_dir.glob(f"*{RECORD_SUFFIX}") if p.is_file())

    def layer(self, name: str) -> Layer:
        """
        Load layer ``name``.

        A layer without a record comes back with empty metadata, which never
        matches expected metadata and therefore always contributes.

        Raises:
            MetadataDecodeError: If the record is not valid YAML or not a mapping
        """
        layer = Layer(name=name, path=self.layers_dir / name)
        record_path = self.record_path(name)
        if not record_path.exists():
            return layer

        try:
            with open(record_path, encoding="utf-8") as f:
                record = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise MetadataDecodeError(name, e) from e

        if not isinstance(record, dict):
            raise MetadataDecodeError(name, f"record {record_path} is not a mapping")

        types = record.get("types") or {}
        metadata = record.get("metadata") or {}
        if not isinstance(types, dict) or not isinstance(metadata, dict):
            raise MetadataDecodeError(name, f"record {record_path} has malformed types or metadata")

        layer.metadata = metadata
        layer.build = bool(types.get("build", False))
        layer.cache = bool(types.get("cache", False))
        layer.launch = bool(types.get("launch", False))
        return layer

    def save(self, layer: Layer) -> Path:
        """
        Write the record for ``layer``.

        Returns:
            Path of the written record

        Raises:
            MetadataEncodeError: If the metadata holds values a record cannot represent
            LayerIOError: If the record cannot be written
        """
        try:
            record: dict[str, Any] = {
                "types": {"build": layer.build, "cache": layer.cache, "launch": layer.launch},
                "metadata": canonicalize(layer.metadata),
            }
            text = yaml.safe_dump(record, sort_keys=True, default_flow_style=False)
        except (TypeError, yaml.YAMLError) as e:
            raise MetadataEncodeError(layer.name, e) from e

        record_path = self.record_path(layer.name)
        try:
            self.layers_dir.mkdir(parents=True, exist_ok=True)
            record_path.write_text(text, encoding="utf-8")
        except OSError as e:
            raise LayerIOError(record_path, "write layer record", e) from e

        logger.debug("[layers] Saved layer record %s", record_path)
        return record_path
