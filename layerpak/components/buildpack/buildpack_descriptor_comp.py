"""Buildpack descriptor component.

Reads ``buildpack.toml`` and turns it into the DTOs contributors consume:

    [buildpack]
    id = "example/node"
    name = "Example Node Buildpack"
    version = "1.2.3"
    clear-env = false

    [[metadata.dependencies]]
    id = "node"
    name = "Node.js"
    version = "14.0.0"
    uri = "https://example.com/node-v14.0.0.tar.gz"
    sha256 = "..."
    stacks = ["io.buildpacks.stacks.bionic"]

      [[metadata.dependencies.licenses]]
      type = "MIT"
      uri = "https://example.com/LICENSE"

Pydantic models validate the document; they never leave this module.
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from layerpak.helpers.dto.buildpack_dto import BuildpackDependency, BuildpackDependencyLicense, BuildpackInfo
from layerpak.helpers.exceptions import BuildpackDescriptorError

logger = logging.getLogger(__name__)


# ──────────────────────────────────────────────────────────────────────
# Document models
# ──────────────────────────────────────────────────────────────────────


class _LicenseModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    type: str = ""
    uri: str = ""


class _DependencyModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    name: str = ""
    version: str
    uri: str
    sha256: str
    stacks: list[str] = Field(default_factory=list)
    licenses: list[_LicenseModel] = Field(default_factory=list)

    def to_dto(self) -> BuildpackDependency:
        return BuildpackDependency(
            id=self.id,
            name=self.name,
            version=self.version,
            uri=self.uri,
            sha256=self.sha256,
            stacks=tuple(self.stacks),
            licenses=tuple(BuildpackDependencyLicense(type=lic.type, uri=lic.uri) for lic in self.licenses),
        )


class _BuildpackModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str
    name: str = ""
    version: str = ""
    clear_environment: bool = Field(default=False, alias="clear-env")

    def to_dto(self) -> BuildpackInfo:
        return BuildpackInfo(
            id=self.id,
            name=self.name,
            version=self.version,
            clear_environment=self.clear_environment,
        )


class _MetadataModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    dependencies: list[_DependencyModel] = Field(default_factory=list)


class _DescriptorModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    api: str = ""
    buildpack: _BuildpackModel
    metadata: _MetadataModel = Field(default_factory=_MetadataModel)


# ──────────────────────────────────────────────────────────────────────
# Public API
# ──────────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class BuildpackDescriptor:
    """Parsed buildpack.toml."""

    path: Path
    api: str
    info: BuildpackInfo
    dependencies: tuple[BuildpackDependency, ...] = field(default_factory=tuple)

    def dependency(self, dependency_id: str, stack: str | None = None) -> BuildpackDependency | None:
        """
        First declared dependency with ``dependency_id`` supported on ``stack``.

        Declaration order decides between candidates; no version resolution
        is performed.
        """
        for dep in self.dependencies:
            if dep.id != dependency_id:
                continue
            if stack is None or dep.supports_stack(stack):
                return dep
        return None


def parse_buildpack_descriptor(document: dict, path: str | Path = "buildpack.toml") -> BuildpackDescriptor:
    """
    Validate an already-loaded buildpack.toml document.

    Raises:
        BuildpackDescriptorError: If required fields are missing or mistyped
    """
    try:
        model = _DescriptorModel.model_validate(document)
    except ValidationError as e:
        raise BuildpackDescriptorError(path, e) from e

    return BuildpackDescriptor(
        path=Path(path),
        api=model.api,
        info=model.buildpack.to_dto(),
        dependencies=tuple(dep.to_dto() for dep in model.metadata.dependencies),
    )


def load_buildpack_descriptor(path: str | Path) -> BuildpackDescriptor:
    """
    Load and validate ``buildpack.toml`` at ``path``.

    Raises:
        BuildpackDescriptorError: If the file cannot be read, is not TOML, or fails validation
    """
    try:
        with open(path, "rb") as f:
            document = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise BuildpackDescriptorError(path, e) from e

    descriptor = parse_buildpack_descriptor(document, path)
    logger.debug(
        "[buildpack] Loaded %s %s with %d dependencies",
        descriptor.info.id,
        descriptor.info.version,
        len(descriptor.dependencies),
    )
    return descriptor
