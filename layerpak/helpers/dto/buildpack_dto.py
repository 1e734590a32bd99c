"""Buildpack descriptor DTOs.

Immutable descriptors for fetchable dependencies and buildpack helpers.
Populated either directly by callers or from buildpack.toml by
components/buildpack/buildpack_descriptor_comp.py.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BuildpackDependencyLicense:
    """License of a dependency."""

    type: str = ""
    uri: str = ""


@dataclass(frozen=True)
class BuildpackDependency:
    """
    Descriptor of a fetchable dependency artifact.

    ``licenses`` order is significant: it is part of the cached layer metadata,
    so callers must supply a stable order.
    """

    id: str
    name: str
    version: str
    uri: str
    sha256: str
    stacks: tuple[str, ...] = ()
    licenses: tuple[BuildpackDependencyLicense, ...] = ()

    def supports_stack(self, stack: str) -> bool:
        """Whether the dependency declares support for ``stack`` (``*`` matches any)."""
        return stack in self.stacks or "*" in self.stacks


@dataclass(frozen=True)
class BuildpackInfo:
    """Identity of the buildpack that ships a helper application."""

    id: str
    name: str = ""
    version: str = ""
    clear_environment: bool = False
