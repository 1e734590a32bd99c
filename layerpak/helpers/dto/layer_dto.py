"""Layer and build plan DTOs.

Rules:
- Import only stdlib and typing (no layerpak.* imports)
- Pure data structures, no I/O
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass
class Layer:
    """
    A layer directory plus the metadata recorded for it.

    Owned by the host pipeline. Contributors may delete and recreate ``path``
    and rewrite ``metadata`` after a successful rebuild.

    Attributes:
        name: Layer name (directory basename under the layers root)
        path: Layer directory
        metadata: Metadata record from the previous contribution
        build: Layer is available to subsequent buildpacks
        cache: Layer is restored on the next build
        launch: Layer is available in the launch image
    """

    name: str
    path: Path
    metadata: dict[str, Any] = field(default_factory=dict)
    build: bool = False
    cache: bool = False
    launch: bool = False


@dataclass
class BuildpackPlanEntry:
    """A single provenance record in a build plan."""

    name: str
    version: str
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class BuildpackPlan:
    """
    Ordered provenance record of what was (or would be) contributed.

    Caller-owned. Contributors only ever append to ``entries``.
    """

    entries: list[BuildpackPlanEntry] = field(default_factory=list)
