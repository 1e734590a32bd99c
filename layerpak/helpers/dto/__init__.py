"""
Domain DTOs (Data Transfer Objects) shared across layers.

Rules for DTO modules:
- Import only stdlib and typing (no layerpak.* imports)
- Contain ONLY dataclass/type definitions
- No I/O, no business logic
"""

from __future__ import annotations

from layerpak.helpers.dto.buildpack_dto import (
    BuildpackDependency,
    BuildpackDependencyLicense,
    BuildpackInfo,
)
from layerpak.helpers.dto.layer_dto import BuildpackPlan, BuildpackPlanEntry, Layer

__all__ = [
    "BuildpackDependency",
    "BuildpackDependencyLicense",
    "BuildpackInfo",
    "BuildpackPlan",
    "BuildpackPlanEntry",
    "Layer",
]
