"""
Layers package.
"""

from .dependency_layer_comp import (
    DependencyCache,
    DependencyLayerContributor,
    DependencyLayerFunc,
    dependency_metadata,
    dependency_plan_entry,
)
from .helper_layer_comp import HelperLayerContributor, HelperLayerFunc, helper_metadata
from .layer_contributor_comp import DEFAULT_DIRECTORY_MODE, LayerContributor, LayerFunc
from .layer_store_comp import LayerStore

__all__ = [
    "DEFAULT_DIRECTORY_MODE",
    "DependencyCache",
    "DependencyLayerContributor",
    "DependencyLayerFunc",
    "HelperLayerContributor",
    "HelperLayerFunc",
    "LayerContributor",
    "LayerFunc",
    "LayerStore",
    "dependency_metadata",
    "dependency_plan_entry",
    "helper_metadata",
]
