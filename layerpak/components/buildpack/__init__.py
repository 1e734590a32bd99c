"""
Buildpack package.
"""

from .buildpack_descriptor_comp import BuildpackDescriptor, load_buildpack_descriptor, parse_buildpack_descriptor

__all__ = [
    "BuildpackDescriptor",
    "load_buildpack_descriptor",
    "parse_buildpack_descriptor",
]
