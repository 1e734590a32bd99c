"""
Check command: Report whether a dependency layer would be reused.

Runs the same metadata comparison a contribution does, without touching the
layer directory or fetching anything.

Exit codes: 0 = layer reused, 1 = layer would be rebuilt, 2 = error.
"""

from __future__ import annotations

import argparse

from rich.markup import escape

from layerpak.components.buildpack.buildpack_descriptor_comp import load_buildpack_descriptor
from layerpak.components.infrastructure.status_logger_comp import NullStatusLogger
from layerpak.components.layers.dependency_layer_comp import dependency_metadata
from layerpak.components.layers.layer_contributor_comp import LayerContributor
from layerpak.components.layers.layer_store_comp import LayerStore
from layerpak.helpers.exceptions import LayerpakError
from layerpak.interfaces.cli.cli_ui import print_error, print_success, print_warning

EXIT_REUSED = 0
EXIT_REBUILD = 1
EXIT_ERROR = 2


def cmd_check(args: argparse.Namespace) -> int:
    try:
        descriptor = load_buildpack_descriptor(args.descriptor)
        dependency = descriptor.dependency(args.dependency_id, stack=args.stack)
        if dependency is None:
            print_error(f"No dependency {escape(args.dependency_id)} in {escape(str(args.descriptor))}")
            return EXIT_ERROR

        layer = LayerStore(args.layers_dir).layer(args.layer or dependency.id)
        contributor = LayerContributor(
            f"{dependency.name} {dependency.version}",
            dependency_metadata(dependency),
            layer,
            logger=NullStatusLogger(),
        )
        cached = contributor.is_cached()
    except LayerpakError as e:
        print_error(escape(str(e)))
        return EXIT_ERROR

    label = escape(f"{dependency.name or dependency.id} {dependency.version}")
    if cached:
        print_success(f"{label}: layer {escape(layer.name)} would be reused")
        return EXIT_REUSED

    print_warning(f"{label}: layer {escape(layer.name)} would be rebuilt")
    return EXIT_REBUILD
