"""
Dependencies command: List dependencies declared in a buildpack.toml.
"""

from __future__ import annotations

import argparse

from rich.markup import escape

from layerpak.components.buildpack.buildpack_descriptor_comp import load_buildpack_descriptor
from layerpak.helpers.exceptions import BuildpackDescriptorError
from layerpak.interfaces.cli.cli_ui import TableDisplay, print_error


def cmd_dependencies(args: argparse.Namespace) -> int:
    """Print a table of declared dependencies, optionally filtered by stack."""
    try:
        descriptor = load_buildpack_descriptor(args.descriptor)
    except BuildpackDescriptorError as e:
        print_error(escape(str(e)))
        return 1

    deps = [d for d in descriptor.dependencies if args.stack is None or d.supports_stack(args.stack)]
    title = f"{descriptor.info.name or descriptor.info.id} {descriptor.info.version}".strip()
    TableDisplay.show_dependencies(deps, title=escape(title))
    return 0
