"""
Inspect command: Show stored layer records.

Read-only. Loads records through LayerStore so the output is exactly what the
next contribution will compare against.
"""

from __future__ import annotations

import argparse

from rich.markup import escape

from layerpak.components.layers.layer_store_comp import LayerStore
from layerpak.helpers.exceptions import LayerpakError
from layerpak.interfaces.cli.cli_ui import InfoPanel, TableDisplay, print_error, print_warning
from layerpak.services.config_svc import ConfigService


def cmd_inspect(args: argparse.Namespace) -> int:
    """Show one layer record, or every record under the layers directory."""
    layers_dir = args.layers_dir or ConfigService().get("layers_dir")
    if not layers_dir:
        print_error("No layers directory given and layers_dir is not configured")
        return 1

    store = LayerStore(layers_dir)
    names = [args.name] if args.name else store.names()

    if not names:
        print_warning(f"No layer records in {escape(str(store.layers_dir))}")
        return 0

    try:
        for name in names:
            layer = store.layer(name)
            types = ", ".join(t for t in ("build", "cache", "launch") if getattr(layer, t)) or "none"
            content = f"""[bold]Path:[/bold] {escape(str(layer.path))}
[bold]Types:[/bold] {types}
[bold]Record:[/bold] {"present" if store.record_path(name).exists() else "missing"}"""
            InfoPanel.show(f"Layer {escape(name)}", content)
            if layer.metadata:
                TableDisplay.show_metadata(layer.metadata)
    except LayerpakError as e:
        print_error(escape(str(e)))
        return 1

    return 0
