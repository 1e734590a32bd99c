"""
Commands package.
"""

from .check_cli import cmd_check
from .dependencies_cli import cmd_dependencies
from .inspect_cli import cmd_inspect

__all__ = [
    "cmd_check",
    "cmd_dependencies",
    "cmd_inspect",
]
