"""Subcommand modules for drillctl.

Provides register_commands() which uses deferred imports to keep
``drillctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the four drill groups on the root CLI group."""
    from drillctl.commands.box import box
    from drillctl.commands.graph import graph
    from drillctl.commands.literal import literal
    from drillctl.commands.multiply import multiply

    cli.add_command(graph)
    cli.add_command(box)
    cli.add_command(multiply)
    cli.add_command(literal)
