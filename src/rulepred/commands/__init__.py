"""Subcommand modules for rulepred.

Provides register_commands() which uses deferred imports to keep
``rulepred --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from rulepred.commands.filter import filter_cmd
    from rulepred.commands.namespaces import namespace, namespaces

    cli.add_command(filter_cmd)
    cli.add_command(namespaces)
    cli.add_command(namespace)
