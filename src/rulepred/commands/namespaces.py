"""Commands: namespace inspection."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rulepred.commands._base import RulePredCommand
from rulepred.services.filter import FilterService

if TYPE_CHECKING:
    from rulepred.commands._context import AppContext


@click.command(
    cls=RulePredCommand,
    examples="""\
  rulepred namespaces
  rulepred -q namespaces
  rulepred --rules automation/rules.yaml namespaces""",
)
@click.pass_obj
def namespaces(app: AppContext) -> None:
    """Count rules per namespace."""
    app.emit(FilterService(app.catalog).list_namespaces())


@click.command(
    cls=RulePredCommand,
    examples="""\
  rulepred namespace hue:evening-lights
  rulepred -q namespace standalone-rule""",
)
@click.argument("uid")
@click.pass_obj
def namespace(app: AppContext, uid: str) -> None:
    """Show the namespace part of a rule UID."""
    app.emit(FilterService(app.catalog).get_namespace(uid))
