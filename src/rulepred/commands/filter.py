"""Command: select rules by namespace and tags."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rulepred.commands._base import RulePredCommand
from rulepred.services.filter import FilterService

if TYPE_CHECKING:
    from rulepred.commands._context import AppContext


@click.command(
    "filter",
    cls=RulePredCommand,
    examples="""\
  rulepred filter --namespace hue
  rulepred filter --namespace hue --namespace zwave --no-namespace
  rulepred filter --tag lighting --tag evening
  rulepred filter --tag lighting --tag security --match any
  rulepred filter --untagged
  rulepred filter --tagged --exclude-tag experimental
  rulepred --json filter --namespace hue""",
)
@click.option(
    "-n", "--namespace", "namespaces", multiple=True, help="Keep rules in this namespace."
)
@click.option(
    "--no-namespace",
    "include_unnamespaced",
    is_flag=True,
    help="Also keep rules without a namespace.",
)
@click.option("-t", "--tag", "tags", multiple=True, help="Tag to match (repeatable).")
@click.option(
    "--match",
    "tag_match",
    type=click.Choice(["all", "any"]),
    default=None,
    help="Require all given tags or any of them. Defaults to [filter] tag_match.",
)
@click.option("--tagged", is_flag=True, help="Keep only rules with at least one tag.")
@click.option("--untagged", is_flag=True, help="Keep only rules without tags.")
@click.option("--exclude-tag", "exclude_tags", multiple=True, help="Drop rules with this tag.")
@click.pass_obj
def filter_cmd(
    app: AppContext,
    namespaces: tuple[str, ...],
    include_unnamespaced: bool,
    tags: tuple[str, ...],
    tag_match: str | None,
    tagged: bool,
    untagged: bool,
    exclude_tags: tuple[str, ...],
) -> None:
    """List rules matching every given criterion."""
    if tagged and untagged:
        raise click.UsageError("--tagged and --untagged are mutually exclusive.")
    presence: bool | None = None
    if tagged or untagged:
        presence = tagged

    svc = FilterService(app.catalog)
    result = svc.filter_rules(
        namespaces=list(namespaces),
        include_unnamespaced=include_unnamespaced,
        tags=list(tags) if tags else None,
        tag_match=tag_match or app.settings.filter.tag_match,
        tagged=presence,
        exclude_tags=list(exclude_tags),
    )
    app.emit(result)
