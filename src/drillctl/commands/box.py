"""Command group: the locked box drill."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from drillctl.commands._base import DrillGroup
from drillctl.services.box import BoxService

if TYPE_CHECKING:
    from drillctl.commands._context import AppContext

_BOX_EXAMPLES = """\
  drillctl box stash "gold piece"
  drillctl box stash "gold piece" --fail "Pirates on the horizon! Abort!"
  drillctl box peek
  drillctl box inspect"""


@click.group(cls=DrillGroup, examples=_BOX_EXAMPLES)
def box() -> None:
    """Work with a box whose content is only reachable while unlocked.

    Each invocation starts from a fresh, locked box holding the
    ``[box] contents`` configured in drillctl.toml.
    """


@box.command(
    examples="""\
  drillctl box stash "gold piece" "silver piece"
  drillctl --json box stash "gold piece" --fail Pirates"""
)
@click.argument("items", nargs=-1, required=True)
@click.option("--fail", "fail_with", default=None, help="Abort the stash with this message.")
@click.pass_obj
def stash(app: AppContext, items: tuple[str, ...], fail_with: str | None) -> None:
    """Put ITEMS in the box, re-locking it afterwards."""
    app.emit(BoxService(app.settings).stash(items, fail_with=fail_with))


@box.command(
    examples="""\
  drillctl box peek
  drillctl --json box peek"""
)
@click.pass_obj
def peek(app: AppContext) -> None:
    """Show the box content through a scoped unlock."""
    app.emit(BoxService(app.settings).peek())


@box.command(
    examples="""\
  drillctl box inspect"""
)
@click.pass_obj
def inspect(app: AppContext) -> None:
    """Read the box content without unlocking it (always denied)."""
    app.emit(BoxService(app.settings).inspect())
