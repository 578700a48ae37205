"""Command group: numeric literal matching."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from drillctl.commands._base import DrillGroup
from drillctl.services.literal import LiteralService

if TYPE_CHECKING:
    from drillctl.commands._context import AppContext

_LITERAL_EXAMPLES = """\
  drillctl literal check
  drillctl literal check 1E10 5.5 .3
  drillctl literal check -- -5e-4 -70e"""


@click.group(cls=DrillGroup, examples=_LITERAL_EXAMPLES)
def literal() -> None:
    """Match strings against the numeric literal grammar."""


@literal.command(
    examples="""\
  drillctl literal check 1E10 abc
  drillctl --json literal check -- -70e ."""
)
@click.argument("literals", nargs=-1)
@click.pass_obj
def check(app: AppContext, literals: tuple[str, ...]) -> None:
    """Check LITERALS (the reference samples when none are given)."""
    app.emit(LiteralService(app.settings).check(literals))
