"""Command: the retrying multiplication drill."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from drillctl.commands._base import DrillCommand
from drillctl.services.multiply import MultiplyService

if TYPE_CHECKING:
    from drillctl.commands._context import AppContext


class NumberType(click.ParamType):
    """Parses an int when possible, otherwise a float."""

    name = "number"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> Any:
        if isinstance(value, (int, float)):
            return value
        try:
            return int(value)
        except ValueError:
            pass
        try:
            return float(value)
        except ValueError:
            self.fail(f"{value!r} is not a number", param, ctx)


NUMBER = NumberType()


@click.command(
    cls=DrillCommand,
    examples="""\
  drillctl multiply 12 5
  drillctl multiply 12 5 --fault-rate 0.5 --seed 7
  drillctl multiply 12 5 --max-attempts 3
  drillctl -v multiply 12 5""",
)
@click.argument("a", type=NUMBER)
@click.argument("b", type=NUMBER)
@click.option(
    "--fault-rate",
    type=click.FloatRange(0.0, 1.0),
    default=None,
    help="Probability that an attempt fails (default from [multiply]).",
)
@click.option(
    "--max-attempts",
    type=click.IntRange(min=0),
    default=None,
    help="Give up after N attempts; 0 retries forever.",
)
@click.option("--seed", type=int, default=None, help="Seed the fault generator.")
@click.pass_obj
def multiply(
    app: AppContext,
    a: int | float,
    b: int | float,
    fault_rate: float | None,
    max_attempts: int | None,
    seed: int | None,
) -> None:
    """Multiply A and B on an unreliable unit, retrying unit failures."""
    settings = app.settings
    overrides: dict[str, Any] = {}
    if fault_rate is not None:
        overrides["fault_rate"] = fault_rate
    if seed is not None:
        overrides["seed"] = seed
    if overrides:
        section = settings.multiply.model_copy(update=overrides)
        settings = settings.model_copy(update={"multiply": section})
    app.emit(MultiplyService(settings).multiply(a, b, max_attempts=max_attempts))
