"""Click base classes with an ``--examples`` flag.

``--help`` stays short; ``--examples`` prints canned invocations for a
command or group and exits.  Groups built with :class:`DrillGroup` hand
the same behaviour to their subcommands and nested groups.
"""

from __future__ import annotations

from typing import Any

import click


class _ExamplesMixin:
    """Accepts ``examples=`` and installs an eager ``--examples`` option."""

    params: list[click.Parameter]

    def _install_examples(self, examples: str | None) -> None:
        self.examples = examples
        if not examples:
            return

        def show(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
            if not value or ctx.resilient_parsing:
                return
            click.echo(f"Examples for '{ctx.command_path}':\n")
            click.echo(examples)
            ctx.exit(0)

        self.params.append(
            click.Option(
                ["--examples"],
                is_flag=True,
                expose_value=False,
                is_eager=True,
                callback=show,
                help="Show usage examples.",
            )
        )


class DrillCommand(_ExamplesMixin, click.Command):
    """Click Command that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._install_examples(examples)


class DrillGroup(_ExamplesMixin, click.Group):
    """Click Group that supports an ``--examples`` flag.

    Subcommands default to :class:`DrillCommand` and nested groups to
    :class:`DrillGroup`, so ``examples=`` works without ``cls=``.
    """

    command_class = DrillCommand
    group_class = type

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._install_examples(examples)
