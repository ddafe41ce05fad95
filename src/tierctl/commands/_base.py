"""Click building blocks shared by every tierctl command.

- :class:`TierCommand` / :class:`TierGroup` accept an ``examples`` string and
  expose it through an eager ``--examples`` flag, keeping ``--help`` short.
- :func:`yes_option` and :func:`confirm_destructive` guard commands that
  overwrite the saved board (reset, restore).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar

import click

if TYPE_CHECKING:
    from tierctl.commands._context import AppContext

_F = TypeVar("_F", bound=Callable[..., Any])


def _attach_examples(cmd: click.Command, examples: str) -> None:
    def _show(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=_show,
            help="Show usage examples.",
        )
    )


class TierCommand(click.Command):
    """Click Command that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _attach_examples(self, examples)


class TierGroup(click.Group):
    """Click Group whose subcommands default to :class:`TierCommand`."""

    command_class = TierCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _attach_examples(self, examples)


def yes_option(func: _F) -> _F:
    """Add ``-y/--yes`` to skip the overwrite confirmation."""
    return click.option(
        "-y",
        "--yes",
        "assume_yes",
        is_flag=True,
        help="Do not ask for confirmation.",
    )(func)


def confirm_destructive(app: AppContext, message: str, *, assume_yes: bool) -> None:
    """Ask before overwriting the board; abort with exit code 1 on refusal.

    Skipped with ``--yes``, and refused outright in non-interactive mode
    (``--no-interact``, ``--json``, or no TTY) so scripts never block.
    """
    if assume_yes:
        return
    if not app.interactive:
        click.echo(f"{message} Re-run with --yes to confirm.", err=True)
        raise SystemExit(1)
    if not click.confirm(message, default=False):
        click.echo("Aborted.", err=True)
        raise SystemExit(1)
