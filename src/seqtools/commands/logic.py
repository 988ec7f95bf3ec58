"""Commands: boolean aggregation and half-open range filtering."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from seqtools.commands._base import SeqCommand
from seqtools.commands._params import ELEMENT, SEQUENCE

if TYPE_CHECKING:
    from seqtools.commands._context import AppContext


def _logic_command(mode: str, summary: str) -> click.Command:
    @click.command(
        f"{mode}-of",
        cls=SeqCommand,
        help=summary,
        examples=f"""\
  seqtools {mode}-of 1,1,0
  seqtools --type str {mode}-of 'a,,b'""",
    )
    @click.argument("values", type=SEQUENCE)
    @click.pass_obj
    def command(app: AppContext, values: list[Any]) -> None:
        app.emit(app.service.logic(mode, values))

    return command


all_of = _logic_command("all", "True iff every element of VALUES is truthy.")
one_of = _logic_command("one", "True iff at least one element of VALUES is truthy.")
none_of = _logic_command("none", "True iff every element of VALUES is falsy.")


@click.command(
    "range-filter",
    cls=SeqCommand,
    examples="""\
  seqtools range-filter 1 4 0,1,2,3,4
  seqtools --type str range-filter b d a,b,c,d""",
)
@click.argument("lower", type=ELEMENT)
@click.argument("upper", type=ELEMENT)
@click.argument("values", type=SEQUENCE)
@click.pass_obj
def range_filter(app: AppContext, lower: Any, upper: Any, values: list[Any]) -> None:
    """Keep the elements of VALUES in the half-open interval [LOWER, UPPER)."""
    app.emit(app.service.range_filter(lower, upper, values))
