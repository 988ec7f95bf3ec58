"""Commands: left and right folds."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from seqtools.commands._base import SeqCommand
from seqtools.commands._params import ELEMENT, SEQUENCE
from seqtools.domain.operators import names
from seqtools.domain.types import OperatorKind

if TYPE_CHECKING:
    from seqtools.commands._context import AppContext

BINARY = click.Choice(names(OperatorKind.BINARY))


@click.command(
    cls=SeqCommand,
    examples="""\
  seqtools foldl add 1,2,3
  seqtools foldl sub 1,2,3 --init 10
  seqtools --type str foldl concat a,b,c""",
)
@click.argument("op", type=BINARY)
@click.argument("values", type=SEQUENCE)
@click.option("--init", type=ELEMENT, default=None, help="Seed value (default: first element).")
@click.pass_obj
def foldl(app: AppContext, op: str, values: list[Any], init: Any | None) -> None:
    """Reduce VALUES left to right with OP."""
    app.emit(app.service.foldl(op, values, init))


@click.command(
    cls=SeqCommand,
    examples="""\
  seqtools foldr sub 1,2,3
  seqtools --type str foldr concat a,b,c --init z""",
)
@click.argument("op", type=BINARY)
@click.argument("values", type=SEQUENCE)
@click.option("--init", type=ELEMENT, default=None, help="Seed value (default: last element).")
@click.pass_obj
def foldr(app: AppContext, op: str, values: list[Any], init: Any | None) -> None:
    """Reduce VALUES right to left with OP (accumulator first)."""
    app.emit(app.service.foldr(op, values, init))
