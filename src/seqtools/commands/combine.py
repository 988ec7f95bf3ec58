"""Commands: zip, enumerate, iterate, deconstruct, divmod."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from seqtools.commands._base import SeqCommand
from seqtools.commands._params import ELEMENT, SEQUENCE
from seqtools.domain.operators import names
from seqtools.domain.types import OperatorKind

if TYPE_CHECKING:
    from seqtools.commands._context import AppContext


@click.command(
    "zip",
    cls=SeqCommand,
    examples="""\
  seqtools zip 1,2,3 4,5,6
  seqtools zip 1,2,3 4,5 7,8,9""",
)
@click.argument("sequences", type=SEQUENCE, nargs=-1, required=True)
@click.pass_obj
def zip_cmd(app: AppContext, sequences: tuple[list[Any], ...]) -> None:
    """Pair up SEQUENCES positionally, truncating to the shortest."""
    app.emit(app.service.zip(*sequences))


@click.command(
    "enumerate",
    cls=SeqCommand,
    examples="""\
  seqtools enumerate 8,4,9,1""",
)
@click.argument("values", type=SEQUENCE)
@click.option("--sorted", "sort_first", is_flag=True, help="Sort VALUES before indexing.")
@click.pass_obj
def enumerate_cmd(app: AppContext, values: list[Any], sort_first: bool) -> None:
    """Pair each element of VALUES with its index."""
    if sort_first:
        ordered = app.service.sorted(values)
        if not ordered.ok:
            app.emit(ordered)
        values = ordered.data["result"]
    app.emit(app.service.zip_with_indices(values))


@click.command(
    cls=SeqCommand,
    examples="""\
  seqtools iterate 1 double 5
  seqtools iterate 0 inc 1""",
)
@click.argument("init", type=ELEMENT)
@click.argument("transform", type=click.Choice(names(OperatorKind.TRANSFORM)))
@click.argument("count", type=int)
@click.pass_obj
def iterate(app: AppContext, init: Any, transform: str, count: int) -> None:
    """Build COUNT elements starting at INIT, each TRANSFORM of the previous."""
    app.emit(app.service.recursive_seq(init, transform, count))


@click.command(
    cls=SeqCommand,
    examples="""\
  seqtools deconstruct 3 2,1,2,3,4,5""",
)
@click.argument("size", type=int)
@click.argument("values", type=SEQUENCE)
@click.pass_obj
def deconstruct(app: AppContext, size: int, values: list[Any]) -> None:
    """Take the first SIZE elements of VALUES as a tuple."""
    app.emit(app.service.deconstruct(values, size))


@click.command(
    "divmod",
    cls=SeqCommand,
    examples="""\
  seqtools divmod 7 2
  seqtools divmod -- -7 2""",
)
@click.argument("x", type=ELEMENT)
@click.argument("d", type=ELEMENT)
@click.pass_obj
def divmod_cmd(app: AppContext, x: Any, d: Any) -> None:
    """Quotient (truncated toward zero) and remainder of X / D."""
    app.emit(app.service.divmod(x, d))
