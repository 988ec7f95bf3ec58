"""Commands: element-wise transforms: map, filter, flat-map, sort, reverse, pipeline."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from seqtools.commands._base import SeqCommand
from seqtools.commands._params import SEQUENCE
from seqtools.domain.operators import names
from seqtools.domain.types import OperatorKind

if TYPE_CHECKING:
    from seqtools.commands._context import AppContext

TRANSFORM = click.Choice(names(OperatorKind.TRANSFORM))


@click.command(
    "map",
    cls=SeqCommand,
    examples="""\
  seqtools map square 1,2,3
  seqtools --type float map half 1,2,3
  seqtools --json map str 10,20""",
)
@click.argument("transform", type=TRANSFORM)
@click.argument("values", type=SEQUENCE)
@click.pass_obj
def map_cmd(app: AppContext, transform: str, values: list[Any]) -> None:
    """Apply TRANSFORM to every element of VALUES."""
    app.emit(app.service.map(transform, values))


@click.command(
    "filter",
    cls=SeqCommand,
    examples="""\
  seqtools filter even 1,2,3,4
  seqtools --type str filter truthy 'a,,b'""",
)
@click.argument("predicate", type=click.Choice(names(OperatorKind.PREDICATE)))
@click.argument("values", type=SEQUENCE)
@click.pass_obj
def filter_cmd(app: AppContext, predicate: str, values: list[Any]) -> None:
    """Keep the elements of VALUES for which PREDICATE holds."""
    app.emit(app.service.filter(predicate, values))


@click.command(
    "flat-map",
    cls=SeqCommand,
    examples="""\
  seqtools flat-map range3 1,2,3,4
  seqtools flat-map dup 1,2""",
)
@click.argument("expander", type=click.Choice(names(OperatorKind.EXPANDER)))
@click.argument("values", type=SEQUENCE)
@click.pass_obj
def flat_map(app: AppContext, expander: str, values: list[Any]) -> None:
    """Expand each element of VALUES with EXPANDER and concatenate the results."""
    app.emit(app.service.flat_map(expander, values))


@click.command(
    cls=SeqCommand,
    examples="""\
  seqtools sort 8,4,9,1
  seqtools sort --desc 8,4,9,1
  seqtools --type str sort pear,apple,fig""",
)
@click.argument("values", type=SEQUENCE)
@click.option("--desc", is_flag=True, help="Sort in descending order.")
@click.pass_obj
def sort(app: AppContext, values: list[Any], desc: bool) -> None:
    """Return VALUES in ascending order."""
    app.emit(app.service.sorted(values, reverse=desc))


@click.command(
    cls=SeqCommand,
    examples="""\
  seqtools reverse 1,2,3""",
)
@click.argument("values", type=SEQUENCE)
@click.pass_obj
def reverse(app: AppContext, values: list[Any]) -> None:
    """Return VALUES in reverse order."""
    app.emit(app.service.reversed(values))


@click.command(
    cls=SeqCommand,
    examples="""\
  seqtools pipeline -f inc -f square 1,2,3
  seqtools pipeline -f abs -f str -f len -- -100,7""",
)
@click.option(
    "-f",
    "--stage",
    "stages",
    type=TRANSFORM,
    multiple=True,
    required=True,
    help="Transform stage; repeat to compose left to right.",
)
@click.argument("values", type=SEQUENCE)
@click.pass_obj
def pipeline(app: AppContext, stages: tuple[str, ...], values: list[Any]) -> None:
    """Map the left-to-right composition of the --stage transforms over VALUES."""
    app.emit(app.service.pipeline(list(stages), values))
