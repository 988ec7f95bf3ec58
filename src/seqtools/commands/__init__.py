"""Subcommand modules for seqtools.

Provides register_commands(), which imports each command module only when
the CLI is assembled.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register every command on the root CLI group, grouped by module."""
    from seqtools.commands.combine import (
        deconstruct,
        divmod_cmd,
        enumerate_cmd,
        iterate,
        zip_cmd,
    )
    from seqtools.commands.fold import foldl, foldr
    from seqtools.commands.logic import all_of, none_of, one_of, range_filter
    from seqtools.commands.transform import (
        filter_cmd,
        flat_map,
        map_cmd,
        pipeline,
        reverse,
        sort,
    )

    for command in (
        map_cmd,
        filter_cmd,
        flat_map,
        sort,
        reverse,
        pipeline,
        foldl,
        foldr,
        zip_cmd,
        enumerate_cmd,
        iterate,
        deconstruct,
        divmod_cmd,
        all_of,
        one_of,
        none_of,
        range_filter,
    ):
        cli.add_command(command)
