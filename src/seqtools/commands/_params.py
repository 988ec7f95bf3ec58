"""Click parameter types that parse command-line sequences and elements.

Both types read ``[parse]`` settings (element type, separator) from the
AppContext on ``ctx.obj``, so ``--type float`` or ``seqtools.toml``
changes how every sequence argument is read.
"""

from __future__ import annotations

from typing import Any

import click

from seqtools.config.models import ParseConfig

_CONVERTERS: dict[str, type] = {"int": int, "float": float, "str": str}


def _parse_config(ctx: click.Context | None) -> ParseConfig:
    if ctx is not None:
        app = ctx.find_root().obj
        settings = getattr(app, "settings", None)
        if settings is not None:
            return settings.parse
    return ParseConfig()


def convert_element(raw: str, config: ParseConfig) -> Any:
    """Convert one raw token to the configured element type.

    Raises:
        ValueError: *raw* is not a valid literal of the element type.
    """
    token = raw.strip() if config.strip else raw
    return _CONVERTERS[config.element_type](token)


def split_sequence(raw: str, config: ParseConfig) -> list[Any]:
    """Split *raw* on the configured separator and convert each item.

    An empty (or all-whitespace) string is the empty sequence.
    """
    if not raw.strip():
        return []
    return [convert_element(item, config) for item in raw.split(config.separator)]


class ElementType(click.ParamType):
    """A single element, e.g. a fold seed or a range bound."""

    name = "element"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> Any:
        if not isinstance(value, str):
            return value
        config = _parse_config(ctx)
        try:
            return convert_element(value, config)
        except ValueError:
            self.fail(f"{value!r} is not a valid {config.element_type}", param, ctx)


class SequenceType(click.ParamType):
    """A separator-delimited sequence, e.g. ``1,2,3``."""

    name = "sequence"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> Any:
        if not isinstance(value, str):
            return list(value)
        config = _parse_config(ctx)
        try:
            return split_sequence(value, config)
        except ValueError:
            self.fail(
                f"{value!r} is not a {config.separator!r}-separated sequence of "
                f"{config.element_type}",
                param,
                ctx,
            )


ELEMENT = ElementType()
SEQUENCE = SequenceType()
