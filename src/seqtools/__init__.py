"""seqtools: generic higher-order utilities over finite sequences.

The library surface lives in :mod:`seqtools.domain` and is re-exported
here, so ``from seqtools import foldl, pipeline`` works without touching
the CLI layers.
"""

from __future__ import annotations

__version__ = "0.1.0"

from seqtools.domain.composition import pipeline
from seqtools.domain.errors import (
    EmptySequenceError,
    InvalidArgument,
    InvocationError,
    SeqtoolsError,
    UnknownOperatorError,
)
from seqtools.domain.logic import all_of, none_of, one_of, range_filter
from seqtools.domain.sequences import (
    filter,
    flat_map,
    foldl,
    foldr,
    map,
    recursive_seq,
    reversed,
    sorted,
    zip,
    zip_with_indices,
)
from seqtools.domain.tuples import deconstruct, divmod

__all__ = [
    "EmptySequenceError",
    "InvalidArgument",
    "InvocationError",
    "SeqtoolsError",
    "UnknownOperatorError",
    "__version__",
    "all_of",
    "deconstruct",
    "divmod",
    "filter",
    "flat_map",
    "foldl",
    "foldr",
    "map",
    "none_of",
    "one_of",
    "pipeline",
    "range_filter",
    "recursive_seq",
    "reversed",
    "sorted",
    "zip",
    "zip_with_indices",
]
