"""Exception taxonomy for seqtools.

Every error is raised synchronously by the call that detects it. Nothing
is retried or recovered internally, and no operation returns a partial
result on failure.
"""

from __future__ import annotations

from collections.abc import Iterable


class SeqtoolsError(Exception):
    """Base class for all errors raised by seqtools itself."""


class EmptySequenceError(SeqtoolsError, ValueError):
    """An unseeded fold was asked to reduce an empty sequence."""


class InvalidArgument(SeqtoolsError, ValueError):
    """An argument is outside the domain an operation accepts."""


class UnknownOperatorError(InvalidArgument):
    """A named callable was looked up but is not registered."""

    def __init__(self, kind: str, name: str, choices: Iterable[str]) -> None:
        self.kind = kind
        self.name = name
        self.choices = sorted(choices)
        super().__init__(f"Unknown {kind} '{name}' (choose from: {', '.join(self.choices)})")


class InvocationError(SeqtoolsError):
    """A caller-supplied callable raised while an operation was running.

    The library functions never raise this: an exception from a callable
    passed to ``map``/``filter``/``foldl`` propagates unmodified. Adapters
    that resolve callables by name (the service layer) wrap them so the
    failure can be reported with the callable's name attached.
    """

    def __init__(self, name: str, cause: BaseException) -> None:
        self.name = name
        self.cause = cause
        super().__init__(f"'{name}' failed: {type(cause).__name__}: {cause}")
