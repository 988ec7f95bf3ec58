"""SequenceService: evaluate library operations on parsed input.

Each method takes already-parsed values plus operator names, resolves the
names against the operator registry, runs the library function and returns
a ServiceResult whose ``data["result"]`` is the operation's output.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from seqtools.domain import composition, logic, sequences, tuples
from seqtools.domain.errors import InvalidArgument
from seqtools.domain.types import OperatorKind
from seqtools.services.base import BaseService
from seqtools.services.result import ServiceResult
from seqtools.services.telemetry import traced

_LOGIC_MODES = {
    "all": logic.all_of,
    "one": logic.one_of,
    "none": logic.none_of,
}


def _listed(values: list[Any]) -> dict[str, Any]:
    return {"result": values, "count": len(values)}


class SequenceService(BaseService):
    """Service-layer front for the sequence utility library."""

    @traced
    def map(self, transform: str, values: Sequence[Any]) -> ServiceResult:
        def compute() -> dict[str, Any]:
            fn = self._named(OperatorKind.TRANSFORM, transform)
            return _listed(sequences.map(fn, values))

        return self._run("map", compute)

    @traced
    def filter(self, predicate: str, values: Sequence[Any]) -> ServiceResult:
        def compute() -> dict[str, Any]:
            pred = self._named(OperatorKind.PREDICATE, predicate)
            kept = sequences.filter(pred, values)
            return {**_listed(kept), "dropped": len(values) - len(kept)}

        return self._run("filter", compute)

    @traced
    def flat_map(self, expander: str, values: Sequence[Any]) -> ServiceResult:
        def compute() -> dict[str, Any]:
            fn = self._named(OperatorKind.EXPANDER, expander)
            return _listed(sequences.flat_map(fn, values))

        return self._run("flat_map", compute)

    @traced
    def foldl(self, op: str, values: Sequence[Any], init: Any | None = None) -> ServiceResult:
        """Left fold; *init* of None means "seed from the first element"."""

        def compute() -> dict[str, Any]:
            fn = self._named(OperatorKind.BINARY, op)
            if init is None:
                return {"result": sequences.foldl(fn, values)}
            return {"result": sequences.foldl(fn, values, init)}

        return self._run("foldl", compute)

    @traced
    def foldr(self, op: str, values: Sequence[Any], init: Any | None = None) -> ServiceResult:
        """Right fold; *init* of None means "seed from the last element"."""

        def compute() -> dict[str, Any]:
            fn = self._named(OperatorKind.BINARY, op)
            if init is None:
                return {"result": sequences.foldr(fn, values)}
            return {"result": sequences.foldr(fn, values, init)}

        return self._run("foldr", compute)

    @traced
    def zip(self, *seqs: Sequence[Any]) -> ServiceResult:
        warnings: list[str] = []

        def compute() -> dict[str, Any]:
            lengths = [len(s) for s in seqs]
            if len(set(lengths)) > 1:
                warnings.append(
                    f"Inputs have lengths {lengths}; truncated to {min(lengths)}"
                )
            return _listed(sequences.zip(*seqs))

        return self._run("zip", compute, warnings=warnings)

    @traced
    def zip_with_indices(self, values: Sequence[Any]) -> ServiceResult:
        return self._run("zip_with_indices", lambda: _listed(sequences.zip_with_indices(values)))

    @traced
    def recursive_seq(self, init: Any, transform: str, count: int) -> ServiceResult:
        def compute() -> dict[str, Any]:
            fn = self._named(OperatorKind.TRANSFORM, transform)
            return _listed(sequences.recursive_seq(init, fn, count))

        return self._run("recursive_seq", compute)

    @traced
    def sorted(self, values: Sequence[Any], *, reverse: bool = False) -> ServiceResult:
        def compute() -> dict[str, Any]:
            try:
                return _listed(sequences.sorted(values, reverse=reverse))
            except TypeError as exc:
                raise InvalidArgument(f"Elements are not mutually ordered: {exc}") from exc

        return self._run("sorted", compute)

    @traced
    def reversed(self, values: Sequence[Any]) -> ServiceResult:
        return self._run("reversed", lambda: _listed(sequences.reversed(values)))

    @traced
    def pipeline(self, transforms: Sequence[str], values: Sequence[Any]) -> ServiceResult:
        """Compose *transforms* left to right and map the result over *values*."""

        def compute() -> dict[str, Any]:
            stages = [self._named(OperatorKind.TRANSFORM, name) for name in transforms]
            fn = composition.pipeline(*stages)
            return {**_listed(sequences.map(fn, values)), "stages": list(transforms)}

        return self._run("pipeline", compute)

    @traced
    def deconstruct(self, values: Sequence[Any], n: int) -> ServiceResult:
        return self._run(
            "deconstruct", lambda: {"result": tuples.deconstruct(values, n), "size": n}
        )

    @traced
    def logic(self, mode: str, values: Sequence[Any]) -> ServiceResult:
        """Evaluate ``all_of``/``one_of``/``none_of`` over *values* as arguments."""
        op = f"{mode}_of"

        def compute() -> dict[str, Any]:
            try:
                fn = _LOGIC_MODES[mode]
            except KeyError:
                raise InvalidArgument(
                    f"Unknown logic mode '{mode}' (choose from: all, one, none)"
                ) from None
            return {"result": fn(*values)}

        return self._run(op, compute)

    @traced
    def range_filter(self, lower: Any, upper: Any, values: Sequence[Any]) -> ServiceResult:
        """Keep the values inside the half-open interval ``[lower, upper)``."""

        def compute() -> dict[str, Any]:
            in_range = logic.range_filter(lower, upper)
            try:
                kept = sequences.filter(in_range, values)
            except TypeError as exc:
                raise InvalidArgument(f"Bounds are not comparable with the values: {exc}") from exc
            return {**_listed(kept), "interval": [lower, upper]}

        return self._run("range_filter", compute)

    @traced
    def divmod(self, x: Any, d: Any) -> ServiceResult:
        def compute() -> dict[str, Any]:
            try:
                q, r = tuples.divmod(x, d)
            except TypeError as exc:
                raise InvalidArgument(f"divmod needs numeric operands: {exc}") from exc
            return {"result": [q, r], "quotient": q, "remainder": r}

        return self._run("divmod", compute)
