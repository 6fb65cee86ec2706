"""Arrays of sizes that are partly fixed up front and partly given at run time,
and the multidimensional extents built on top of them."""

from __future__ import annotations

import numbers
from collections.abc import Iterable, Iterator, Sequence
from typing import Optional

DYNAMIC_EXTENT = -1
"""Sentinel marking a size that is only known at run time."""


def _coerce_value(value: object) -> int:
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Real):
        return int(value)
    raise TypeError(f"expected an integral size, got {type(value).__name__}")


def _validate_static(static_values: Iterable[object]) -> tuple[int, ...]:
    result = []
    for value in static_values:
        if not isinstance(value, numbers.Integral):
            raise TypeError(
                f"static sizes must be integers, got {type(value).__name__}"
            )
        value = int(value)
        if value < 0 and value != DYNAMIC_EXTENT:
            raise ValueError(f"invalid static size {value}")
        result.append(value)
    return tuple(result)


class PartiallyStaticSizes:
    """A fixed-length array where some entries are static and the rest dynamic.

    ``values`` may hold either one value per entry or one value per dynamic
    entry only. When omitted, dynamic entries start at zero.
    """

    __slots__ = ("_static", "_values", "_dynamic_positions")

    def __init__(
        self,
        static_values: Iterable[object],
        values: Optional[Iterable[object]] = None,
    ) -> None:
        self._static = _validate_static(static_values)
        self._dynamic_positions = tuple(
            i for i, s in enumerate(self._static) if s == DYNAMIC_EXTENT
        )
        current = [0 if s == DYNAMIC_EXTENT else s for s in self._static]
        if values is not None:
            given = [_coerce_value(v) for v in values]
            if len(given) == len(self._static):
                for pos, (static, value) in enumerate(zip(self._static, given)):
                    if static != DYNAMIC_EXTENT and static != value:
                        raise ValueError(
                            f"value {value} at position {pos} does not match "
                            f"static size {static}"
                        )
                current = given
            elif len(given) == len(self._dynamic_positions):
                for pos, value in zip(self._dynamic_positions, given):
                    current[pos] = value
            else:
                raise TypeError(
                    f"expected {len(self._static)} or "
                    f"{len(self._dynamic_positions)} values, got {len(given)}"
                )
        self._values = current

    def size(self) -> int:
        """Number of entries."""
        return len(self._static)

    def size_dynamic(self) -> int:
        """Number of entries whose value is only known at run time."""
        return len(self._dynamic_positions)

    def _check_index(self, n: int) -> None:
        if not 0 <= n < len(self._static):
            raise IndexError(f"index {n} out of range for size {len(self._static)}")

    def get(self, n: int) -> int:
        """Value of entry ``n``."""
        self._check_index(n)
        return self._values[n]

    def set(self, n: int, value: object) -> None:
        """Set entry ``n``; static entries only accept their own value."""
        self._check_index(n)
        value = _coerce_value(value)
        static = self._static[n]
        if static != DYNAMIC_EXTENT and static != value:
            raise ValueError(
                f"cannot set static entry {n} (size {static}) to {value}"
            )
        self._values[n] = value

    def static_value(self, n: int) -> int:
        """Static value of entry ``n``, or ``DYNAMIC_EXTENT`` if it is dynamic."""
        self._check_index(n)
        return self._static[n]

    @property
    def static_values(self) -> tuple[int, ...]:
        return self._static

    def __len__(self) -> int:
        return len(self._static)

    def __iter__(self) -> Iterator[int]:
        return iter(tuple(self._values))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PartiallyStaticSizes):
            return NotImplemented
        return self._static == other._static and self._values == other._values

    def __hash__(self) -> int:
        return hash((self._static, tuple(self._values)))

    def __repr__(self) -> str:
        return f"PartiallyStaticSizes({self._static!r}, {tuple(self._values)!r})"


def _is_sequence_argument(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


class Extents:
    """The sizes of a multidimensional index space, each static or dynamic.

    Construct with no size arguments (dynamic extents become zero), with one
    integer per dimension or per dynamic dimension, with a sequence of either
    length, or from another ``Extents`` of the same rank.
    """

    __slots__ = ("_sizes",)

    def __init__(self, static_extents: Iterable[object], *args: object) -> None:
        static = _validate_static(static_extents)
        if not args:
            values: Optional[list[object]] = None
        elif len(args) == 1 and isinstance(args[0], Extents):
            values = self._values_from_extents(static, args[0])
        elif len(args) == 1 and _is_sequence_argument(args[0]):
            values = list(args[0])  # type: ignore[arg-type]
        else:
            values = list(args)
        if values is not None:
            values = [_coerce_value(v) for v in values]
            negative = [v for v in values if v < 0]
            if negative:
                raise ValueError(f"extents must be non-negative, got {negative[0]}")
        self._sizes = PartiallyStaticSizes(static, values)

    @staticmethod
    def _values_from_extents(static: tuple[int, ...], other: Extents) -> list[object]:
        if len(static) != other.rank():
            raise TypeError(
                f"cannot build rank {len(static)} extents from rank {other.rank()}"
            )
        for r, (mine, theirs) in enumerate(zip(static, other.static_extents)):
            if (
                mine != DYNAMIC_EXTENT
                and theirs != DYNAMIC_EXTENT
                and mine != theirs
            ):
                raise TypeError(
                    f"static extent {theirs} in dimension {r} is incompatible "
                    f"with static extent {mine}"
                )
        return [other.extent(r) for r in range(other.rank())]

    @property
    def static_extents(self) -> tuple[int, ...]:
        return self._sizes.static_values

    def rank(self) -> int:
        """Number of dimensions."""
        return self._sizes.size()

    def rank_dynamic(self) -> int:
        """Number of dimensions whose extent is dynamic."""
        return self._sizes.size_dynamic()

    def static_extent(self, r: int) -> int:
        """Static extent of dimension ``r``, or ``DYNAMIC_EXTENT``."""
        return self._sizes.static_value(r)

    def extent(self, r: int) -> int:
        """Actual extent of dimension ``r``."""
        return self._sizes.get(r)

    def is_convertible_to(self, static_extents: Iterable[object]) -> bool:
        """Whether these extents convert implicitly to the given static extents.

        That holds when ranks match and no static target dimension is fed
        from a dynamic or different static dimension.
        """
        target = _validate_static(static_extents)
        if len(target) != self.rank():
            return False
        for theirs, mine in zip(target, self.static_extents):
            if theirs == DYNAMIC_EXTENT:
                continue
            if mine == DYNAMIC_EXTENT or mine != theirs:
                return False
        return True

    def convert(self, static_extents: Iterable[object]) -> Extents:
        """These extents expressed with another set of static extents."""
        return Extents(static_extents, self)

    def __iter__(self) -> Iterator[int]:
        return iter(self._sizes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Extents):
            return NotImplemented
        return tuple(self) == tuple(other)

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __repr__(self) -> str:
        return f"Extents({self.static_extents!r}, {tuple(self)!r})"


def dextents(rank: int, *args: object) -> Extents:
    """Extents of the given rank with every dimension dynamic."""
    if rank < 0:
        raise ValueError(f"rank must be non-negative, got {rank}")
    return Extents((DYNAMIC_EXTENT,) * rank, *args)