"""A layout mapping that places each dimension at an arbitrary stride."""

from __future__ import annotations

import math
import numbers
from collections.abc import Iterable
from typing import Any

from ndlayout.static_array import Extents

__all__ = ["LayoutStrideMapping"]


def _coerce_integral(value: object, what: str) -> int:
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Real):
        return int(value)
    raise TypeError(f"{what} must be integral, got {type(value).__name__}")


def _flag(obj: Any, name: str) -> bool:
    attr = getattr(obj, name, None)
    if attr is None or not callable(attr):
        return False
    return bool(attr())


def _extents_of(mapping: Any) -> Extents:
    ext = getattr(mapping, "extents", None)
    if ext is None:
        raise TypeError(f"{type(mapping).__name__} has no extents")
    if callable(ext):
        ext = ext()
    if not isinstance(ext, Extents):
        raise TypeError(f"{type(mapping).__name__} does not describe its extents")
    return ext


def _is_strided_mapping(obj: Any) -> bool:
    return (
        hasattr(obj, "extents")
        and callable(getattr(obj, "stride", None))
        and callable(obj)
        and _flag(obj, "is_always_strided")
    )


class LayoutStrideMapping:
    """Maps a multidimensional index to ``sum(index[r] * stride[r])``."""

    __slots__ = ("_extents", "_strides")

    def __init__(self, extents: Extents, strides: Iterable[object]) -> None:
        if not isinstance(extents, Extents):
            raise TypeError(
                f"extents must be an Extents, got {type(extents).__name__}"
            )
        values = tuple(_coerce_integral(s, "stride") for s in strides)
        if len(values) != extents.rank():
            raise TypeError(
                f"expected {extents.rank()} strides, got {len(values)}"
            )
        self._extents = extents
        self._strides = values

    @classmethod
    def from_mapping(cls, other: Any) -> LayoutStrideMapping:
        """Build a strided mapping from any unique, strided layout mapping."""
        if not (_is_strided_mapping(other) and _flag(other, "is_always_unique")):
            raise TypeError(
                f"{type(other).__name__} is not an always unique, always "
                "strided layout mapping"
            )
        ext = _extents_of(other)
        copied = Extents(ext.static_extents, ext)
        return cls(copied, [other.stride(r) for r in range(ext.rank())])

    def extents(self) -> Extents:
        """The extents of the index space."""
        return self._extents

    def strides(self) -> tuple[int, ...]:
        """The stride of every dimension."""
        return self._strides

    def stride(self, r: int) -> int:
        """Stride of dimension ``r``."""
        if not 0 <= r < len(self._strides):
            raise IndexError(
                f"dimension {r} out of range for rank {len(self._strides)}"
            )
        return self._strides[r]

    def required_span_size(self) -> int:
        """Smallest number of elements a backing buffer must hold."""
        if any(e == 0 for e in self._extents):
            return 0
        return 1 + sum((e - 1) * s for e, s in zip(self._extents, self._strides))

    def __call__(self, *args: object) -> int:
        if len(args) != len(self._strides):
            raise TypeError(
                f"expected {len(self._strides)} indices, got {len(args)}"
            )
        indices = []
        for idx in args:
            if not isinstance(idx, numbers.Integral):
                raise TypeError(
                    f"indices must be integers, got {type(idx).__name__}"
                )
            indices.append(int(idx))
        return sum(i * s for i, s in zip(indices, self._strides))

    @classmethod
    def is_always_unique(cls) -> bool:
        return True

    @classmethod
    def is_always_exhaustive(cls) -> bool:
        return False

    @classmethod
    def is_always_strided(cls) -> bool:
        return True

    def is_unique(self) -> bool:
        return True

    def is_exhaustive(self) -> bool:
        """Whether every element of the required span is reached."""
        return self.required_span_size() == math.prod(self._extents)

    def is_strided(self) -> bool:
        return True

    def __eq__(self, other: object) -> bool:
        if isinstance(other, LayoutStrideMapping):
            if other._extents.rank() != self._extents.rank():
                return NotImplemented
            return self._strides == other._strides and self._extents == other._extents
        if not _is_strided_mapping(other):
            return NotImplemented
        ext = _extents_of(other)
        rank = self._extents.rank()
        if ext.rank() != rank:
            return NotImplemented
        return (
            self._extents == ext
            and other(*([0] * rank)) == 0
            and all(self._strides[r] == other.stride(r) for r in range(rank))
        )

    def __hash__(self) -> int:
        return hash((tuple(self._extents), self._strides))

    def __repr__(self) -> str:
        return f"LayoutStrideMapping({self._extents!r}, {self._strides!r})"