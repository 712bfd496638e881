from __future__ import annotations
from typing import Iterable, Iterator, Tuple


class SnapLocationSet:
    """
    Immutable, ascending, duplicate-free snap offsets. `0` is always present.
    Offsets are expressed for the MIN edge of the viewport.
    """
    __slots__ = ("_values",)

    def __init__(self, values: Tuple[float, ...] = (0.0,)) -> None:
        self._values = values

    @classmethod
    def build(cls, raw: Iterable[float] = ()) -> "SnapLocationSet":
        return cls(tuple(sorted({0.0, *(float(v) for v in raw)})))

    # --- sequence-ish ---
    def __iter__(self) -> Iterator[float]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __getitem__(self, i: int) -> float:
        return self._values[i]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SnapLocationSet):
            return self._values == other._values
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._values)

    def __repr__(self) -> str:
        return f"SnapLocationSet({list(self._values)})"

    @property
    def values(self) -> Tuple[float, ...]:
        return self._values

    @property
    def last(self) -> float:
        return self._values[-1]

    def has_stops(self) -> bool:
        """ True when anything beyond the mandatory 0 is configured. """
        return len(self._values) > 1
