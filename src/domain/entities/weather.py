"""Domain entities for hourly weather series."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Sequence, Tuple


@dataclass(frozen=True, slots=True)
class WeatherSeries:
    """
    Hourly precipitation series returned by the weather provider.

    ``times`` and ``precipitation_mm`` are index-aligned. Provider gaps are
    kept as ``None`` rather than filled.
    """

    times: Tuple[str, ...]
    precipitation_mm: Tuple[Optional[float], ...]

    @classmethod
    def from_arrays(
        cls, times: Sequence[str], precipitation: Sequence[Optional[float]]
    ) -> "WeatherSeries":
        return cls(times=tuple(times), precipitation_mm=tuple(precipitation))

    def __len__(self) -> int:
        return len(self.times)

    def __iter__(self) -> Iterator[Tuple[str, Optional[float]]]:
        return iter(zip(self.times, self.precipitation_mm))
