"""Value mappings: how heatmap values are ordered and graded onto [0, 1]."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable

import numpy as np

# Offset returned when every value in the data is equal.
EQUAL_RANGE_OFFSET = 0.5


def _is_ordered(value: Any) -> bool:
    """False for NaN, which compares unequal to itself."""
    return bool(value == value)


class ValueMapping(ABC):
    """Strategy for comparing values and interpolating them onto [0, 1].

    ``compare(a, b)`` returns True when ``a`` is the smaller (preferred)
    candidate relative to ``b``. ``interpolate(value, min_value, max_value)``
    must give 0 at ``min_value``, 1 at ``max_value`` and be monotonic in
    between.
    """

    @abstractmethod
    def compare(self, a: Any, b: Any) -> bool:
        ...

    @abstractmethod
    def interpolate(self, value: Any, min_value: Any, max_value: Any) -> float:
        ...

    def find_range(self, values: Iterable[Any]) -> tuple[Any, Any] | None:
        """Scan all values once and return ``(min, max)`` under ``compare``.

        Returns None if ``values`` is empty.
        """
        iterator = iter(values)
        try:
            first = next(iterator)
        except StopIteration:
            return None
        min_value = max_value = first
        for value in iterator:
            if not self.compare(min_value, value):
                min_value = value
            if self.compare(max_value, value):
                max_value = value
        return min_value, max_value


class LinearMapping(ValueMapping):
    """Affine mapping for numeric values."""

    def compare(self, a: Any, b: Any) -> bool:
        return a <= b

    def find_range(self, values: Iterable[Any]) -> tuple[Any, Any] | None:
        # NaN is unordered; it is left out of the range and later resolves
        # to the colour map's NaN colour.
        return super().find_range(v for v in values if _is_ordered(v))

    def interpolate(self, value: Any, min_value: Any, max_value: Any) -> float:
        # Python numbers, so narrow numpy integer dtypes cannot overflow.
        value, min_value, max_value = (
            v.item() if isinstance(v, np.generic) else v
            for v in (value, min_value, max_value)
        )
        span = max_value - min_value
        if span == 0:
            return EQUAL_RANGE_OFFSET
        return float((value - min_value) / span)

    def __repr__(self) -> str:
        return "LinearMapping()"


class KeyMapping(ValueMapping):
    """Grades arbitrary objects by a derived property.

    Usage::

        mapping = KeyMapping(lambda sample: sample.intensity)
    """

    def __init__(
        self,
        key: Callable[[Any], Any],
        base: ValueMapping | None = None,
    ) -> None:
        self._key = key
        self._base = base if base is not None else LinearMapping()

    @property
    def key(self) -> Callable[[Any], Any]:
        return self._key

    def compare(self, a: Any, b: Any) -> bool:
        return self._base.compare(self._key(a), self._key(b))

    def find_range(self, values: Iterable[Any]) -> tuple[Any, Any] | None:
        # Objects whose key is NaN are left out of the range.
        return super().find_range(v for v in values if _is_ordered(self._key(v)))

    def interpolate(self, value: Any, min_value: Any, max_value: Any) -> float:
        return self._base.interpolate(
            self._key(value), self._key(min_value), self._key(max_value)
        )


class CustomMapping(ValueMapping):
    """A mapping assembled from a comparator and an interpolation function."""

    def __init__(
        self,
        compare: Callable[[Any, Any], bool],
        interpolate: Callable[[Any, Any, Any], float],
    ) -> None:
        self._compare = compare
        self._interpolate = interpolate

    def compare(self, a: Any, b: Any) -> bool:
        return bool(self._compare(a, b))

    def interpolate(self, value: Any, min_value: Any, max_value: Any) -> float:
        return float(self._interpolate(value, min_value, max_value))


linear = LinearMapping()
