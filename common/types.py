"""
Type Definitions for Geodesic Series Coefficients.

This module defines the value types that carry truncated series coefficients
between the generators and the evaluators. Each coefficient sequence is tagged
with the series family that produced it and the truncation order it was built
for, so a sequence can never silently be consumed as another family's.

Design Rationale
----------------
Using typed dataclasses instead of raw arrays provides:
1. Self-documenting code - the family and order travel with the data
2. Eager length validation at construction time
3. Read-only storage, safe to share between concurrent evaluations
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Sequence, Union
import numpy as np
from numpy.typing import NDArray


class SeriesFamily(Enum):
    """Named families of coefficient sequences.

    The length of a sequence is a pure function of the family and the
    truncation order N:

    ======  ==============  ===============================================
    Family  Length          Layout
    ======  ==============  ===============================================
    A3      N               entry j multiplies eps^j
    C1      N + 1           index 0 unused, index l multiplies sin(2 l x)
    C1P     N + 1           index 0 unused, index l multiplies sin(2 l x)
    C2      N + 1           index 0 unused, index l multiplies sin(2 l x)
    C3X     N (N - 1) / 2   packed ascending-power polynomials in eps
    C3      N               index 0 unused, index l multiplies sin(2 l x)
    ======  ==============  ===============================================
    """
    A3 = "A3"
    C1 = "C1"
    C1P = "C1p"
    C2 = "C2"
    C3X = "C3x"
    C3 = "C3"

    def expected_length(self, order: int) -> int:
        """Length of this family's sequence for truncation order ``order``."""
        if self in (SeriesFamily.C1, SeriesFamily.C1P, SeriesFamily.C2):
            return order + 1
        if self is SeriesFamily.C3X:
            return (order * (order - 1)) // 2
        return order

    @property
    def is_harmonic(self) -> bool:
        """Whether index l of the sequence is the coefficient of sin(2 l x)."""
        return self in (
            SeriesFamily.C1, SeriesFamily.C1P, SeriesFamily.C2, SeriesFamily.C3
        )


@dataclass(frozen=True)
class SeriesCoefficients:
    """A fixed-length coefficient sequence of one series family.

    Attributes
    ----------
    family : SeriesFamily
        The family that generated the coefficients.
    order : int
        Truncation order the sequence was generated for.
    values : ndarray
        Coefficients as a read-only float64 array.

    Raises
    ------
    ValueError
        If the number of values does not match ``family.expected_length(order)``.

    Examples
    --------
    >>> c = SeriesCoefficients(SeriesFamily.C1, 2, [0.0, -0.5, -0.0625])
    >>> len(c), c[1]
    (3, -0.5)
    """
    family: SeriesFamily
    order: int
    values: NDArray[np.float64]

    def __post_init__(self):
        """Validate and freeze the coefficient storage."""
        values = np.array(self.values, dtype=np.float64)
        if values.ndim != 1:
            raise ValueError(
                f"{self.family.value} coefficients must be one-dimensional, "
                f"got shape {values.shape}"
            )
        expected = self.family.expected_length(self.order)
        if values.shape[0] != expected:
            raise ValueError(
                f"{self.family.value} coefficients for order {self.order} "
                f"must have length {expected}, got {values.shape[0]}"
            )
        values.setflags(write=False)
        object.__setattr__(self, "values", values)

    def __len__(self) -> int:
        return self.values.shape[0]

    def __getitem__(self, index: Union[int, slice]) -> Union[float, NDArray[np.float64]]:
        item = self.values[index]
        if isinstance(index, slice):
            return item
        return float(item)

    def __iter__(self) -> Iterator[float]:
        return (float(v) for v in self.values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SeriesCoefficients):
            return NotImplemented
        return (
            self.family is other.family
            and self.order == other.order
            and np.array_equal(self.values, other.values)
        )

    def to_list(self) -> list:
        """Return the coefficients as a list of Python floats."""
        return [float(v) for v in self.values]

    def require(self, family: "SeriesFamily") -> "SeriesCoefficients":
        """Return self if produced by ``family``, raise ValueError otherwise."""
        if self.family is not family:
            raise ValueError(
                f"Expected {family.value} coefficients, got {self.family.value}"
            )
        return self


CoefficientsLike = Union[SeriesCoefficients, Sequence[float], NDArray[np.float64]]
