"""
Chromosome Representation for the Genetic Optimizer.

A chromosome is a fixed-length string of '0'/'1' characters. Each decision
variable owns a contiguous block of bits whose length is derived once from the
variable's bound and resolution; the blocks are concatenated in variable order.
"""

from typing import List, Sequence, Tuple, Union
import math

from src.genetic.core.config import VariableBounds
from src.genetic.core.exceptions import (
    InvalidDomainError,
    DegenerateChromosomeError,
    MismatchedChromosomeLengthError
)


BoundsLike = Union[VariableBounds, Tuple[float, float, float]]


def bit_length(xmin: float, xmax: float, epsilon: float) -> int:
    """
    Number of bits needed to resolve [xmin, xmax] at resolution epsilon.

    Computed as ceil(log2((xmax - xmin) / epsilon)), never less than one bit.
    """
    if not all(math.isfinite(v) for v in (xmin, xmax, epsilon)):
        raise InvalidDomainError(
            "Bounds and epsilon must be finite",
            details={"min": xmin, "max": xmax, "epsilon": epsilon}
        )
    if xmax <= xmin:
        raise InvalidDomainError(
            f"max ({xmax}) must be greater than min ({xmin})",
            details={"min": xmin, "max": xmax}
        )
    if epsilon <= 0:
        raise InvalidDomainError(
            f"epsilon ({epsilon}) must be positive",
            details={"epsilon": epsilon}
        )
    return max(1, math.ceil(math.log2((xmax - xmin) / epsilon)))


def decode(bits: str) -> int:
    """Interpret a bit string as a big-endian unsigned integer."""
    return int(bits, 2)


def to_value(xmin: float, xmax: float, decoded: int, length: int) -> float:
    """Map a decoded integer in [0, 2^length - 1] linearly onto [xmin, xmax]."""
    top = (1 << length) - 1
    if decoded == 0:
        return xmin
    if decoded == top:
        return xmax
    return xmin + (decoded / top) * (xmax - xmin)


def encode(value: float, xmin: float, xmax: float, length: int) -> str:
    """Encode a real value as the nearest code of the given bit length."""
    top = (1 << length) - 1
    code = round((value - xmin) / (xmax - xmin) * top)
    code = min(max(code, 0), top)
    return format(code, f"0{length}b")


class ChromosomeCodec:
    """
    Converts between bounded real vectors and fixed-length chromosomes.

    The codec has no mutable state: bit lengths are computed once at
    construction and never change for the lifetime of a run.
    """

    def __init__(self, bounds: Sequence[BoundsLike]):
        """Build the codec and validate the domain."""
        self.bounds: List[VariableBounds] = [self._as_bounds(b, i) for i, b in enumerate(bounds)]
        if not self.bounds:
            raise InvalidDomainError("At least one variable is required")

        self.lengths: List[int] = [bit_length(b.min, b.max, b.epsilon) for b in self.bounds]
        self.total_length: int = sum(self.lengths)

        if self.total_length < 2:
            raise DegenerateChromosomeError(
                f"Chromosome length {self.total_length} leaves no interior crossover locus",
                details={"lengths": self.lengths}
            )

        offsets = [0]
        for length in self.lengths:
            offsets.append(offsets[-1] + length)
        self._offsets = offsets

    @staticmethod
    def _as_bounds(bound: BoundsLike, index: int) -> VariableBounds:
        if isinstance(bound, VariableBounds):
            return bound
        xmin, xmax, epsilon = bound
        # Validation happens in bit_length so bad tuples surface as InvalidDomainError
        return VariableBounds.model_construct(
            name=f"x{index + 1}", min=float(xmin), max=float(xmax), epsilon=float(epsilon)
        )

    @property
    def names(self) -> List[str]:
        return [b.name for b in self.bounds]

    @property
    def dimensions(self) -> int:
        return len(self.bounds)

    def check_length(self, chromosome: str) -> None:
        """Raise if the chromosome does not have the codec's encoded length."""
        if len(chromosome) != self.total_length:
            raise MismatchedChromosomeLengthError(
                f"Chromosome has {len(chromosome)} bits, codec expects {self.total_length}",
                details={"actual": len(chromosome), "expected": self.total_length}
            )

    def split(self, chromosome: str) -> List[str]:
        """Split a chromosome into its per-variable bit blocks."""
        self.check_length(chromosome)
        return [
            chromosome[start:end]
            for start, end in zip(self._offsets[:-1], self._offsets[1:])
        ]

    def decode_values(self, chromosome: str) -> Tuple[float, ...]:
        """Decode a chromosome to its real decision vector."""
        return tuple(
            to_value(b.min, b.max, decode(block), length)
            for b, block, length in zip(self.bounds, self.split(chromosome), self.lengths)
        )

    def encode_values(self, values: Sequence[float]) -> str:
        """Encode a real decision vector into a chromosome."""
        if len(values) != self.dimensions:
            raise MismatchedChromosomeLengthError(
                f"Expected {self.dimensions} values, got {len(values)}",
                details={"actual": len(values), "expected": self.dimensions}
            )
        return "".join(
            encode(value, b.min, b.max, length)
            for value, b, length in zip(values, self.bounds, self.lengths)
        )

    def __repr__(self) -> str:
        return f"ChromosomeCodec(names={self.names}, lengths={self.lengths})"
