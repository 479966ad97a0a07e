"""Single-point crossover and per-bit mutation for binary chromosomes."""

from typing import Optional, Tuple

import numpy as np

from src.genetic.core.exceptions import (
    DegenerateChromosomeError,
    MismatchedChromosomeLengthError
)

_FLIP = str.maketrans("01", "10")


def crossover(
    parent1: str,
    parent2: str,
    rng: np.random.Generator,
    locus: Optional[int] = None
) -> Tuple[str, str]:
    """
    Perform single-point crossover between two parents.

    The locus is drawn uniformly from [1, L-1] so each child carries material
    from both parents. Passing `locus` fixes the split point.
    """
    if len(parent1) != len(parent2):
        raise MismatchedChromosomeLengthError(
            f"Parents differ in length: {len(parent1)} != {len(parent2)}",
            details={"parent1": len(parent1), "parent2": len(parent2)}
        )

    length = len(parent1)
    if length < 2:
        raise DegenerateChromosomeError(
            f"Chromosome length {length} has no interior crossover locus",
            details={"length": length}
        )

    if locus is None:
        locus = int(rng.integers(1, length))
    elif not 1 <= locus <= length - 1:
        raise ValueError(f"Crossover locus must be in [1, {length - 1}], got {locus}")

    child1 = parent1[:locus] + parent2[locus:]
    child2 = parent2[:locus] + parent1[locus:]
    return child1, child2


def mutate(chromosome: str, mutation_rate: float, rng: np.random.Generator) -> str:
    """Flip each bit independently with probability `mutation_rate`."""
    if not 0.0 <= mutation_rate <= 1.0:
        raise ValueError(f"Mutation rate must be in [0, 1], got {mutation_rate}")

    if not chromosome:
        return chromosome

    # rng.random() is in [0, 1), so rate 0 never flips and rate 1 always does
    flips = rng.random(len(chromosome)) < mutation_rate
    if not flips.any():
        return chromosome

    return "".join(
        bit.translate(_FLIP) if flip else bit
        for bit, flip in zip(chromosome, flips)
    )


def breed(
    parent1: str,
    parent2: str,
    mutation_rate: float,
    rng: np.random.Generator
) -> Tuple[str, str]:
    """Crossover two parents, then mutate both children."""
    child1, child2 = crossover(parent1, parent2, rng)
    return mutate(child1, mutation_rate, rng), mutate(child2, mutation_rate, rng)
