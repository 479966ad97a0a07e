"""
Fitness-proportional selection with elitist backfill.

The mating pool is built deterministically: each candidate receives
floor(share * N) slots in descending fitness order, and the slots left over by
rounding down all go to the fittest candidate.
"""

from typing import List, Sequence
import math

from src.genetic.core.exceptions import InvalidFitnessError, ZeroTotalFitnessError
from src.genetic.core.population import Candidate


def _check_fitness(candidates: Sequence[Candidate]) -> float:
    total = 0.0
    for index, candidate in enumerate(candidates):
        fitness = candidate.fitness
        if not math.isfinite(fitness):
            raise InvalidFitnessError(
                f"Candidate {index} has non-finite fitness {fitness}",
                details={"index": index, "fitness": fitness}
            )
        if fitness < 0:
            raise InvalidFitnessError(
                f"Candidate {index} has negative fitness {fitness}; "
                "apply a fitness transform before selection",
                details={"index": index, "fitness": fitness}
            )
        total += fitness

    if total == 0:
        raise ZeroTotalFitnessError(
            "Total fitness is zero; proportional shares are undefined",
            details={"population_size": len(candidates)}
        )
    return total


def generate_mating_pool(candidates: Sequence[Candidate], pool_size: int) -> List[Candidate]:
    """
    Build a mating pool of exactly `pool_size` candidates.

    Args:
        candidates: Current population (fitness must be non-negative)
        pool_size: Number of slots in the pool

    Returns:
        Candidates in descending-fitness allocation order, with repetition

    Raises:
        InvalidFitnessError: a fitness value is negative or non-finite
        ZeroTotalFitnessError: all fitness values are zero
    """
    if not candidates:
        raise ValueError("Cannot select from an empty population")
    if pool_size < 1:
        raise ValueError(f"Pool size must be at least 1, got {pool_size}")

    total_fitness = _check_fitness(candidates)

    # Sort population by fitness in descending order (stable for ties)
    ranked = sorted(candidates, key=lambda c: c.fitness, reverse=True)

    mating_pool: List[Candidate] = []
    for candidate in ranked:
        slots = math.floor((candidate.fitness / total_fitness) * pool_size)
        slots = min(slots, pool_size - len(mating_pool))
        mating_pool.extend([candidate] * slots)

        if len(mating_pool) >= pool_size:
            break

    # Rounding down leaves slots open; the fittest candidate takes all of them
    shortfall = pool_size - len(mating_pool)
    mating_pool.extend([ranked[0]] * shortfall)

    return mating_pool
