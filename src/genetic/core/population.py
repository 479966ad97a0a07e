"""
Population Management for the Genetic Optimizer.

This module defines candidates (a chromosome paired with its cached fitness)
and populations of candidates, including random initialization, statistics and
diversity tracking.
"""

from typing import List, Dict, Any, Tuple, Callable, Iterator, Iterable, Sequence
from dataclasses import dataclass
import statistics

import numpy as np

from src.genetic.core.chromosome import ChromosomeCodec


@dataclass(frozen=True)
class Candidate:
    """
    A chromosome with its decoded values and cached fitness.

    Candidates are immutable: any change to the chromosome produces a new
    candidate through `Candidate.evaluate`.
    """

    chromosome: str
    values: Tuple[float, ...]
    objective_value: float
    fitness: float

    @classmethod
    def evaluate(
        cls,
        chromosome: str,
        codec: ChromosomeCodec,
        evaluate: Callable[[Sequence[float]], Tuple[float, float]]
    ) -> "Candidate":
        """Decode `chromosome` and evaluate it, keeping fitness consistent with the bits."""
        values = codec.decode_values(chromosome)
        objective_value, fitness = evaluate(values)
        return cls(chromosome=chromosome, values=values,
                   objective_value=objective_value, fitness=fitness)

    def to_dict(self) -> Dict[str, Any]:
        """Convert candidate to dictionary representation."""
        return {
            "chromosome": self.chromosome,
            "values": list(self.values),
            "objective_value": self.objective_value,
            "fitness": self.fitness
        }


@dataclass
class Population:
    """
    An ordered generation of candidates.

    Populations are replaced, never mutated, between generations.
    """

    candidates: List[Candidate]
    generation: int = 0

    def __len__(self) -> int:
        return len(self.candidates)

    def __iter__(self) -> Iterator[Candidate]:
        return iter(self.candidates)

    def __getitem__(self, index: int) -> Candidate:
        return self.candidates[index]

    @property
    def fitnesses(self) -> List[float]:
        return [c.fitness for c in self.candidates]

    def best(self) -> Candidate:
        """Return the candidate of maximum fitness (first one on ties)."""
        if not self.candidates:
            raise ValueError("Population is empty")
        return max(self.candidates, key=lambda c: c.fitness)

    def next_generation(self, candidates: List[Candidate]) -> "Population":
        """Build the population that replaces this one."""
        return Population(candidates=candidates, generation=self.generation + 1)

    def calculate_statistics(self) -> Dict[str, Any]:
        """Calculate population fitness statistics."""
        fitnesses = self.fitnesses

        if not fitnesses:
            return {}

        best = self.best()
        stats = {
            "generation": self.generation,
            "population_size": len(fitnesses),
            "best_fitness": best.fitness,
            "best_objective": best.objective_value,
            "worst_fitness": min(fitnesses),
            "avg_fitness": statistics.mean(fitnesses),
            "median_fitness": statistics.median(fitnesses),
            "fitness_std": statistics.stdev(fitnesses) if len(fitnesses) > 1 else 0.0
        }

        return stats

    def calculate_diversity(self) -> Dict[str, float]:
        """Calculate population diversity metrics."""
        if not self.candidates:
            return {}

        unique = len(set(c.chromosome for c in self.candidates))

        # Pairwise Hamming distance over the bit matrix
        bits = np.array([[ch == "1" for ch in c.chromosome] for c in self.candidates], dtype=np.int8)
        n = len(self.candidates)
        if n > 1:
            ones = bits.sum(axis=0)
            # Each locus contributes ones * zeros differing pairs
            differing_pairs = float(np.sum(ones * (n - ones)))
            avg_distance = differing_pairs / (n * (n - 1) / 2)
        else:
            avg_distance = 0.0

        return {
            "unique_chromosomes": unique,
            "uniqueness_ratio": unique / n,
            "avg_hamming_distance": avg_distance,
            "avg_normalized_distance": avg_distance / bits.shape[1]
        }


def generate_population(
    codec: ChromosomeCodec,
    evaluate: Callable[[Sequence[float]], Tuple[float, float]],
    pop_size: int,
    rng: np.random.Generator,
    generation: int = 0,
    mapper: Callable[..., Iterable[Candidate]] = map
) -> Population:
    """
    Create a population by uniform sampling of the real domain.

    Each sampled point is encoded into its chromosome and the candidate is
    evaluated from that chromosome, so fitness and bits always agree.
    """
    if pop_size < 1:
        raise ValueError(f"Population size must be at least 1, got {pop_size}")

    lows = np.array([b.min for b in codec.bounds])
    highs = np.array([b.max for b in codec.bounds])

    chromosomes = []
    for _ in range(pop_size):
        sample = rng.uniform(lows, highs)
        chromosomes.append(codec.encode_values([float(v) for v in sample]))

    # Sampling stays on the calling thread; only evaluation goes through mapper
    candidates = list(mapper(lambda ch: Candidate.evaluate(ch, codec, evaluate), chromosomes))

    return Population(candidates=candidates, generation=generation)

