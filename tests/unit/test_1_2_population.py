"""
Unit tests for candidates and population management.

Tests cover:
- Candidate construction from a chromosome
- Random population initialization
- Population statistics and diversity metrics
"""

from concurrent.futures import ThreadPoolExecutor
import dataclasses

import numpy as np
import pytest

from src.genetic.core.population import Candidate, Population, generate_population
from src.genetic.fitness.benchmarks import quadratic_form


class TestCandidate:
    """Test suite for candidates."""

    def test_evaluate_from_chromosome(self, codec, evaluate_quadratic):
        """Values and fitness are derived from the chromosome."""
        chromosome = codec.encode_values([3.0, -4.0])
        candidate = Candidate.evaluate(chromosome, codec, evaluate_quadratic)

        assert candidate.chromosome == chromosome
        assert candidate.values == codec.decode_values(chromosome)
        assert candidate.fitness == quadratic_form(candidate.values)
        assert candidate.objective_value == candidate.fitness

    def test_candidate_is_immutable(self, make_candidate):
        """Candidates cannot be changed after construction."""
        candidate = make_candidate(1.0)

        with pytest.raises(dataclasses.FrozenInstanceError):
            candidate.fitness = 2.0

    def test_to_dict(self, make_candidate):
        """Dictionary form carries every field."""
        data = make_candidate(2.5, chromosome="1100", values=(1.0, 2.0)).to_dict()

        assert data == {
            "chromosome": "1100",
            "values": [1.0, 2.0],
            "objective_value": 2.5,
            "fitness": 2.5
        }


class TestGeneratePopulation:
    """Test suite for random population initialization."""

    @pytest.mark.parametrize("pop_size", [1, 2, 7, 10, 33])
    def test_population_size(self, codec, evaluate_quadratic, rng, pop_size):
        """Exactly pop_size candidates are created."""
        population = generate_population(codec, evaluate_quadratic, pop_size, rng)

        assert len(population) == pop_size
        assert population.generation == 0

    def test_fitness_consistent_with_chromosome(self, codec, evaluate_quadratic, rng):
        """Every initial candidate's fitness matches its decoded chromosome."""
        population = generate_population(codec, evaluate_quadratic, 25, rng)

        for candidate in population:
            assert len(candidate.chromosome) == codec.total_length
            assert candidate.values == codec.decode_values(candidate.chromosome)
            assert candidate.fitness == quadratic_form(candidate.values)
            assert all(-10.0 <= v <= 10.0 for v in candidate.values)

    def test_seeded_generation_is_reproducible(self, codec, evaluate_quadratic):
        """Two generators with the same seed yield the same population."""
        first = generate_population(codec, evaluate_quadratic, 10, np.random.default_rng(7))
        second = generate_population(codec, evaluate_quadratic, 10, np.random.default_rng(7))

        assert [c.chromosome for c in first] == [c.chromosome for c in second]

    def test_mapper_preserves_order(self, codec, evaluate_quadratic):
        """Evaluating through a thread pool gives the same population."""
        sequential = generate_population(codec, evaluate_quadratic, 12, np.random.default_rng(3))
        with ThreadPoolExecutor(max_workers=4) as executor:
            parallel = generate_population(
                codec, evaluate_quadratic, 12, np.random.default_rng(3), mapper=executor.map
            )

        assert parallel.candidates == sequential.candidates

    def test_invalid_population_size(self, codec, evaluate_quadratic, rng):
        """Population size below one is rejected."""
        with pytest.raises(ValueError):
            generate_population(codec, evaluate_quadratic, 0, rng)


class TestPopulation:
    """Test suite for population queries."""

    def test_best(self, make_candidate):
        """Best is the candidate of maximum fitness."""
        population = Population([make_candidate(f) for f in (0.3, 0.9, 0.1, 0.9)])

        best = population.best()
        assert best.fitness == 0.9
        assert best is population[1]

    def test_best_of_empty_population(self):
        """An empty population has no best candidate."""
        with pytest.raises(ValueError):
            Population([]).best()

    def test_next_generation(self, make_candidate):
        """Replacement increments the generation and leaves the old one untouched."""
        old = Population([make_candidate(1.0)], generation=3)
        new = old.next_generation([make_candidate(2.0)])

        assert new.generation == 4
        assert old.generation == 3
        assert old[0].fitness == 1.0

    def test_statistics(self, make_candidate):
        """Statistics summarize the fitness distribution."""
        population = Population([make_candidate(f) for f in (0.1, 0.3, 0.5, 0.7, 0.9)])

        stats = population.calculate_statistics()

        assert stats["population_size"] == 5
        assert stats["best_fitness"] == 0.9
        assert stats["worst_fitness"] == 0.1
        assert stats["avg_fitness"] == pytest.approx(0.5, rel=0.01)
        assert stats["median_fitness"] == 0.5
        assert stats["fitness_std"] > 0

    def test_statistics_single_candidate(self, make_candidate):
        """A single candidate has zero spread."""
        stats = Population([make_candidate(2.0)]).calculate_statistics()

        assert stats["fitness_std"] == 0.0
        assert stats["best_fitness"] == stats["worst_fitness"] == 2.0

    def test_diversity(self, make_candidate):
        """Diversity reports uniqueness and mean pairwise Hamming distance."""
        population = Population([
            make_candidate(1.0, chromosome="0000"),
            make_candidate(1.0, chromosome="0000"),
            make_candidate(1.0, chromosome="1111"),
        ])

        diversity = population.calculate_diversity()

        assert diversity["unique_chromosomes"] == 2
        assert diversity["uniqueness_ratio"] == pytest.approx(2 / 3)
        # Pairs: (0,1)=0, (0,2)=4, (1,2)=4
        assert diversity["avg_hamming_distance"] == pytest.approx(8 / 3)
        assert diversity["avg_normalized_distance"] == pytest.approx(2 / 3)

    def test_diversity_single_candidate(self, make_candidate):
        """One candidate has no pairwise distance."""
        diversity = Population([make_candidate(1.0)]).calculate_diversity()

        assert diversity["avg_hamming_distance"] == 0.0
        assert diversity["uniqueness_ratio"] == 1.0
