"""
PyTest configuration and fixtures for the genetic optimizer.

This module provides shared test fixtures: seeded random generators, sample
domains and objectives, and a quiet logfire configuration.
"""

import os
import sys
from typing import Callable, List, Sequence, Tuple

import logfire
import numpy as np
import pytest

# Add project root to Python path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from src.genetic.core.chromosome import ChromosomeCodec
from src.genetic.core.config import (
    GeneticConfig,
    VariableBounds,
    create_test_config
)
from src.genetic.core.population import Candidate
from src.genetic.fitness.benchmarks import quadratic_form


@pytest.fixture(scope="session", autouse=True)
def quiet_logfire():
    """Configure logfire so spans are created but nothing is exported."""
    logfire.configure(send_to_logfire=False, console=False)
    yield


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded random generator for reproducible stochastic tests."""
    return np.random.default_rng(1234)


@pytest.fixture
def demo_bounds() -> List[VariableBounds]:
    """The two-variable demonstration domain, [-10, 10] for both variables."""
    return [
        VariableBounds(name="x1", min=-10.0, max=10.0, epsilon=0.01),
        VariableBounds(name="x2", min=-10.0, max=10.0, epsilon=0.01),
    ]


@pytest.fixture
def codec(demo_bounds) -> ChromosomeCodec:
    """Codec over the demonstration domain."""
    return ChromosomeCodec(demo_bounds)


@pytest.fixture
def ga_test_config() -> GeneticConfig:
    """Genetic algorithm test configuration."""
    return create_test_config()


@pytest.fixture
def evaluate_quadratic() -> Callable[[Sequence[float]], Tuple[float, float]]:
    """Evaluator returning (objective, fitness) for the demonstration objective."""
    def evaluate(values: Sequence[float]) -> Tuple[float, float]:
        value = quadratic_form(values)
        return value, value
    return evaluate


@pytest.fixture
def make_candidate() -> Callable[..., Candidate]:
    """Factory for hand-built candidates with a given fitness."""
    def factory(fitness: float, chromosome: str = "0101", values=(0.0,)) -> Candidate:
        return Candidate(
            chromosome=chromosome,
            values=tuple(values),
            objective_value=fitness,
            fitness=fitness
        )
    return factory


@pytest.fixture
def mock_logfire(mocker):
    """Mock logfire in the engine module."""
    return mocker.patch("src.genetic.core.engine.logfire")

