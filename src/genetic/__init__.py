"""
Binary-encoded genetic optimizer.

Searches for the maximum of a real-valued objective over a box-bounded domain
using binary chromosomes, fitness-proportional selection with elitist
backfill, single-point crossover and per-bit mutation.
"""

from src.genetic.core import *  # noqa: F401,F403
from src.genetic.core import __all__ as _core_all
from src.genetic.fitness import (
    ObjectiveFunction,
    CallableObjective,
    QuadraticFormObjective,
    SphereObjective,
    BoothObjective,
    quadratic_form,
    identity,
    reciprocal,
    negate_with_ceiling
)

__version__ = "1.0.0"

__all__ = [
    *_core_all,
    # Objectives
    "ObjectiveFunction",
    "CallableObjective",
    "QuadraticFormObjective",
    "SphereObjective",
    "BoothObjective",
    "quadratic_form",
    # Fitness transforms
    "identity",
    "reciprocal",
    "negate_with_ceiling"
]
