"""
Objective functions and fitness transforms for the genetic optimizer.
"""

from src.genetic.fitness.base import (
    Objective,
    ObjectiveFunction,
    CallableObjective,
    as_objective
)

from src.genetic.fitness.benchmarks import (
    QuadraticFormObjective,
    SphereObjective,
    BoothObjective,
    quadratic_form
)

from src.genetic.fitness.transforms import (
    FitnessTransform,
    identity,
    reciprocal,
    negate_with_ceiling
)

__all__ = [
    # Base classes
    "Objective",
    "ObjectiveFunction",
    "CallableObjective",
    "as_objective",

    # Sample objectives
    "QuadraticFormObjective",
    "SphereObjective",
    "BoothObjective",
    "quadratic_form",

    # Transforms
    "FitnessTransform",
    "identity",
    "reciprocal",
    "negate_with_ceiling"
]
