"""
Fitness transforms.

Selection treats higher fitness as better and requires non-negative values.
When the objective is meant to be minimized the caller picks one of these
transforms; the raw objective value is still kept on every candidate.
"""

from typing import Callable

from src.genetic.core.exceptions import InvalidFitnessError

FitnessTransform = Callable[[float], float]


def identity(value: float) -> float:
    """Use the objective value as fitness unchanged."""
    return value


def reciprocal(value: float) -> float:
    """Map a non-negative objective to (0, 1], larger for smaller values."""
    if value < 0:
        raise InvalidFitnessError(
            f"reciprocal fitness needs a non-negative objective, got {value}",
            details={"objective_value": value}
        )
    return 1.0 / (1.0 + value)


def negate_with_ceiling(ceiling: float) -> FitnessTransform:
    """
    Build a transform `ceiling - value`.

    Gives non-negative fitness for any objective bounded above by `ceiling`
    on the search domain.
    """
    def transform(value: float) -> float:
        return ceiling - value

    transform.__name__ = f"negate_with_ceiling({ceiling})"
    return transform
