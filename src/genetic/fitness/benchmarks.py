"""
Sample objective functions.

`QuadraticFormObjective` is the demonstration objective the optimizer ships
with; the others are common bowl-shaped test functions used in tests.
"""

from typing import Sequence

from src.genetic.fitness.base import ObjectiveFunction


class QuadraticFormObjective(ObjectiveFunction):
    """f(x1, x2) = x1^2 + x2^2 - x1*x2, non-negative with its minimum at the origin."""

    name = "quadratic_form"
    dimensions = 2

    def evaluate(self, values: Sequence[float]) -> float:
        x1, x2 = values
        return x1 * x1 + x2 * x2 - x1 * x2


class SphereObjective(ObjectiveFunction):
    """f(x) = sum(x_i^2) in any number of dimensions."""

    name = "sphere"

    def evaluate(self, values: Sequence[float]) -> float:
        return sum(v * v for v in values)


class BoothObjective(ObjectiveFunction):
    """Booth function, minimum 0 at (1, 3)."""

    name = "booth"
    dimensions = 2

    def evaluate(self, values: Sequence[float]) -> float:
        x, y = values
        return (x + 2 * y - 7) ** 2 + (2 * x + y - 5) ** 2


def quadratic_form(values: Sequence[float]) -> float:
    """Plain-function form of the demonstration objective."""
    x1, x2 = values
    return x1 * x1 + x2 * x2 - x1 * x2
