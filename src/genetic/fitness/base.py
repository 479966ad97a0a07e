"""
Base classes for objective functions in the genetic optimizer.

The optimizer is polymorphic over its objective: anything callable with a
decision vector and returning a scalar works. The classes here give named,
inspectable objectives a common shape.
"""

from abc import ABC, abstractmethod
from typing import Callable, Sequence, Optional, Dict, Any
import math

from src.genetic.core.exceptions import InvalidFitnessError


Objective = Callable[[Sequence[float]], float]


class ObjectiveFunction(ABC):
    """
    Abstract base class for objective functions.

    Subclasses implement `evaluate`; instances are callable so they can be
    passed anywhere a plain function is accepted.
    """

    name: str = "objective"
    dimensions: Optional[int] = None

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize objective with optional configuration.

        Args:
            config: Configuration parameters for the objective
        """
        self.config = config or {}

    @abstractmethod
    def evaluate(self, values: Sequence[float]) -> float:
        """
        Evaluate the objective at a decision vector.

        Args:
            values: Decoded real values, in chromosome variable order

        Returns:
            Scalar objective value
        """
        pass

    def __call__(self, values: Sequence[float]) -> float:
        if self.dimensions is not None and len(values) != self.dimensions:
            raise ValueError(
                f"{self.name} expects {self.dimensions} variables, got {len(values)}"
            )
        result = float(self.evaluate(values))
        if math.isnan(result):
            raise InvalidFitnessError(
                f"{self.name} returned NaN",
                details={"values": list(values)}
            )
        return result

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class CallableObjective(ObjectiveFunction):
    """Wraps a plain function as an ObjectiveFunction."""

    def __init__(self, func: Objective, name: Optional[str] = None,
                 dimensions: Optional[int] = None):
        super().__init__()
        self.func = func
        self.name = name or getattr(func, "__name__", "objective")
        self.dimensions = dimensions

    def evaluate(self, values: Sequence[float]) -> float:
        return self.func(values)


def as_objective(func: Objective) -> ObjectiveFunction:
    """Return `func` unchanged if it is already an ObjectiveFunction, else wrap it."""
    if isinstance(func, ObjectiveFunction):
        return func
    if not callable(func):
        raise TypeError(f"Objective must be callable, got {type(func).__name__}")
    return CallableObjective(func)
