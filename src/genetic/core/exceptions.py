"""
Error taxonomy for the genetic optimizer.

Every error here is a precondition violation detected at the boundary where it
first becomes decidable. None of them are retried; they abort the run.
"""

from typing import Optional, Dict, Any


class GeneticAlgorithmError(Exception):
    """Base exception for genetic optimizer errors."""

    error_code = "genetic_error"

    def __init__(self, message: str, error_code: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.error_code
        self.details = details or {}


class InvalidDomainError(GeneticAlgorithmError, ValueError):
    """Raised when a variable has max <= min or epsilon <= 0."""

    error_code = "invalid_domain"


class DegenerateChromosomeError(GeneticAlgorithmError, ValueError):
    """Raised when the encoded chromosome is too short for an interior crossover locus."""

    error_code = "degenerate_chromosome"


class ZeroTotalFitnessError(GeneticAlgorithmError, ValueError):
    """Raised when selection is attempted on a population whose fitness sums to zero."""

    error_code = "zero_total_fitness"


class InvalidFitnessError(GeneticAlgorithmError, ValueError):
    """Raised when selection sees a negative or non-finite fitness value."""

    error_code = "invalid_fitness"


class MismatchedChromosomeLengthError(GeneticAlgorithmError, ValueError):
    """Raised when operands do not share the codec's encoded length."""

    error_code = "mismatched_chromosome_length"


__all__ = [
    "GeneticAlgorithmError",
    "InvalidDomainError",
    "DegenerateChromosomeError",
    "ZeroTotalFitnessError",
    "InvalidFitnessError",
    "MismatchedChromosomeLengthError",
]
