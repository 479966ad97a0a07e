"""
Genetic Core Module - Genetic Algorithm Components.

This module contains the core components of the genetic optimizer, including
configuration, the chromosome codec, population management, selection,
variation operators and the main evolution engine.
"""

from src.genetic.core.exceptions import (
    GeneticAlgorithmError,
    InvalidDomainError,
    DegenerateChromosomeError,
    ZeroTotalFitnessError,
    InvalidFitnessError,
    MismatchedChromosomeLengthError
)

from src.genetic.core.config import (
    GeneticConfig,
    VariableBounds,
    EvolutionParameters,
    FitnessConfig,
    LoggingConfig,
    ParallelizationConfig,
    create_default_config,
    create_test_config
)

from src.genetic.core.chromosome import (
    ChromosomeCodec,
    bit_length,
    decode,
    encode,
    to_value
)

from src.genetic.core.population import (
    Candidate,
    Population,
    generate_population
)

from src.genetic.core.selection import (
    generate_mating_pool
)

from src.genetic.core.operators import (
    crossover,
    mutate,
    breed
)

from src.genetic.core.engine import (
    GeneticAlgorithmEngine,
    EngineState,
    OptimizationResult
)

__all__ = [
    # Errors
    "GeneticAlgorithmError",
    "InvalidDomainError",
    "DegenerateChromosomeError",
    "ZeroTotalFitnessError",
    "InvalidFitnessError",
    "MismatchedChromosomeLengthError",

    # Configuration
    "GeneticConfig",
    "VariableBounds",
    "EvolutionParameters",
    "FitnessConfig",
    "LoggingConfig",
    "ParallelizationConfig",
    "create_default_config",
    "create_test_config",

    # Chromosome codec
    "ChromosomeCodec",
    "bit_length",
    "decode",
    "encode",
    "to_value",

    # Population management
    "Candidate",
    "Population",
    "generate_population",

    # Selection and variation
    "generate_mating_pool",
    "crossover",
    "mutate",
    "breed",

    # Engine
    "GeneticAlgorithmEngine",
    "EngineState",
    "OptimizationResult"
]
