"""
Genetic Optimizer Configuration Module.

This module defines configuration classes for the genetic optimizer, including
the search domain, evolution parameters, fitness handling and runtime settings.
"""

from typing import Optional, Dict, Any, List, Literal
from pydantic import BaseModel, Field, ConfigDict, field_validator, model_validator
import os


class VariableBounds(BaseModel):
    """Search bound and resolution of a single decision variable."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    name: str = Field(description="Name of the decision variable")
    min: float = Field(description="Lower search bound (inclusive)")
    max: float = Field(description="Upper search bound (inclusive)")
    epsilon: float = Field(
        gt=0.0,
        description="Desired resolution used to derive the bit length"
    )

    @model_validator(mode="after")
    def validate_range(self) -> "VariableBounds":
        """Ensure the bound describes a non-empty interval."""
        if self.max <= self.min:
            raise ValueError(
                f"Variable '{self.name}': max ({self.max}) must be greater than min ({self.min})"
            )
        return self


class EvolutionParameters(BaseModel):
    """Parameters controlling the generational loop."""

    model_config = ConfigDict(validate_assignment=True)

    population_size: int = Field(
        default=10,
        ge=1,
        le=100000,
        description="Number of candidates in every generation"
    )
    generations: int = Field(
        default=5,
        ge=0,
        le=100000,
        description="Number of generations to evolve"
    )
    mutation_rate: float = Field(
        default=0.01,
        ge=0.0,
        le=1.0,
        description="Probability of flipping each bit of a child chromosome"
    )


class FitnessConfig(BaseModel):
    """Configuration for turning objective values into selection fitness."""

    minimize: bool = Field(
        default=False,
        description=(
            "Select for low objective values by applying the reciprocal transform. "
            "Only meaningful for non-negative objectives."
        )
    )


class LoggingConfig(BaseModel):
    """Configuration for logging and monitoring."""

    enable_logging: bool = Field(
        default=True,
        description="Enable per-generation progress logging"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging level"
    )
    log_interval: int = Field(
        default=1,
        ge=1,
        description="Generations between progress logs"
    )
    metrics_export: bool = Field(
        default=True,
        description="Emit progress metrics through logfire"
    )


class ParallelizationConfig(BaseModel):
    """Configuration for parallel objective evaluation."""

    enable_parallel: bool = Field(
        default=False,
        description="Evaluate the objective for a generation's children in a thread pool"
    )
    num_workers: Optional[int] = Field(
        default=None,
        ge=1,
        description="Number of worker threads (None for auto)"
    )


def _default_bounds() -> List[VariableBounds]:
    return [
        VariableBounds(name="x1", min=-10.0, max=10.0, epsilon=0.001),
        VariableBounds(name="x2", min=-10.0, max=10.0, epsilon=0.001),
    ]


class GeneticConfig(BaseModel):
    """Main configuration class for the genetic optimizer."""

    model_config = ConfigDict(
        validate_assignment=True,
        extra='forbid'
    )

    bounds: List[VariableBounds] = Field(
        default_factory=_default_bounds,
        min_length=1,
        description="Per-variable search domain, in chromosome order"
    )
    evolution: EvolutionParameters = Field(
        default_factory=EvolutionParameters,
        description="Evolution parameters"
    )
    fitness: FitnessConfig = Field(
        default_factory=FitnessConfig,
        description="Fitness handling configuration"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig,
        description="Logging and monitoring configuration"
    )
    parallelization: ParallelizationConfig = Field(
        default_factory=ParallelizationConfig,
        description="Parallel processing configuration"
    )

    random_seed: Optional[int] = Field(
        default=None,
        ge=0,
        description="Random seed for reproducibility"
    )

    @field_validator('bounds')
    def validate_unique_names(cls, v):
        """Ensure variable names are unique."""
        names = [b.name for b in v]
        if len(set(names)) != len(names):
            raise ValueError(f"Variable names must be unique, got {names}")
        return v

    @classmethod
    def from_env(cls) -> "GeneticConfig":
        """Create configuration from environment variables."""
        config_dict: Dict[str, Any] = {}

        # Evolution parameters from env
        if pop_size := os.getenv("GENETIC_POPULATION_SIZE"):
            config_dict.setdefault("evolution", {})["population_size"] = int(pop_size)
        if generations := os.getenv("GENETIC_GENERATIONS"):
            config_dict.setdefault("evolution", {})["generations"] = int(generations)
        if mutation_rate := os.getenv("GENETIC_MUTATION_RATE"):
            config_dict.setdefault("evolution", {})["mutation_rate"] = float(mutation_rate)

        if minimize := os.getenv("GENETIC_MINIMIZE"):
            config_dict["fitness"] = {"minimize": minimize.strip().lower() in ("1", "true", "yes")}

        if log_level := os.getenv("GENETIC_LOG_LEVEL"):
            config_dict["logging"] = {"log_level": log_level.upper()}

        # Parallelization from env
        if num_workers := os.getenv("GENETIC_NUM_WORKERS"):
            config_dict["parallelization"] = {
                "enable_parallel": True,
                "num_workers": int(num_workers),
            }

        if random_seed := os.getenv("GENETIC_RANDOM_SEED"):
            config_dict["random_seed"] = int(random_seed)

        return cls(**config_dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return self.model_dump()

    def validate_consistency(self) -> None:
        """Validate configuration consistency across components."""
        workers = self.parallelization.num_workers
        if workers is not None and not self.parallelization.enable_parallel:
            raise ValueError(
                f"num_workers ({workers}) is set but parallel evaluation is disabled"
            )


# Convenience functions
def create_default_config() -> GeneticConfig:
    """Create the two-variable demonstration configuration."""
    return GeneticConfig()


def create_test_config() -> GeneticConfig:
    """Create a configuration suitable for testing (small, seeded, sequential)."""
    return GeneticConfig(
        bounds=[
            VariableBounds(name="x1", min=-10.0, max=10.0, epsilon=0.01),
            VariableBounds(name="x2", min=-10.0, max=10.0, epsilon=0.01),
        ],
        evolution=EvolutionParameters(
            population_size=10,
            generations=5,
            mutation_rate=0.01
        ),
        logging=LoggingConfig(
            log_interval=1,
            metrics_export=False
        ),
        parallelization=ParallelizationConfig(
            enable_parallel=False  # Disable for deterministic tests
        ),
        random_seed=42
    )
