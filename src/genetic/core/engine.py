"""
Genetic Algorithm Engine for the Genetic Optimizer.

This module implements the generational loop that orchestrates selection,
crossover, mutation, decoding and evaluation for a fixed number of
generations, and reports the best candidate of the final population.
"""

import os
import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum
from typing import List, Optional, Dict, Any, Callable, Sequence, Tuple

import logfire
import numpy as np

from src.genetic.core.config import (
    GeneticConfig,
    EvolutionParameters,
    ParallelizationConfig,
    VariableBounds
)
from src.genetic.core.chromosome import ChromosomeCodec, bit_length
from src.genetic.core.population import Candidate, Population, generate_population
from src.genetic.core.selection import generate_mating_pool
from src.genetic.core.operators import breed
from src.genetic.fitness.base import Objective, as_objective
from src.genetic.fitness.transforms import FitnessTransform, identity, reciprocal


ProgressObserver = Callable[[int, float], None]


class EngineState(str, Enum):
    """Lifecycle of a genetic algorithm run."""
    INITIALIZED = "initialized"
    EVOLVING = "evolving"
    TERMINATED = "terminated"
    FAILED = "failed"


@dataclass
class OptimizationResult:
    """Outcome of a completed run."""

    best: Candidate
    variable_names: List[str]
    generations: int
    total_evaluations: int
    final_population: Population
    history: List[Dict[str, Any]] = field(default_factory=list)
    elapsed: timedelta = field(default_factory=timedelta)

    @property
    def values(self) -> Tuple[float, ...]:
        return self.best.values

    @property
    def fitness(self) -> float:
        return self.best.fitness

    @property
    def objective_value(self) -> float:
        return self.best.objective_value

    def as_mapping(self) -> Dict[str, float]:
        """Best decision vector keyed by variable name."""
        return dict(zip(self.variable_names, self.best.values))

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to dictionary representation."""
        return {
            "best_candidate": self.best.to_dict(),
            "variables": self.as_mapping(),
            "generations": self.generations,
            "total_evaluations": self.total_evaluations,
            "history": self.history,
            "runtime": str(self.elapsed)
        }


class GeneticAlgorithmEngine:
    """
    Main engine for running the binary-encoded genetic algorithm.

    States move INITIALIZED -> EVOLVING -> TERMINATED; a precondition
    failure during the run moves it to FAILED and the error is re-raised.
    """

    def __init__(
        self,
        config: GeneticConfig,
        objective: Objective,
        fitness_transform: Optional[FitnessTransform] = None,
        observer: Optional[ProgressObserver] = None,
        rng: Optional[np.random.Generator] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize the genetic algorithm engine.

        Args:
            config: Optimizer configuration, including the variable bounds
            objective: Function of the decoded decision vector
            fitness_transform: Maps objective values to non-negative selection
                fitness; defaults to identity, or reciprocal when
                `config.fitness.minimize` is set
            observer: Called once per generation with (generation, best fitness)
            rng: Random generator; seeded from `config.random_seed` if omitted
            logger: Optional logger instance
        """
        config.validate_consistency()

        self.config = config
        self.objective = as_objective(objective)
        self.fitness_transform = fitness_transform or (
            reciprocal if config.fitness.minimize else identity
        )
        self.observer = observer
        self.rng = rng if rng is not None else np.random.default_rng(config.random_seed)
        self.logger = logger or self._setup_logger()

        # Bit lengths are fixed here for the lifetime of the engine
        self.codec = ChromosomeCodec(config.bounds)

        # State tracking
        self.state = EngineState.INITIALIZED
        self.current_population: Optional[Population] = None
        self.start_time: Optional[datetime] = None
        self.total_evaluations = 0
        self.history: List[Dict[str, Any]] = []

    @classmethod
    def from_bounds(
        cls,
        bounds: Sequence[Tuple[float, float, float]],
        objective: Objective,
        population_size: int = 10,
        generations: int = 5,
        mutation_rate: float = 0.01,
        random_seed: Optional[int] = None,
        num_workers: Optional[int] = None,
        **kwargs: Any
    ) -> "GeneticAlgorithmEngine":
        """
        Build an engine from plain (min, max, epsilon) tuples.

        Raises:
            InvalidDomainError: a bound has max <= min, epsilon <= 0 or a
                non-finite value
        """
        for lo, hi, eps in bounds:
            bit_length(lo, hi, eps)

        config = GeneticConfig(
            bounds=[
                VariableBounds(name=f"x{i + 1}", min=lo, max=hi, epsilon=eps)
                for i, (lo, hi, eps) in enumerate(bounds)
            ],
            evolution=EvolutionParameters(
                population_size=population_size,
                generations=generations,
                mutation_rate=mutation_rate
            ),
            parallelization=ParallelizationConfig(
                enable_parallel=num_workers is not None,
                num_workers=num_workers
            ),
            random_seed=random_seed
        )
        return cls(config, objective, **kwargs)

    def _setup_logger(self) -> logging.Logger:
        """Setup default logger."""
        logger = logging.getLogger("genetic.engine")
        logger.setLevel(getattr(logging, self.config.logging.log_level))

        if not logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            handler.setFormatter(formatter)
            logger.addHandler(handler)

        return logger

    def evaluate(self, values: Sequence[float]) -> Tuple[float, float]:
        """Return (objective value, selection fitness) for a decision vector."""
        objective_value = self.objective(values)
        return objective_value, float(self.fitness_transform(objective_value))

    def run(self) -> OptimizationResult:
        """Run the evolution to completion, blocking until it finishes."""
        return asyncio.run(self.evolve())

    async def evolve(self) -> OptimizationResult:
        """
        Run the genetic algorithm evolution process.

        Returns:
            Result holding the best candidate of the final population
        """
        evolution = self.config.evolution

        with logfire.span("GA Evolution",
                          population_size=evolution.population_size,
                          generations=evolution.generations,
                          chromosome_length=self.codec.total_length):

            self.start_time = datetime.now()
            self.total_evaluations = 0
            self.history = []
            self.state = EngineState.EVOLVING
            self.logger.info(
                f"Starting evolution with population size {evolution.population_size}, "
                f"{evolution.generations} generations, chromosome length {self.codec.total_length}"
            )

            executor = self._create_executor()
            try:
                mapper = executor.map if executor else map

                self.current_population = await self._initialize_population(mapper)

                # Main evolution loop
                for generation in range(evolution.generations):
                    with logfire.span("Generation", generation=generation):
                        stats = self._record_generation()

                        if self.observer is not None:
                            self.observer(generation, stats["best_fitness"])

                        if generation % self.config.logging.log_interval == 0:
                            self._log_progress(generation, stats)

                        self.current_population = await self._create_next_generation(mapper)

            except Exception as e:
                self.state = EngineState.FAILED
                self.logger.error(f"Evolution failed: {e}")
                raise
            finally:
                if executor:
                    executor.shutdown(wait=True)

            final_stats = self._record_generation()
            self.state = EngineState.TERMINATED

            elapsed_time = datetime.now() - self.start_time
            best = self.current_population.best()
            self.logger.info(
                f"Evolution completed in {elapsed_time}: best fitness {best.fitness:.4f} "
                f"at {dict(zip(self.codec.names, best.values))}"
            )
            logfire.info("Evolution Completed",
                         best_fitness=final_stats["best_fitness"],
                         best_objective=final_stats["best_objective"],
                         total_evaluations=self.total_evaluations)

            return OptimizationResult(
                best=best,
                variable_names=self.codec.names,
                generations=self.current_population.generation,
                total_evaluations=self.total_evaluations,
                final_population=self.current_population,
                history=list(self.history),
                elapsed=elapsed_time
            )

    def _create_executor(self) -> Optional[ThreadPoolExecutor]:
        """Thread pool for objective evaluation, if enabled."""
        parallel = self.config.parallelization
        if not parallel.enable_parallel:
            return None
        num_workers = parallel.num_workers or os.cpu_count() or 1
        return ThreadPoolExecutor(max_workers=num_workers, thread_name_prefix="genetic-eval")

    async def _initialize_population(self, mapper: Callable) -> Population:
        """Initialize the population by sampling the real domain."""
        with logfire.span("Initialize Population"):
            population = generate_population(
                self.codec,
                self.evaluate,
                self.config.evolution.population_size,
                self.rng,
                mapper=mapper
            )
            self.total_evaluations += len(population)

            self.logger.info(f"Initialized population with {len(population)} candidates")
            return population

    async def _create_next_generation(self, mapper: Callable) -> Population:
        """Select, vary and evaluate the generation that replaces the current one."""
        with logfire.span("Create Next Generation"):
            pop_size = self.config.evolution.population_size
            mutation_rate = self.config.evolution.mutation_rate

            mating_pool = generate_mating_pool(self.current_population.candidates, pop_size)

            # All random draws happen here, in pool order, on the engine thread
            offspring: List[str] = []
            for i in range(0, len(mating_pool), 2):
                parent1 = mating_pool[i].chromosome
                parent2 = mating_pool[(i + 1) % len(mating_pool)].chromosome
                offspring.extend(breed(parent1, parent2, mutation_rate, self.rng))

            # An odd pool wraps around and yields one child too many
            offspring = offspring[:pop_size]

            candidates = await self._evaluate_chromosomes(offspring, mapper)
            return self.current_population.next_generation(candidates)

    async def _evaluate_chromosomes(self, chromosomes: List[str], mapper: Callable) -> List[Candidate]:
        """Decode and evaluate each chromosome, preserving order."""
        with logfire.span("Evaluate Population", size=len(chromosomes)):
            candidates = list(mapper(
                lambda chromosome: Candidate.evaluate(chromosome, self.codec, self.evaluate),
                chromosomes
            ))
            self.total_evaluations += len(candidates)
            return candidates

    def _record_generation(self) -> Dict[str, Any]:
        """Record statistics of the current population in history."""
        stats = self.current_population.calculate_statistics()
        diversity = self.current_population.calculate_diversity()

        history_entry = {
            **stats,
            **diversity,
            "timestamp": datetime.now().isoformat()
        }
        self.history.append(history_entry)
        return history_entry

    def _log_progress(self, generation: int, stats: Dict[str, Any]) -> None:
        """Log evolution progress."""
        if self.config.logging.enable_logging:
            self.logger.info(
                f"Generation {generation}: "
                f"Best: {stats.get('best_fitness', 0):.4f}, "
                f"Avg: {stats.get('avg_fitness', 0):.4f}, "
                f"Diversity: {stats.get('uniqueness_ratio', 0):.2f}"
            )

        if self.config.logging.metrics_export:
            metrics = {
                "evolution_generation": generation,
                **{k: v for k, v in stats.items() if k not in ("generation", "timestamp")}
            }
            logfire.info("Evolution Progress", **metrics)
