"""
Pool Optimizer

This module drives a bounded pool of chromosomes toward higher fitness:
- Elitism (the fittest chromosome always sits at index 0)
- Hard pool size cap with positional truncation
- Random injection for diversity
- Crossover between refined elites that are not near-duplicates
- Exploration crossovers against fresh random chromosomes

Runs are synchronous and use only the builder's random source, so a seeded
builder makes an entire run reproducible.

Author: chromosomes maintainers
License: MIT
"""

from __future__ import annotations

import uuid

from loguru import logger

from ..config import EvolutionConfig
from ..genome.encoding import Chromosome, ChromosomeBuilder
from ..genome.fitness import FitnessFn, above_average, fittest_index, most_fit, summarize
from ..monitoring.logging_config import LogContext
from .history import EvolutionHistory, GenerationRecord


# =============================================================================
# Pool Optimizer
# =============================================================================


class PoolOptimizer:
    """
    Maximizes a fitness function over chromosomes from one builder.

    Responsibilities:
    - Seed the initial random pool
    - Run the fixed number of generation steps
    - Keep an in-memory history of each generation
    """

    def __init__(
        self,
        fitness: FitnessFn,
        builder: ChromosomeBuilder,
        config: EvolutionConfig | None = None,
    ):
        """
        Initialize pool optimizer.

        Args:
            fitness: Function scoring a chromosome (higher is better)
            builder: Builder supplying random chromosomes and breeding policy
            config: Evolution configuration (uses defaults if None)
        """
        self.fitness = fitness
        self.builder = builder
        self.config = config or EvolutionConfig()
        self.history = EvolutionHistory()

    def initial_pool(self) -> list[Chromosome]:
        """Build population_size uniformly random chromosomes."""
        return [self.builder.build_random() for _ in range(self.config.population_size)]

    def _scorer(self) -> FitnessFn:
        """
        Fitness function that scores each chromosome at most once.

        Entries hold the chromosome itself so its id stays unique while the
        cache lives.
        """
        cache: dict[int, tuple[Chromosome, float]] = {}

        def score(c: Chromosome) -> float:
            entry = cache.get(id(c))
            if entry is None:
                entry = cache[id(c)] = (c, self.fitness(c))
            return entry[1]

        return score

    def step(self, pool: list[Chromosome], generation: int = 0) -> list[Chromosome]:
        """
        Advance the pool by one generation.

        Args:
            pool: Current pool (modified in place)
            generation: Generation number used for the history record

        Returns:
            The same pool list, grown with new offspring

        Raises:
            EmptyCandidateSetError: If the pool is empty
        """
        cfg = self.config
        score = self._scorer()

        # Elitism: the fittest chromosome moves to the front
        elite_index, elite_fitness = fittest_index(score, pool)
        pool[0], pool[elite_index] = pool[elite_index], pool[0]

        truncated = len(pool) > cfg.max_pool_size
        if truncated:
            del pool[cfg.truncate_size:]

        for _ in range(cfg.random_injections):
            pool.append(self.builder.build_random())

        # Roughly the top quartile: above average twice over
        elites = above_average(score, above_average(score, pool))
        elites = elites[:cfg.population_size]

        offspring = 0
        for i in range(len(elites)):
            for j in range(i, len(elites)):
                if elites[i].difference(elites[j]) > cfg.min_crossover_distance:
                    pool.append(elites[i].crossover(elites[j]))
                    offspring += 1

        for k, individual in enumerate(elites):
            slot = k + 1
            if slot < len(pool):
                pool[slot] = individual
            pool.append(individual.crossover(self.builder.build_random()))
            offspring += 1

        summary = summarize(score, pool)
        self.history.record(
            GenerationRecord(
                generation=generation,
                best_fitness=summary.best,
                mean_fitness=summary.mean,
                pool_size=summary.size,
                elite_size=len(elites),
                offspring=offspring,
                truncated=truncated,
            )
        )

        logger.debug(
            "Generation complete",
            generation=generation,
            elite_fitness=elite_fitness,
            pool_size=len(pool),
            elites=len(elites),
            offspring=offspring,
        )
        return pool

    def run(self) -> Chromosome:
        """
        Run every generation and return the fittest chromosome found.

        Raises:
            EmptyCandidateSetError: If population_size is 0
        """
        self.history.clear()
        run_id = uuid.uuid4().hex[:8]

        with LogContext(run_id=run_id):
            logger.info(
                "Starting optimization",
                traits=list(self.builder.schema),
                population_size=self.config.population_size,
                generations=self.config.generations,
            )

            pool = self.initial_pool()
            for generation in range(self.config.generations):
                pool = self.step(pool, generation)

            best = most_fit(self.fitness, pool)

            logger.info(
                "Optimization finished",
                generations=len(self.history),
                pool_size=len(pool),
                best=repr(best),
                improvement=self.history.improvement(),
            )

        return best


def optimize(
    fitness: FitnessFn,
    builder: ChromosomeBuilder,
    config: EvolutionConfig | None = None,
) -> Chromosome:
    """
    Attempt to maximize the fitness function.

    Args:
        fitness: Function scoring a chromosome (higher is better)
        builder: Builder defining the traits and breeding policy
        config: Evolution configuration (uses defaults if None)

    Returns:
        Fittest chromosome in the final pool
    """
    return PoolOptimizer(fitness, builder, config).run()


__all__ = ["PoolOptimizer", "optimize"]
