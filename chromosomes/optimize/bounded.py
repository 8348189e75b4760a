"""
Bounded Real-Function Maximization

Wraps real functions of one to three variables as chromosome fitness
functions. Each axis is a trait ("X", "Y", "Z") whose byte value maps onto
[lower, upper] through lower + (value / 255) * (upper - lower).

Author: chromosomes maintainers
License: MIT
"""

from __future__ import annotations

from typing import Callable

from loguru import logger

from ..config import EvolutionConfig
from ..exceptions import ConfigurationError
from ..genome.encoding import DEFAULT_MUTATION_CHANCE, Chromosome, ChromosomeBuilder
from ..genome.fitness import FitnessFn
from .population import optimize


AXES = ("X", "Y", "Z")
MAX_TRAIT_VALUE = 255.0

RealFunction = Callable[[float], float]
RealFunction2D = Callable[[float, float], float]
RealFunction3D = Callable[[float, float, float], float]


def rescale(value: int, lower: int, upper: int) -> float:
    """Map a trait byte in [0, 255] onto [lower, upper]."""
    return lower + (value / MAX_TRAIT_VALUE) * (upper - lower)


def _check_bounds(lower: int, upper: int, dimensions: int) -> None:
    if lower > upper:
        raise ConfigurationError(f"Lower bound {lower} exceeds upper bound {upper}")
    if not 1 <= dimensions <= len(AXES):
        raise ConfigurationError(f"Bounded functions take 1 to {len(AXES)} variables, got {dimensions}")


def decode(chromosome: Chromosome, lower: int, upper: int, dimensions: int) -> tuple[float, ...]:
    """Real coordinates encoded by a bounded chromosome."""
    return tuple(rescale(chromosome.get(axis), lower, upper) for axis in AXES[:dimensions])


def bounded_fitness(
    f: Callable[..., float],
    lower: int,
    upper: int,
    dimensions: int = 1,
) -> FitnessFn:
    """
    Wrap a real function of `dimensions` variables as a fitness function.

    Raises:
        ConfigurationError: If the bounds are reversed or dimensions is not 1-3
    """
    _check_bounds(lower, upper, dimensions)

    def fitness(c: Chromosome) -> float:
        return f(*decode(c, lower, upper, dimensions))

    return fitness


def bounded_maximize_nd(
    f: Callable[..., float],
    lower: int,
    upper: int,
    dimensions: int,
    *,
    config: EvolutionConfig | None = None,
    seed: int | None = None,
    mutation_chance: float = DEFAULT_MUTATION_CHANCE,
) -> tuple[float, ...]:
    """
    Maximize a real function of `dimensions` variables over a bounded box.

    Returns:
        The decoded coordinates of the fittest chromosome found
    """
    fitness = bounded_fitness(f, lower, upper, dimensions)

    builder = ChromosomeBuilder(seed=seed, mutation_chance=mutation_chance)
    builder.add_traits(*AXES[:dimensions])

    result = optimize(fitness, builder, config)
    point = decode(result, lower, upper, dimensions)

    logger.info(
        "Bounded maximization finished",
        dimensions=dimensions,
        lower=lower,
        upper=upper,
        point=point,
    )
    return point


def bounded_maximize(
    f: RealFunction,
    lower: int,
    upper: int,
    *,
    config: EvolutionConfig | None = None,
    seed: int | None = None,
    mutation_chance: float = DEFAULT_MUTATION_CHANCE,
) -> float:
    """Maximize a one-dimensional real function over [lower, upper]."""
    (x,) = bounded_maximize_nd(
        f, lower, upper, 1, config=config, seed=seed, mutation_chance=mutation_chance
    )
    return x


def bounded_maximize_2d(
    f: RealFunction2D,
    lower: int,
    upper: int,
    *,
    config: EvolutionConfig | None = None,
    seed: int | None = None,
    mutation_chance: float = DEFAULT_MUTATION_CHANCE,
) -> tuple[float, float]:
    """Maximize a two-dimensional real function over [lower, upper]^2."""
    x, y = bounded_maximize_nd(
        f, lower, upper, 2, config=config, seed=seed, mutation_chance=mutation_chance
    )
    return x, y


def bounded_maximize_3d(
    f: RealFunction3D,
    lower: int,
    upper: int,
    *,
    config: EvolutionConfig | None = None,
    seed: int | None = None,
    mutation_chance: float = DEFAULT_MUTATION_CHANCE,
) -> tuple[float, float, float]:
    """Maximize a three-dimensional real function over [lower, upper]^3."""
    x, y, z = bounded_maximize_nd(
        f, lower, upper, 3, config=config, seed=seed, mutation_chance=mutation_chance
    )
    return x, y, z


__all__ = [
    "AXES",
    "RealFunction",
    "RealFunction2D",
    "RealFunction3D",
    "rescale",
    "decode",
    "bounded_fitness",
    "bounded_maximize",
    "bounded_maximize_nd",
    "bounded_maximize_2d",
    "bounded_maximize_3d",
]
