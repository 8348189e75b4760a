"""
Chromosome Operators - Mutation & Crossover

This module implements the breeding operators bound into chromosomes:
- MutationOperator: per-trait Bernoulli trial, XOR with a random byte
- UniformCrossover: per-trait random bitmask recombination + mutation
- CrossoverPolicy: protocol any custom (parent1, parent2) -> child callable meets

Author: chromosomes maintainers
License: MIT
"""

from __future__ import annotations

import math
import random
from typing import TYPE_CHECKING, Protocol

from ..exceptions import ConfigurationError

if TYPE_CHECKING:
    from .encoding import Chromosome


BYTE_MASK = 0xFF


# =============================================================================
# Policy Protocol
# =============================================================================


class CrossoverPolicy(Protocol):
    """Any callable producing a child chromosome from two parents."""

    def __call__(self, parent1: Chromosome, parent2: Chromosome) -> Chromosome: ...


def validate_mutation_chance(chance: float) -> float:
    """Return chance as a float, or raise ConfigurationError outside [0, 1]."""
    try:
        value = float(chance)
    except (TypeError, ValueError):
        raise ConfigurationError(f"Mutation chance must be a number, got {chance!r}") from None

    if math.isnan(value) or not 0.0 <= value <= 1.0:
        raise ConfigurationError(f"Mutation chance must be in [0, 1] (got {chance})")
    return value


# =============================================================================
# Mutation
# =============================================================================


class MutationOperator:
    """Randomizes trait bytes with a fixed per-trait probability."""

    def __init__(self, chance: float, rng: random.Random):
        """
        Initialize mutation operator.

        Args:
            chance: Probability of mutating each trait, in [0, 1]
            rng: Random source shared with the owning builder
        """
        self.chance = validate_mutation_chance(chance)
        self.rng = rng

    def mutate(self, value: int) -> int:
        """
        Apply one Bernoulli trial to a trait byte.

        On success the byte is XORed with a fresh uniform byte, so any subset
        of its bits may flip. A zero chance never touches the random source.
        """
        if self.chance and self.rng.random() < self.chance:
            value ^= self.rng.randrange(BYTE_MASK + 1)
        return value & BYTE_MASK

    def __repr__(self) -> str:
        return f"MutationOperator(chance={self.chance})"


# =============================================================================
# Crossover
# =============================================================================


class UniformCrossover:
    """
    Bit-level uniform crossover.

    Each trait draws its own 8-bit mask m; the child byte is
    (p1 & m) | (p2 & ~m), then mutated. Traits are visited in the left
    parent's order and the right parent is read by name.
    """

    def __init__(self, mutation: MutationOperator, rng: random.Random):
        self.mutation = mutation
        self.rng = rng

    def __call__(self, parent1: Chromosome, parent2: Chromosome) -> Chromosome:
        genes: dict[str, int] = {}
        for trait in parent1.traits:
            mask = self.rng.randrange(BYTE_MASK + 1)
            combined = (parent1.get(trait) & mask) | (parent2.get(trait) & (~mask & BYTE_MASK))
            genes[trait] = self.mutation.mutate(combined)
        return parent1.derive(genes)

    def __repr__(self) -> str:
        return f"UniformCrossover(mutation={self.mutation!r})"


def keep_first_parent(parent1: Chromosome, parent2: Chromosome) -> Chromosome:
    """Crossover policy that returns the left parent unchanged."""
    return parent1


__all__ = [
    "CrossoverPolicy",
    "MutationOperator",
    "UniformCrossover",
    "keep_first_parent",
    "validate_mutation_chance",
]
