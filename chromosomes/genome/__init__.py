"""
Chromosome Genome System

This module implements the byte-encoded genetic representation and the
operators that breed it:
- Trait schemas, chromosomes and the builder that creates them
- Uniform crossover and per-trait mutation
- Fitness-based selection helpers

Author: chromosomes maintainers
License: MIT
"""

# Core encoding
from .encoding import (
    BITS_PER_TRAIT,
    DEFAULT_MUTATION_CHANCE,
    TraitSchema,
    Chromosome,
    ChromosomeBuilder,
    builder_for,
)

# Breeding operators
from .operators import (
    CrossoverPolicy,
    MutationOperator,
    UniformCrossover,
    keep_first_parent,
)

# Selection
from .fitness import (
    FitnessFn,
    FitnessSummary,
    above_average,
    fittest_index,
    most_fit,
    summarize,
)

__all__ = [
    # Encoding
    "BITS_PER_TRAIT",
    "DEFAULT_MUTATION_CHANCE",
    "TraitSchema",
    "Chromosome",
    "ChromosomeBuilder",
    "builder_for",
    # Operators
    "CrossoverPolicy",
    "MutationOperator",
    "UniformCrossover",
    "keep_first_parent",
    # Fitness
    "FitnessFn",
    "FitnessSummary",
    "above_average",
    "fittest_index",
    "most_fit",
    "summarize",
]
