"""
chromosomes - Genetic Algorithm Engine

Byte-encoded chromosomes, uniform crossover with mutation, and a bounded
pool optimizer that maximizes arbitrary fitness functions.
"""

# Genome system
from chromosomes.genome import (
    TraitSchema,
    Chromosome,
    ChromosomeBuilder,
    MutationOperator,
    UniformCrossover,
    keep_first_parent,
    most_fit,
    above_average,
)

# Optimization
from chromosomes.optimize import (
    PoolOptimizer,
    optimize,
    bounded_maximize,
    bounded_maximize_2d,
    bounded_maximize_3d,
    rescale,
)

# Configuration
from chromosomes.config import (
    ChromosomesConfig,
    GenomeConfig,
    EvolutionConfig,
    LoggingConfig,
    load_config,
)

# Errors
from chromosomes.exceptions import (
    ChromosomeError,
    DuplicateTraitError,
    ConfigurationError,
    UnknownTraitError,
    IncompatibleChromosomeError,
    EmptyCandidateSetError,
)

__all__ = [
    # Genome system
    "TraitSchema",
    "Chromosome",
    "ChromosomeBuilder",
    "MutationOperator",
    "UniformCrossover",
    "keep_first_parent",
    "most_fit",
    "above_average",
    # Optimization
    "PoolOptimizer",
    "optimize",
    "bounded_maximize",
    "bounded_maximize_2d",
    "bounded_maximize_3d",
    "rescale",
    # Configuration
    "ChromosomesConfig",
    "GenomeConfig",
    "EvolutionConfig",
    "LoggingConfig",
    "load_config",
    # Errors
    "ChromosomeError",
    "DuplicateTraitError",
    "ConfigurationError",
    "UnknownTraitError",
    "IncompatibleChromosomeError",
    "EmptyCandidateSetError",
]

__version__ = "0.1.0"
