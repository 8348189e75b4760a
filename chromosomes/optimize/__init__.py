"""
Population optimization and bounded real-function maximization.

Author: chromosomes maintainers
License: MIT
"""

from .population import PoolOptimizer, optimize
from .history import EvolutionHistory, GenerationRecord
from .bounded import (
    AXES,
    bounded_fitness,
    bounded_maximize,
    bounded_maximize_2d,
    bounded_maximize_3d,
    bounded_maximize_nd,
    decode,
    rescale,
)

__all__ = [
    "PoolOptimizer",
    "optimize",
    "EvolutionHistory",
    "GenerationRecord",
    "AXES",
    "bounded_fitness",
    "bounded_maximize",
    "bounded_maximize_2d",
    "bounded_maximize_3d",
    "bounded_maximize_nd",
    "decode",
    "rescale",
]
