"""
Command Line Interface for chromosomes.

Commands:
- chromosomes maximize: Maximize a benchmark function over a bounded box
- chromosomes sample: Print a random chromosome
- chromosomes show-config: Print the effective configuration

Author: chromosomes maintainers
License: MIT
"""

from .commands import cli, main

__all__ = ["cli", "main"]
