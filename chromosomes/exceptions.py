"""
Error types raised by the chromosome engine.

Every error here is a programmer or configuration mistake. None of them is
retried internally; they propagate straight to the caller.

Author: chromosomes maintainers
License: MIT
"""

from __future__ import annotations


class ChromosomeError(Exception):
    """Base class for all chromosome engine errors."""


class DuplicateTraitError(ChromosomeError, ValueError):
    """A trait name was registered twice on the same builder."""

    def __init__(self, trait: str):
        self.trait = trait
        super().__init__(f"Duplicate trait: {trait!r}")


class ConfigurationError(ChromosomeError, ValueError):
    """Invalid engine configuration (mutation chance, bounds, config files)."""


class UnknownTraitError(ChromosomeError, KeyError):
    """A trait was looked up on a chromosome whose schema does not contain it."""

    def __init__(self, trait: str, known: tuple[str, ...] = ()):
        self.trait = trait
        self.known = known
        super().__init__(trait)

    def __str__(self) -> str:
        return f"Unknown trait {self.trait!r} (known traits: {list(self.known)})"


class IncompatibleChromosomeError(ChromosomeError, ValueError):
    """Two chromosomes do not share the same set of trait names."""

    def __init__(self, left: tuple[str, ...], right: tuple[str, ...]):
        self.left = left
        self.right = right
        super().__init__(
            f"Incompatible chromosomes: traits {sorted(left)} vs {sorted(right)}"
        )


class EmptyCandidateSetError(ChromosomeError, ValueError):
    """Selection was asked to pick from zero candidates."""

    def __init__(self, message: str = "Cannot select from an empty candidate set"):
        super().__init__(message)


__all__ = [
    "ChromosomeError",
    "DuplicateTraitError",
    "ConfigurationError",
    "UnknownTraitError",
    "IncompatibleChromosomeError",
    "EmptyCandidateSetError",
]
