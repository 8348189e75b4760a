"""
Pytest configuration and shared fixtures for chromosomes tests.

This module provides reusable test fixtures for:
- Seeded chromosome builders
- Fitness functions
- Configuration objects and files
- Loguru handler cleanup

Author: chromosomes maintainers
License: MIT
"""

import json
import sys

import pytest
import yaml
from loguru import logger

from chromosomes.config import ChromosomesConfig, EvolutionConfig
from chromosomes.genome.encoding import Chromosome, ChromosomeBuilder


GENE1 = "gene1"
GENE2 = "gene2"
GENE3 = "gene3"


# ============================================================================
# Logging Fixtures
# ============================================================================

@pytest.fixture(autouse=True)
def reset_loguru():
    """Restore loguru's default stderr handler after every test."""
    yield
    logger.remove()
    logger.add(sys.stderr)


# ============================================================================
# Builder Fixtures
# ============================================================================

@pytest.fixture
def three_gene_builder():
    """Seeded builder with three traits and a noticeable mutation chance."""
    builder = ChromosomeBuilder(seed=1401)
    builder.set_mutation_chance(0.15)
    builder.add_traits(GENE1, GENE2, GENE3)
    return builder


@pytest.fixture
def x_builder():
    """Seeded builder with a single trait "X" and no mutation."""
    builder = ChromosomeBuilder(seed=1401, mutation_chance=0.0)
    builder.add_trait("X")
    return builder


@pytest.fixture
def empty_builder():
    """Builder without any traits."""
    return ChromosomeBuilder(seed=7)


# ============================================================================
# Fitness Fixtures
# ============================================================================

def most_ones_fitness(c: Chromosome) -> float:
    return float(c.get(GENE1) + c.get(GENE2) + c.get(GENE3))


def leading_zeros(value: int) -> int:
    return 8 - value.bit_length()


def sum_leading_zeros(c: Chromosome) -> float:
    return float(sum(leading_zeros(c.get(g)) for g in (GENE1, GENE2, GENE3)))


@pytest.fixture
def most_ones():
    """Sum of the three gene values."""
    return most_ones_fitness


@pytest.fixture
def most_leading_zeros():
    """Sum of leading zero bits across the three genes."""
    return sum_leading_zeros


@pytest.fixture
def x_fitness():
    """Fitness equal to the value of trait "X"."""
    return lambda c: float(c.get("X"))


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def evolution_config():
    """Small evolution configuration for fast tests."""
    return EvolutionConfig(
        population_size=8,
        generations=10,
        max_pool_size=60,
        random_injections=2,
    )


@pytest.fixture
def config_dict():
    """Plain configuration dictionary."""
    return {
        "genome": {"mutation_chance": 0.05, "seed": 11},
        "evolution": {"population_size": 6, "generations": 5, "max_pool_size": 50},
        "logging": {"level": "warning"},
    }


@pytest.fixture
def yaml_config_file(tmp_path, config_dict):
    """Configuration written as YAML."""
    path = tmp_path / "chromosomes.yaml"
    path.write_text(yaml.safe_dump(config_dict))
    return path


@pytest.fixture
def json_config_file(tmp_path, config_dict):
    """Configuration written as JSON."""
    path = tmp_path / "chromosomes.json"
    path.write_text(json.dumps(config_dict))
    return path


@pytest.fixture
def default_config():
    """Configuration with every default."""
    return ChromosomesConfig()
