"""
DEPRECATED: This file is kept for backward compatibility only.

Use pyproject.toml for all package configuration (PEP 621 compliant).
Modern installations should use: pip install -e .
"""

from setuptools import setup

# All configuration is in pyproject.toml (PEP 621)
setup()
