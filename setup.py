"""
Build script for hakobi.

Reads metadata from pyproject.toml to ensure consistency.
"""

from pathlib import Path
from setuptools import setup

import tomllib

# Read metadata from pyproject.toml (single source of truth)
pyproject_path = Path(__file__).parent / "pyproject.toml"
with open(pyproject_path, "rb") as f:
    pyproject = tomllib.load(f)

project = pyproject["project"]

setup(
    name=project["name"],
    version=project["version"],
    description=project["description"],
    python_requires=project["requires-python"],
)
