"""
Infrastructure Layer for the WebFitness API.

This package contains concrete implementations of repository interfaces:
- memory/: In-memory fitness store and the bundled exercise catalog
"""

from infrastructure.memory import InMemoryFitnessStore, load_exercise_catalog

__all__ = [
    "InMemoryFitnessStore",
    "load_exercise_catalog",
]
