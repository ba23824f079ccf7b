"""
In-memory storage adapter.

Provides ``InMemoryFitnessStore``, the implementation of
``application.ports.FitnessStore`` used by the application, and the loader
for the bundled exercise catalog it is seeded with.
"""

from infrastructure.memory.catalog import DEFAULT_CATALOG_PATH, load_exercise_catalog
from infrastructure.memory.store import InMemoryFitnessStore

__all__ = [
    "DEFAULT_CATALOG_PATH",
    "InMemoryFitnessStore",
    "load_exercise_catalog",
]
