"""
Unit tests for the bundled exercise catalog and its loader.
"""

import json

import pytest
from pydantic import ValidationError

from domain.models import ALL_AGES, parse_age_range
from infrastructure.memory import InMemoryFitnessStore, load_exercise_catalog
from infrastructure.memory.catalog import DEFAULT_CATALOG_PATH


@pytest.mark.unit
class TestBundledCatalog:
    """The catalog shipped in shared/catalog must always load."""

    @pytest.fixture(scope="class")
    def catalog(self):
        return load_exercise_catalog()

    def test_catalog_file_exists(self):
        assert DEFAULT_CATALOG_PATH.is_file()

    def test_catalog_has_every_seed_exercise(self, catalog):
        assert len(catalog) == 21

    def test_every_age_range_parses(self, catalog):
        for exercise in catalog:
            assert exercise.age_range == ALL_AGES or parse_age_range(exercise.age_range), exercise.name

    def test_every_category_is_represented(self, catalog):
        assert {exercise.category for exercise in catalog} == {
            "Upper Body", "Lower Body", "Core", "Cardio"
        }

    def test_instruction_steps_are_numbered_from_one(self, catalog):
        for exercise in catalog:
            steps = [instruction.step for instruction in exercise.instructions]
            assert steps == list(range(1, len(steps) + 1)), exercise.name

    def test_seeding_assigns_ids_in_file_order(self, catalog):
        store = InMemoryFitnessStore(exercises=catalog)
        exercises = store.get_all_exercises()
        assert [e.id for e in exercises] == list(range(1, len(catalog) + 1))
        assert exercises[0].name == catalog[0].name


@pytest.mark.unit
class TestLoadExerciseCatalog:

    def test_loads_custom_path(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps([
            {
                "name": "Wall Sit",
                "description": "Hold a seated position against a wall",
                "imageUrl": "https://example.com/wall-sit.jpg",
                "category": "Lower Body",
                "difficulty": "Beginner",
                "ageRange": "Age 18-65",
                "muscleGroups": "Quadriceps",
            }
        ]))

        exercises = load_exercise_catalog(path)

        assert len(exercises) == 1
        assert exercises[0].age_range == "Age 18-65"
        assert exercises[0].instructions == []

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_exercise_catalog(tmp_path / "missing.json")

    def test_invalid_entry_raises(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps([{"name": "No category"}]))

        with pytest.raises(ValidationError):
            load_exercise_catalog(path)
