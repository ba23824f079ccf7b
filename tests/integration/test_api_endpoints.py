"""
Integration tests for the WebFitness API.

Drives the full application (routers, use cases, store, error handlers)
through TestClient. The ``client`` fixture serves a store seeded with user 1
("sam") and two exercises: 1 Squats (Lower Body, All Ages) and
2 Plank (Core, Age 30-45).
"""

import pytest
from fastapi import APIRouter
from fastapi.testclient import TestClient

from backend.main import create_app

pytestmark = pytest.mark.integration

ROUTINE_BODY = {
    "name": "A",
    "exercises": [{"exerciseId": 1, "sets": 3, "reps": 10, "duration": None}],
    "duration": 300,
}


def _create_routine(client, body=None):
    response = client.post("/api/routines", json=body or ROUTINE_BODY)
    assert response.status_code == 201
    return response.json()


def _start_workout(client, routine_id):
    response = client.post("/api/workouts", json={"routineId": routine_id})
    assert response.status_code == 201
    return response.json()


# =============================================================================
# Users
# =============================================================================


class TestUsersApi:

    def test_get_current_user(self, client):
        response = client.get("/api/users/current")

        assert response.status_code == 200
        assert response.json() == {"id": 1, "username": "sam", "age": 34, "name": "Sam"}

    def test_current_user_missing(self, test_settings, store):
        client = TestClient(create_app(settings=test_settings, store=store))

        response = client.get("/api/users/current")

        assert response.status_code == 404
        assert response.json() == {"message": "User not found"}

    def test_create_user_never_returns_password(self, client):
        response = client.post(
            "/api/users",
            json={"username": "alex", "password": "pw", "age": 29, "name": "Alex"},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["id"] == 2
        assert "password" not in body

    def test_create_user_duplicate_username(self, client):
        response = client.post(
            "/api/users",
            json={"username": "sam", "password": "pw", "age": 29, "name": "Other"},
        )

        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "Invalid user data"
        assert body["errors"][0]["msg"] == "Username already taken"

    def test_create_user_invalid_payload(self, client):
        response = client.post("/api/users", json={"username": "x", "age": -1})

        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "Invalid user data"
        fields = {tuple(error["loc"])[-1] for error in body["errors"]}
        assert {"password", "name", "age"} <= fields

    def test_patch_user_partial(self, client):
        response = client.patch("/api/users/1", json={"age": 35})

        assert response.status_code == 200
        assert response.json() == {"id": 1, "username": "sam", "age": 35, "name": "Sam"}

    def test_patch_user_rejects_null(self, client):
        response = client.patch("/api/users/1", json={"name": None})
        assert response.status_code == 400

    def test_patch_missing_user(self, client):
        response = client.patch("/api/users/9", json={"age": 35})

        assert response.status_code == 404
        assert response.json() == {"message": "User not found"}


# =============================================================================
# Exercises
# =============================================================================


class TestExercisesApi:

    def test_list_exercises_camel_case(self, client):
        response = client.get("/api/exercises")

        assert response.status_code == 200
        body = response.json()
        assert [e["name"] for e in body] == ["Squats", "Plank"]
        assert body[0]["imageUrl"] == "https://example.com/squats.jpg"
        assert body[0]["ageRange"] == "All Ages"

    def test_filter_by_category(self, client):
        response = client.get("/api/exercises", params={"category": "Core"})
        assert [e["name"] for e in response.json()] == ["Plank"]

    def test_filter_by_age(self, client):
        response = client.get("/api/exercises", params={"minAge": 50, "maxAge": 60})
        assert [e["name"] for e in response.json()] == ["Squats"]

    def test_inverted_age_range(self, client):
        response = client.get("/api/exercises", params={"minAge": 60, "maxAge": 50})

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid exercise query data"

    def test_age_above_supported_range(self, client):
        response = client.get("/api/exercises", params={"minAge": 200})

        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "Invalid exercise data"
        assert body["errors"][0]["loc"] == ["query", "minAge"]

    def test_non_numeric_age(self, client):
        response = client.get("/api/exercises", params={"minAge": "old"})

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid exercise data"

    def test_get_exercise(self, client):
        response = client.get("/api/exercises/2")

        assert response.status_code == 200
        assert response.json()["name"] == "Plank"

    def test_get_missing_exercise(self, client):
        response = client.get("/api/exercises/99")

        assert response.status_code == 404
        assert response.json() == {"message": "Exercise not found"}

    def test_create_exercise(self, client):
        response = client.post(
            "/api/exercises",
            json={
                "name": "Burpees",
                "description": "Full body",
                "imageUrl": "https://example.com/burpees.jpg",
                "category": "Cardio",
                "difficulty": "Advanced",
                "ageRange": "Age 16-60",
                "muscleGroups": "Full Body",
                "instructions": [
                    {"step": 1, "title": "Drop", "description": "Squat down", "keyPoint": "Hands flat"}
                ],
            },
        )

        assert response.status_code == 201
        body = response.json()
        assert body["id"] == 3
        assert body["instructions"][0]["keyPoint"] == "Hands flat"

    def test_create_exercise_invalid_category(self, client):
        response = client.post(
            "/api/exercises",
            json={
                "name": "Yoga",
                "description": "",
                "imageUrl": "",
                "category": "Flexibility",
                "difficulty": "Beginner",
                "ageRange": "All Ages",
                "muscleGroups": "",
            },
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid exercise data"


# =============================================================================
# Routines
# =============================================================================


class TestRoutinesApi:

    def test_create_routine_for_current_user(self, client):
        routine = _create_routine(client)

        assert routine["id"] == 1
        assert routine["userId"] == 1
        assert routine["lastCompleted"] is None
        assert routine["createdAt"].startswith("2024-05-15T09:30:00")
        assert routine["exercises"] == [
            {"exerciseId": 1, "sets": 3, "reps": 10, "duration": None}
        ]

    def test_list_routines(self, client):
        _create_routine(client)
        _create_routine(client, {**ROUTINE_BODY, "name": "B"})

        response = client.get("/api/routines")

        assert [r["name"] for r in response.json()] == ["A", "B"]

    def test_create_routine_invalid(self, client):
        response = client.post("/api/routines", json={"name": "A", "exercises": [{"sets": 0}]})

        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "Invalid routine data"
        assert body["errors"]

    def test_patch_routine(self, client):
        _create_routine(client)

        response = client.patch("/api/routines/1", json={"name": "Renamed"})

        assert response.status_code == 200
        assert response.json()["name"] == "Renamed"
        assert response.json()["duration"] == 300

    def test_patch_routine_unknown_field(self, client):
        _create_routine(client)
        response = client.patch("/api/routines/1", json={"userId": 2})
        assert response.status_code == 400

    def test_delete_routine(self, client):
        _create_routine(client)

        response = client.delete("/api/routines/1")

        assert response.status_code == 204
        assert response.content == b""
        assert client.get("/api/routines/1").status_code == 404

    def test_delete_missing_routine(self, client):
        response = client.delete("/api/routines/1")

        assert response.status_code == 404
        assert response.json() == {"message": "Routine not found"}


# =============================================================================
# Workouts
# =============================================================================


class TestWorkoutsApi:

    def test_completing_last_exercise_completes_workout_and_routine(self, client, clock):
        routine = _create_routine(client)
        workout = _start_workout(client, routine["id"])
        assert workout["completed"] is False
        assert workout["completedExercises"][0]["completed"] is False

        clock.advance(minutes=10)
        response = client.patch(
            f"/api/workouts/{workout['id']}/exercise/1", json={"completed": True}
        )

        assert response.status_code == 200
        finished = response.json()
        assert finished["completed"] is True
        assert finished["completedExercises"][0]["completed"] is True

        routine_after = client.get(f"/api/routines/{routine['id']}").json()
        assert routine_after["lastCompleted"] is not None
        assert routine_after["lastCompleted"] == finished["completedAt"]
        assert finished["completedAt"] != workout["completedAt"]

    def test_active_workout(self, client):
        assert client.get("/api/workouts/active").status_code == 404

        routine = _create_routine(client)
        workout = _start_workout(client, routine["id"])

        response = client.get("/api/workouts/active")
        assert response.status_code == 200
        assert response.json()["id"] == workout["id"]

    def test_active_workout_not_found_message(self, client):
        response = client.get("/api/workouts/active")
        assert response.json() == {"message": "Active workout not found"}

    def test_start_from_missing_routine(self, client):
        response = client.post("/api/workouts", json={"routineId": 5})

        assert response.status_code == 404
        assert response.json() == {"message": "Routine not found"}

    def test_start_requires_routine_id(self, client):
        response = client.post("/api/workouts", json={})

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid workout data"

    def test_complete_endpoint(self, client):
        routine = _create_routine(client)
        workout = _start_workout(client, routine["id"])

        response = client.post(f"/api/workouts/{workout['id']}/complete")

        assert response.status_code == 200
        assert response.json()["completed"] is True
        assert client.get("/api/workouts/active").status_code == 404

    def test_patch_completed_cascades(self, client):
        routine = _create_routine(client)
        workout = _start_workout(client, routine["id"])

        response = client.patch(f"/api/workouts/{workout['id']}", json={"completed": True})

        assert response.json()["completed"] is True
        assert client.get(f"/api/routines/{routine['id']}").json()["lastCompleted"] is not None

    def test_exercise_patch_unknown_exercise_is_no_op(self, client):
        routine = _create_routine(client)
        workout = _start_workout(client, routine["id"])

        response = client.patch(
            f"/api/workouts/{workout['id']}/exercise/42", json={"completed": True}
        )

        assert response.status_code == 200
        assert response.json() == workout

    def test_exercise_patch_invalid_payload(self, client):
        routine = _create_routine(client)
        workout = _start_workout(client, routine["id"])

        response = client.patch(
            f"/api/workouts/{workout['id']}/exercise/1", json={"sets": 0}
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid exercise data"

    def test_missing_workout(self, client):
        response = client.get("/api/workouts/3")

        assert response.status_code == 404
        assert response.json() == {"message": "Workout not found"}

    def test_list_workouts(self, client):
        routine = _create_routine(client)
        _start_workout(client, routine["id"])
        _start_workout(client, routine["id"])

        assert len(client.get("/api/workouts").json()) == 2


# =============================================================================
# Progress
# =============================================================================


class TestProgressApi:

    def test_progress_shape(self, client):
        response = client.get("/api/progress")

        assert response.status_code == 200
        body = response.json()
        assert set(body) == {
            "workoutsCompleted",
            "workoutStreak",
            "routinesCreated",
            "totalDuration",
            "workoutsByCategory",
            "weeklyActivity",
        }
        assert list(body["weeklyActivity"]) == ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]

    def test_progress_counts_completed_workouts(self, client):
        routine = _create_routine(client)
        workout = _start_workout(client, routine["id"])
        client.post(f"/api/workouts/{workout['id']}/complete")
        _start_workout(client, routine["id"])

        body = client.get("/api/progress").json()

        assert body["workoutsCompleted"] == 1
        assert body["routinesCreated"] == 1
        assert body["totalDuration"] == 300
        assert body["workoutsByCategory"]["Lower Body"] == 1


# =============================================================================
# Unexpected Errors
# =============================================================================


class TestServerErrors:

    def test_unhandled_error_returns_generic_500(self, test_settings, seeded_store):
        app = create_app(settings=test_settings, store=seeded_store)
        broken = APIRouter()

        @broken.get("/api/broken")
        def broken_endpoint():
            raise RuntimeError("secret internals")

        app.include_router(broken)
        client = TestClient(app, raise_server_exceptions=False)

        response = client.get("/api/broken")

        assert response.status_code == 500
        assert response.json() == {"message": "Server error"}
