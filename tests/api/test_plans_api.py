"""Tests for the plan generation and catalog HTTP endpoints."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import select

from app.db.models import Exercise
from app.db.session import get_db
from app.main import app

HEADERS = {"X-User-Id": "user-1"}


@pytest.fixture
def client(seeded_session):
    def override_get_db():
        yield seeded_session

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def _generate_body(**overrides) -> dict:
    body = {
        "goal": "strength",
        "experience": "untrained",
        "weekly_days": 3,
        "available_equipment": ["barbell", "dumbbell"],
    }
    body.update(overrides)
    return body


class TestGeneratePlanEndpoint:
    def test_generates_and_saves(self, client):
        response = client.post("/plans/generate", json=_generate_body(), headers=HEADERS)

        assert response.status_code == 201
        data = response.json()
        assert data["id"] is not None
        assert data["user_id"] == "user-1"
        assert data["name"] == "Full Body Strength Workout"
        assert [c["name"] for c in data["categories"]] == ["Full Body", "Strength"]
        assert data["activities"]
        assert [a["order"] for a in data["activities"]] == list(range(1, len(data["activities"]) + 1))
        assert all(len(a["sets"]) == 3 for a in data["activities"])

        stored = client.get(f"/plans/{data['id']}", headers=HEADERS)
        assert stored.status_code == 200
        assert [a["exercise_id"] for a in stored.json()["activities"]] == [
            a["exercise_id"] for a in data["activities"]
        ]

    def test_preview_not_saved(self, client):
        response = client.post("/plans/generate", json=_generate_body(persist=False), headers=HEADERS)
        assert response.status_code == 201
        assert response.json()["id"] is None

    def test_rep_maxes_fill_weights(self, client, seeded_session):
        bench_id = seeded_session.execute(
            select(Exercise.id).where(Exercise.name == "Flat Barbell Bench Press")
        ).scalar_one()

        response = client.post(
            "/plans/generate",
            json=_generate_body(rep_maxes={str(bench_id): 100}, persist=False),
            headers=HEADERS,
        )

        assert response.status_code == 201
        bench = next(a for a in response.json()["activities"] if a["exercise_id"] == bench_id)
        assert [s["weight"] for s in bench["sets"]] == [65.0, 65.0, 65.0]

    def test_missing_day_is_422(self, client):
        response = client.post(
            "/plans/generate",
            json=_generate_body(experience="trained", weekly_days=2),
            headers=HEADERS,
        )
        assert response.status_code == 422
        assert "UpperLowerWorkoutDay" in response.json()["detail"]

    def test_invalid_body_is_422(self, client):
        response = client.post("/plans/generate", json=_generate_body(weekly_days=0), headers=HEADERS)
        assert response.status_code == 422

    def test_missing_user_header_is_401(self, client):
        response = client.post("/plans/generate", json=_generate_body())
        assert response.status_code == 401

    def test_other_users_plan_is_404(self, client):
        plan_id = client.post("/plans/generate", json=_generate_body(), headers=HEADERS).json()["id"]
        response = client.get(f"/plans/{plan_id}", headers={"X-User-Id": "user-2"})
        assert response.status_code == 404


class TestCatalogEndpoints:
    def test_list_exercises_filtered_by_equipment(self, client):
        response = client.get("/catalog/exercises", params={"equipment": ["none"]}, headers=HEADERS)

        assert response.status_code == 200
        names = {e["name"] for e in response.json()}
        assert {"Push-Ups", "Plank"} <= names
        assert all(e["equipment"] == "none" for e in response.json())

    def test_list_plan_categories(self, client):
        response = client.get("/catalog/plan-categories")
        assert response.status_code == 200
        assert "Split Routine" in [c["name"] for c in response.json()]


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}
