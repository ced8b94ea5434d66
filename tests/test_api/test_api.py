"""Tests for API endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

from genart.main import app


client = TestClient(app)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["paintings_registered"] >= 2


def test_list_paintings():
    response = client.get("/api/paintings")
    assert response.status_code == 200
    ids = {p["id"] for p in response.json()["paintings"]}
    assert {"maze", "hitomezashi"} <= ids


def test_list_paintings_by_tag():
    response = client.get("/api/paintings", params={"tag": "solver"})
    assert response.status_code == 200
    assert [p["id"] for p in response.json()["paintings"]] == ["maze"]

    response = client.get("/api/paintings", params={"tag": "watercolour"})
    assert response.json()["paintings"] == []


def test_paint_maze():
    response = client.post("/api/paint", json={"painting": "maze", "seed": 3, "width": 400, "height": 300})
    assert response.status_code == 200
    data = response.json()
    assert data["seed"] == 3
    assert data["polylines"] > 0
    assert data["errors"] == {}
    assert data["svg"].startswith("<?xml")


def test_paint_hitomezashi_default_seed():
    response = client.post("/api/paint", json={"painting": "hitomezashi", "width": 300, "height": 200})
    assert response.status_code == 200
    assert response.json()["seed"] == 42


def test_paint_unknown_painting():
    response = client.post("/api/paint", json={"painting": "mountain"})
    assert response.status_code == 404


def test_paint_rejects_negative_seed():
    response = client.post("/api/paint", json={"painting": "maze", "seed": -1})
    assert response.status_code == 422


def test_maze_endpoint():
    response = client.post("/api/maze", json={"width": 5, "height": 4, "seed": 7})
    assert response.status_code == 200
    data = response.json()
    assert data["solution"][0] == data["entrance"]
    assert data["solution"][-1] == data["exit"]
    assert len(data["text"].splitlines()) == 9


def test_maze_rejects_zero_width():
    response = client.post("/api/maze", json={"width": 0, "height": 4})
    assert response.status_code == 422


def test_paint_rejects_oversized_canvas():
    response = client.post("/api/paint", json={"painting": "maze", "width": 2_000_000, "height": 2_000_000})
    assert response.status_code == 422


def test_paint_rejects_canvas_inside_border():
    response = client.post("/api/paint", json={"painting": "maze", "width": 50, "height": 50})
    assert response.status_code == 422
    assert "border" in response.json()["detail"]
