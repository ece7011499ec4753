"""Tests for the REST API."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from kolam.ai.service import AIAnalysisService
from kolam.config import Settings, settings
from kolam.dependencies import get_ai, get_store
from kolam.engine.recognizer import FALLBACK_NOTE, FALLBACK_PATTERN_TYPE
from kolam.main import app
from kolam.store.designs import DesignStore
from tests.conftest import LINE_12, SQUARE, circle_points

SQUARE_DOTS = [{"x": x, "y": y} for x, y in SQUARE]


def _disabled_settings() -> Settings:
    return Settings(enable_ai_analysis=False, ai_service="openai", openai_api_key="")


@pytest.fixture
def store() -> DesignStore:
    return DesignStore()


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_ai] = lambda: AIAnalysisService(_disabled_settings())
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    r = client.get("/api/health")
    assert r.status_code == 200
    data = r.json()
    assert data["status"] == "ok"
    assert data["env"] == settings.kolam_env
    assert data["stages_registered"] == 7
    assert data["ai"] == "disabled"


def test_ai_status_disabled(client):
    r = client.get("/api/ai/status")
    assert r.status_code == 200
    assert r.json() == {
        "enabled": False,
        "service": "openai",
        "configured": False,
        "apiKeySet": False,
    }


# --- /api/patterns ---

def test_analyze_requires_image_data(client):
    r = client.post("/api/patterns/analyze", json={})
    assert r.status_code == 400
    assert r.json()["detail"] == "Image data required"


def test_analyze_dot_array(client):
    r = client.post("/api/patterns/analyze", json={"imageData": SQUARE_DOTS, "mode": "dots"})
    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True
    data = body["data"]
    assert len(data["dots"]) == 4
    assert data["patternType"] == "simple"
    assert data["symmetry"]["type"] == "rotational"
    assert data["note"] is None
    assert data["aiInsights"] is None
    assert data["synthetic"] is False

    segment = data["connections"][0]
    assert set(segment) == {"from", "to", "distance", "type"}
    assert set(segment["from"]) == {"x", "y"}
    assert set(segment["to"]) == {"x", "y"}
    assert segment["type"] == "line"


def test_analyze_data_url(client, png_data_url):
    r = client.post("/api/patterns/analyze", json={"imageData": png_data_url})
    assert r.status_code == 200
    data = r.json()["data"]
    assert data["dots"]
    assert data["synthetic"] is True
    assert data["patternType"] in {"simple", "mandala", "symmetric", "geometric", "freeform"}


def test_analyze_unusable_input_falls_back(client):
    r = client.post("/api/patterns/analyze", json={"imageData": "hello"})
    assert r.status_code == 200
    data = r.json()["data"]
    assert data["note"] == FALLBACK_NOTE
    assert len(data["dots"]) == 91
    assert data["patternType"] == FALLBACK_PATTERN_TYPE
    assert data["synthetic"] is True


def test_detect_dots(client):
    r = client.post("/api/patterns/detect-dots", json={"imageData": SQUARE_DOTS})
    assert r.status_code == 200
    body = r.json()
    assert body["count"] == 4
    assert body["dots"][1] == {"x": 10.0, "y": 0.0, "confidence": 1.0}


def test_detect_dots_without_input(client):
    r = client.post("/api/patterns/detect-dots", json={})
    assert r.status_code == 200
    assert r.json()["count"] == 0


def test_connect_dots(client):
    r = client.post("/api/patterns/connect-dots", json={"dots": SQUARE_DOTS, "width": 500, "height": 500})
    assert r.status_code == 200
    connections = r.json()["connections"]
    assert len(connections) == 4
    assert connections[0]["from"] == {"x": 0.0, "y": 0.0}
    assert connections[0]["to"] == {"x": 10.0, "y": 0.0}
    assert connections[0]["distance"] == pytest.approx(10.0)


def test_connect_dots_requires_dots(client):
    r = client.post("/api/patterns/connect-dots", json={"dots": []})
    assert r.status_code == 400
    assert r.json()["detail"] == "Dots required"


def test_generate(client):
    r = client.post(
        "/api/patterns/generate",
        json={"dots": SQUARE_DOTS, "style": "festival", "colors": ["#111", "#222"]},
    )
    assert r.status_code == 200
    image = r.json()["image"]
    assert image["style"] == "festival"
    assert image["width"] == 500
    assert [d["color"] for d in image["dots"]] == ["#111", "#222", "#111", "#222"]
    assert len(image["connections"]) == 4


# --- /api/analysis ---

def test_symmetry_endpoint(client):
    r = client.post("/api/analysis/symmetry", json={"dots": SQUARE_DOTS})
    assert r.status_code == 200
    symmetry = r.json()["symmetry"]
    assert symmetry["type"] == "rotational"
    assert symmetry["score"] == 1.0
    assert symmetry["center"]["x"] == pytest.approx(5.0)


def test_out_of_range_coordinates_default_to_zero(client):
    huge = int("1" + "0" * 400)
    dots = [{"x": huge, "y": 1}, {"x": 2, "y": 2}]

    r = client.post("/api/analysis/symmetry", json={"dots": dots})
    assert r.status_code == 200
    assert r.json()["symmetry"]["center"]["x"] == pytest.approx(1.0)

    r = client.post("/api/patterns/connect-dots", json={"dots": dots})
    assert r.status_code == 200
    assert r.json()["connections"] == []


def test_pattern_type_endpoint(client):
    dots = [{"x": p.x, "y": p.y} for p in circle_points(16)]
    r = client.post("/api/analysis/pattern-type", json={"dots": dots})
    assert r.status_code == 200
    assert r.json()["patternType"] == "mandala"

    line = [{"x": x, "y": y} for x, y in LINE_12]
    r = client.post("/api/analysis/pattern-type", json={"dots": line})
    assert r.json()["patternType"] == "symmetric"


def test_principles_endpoint(client):
    r = client.post("/api/analysis/principles", json={"dots": SQUARE_DOTS, "connections": []})
    assert r.status_code == 200
    principles = r.json()["principles"]
    assert principles["balance"] == 1.0
    assert principles["emphasis"] == pytest.approx(0.2)


def test_principles_requires_dots(client):
    r = client.post("/api/analysis/principles", json={"dots": []})
    assert r.status_code == 400


def test_recommendations_endpoint(client):
    r = client.post("/api/analysis/recommendations", json={"dots": SQUARE_DOTS})
    assert r.status_code == 200
    tips = r.json()["recommendations"]
    assert "Add more dots to create a more complex design" in tips
    assert "This is a simple design - perfect for beginners!" in tips


# --- /api/designs ---

def test_design_crud(client):
    r = client.post("/api/designs", json={"name": "Pulli", "dots": SQUARE_DOTS, "imageData": "data:x"})
    assert r.status_code == 201
    created = r.json()
    assert created["id"] == 1
    assert created["name"] == "Pulli"
    assert created["imageData"] == "data:x"
    assert created["style"] == "traditional"
    assert "createdAt" in created and "updatedAt" in created

    r = client.get("/api/designs/1")
    assert r.status_code == 200
    assert r.json()["dots"] == SQUARE_DOTS

    r = client.put("/api/designs/1", json={"style": "modern"})
    assert r.status_code == 200
    updated = r.json()
    assert updated["style"] == "modern"
    assert updated["name"] == "Pulli"

    r = client.delete("/api/designs/1")
    assert r.status_code == 200
    assert r.json() == {"message": "Design deleted", "success": True}

    assert client.get("/api/designs/1").status_code == 404


def test_list_designs_newest_first(client):
    client.post("/api/designs", json={"name": "first"})
    client.post("/api/designs", json={"name": "second"})
    r = client.get("/api/designs")
    assert r.status_code == 200
    assert [d["name"] for d in r.json()] == ["second", "first"]


def test_create_design_defaults_name(client):
    r = client.post("/api/designs", json={})
    assert r.status_code == 201
    assert r.json()["name"].startswith("Kolam-")


@pytest.mark.parametrize("method", ["get", "put", "delete"])
def test_missing_design_is_404(client, method):
    kwargs = {"json": {"name": "x"}} if method == "put" else {}
    r = getattr(client, method)("/api/designs/999", **kwargs)
    assert r.status_code == 404
    assert r.json()["detail"] == "Design not found"


def test_non_numeric_design_id_is_404(client):
    assert client.get("/api/designs/abc").status_code == 404
