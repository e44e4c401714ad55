"""Tests for the analysis HTTP API."""

import json
from pathlib import Path

import pytest

try:
    from fastapi.testclient import TestClient
    from component_graph.web import create_app
    HAS_WEB = True
except ImportError:
    HAS_WEB = False

pytestmark = pytest.mark.skipif(not HAS_WEB, reason="web dependencies not installed")

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def client():
    return TestClient(create_app())


@pytest.fixture
def components():
    data = json.loads((FIXTURES / "components.json").read_text(encoding="utf-8"))
    return [c for c in data["components"] if c["name"]]


def test_health(client):
    res = client.get("/api/health")
    assert res.status_code == 200
    assert res.json() == {"status": "ok"}


def test_graph(client, components):
    res = client.post("/api/analysis/graph", json={"components": components})
    assert res.status_code == 200
    data = res.json()
    assert data["nodes"] == 8
    assert data["graph"]["app/page.tsx#Page"] == [
        "components/Header.tsx#Header", "components/ProductList.tsx#ProductList",
    ]
    assert data["isolated"] == []


def test_graph_accepts_snake_case_fields(client):
    body = {"components": [
        {"name": "A", "full_path": "src/A.tsx", "imports": ["./B"]},
        {"name": "B", "full_path": "src/B.tsx"},
        {"name": "C", "full_path": "src/C.tsx"},
    ]}
    data = client.post("/api/analysis/graph", json=body).json()
    assert data["graph"]["src/A.tsx#A"] == ["src/B.tsx#B"]
    assert data["edges"] == 1
    assert data["isolated"] == ["src/C.tsx#C"]


def test_circular(client, components):
    res = client.post("/api/analysis/circular", json={"components": components})
    assert res.status_code == 200
    data = res.json()
    assert data["stats"]["totalCircularGroups"] == 2
    assert data["circularGroups"][0]["components"] == ["Header", "Nav"]
    assert data["circularDependencyGraph"]["version"] == "1.1.0"


def test_zombies(client, components):
    res = client.post("/api/analysis/zombies", json={"components": components})
    assert res.status_code == 200
    data = res.json()
    assert [c["components"] for c in data["clusters"]] == [["OldBanner", "OldPromo"]]
    assert data["clusters"][0]["risk"] == "low"
    assert data["stats"]["entryPointsCount"] == 2


def test_dependencies(client, components):
    res = client.post("/api/analysis/dependencies", json={
        "components": components,
        "project_path": str(FIXTURES / "project"),
    })
    assert res.status_code == 200
    data = res.json()
    assert data["dependencyAnalysis"]["unusedDependencies"] == ["moment"]
    assert data["dependencyAnalysis"]["missingDependencies"] == ["axios"]
    assert data["zombieClusters"]["stats"]["totalClusters"] == 1


def test_dependencies_bad_project_path(client, components, tmp_path):
    res = client.post("/api/analysis/dependencies", json={
        "components": components,
        "project_path": str(tmp_path / "missing"),
    })
    assert res.status_code == 400


def test_missing_required_field(client):
    res = client.post("/api/analysis/zombies", json={"components": [{"name": "A"}]})
    assert res.status_code == 422
