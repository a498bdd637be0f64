"""Tests for the mesh generation API."""

import json
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from quadmap.api.main import app
from quadmap.config import settings
from quadmap.core import MeshConsistencyError

SMALL = {
    "ringCount": 2,
    "latticeSpacing": 10.0,
    "randomSeed": 4,
    "relaxationIterations": 5,
    "relaxationStrength": 0.2,
}


class TestMeshAPI:
    """Test the generation endpoints."""

    def setup_method(self):
        """Set up test client."""
        self.client = TestClient(app)

    def test_root(self):
        response = self.client.get("/")
        assert response.status_code == 200
        assert response.json()["status"] == "running"

    def test_health(self):
        response = self.client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_generate(self):
        response = self.client.post("/meshes/generate", json=SMALL)
        assert response.status_code == 200

        data = response.json()
        assert data["params"] == SMALL
        assert len(data["tiles"]) > 0
        assert all(len(tile["vertices"]) == 4 for tile in data["tiles"])
        assert {"x", "y", "index", "neighbors", "adjacentFaces"} <= set(data["vertices"][0])

    def test_generate_is_deterministic(self):
        first = self.client.post("/meshes/generate", json=SMALL).json()
        second = self.client.post("/meshes/generate", json=SMALL).json()
        assert first == second

    def test_defaults_fill_missing_fields(self):
        response = self.client.post("/meshes/generate",
                                    json={"ringCount": 1, "relaxationIterations": 2})
        assert response.status_code == 200
        params = response.json()["params"]
        assert params["latticeSpacing"] == settings.default_lattice_spacing
        assert params["relaxationStrength"] == settings.default_relaxation_strength

    @pytest.mark.parametrize("override", [
        {"ringCount": 0},
        {"latticeSpacing": -2},
        {"relaxationStrength": 2.0},
        {"relaxationIterations": -5},
        {"ringCount": True},
        {"randomSeed": False},
    ])
    def test_validation_errors(self, override):
        response = self.client.post("/meshes/generate", json={**SMALL, **override})
        assert response.status_code == 422

    @pytest.mark.parametrize("field", ["latticeSpacing", "relaxationStrength"])
    def test_non_finite_floats_rejected(self, field):
        # 1e309 overflows to infinity when the body is parsed
        body = json.dumps({**SMALL, field: 1.0}).replace(": 1.0", ": 1e309")
        response = self.client.post("/meshes/generate", content=body,
                                    headers={"Content-Type": "application/json"})
        assert response.status_code == 422

    def test_ring_limit(self):
        response = self.client.post("/meshes/generate",
                                    json={**SMALL, "ringCount": settings.max_ring_count + 1})
        assert response.status_code == 400

    def test_iteration_limit(self):
        response = self.client.post(
            "/meshes/generate",
            json={**SMALL, "relaxationIterations": settings.max_relaxation_iterations + 1})
        assert response.status_code == 400

    @patch("quadmap.api.main.generate_mesh", side_effect=MeshConsistencyError("asymmetric adjacency"))
    def test_consistency_error(self, mock_generate):
        response = self.client.post("/meshes/generate", json=SMALL)
        assert response.status_code == 500
        assert "asymmetric adjacency" in response.json()["detail"]
        mock_generate.assert_called_once()

    def test_statistics(self):
        response = self.client.post("/meshes/statistics", json=SMALL)
        assert response.status_code == 200

        data = response.json()
        assert data["params"] == SMALL
        assert data["face_count"] > 0
        assert data["boundary_vertex_count"] == 24
        assert data["min_area"] <= data["average_area"] <= data["max_area"]
