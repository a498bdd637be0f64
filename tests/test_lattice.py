"""Tests for hex lattice construction."""

import math

import numpy as np
import pytest
from quadmap.core import InvalidConfigurationError, VertexKind
from quadmap.core.lattice import (
    build_lattice, lattice_position, lattice_vertex_count, vertex_index
)


class TestVertexIndex:
    """Test (ring, sector, offset) addressing."""

    def test_center(self):
        assert vertex_index(0, 0, 0) == 0

    def test_ring_starts(self):
        assert vertex_index(1, 0, 0) == 1
        assert vertex_index(2, 0, 0) == 7
        assert vertex_index(3, 0, 0) == 19

    def test_sector_layout(self):
        assert vertex_index(2, 1, 0) == 9
        assert vertex_index(2, 5, 1) == 18

    def test_sector_wraps(self):
        assert vertex_index(2, 6, 1) == vertex_index(2, 0, 1)
        assert vertex_index(1, 6, 0) == vertex_index(1, 0, 0)

    def test_offset_out_of_range(self):
        with pytest.raises(IndexError):
            vertex_index(2, 0, 2)

    def test_indices_are_dense(self):
        rings = 4
        indices = [vertex_index(i, j, k)
                   for i in range(1, rings + 1) for j in range(6) for k in range(i)]
        assert sorted(indices) == list(range(1, lattice_vertex_count(rings)))


class TestBuildLattice:
    """Test lattice point generation."""

    @pytest.mark.parametrize("rings", [0, 1, 2, 5, 10])
    def test_vertex_count(self, rings):
        mesh = build_lattice(rings, 1.0)
        assert mesh.n_vertices == lattice_vertex_count(rings) == 1 + 3 * rings * (rings + 1)
        assert mesh.faces == []

    def test_positions_follow_index(self):
        spacing = 12.5
        mesh = build_lattice(4, spacing)
        for ring in range(1, 5):
            for sector in range(6):
                for offset in range(ring):
                    expected = lattice_position(ring, sector, offset, spacing)
                    np.testing.assert_allclose(
                        mesh.positions[vertex_index(ring, sector, offset)], expected)

    def test_center_and_corners(self):
        mesh = build_lattice(3, 10.0)
        np.testing.assert_allclose(mesh.positions[0], [0.0, 0.0])
        np.testing.assert_allclose(mesh.positions[1], [10.0, 0.0], atol=1e-12)
        for sector in range(6):
            corner = mesh.positions[vertex_index(3, sector, 0)]
            assert math.isclose(np.hypot(*corner), 30.0)

    def test_neighbouring_points_are_spacing_apart(self):
        mesh = build_lattice(3, 2.0)
        a = mesh.positions[vertex_index(3, 2, 0)]
        b = mesh.positions[vertex_index(3, 2, 1)]
        assert math.isclose(np.linalg.norm(a - b), 2.0)

    def test_points_unique(self):
        mesh = build_lattice(6, 1.0)
        rounded = {tuple(p) for p in np.round(mesh.positions, 6)}
        assert len(rounded) == mesh.n_vertices

    def test_outer_ring_is_boundary(self):
        rings = 4
        mesh = build_lattice(rings, 1.0)
        boundary = mesh.boundary_vertices()
        assert len(boundary) == 6 * rings
        assert boundary == list(range(vertex_index(rings, 0, 0), mesh.n_vertices))
        assert all(kind is VertexKind.INTERIOR for kind in mesh.kinds[:boundary[0]])

    def test_deterministic(self):
        np.testing.assert_array_equal(build_lattice(5, 3.0).positions,
                                      build_lattice(5, 3.0).positions)

    @pytest.mark.parametrize("rings,spacing", [(-1, 1.0), (3, 0.0), (3, -2.0)])
    def test_invalid_configuration(self, rings, spacing):
        with pytest.raises(InvalidConfigurationError):
            build_lattice(rings, spacing)

    def test_invalid_configuration_is_value_error(self):
        with pytest.raises(ValueError):
            build_lattice(2, 0)
