"""Hexagonal point lattice built from concentric rings."""

import math
from typing import List, Tuple

import numpy as np
import structlog

from .errors import InvalidConfigurationError
from .mesh import Mesh, VertexKind

logger = structlog.get_logger()

SECTORS = 6


def lattice_vertex_count(ring_count: int) -> int:
    """Number of lattice points for ``ring_count`` rings (1 + 3R(R+1))."""
    return 1 + 3 * ring_count * (ring_count + 1)


def vertex_index(ring: int, sector: int, offset: int) -> int:
    """
    Global index of the lattice point at (ring, sector, offset).

    Ring 0 is the single center point. Ring ``i`` holds ``6 * i`` points,
    ``i`` per sector, so it starts after the ``1 + 3i(i-1)`` points of the
    inner rings. Sectors wrap modulo 6.

    Args:
        ring: Distance ring, 0 for the center
        sector: Angular sector; values outside 0..5 wrap around
        offset: Position along the sector edge, 0 <= offset < ring

    Returns:
        Index into the lattice vertex array
    """
    if ring == 0:
        return 0
    if not 0 <= offset < ring:
        raise IndexError(f"offset {offset} out of range for ring {ring}")
    return 1 + 3 * ring * (ring - 1) + (sector % SECTORS) * ring + offset


def _hex_corner(sector: int) -> Tuple[float, float]:
    angle = math.radians(60.0 * (sector % SECTORS))
    return math.cos(angle), math.sin(angle)


def lattice_position(ring: int, sector: int, offset: int, spacing: float) -> Tuple[float, float]:
    """Coordinates of a lattice point; the center sits at the origin.

    Points of ring ``i`` in sector ``j`` lie on the hexagon edge from
    ``i * C_j`` to ``i * C_(j+1)``, ``offset`` steps from the corner.
    """
    cx, cy = _hex_corner(sector)
    nx, ny = _hex_corner(sector + 1)
    x = ring * cx + offset * (nx - cx)
    y = ring * cy + offset * (ny - cy)
    return x * spacing, y * spacing


def build_lattice(ring_count: int, spacing: float) -> Mesh:
    """
    Generate the concentric hex-ring lattice.

    The vertex order matches ``vertex_index``: the center, then for each
    ring its six sectors in turn. Points on the outermost ring are tagged
    ``BOUNDARY`` so relaxation keeps the mesh outline fixed.

    Args:
        ring_count: Number of rings around the center (>= 0)
        spacing: Distance between neighbouring lattice points (> 0)

    Returns:
        Face-less mesh holding the lattice vertices
    """
    if ring_count < 0:
        raise InvalidConfigurationError(f"ring_count must be >= 0, got {ring_count}")
    if not spacing > 0:
        raise InvalidConfigurationError(f"lattice spacing must be > 0, got {spacing}")

    points: List[Tuple[float, float]] = [(0.0, 0.0)]
    kinds: List[VertexKind] = [VertexKind.BOUNDARY if ring_count == 0 else VertexKind.INTERIOR]

    for ring in range(1, ring_count + 1):
        kind = VertexKind.BOUNDARY if ring == ring_count else VertexKind.INTERIOR
        for sector in range(SECTORS):
            for offset in range(ring):
                points.append(lattice_position(ring, sector, offset, spacing))
                kinds.append(kind)

    positions = np.array(points, dtype=np.float64).reshape(-1, 2)
    logger.info("Lattice built", rings=ring_count, spacing=spacing, vertices=len(positions))

    return Mesh(positions=positions, kinds=kinds, ring_count=ring_count)
