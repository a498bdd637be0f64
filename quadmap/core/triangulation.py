"""
Triangulation of the hex lattice by ring-boundary stitching.

Between ring ``i-1`` and ring ``i`` every sector forms a trapezoid strip:
the inner edge has ``i`` points (counting the next sector's corner) and
the outer edge ``i + 1``. The strip is covered by ``i`` triangles pointing
inward and ``i - 1`` pointing outward, ``6R^2`` triangles in total.

All triangles are emitted counter-clockwise.
"""

from typing import List

import structlog

from .errors import InvalidConfigurationError
from .lattice import SECTORS, lattice_vertex_count, vertex_index
from .mesh import Mesh

logger = structlog.get_logger()


def triangle_count(ring_count: int) -> int:
    return 6 * ring_count * ring_count


def _ring_point(ring: int, sector: int, offset: int) -> int:
    """Index of a ring point, letting offset == ring roll into the next sector's corner."""
    if offset == ring:
        return vertex_index(ring, sector + 1, 0)
    return vertex_index(ring, sector, offset)


def _center_fan(ring_count: int) -> List[List[int]]:
    center = vertex_index(0, 0, 0)
    triangles = []
    for sector in range(SECTORS):
        p1 = vertex_index(1, sector, 0)
        p2 = vertex_index(1, sector + 1, 0)
        triangles.append([center, p1, p2])
        # A single ring has nothing to stitch outward to
        if ring_count >= 2:
            p3 = vertex_index(2, sector, 1)
            triangles.append([p1, p3, p2])
    return triangles


def _ring_strip(ring: int, ring_count: int) -> List[List[int]]:
    """Triangles joining ``ring`` to the ring inside it, plus the outward strip."""
    triangles = []
    for sector in range(SECTORS):
        for offset in range(ring):
            inner = _ring_point(ring - 1, sector, offset)
            outer = vertex_index(ring, sector, offset)
            outer_next = _ring_point(ring, sector, offset + 1)
            triangles.append([inner, outer, outer_next])

            if ring < ring_count:
                beyond = vertex_index(ring + 1, sector, offset + 1)
                triangles.append([outer, beyond, outer_next])
    return triangles


def triangulate(mesh: Mesh) -> Mesh:
    """
    Stitch the lattice rings into triangular faces.

    The center is a six-wedge fan to ring 1. Each ring ``2 <= i <= R``
    contributes one triangle per (sector, offset) towards the previous
    ring, and, while ``i < R``, a strip triangle towards ring ``i + 1``.
    With a single ring only the fan is emitted.

    Args:
        mesh: Lattice mesh from ``build_lattice``

    Returns:
        Mesh with triangular faces
    """
    ring_count = mesh.ring_count
    if ring_count < 1:
        raise InvalidConfigurationError("triangulation needs at least one ring")
    if mesh.n_vertices != lattice_vertex_count(ring_count):
        raise InvalidConfigurationError(
            f"lattice has {mesh.n_vertices} vertices, expected "
            f"{lattice_vertex_count(ring_count)} for {ring_count} rings"
        )

    faces = _center_fan(ring_count)
    for ring in range(2, ring_count + 1):
        faces.extend(_ring_strip(ring, ring_count))

    logger.info("Lattice triangulated", triangles=len(faces))
    return mesh.with_faces(faces)
