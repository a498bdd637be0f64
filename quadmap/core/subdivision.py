"""Centroid and edge-midpoint subdivision turning any polygon mesh into quads."""

from collections import Counter
from typing import Dict, List, Tuple

import numpy as np
import structlog

from .mesh import Mesh, VertexKind, edge_key, face_edges, polygon_signed_area

logger = structlog.get_logger()


def count_edge_uses(faces: List[List[int]]) -> Counter:
    """How many faces use each undirected edge; 1 means a perimeter edge."""
    uses: Counter = Counter()
    for face in faces:
        for a, b in face_edges(face):
            uses[edge_key(a, b)] += 1
    return uses


def orient_ccw(face: List[int], positions: np.ndarray) -> List[int]:
    """Return the cycle wound counter-clockwise."""
    if polygon_signed_area(positions[face]) < 0:
        return face[::-1]
    return list(face)


class _VertexArena:
    """Append-only vertex storage used while subdividing."""

    def __init__(self, mesh: Mesh):
        self.points: List[Tuple[float, float]] = [tuple(p) for p in mesh.positions.tolist()]
        self.kinds: List[VertexKind] = list(mesh.kinds)

    def add(self, x: float, y: float, kind: VertexKind) -> int:
        self.points.append((x, y))
        self.kinds.append(kind)
        return len(self.points) - 1


def subdivide(mesh: Mesh) -> Mesh:
    """
    Replace every face by one quad per corner.

    For a face with corners ``v0..v(n-1)`` a face-center vertex is added at
    the corner mean, and a midpoint vertex for each edge. Midpoints are
    keyed by the edge's (min, max) vertex index so two faces sharing an
    edge reuse the same vertex. Corner ``vi`` becomes the quad
    ``[mid(v(i-1), vi), vi, mid(vi, v(i+1)), center]``.

    Runs over the whole face list, quads included, so triangles the merger
    could not pair are always resolved. Midpoints of perimeter edges are
    tagged ``BOUNDARY`` to keep the outline fixed; face centers are always
    interior.

    Args:
        mesh: Post-merge mesh of triangles and quads

    Returns:
        All-quad mesh; new vertices are appended after the existing ones
    """
    arena = _VertexArena(mesh)
    edge_uses = count_edge_uses(mesh.faces)
    midpoints: Dict[Tuple[int, int], int] = {}

    def midpoint(a: int, b: int) -> int:
        key = edge_key(a, b)
        index = midpoints.get(key)
        if index is None:
            ax, ay = arena.points[a]
            bx, by = arena.points[b]
            kind = VertexKind.BOUNDARY if edge_uses[key] == 1 else VertexKind.INTERIOR
            index = arena.add((ax + bx) / 2.0, (ay + by) / 2.0, kind)
            midpoints[key] = index
        return index

    quads: List[List[int]] = []
    for face in mesh.faces:
        face = orient_ccw(face, mesh.positions)
        n = len(face)

        edge_mids = [midpoint(face[i], face[(i + 1) % n]) for i in range(n)]

        corners = np.array([arena.points[v] for v in face])
        cx, cy = corners.mean(axis=0)
        center = arena.add(float(cx), float(cy), VertexKind.INTERIOR)

        for i in range(n):
            quads.append([edge_mids[i - 1], face[i], edge_mids[i], center])

    positions = np.array(arena.points, dtype=np.float64)
    logger.info("Mesh subdivided",
                source_faces=mesh.n_faces,
                quads=len(quads),
                midpoints=len(midpoints),
                vertices=len(positions))

    subdivided = Mesh(positions=positions, kinds=arena.kinds, ring_count=mesh.ring_count)
    return subdivided.with_faces(quads)
