"""Mesh data structure and polygon geometry shared by every pipeline stage."""

from dataclasses import dataclass, field, replace
from enum import IntEnum
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np


class VertexKind(IntEnum):
    """Whether a vertex may be moved by relaxation."""
    INTERIOR = 0
    BOUNDARY = 1  # lattice perimeter, never displaced


# arity -> (face ids, vertex index matrix of shape (m, arity))
FaceGroups = Dict[int, Tuple[np.ndarray, np.ndarray]]


@dataclass(eq=False)
class Mesh:
    """Vertex arena plus face list, threaded explicitly through the pipeline.

    Stages never mutate a mesh they receive in a way that changes its
    topology; they return a new ``Mesh`` instead. Vertex indices are stable
    for the lifetime of a generation run: vertices are only ever appended.
    """
    positions: np.ndarray               # (n, 2) float64 x/y coordinates
    kinds: List[VertexKind]             # per-vertex interior/boundary tag
    faces: List[List[int]] = field(default_factory=list)  # vertex index cycles
    face_areas: np.ndarray = field(default_factory=lambda: np.zeros(0))
    vertex_faces: Optional[List[List[int]]] = None  # set by the adjacency indexer
    ring_count: int = 0

    @property
    def n_vertices(self) -> int:
        return len(self.positions)

    @property
    def n_faces(self) -> int:
        return len(self.faces)

    def is_boundary(self, vertex: int) -> bool:
        return self.kinds[vertex] is VertexKind.BOUNDARY

    def interior_vertices(self) -> List[int]:
        """Indices of all vertices relaxation is allowed to move."""
        return [v for v, kind in enumerate(self.kinds) if kind is VertexKind.INTERIOR]

    def boundary_vertices(self) -> List[int]:
        return [v for v, kind in enumerate(self.kinds) if kind is VertexKind.BOUNDARY]

    def with_faces(self, faces: List[List[int]]) -> "Mesh":
        """Copy of this mesh with a new face list.

        Areas are recomputed and the adjacency index is dropped, since it
        is only valid for the face list it was built from.
        """
        return replace(
            self,
            faces=faces,
            face_areas=compute_face_areas(self.positions, faces),
            vertex_faces=None,
        )


def polygon_signed_area(points: np.ndarray) -> float:
    """Shoelace area, positive for counter-clockwise cycles."""
    x = points[:, 0]
    y = points[:, 1]
    return 0.5 * float(np.sum(x * np.roll(y, -1) - np.roll(x, -1) * y))


def polygon_area(points: np.ndarray) -> float:
    return abs(polygon_signed_area(points))


def face_centroid(points: np.ndarray) -> np.ndarray:
    """Mean of a face's corner positions.

    This is the vertex average, not the area centroid; relaxation weights
    by area separately.
    """
    return points.mean(axis=0)


def group_faces_by_arity(faces: Sequence[Sequence[int]]) -> FaceGroups:
    """Bucket faces by vertex count so geometry can be computed per bucket."""
    buckets: Dict[int, Tuple[List[int], List[Sequence[int]]]] = {}
    for face_id, face in enumerate(faces):
        ids, cycles = buckets.setdefault(len(face), ([], []))
        ids.append(face_id)
        cycles.append(face)

    return {
        arity: (np.asarray(ids, dtype=np.intp), np.asarray(cycles, dtype=np.intp))
        for arity, (ids, cycles) in buckets.items()
    }


def compute_face_areas(positions: np.ndarray, faces: Sequence[Sequence[int]],
                       groups: Optional[FaceGroups] = None) -> np.ndarray:
    """
    Absolute area of every face from current vertex positions.

    Args:
        positions: (n, 2) vertex coordinates
        faces: Vertex index cycles
        groups: Precomputed ``group_faces_by_arity(faces)``, reused across
            relaxation iterations since topology is frozen there

    Returns:
        Array of face areas aligned with ``faces``
    """
    if groups is None:
        groups = group_faces_by_arity(faces)

    areas = np.zeros(len(faces), dtype=np.float64)
    for face_ids, cycles in groups.values():
        pts = positions[cycles]
        x = pts[..., 0]
        y = pts[..., 1]
        cross = x * np.roll(y, -1, axis=1) - np.roll(x, -1, axis=1) * y
        areas[face_ids] = np.abs(0.5 * cross.sum(axis=1))
    return areas


def compute_face_centroids(positions: np.ndarray, faces: Sequence[Sequence[int]],
                           groups: Optional[FaceGroups] = None) -> np.ndarray:
    """Vertex-average centroid of every face, shape (F, 2)."""
    if groups is None:
        groups = group_faces_by_arity(faces)

    centroids = np.zeros((len(faces), 2), dtype=np.float64)
    for face_ids, cycles in groups.values():
        centroids[face_ids] = positions[cycles].mean(axis=1)
    return centroids


def edge_key(a: int, b: int) -> Tuple[int, int]:
    """Canonical undirected edge key."""
    return (a, b) if a < b else (b, a)


def face_edges(face: Sequence[int]):
    """Yield the (start, end) pairs of a face cycle, wrapping around."""
    n = len(face)
    for i in range(n):
        yield face[i], face[(i + 1) % n]
