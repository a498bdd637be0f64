"""
Area-weighted vertex relaxation.

Each interior vertex is pulled toward the area-weighted mean of the
centroids of its adjacent faces. Heavier (larger) faces pull harder, so
vertices drift into large faces and shrink them, evening out face areas
rather than producing a centroidal Voronoi layout.
"""

from dataclasses import dataclass, replace
from typing import List, Optional

import numpy as np
import structlog

from .alea_prng import AleaPRNG
from .errors import MeshConsistencyError
from .mesh import Mesh, compute_face_areas, group_faces_by_arity

logger = structlog.get_logger()


@dataclass(frozen=True)
class VertexStar:
    """Faces around one vertex, flattened into index arrays.

    ``corners`` lists the vertices of every adjacent face back to back;
    ``corner_faces`` and ``corner_scale`` give, per corner, the owning face
    and ``1 / arity`` of that face.
    """
    faces: np.ndarray
    corners: np.ndarray
    corner_faces: np.ndarray
    corner_scale: np.ndarray


def build_vertex_star(mesh: Mesh, vertex: int) -> VertexStar:
    adjacent = mesh.vertex_faces[vertex]
    corners: List[int] = []
    corner_faces: List[int] = []
    corner_scale: List[float] = []
    for face_id in adjacent:
        face = mesh.faces[face_id]
        corners.extend(face)
        corner_faces.extend([face_id] * len(face))
        corner_scale.extend([1.0 / len(face)] * len(face))

    return VertexStar(
        faces=np.asarray(adjacent, dtype=np.intp),
        corners=np.asarray(corners, dtype=np.intp),
        corner_faces=np.asarray(corner_faces, dtype=np.intp),
        corner_scale=np.asarray(corner_scale, dtype=np.float64),
    )


def relax_vertex(mesh: Mesh, positions: np.ndarray, vertex: int, strength: float,
                 star: Optional[VertexStar] = None) -> bool:
    """
    Move one vertex toward the area-weighted centroid of its faces.

    Face centroids are read from ``positions`` as they are now, so updates
    made earlier in the same pass are visible (Gauss-Seidel order). Face
    weights come from ``mesh.face_areas``, refreshed once per iteration.

    Args:
        mesh: Indexed mesh supplying faces, areas and adjacency
        positions: (n, 2) array updated in place
        vertex: Index of the vertex to move
        strength: Fraction of the distance to the target to travel
        star: Precomputed ``build_vertex_star(mesh, vertex)``

    Returns:
        True if the vertex moved, False if it was skipped
    """
    if mesh.is_boundary(vertex):
        return False

    if star is None:
        star = build_vertex_star(mesh, vertex)
    if not star.faces.size:
        return False

    total = mesh.face_areas[star.faces].sum()
    # Degenerate neighbourhood
    if total <= 0:
        return False

    # sum over faces of area * vertex-average centroid, one term per corner
    coefficients = mesh.face_areas[star.corner_faces] * star.corner_scale
    target = coefficients @ positions[star.corners] / total

    positions[vertex] += strength * (target - positions[vertex])
    return True


def relax(mesh: Mesh, iterations: int, strength: float, prng: AleaPRNG) -> Mesh:
    """
    Run a fixed number of relaxation passes.

    Every pass first refreshes all face areas, then visits the interior
    vertices in a freshly shuffled order. Boundary vertices never move.
    There is no convergence check.

    Args:
        mesh: Quad mesh with its adjacency index built
        iterations: Number of passes (>= 0)
        strength: Interpolation factor in (0, 1]
        prng: The generation run's seeded generator

    Returns:
        New mesh with relaxed positions and up-to-date face areas; the
        input mesh's positions are left untouched
    """
    if mesh.vertex_faces is None:
        raise MeshConsistencyError("relaxation requires the adjacency index")

    positions = mesh.positions.copy()  # Don't modify the input mesh
    groups = group_faces_by_arity(mesh.faces)
    order = mesh.interior_vertices()
    # Topology is frozen here, so each star is flattened once
    stars = {vertex: build_vertex_star(mesh, vertex) for vertex in order}
    working = replace(mesh, positions=positions)

    logger.info("Starting relaxation",
                iterations=iterations,
                strength=strength,
                movable_vertices=len(order))

    for iteration in range(iterations):
        working.face_areas = compute_face_areas(positions, mesh.faces, groups)

        prng.shuffle(order)

        moved = 0
        for vertex in order:
            if relax_vertex(working, positions, vertex, strength, stars[vertex]):
                moved += 1

        logger.debug("Relaxation iteration complete", iteration=iteration + 1, moved=moved)

    working.face_areas = compute_face_areas(positions, mesh.faces, groups)
    logger.info("Relaxation finished", iterations=iterations)
    return working
