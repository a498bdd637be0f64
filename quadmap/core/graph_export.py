"""Serialize a finished mesh into the tile/vertex neighbour-graph payload."""

from collections import Counter
from typing import Any, Dict, List, Mapping, Optional, Set

import structlog

from .adjacency import build_vertex_faces
from .mesh import Mesh, compute_face_areas, compute_face_centroids, face_edges

logger = structlog.get_logger()


def vertex_neighbors(mesh: Mesh) -> List[List[int]]:
    """
    Edge-connected vertices of every vertex.

    Only consecutive vertices of a face cycle are neighbours; diagonally
    opposite corners of a quad are not.
    """
    neighbors: List[Set[int]] = [set() for _ in range(mesh.n_vertices)]
    for face in mesh.faces:
        for a, b in face_edges(face):
            neighbors[a].add(b)
            neighbors[b].add(a)
    return [sorted(n) for n in neighbors]


def face_neighbors(mesh: Mesh, vertex_faces: List[List[int]]) -> List[List[int]]:
    """Faces sharing at least two vertices with each face, via the adjacency index."""
    result = []
    for face_id, face in enumerate(mesh.faces):
        shared: Counter = Counter()
        for vertex in face:
            for other in vertex_faces[vertex]:
                if other != face_id:
                    shared[other] += 1
        result.append(sorted(other for other, count in shared.items() if count >= 2))
    return result


def export_graph(mesh: Mesh, params: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """
    Build the payload consumed by pathfinding, simulation and rendering.

    Args:
        mesh: Final mesh
        params: Generation parameters to echo back, already keyed by their
            public (camelCase) names

    Returns:
        ``{"params": ..., "tiles": [...], "vertices": [...]}`` containing
        only plain ints, floats, lists and dicts
    """
    vertex_faces = mesh.vertex_faces
    if vertex_faces is None:
        vertex_faces = build_vertex_faces(mesh.n_vertices, mesh.faces)

    positions = mesh.positions
    areas = compute_face_areas(positions, mesh.faces)
    centers = compute_face_centroids(positions, mesh.faces)
    tile_neighbors = face_neighbors(mesh, vertex_faces)

    tiles = []
    for face_id, face in enumerate(mesh.faces):
        tiles.append({
            "id": face_id,
            "vertices": [
                {"x": float(positions[v, 0]), "y": float(positions[v, 1]), "index": int(v)}
                for v in face
            ],
            "center": {"x": float(centers[face_id, 0]), "y": float(centers[face_id, 1])},
            "area": float(areas[face_id]),
            "neighbors": tile_neighbors[face_id],
        })

    vertices = []
    for index, neighbors in enumerate(vertex_neighbors(mesh)):
        vertices.append({
            "x": float(positions[index, 0]),
            "y": float(positions[index, 1]),
            "index": index,
            "neighbors": neighbors,
            "adjacentFaces": sorted(vertex_faces[index]),
        })

    logger.info("Graph exported", tiles=len(tiles), vertices=len(vertices))
    return {
        "params": dict(params) if params is not None else {},
        "tiles": tiles,
        "vertices": vertices,
    }
