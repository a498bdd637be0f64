"""Vertex to face adjacency index and mesh consistency checks."""

from dataclasses import replace
from typing import List

import structlog

from .errors import MeshConsistencyError
from .mesh import Mesh

logger = structlog.get_logger()


def build_vertex_faces(n_vertices: int, faces: List[List[int]]) -> List[List[int]]:
    """
    List the faces incident to each vertex.

    Face ids appear in ascending order. A face referencing a vertex index
    outside the arena is a fatal inconsistency.
    """
    vertex_faces: List[List[int]] = [[] for _ in range(n_vertices)]
    for face_id, face in enumerate(faces):
        for vertex in face:
            if not 0 <= vertex < n_vertices:
                raise MeshConsistencyError(
                    f"face {face_id} references vertex {vertex}, "
                    f"mesh has {n_vertices} vertices"
                )
            vertex_faces[vertex].append(face_id)
    return vertex_faces


def index_adjacency(mesh: Mesh) -> Mesh:
    """
    Rebuild the vertex -> adjacent faces index.

    Call once after topology is final (after subdivision). Relaxation only
    moves positions, so the index stays valid for the whole relaxation
    phase.
    """
    vertex_faces = build_vertex_faces(mesh.n_vertices, mesh.faces)
    logger.info("Adjacency indexed", vertices=mesh.n_vertices, faces=mesh.n_faces)
    return replace(mesh, vertex_faces=vertex_faces)


def verify_adjacency(mesh: Mesh) -> None:
    """
    Check that ``v in faces[f]`` exactly when ``f in vertex_faces[v]``.

    Raises:
        MeshConsistencyError: On missing index, out-of-range references or
            any asymmetry
    """
    if mesh.vertex_faces is None:
        raise MeshConsistencyError("adjacency index has not been built")
    if len(mesh.vertex_faces) != mesh.n_vertices:
        raise MeshConsistencyError(
            f"adjacency index covers {len(mesh.vertex_faces)} vertices, "
            f"mesh has {mesh.n_vertices}"
        )

    for face_id, face in enumerate(mesh.faces):
        for vertex in face:
            if not 0 <= vertex < mesh.n_vertices:
                raise MeshConsistencyError(
                    f"face {face_id} references missing vertex {vertex}"
                )
            if face_id not in mesh.vertex_faces[vertex]:
                raise MeshConsistencyError(
                    f"vertex {vertex} is in face {face_id} but the index omits it"
                )

    for vertex, adjacent in enumerate(mesh.vertex_faces):
        for face_id in adjacent:
            if not 0 <= face_id < mesh.n_faces:
                raise MeshConsistencyError(
                    f"vertex {vertex} lists missing face {face_id}"
                )
            if vertex not in mesh.faces[face_id]:
                raise MeshConsistencyError(
                    f"vertex {vertex} lists face {face_id} which does not contain it"
                )


def verify_quad_mesh(mesh: Mesh) -> None:
    """Raise ``MeshConsistencyError`` unless every face has four distinct vertices."""
    for face_id, face in enumerate(mesh.faces):
        if len(face) != 4 or len(set(face)) != 4:
            raise MeshConsistencyError(f"face {face_id} is not a quad: {face}")
