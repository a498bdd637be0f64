"""Summary statistics of a generated mesh (face areas, edge lengths)."""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Sequence

import numpy as np

from .mesh import Mesh, compute_face_areas, edge_key, face_edges


@dataclass
class MeshStatistics:
    """Quality figures for a generated mesh."""
    face_count: int
    vertex_count: int
    boundary_vertex_count: int
    average_area: float
    min_area: float
    max_area: float
    area_std_dev: float
    area_variation_percent: float  # std dev relative to the mean area
    area_mean_abs_deviation: float
    average_edge_length: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def area_mean_abs_deviation(areas: Sequence[float]) -> float:
    """Mean absolute deviation of face areas from their mean."""
    areas = np.asarray(areas, dtype=np.float64)
    if areas.size == 0:
        return 0.0
    return float(np.mean(np.abs(areas - areas.mean())))


def average_edge_length(mesh: Mesh) -> float:
    """Mean length over the mesh's unique undirected edges."""
    edges = {edge_key(a, b) for face in mesh.faces for a, b in face_edges(face)}
    if not edges:
        return 0.0
    ends = np.array(sorted(edges), dtype=np.intp)
    deltas = mesh.positions[ends[:, 0]] - mesh.positions[ends[:, 1]]
    return float(np.linalg.norm(deltas, axis=1).mean())


def compute_mesh_statistics(mesh: Mesh) -> MeshStatistics:
    areas = compute_face_areas(mesh.positions, mesh.faces)

    if areas.size:
        mean = float(areas.mean())
        std = float(areas.std())
        min_area = float(areas.min())
        max_area = float(areas.max())
    else:
        mean = std = min_area = max_area = 0.0

    return MeshStatistics(
        face_count=mesh.n_faces,
        vertex_count=mesh.n_vertices,
        boundary_vertex_count=len(mesh.boundary_vertices()),
        average_area=mean,
        min_area=min_area,
        max_area=max_area,
        area_std_dev=std,
        area_variation_percent=(std / mean * 100.0) if mean > 0 else 0.0,
        area_mean_abs_deviation=area_mean_abs_deviation(areas),
        average_edge_length=average_edge_length(mesh),
    )
