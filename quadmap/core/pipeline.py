"""
End-to-end mesh generation.

Runs lattice -> triangulation -> quad merging -> subdivision -> adjacency
indexing -> relaxation -> export once per request. The mesh is passed
from stage to stage explicitly and a single seeded PRNG is created per
run, so the parameters alone determine the output.
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Union

import structlog
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .adjacency import index_adjacency, verify_adjacency, verify_quad_mesh
from .alea_prng import AleaPRNG
from .errors import InvalidConfigurationError
from .graph_export import export_graph
from .lattice import build_lattice
from .mesh import Mesh
from .mesh_analysis import MeshStatistics, compute_mesh_statistics
from .quad_merge import merge_triangles
from .relaxation import relax
from .subdivision import subdivide
from .triangulation import triangulate

logger = structlog.get_logger()


class MeshParams(BaseModel):
    """Generation parameters; serialized with the camelCase payload names."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    ring_count: int = Field(..., alias="ringCount", ge=1, strict=True, description="Number of hex rings around the center")
    lattice_spacing: float = Field(..., alias="latticeSpacing", gt=0, allow_inf_nan=False, description="Distance between lattice points")
    random_seed: int = Field(0, alias="randomSeed", strict=True, description="Seed for the run's PRNG")
    relaxation_iterations: int = Field(500, alias="relaxationIterations", ge=0, strict=True, description="Relaxation passes")
    relaxation_strength: float = Field(0.08, alias="relaxationStrength", gt=0, le=1, allow_inf_nan=False, description="Relaxation step factor")

    @classmethod
    def from_values(cls, values: Mapping[str, Any]) -> "MeshParams":
        """Validate raw values (snake_case or camelCase keys).

        Raises:
            InvalidConfigurationError: If any value is missing or out of range
        """
        try:
            return cls.model_validate(dict(values))
        except ValidationError as e:
            logger.warning("Rejected generation parameters", errors=e.errors(include_url=False))
            raise InvalidConfigurationError(str(e)) from e

    def payload(self) -> Dict[str, Any]:
        """Parameters keyed by their public payload names."""
        return self.model_dump(by_alias=True)


@dataclass
class GenerationResult:
    """Everything a generation run produces."""
    params: MeshParams
    mesh: Mesh
    payload: Dict[str, Any]
    statistics: MeshStatistics


def build_quad_mesh(params: MeshParams, prng: AleaPRNG) -> Mesh:
    """
    Run the topology stages and return an indexed, unrelaxed quad mesh.

    Raises:
        MeshConsistencyError: If the result is not an all-quad mesh with a
            symmetric adjacency index
    """
    mesh = build_lattice(params.ring_count, params.lattice_spacing)
    mesh = triangulate(mesh)
    mesh = merge_triangles(mesh, prng)
    mesh = subdivide(mesh)
    mesh = index_adjacency(mesh)

    verify_quad_mesh(mesh)
    verify_adjacency(mesh)
    return mesh


def generate_mesh(params: Union[MeshParams, Mapping[str, Any]]) -> GenerationResult:
    """
    Generate, relax and export a quad mesh.

    Args:
        params: ``MeshParams`` or a mapping of raw parameter values

    Returns:
        GenerationResult with the final mesh, its payload and statistics

    Raises:
        InvalidConfigurationError: Parameters rejected before generation
        MeshConsistencyError: Internal invariant broken; generation aborted
    """
    if not isinstance(params, MeshParams):
        params = MeshParams.from_values(params)

    logger.info("Generating quad mesh", **params.payload())

    prng = AleaPRNG(str(params.random_seed))

    mesh = build_quad_mesh(params, prng)
    mesh = relax(mesh, params.relaxation_iterations, params.relaxation_strength, prng)
    verify_adjacency(mesh)

    payload = export_graph(mesh, params.payload())
    statistics = compute_mesh_statistics(mesh)

    logger.info("Quad mesh generated",
                tiles=statistics.face_count,
                vertices=statistics.vertex_count,
                area_variation_percent=round(statistics.area_variation_percent, 2),
                prng_calls=prng.call_count)

    return GenerationResult(params=params, mesh=mesh, payload=payload, statistics=statistics)
