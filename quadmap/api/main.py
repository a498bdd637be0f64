"""FastAPI main application."""

from typing import Any, Dict

import structlog
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, ConfigDict, Field

from .. import __version__
from ..config import configure_logging, settings
from ..core.errors import InvalidConfigurationError, MeshConsistencyError
from ..core.pipeline import GenerationResult, MeshParams, generate_mesh

configure_logging()
logger = structlog.get_logger()

# Initialize FastAPI app
app = FastAPI(
    title="Quad Map Generator API",
    description="Quad-dominant hex lattice meshes for terrain and game boards",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request/Response models
class MeshGenerationRequest(BaseModel):
    """Request to generate a mesh; omitted fields fall back to the configured defaults."""

    model_config = ConfigDict(populate_by_name=True)

    ring_count: int = Field(default_factory=lambda: settings.default_ring_count,
                            alias="ringCount", ge=1, strict=True, description="Number of hex rings")
    lattice_spacing: float = Field(default_factory=lambda: settings.default_lattice_spacing,
                                   alias="latticeSpacing", gt=0, allow_inf_nan=False,
                                   description="Lattice point spacing")
    random_seed: int = Field(default_factory=lambda: settings.default_random_seed,
                             alias="randomSeed", strict=True, description="PRNG seed")
    relaxation_iterations: int = Field(default_factory=lambda: settings.default_relaxation_iterations,
                                       alias="relaxationIterations", ge=0, strict=True,
                                       description="Relaxation passes")
    relaxation_strength: float = Field(default_factory=lambda: settings.default_relaxation_strength,
                                       alias="relaxationStrength", gt=0, le=1, allow_inf_nan=False,
                                       description="Relaxation step factor")


class MeshStatisticsResponse(BaseModel):
    """Quality summary of a generated mesh."""

    params: Dict[str, Any]
    face_count: int
    vertex_count: int
    boundary_vertex_count: int
    average_area: float
    min_area: float
    max_area: float
    area_std_dev: float
    area_variation_percent: float
    area_mean_abs_deviation: float
    average_edge_length: float


def _run_generation(request: MeshGenerationRequest) -> GenerationResult:
    """Apply API limits, then generate; maps pipeline errors to HTTP errors."""
    if request.ring_count > settings.max_ring_count:
        raise HTTPException(
            status_code=400,
            detail=f"ringCount {request.ring_count} exceeds the limit of {settings.max_ring_count}",
        )
    if request.relaxation_iterations > settings.max_relaxation_iterations:
        raise HTTPException(
            status_code=400,
            detail=(f"relaxationIterations {request.relaxation_iterations} exceeds "
                    f"the limit of {settings.max_relaxation_iterations}"),
        )

    try:
        return generate_mesh(MeshParams.from_values(request.model_dump()))
    except InvalidConfigurationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except MeshConsistencyError as e:
        logger.error("Mesh generation aborted", error=str(e))
        raise HTTPException(status_code=500, detail=f"Mesh generation failed: {e}")


# API endpoints
@app.get("/")
def root():
    """Root endpoint."""
    return {
        "message": "Quad Map Generator API",
        "version": __version__,
        "status": "running",
    }


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.post("/meshes/generate")
def generate(request: MeshGenerationRequest) -> Dict[str, Any]:
    """
    Generate a mesh and return its tile/vertex graph payload.

    Generation is synchronous; one request runs the whole pipeline.
    """
    logger.info("Mesh generation requested", request=request.model_dump(by_alias=True))
    result = _run_generation(request)
    return result.payload


@app.post("/meshes/statistics", response_model=MeshStatisticsResponse)
def statistics(request: MeshGenerationRequest):
    """Generate a mesh and return only its area and edge statistics."""
    logger.info("Mesh statistics requested", request=request.model_dump(by_alias=True))
    result = _run_generation(request)
    return MeshStatisticsResponse(params=result.params.payload(), **result.statistics.to_dict())


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
