"""FastAPI application serving generated heightmaps."""

from fastapi import FastAPI, HTTPException
from fastapi.responses import Response
from pydantic import BaseModel, Field
from typing import List, Optional, Union
import structlog

from ..config import settings
from ..core.errors import HeightmapConfigurationError
from ..core.heightmap_generator import GenerationParameters, HeightmapResult, generate_heightmap
from ..export import png_bytes
from ..utils.logging import configure_logging

logger = structlog.get_logger()

# Initialize FastAPI app
app = FastAPI(
    title="Heightmap API",
    description="Square-diamond heightmaps with quantized bands and ladder markers",
    version="0.1.0"
)


# Request/Response models
class HeightmapRequest(BaseModel):
    """Request to generate a heightmap."""

    seed: Optional[Union[int, str]] = Field(
        None, description="Random seed, integer or string (defaults to the configured seed)"
    )
    size: int = Field(32, ge=1, le=settings.max_size, description="Grid size, a power of two")
    samples: int = Field(16, ge=1, description="Initial lattice step, a power of two")
    scale: float = Field(1.0, description="Initial displacement scale")
    blur_radius: int = Field(1, ge=0, description="Box blur radius")
    quantization_levels: int = Field(4, ge=1, description="Number of height bands")
    block_step: int = Field(8, ge=1, description="Ladder scan block size")
    ladders_per_block: int = Field(2, ge=1, description="Maximum ladders per block")


class HeightmapResponse(BaseModel):
    """Generated heightmap and ladder overlay."""

    seed: str
    size: int
    heights: List[List[float]]
    ladders: List[List[bool]]
    ladder_count: int
    degenerate: bool


def _run(request: HeightmapRequest) -> HeightmapResult:
    seed = settings.default_seed if request.seed is None or request.seed == "" else request.seed
    try:
        parameters = GenerationParameters(
            size=request.size,
            samples=request.samples,
            scale=request.scale,
            blur_radius=request.blur_radius,
            quantization_levels=request.quantization_levels,
            block_step=request.block_step,
            ladders_per_block=request.ladders_per_block,
        )
    except HeightmapConfigurationError as e:
        logger.warning("Rejected heightmap request", error=str(e))
        raise HTTPException(status_code=422, detail=str(e))

    return generate_heightmap(parameters, seed)


# Event handlers
@app.on_event("startup")
async def startup_event():
    """Configure logging on startup."""
    configure_logging(settings.log_level, settings.log_format)
    logger.info("Heightmap API startup complete")


# API endpoints
@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Heightmap API",
        "version": "0.1.0",
        "status": "running"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.post("/heightmaps", response_model=HeightmapResponse)
def create_heightmap(request: HeightmapRequest):
    """Generate a heightmap and return its grid and ladder overlay."""
    result = _run(request)
    return HeightmapResponse(
        seed=str(result.seed),
        size=result.parameters.size,
        heights=result.heights.tolist(),
        ladders=result.ladders.tolist(),
        ladder_count=result.ladder_count,
        degenerate=result.degenerate,
    )


@app.post("/heightmaps/png")
def create_heightmap_png(request: HeightmapRequest):
    """Generate a heightmap and return it rendered as a PNG."""
    result = _run(request)
    return Response(content=png_bytes(result), media_type="image/png")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
