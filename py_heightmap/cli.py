"""
Command-line entry point: generate a heightmap and write it as a PNG.
"""

import argparse
from pathlib import Path
from typing import List, Optional

import structlog

from .config import settings
from .core.errors import HeightmapConfigurationError
from .core.heightmap_generator import GenerationParameters, generate_heightmap
from .export import save_png
from .utils.logging import configure_logging

logger = structlog.get_logger()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="py-heightmap",
        description="Generate a square-diamond heightmap with ladder markers",
    )
    parser.add_argument(
        "--size", type=int, default=settings.default_size,
        help="Image size, must be a power of two",
    )
    parser.add_argument(
        "--samples", type=int, default=settings.default_samples,
        help="Number of samples. Lower is rougher terrain. Must be a power of two",
    )
    parser.add_argument(
        "--blur", type=int, default=settings.default_blur,
        help="Blur radius, typically between 1 and 5",
    )
    parser.add_argument(
        "--scale", type=float, default=settings.default_scale,
        help="Initial displacement scale, usually 1.0",
    )
    parser.add_argument("--seed", default=settings.default_seed, help="Random seed")
    parser.add_argument("--levels", type=int, default=4, help="Number of height bands")
    parser.add_argument("--block-step", type=int, default=8, help="Ladder scan block size")
    parser.add_argument(
        "--ladders-per-block", type=int, default=2, help="Maximum ladders per block",
    )
    parser.add_argument("-o", "--output", required=True, help="Output PNG filename")
    parser.add_argument("--log-level", default=settings.log_level, help="Log level")
    return parser


def resolve_output(output: str) -> Path:
    path = Path(output)
    if not path.is_absolute():
        path = Path(settings.output_dir) / path
    return path


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level, settings.log_format)

    try:
        parameters = GenerationParameters(
            size=args.size,
            samples=args.samples,
            scale=args.scale,
            blur_radius=args.blur,
            quantization_levels=args.levels,
            block_step=args.block_step,
            ladders_per_block=args.ladders_per_block,
        )
    except HeightmapConfigurationError as e:
        logger.error("Invalid configuration", error=str(e))
        return 2

    if parameters.size > settings.max_size:
        logger.error("Grid size exceeds limit", size=parameters.size, max_size=settings.max_size)
        return 2

    result = generate_heightmap(parameters, args.seed)
    save_png(result, resolve_output(args.output))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
