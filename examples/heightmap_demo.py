#!/usr/bin/env python3
"""
Simple demo script showing heightmap generation capabilities.
"""

import numpy as np
from py_heightmap import GenerationParameters, generate_heightmap


def main():
    """Demonstrate heightmap generation."""
    print("Py-Heightmap Generation Demo")
    print("=" * 40)

    for samples in (32, 16, 4):
        params = GenerationParameters(size=64, samples=samples, blur_radius=1)
        result = generate_heightmap(params, seed="demo123")
        heights = result.heights

        print(f"\nsamples={samples}:")
        print("-" * 30)
        print(f"  Cells: {heights.size}")
        print(f"  Ladders: {result.ladder_count}")

        # Show band distribution
        bands, counts = np.unique(heights, return_counts=True)
        print("  Band distribution:")
        for band, count in zip(bands, counts):
            bar = '#' * int(count / counts.max() * 20)
            print(f"    {band:4.2f}: {bar} ({count})")

    # ASCII preview of a small map
    print("\n\nSmall map preview (ladders shown as '#'):")
    print("-" * 30)
    result = generate_heightmap(GenerationParameters(size=16, samples=8, block_step=4), seed="preview")
    glyphs = " .:o@"
    for y in range(16):
        row = ""
        for x in range(16):
            if result.ladders[y, x]:
                row += "#"
            else:
                row += glyphs[int(round(result.heights[y, x] * 4))]
        print("  " + row)


if __name__ == "__main__":
    main()
