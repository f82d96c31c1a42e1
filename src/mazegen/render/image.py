# src/mazegen/render/image.py
# Render maze matrices to PNG using Pillow.

import os
from typing import Sequence, Tuple

from PIL import Image, ImageDraw

from ..tiles import TileType

COLORS = {
    TileType.WALL: (80, 80, 80, 255),
    TileType.FLOOR: (220, 220, 220, 255),
    TileType.HOLE: (0, 0, 0, 255),
}
MARKER = (220, 40, 40, 255)


def tile_color(tile_id: int) -> Tuple[int, int, int, int]:
    return COLORS[TileType(tile_id)]


def render_matrix(matrix: Sequence[Sequence[int]], tile_size: int = 16, margin: int = 0,
                  markers: Sequence[Tuple[int, int]] = ()) -> Image.Image:
    """
    One square per tile. `markers` are (x, z) tiles drawn with a red dot,
    e.g. spawn points.
    """
    h = len(matrix)
    w = len(matrix[0]) if h else 0
    canvas = Image.new("RGBA", (w * tile_size + 2 * margin, h * tile_size + 2 * margin), (0, 0, 0, 0))
    draw = ImageDraw.Draw(canvas)
    for z, row in enumerate(matrix):
        for x, tid in enumerate(row):
            x0 = margin + x * tile_size
            y0 = margin + z * tile_size
            # inclusive box, so stop one pixel short
            draw.rectangle((x0, y0, x0 + tile_size - 1, y0 + tile_size - 1), fill=tile_color(tid))
    pad = max(1, tile_size // 4)
    for x, z in markers:
        x0 = margin + x * tile_size
        y0 = margin + z * tile_size
        draw.ellipse((x0 + pad, y0 + pad, x0 + tile_size - 1 - pad, y0 + tile_size - 1 - pad), fill=MARKER)
    return canvas


def save_png(matrix: Sequence[Sequence[int]], out_png: str, tile_size: int = 16, margin: int = 0,
             markers: Sequence[Tuple[int, int]] = ()) -> str:
    out_dir = os.path.dirname(out_png)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    render_matrix(matrix, tile_size, margin, markers).save(out_png)
    return out_png
