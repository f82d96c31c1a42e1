# src/mazegen/render/tileset.py
from __future__ import annotations
import pygame
from functools import lru_cache

from .image import MARKER, tile_color
from ..tiles import TileType

HOLE_HIGHLIGHT = (255, 200, 0, 255)


class Tileset:
    """
    Tiny cached surface factory for the viewer:
      - one flat-coloured square per tile type
      - optional highlight colour for holes
      - returns pygame.Surface of exactly (tile_size, tile_size)
    """
    def __init__(self, tile_size: int):
        self.tile_size = tile_size

    @lru_cache(maxsize=64)
    def get(self, tile_id: int, highlight_holes: bool = False) -> pygame.Surface:
        img = pygame.Surface((self.tile_size, self.tile_size), pygame.SRCALPHA)
        if highlight_holes and tile_id == TileType.HOLE:
            img.fill(HOLE_HIGHLIGHT)
        else:
            img.fill(tile_color(tile_id))
        return img

    @lru_cache(maxsize=1)
    def marker(self) -> pygame.Surface:
        img = pygame.Surface((self.tile_size, self.tile_size), pygame.SRCALPHA)
        r = max(1, self.tile_size // 4)
        pygame.draw.circle(img, MARKER, (self.tile_size // 2, self.tile_size // 2), r)
        return img
