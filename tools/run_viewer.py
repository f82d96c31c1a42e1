#!/usr/bin/env python3
# Minimal interactive maze viewer (no gameplay).
# - Left/Right: previous/next level of the current run
# - Up/Down: next/previous base seed
# - R: random base seed
# - H: toggle hole highlighting
# - S: toggle spawn markers
# - 60 Hz fixed loop

import argparse, random
import pygame

from mazegen.config import MazeParams
from mazegen.mapgen.generator import generate_level
from mazegen.mapgen.placement import pick_spawns
from mazegen.render.tileset import Tileset
from mazegen.rng import PMRandom


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--seed", type=int, default=1, help="Base seed of the run")
    ap.add_argument("--level", type=int, default=1, help="Level (1-based)")
    ap.add_argument("--size", type=int, default=MazeParams().size, help="Maze side length")
    ap.add_argument("--holes", type=float, default=0.3, help="Hole density")
    ap.add_argument("--tile", type=int, default=16, help="Tile size in pixels")
    args = ap.parse_args()

    params = MazeParams(size=args.size, hole_density=args.holes).validate()

    pygame.init()
    clock = pygame.time.Clock()
    W = H = params.size * args.tile
    screen = pygame.display.set_mode((W, H))
    tiles = Tileset(args.tile)

    seed, level = args.seed, args.level
    highlight, show_spawns = False, True

    def load():
        maze = generate_level(seed, level, params)
        try:
            spawns = pick_spawns(maze, PMRandom(seed + level))
        except LookupError:
            spawns = None
        return maze.as_matrix(), spawns

    grid, spawns = load()
    running = True
    while running:
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False
            elif ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_ESCAPE:
                    running = False
                elif ev.key == pygame.K_RIGHT:
                    level += 1
                    grid, spawns = load()
                elif ev.key == pygame.K_LEFT:
                    level = max(1, level - 1)
                    grid, spawns = load()
                elif ev.key == pygame.K_UP:
                    seed += 1
                    grid, spawns = load()
                elif ev.key == pygame.K_DOWN:
                    seed = max(1, seed - 1)
                    grid, spawns = load()
                elif ev.key == pygame.K_r:
                    seed = random.randint(1, 2**31 - 2)
                    grid, spawns = load()
                elif ev.key == pygame.K_h:
                    highlight = not highlight
                elif ev.key == pygame.K_s:
                    show_spawns = not show_spawns

        screen.fill((0, 0, 0))
        for z, row in enumerate(grid):
            for x, tid in enumerate(row):
                screen.blit(tiles.get(tid, highlight), (x * args.tile, z * args.tile))
        if show_spawns and spawns is not None:
            for t in (spawns.player, spawns.monster, spawns.pickup):
                screen.blit(tiles.marker(), (t.x * args.tile, t.z * args.tile))

        pygame.display.set_caption(f"Maze Viewer | Seed {seed}  Level {level}  HOLES:{highlight}")
        pygame.display.flip()
        clock.tick(60)

    pygame.quit()


if __name__ == "__main__":
    main()
