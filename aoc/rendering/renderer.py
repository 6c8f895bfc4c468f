import logging
from typing import Collection, Optional, Sequence

import pygame

from aoc.core.config import ToolkitConfig
from aoc.world.points import Point

logger = logging.getLogger("Renderer")


# ── Helper utilities ──────────────────────────────────────────────────

def _lerp_color(c1, c2, t):
    """Linearly interpolate between two RGB colors."""
    t = max(0.0, min(1.0, t))
    return (
        int(c1[0] + (c2[0] - c1[0]) * t),
        int(c1[1] + (c2[1] - c1[1]) * t),
        int(c1[2] + (c2[2] - c1[2]) * t),
    )


# ══════════════════════════════════════════════════════════════════════
#  PATH RENDERER
# ══════════════════════════════════════════════════════════════════════

class PathRenderer:
    """
    Draws a bounded grid, its blocked cells and a path onto an off-screen
    pygame surface. Needs no display, so it also works headless.

    Path cells shade from the path colour at the first step to the end
    colour at the last one so the walking order stays readable.
    """

    def __init__(self, config: Optional[ToolkitConfig] = None):
        self.config = config or ToolkitConfig()
        self.tile = self.config.TILE_SIZE

    def render(
        self,
        width: int,
        height: int,
        blocked: Collection[Point] = (),
        path: Optional[Sequence[Point]] = None,
        start: Optional[Point] = None,
        end: Optional[Point] = None,
    ) -> pygame.Surface:
        surface = pygame.Surface((width * self.tile, height * self.tile))
        surface.fill(self.config.FREE)

        for point in blocked:
            self._fill(surface, point, self.config.BLOCKED)

        if path:
            steps = len(path)
            for index, point in enumerate(path):
                shade = _lerp_color(self.config.PATH, self.config.END, index / max(steps - 1, 1))
                self._fill(surface, point, shade)

        if start is not None:
            self._fill(surface, start, self.config.START)
        if end is not None:
            self._fill(surface, end, self.config.END)
        return surface

    def save(self, surface: pygame.Surface, filename: str) -> None:
        pygame.image.save(surface, filename)
        logger.info(f"Saved {surface.get_width()}x{surface.get_height()} path image to {filename}")

    def color_at(self, surface: pygame.Surface, point: Point):
        """RGB colour in the middle of the tile at ``point``."""
        half = self.tile // 2
        color = surface.get_at((point.x * self.tile + half, point.y * self.tile + half))
        return color.r, color.g, color.b

    def _fill(self, surface: pygame.Surface, point: Point, color) -> None:
        rect = pygame.Rect(point.x * self.tile, point.y * self.tile, self.tile, self.tile)
        surface.fill(color, rect)
