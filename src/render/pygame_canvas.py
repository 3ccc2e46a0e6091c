"""pygame canvas: rasterizes render.primitives onto a surface.

Translucent shapes are drawn onto a scratch SRCALPHA surface and blitted so
alpha blends against what is already on screen. Gradient fills are computed
with numpy over the shape's bounding box and then masked to the shape.
"""

from __future__ import annotations

import math
from typing import List, Tuple

import numpy as np
import pygame

from render.primitives import (
    Circle,
    LinearGradient,
    Line,
    Polygon,
    Primitive,
    RadialGradient,
)


def gradient_pixels(fill, origin: Tuple[int, int], size: Tuple[int, int]) -> np.ndarray:
    """RGBA array of shape (w, h, 4) sampling `fill` over a pixel box."""
    w, h = size
    xs = np.arange(w, dtype=np.float64)[:, None] + origin[0] + 0.5
    ys = np.arange(h, dtype=np.float64)[None, :] + origin[1] + 0.5

    if isinstance(fill, LinearGradient):
        (x0, y0), (x1, y1) = fill.start, fill.end
        dx, dy = x1 - x0, y1 - y0
        length_sq = dx * dx + dy * dy
        if length_sq == 0:
            s = np.zeros((w, h))
        else:
            s = ((xs - x0) * dx + (ys - y0) * dy) / length_sq
    else:
        cx, cy = fill.center
        radius = max(fill.radius, 1e-9)
        s = np.sqrt((xs - cx) ** 2 + (ys - cy) ** 2) / radius
    s = np.clip(np.broadcast_to(s, (w, h)), 0.0, 1.0)

    offsets = [stop.offset for stop in fill.stops]
    out = np.empty((w, h, 4), dtype=np.float64)
    for channel in range(4):
        values = [stop.color[channel] for stop in fill.stops]
        out[..., channel] = np.interp(s, offsets, values)
    return out


class PygameCanvas:
    """Queue primitives during a frame and draw them on `present()`."""

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface
        self._queue: List[Primitive] = []

    def clear(self) -> None:
        self._queue.clear()

    def push(self, primitive: Primitive) -> None:
        self._queue.append(primitive)

    def __len__(self) -> int:
        return len(self._queue)

    def present(self) -> None:  # pragma: no cover - visual
        for primitive in self._queue:
            if isinstance(primitive, Line):
                self._draw_line(primitive)
            elif isinstance(primitive, Polygon):
                self._draw_polygon(primitive)
            elif isinstance(primitive, Circle):
                self._draw_circle(primitive)
            else:
                raise TypeError(f"Unsupported primitive: {type(primitive).__name__}")
        self._queue.clear()

    # ------------------------------------------------------------------
    def _blit_shape(self, bounds: pygame.Rect, fill, draw_mask) -> None:  # pragma: no cover - visual
        bounds = bounds.clip(self.surface.get_rect())
        if bounds.width <= 0 or bounds.height <= 0:
            return
        layer = pygame.Surface(bounds.size, pygame.SRCALPHA)
        if isinstance(fill, (LinearGradient, RadialGradient)):
            draw_mask(layer, (255, 255, 255, 255), (-bounds.x, -bounds.y))
            pixels = gradient_pixels(fill, bounds.topleft, bounds.size)
            mask = pygame.surfarray.array_alpha(layer).astype(np.float64) / 255.0
            rgb = pygame.surfarray.pixels3d(layer)
            rgb[...] = pixels[..., :3].astype(np.uint8)
            del rgb
            alpha = pygame.surfarray.pixels_alpha(layer)
            alpha[...] = (pixels[..., 3] * mask).astype(np.uint8)
            del alpha
        else:
            draw_mask(layer, fill, (-bounds.x, -bounds.y))
        self.surface.blit(layer, bounds.topleft)

    def _draw_line(self, line: Line) -> None:  # pragma: no cover - visual
        width = max(1, int(round(line.width)))
        xs = [p[0] for p in line.points]
        ys = [p[1] for p in line.points]
        pad = width + 1
        bounds = pygame.Rect(
            int(min(xs)) - pad,
            int(min(ys)) - pad,
            int(max(xs) - min(xs)) + 2 * pad + 1,
            int(max(ys) - min(ys)) + 2 * pad + 1,
        )

        def draw(layer, color, offset):
            pts = [(x + offset[0], y + offset[1]) for x, y in line.points]
            pygame.draw.lines(layer, color, False, pts, width)

        self._blit_shape(bounds, line.color, draw)

    def _draw_polygon(self, poly: Polygon) -> None:  # pragma: no cover - visual
        xs = [p[0] for p in poly.points]
        ys = [p[1] for p in poly.points]
        pad = int(math.ceil(poly.stroke_width)) + 1
        bounds = pygame.Rect(
            int(min(xs)) - pad,
            int(min(ys)) - pad,
            int(max(xs) - min(xs)) + 2 * pad + 1,
            int(max(ys) - min(ys)) + 2 * pad + 1,
        )

        def shape(width):
            def draw(layer, color, offset):
                pts = [(x + offset[0], y + offset[1]) for x, y in poly.points]
                pygame.draw.polygon(layer, color, pts, width)

            return draw

        if poly.fill is not None:
            self._blit_shape(bounds, poly.fill, shape(0))
        if poly.stroke is not None and poly.stroke_width > 0:
            self._blit_shape(bounds, poly.stroke, shape(max(1, int(poly.stroke_width))))

    def _draw_circle(self, circle: Circle) -> None:  # pragma: no cover - visual
        cx, cy = circle.center
        r = circle.radius
        pad = int(math.ceil(circle.stroke_width)) + 1
        bounds = pygame.Rect(
            int(cx - r) - pad, int(cy - r) - pad, int(2 * r) + 2 * pad + 1, int(2 * r) + 2 * pad + 1
        )

        def shape(width):
            def draw(layer, color, offset):
                pygame.draw.circle(layer, color, (cx + offset[0], cy + offset[1]), r, width)

            return draw

        if circle.fill is not None:
            self._blit_shape(bounds, circle.fill, shape(0))
        if circle.stroke is not None and circle.stroke_width > 0:
            self._blit_shape(bounds, circle.stroke, shape(max(1, int(circle.stroke_width))))


__all__ = ["PygameCanvas", "gradient_pixels"]
