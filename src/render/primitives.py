"""Drawable primitives handed to a canvas.

These are plain data: the simulation never draws anything itself. A canvas
(see `render.pygame_canvas`) rasterizes them in list order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, Union

XY = Tuple[float, float]
RGBA = Tuple[int, int, int, int]


def rgba(color: Sequence[int], alpha: int = 255) -> RGBA:
    """Clamp an RGB(A) color into 0..255 channels."""
    r, g, b = (max(0, min(255, int(c))) for c in color[:3])
    a = int(color[3]) if len(color) > 3 else alpha
    return (r, g, b, max(0, min(255, a)))


@dataclass(frozen=True)
class ColorStop:
    offset: float
    color: RGBA


@dataclass(frozen=True)
class LinearGradient:
    start: XY
    end: XY
    stops: Tuple[ColorStop, ...]


@dataclass(frozen=True)
class RadialGradient:
    center: XY
    radius: float
    stops: Tuple[ColorStop, ...]


Fill = Union[RGBA, LinearGradient, RadialGradient]


@dataclass(frozen=True)
class Line:
    points: Tuple[XY, ...]
    color: RGBA
    width: float = 1.0


@dataclass(frozen=True)
class Polygon:
    points: Tuple[XY, ...]
    fill: Optional[Fill] = None
    stroke: Optional[RGBA] = None
    stroke_width: float = 0.0


@dataclass(frozen=True)
class Circle:
    center: XY
    radius: float
    fill: Optional[Fill] = None
    stroke: Optional[RGBA] = None
    stroke_width: float = 0.0


Primitive = Union[Line, Polygon, Circle]


def rect(x: float, y: float, w: float, h: float) -> Tuple[XY, ...]:
    return ((x, y), (x + w, y), (x + w, y + h), (x, y + h))


def segment(start, end) -> Tuple[XY, XY]:
    return ((float(start[0]), float(start[1])), (float(end[0]), float(end[1])))


def stops(*pairs: Tuple[float, Sequence[int]]) -> Tuple[ColorStop, ...]:
    return tuple(ColorStop(float(offset), rgba(color)) for offset, color in pairs)


__all__ = [
    "XY",
    "RGBA",
    "rgba",
    "ColorStop",
    "LinearGradient",
    "RadialGradient",
    "Fill",
    "Line",
    "Polygon",
    "Circle",
    "Primitive",
    "rect",
    "segment",
    "stops",
]
