"""Build the per-frame primitive list from a FrameSnapshot.

Layout, back to front: background, light glows, walls, ray fan, player
marker, first-person view panel (top right), minimap (bottom left). All
positions are window pixels; the top-down map is drawn in world units 1:1.
"""

from __future__ import annotations

import math
from typing import List, Tuple

from pygame.math import Vector2

from config import (
    FOV,
    MINIMAP_REGION,
    MINIMAP_SIZE,
    PLAYER_RADIUS,
    RAY_FADE_DISTANCE,
    RAY_FAN_STEP,
    STRIP_LINE_STEP,
    VIEW_HEIGHT_FRAC,
    VIEW_MARGIN,
    VIEW_WIDTH_FRAC,
)
from render.primitives import (
    Circle,
    LinearGradient,
    Line,
    Polygon,
    Primitive,
    RadialGradient,
    rect,
    rgba,
    segment,
    stops,
)

PLAYER_COLOR = (100, 255, 100)
RAY_COLOR = (255, 255, 100)
WHITE = (255, 255, 255)


def view_rect(width: float, height: float) -> Tuple[float, float, float, float]:
    """(x, y, w, h) of the first-person panel."""
    view_w = width * VIEW_WIDTH_FRAC
    view_h = height * VIEW_HEIGHT_FRAC
    return (width - view_w - VIEW_MARGIN, VIEW_MARGIN, view_w, view_h)


def background(width: float, height: float) -> List[Primitive]:
    grad = LinearGradient(
        (0.0, 0.0), (0.0, float(height)), stops((0.0, (5, 5, 15)), (1.0, (15, 15, 30)))
    )
    return [Polygon(rect(0, 0, width, height), fill=grad)]


def light_glows(lights) -> List[Primitive]:
    out: List[Primitive] = []
    for light in lights:
        center = (light.position.x, light.position.y)
        glow_radius = light.intensity * 0.8
        glow = RadialGradient(
            center,
            glow_radius,
            stops(
                (0.0, (*light.color, 80)),
                (0.6, (*light.color, 20)),
                (1.0, (*light.color, 0)),
            ),
        )
        out.append(Circle(center, glow_radius, fill=glow))
        out.append(Circle(center, 4.0, fill=rgba(WHITE)))
    return out


def wall_lines(walls) -> List[Primitive]:
    return [
        Line(segment(w.start, w.end), rgba(w.color), width=4.0) for w in walls
    ]


def ray_fan(snapshot, step: int = RAY_FAN_STEP) -> List[Primitive]:
    """Every `step`-th ray that hit, faded by lighting and distance."""
    out: List[Primitive] = []
    for column in snapshot.columns[::step]:
        if not column.visible:
            continue
        hit = column.hit
        alpha = max(0.05, column.light * (1.0 - hit.distance / RAY_FADE_DISTANCE))
        out.append(
            Line(
                segment(snapshot.position, hit.point),
                rgba(RAY_COLOR, int(alpha * 150)),
                width=1.0,
            )
        )
    return out


def player_marker(position: Vector2, heading: float, fov: float = FOV) -> List[Primitive]:
    px, py = position.x, position.y
    out: List[Primitive] = []

    glow = RadialGradient(
        (px, py), PLAYER_RADIUS, stops((0.0, (*PLAYER_COLOR, 100)), (1.0, (*PLAYER_COLOR, 0)))
    )
    out.append(Circle((px, py), PLAYER_RADIUS, fill=glow))
    out.append(
        Circle((px, py), 8.0, fill=rgba(PLAYER_COLOR), stroke=rgba(WHITE), stroke_width=2.0)
    )

    # Field-of-view wedge
    arc_radius = 50.0
    arc_steps = 20
    arc = [
        (
            px + math.cos(heading - fov / 2 + fov * i / arc_steps) * arc_radius,
            py + math.sin(heading - fov / 2 + fov * i / arc_steps) * arc_radius,
        )
        for i in range(arc_steps + 1)
    ]
    out.append(Polygon(tuple(arc) + ((px, py),), fill=rgba(WHITE, 30)))

    # Direction arrow
    length = 25.0
    back = length * 0.7
    tip = (px + math.cos(heading) * length, py + math.sin(heading) * length)
    left = (px + math.cos(heading - 2.5) * back, py + math.sin(heading - 2.5) * back)
    right = (px + math.cos(heading + 2.5) * back, py + math.sin(heading + 2.5) * back)
    out.append(
        Polygon(
            (tip, left, (px, py), right),
            fill=rgba(WHITE),
            stroke=rgba((0, 0, 0)),
            stroke_width=1.0,
        )
    )
    return out


def first_person_view(snapshot, width: float, height: float) -> List[Primitive]:
    vx, vy, vw, vh = view_rect(width, height)
    out: List[Primitive] = []

    panel_fill = LinearGradient(
        (vx, vy),
        (vx, vy + vh),
        stops((0.0, (50, 50, 80)), (0.5, (20, 20, 35)), (1.0, (30, 30, 50))),
    )
    out.append(
        Polygon(rect(vx, vy, vw, vh), fill=panel_fill, stroke=rgba((150, 150, 150)), stroke_width=2.0)
    )

    for column in snapshot.columns:
        if not column.visible:
            continue
        x, top, w, h = column.strip_rect
        sx = vx + x
        sy = vy + top
        # One extra pixel hides seams between neighbouring strips
        out.append(Polygon(rect(sx, sy, w + 1, h), fill=rgba(column.color)))
        if column.index % STRIP_LINE_STEP == 0:
            r, g, b = column.color
            mid = sx + w / 2
            out.append(
                Line(((mid, sy), (mid, sy + h)), rgba((r + 20, g + 20, b + 20), 100))
            )

    cx = vx + vw / 2
    cy = vy + vh / 2
    out.append(Line(((cx - 10, cy), (cx + 10, cy)), rgba(WHITE, 150), width=2.0))
    out.append(Line(((cx, cy - 10), (cx, cy + 10)), rgba(WHITE, 150), width=2.0))
    out.append(Polygon(rect(vx + 10, vy + vh - 40, 100, 30), fill=rgba((0, 0, 0), 180)))
    return out


def minimap(snapshot, height: float, size: float = MINIMAP_SIZE) -> List[Primitive]:
    mx = 10.0
    my = height - size - 10.0
    ox, oy, world_w, world_h = MINIMAP_REGION
    sx = size / world_w
    sy = size / world_h

    def to_map(p) -> Tuple[float, float]:
        return (mx + (p[0] - ox) * sx, my + (p[1] - oy) * sy)

    out: List[Primitive] = [
        Polygon(
            rect(mx, my, size, size),
            fill=rgba((0, 0, 0), 200),
            stroke=rgba((100, 100, 100)),
            stroke_width=2.0,
        )
    ]
    for wall in snapshot.walls:
        out.append(
            Line((to_map(wall.start), to_map(wall.end)), rgba(wall.color, 200), width=2.0)
        )

    player = to_map(snapshot.position)
    out.append(Circle(player, 3.0, fill=rgba(PLAYER_COLOR)))
    tip = (
        player[0] + math.cos(snapshot.heading) * 15.0,
        player[1] + math.sin(snapshot.heading) * 15.0,
    )
    out.append(Line((player, tip), rgba(WHITE), width=2.0))

    for light in snapshot.lights:
        out.append(Circle(to_map(light.position), 2.0, fill=rgba(light.color)))
    return out


def build_frame(snapshot, width: float, height: float, *, fov: float = FOV) -> List[Primitive]:
    primitives: List[Primitive] = []
    primitives += background(width, height)
    primitives += light_glows(snapshot.lights)
    primitives += wall_lines(snapshot.walls)
    primitives += ray_fan(snapshot)
    primitives += player_marker(snapshot.position, snapshot.heading, fov)
    primitives += first_person_view(snapshot, width, height)
    primitives += minimap(snapshot, height)
    return primitives


__all__ = [
    "build_frame",
    "view_rect",
    "background",
    "light_glows",
    "wall_lines",
    "ray_fan",
    "player_marker",
    "first_person_view",
    "minimap",
]
