"""Alignment computation layer: shadow counting, light labels and shadow geometry."""

import logging
import math
from collections.abc import Sequence

import numpy as np

from alignclock.models import (
    Body,
    ClassificationResult,
    PlanetPosition,
    Star,
    StarSystem,
)

log = logging.getLogger(__name__)

FULL = "Full"
PARTIAL = "Partial"
NONE = "None"
NONE_MULTIPLE = "None (Multiple Shadows)"

LIGHT_LABELS: tuple[str, ...] = (FULL, PARTIAL, NONE, NONE_MULTIPLE)

_BASE_ORBIT = 80.0
_ORBIT_STEP = 60.0


def sort_by_distance(bodies: Sequence[Body]) -> tuple[Body, ...]:
    """Return bodies ordered closest-first. The input is left untouched."""
    return tuple(sorted(bodies, key=lambda b: b.distance))


def shadow_count(bodies: Sequence[Body], index: int) -> int:
    """Count the bodies before ``index`` that are strictly larger than ``bodies[index]``.

    Equal sizes never cast a shadow.
    """
    size = bodies[index].size
    return sum(1 for b in bodies[:index] if b.size > size)


def light_intensity(index: int, count: int) -> str:
    """Map a body's position and shadow count to its light label.

    The closest body always gets full light, whatever ``count`` says.
    """
    if index == 0:
        return FULL
    if count == 1:
        return NONE
    if count > 1:
        return NONE_MULTIPLE
    return PARTIAL


def classify(bodies: Sequence[Body]) -> tuple[ClassificationResult, ...]:
    """Classify the light every body receives from the star.

    Bodies are sorted by distance first; results follow that order, one per
    body. An empty sequence gives an empty tuple.

    Args:
        bodies: Bodies in any order.

    Returns:
        Tuple of ClassificationResult in distance-ascending order.
    """
    ordered = sort_by_distance(bodies)
    results: list[ClassificationResult] = []
    for i, body in enumerate(ordered):
        count = shadow_count(ordered, i)
        results.append(
            ClassificationResult(
                name=body.name, light=light_intensity(i, count), shadow_count=count
            )
        )
    log.debug("classified %d bodies", len(results))
    return tuple(results)


def _distance_to(star: Star, px: float, py: float) -> float:
    distance = math.hypot(px - star.x, py - star.y)
    if distance == 0:
        raise ValueError(f"position ({px}, {py}) coincides with star {star.name}")
    return distance


def shadow_length(body: Body, star: Star, px: float, py: float) -> float:
    """Length of the shadow cast by ``body`` standing at (px, py).

    Uses ``r² / (d · tan θ)`` with θ the star's apparent half-angle
    ``atan(star.radius / d)`` and r half the body's size.

    Raises:
        ValueError: If (px, py) is the star's own position.
    """
    distance = _distance_to(star, px, py)
    angle = math.atan(star.radius / distance)
    radius = body.size / 2
    return abs((radius * radius) / (distance * math.tan(angle)))


def physical_light_intensity(star: Star, px: float, py: float) -> float:
    """Inverse-square irradiance at (px, py): ``L / (4π d²)``.

    Raises:
        ValueError: If (px, py) is the star's own position.
    """
    distance = _distance_to(star, px, py)
    return star.luminosity / (4 * math.pi * distance * distance)


def orbit_radius(index: int) -> float:
    """Drawing radius of the orbit at ``index`` (closest-first)."""
    return _BASE_ORBIT + index * _ORBIT_STEP


def animate_shadows(
    bodies: Sequence[Body], star: Star, steps: int = 30
) -> list[tuple[PlanetPosition, ...]]:
    """Move every body once around its orbit and record shadow lengths.

    Frame ``t`` puts body ``i`` of ``n`` at angle ``2π·t/steps + 2π·i/n`` on
    orbit radius ``80 + 60·i`` around the star.

    Args:
        bodies: Bodies in drawing order.
        star: Light source at the orbit centre.
        steps: Number of frames.

    Returns:
        One tuple of PlanetPosition per frame.

    Raises:
        ValueError: If ``steps`` is not positive.
    """
    if steps <= 0:
        raise ValueError(f"steps must be positive, got {steps}")
    n = len(bodies)
    if n == 0:
        return [() for _ in range(steps)]

    # angles[t, i]
    phase = np.arange(steps)[:, None] / steps * 2 * np.pi
    offset = np.arange(n)[None, :] / n * 2 * np.pi
    angles = phase + offset
    radii = np.array([orbit_radius(i) for i in range(n)])
    px_arr = star.x + np.cos(angles) * radii
    py_arr = star.y + np.sin(angles) * radii

    frames: list[tuple[PlanetPosition, ...]] = []
    for t in range(steps):
        frame = []
        for i, body in enumerate(bodies):
            px = float(px_arr[t, i])
            py = float(py_arr[t, i])
            frame.append(
                PlanetPosition(
                    name=body.name,
                    px=px,
                    py=py,
                    shadow=shadow_length(body, star, px, py),
                )
            )
        frames.append(tuple(frame))
    log.debug("built %d animation frames for %d bodies", steps, n)
    return frames


def create_star_system(
    name: str, stars: Sequence[Star], bodies: Sequence[Body]
) -> StarSystem:
    """Bundle stars and bodies. ``stars[0]`` becomes the primary.

    Raises:
        ValueError: If no star is given.
    """
    if not stars:
        raise ValueError(f"star system {name!r} needs at least one star")
    return StarSystem(name=name, stars=tuple(stars), bodies=tuple(bodies))
