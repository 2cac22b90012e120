"""SVG alignment renderer.

Produces a standalone ``<svg>`` document: the star sits at (width/8,
height/2) and body ``i`` of ``n`` is placed at angle ``2π·i/n`` on orbit
radius ``80 + 60·i``.

Coordinate system: SVG user units, origin top-left, y grows downward.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from html import escape

from alignclock.alignment import orbit_radius
from alignclock.models import Body, ClassificationResult

_STAR_COLOR = "gold"
_STAR_RADIUS = 30
_PLANET_COLOR = "#8ecae6"
_ORBIT_COLOR = "#cccccc"


def _planet_radius(size: float) -> float:
    """Map body size (km) to circle radius in user units."""
    return size / 1000


def generate_alignment_svg(
    bodies: Sequence[Body],
    width: int = 800,
    height: int = 300,
    classifications: Sequence[ClassificationResult] | None = None,
) -> str:
    """Return an SVG document picturing the bodies around their star.

    Bodies are drawn in the order given. When ``classifications`` is set,
    each label also shows the light the body receives; ``classifications[i]``
    describes ``bodies[i]``, so pass both in the same (closest-first) order.

    Args:
        bodies: Bodies in drawing order (closest-first for a faithful picture).
        width: Canvas width in pixels.
        height: Canvas height in pixels.
        classifications: Optional classify() output, one per body.

    Returns:
        SVG markup string.

    Raises:
        ValueError: If ``classifications`` and ``bodies`` differ in length.
    """
    star_x = width / 8
    star_y = height / 2
    if classifications is not None and len(classifications) != len(bodies):
        raise ValueError(
            f"got {len(classifications)} classifications for {len(bodies)} bodies"
        )

    orbit_parts: list[str] = []
    planet_parts: list[str] = []
    n = len(bodies)
    for i, body in enumerate(bodies):
        angle = (i / n) * math.pi * 2
        radius = orbit_radius(i)
        px = star_x + math.cos(angle) * radius
        py = star_y + math.sin(angle) * radius
        orbit_parts.append(
            f'<circle cx="{star_x:g}" cy="{star_y:g}" r="{radius:g}" fill="none"'
            f' stroke="{_ORBIT_COLOR}" stroke-dasharray="4 4" />'
        )
        label = escape(body.name)
        if classifications is not None:
            label += f" ({escape(classifications[i].light)})"
        planet_parts.append(
            f'<circle cx="{px:.2f}" cy="{py:.2f}" r="{_planet_radius(body.size):g}"'
            f' fill="{escape(body.color or _PLANET_COLOR)}" />'
        )
        planet_parts.append(
            f'<text x="{px + 10:.2f}" y="{py:.2f}" font-size="14">{label}</text>'
        )

    parts = [
        f'<svg width="{width}" height="{height}" xmlns="http://www.w3.org/2000/svg">',
        *orbit_parts,
        f'<circle cx="{star_x:g}" cy="{star_y:g}" r="{_STAR_RADIUS}" fill="{_STAR_COLOR}" />',
        *planet_parts,
        "</svg>",
    ]
    return "\n".join(parts)
