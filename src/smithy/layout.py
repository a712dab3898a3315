"""
Layout generators for fixture and hole patterns.

Each public function validates its arguments when called and returns a
fresh generator, so bad input fails immediately and every call replays the
same sequence from the start.
"""

import logging
from itertools import count as counter
from math import cos, isfinite, radians, sin
from operator import index
from typing import Iterator

from .models import Coordinate

logger = logging.getLogger(__name__)


def bolt_circle(
    diameter: float,
    count: int,
    start_angle: float = 0.0,
    center_x: float = 0.0,
    center_y: float = 0.0
) -> Iterator[Coordinate]:
    """
    Points evenly spaced around a bolt circle.

    Args:
        diameter: Bolt circle diameter
        count: Number of points (>= 1)
        start_angle: Angle of the first point (degrees, CCW from +X)
        center_x: Circle centre X
        center_y: Circle centre Y

    Returns:
        Iterator of Coordinates with angle set to each point's absolute
        angle in degrees (not normalised to [0, 360))

    Raises:
        ValueError: If diameter <= 0 or count < 1
        TypeError: If count is not an integer
    """
    count = index(count)
    if diameter <= 0:
        raise ValueError(f"Bolt circle diameter must be positive, got {diameter}")
    if count < 1:
        raise ValueError(f"Bolt circle needs at least one point, got {count}")

    logger.debug(f"Bolt circle: {count} points on {diameter} dia from {start_angle}°")
    return _bolt_circle_points(diameter / 2.0, count, start_angle, center_x, center_y)


def _bolt_circle_points(
    radius: float,
    count: int,
    start_angle: float,
    center_x: float,
    center_y: float
) -> Iterator[Coordinate]:
    step = 360.0 / count
    for i in range(count):
        angle = start_angle + i * step
        angle_rad = radians(angle)
        yield Coordinate(
            x=center_x + radius * cos(angle_rad),
            y=center_y + radius * sin(angle_rad),
            angle=angle,
        )


def linear_spacing(start: float, end: float, step: float) -> Iterator[float]:
    """
    Values start, start + step, start + 2·step, ... up to and including end.

    Each value is computed as start + i·step rather than accumulated, so a
    step that divides the range exactly lands on end.

    >>> list(linear_spacing(0.0, 5.0, 1.0))
    [0.0, 1.0, 2.0, 3.0, 4.0, 5.0]

    Raises:
        ValueError: If step is not a positive finite number, or start or
            end is not finite (the sequence would never terminate)
    """
    if not isfinite(step) or step <= 0:
        raise ValueError(f"Spacing step must be positive and finite, got {step}")
    if not (isfinite(start) and isfinite(end)):
        raise ValueError(f"Spacing range must be finite, got {start} to {end}")

    return _spacing_values(start, end, step)


def _spacing_values(start: float, end: float, step: float) -> Iterator[float]:
    for i in counter():
        value = start + i * step
        if value > end:
            return
        yield value


def grid(
    x_start: float,
    x_count: int,
    x_step: float,
    y_start: float,
    y_count: int,
    y_step: float,
    serpentine: bool = False
) -> Iterator[Coordinate]:
    """
    Rectangular grid traversal, row by row along Y.

    With serpentine=True, odd rows run in the opposite X direction so a
    head moving through the points zig-zags instead of returning to the
    row start. Both directions cover the same X positions.

    Args:
        x_start: First X position
        x_count: Points per row (0 gives an empty grid)
        x_step: X spacing (may be negative or zero)
        y_start: First row Y position
        y_count: Number of rows (0 gives an empty grid)
        y_step: Y spacing (may be negative or zero)
        serpentine: Reverse X on odd rows

    Returns:
        Iterator of x_count × y_count Coordinates

    Raises:
        ValueError: If either count is negative
        TypeError: If either count is not an integer
    """
    x_count = index(x_count)
    y_count = index(y_count)
    if x_count < 0 or y_count < 0:
        raise ValueError(f"Grid counts must not be negative, got {x_count} × {y_count}")

    logger.debug(f"Grid: {x_count} × {y_count} points, serpentine={serpentine}")
    return _grid_points(x_start, x_count, x_step, y_start, y_count, y_step, serpentine)


def _grid_points(
    x_start: float,
    x_count: int,
    x_step: float,
    y_start: float,
    y_count: int,
    y_step: float,
    serpentine: bool
) -> Iterator[Coordinate]:
    for row in range(y_count):
        y = y_start + row * y_step
        reverse = serpentine and row % 2 == 1
        for i in range(x_count):
            column = x_count - 1 - i if reverse else i
            yield Coordinate(x=x_start + column * x_step, y=y)
