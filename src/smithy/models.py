"""
Value objects returned by the layout generators and the thread calculator.

Both models are frozen Pydantic models: they compare by value, serialize
with model_dump(mode='json') and reject attribute assignment once built.
"""

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict

from .enums import ThreadClass, ThreadSeries


class Coordinate(BaseModel):
    """A 2D layout point, optionally tagged with its polar angle."""
    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    z: Optional[float] = None  # Reserved for 3D layouts
    angle: Optional[float] = None  # Degrees, bolt circle only

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


class ThreadDimensions(BaseModel):
    """UTS external thread dimensions for one calculation (inches)."""
    model_config = ConfigDict(frozen=True)

    # Inputs, resolved
    nominal_diameter: float
    threads_per_inch: float
    thread_class: ThreadClass
    series: ThreadSeries
    engagement_length: float

    # Basic geometry
    pitch: float
    triangle_height: float

    # Allowance and tolerances
    allowance: float
    base_tolerance: float
    major_diameter_tolerance: float
    pitch_diameter_tolerance: float

    # Limits of size
    major_diameter_max: float
    major_diameter_min: float
    pitch_diameter: float
    pitch_diameter_max: float
    pitch_diameter_min: float
    minor_diameter_basic: float
    minor_diameter: float

    # Per-pitch profile constants
    unr_max_diameter: float
    un_max_diameter: float
    thread_addendum: float
