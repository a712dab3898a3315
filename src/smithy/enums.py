"""Type-safe enums for the thread calculator.

ThreadClass selects formula branches; it carries no numeric state of its own
beyond the per-class factors looked up in calculator.constants.
"""

from enum import Enum
from typing import Union


class ThreadSeries(Enum):
    """Root form used for the minor diameter"""
    UN = "UN"    # Flat root, allowance applied to minor diameter
    UNR = "UNR"  # Rounded root, basic minor diameter


class PitchSeries(Enum):
    """Graded pitch series per ASME B1.1"""
    UNC = "UNC"    # Coarse
    UNF = "UNF"    # Fine
    UNEF = "UNEF"  # Extra fine


class ThreadClass(Enum):
    """External thread fit class per ASME B1.1"""
    A1 = "1A"  # Loose fit, allowance applied
    A2 = "2A"  # General purpose, allowance applied
    A3 = "3A"  # Precision, no allowance

    @property
    def has_allowance(self) -> bool:
        return self is not ThreadClass.A3

    @property
    def allowance_factor(self) -> float:
        """es = factor × T; 0.3 for Classes 1A and 2A, none for 3A"""
        return 0.3 if self.has_allowance else 0.0

    @property
    def series(self) -> ThreadSeries:
        return ThreadSeries.UNR if self is ThreadClass.A3 else ThreadSeries.UN

    @classmethod
    def coerce(cls, value: Union["ThreadClass", str]) -> "ThreadClass":
        """Convert "2A", "2a" or "A2" style strings to a ThreadClass."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            text = value.strip().upper()
            if len(text) == 2 and text.startswith("A"):
                text = text[::-1]
            for member in cls:
                if member.value == text:
                    return member
        raise ValueError(f"Unknown thread class {value!r}, expected one of 1A, 2A, 3A")


def coerce_pitch_series(value: Union[PitchSeries, str]) -> PitchSeries:
    """Convert "unc" / "UNF" style strings to a PitchSeries."""
    if isinstance(value, PitchSeries):
        return value
    if isinstance(value, str):
        text = value.strip().upper()
        for member in PitchSeries:
            if member.value == text:
                return member
    raise ValueError(f"Unknown pitch series {value!r}, expected one of UNC, UNF, UNEF")
