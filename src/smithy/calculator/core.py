"""
UTS Thread Calculator - Core Calculations

Pure functions for Unified Thread Standard external thread limits of size.
Returns typed ThreadDimensions models.

Formulas are applied in dependency order:
    allowance -> base tolerance -> major/pitch diameter tolerance
    -> limits of size -> per-pitch profile constants

Reference standards:
- ASME B1.1 (Unified Inch Screw Threads, UN and UNR thread form)

All dimensions in inches.
"""

import logging
from math import copysign, sqrt
from typing import Optional, Union

from ..enums import PitchSeries, ThreadClass, coerce_pitch_series
from ..models import ThreadDimensions
from . import constants as c

logger = logging.getLogger(__name__)

ThreadClassInput = Union[ThreadClass, str]


def _cbrt(value: float) -> float:
    """Real cube root (negative in, negative out)"""
    return copysign(abs(value) ** (1.0 / 3.0), value)


def _signed_sqrt(value: float) -> float:
    return copysign(sqrt(abs(value)), value)


def _tolerance_terms(diameter: float, pitch: float, engagement_length: float) -> float:
    """K1·∛D + K1·√LE + K2·∛P²"""
    return (
        c.TOLERANCE_K1 * _cbrt(diameter)
        + c.TOLERANCE_K1 * _signed_sqrt(engagement_length)
        + c.TOLERANCE_K2 * _cbrt(pitch * pitch)
    )


# =============================================================================
# Standard sizes
# =============================================================================

def nearest_standard_size(diameter: float) -> str:
    """Find the ASME B1.1 size label closest to a nominal diameter"""
    return min(
        c.STANDARD_THREADS,
        key=lambda size: abs(c.STANDARD_THREADS[size]["diameter"] - diameter)
    )


def standard_tpi(size: str, series: Union[PitchSeries, str] = PitchSeries.UNC) -> int:
    """
    Look up threads per inch for a standard size and pitch series.

    Args:
        size: Size label, e.g. "#10", "1/4", "1-1/8"
        series: Graded pitch series (UNC, UNF, UNEF)

    Returns:
        Threads per inch

    Raises:
        ValueError: If the size is unknown or not made in that series
    """
    series = coerce_pitch_series(series)
    entry = c.STANDARD_THREADS.get(size.strip())
    if entry is None:
        raise ValueError(f"Unknown standard thread size {size!r}")

    tpi = entry[series.value]
    if tpi is None:
        raise ValueError(f"Size {size} has no {series.value} pitch")
    return int(tpi)


def is_standard_thread(diameter: float, threads_per_inch: float) -> bool:
    """Check if a diameter/TPI pair appears in any standard series"""
    for entry in c.STANDARD_THREADS.values():
        if abs(entry["diameter"] - diameter) > c.STANDARD_DIAMETER_TOLERANCE:
            continue
        pitches = [entry[series.value] for series in PitchSeries]
        if threads_per_inch in pitches:
            return True
    return False


# =============================================================================
# Formula chain
# =============================================================================

def resolve_engagement_length(
    pitch: float,
    engagement_length: Optional[float] = None,
    multiple: float = c.DEFAULT_ENGAGEMENT_MULTIPLE
) -> float:
    """Explicit engagement length if given, else multiple × pitch"""
    if engagement_length is not None:
        return engagement_length
    return multiple * pitch


def uts_allowance(
    diameter: float,
    pitch: float,
    thread_class: ThreadClassInput,
    engagement_length: Optional[float] = None
) -> float:
    """
    Calculate the allowance (es) for a UTS external thread.

    es = 0.3 × [ 0.0015 × ³√D + 0.0015 × √LE + 0.015 × ³√P² ]

    Class 3A has no allowance and returns exactly 0.0 without evaluating
    the formula.

    Args:
        diameter: Nominal diameter D (in)
        pitch: Pitch P = 1 / TPI (in)
        thread_class: Thread class (ThreadClass or "1A"/"2A"/"3A")
        engagement_length: Length of engagement LE (in), defaults to 5 × P

    Returns:
        Allowance (in)
    """
    thread_class = ThreadClass.coerce(thread_class)
    if not thread_class.has_allowance:
        return 0.0

    engagement_length = resolve_engagement_length(
        pitch, engagement_length, c.ALLOWANCE_ENGAGEMENT_MULTIPLE
    )
    return thread_class.allowance_factor * _tolerance_terms(diameter, pitch, engagement_length)


def uts_base_tolerance(diameter: float, pitch: float, engagement_length: float) -> float:
    """
    Calculate the base tolerance T, independent of class.

    T = 0.0015 × ³√D + 0.0015 × √LE + 0.015 × ³√P²
    """
    return _tolerance_terms(diameter, pitch, engagement_length)


def uts_major_diameter_tolerance(
    pitch: float,
    thread_class: ThreadClassInput,
    base_tolerance: float
) -> float:
    """
    Major diameter tolerance Td.

    Class 1A scales the base tolerance (0.3 × T). Classes 2A and 3A use the
    pitch-only formula 0.06 × ³√P² and ignore T.
    """
    thread_class = ThreadClass.coerce(thread_class)
    if thread_class is ThreadClass.A1:
        return c.MAJOR_TOLERANCE_FACTOR_1A * base_tolerance
    return c.MAJOR_TOLERANCE_PITCH_FACTOR * _cbrt(pitch * pitch)


def uts_pitch_diameter_tolerance(thread_class: ThreadClassInput, base_tolerance: float) -> float:
    """Pitch diameter tolerance Td2: 1.5T (1A), T (2A), 0.75T (3A)"""
    thread_class = ThreadClass.coerce(thread_class)
    return c.PITCH_TOLERANCE_FACTORS[thread_class.value] * base_tolerance


def uts_external_thread(
    diameter: float,
    threads_per_inch: float,
    thread_class: ThreadClassInput,
    engagement_length_multiple: float = c.DEFAULT_ENGAGEMENT_MULTIPLE,
    engagement_length: Optional[float] = None
) -> ThreadDimensions:
    """
    Calculate limits of size for a UTS external thread.

    Args:
        diameter: Nominal (basic major) diameter D (in)
        threads_per_inch: Threads per inch (TPI)
        thread_class: Thread class (ThreadClass or "1A"/"2A"/"3A")
        engagement_length_multiple: LE as a multiple of pitch when
            engagement_length is not given (default 9, per ASME B1.1)
        engagement_length: Explicit length of engagement (in)

    Returns:
        ThreadDimensions with allowance, tolerances and limits of size

    Raises:
        ZeroDivisionError: If threads_per_inch is 0
        ValueError: If thread_class is not a known class
    """
    thread_class = ThreadClass.coerce(thread_class)
    pitch = 1.0 / threads_per_inch

    # Resolve defaults before any formula runs
    engagement_length = resolve_engagement_length(
        pitch, engagement_length, engagement_length_multiple
    )

    allowance = uts_allowance(diameter, pitch, thread_class, engagement_length)
    base_tolerance = uts_base_tolerance(diameter, pitch, engagement_length)
    major_tolerance = uts_major_diameter_tolerance(pitch, thread_class, base_tolerance)
    pitch_tolerance = uts_pitch_diameter_tolerance(thread_class, base_tolerance)

    logger.debug(
        f"UTS {diameter}-{threads_per_inch} {thread_class.value}: "
        f"LE={engagement_length:.6f} es={allowance:.6f} T={base_tolerance:.6f}"
    )

    # Triangle height
    triangle_height = c.TRIANGLE_HEIGHT_FACTOR * pitch

    # Major diameter
    major_max = diameter - allowance
    major_min = major_max - major_tolerance

    # Pitch diameter
    pitch_diameter = diameter - 2 * c.PITCH_DIAMETER_H_FRACTION * triangle_height
    pitch_max = pitch_diameter - allowance
    pitch_min = pitch_max - pitch_tolerance

    # Minor diameter: UN subtracts the allowance, UNR (3A) keeps the basic value
    minor_basic = diameter - 2 * c.MINOR_DIAMETER_H_FRACTION * triangle_height
    if thread_class.has_allowance:
        minor = minor_basic - allowance
    else:
        minor = minor_basic

    return ThreadDimensions(
        nominal_diameter=diameter,
        threads_per_inch=threads_per_inch,
        thread_class=thread_class,
        series=thread_class.series,
        engagement_length=engagement_length,
        pitch=pitch,
        triangle_height=triangle_height,
        allowance=allowance,
        base_tolerance=base_tolerance,
        major_diameter_tolerance=major_tolerance,
        pitch_diameter_tolerance=pitch_tolerance,
        major_diameter_max=major_max,
        major_diameter_min=major_min,
        pitch_diameter=pitch_diameter,
        pitch_diameter_max=pitch_max,
        pitch_diameter_min=pitch_min,
        minor_diameter_basic=minor_basic,
        minor_diameter=minor,
        unr_max_diameter=c.UNR_MAX_DIAMETER_FACTOR * pitch,
        un_max_diameter=c.UN_MAX_DIAMETER_FACTOR * pitch,
        thread_addendum=c.THREAD_ADDENDUM_FACTOR * pitch,
    )


def uts_external_thread_from_size(
    size: str,
    series: Union[PitchSeries, str] = PitchSeries.UNC,
    thread_class: ThreadClassInput = ThreadClass.A2,
    engagement_length_multiple: float = c.DEFAULT_ENGAGEMENT_MULTIPLE,
    engagement_length: Optional[float] = None
) -> ThreadDimensions:
    """
    Calculate a standard thread by size label, e.g. ("1/4", "UNC", "2A").

    Looks up the basic major diameter and TPI in ASME B1.1 Table 1 and
    delegates to uts_external_thread().
    """
    tpi = standard_tpi(size, series)
    diameter = c.STANDARD_THREADS[size.strip()]["diameter"]
    return uts_external_thread(
        diameter=diameter,
        threads_per_inch=tpi,
        thread_class=thread_class,
        engagement_length_multiple=engagement_length_multiple,
        engagement_length=engagement_length
    )
