"""
UTS Thread Calculator - ASME B1.1 external thread limits of size.

This module provides calculator functions for Unified Thread Standard
external threads. All calculations return ThreadDimensions models.

Example:
    >>> from smithy.calculator import uts_external_thread
    >>>
    >>> thread = uts_external_thread(0.25, 20, "2A")
    >>> thread.major_diameter_max
"""

from .core import (
    # Standard sizes
    nearest_standard_size,
    standard_tpi,
    is_standard_thread,

    # Formula chain
    resolve_engagement_length,
    uts_allowance,
    uts_base_tolerance,
    uts_major_diameter_tolerance,
    uts_pitch_diameter_tolerance,

    # High-level calculation (returns ThreadDimensions)
    uts_external_thread,
    uts_external_thread_from_size,
)

from .constants import STANDARD_THREADS

from .validation import (
    validate_thread,
    validate_thread_inputs,
    Severity,
    ValidationMessage,
    ValidationResult,
)

from .output import (
    to_json,
    to_markdown,
    to_summary,
)

from ..enums import PitchSeries, ThreadClass, ThreadSeries
from ..models import ThreadDimensions


__all__ = [
    # Constants
    "STANDARD_THREADS",

    # Enums (type-safe)
    "ThreadClass",
    "ThreadSeries",
    "PitchSeries",

    # Models
    "ThreadDimensions",

    # Standard sizes
    "nearest_standard_size",
    "standard_tpi",
    "is_standard_thread",

    # Formula chain
    "resolve_engagement_length",
    "uts_allowance",
    "uts_base_tolerance",
    "uts_major_diameter_tolerance",
    "uts_pitch_diameter_tolerance",

    # High-level calculation
    "uts_external_thread",
    "uts_external_thread_from_size",

    # Validation
    "validate_thread",
    "validate_thread_inputs",
    "Severity",
    "ValidationMessage",
    "ValidationResult",

    # Output formatters
    "to_json",
    "to_markdown",
    "to_summary",
]
