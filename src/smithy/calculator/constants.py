"""
Engineering constants for UTS external thread calculations.

This module centralizes all numerical constants used by the calculator and
validation modules. Each constant is documented with its source.

MODIFICATION GUIDELINES:
- Never change ASME B1.1 coefficients without updating the standard reference
- Profile constants must keep their published digits; output is compared
  against published limits of size
- Add new constants here rather than hardcoding in functions

All dimensions are in inches.
"""

from typing import Dict, Optional

# =============================================================================
# ASME B1.1 - Tolerance formula coefficients
# =============================================================================

# T = K1·∛D + K1·√LE + K2·∛P²  (ASME B1.1 §5.8, Class 2A pitch diameter)
TOLERANCE_K1: float = 0.0015
TOLERANCE_K2: float = 0.015

# Major diameter tolerance
# Class 1A: Td = 0.3 × T; Classes 2A and 3A: Td = 0.06 × ∛P²
MAJOR_TOLERANCE_FACTOR_1A: float = 0.3
MAJOR_TOLERANCE_PITCH_FACTOR: float = 0.06

# Pitch diameter tolerance Td2 = factor × T
PITCH_TOLERANCE_FACTORS: Dict[str, float] = {
    "1A": 1.5,
    "2A": 1.0,
    "3A": 0.75,
}

# =============================================================================
# Length of engagement
# =============================================================================

# Default length of engagement for full limit-of-size calculations
DEFAULT_ENGAGEMENT_MULTIPLE: float = 9.0

# Default for the standalone allowance function
ALLOWANCE_ENGAGEMENT_MULTIPLE: float = 5.0

# =============================================================================
# 60° thread profile (ASME B1.1 Figure 1)
# =============================================================================

# Height of the fundamental triangle H = (√3 / 2) × P, published to 9 digits
TRIANGLE_HEIGHT_FACTOR: float = 0.866025404

# Basic pitch diameter D2 = D - 2 × (3/8)H
PITCH_DIAMETER_H_FRACTION: float = 3.0 / 8.0

# Basic minor diameter D1 = D - 2 × (5/8)H
MINOR_DIAMETER_H_FRACTION: float = 5.0 / 8.0

# Per-pitch table constants
UNR_MAX_DIAMETER_FACTOR: float = 1.19078493
UN_MAX_DIAMETER_FACTOR: float = 1.08253175
THREAD_ADDENDUM_FACTOR: float = 0.64951905

# =============================================================================
# ASME B1.1 Table 1 - Standard series (subset, #0 to 1-1/2)
# =============================================================================

# size label -> basic major diameter and threads per inch per graded series
STANDARD_THREADS: Dict[str, Dict[str, Optional[float]]] = {
    "#0": {"diameter": 0.0600, "UNC": None, "UNF": 80, "UNEF": None},
    "#1": {"diameter": 0.0730, "UNC": 64, "UNF": 72, "UNEF": None},
    "#2": {"diameter": 0.0860, "UNC": 56, "UNF": 64, "UNEF": None},
    "#3": {"diameter": 0.0990, "UNC": 48, "UNF": 56, "UNEF": None},
    "#4": {"diameter": 0.1120, "UNC": 40, "UNF": 48, "UNEF": None},
    "#5": {"diameter": 0.1250, "UNC": 40, "UNF": 44, "UNEF": None},
    "#6": {"diameter": 0.1380, "UNC": 32, "UNF": 40, "UNEF": None},
    "#8": {"diameter": 0.1640, "UNC": 32, "UNF": 36, "UNEF": None},
    "#10": {"diameter": 0.1900, "UNC": 24, "UNF": 32, "UNEF": None},
    "#12": {"diameter": 0.2160, "UNC": 24, "UNF": 28, "UNEF": 32},
    "1/4": {"diameter": 0.2500, "UNC": 20, "UNF": 28, "UNEF": 32},
    "5/16": {"diameter": 0.3125, "UNC": 18, "UNF": 24, "UNEF": 32},
    "3/8": {"diameter": 0.3750, "UNC": 16, "UNF": 24, "UNEF": 32},
    "7/16": {"diameter": 0.4375, "UNC": 14, "UNF": 20, "UNEF": 28},
    "1/2": {"diameter": 0.5000, "UNC": 13, "UNF": 20, "UNEF": 28},
    "9/16": {"diameter": 0.5625, "UNC": 12, "UNF": 18, "UNEF": 24},
    "5/8": {"diameter": 0.6250, "UNC": 11, "UNF": 18, "UNEF": 24},
    "3/4": {"diameter": 0.7500, "UNC": 10, "UNF": 16, "UNEF": 20},
    "7/8": {"diameter": 0.8750, "UNC": 9, "UNF": 14, "UNEF": 20},
    "1": {"diameter": 1.0000, "UNC": 8, "UNF": 12, "UNEF": 20},
    "1-1/8": {"diameter": 1.1250, "UNC": 7, "UNF": 12, "UNEF": 18},
    "1-1/4": {"diameter": 1.2500, "UNC": 7, "UNF": 12, "UNEF": 18},
    "1-3/8": {"diameter": 1.3750, "UNC": 6, "UNF": 12, "UNEF": 18},
    "1-1/2": {"diameter": 1.5000, "UNC": 6, "UNF": 12, "UNEF": 18},
}

# Diameter match tolerance for standard size lookups
STANDARD_DIAMETER_TOLERANCE: float = 0.0001

# =============================================================================
# Validation thresholds
# =============================================================================

# Relative difference from 9P before engagement length is reported as non-standard
ENGAGEMENT_MULTIPLE_TOLERANCE_PERCENT: float = 1.0
