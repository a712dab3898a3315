"""Numeric helpers shared by callers that need stable-precision output."""

from math import copysign, floor, isfinite


def round_to(value: float, digits: int) -> float:
    """
    Round value to a number of decimal digits, halves away from zero.

    Unlike the builtin round() (half-to-even), an exact .5 at the last kept
    digit always moves away from zero: round_to(0.125, 2) == 0.13 and
    round_to(-0.125, 2) == -0.13, as far as the binary value allows.

    Computed as round(value × 10^digits) / 10^digits, so the result is
    stable under repeated application. Non-finite values pass through.

    Args:
        value: Value to round
        digits: Number of decimal digits to keep

    Returns:
        Rounded value
    """
    if not isfinite(value):
        return value

    factor = 10.0 ** digits
    scaled = abs(value * factor)
    whole = floor(scaled)
    if scaled - whole >= 0.5:
        whole += 1
    return copysign(whole, value) / factor
