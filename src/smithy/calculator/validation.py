"""
UTS Thread Calculator - Validation Rules

Engineering checks on calculator inputs and results. Findings are returned
as ValidationMessages rather than raised, so a caller can show all of them
at once. Hard faults (zero TPI, unknown class) are still raised by the
calculator itself.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from ..models import ThreadDimensions
from . import constants as c
from .core import is_standard_thread, nearest_standard_size


class Severity(Enum):
    """Validation message severity"""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class ValidationMessage:
    """A single validation finding"""
    severity: Severity
    code: str
    message: str
    suggestion: Optional[str] = None


@dataclass
class ValidationResult:
    """Complete validation result"""
    valid: bool  # True if no errors
    messages: List[ValidationMessage] = field(default_factory=list)

    @property
    def errors(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.ERROR]

    @property
    def warnings(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.WARNING]

    @property
    def infos(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.INFO]


def _result(messages: List[ValidationMessage]) -> ValidationResult:
    has_errors = any(m.severity == Severity.ERROR for m in messages)
    return ValidationResult(valid=not has_errors, messages=messages)


def validate_thread_inputs(
    diameter: float,
    threads_per_inch: float,
    engagement_length: Optional[float] = None
) -> ValidationResult:
    """
    Check calculator inputs before calculating.

    Args:
        diameter: Nominal diameter (in)
        threads_per_inch: Threads per inch
        engagement_length: Explicit length of engagement (in), if any

    Returns:
        ValidationResult with all findings
    """
    messages: List[ValidationMessage] = []
    messages.extend(_validate_diameter(diameter))
    messages.extend(_validate_tpi(threads_per_inch))
    messages.extend(_validate_engagement_length(engagement_length))

    # Only meaningful once the basic inputs are sane
    if not messages:
        messages.extend(_validate_standard_size(diameter, threads_per_inch))

    return _result(messages)


def validate_thread(dimensions: ThreadDimensions) -> ValidationResult:
    """
    Validate a calculated thread against engineering rules.

    Re-checks the inputs echoed on the result, then the derived limits.
    """
    messages = list(validate_thread_inputs(
        dimensions.nominal_diameter,
        dimensions.threads_per_inch,
        dimensions.engagement_length
    ).messages)

    messages.extend(_validate_engagement_multiple(dimensions))
    messages.extend(_validate_limits(dimensions))

    return _result(messages)


def _validate_diameter(diameter: float) -> List[ValidationMessage]:
    if diameter > 0:
        return []
    return [ValidationMessage(
        severity=Severity.ERROR,
        code="DIAMETER_NOT_POSITIVE",
        message=f"Nominal diameter ({diameter}) must be positive",
        suggestion="Enter the basic major diameter in inches"
    )]


def _validate_tpi(threads_per_inch: float) -> List[ValidationMessage]:
    if threads_per_inch > 0:
        return []
    return [ValidationMessage(
        severity=Severity.ERROR,
        code="TPI_NOT_POSITIVE",
        message=f"Threads per inch ({threads_per_inch}) must be positive",
    )]


def _validate_engagement_length(engagement_length: Optional[float]) -> List[ValidationMessage]:
    if engagement_length is None or engagement_length > 0:
        return []
    return [ValidationMessage(
        severity=Severity.ERROR,
        code="ENGAGEMENT_LENGTH_NOT_POSITIVE",
        message=f"Length of engagement ({engagement_length}) must be positive",
        suggestion="Leave it unset to use 9 × pitch"
    )]


def _validate_standard_size(diameter: float, threads_per_inch: float) -> List[ValidationMessage]:
    if is_standard_thread(diameter, threads_per_inch):
        return []

    nearest = nearest_standard_size(diameter)
    entry = c.STANDARD_THREADS[nearest]
    pitches = ", ".join(
        f"{entry[name]} {name}" for name in ("UNC", "UNF", "UNEF") if entry[name]
    )
    return [ValidationMessage(
        severity=Severity.WARNING,
        code="NON_STANDARD_THREAD",
        message=f"{diameter}-{threads_per_inch:g} is not a standard UNC/UNF/UNEF thread",
        suggestion=f"Nearest standard size is {nearest} ({entry['diameter']:.4f} in): {pitches}"
    )]


def _validate_engagement_multiple(dimensions: ThreadDimensions) -> List[ValidationMessage]:
    """Report lengths of engagement other than the 9P default"""
    if dimensions.pitch <= 0 or dimensions.engagement_length <= 0:
        return []

    multiple = dimensions.engagement_length / dimensions.pitch
    standard = c.DEFAULT_ENGAGEMENT_MULTIPLE
    deviation_percent = abs(multiple - standard) / standard * 100.0
    if deviation_percent <= c.ENGAGEMENT_MULTIPLE_TOLERANCE_PERCENT:
        return []

    return [ValidationMessage(
        severity=Severity.INFO,
        code="ENGAGEMENT_LENGTH_NON_STANDARD",
        message=(
            f"Length of engagement is {multiple:.1f}P rather than the default "
            f"{standard:g}P used for limits of size"
        ),
    )]


def _validate_limits(dimensions: ThreadDimensions) -> List[ValidationMessage]:
    messages = []

    if dimensions.minor_diameter <= 0:
        messages.append(ValidationMessage(
            severity=Severity.ERROR,
            code="MINOR_DIAMETER_NOT_POSITIVE",
            message=f"Minor diameter ({dimensions.minor_diameter:.4f} in) is not positive",
            suggestion="The pitch is too coarse for this diameter. Use a finer thread."
        ))

    if dimensions.major_diameter_min > dimensions.major_diameter_max:
        messages.append(ValidationMessage(
            severity=Severity.ERROR,
            code="MAJOR_DIAMETER_LIMITS_INVERTED",
            message="Minimum major diameter exceeds maximum",
        ))

    if dimensions.pitch_diameter_min > dimensions.pitch_diameter_max:
        messages.append(ValidationMessage(
            severity=Severity.ERROR,
            code="PITCH_DIAMETER_LIMITS_INVERTED",
            message="Minimum pitch diameter exceeds maximum",
        ))

    return messages
