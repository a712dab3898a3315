"""Output formatters for UTS thread dimensions.

Converts typed ThreadDimensions models to JSON, Markdown and plain text.

Uses Pydantic's model_dump(mode='json') for serialization, including
automatic enum-to-string conversion.
"""

import json
from typing import Optional, TYPE_CHECKING

from ..models import ThreadDimensions
from ..util import round_to

if TYPE_CHECKING:
    from .validation import ValidationResult

SCHEMA_VERSION = "1.0"


def _model_to_dict(model, digits: Optional[int] = None) -> dict:
    """Convert Pydantic model to dict with JSON-compatible types.

    Floats are rounded with round_to() when digits is given.
    """
    data = model.model_dump(mode='json')
    if digits is not None:
        data = {
            key: round_to(value, digits) if isinstance(value, float) else value
            for key, value in data.items()
        }
    return data


def _designation(thread: ThreadDimensions) -> str:
    return f"{thread.nominal_diameter:.4f}-{thread.threads_per_inch:g} {thread.series.value}-{thread.thread_class.value}"


def to_json(
    thread: ThreadDimensions,
    validation: Optional["ValidationResult"] = None,
    indent: int = 2,
    digits: Optional[int] = None
) -> str:
    """Convert ThreadDimensions to JSON string.

    Args:
        thread: ThreadDimensions from uts_external_thread()
        validation: Optional validation results to include in output
        indent: JSON indentation level (default: 2)
        digits: Round floats to this many decimals (default: full precision)

    Returns:
        JSON string with schema version, thread dimensions and optional validation
    """
    output = {
        "schema_version": SCHEMA_VERSION,
        "designation": _designation(thread),
        "thread": _model_to_dict(thread, digits),
    }

    if validation is not None:
        output["validation"] = {
            "valid": validation.valid,
            "messages": [
                {
                    "severity": m.severity.value,
                    "code": m.code,
                    "message": m.message,
                    "suggestion": m.suggestion,
                }
                for m in validation.messages
            ],
        }

    return json.dumps(output, indent=indent)


def to_markdown(
    thread: ThreadDimensions,
    validation: Optional["ValidationResult"] = None
) -> str:
    """Convert ThreadDimensions to a Markdown report.

    Args:
        thread: ThreadDimensions from uts_external_thread()
        validation: Optional validation results to include

    Returns:
        Markdown formatted string
    """
    md = f"# UTS External Thread: {_designation(thread)}\n\n"

    md += "## Basic Values\n\n"
    md += "| Parameter | Value |\n"
    md += "|-----------|-------|\n"
    md += f"| Nominal Diameter | {thread.nominal_diameter:.4f} in |\n"
    md += f"| Threads per Inch | {thread.threads_per_inch:g} |\n"
    md += f"| Pitch | {thread.pitch:.6f} in |\n"
    md += f"| Triangle Height (H) | {thread.triangle_height:.6f} in |\n"
    md += f"| Length of Engagement | {thread.engagement_length:.4f} in |\n"
    md += "\n"

    md += "## Allowance & Tolerances\n\n"
    md += "| Parameter | Value |\n"
    md += "|-----------|-------|\n"
    md += f"| Allowance (es) | {thread.allowance:.6f} in |\n"
    md += f"| Base Tolerance (T) | {thread.base_tolerance:.6f} in |\n"
    md += f"| Major Diameter Tolerance (Td) | {thread.major_diameter_tolerance:.6f} in |\n"
    md += f"| Pitch Diameter Tolerance (Td2) | {thread.pitch_diameter_tolerance:.6f} in |\n"
    md += "\n"

    md += "## Limits of Size\n\n"
    md += "| Diameter | Max | Min |\n"
    md += "|----------|-----|-----|\n"
    md += f"| Major | {thread.major_diameter_max:.4f} in | {thread.major_diameter_min:.4f} in |\n"
    md += f"| Pitch | {thread.pitch_diameter_max:.4f} in | {thread.pitch_diameter_min:.4f} in |\n"
    md += f"| Minor ({thread.series.value}) | {thread.minor_diameter:.4f} in | - |\n"
    md += "\n"

    md += "## Profile Constants\n\n"
    md += f"- UNR max diameter constant: {thread.unr_max_diameter:.6f} in\n"
    md += f"- UN max diameter constant: {thread.un_max_diameter:.6f} in\n"
    md += f"- Thread addendum: {thread.thread_addendum:.6f} in\n"

    if validation:
        md += "\n## Validation\n\n"

        if validation.valid:
            md += "**Status:** ✅ Thread is valid\n\n"
        else:
            md += "**Status:** ❌ Thread has errors\n\n"

        if validation.errors:
            md += "### Errors\n\n"
            for msg in validation.errors:
                md += f"- **{msg.code}**: {msg.message}\n"
                if msg.suggestion:
                    md += f"  - *Suggestion*: {msg.suggestion}\n"
            md += "\n"

        if validation.warnings:
            md += "### Warnings\n\n"
            for msg in validation.warnings:
                md += f"- **{msg.code}**: {msg.message}\n"
                if msg.suggestion:
                    md += f"  - *Suggestion*: {msg.suggestion}\n"
            md += "\n"

        if validation.infos:
            md += "### Information\n\n"
            for msg in validation.infos:
                md += f"- {msg.message}\n"
            md += "\n"

    md += "\n---\n"
    md += "*All dimensions in inches per ASME B1.1*\n"

    return md


def to_summary(thread: ThreadDimensions) -> str:
    """Convert ThreadDimensions to a short text summary."""
    lines = [
        f"═══ {_designation(thread)} ═══",
        f"Pitch:      {thread.pitch:.6f} in",
        f"Allowance:  {thread.allowance:.6f} in",
        "",
        f"Major dia:  {thread.major_diameter_max:.4f} / {thread.major_diameter_min:.4f} in",
        f"Pitch dia:  {thread.pitch_diameter_max:.4f} / {thread.pitch_diameter_min:.4f} in",
        f"Minor dia:  {thread.minor_diameter:.4f} in",
    ]
    return "\n".join(lines)
