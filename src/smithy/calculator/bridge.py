"""
JSON bridge for UI hosts.

Provides a single entry point for JSON-in / JSON-out calculator calls.
All inputs are validated via Pydantic models before processing.

Usage:
    from smithy.calculator.bridge import calculate
    result = json.loads(calculate('{"size": "1/4", "series": "UNC"}'))
"""

import json
import logging
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..enums import ThreadClass
from . import constants as c
from .core import uts_external_thread, uts_external_thread_from_size
from .output import to_json, to_markdown, to_summary
from .validation import validate_thread, validate_thread_inputs

logger = logging.getLogger(__name__)


# severity ("error" | "warning" | "info"), code, message, suggestion
ValidationMessageDict = Dict[str, Optional[str]]


# ============================================================================
# Input / Output Models
# ============================================================================

class ThreadInputs(BaseModel):
    """
    All calculator inputs.

    Either a standard size label (with series) or an explicit diameter and
    threads per inch. The size label wins when both are given.
    """
    model_config = ConfigDict(extra='ignore')

    size: Optional[str] = None  # e.g. "#10", "1/4"
    series: str = "UNC"  # "UNC" | "UNF" | "UNEF", only used with size
    diameter: Optional[float] = None
    threads_per_inch: Optional[float] = None
    thread_class: str = "2A"
    engagement_length: Optional[float] = None
    engagement_length_multiple: float = c.DEFAULT_ENGAGEMENT_MULTIPLE
    digits: Optional[int] = None  # Rounding for dimensions_json

    @field_validator('series', mode='before')
    @classmethod
    def normalize_series(cls, v):
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator('thread_class', mode='before')
    @classmethod
    def normalize_thread_class(cls, v):
        if isinstance(v, str):
            return ThreadClass.coerce(v).value
        return v


class ThreadOutput(BaseModel):
    """Result of calculate()."""
    model_config = ConfigDict(extra='ignore')

    success: bool
    error: Optional[str] = None

    dimensions_json: Optional[str] = None
    summary: Optional[str] = None
    markdown: Optional[str] = None

    valid: bool = True
    messages: List[ValidationMessageDict] = Field(default_factory=list)


# ============================================================================
# Main Entry Point
# ============================================================================

def calculate(input_json: str) -> str:
    """
    Single entry point for calculator operations from a UI host.

    Args:
        input_json: JSON string with ThreadInputs structure

    Returns:
        JSON string with ThreadOutput structure. Errors are reported with
        success=false rather than raised.
    """
    try:
        data = json.loads(input_json)
        inputs = ThreadInputs.model_validate(data)

        thread = _calculate_thread(inputs)
        validation = validate_thread(thread)

        output = ThreadOutput(
            success=True,
            dimensions_json=to_json(thread, digits=inputs.digits),
            summary=to_summary(thread),
            markdown=to_markdown(thread, validation),
            valid=validation.valid,
            messages=[
                {
                    'severity': m.severity.value,
                    'message': m.message,
                    'code': m.code,
                    'suggestion': m.suggestion
                }
                for m in validation.messages
            ],
        )
        return output.model_dump_json()

    except json.JSONDecodeError as e:
        logger.warning(f"Rejected calculator input: {e}")
        return ThreadOutput(
            success=False,
            error=f"Invalid JSON: {e}"
        ).model_dump_json()

    except Exception as e:
        logger.warning(f"Thread calculation failed: {e}")
        return ThreadOutput(
            success=False,
            error=str(e)
        ).model_dump_json()


def _calculate_thread(inputs: ThreadInputs):
    """Call the calculator for a size label or explicit diameter/TPI."""
    if inputs.size:
        return uts_external_thread_from_size(
            size=inputs.size,
            series=inputs.series,
            thread_class=inputs.thread_class,
            engagement_length_multiple=inputs.engagement_length_multiple,
            engagement_length=inputs.engagement_length
        )

    if inputs.diameter is None or inputs.threads_per_inch is None:
        raise ValueError("Either size, or diameter and threads_per_inch, are required")

    # Refuse inputs that would only produce a meaningless result
    checked = validate_thread_inputs(
        inputs.diameter, inputs.threads_per_inch, inputs.engagement_length
    )
    if not checked.valid:
        raise ValueError("; ".join(m.message for m in checked.errors))

    return uts_external_thread(
        diameter=inputs.diameter,
        threads_per_inch=inputs.threads_per_inch,
        thread_class=inputs.thread_class,
        engagement_length_multiple=inputs.engagement_length_multiple,
        engagement_length=inputs.engagement_length
    )
