"""
Smithy - Layout geometry and UTS thread dimensioning for CAD/CAM tooling.

Example:
    >>> from smithy import bolt_circle, uts_external_thread, round_to
    >>>
    >>> # Six holes on a 4" bolt circle
    >>> holes = list(bolt_circle(4.0, 6, start_angle=30.0))
    >>>
    >>> # 1/4-20 UNC-2A limits of size
    >>> thread = uts_external_thread(0.25, 20, "2A")
    >>> round_to(thread.major_diameter_max, 4)
    0.2488

Note: All imports are lazy-loaded. The layout generators can be imported
without loading the thread calculator.
"""

__version__ = "0.1.0"

# Define which names come from which submodule
# All imports are lazy to minimize startup time

_ENUMS = {"ThreadClass", "ThreadSeries", "PitchSeries"}

_MODELS = {"Coordinate", "ThreadDimensions"}

_UTIL = {"round_to"}

_LAYOUT = {"bolt_circle", "linear_spacing", "grid"}

_CALCULATOR = {
    "STANDARD_THREADS",
    "uts_allowance",
    "uts_external_thread",
    "uts_external_thread_from_size",
    "nearest_standard_size",
    "standard_tpi",
    "is_standard_thread",
    "validate_thread",
    "Severity",
    "ValidationResult",
}

_SUBMODULES = (
    ("enums", _ENUMS),
    ("models", _MODELS),
    ("util", _UTIL),
    ("layout", _LAYOUT),
    ("calculator", _CALCULATOR),
)

# Cache for lazy-loaded modules
_modules = {}


def __getattr__(name):
    """Lazy load submodules when their attributes are accessed."""
    for module_name, names in _SUBMODULES:
        if name in names:
            if module_name not in _modules:
                from importlib import import_module
                _modules[module_name] = import_module(f".{module_name}", __name__)
            return getattr(_modules[module_name], name)

    raise AttributeError(f"module 'smithy' has no attribute {name!r}")


__all__ = [
    # Version
    "__version__",

    # Enums
    "ThreadClass",
    "ThreadSeries",
    "PitchSeries",

    # Models
    "Coordinate",
    "ThreadDimensions",

    # Rounding
    "round_to",

    # Layout generators
    "bolt_circle",
    "linear_spacing",
    "grid",

    # Thread calculator
    "STANDARD_THREADS",
    "uts_allowance",
    "uts_external_thread",
    "uts_external_thread_from_size",
    "nearest_standard_size",
    "standard_tpi",
    "is_standard_thread",
    "validate_thread",
    "Severity",
    "ValidationResult",
]
