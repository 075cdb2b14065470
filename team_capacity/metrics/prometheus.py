# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Prometheus metrics — single source of truth for all metric objects.
Updated by the service facade only; the pure calculators never touch them.
"""

from prometheus_client import Counter, Histogram

AVAILABILITY_CALCULATIONS = Counter(
    "capacity_availability_calculations_total",
    "Total availability calculations performed",
    ["kind"],
)
VALIDATIONS_TOTAL = Counter(
    "capacity_validations_total",
    "Total validations performed",
    ["kind", "result"],
)
VALIDATION_WARNINGS = Counter(
    "capacity_validation_warnings_total",
    "Total non-blocking warnings raised by validations",
    ["kind"],
)
CALCULATION_LATENCY = Histogram(
    "capacity_calculation_duration_seconds",
    "Time spent in capacity calculations",
    ["operation"],
)
