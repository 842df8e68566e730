from prpulse.core.checks.gates import COVERAGE, LINT, CheckGates, parse_total_coverage

__all__ = [
    "CheckGates",
    "parse_total_coverage",
    "LINT",
    "COVERAGE",
]
