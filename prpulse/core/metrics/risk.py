"""Regression risk as a noisy-OR over weighted binary factors.

Each factor is a ``(predicate, weight)`` pair evaluated against
:class:`RiskInputs`. Active weights combine as ``1 - prod(1 - w)`` so the
score stays in ``[0, 1]`` and every extra factor strictly raises it.

The core-folder and missing-tests factors need file paths. Nothing passes
paths into :func:`compute_regression_risk` yet, so they never fire.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple

from prpulse.core.schema.metrics import RegressionRisk

LARGE_DIFF_THRESHOLD = 500
MANY_FILES_THRESHOLD = 10

LARGE_DIFF_WEIGHT = 0.40
MANY_FILES_WEIGHT = 0.35
CORE_CHANGES_WEIGHT = 0.50
NO_TESTS_WEIGHT = 0.20

HIGH_RISK_THRESHOLD = 0.7
MEDIUM_RISK_THRESHOLD = 0.4

HIGH_RISK = "High regression risk"
MEDIUM_RISK = "Medium risk"
LOW_RISK = "Low risk"

CORE_FOLDERS = ("core/", "src/core/", "lib/")
TEST_MARKERS = ("test", "spec")


@dataclass(frozen=True, slots=True)
class RiskInputs:
    lines_changed: int
    files_changed: int
    file_paths: Optional[Tuple[str, ...]] = None


@dataclass(frozen=True, slots=True)
class RiskFactor:
    name: str
    weight: float
    predicate: Callable[[RiskInputs], bool]


def _touches_core_folder(inputs: RiskInputs) -> bool:
    if inputs.file_paths is None:
        return False
    return any(path.startswith(CORE_FOLDERS) for path in inputs.file_paths)


def _lacks_test_changes(inputs: RiskInputs) -> bool:
    if inputs.file_paths is None:
        return False
    return not any(
        marker in path.lower() for path in inputs.file_paths for marker in TEST_MARKERS
    )


DEFAULT_FACTORS: Tuple[RiskFactor, ...] = (
    RiskFactor(
        "large_diff",
        LARGE_DIFF_WEIGHT,
        lambda inputs: inputs.lines_changed > LARGE_DIFF_THRESHOLD,
    ),
    RiskFactor(
        "many_files",
        MANY_FILES_WEIGHT,
        lambda inputs: inputs.files_changed > MANY_FILES_THRESHOLD,
    ),
    RiskFactor("core_changes", CORE_CHANGES_WEIGHT, _touches_core_folder),
    RiskFactor("no_tests", NO_TESTS_WEIGHT, _lacks_test_changes),
)


def combine_factors(weights: Sequence[float]) -> float:
    product = 1.0
    for weight in weights:
        product *= 1 - weight
    return 1 - product


def categorize_risk(score: float) -> str:
    if score > HIGH_RISK_THRESHOLD:
        return HIGH_RISK
    if score > MEDIUM_RISK_THRESHOLD:
        return MEDIUM_RISK
    return LOW_RISK


def assess_risk(
    inputs: RiskInputs,
    factors: Sequence[RiskFactor] = DEFAULT_FACTORS,
) -> RegressionRisk:
    weights = [factor.weight for factor in factors if factor.predicate(inputs)]
    score = combine_factors(weights)
    return RegressionRisk(score=score, category=categorize_risk(score))


def compute_regression_risk(
    additions: Optional[int] = None,
    deletions: Optional[int] = None,
    changed_files: Optional[int] = None,
) -> RegressionRisk:
    inputs = RiskInputs(
        lines_changed=(additions or 0) + (deletions or 0),
        files_changed=changed_files or 0,
    )
    return assess_risk(inputs)
