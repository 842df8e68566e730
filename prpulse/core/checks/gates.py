import re
import shlex
from typing import Optional

from prpulse.core.exceptions import CheckError
from prpulse.core.ports.checks import CheckRunner
from prpulse.core.ports.logger import Logger
from prpulse.core.schema.report import CheckResult

LINT = "lint"
COVERAGE = "coverage"

_TOTAL_PATTERN = re.compile(r"^TOTAL\b.*?(\d+(?:\.\d+)?)%\s*$", re.MULTILINE)


def parse_total_coverage(output: str) -> Optional[float]:
    """Read the percentage from the ``TOTAL`` row of a coverage report."""
    matches = _TOTAL_PATTERN.findall(output)
    if not matches:
        return None
    return float(matches[-1])


class CheckGates:
    def __init__(
        self,
        runner: CheckRunner,
        logger: Logger,
        *,
        timeout: float,
    ) -> None:
        self._runner = runner
        self._logger = logger
        self._timeout = timeout

    def run_lint(self, command: str) -> CheckResult:
        try:
            outcome = self._runner.run(shlex.split(command), timeout=self._timeout)
        except CheckError as error:
            return self._failed(LINT, error)
        result = CheckResult(
            name=LINT,
            passed=outcome.returncode == 0,
            output=outcome.output,
        )
        self._log(result)
        return result

    def run_coverage(self, command: str, min_coverage: float) -> CheckResult:
        try:
            outcome = self._runner.run(shlex.split(command), timeout=self._timeout)
        except CheckError as error:
            return self._failed(COVERAGE, error)
        coverage = parse_total_coverage(outcome.output)
        passed = (
            outcome.returncode == 0
            and coverage is not None
            and coverage >= min_coverage
        )
        result = CheckResult(
            name=COVERAGE,
            passed=passed,
            output=outcome.output,
            coverage=coverage,
        )
        self._log(result, min_coverage=min_coverage)
        return result

    def _failed(self, name: str, error: CheckError) -> CheckResult:
        self._logger.warning(
            "Check could not run",
            check=name,
            command=error.command,
            error=error.message,
        )
        return CheckResult(name=name, passed=False, output=error.message)

    def _log(self, result: CheckResult, **context: object) -> None:
        self._logger.info(
            "Check finished",
            check=result.name,
            passed=result.passed,
            coverage=result.coverage,
            **context,
        )
