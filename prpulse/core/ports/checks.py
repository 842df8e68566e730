from typing import Protocol, Sequence, runtime_checkable

from prpulse.core.schema.report import CommandResult


@runtime_checkable
class CheckRunner(Protocol):
    def run(self, command: Sequence[str], *, timeout: float) -> CommandResult:
        ...
