from prpulse.infra.checks.subprocess_runner import SubprocessCheckRunner

__all__ = ["SubprocessCheckRunner"]
