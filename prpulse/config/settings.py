import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

DEFAULT_LINT_COMMAND = "ruff check ."
DEFAULT_COVERAGE_COMMAND = "pytest --cov --cov-report=term"


@dataclass(frozen=True, slots=True)
class GitHubSettings:
    token: Optional[str]
    repository: Optional[str]


@dataclass(frozen=True, slots=True)
class LoggingSettings:
    backend: str
    name: str
    level: str
    logfire_token: Optional[str]


@dataclass(frozen=True, slots=True)
class CheckSettings:
    lint_command: str
    coverage_command: str
    min_coverage: float
    timeout: float


@dataclass(frozen=True, slots=True)
class PipelineSettings:
    parallel_enrichment: bool
    enrichment_workers: int


@dataclass(frozen=True, slots=True)
class Settings:
    github: GitHubSettings
    logging: LoggingSettings
    checks: CheckSettings
    pipeline: PipelineSettings


def load_settings(env_file: Optional[str] = None) -> Settings:
    load_dotenv(env_file or find_dotenv(usecwd=True))

    return Settings(
        github=GitHubSettings(
            token=_env_or_default("GITHUB_TOKEN"),
            repository=_env_or_default("GITHUB_REPOSITORY"),
        ),
        logging=LoggingSettings(
            backend=_env_or_default("PRPULSE_LOGGER_BACKEND", "console").lower(),
            name=_env_or_default("PRPULSE_LOGGER_NAME", "prpulse"),
            level=_env_or_default("PRPULSE_LOG_LEVEL", "INFO").upper(),
            logfire_token=_env_or_default("PRPULSE_LOGFIRE_TOKEN"),
        ),
        checks=CheckSettings(
            lint_command=_env_or_default("PRPULSE_LINT_COMMAND", DEFAULT_LINT_COMMAND),
            coverage_command=_env_or_default(
                "PRPULSE_COVERAGE_COMMAND", DEFAULT_COVERAGE_COMMAND
            ),
            min_coverage=_env_float("PRPULSE_MIN_COVERAGE", 80.0),
            timeout=_env_float("PRPULSE_CHECK_TIMEOUT", 600.0),
        ),
        pipeline=PipelineSettings(
            parallel_enrichment=_env_bool("PRPULSE_PARALLEL_ENRICHMENT", False),
            enrichment_workers=_env_int("PRPULSE_ENRICHMENT_WORKERS", 4),
        ),
    )


def _env_or_default(name: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(name)
    if not value:
        return default
    return value


def _env_int(name: str, default: int) -> int:
    return int(_env_or_default(name) or default)


def _env_float(name: str, default: float) -> float:
    return float(_env_or_default(name) or default)


def _env_bool(name: str, default: bool) -> bool:
    value = _env_or_default(name)
    if value is None:
        return default
    return value.strip().upper() in ("TRUE", "1", "YES")
