"""Command line entry point.

    prpulse events <username> [limit=N] [sort=lines|impact|reviews]
    prpulse review <pr-number> [--lint] [--coverage] [--dry-run]

Exit code 0 on success, 1 on any fatal error.
"""

import argparse
import re
import sys
from typing import List, Optional, Sequence, Tuple

from prpulse.config import LoggingSettings, Settings, load_settings
from prpulse.core.checks import CheckGates
from prpulse.core.exceptions import ConfigurationError, PrPulseError
from prpulse.core.jobs import EventsJob, ReviewJob, ReviewOptions
from prpulse.core.pipeline import EventsPipeline, PrEnricher, SortKey
from prpulse.core.ports import CheckRunner, Display, GitHubSource, Logger
from prpulse.infra import (
    ConsoleLogger,
    GitHubActivitySource,
    GitHubClient,
    LogfireLogger,
    RichDisplay,
    SubprocessCheckRunner,
    configure_logfire,
)

EXIT_OK = 0
EXIT_FATAL = 1

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_REPOSITORY_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+/[A-Za-z0-9_.-]+$")


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise ConfigurationError(f"{self.prog}: {message}")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="prpulse",
        description="Summarise GitHub pull request activity.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    events = commands.add_parser(
        "events", help="Summarise the pull requests in a user's public activity"
    )
    events.add_argument("username")
    events.add_argument(
        "options",
        nargs="*",
        metavar="key=value",
        help="limit=N and/or sort=lines|impact|reviews",
    )

    review = commands.add_parser(
        "review", help="Post a review comment on a pull request in GITHUB_REPOSITORY"
    )
    review.add_argument("pr_number", type=int)
    review.add_argument("--lint", action="store_true", help="Run the lint gate")
    review.add_argument("--coverage", action="store_true", help="Run the coverage gate")
    review.add_argument(
        "--min-coverage",
        type=float,
        default=None,
        help="Minimum total coverage percent (overrides PRPULSE_MIN_COVERAGE)",
    )
    review.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the comment instead of posting it",
    )
    return parser


def parse_event_options(options: Sequence[str]) -> Tuple[Optional[SortKey], Optional[int]]:
    sort_key: Optional[SortKey] = None
    limit: Optional[int] = None
    for option in options:
        key, sep, value = option.partition("=")
        if not sep:
            raise ConfigurationError(f"Expected key=value, got {option!r}")
        if key == "limit":
            limit = _parse_limit(value)
        elif key == "sort":
            try:
                sort_key = SortKey(value)
            except ValueError as error:
                choices = ", ".join(item.value for item in SortKey)
                raise ConfigurationError(
                    f"Unknown sort {value!r} (expected one of: {choices})"
                ) from error
        else:
            raise ConfigurationError(f"Unknown option {key!r}")
    return sort_key, limit


def _parse_limit(value: str) -> int:
    try:
        limit = int(value)
    except ValueError as error:
        raise ConfigurationError(f"limit must be an integer, got {value!r}") from error
    if limit <= 0:
        raise ConfigurationError(f"limit must be positive, got {limit}")
    return limit


def parse_repository(value: Optional[str]) -> str:
    if not value:
        raise ConfigurationError("GITHUB_REPOSITORY is not set")
    if not _REPOSITORY_PATTERN.match(value):
        raise ConfigurationError(
            f"GITHUB_REPOSITORY must look like owner/name, got {value!r}"
        )
    return value


def build_logger(settings: LoggingSettings) -> Logger:
    if settings.level not in LOG_LEVELS:
        choices = ", ".join(LOG_LEVELS)
        raise ConfigurationError(
            f"Unknown log level {settings.level!r} (expected one of: {choices})"
        )
    if settings.backend == "console":
        return ConsoleLogger(settings.name, settings.level)
    if settings.backend == "logfire":
        if not settings.logfire_token:
            raise ConfigurationError(
                "Logfire backend selected but PRPULSE_LOGFIRE_TOKEN is not set"
            )
        configure_logfire(settings.logfire_token)
        return LogfireLogger(settings.name)
    raise ConfigurationError(f"Unknown logging backend {settings.backend}")


def run_events(
    args: argparse.Namespace,
    settings: Settings,
    logger: Logger,
    source: GitHubSource,
    display: Display,
) -> List[str]:
    sort_key, limit = parse_event_options(args.options)
    enricher = PrEnricher(
        source,
        logger,
        parallel=settings.pipeline.parallel_enrichment,
        max_workers=settings.pipeline.enrichment_workers,
    )
    job = EventsJob(
        logger,
        source,
        EventsPipeline(enricher, logger),
        display,
        username=args.username,
        sort_key=sort_key,
        limit=limit,
    )
    return job.run()


def run_review(
    args: argparse.Namespace,
    settings: Settings,
    logger: Logger,
    source: GitHubSource,
    display: Display,
    runner: Optional[CheckRunner] = None,
) -> str:
    repository = parse_repository(settings.github.repository)
    if args.pr_number <= 0:
        raise ConfigurationError(f"PR number must be positive, got {args.pr_number}")

    checks = settings.checks
    min_coverage = args.min_coverage if args.min_coverage is not None else checks.min_coverage
    gates = None
    if args.lint or args.coverage:
        gates = CheckGates(runner or SubprocessCheckRunner(), logger, timeout=checks.timeout)
    options = ReviewOptions(
        lint_command=checks.lint_command if args.lint else None,
        coverage_command=checks.coverage_command if args.coverage else None,
        min_coverage=min_coverage,
        dry_run=args.dry_run,
    )
    job = ReviewJob(
        logger,
        source,
        display,
        repository=repository,
        number=args.pr_number,
        gates=gates,
        options=options,
    )
    return job.run()


def _dispatch(
    args: argparse.Namespace,
    settings: Settings,
    logger: Logger,
    source: GitHubSource,
    display: Display,
    runner: Optional[CheckRunner],
) -> None:
    if args.command == "events":
        run_events(args, settings, logger, source, display)
    else:
        run_review(args, settings, logger, source, display, runner)


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    settings: Optional[Settings] = None,
    source: Optional[GitHubSource] = None,
    display: Optional[Display] = None,
    runner: Optional[CheckRunner] = None,
) -> int:
    logger: Logger = ConsoleLogger("prpulse")
    try:
        args = build_parser().parse_args(argv)
        settings = settings or load_settings()
        logger = build_logger(settings.logging)
        display = display or RichDisplay()

        token = settings.github.token
        if source is None and not token:
            raise ConfigurationError("GITHUB_TOKEN is not set")

        if source is not None:
            _dispatch(args, settings, logger, source, display, runner)
        else:
            with GitHubClient(token) as client:
                _dispatch(
                    args, settings, logger, GitHubActivitySource(client), display, runner
                )
    except PrPulseError as error:
        logger.error("Fatal error", error=error.message, error_type=type(error).__name__)
        return EXIT_FATAL
    return EXIT_OK


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
