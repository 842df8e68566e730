from concurrent.futures import ThreadPoolExecutor
from typing import List, Mapping

from prpulse.core.exceptions import SourceError
from prpulse.core.ports.github import GitHubSource
from prpulse.core.ports.logger import Logger
from prpulse.core.schema.pr import PrAggregate

DEFAULT_WORKERS = 4


def first_line(message: str) -> str:
    return message.split("\n", 1)[0]


class PrEnricher:
    """Fills fields missing from event payloads with follow-up fetches.

    Each aggregate is handled on its own: a failed fetch is logged and the
    aggregate keeps whatever data it already had. Fields that are already
    present are never fetched again.
    """

    def __init__(
        self,
        source: GitHubSource,
        logger: Logger,
        *,
        parallel: bool = False,
        max_workers: int = DEFAULT_WORKERS,
    ) -> None:
        self._source = source
        self._logger = logger
        self._parallel = parallel
        self._max_workers = max_workers

    def enrich(self, aggregates: Mapping[str, PrAggregate]) -> None:
        entries: List[PrAggregate] = list(aggregates.values())
        if self._parallel and len(entries) > 1:
            with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
                list(executor.map(self.enrich_one, entries))
        else:
            for aggregate in entries:
                self.enrich_one(aggregate)
        self._logger.debug("Enrichment complete", aggregates=len(entries))

    def enrich_one(self, aggregate: PrAggregate) -> None:
        self._fill_size(aggregate)
        self._fill_commit_messages(aggregate)

    def _fill_size(self, aggregate: PrAggregate) -> None:
        snapshot = aggregate.snapshot
        if snapshot.has_size:
            return
        try:
            fetched = self._source.get_pull_request(aggregate.repo_name, snapshot.number)
        except SourceError as error:
            self._logger.warning(
                "Could not fetch full PR data",
                pr_key=aggregate.key,
                error=str(error),
            )
            return
        aggregate.snapshot = snapshot.merged_with(fetched)

    def _fill_commit_messages(self, aggregate: PrAggregate) -> None:
        commits_url = aggregate.snapshot.commits_url
        if aggregate.commit_messages is not None or not commits_url:
            return
        try:
            messages = self._source.list_commit_messages(commits_url)
        except SourceError as error:
            self._logger.warning(
                "Could not fetch commits",
                pr_key=aggregate.key,
                error=str(error),
            )
            aggregate.commit_messages = []
            return
        aggregate.commit_messages = [first_line(message) for message in messages]
