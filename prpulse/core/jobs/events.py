from typing import List, Optional

from prpulse.core.jobs.base import BaseJob
from prpulse.core.pipeline.events import EventsPipeline
from prpulse.core.pipeline.ranking import SortKey
from prpulse.core.ports.display import Display
from prpulse.core.ports.github import GitHubSource
from prpulse.core.ports.logger import Logger

NO_EVENTS_MESSAGE = "No events found for this user."
NO_MATCHES_MESSAGE = "No matching events found (events may be of types not handled)."
SUMMARY_SEPARATOR = "\n\n"


class EventsJob(BaseJob[List[str]]):
    """Report on the pull requests a user recently opened or reviewed."""

    def __init__(
        self,
        logger: Logger,
        source: GitHubSource,
        pipeline: EventsPipeline,
        display: Display,
        *,
        username: str,
        sort_key: Optional[SortKey] = None,
        limit: Optional[int] = None,
    ) -> None:
        super().__init__(logger)
        self._source = source
        self._pipeline = pipeline
        self._display = display
        self._username = username
        self._sort_key = sort_key
        self._limit = limit

    def execute(self) -> List[str]:
        with self._display.status("Fetching events"):
            events = self._source.list_user_events(self._username)
        self._logger.info("Fetched events", user=self._username, count=len(events))

        if not events:
            self._display.emit(NO_EVENTS_MESSAGE)
            return []

        with self._display.status("Processing events"):
            summaries = self._pipeline.run(events, self._sort_key, self._limit)

        if not summaries:
            self._display.emit(NO_MATCHES_MESSAGE)
        else:
            self._display.emit(SUMMARY_SEPARATOR.join(summaries))
        return summaries
