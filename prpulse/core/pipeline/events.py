from typing import Iterable, List, Mapping, Optional

from prpulse.core.metrics import compute_metrics
from prpulse.core.pipeline.aggregator import aggregate_events
from prpulse.core.pipeline.enricher import PrEnricher
from prpulse.core.pipeline.ranking import SortKey, rank
from prpulse.core.ports.logger import Logger
from prpulse.core.report import format_summary
from prpulse.core.schema.events import ActivityEvent
from prpulse.core.schema.pr import PrAggregate
from prpulse.core.schema.report import PrSummary


def summarize(aggregate: PrAggregate) -> PrSummary:
    metrics = compute_metrics(aggregate)
    return PrSummary(
        aggregate=aggregate,
        metrics=metrics,
        text=format_summary(aggregate, metrics),
    )


def summarize_all(aggregates: Mapping[str, PrAggregate]) -> List[PrSummary]:
    return [summarize(aggregate) for aggregate in aggregates.values()]


class EventsPipeline:
    """aggregate -> enrich -> score and format -> rank."""

    def __init__(self, enricher: PrEnricher, logger: Logger) -> None:
        self._enricher = enricher
        self._logger = logger

    def run(
        self,
        events: Iterable[ActivityEvent],
        sort_key: Optional[SortKey] = None,
        limit: Optional[int] = None,
    ) -> List[str]:
        aggregates = aggregate_events(events)
        self._logger.info("Aggregated pull requests", count=len(aggregates))

        self._enricher.enrich(aggregates)

        summaries = rank(summarize_all(aggregates), sort_key, limit)
        self._logger.info(
            "Ranked summaries",
            sort=SortKey(sort_key).value if sort_key else None,
            limit=limit,
            count=len(summaries),
        )
        return [summary.text for summary in summaries]
