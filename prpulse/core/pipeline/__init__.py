from prpulse.core.pipeline.aggregator import aggregate_events
from prpulse.core.pipeline.enricher import PrEnricher, first_line
from prpulse.core.pipeline.events import EventsPipeline, summarize, summarize_all
from prpulse.core.pipeline.ranking import SortKey, rank

__all__ = [
    "aggregate_events",
    "PrEnricher",
    "first_line",
    "EventsPipeline",
    "summarize",
    "summarize_all",
    "SortKey",
    "rank",
]
