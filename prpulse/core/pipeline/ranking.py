from enum import Enum
from typing import Callable, Dict, List, Optional, Sequence

from prpulse.core.schema.report import PrSummary


class SortKey(str, Enum):
    LINES = "lines"
    IMPACT = "impact"
    REVIEWS = "reviews"


_SORT_VALUES: Dict[SortKey, Callable[[PrSummary], float]] = {
    SortKey.LINES: lambda summary: summary.aggregate.lines_changed,
    SortKey.IMPACT: lambda summary: summary.metrics.impact.score,
    SortKey.REVIEWS: lambda summary: len(summary.aggregate.reviews),
}


def rank(
    summaries: Sequence[PrSummary],
    sort_key: Optional[SortKey] = None,
    limit: Optional[int] = None,
) -> List[PrSummary]:
    """Order summaries descending by ``sort_key`` and keep the first ``limit``.

    ``sorted`` is stable, so ties keep their input order. Without a sort key
    the input order is kept as is.
    """
    ranked = list(summaries)
    if sort_key is not None:
        ranked = sorted(ranked, key=_SORT_VALUES[SortKey(sort_key)], reverse=True)
    if limit:
        ranked = ranked[:limit]
    return ranked
