from typing import Optional

from prpulse.core.schema.metrics import ImpactScore

ADDITION_WEIGHT = 0.5
DELETION_WEIGHT = 0.25
CHANGED_FILE_WEIGHT = 10
COMMIT_WEIGHT = 5
REVIEW_WEIGHT = 8

SMALL_THRESHOLD = 200
MEDIUM_THRESHOLD = 800

SMALL_PR = "Small PR"
MEDIUM_PR = "Medium PR"
LARGE_PR = "Large / High-risk PR"


def compute_impact_score(
    additions: Optional[int] = None,
    deletions: Optional[int] = None,
    changed_files: Optional[int] = None,
    commit_count: Optional[int] = None,
    review_count: Optional[int] = None,
) -> ImpactScore:
    """Weighted size/activity score; absent inputs count as zero."""
    score = (
        (additions or 0) * ADDITION_WEIGHT
        + (deletions or 0) * DELETION_WEIGHT
        + (changed_files or 0) * CHANGED_FILE_WEIGHT
        + (commit_count or 0) * COMMIT_WEIGHT
        + (review_count or 0) * REVIEW_WEIGHT
    )
    if score < SMALL_THRESHOLD:
        return ImpactScore(score=score, category=SMALL_PR)
    if score < MEDIUM_THRESHOLD:
        return ImpactScore(score=score, category=MEDIUM_PR)
    return ImpactScore(score=score, category=LARGE_PR)
