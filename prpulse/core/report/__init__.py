from prpulse.core.report.comment import COMMENT_MARKER, format_review_comment
from prpulse.core.report.summary import format_summary

__all__ = [
    "format_summary",
    "format_review_comment",
    "COMMENT_MARKER",
]
