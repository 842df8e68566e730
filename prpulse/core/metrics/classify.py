from typing import Iterable, Optional, Tuple

BUG_FIX_PR = "Bug Fix PR"
REFACTOR_PR = "Refactor PR"
DOCUMENTATION_PR = "Documentation PR"
FEATURE_PR = "Feature PR"

# Checked in order; the first group with a matching keyword wins.
TYPE_KEYWORDS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    (BUG_FIX_PR, ("fix", "bug", "hotfix")),
    (REFACTOR_PR, ("refactor", "cleanup")),
    (DOCUMENTATION_PR, ("docs", "readme")),
    (FEATURE_PR, ("feat", "feature", "add", "implement")),
)


def classify_type(commit_messages: Optional[Iterable[str]]) -> Optional[str]:
    text = " ".join(commit_messages or ()).lower()
    for label, keywords in TYPE_KEYWORDS:
        if any(keyword in text for keyword in keywords):
            return label
    return None
