# ==============================================
# Yes / No / Unknown
# ==============================================
#
# PURPOSE:
#   Three-valued classification of free-text answers. Every
#   qualification, compliance and risk calculation goes through
#   normalize_yes_no() so "Y", "passed", "TRUE" and "1" all count
#   the same way.
#
# ENUMS:
# ------
# - YesNo(Enum): YES, NO, UNKNOWN
#     UNKNOWN covers empty, missing and unrecognized answers and is
#     always kept apart from NO.
#
# CLASSES:
# --------
# - YesNoVocabulary (dataclass)
#     yes_words / no_words matched case-insensitively after trimming.
#
#     CANDIDATE_VOCABULARY  → interview evaluations (accepts pass/fail wording)
#     FORM_VOCABULARY       → web-form answers (plain yes/no/true/false/1/0)
#
# ==============================================

from enum import Enum
from dataclasses import dataclass
from typing import FrozenSet, Optional


class YesNo(Enum):
    """Normalized answer to a yes/no question."""
    YES = "yes"
    NO = "no"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class YesNoVocabulary:
    """Words recognized as an affirmative or negative answer."""
    yes_words: FrozenSet[str]
    no_words: FrozenSet[str]


CANDIDATE_VOCABULARY = YesNoVocabulary(
    yes_words=frozenset({"yes", "y", "pass", "passed", "completed", "true", "1"}),
    no_words=frozenset({"no", "n", "fail", "failed", "false", "0"}),
)

FORM_VOCABULARY = YesNoVocabulary(
    yes_words=frozenset({"yes", "y", "true", "1"}),
    no_words=frozenset({"no", "n", "false", "0"}),
)


def normalize_yes_no(
    value: Optional[str],
    vocabulary: YesNoVocabulary = CANDIDATE_VOCABULARY
) -> YesNo:
    """
    Classify a raw answer as YES, NO or UNKNOWN.

    Args:
        value: Raw answer text (may be None)
        vocabulary: Accepted words; candidate wording by default

    Returns:
        The normalized YesNo value
    """
    if not value:
        return YesNo.UNKNOWN

    normalized = value.strip().lower()
    if normalized in vocabulary.yes_words:
        return YesNo.YES
    if normalized in vocabulary.no_words:
        return YesNo.NO
    return YesNo.UNKNOWN
