# ==============================================
# Shared Statistics
# ==============================================
#
# PURPOSE:
#   Small numeric helpers shared by the candidate, customer and
#   form analytics. Each one is total: empty input gives zeros,
#   never NaN and never an exception.
#
# FUNCTIONS:
# ----------
# - percentage(count, total) -> float
# - mean(values) -> float
# - population_std(values) -> float
# - percentile(sorted_values, p) -> float
# - summarize(metric, values) -> StatisticalSummary
# - pearson(xs, ys) -> float
# - parse_score(value) -> float | None
# - bucket_scores(values) -> tuple[ScoreBucket, ...]
# - rank_counts(counts, total, limit) -> list[CategoryCount]
#
# ==============================================

import math
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from care_analytics.normalization import ValueParser
from .views import CategoryCount, ScoreBucket, StatisticalSummary

SCORE_MIN = 0.0
SCORE_MAX = 5.0

# (label, lower bound, upper bound); the last bucket is closed on both ends
SCORE_RANGES: Tuple[Tuple[str, float, float], ...] = (
    ("0-1", 0.0, 1.0),
    ("1-2", 1.0, 2.0),
    ("2-3", 2.0, 3.0),
    ("3-4", 3.0, 4.0),
    ("4-5", 4.0, 5.0),
)


def percentage(count: int, total: int) -> float:
    """count / total as a percentage, 0 when total is 0."""
    if total <= 0:
        return 0.0
    return (count / total) * 100


def mean(values: Sequence[float]) -> float:
    if not values:
        return 0.0
    return sum(values) / len(values)


def population_std(values: Sequence[float]) -> float:
    """Standard deviation dividing by n, not n - 1."""
    if not values:
        return 0.0
    avg = mean(values)
    variance = sum((value - avg) ** 2 for value in values) / len(values)
    return math.sqrt(variance)


def percentile(sorted_values: Sequence[float], p: float) -> float:
    """
    Linear-interpolated percentile over already sorted values.

    Index = p/100 * (n - 1), interpolating between floor and ceil.
    """
    if not sorted_values:
        return 0.0
    index = (p / 100) * (len(sorted_values) - 1)
    lower = math.floor(index)
    upper = math.ceil(index)
    low_value = sorted_values[lower]
    high_value = sorted_values[upper]
    value = low_value + (high_value - low_value) * (index - lower)
    return min(max(value, low_value), high_value)


def summarize(metric: str, values: Iterable[float]) -> StatisticalSummary:
    """Count, mean, population std, min, quartiles and max of the given values."""
    ordered = sorted(values)
    if not ordered:
        return StatisticalSummary(
            metric=metric, count=0, mean=0.0, std=0.0,
            min=0.0, q25=0.0, median=0.0, q75=0.0, max=0.0,
        )
    return StatisticalSummary(
        metric=metric,
        count=len(ordered),
        mean=mean(ordered),
        std=population_std(ordered),
        min=ordered[0],
        q25=percentile(ordered, 25),
        median=percentile(ordered, 50),
        q75=percentile(ordered, 75),
        max=ordered[-1],
    )


def pearson(xs: Sequence[float], ys: Sequence[float]) -> float:
    """
    Pearson correlation of two equally long series.

    Returns 0 for empty or mismatched input and when either series
    has zero variance.
    """
    n = len(xs)
    if n == 0 or n != len(ys):
        return 0.0

    mean_x = sum(xs) / n
    mean_y = sum(ys) / n
    dx = [x - mean_x for x in xs]
    dy = [y - mean_y for y in ys]

    sxx = sum(d * d for d in dx)
    syy = sum(d * d for d in dy)
    if sxx == 0 or syy == 0:
        return 0.0

    sxy = sum(a * b for a, b in zip(dx, dy))
    correlation = sxy / math.sqrt(sxx * syy)
    return max(-1.0, min(1.0, correlation))


def parse_score(value: Optional[str]) -> Optional[float]:
    """
    Parse a 0-5 quality score.

    Blank, unparseable and out-of-range values are all treated as missing.
    """
    score = ValueParser.parse_number(value)
    if score is None or not (SCORE_MIN <= score <= SCORE_MAX):
        return None
    return score


def bucket_index(score: float) -> Optional[int]:
    for index, (_, low, high) in enumerate(SCORE_RANGES):
        is_last = index == len(SCORE_RANGES) - 1
        if low <= score and (score <= high if is_last else score < high):
            return index
    return None


def bucket_scores(values: Sequence[float]) -> Tuple[ScoreBucket, ...]:
    """Count values per score range; percentages are of len(values)."""
    counts = [0] * len(SCORE_RANGES)
    for value in values:
        index = bucket_index(value)
        if index is not None:
            counts[index] += 1

    return tuple(
        ScoreBucket(score_range=label, count=count, percentage=percentage(count, len(values)))
        for (label, _, _), count in zip(SCORE_RANGES, counts)
    )


def rank_counts(counts: Dict[str, int], total: int, limit: Optional[int] = None) -> List[CategoryCount]:
    """
    Turn category counts into CategoryCount rows sorted by count descending.

    Ties keep first-seen order. `limit` truncates after sorting.
    """
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    if limit is not None:
        ranked = ranked[:limit]
    return [
        CategoryCount(category=category, count=count, percentage=percentage(count, total))
        for category, count in ranked
    ]
