# ==============================================
# Views (Data Classes)
# ==============================================
#
# PURPOSE:
#   Data classes that represent the OUTPUT of the analytics
#   functions. Every function in candidate.py, customer.py and
#   form.py returns one of these (or a list of them).
#
# WHY THIS FILE EXISTS:
#   Separating result shapes from the aggregation logic keeps the
#   analytics modules small, and gives report.py one place to
#   serialize from (to_dict()).
#
# ENUMS:
# ------
# - Severity(Enum): HIGH, MEDIUM, LOW
# - RiskStatus(Enum): MISSING, FAILED, ISSUE
#
# CLASSES:
# --------
# - FunnelStage, QualificationStatus, QualificationBreakdown
# - ScoreBucket, ScoreDistribution, StatisticalSummary, ScoreCorrelation
# - AverageScores, ClientTypeScores
# - GeographicCount, TimeSeriesPoint, DateCount
# - RiskItem, ComplianceCredential
# - CategoryCount                 → generic category/count/percentage row
# - ServiceHoursSummary, ReferralConversion, DementiaShare, ReferralSentiment
#
# ==============================================

from enum import Enum
from dataclasses import dataclass, asdict, field
from typing import Any, Dict, Optional, Tuple


class Severity(Enum):
    """How serious a risk category is."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class RiskStatus(Enum):
    """Why a candidate falls into a risk category."""
    MISSING = "missing"
    FAILED = "failed"
    ISSUE = "issue"


def _view_dict_factory(items) -> Dict[str, Any]:
    result = {}
    for key, value in items:
        if isinstance(value, Enum):
            value = value.value
        elif isinstance(value, tuple):
            value = list(value)
        result[key] = value
    return result


class ViewMixin:
    def to_dict(self) -> Dict[str, Any]:
        """Serialize the view to a JSON-friendly dictionary."""
        return asdict(self, dict_factory=_view_dict_factory)


@dataclass(frozen=True)
class FunnelStage(ViewMixin):
    """One step of the recruitment funnel."""
    stage: str
    count: int
    percentage: float  # of the first stage
    drop_off_rate: Optional[float] = None  # vs. the preceding stage; None for the first stage


@dataclass(frozen=True)
class QualificationStatus(ViewMixin):
    """Gate outcome for a population, plus how many fail each criterion."""
    qualified: int
    not_qualified: int
    qualified_percentage: float
    missing_criteria: Dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class QualificationBreakdown(ViewMixin):
    """Yes / no / unknown split of one qualification field."""
    name: str
    qualified: int
    not_qualified: int
    missing: int
    total: int


@dataclass(frozen=True)
class ScoreBucket(ViewMixin):
    score_range: str
    count: int
    percentage: float


@dataclass(frozen=True)
class ScoreDistribution(ViewMixin):
    """Bucketed scores per dimension and for the per-record overall score."""
    experience: Tuple[ScoreBucket, ...]
    compassion: Tuple[ScoreBucket, ...]
    safety: Tuple[ScoreBucket, ...]
    professionalism: Tuple[ScoreBucket, ...]
    overall: Tuple[ScoreBucket, ...]
    missing: Dict[str, int]
    overall_missing: int


@dataclass(frozen=True)
class StatisticalSummary(ViewMixin):
    metric: str
    count: int
    mean: float
    std: float
    min: float
    q25: float
    median: float
    q75: float
    max: float


@dataclass(frozen=True)
class ScoreCorrelation(ViewMixin):
    score1: str
    score2: str
    correlation: float
    pair_count: int


@dataclass(frozen=True)
class AverageScores(ViewMixin):
    experience: float
    compassion: float
    safety: float
    professionalism: float
    overall: float


@dataclass(frozen=True)
class ClientTypeScores(ViewMixin):
    client_type: str
    count: int
    average_experience: float
    average_compassion: float
    average_safety: float
    average_professionalism: float
    average_overall: float


@dataclass(frozen=True)
class GeographicCount(ViewMixin):
    state: str
    count: int
    percentage: float


@dataclass(frozen=True)
class TimeSeriesPoint(ViewMixin):
    date: str  # ISO "YYYY-MM-DD" or "Unknown"
    interviews: int
    passed: int
    pass_rate: float


@dataclass(frozen=True)
class DateCount(ViewMixin):
    date: str
    count: int


@dataclass(frozen=True)
class RiskItem(ViewMixin):
    category: str
    count: int
    percentage: float
    severity: Severity
    status: RiskStatus


@dataclass(frozen=True)
class ComplianceCredential(ViewMixin):
    credential: str
    has_credential: int
    missing_credential: int
    failed_check: int
    total: int


@dataclass(frozen=True)
class CategoryCount(ViewMixin):
    category: str
    count: int
    percentage: float


@dataclass(frozen=True)
class ServiceHoursSummary(ViewMixin):
    count: int
    mean: float
    median: float
    min: int
    max: int


@dataclass(frozen=True)
class ReferralConversion(ViewMixin):
    total_inquiries: int
    with_full_contact: int
    conversion_rate: float


@dataclass(frozen=True)
class DementiaShare(ViewMixin):
    total: int
    with_dementia: int
    percentage: float


@dataclass(frozen=True)
class ReferralSentiment(ViewMixin):
    referral: str
    positive: int = 0
    neutral: int = 0
    negative: int = 0
    no_experience: int = 0

    @property
    def total(self) -> int:
        return self.positive + self.neutral + self.negative + self.no_experience
