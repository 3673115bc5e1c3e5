# ==============================================
# TOPIC 2: ANALYTICS
# ==============================================
#
# This package computes aggregate views over canonical record
# lists. Every function is pure: record list in, fresh view out.
#
# Modules:
# --------
# - views.py      → Data classes for every view (to_dict() for reports)
# - stats.py      → Percentages, summaries, percentiles, Pearson, buckets
# - candidate.py  → Funnel, qualification gate, scores, geography, risk
# - customer.py   → Sentiment, referrals, patient problems, service hours
# - form.py       → Applicant qualification and compliance breakdowns
#
# ==============================================

from . import candidate, customer, form, stats
from .views import (
    AverageScores,
    CategoryCount,
    ClientTypeScores,
    ComplianceCredential,
    DateCount,
    DementiaShare,
    FunnelStage,
    GeographicCount,
    QualificationBreakdown,
    QualificationStatus,
    ReferralConversion,
    ReferralSentiment,
    RiskItem,
    RiskStatus,
    ScoreBucket,
    ScoreCorrelation,
    ScoreDistribution,
    ServiceHoursSummary,
    Severity,
    StatisticalSummary,
    TimeSeriesPoint,
)

__all__ = [
    "candidate",
    "customer",
    "form",
    "stats",
    "AverageScores",
    "CategoryCount",
    "ClientTypeScores",
    "ComplianceCredential",
    "DateCount",
    "DementiaShare",
    "FunnelStage",
    "GeographicCount",
    "QualificationBreakdown",
    "QualificationStatus",
    "ReferralConversion",
    "ReferralSentiment",
    "RiskItem",
    "RiskStatus",
    "ScoreBucket",
    "ScoreCorrelation",
    "ScoreDistribution",
    "ServiceHoursSummary",
    "Severity",
    "StatisticalSummary",
    "TimeSeriesPoint",
]
