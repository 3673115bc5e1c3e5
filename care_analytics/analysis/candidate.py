"""
Recruitment analytics over interview evaluations (CandidateRecord).

Every function takes the full candidate list and returns a freshly built
view; none of them keeps state between calls or raises on empty input.
"""
from collections import defaultdict
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from care_analytics.normalization import CandidateRecord, YesNo, ValueParser, normalize_yes_no
from .stats import bucket_scores, parse_score, pearson, percentage, rank_counts, summarize
from .views import (
    AverageScores,
    CategoryCount,
    ClientTypeScores,
    ComplianceCredential,
    FunnelStage,
    GeographicCount,
    QualificationBreakdown,
    QualificationStatus,
    RiskItem,
    RiskStatus,
    ScoreCorrelation,
    ScoreDistribution,
    Severity,
    StatisticalSummary,
    TimeSeriesPoint,
)

PASS = "PASS"
HANGUP = "HANGUP"
UNKNOWN = "Unknown"

# (key, record attribute, label)
SCORE_FIELDS: Tuple[Tuple[str, str, str], ...] = (
    ("experience", "experience_score", "Experience"),
    ("compassion", "compassion_score", "Compassion"),
    ("safety", "safety_score", "Safety"),
    ("professionalism", "professionalism_score", "Professionalism"),
)

# The four answers that must all be "yes" to move on to the next interview
GATE_FIELDS: Tuple[str, ...] = ("work_per_week", "can_travel", "one_year_experience", "pay_rate")

QUALIFICATION_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("Work Per Week (Required)", "work_per_week"),
    ("Can Travel (Required)", "can_travel"),
    ("1+ Year Experience (Required)", "one_year_experience"),
    ("Acceptable Pay Rate (Required)", "pay_rate"),
    ("Valid Driver's License", "valid_driver_license"),
    ("Reliable Transport", "reliable_transport"),
    ("Background Check", "background_check"),
    ("TB Test Negative", "tb_test_negative"),
    ("CPR Certificate", "cpr_certificate"),
    ("Dementia Care Experience", "dementia_client"),
)

CREDENTIAL_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("Background Check", "background_check"),
    ("TB Test", "tb_test_negative"),
    ("CPR Certificate", "cpr_certificate"),
    ("Valid Driver License", "valid_driver_license"),
)


def _answer(candidate: CandidateRecord, field_name: str) -> YesNo:
    return normalize_yes_no(getattr(candidate, field_name))


def _scores(candidates: Sequence[CandidateRecord], field_name: str) -> List[float]:
    parsed = (parse_score(getattr(c, field_name)) for c in candidates)
    return [score for score in parsed if score is not None]


def overall_score(candidate: CandidateRecord) -> Optional[float]:
    """Mean of whichever of the four sub-scores are present, or None if none are."""
    present = [parse_score(getattr(candidate, attr)) for _, attr, _ in SCORE_FIELDS]
    present = [score for score in present if score is not None]
    if not present:
        return None
    return sum(present) / len(present)


# ======================================
# Funnel & qualification
# ======================================

def is_qualified_for_next_interview(candidate: CandidateRecord) -> bool:
    """Strict AND: every gate answer must normalize to YES (UNKNOWN fails)."""
    return all(_answer(candidate, field_name) is YesNo.YES for field_name in GATE_FIELDS)


def recruitment_funnel(candidates: Sequence[CandidateRecord]) -> List[FunnelStage]:
    """
    Total → Attempted → Completed → Passed → Qualified for Next Interview.

    Percentages are of the total; drop-off rates are relative to the
    preceding stage (0 when that stage is empty).
    """
    total = len(candidates)
    attempted = sum(1 for c in candidates if c.result)
    completed = sum(1 for c in candidates if c.result and c.result != HANGUP)
    passed = sum(1 for c in candidates if c.result == PASS)
    qualified = sum(1 for c in candidates if c.result == PASS and is_qualified_for_next_interview(c))

    stages = [
        ("Total Applications", total),
        ("Interview Attempted", attempted),
        ("Completed Interview", completed),
        ("Passed Interview", passed),
        ("Qualified for Next Interview", qualified),
    ]

    funnel = [FunnelStage(stage=stages[0][0], count=total, percentage=100.0 if total else 0.0)]
    for (_, previous_count), (name, count) in zip(stages, stages[1:]):
        funnel.append(FunnelStage(
            stage=name,
            count=count,
            percentage=percentage(count, total),
            drop_off_rate=percentage(previous_count - count, previous_count),
        ))
    return funnel


def qualification_status(candidates: Sequence[CandidateRecord]) -> QualificationStatus:
    """Gate outcome among candidates who passed the interview."""
    passed = [c for c in candidates if c.result == PASS]
    qualified = sum(1 for c in passed if is_qualified_for_next_interview(c))

    missing_criteria = {
        field_name: sum(1 for c in passed if _answer(c, field_name) is not YesNo.YES)
        for field_name in GATE_FIELDS
    }

    return QualificationStatus(
        qualified=qualified,
        not_qualified=len(passed) - qualified,
        qualified_percentage=percentage(qualified, len(passed)),
        missing_criteria=missing_criteria,
    )


def qualification_breakdown(candidates: Sequence[CandidateRecord]) -> List[QualificationBreakdown]:
    """Yes / no / unknown split for every qualification and compliance answer."""
    breakdown = []
    for name, field_name in QUALIFICATION_FIELDS:
        answers = [_answer(c, field_name) for c in candidates]
        breakdown.append(QualificationBreakdown(
            name=name,
            qualified=answers.count(YesNo.YES),
            not_qualified=answers.count(YesNo.NO),
            missing=answers.count(YesNo.UNKNOWN),
            total=len(candidates),
        ))
    return breakdown


# ======================================
# Scores
# ======================================

def score_distribution(candidates: Sequence[CandidateRecord]) -> ScoreDistribution:
    """Five-bucket distribution per score dimension and for the overall score."""
    per_field = {key: bucket_scores(_scores(candidates, attr)) for key, attr, _ in SCORE_FIELDS}
    missing = {
        key: sum(1 for c in candidates if parse_score(getattr(c, attr)) is None)
        for key, attr, _ in SCORE_FIELDS
    }

    overall = [overall_score(c) for c in candidates]
    overall_present = [score for score in overall if score is not None]

    return ScoreDistribution(
        experience=per_field["experience"],
        compassion=per_field["compassion"],
        safety=per_field["safety"],
        professionalism=per_field["professionalism"],
        overall=bucket_scores(overall_present),
        missing=missing,
        overall_missing=len(overall) - len(overall_present),
    )


def statistical_summary(candidates: Sequence[CandidateRecord]) -> List[StatisticalSummary]:
    return [summarize(label, _scores(candidates, attr)) for _, attr, label in SCORE_FIELDS]


def score_correlations(candidates: Sequence[CandidateRecord]) -> List[ScoreCorrelation]:
    """
    Pearson correlation for every pair of score dimensions.

    Each pair only uses candidates that have both scores; pairs with no
    such candidate are left out.
    """
    correlations = []
    for i, (_, attr_a, label_a) in enumerate(SCORE_FIELDS):
        for _, attr_b, label_b in SCORE_FIELDS[i + 1:]:
            pairs = [(parse_score(getattr(c, attr_a)), parse_score(getattr(c, attr_b))) for c in candidates]
            pairs = [(a, b) for a, b in pairs if a is not None and b is not None]
            if not pairs:
                continue
            correlations.append(ScoreCorrelation(
                score1=label_a,
                score2=label_b,
                correlation=pearson([a for a, _ in pairs], [b for _, b in pairs]),
                pair_count=len(pairs),
            ))
    return correlations


def average_scores(candidates: Sequence[CandidateRecord]) -> AverageScores:
    """Mean of each score dimension; overall is the mean of the dimensions that have data."""
    averages = {}
    available = []
    for key, attr, _ in SCORE_FIELDS:
        scores = _scores(candidates, attr)
        averages[key] = sum(scores) / len(scores) if scores else 0.0
        if scores:
            available.append(averages[key])

    return AverageScores(
        overall=sum(available) / len(available) if available else 0.0,
        **averages,
    )


def scores_by_client_type(candidates: Sequence[CandidateRecord]) -> List[ClientTypeScores]:
    groups: Dict[str, List[CandidateRecord]] = defaultdict(list)
    for c in candidates:
        groups[c.client_type or UNKNOWN].append(c)

    rows = []
    for client_type, group in groups.items():
        averages = average_scores(group)
        rows.append(ClientTypeScores(
            client_type=client_type,
            count=len(group),
            average_experience=averages.experience,
            average_compassion=averages.compassion,
            average_safety=averages.safety,
            average_professionalism=averages.professionalism,
            average_overall=averages.overall,
        ))
    return sorted(rows, key=lambda row: row.count, reverse=True)


# ======================================
# Geography & time
# ======================================

def extract_state(location: Optional[str]) -> str:
    """
    Take the state from a "City, State" location.

    The last comma-separated token is the state; a location without a
    comma is returned whole; a blank location is "Unknown".
    """
    if not location or not location.strip():
        return UNKNOWN
    parts = [part.strip() for part in location.split(",")]
    if len(parts) >= 2:
        return parts[-1] or UNKNOWN
    return parts[0]


def geographic_distribution(candidates: Sequence[CandidateRecord], top_n: int = 15) -> List[GeographicCount]:
    counts: Dict[str, int] = defaultdict(int)
    for c in candidates:
        counts[extract_state(c.previous_location)] += 1

    return [
        GeographicCount(state=row.category, count=row.count, percentage=row.percentage)
        for row in rank_counts(counts, len(candidates), limit=top_n)
    ]


def time_series(candidates: Sequence[CandidateRecord]) -> List[TimeSeriesPoint]:
    """
    Interviews and pass rate per calendar day.

    All unparseable or missing timestamps share one "Unknown" bucket,
    which sorts after every ISO date.
    """
    totals: Dict[str, int] = defaultdict(int)
    passes: Dict[str, int] = defaultdict(int)

    for c in candidates:
        date_key = ValueParser.parse_date_key(c.date_time) or UNKNOWN
        totals[date_key] += 1
        if c.result == PASS:
            passes[date_key] += 1

    return [
        TimeSeriesPoint(
            date=date_key,
            interviews=totals[date_key],
            passed=passes[date_key],
            pass_rate=percentage(passes[date_key], totals[date_key]),
        )
        for date_key in sorted(totals)
    ]


# ======================================
# Risk & compliance
# ======================================

def _risk_rules() -> List[Tuple[str, Callable[[CandidateRecord], bool], Severity, RiskStatus]]:
    return [
        ("Red Flags Present", lambda c: len(c.red_flags) > 0, Severity.HIGH, RiskStatus.ISSUE),
        ("Background Check Failed", lambda c: _answer(c, "background_check") is YesNo.NO,
         Severity.HIGH, RiskStatus.FAILED),
        ("Background Check Missing", lambda c: _answer(c, "background_check") is YesNo.UNKNOWN,
         Severity.HIGH, RiskStatus.MISSING),
        ("TB Test Failed", lambda c: _answer(c, "tb_test_negative") is YesNo.NO,
         Severity.HIGH, RiskStatus.FAILED),
        ("TB Test Missing", lambda c: _answer(c, "tb_test_negative") is YesNo.UNKNOWN,
         Severity.MEDIUM, RiskStatus.MISSING),
        ("No CPR Certification", lambda c: _answer(c, "cpr_certificate") is not YesNo.YES,
         Severity.MEDIUM, RiskStatus.MISSING),
        ("No Valid License", lambda c: _answer(c, "valid_driver_license") is not YesNo.YES,
         Severity.MEDIUM, RiskStatus.MISSING),
        ("No Reliable Transport", lambda c: _answer(c, "reliable_transport") is not YesNo.YES,
         Severity.MEDIUM, RiskStatus.MISSING),
        ("Insufficient Experience", lambda c: _answer(c, "one_year_experience") is not YesNo.YES,
         Severity.LOW, RiskStatus.MISSING),
    ]


def risk_metrics(candidates: Sequence[CandidateRecord]) -> List[RiskItem]:
    """Risk categories with at least one candidate, in fixed category order."""
    total = len(candidates)
    risks = []
    for category, predicate, severity, status in _risk_rules():
        count = sum(1 for c in candidates if predicate(c))
        if count > 0:
            risks.append(RiskItem(
                category=category,
                count=count,
                percentage=percentage(count, total),
                severity=severity,
                status=status,
            ))
    return risks


def compliance_credentials(candidates: Sequence[CandidateRecord]) -> List[ComplianceCredential]:
    """Has (YES) / failed (NO) / missing (UNKNOWN) per credential."""
    credentials = []
    for name, field_name in CREDENTIAL_FIELDS:
        answers = [_answer(c, field_name) for c in candidates]
        credentials.append(ComplianceCredential(
            credential=name,
            has_credential=answers.count(YesNo.YES),
            missing_credential=answers.count(YesNo.UNKNOWN),
            failed_check=answers.count(YesNo.NO),
            total=len(candidates),
        ))
    return credentials


# ======================================
# Categorical breakdowns
# ======================================

def result_distribution(candidates: Sequence[CandidateRecord]) -> List[CategoryCount]:
    counts: Dict[str, int] = defaultdict(int)
    for c in candidates:
        counts[c.result or "UNKNOWN"] += 1
    return rank_counts(counts, len(candidates))


def travel_ability(candidates: Sequence[CandidateRecord]) -> List[CategoryCount]:
    answers = [_answer(c, "can_travel") for c in candidates]
    rows = [
        ("Can Travel", answers.count(YesNo.YES)),
        ("Cannot Travel", answers.count(YesNo.NO)),
        (UNKNOWN, answers.count(YesNo.UNKNOWN)),
    ]
    return [
        CategoryCount(category=category, count=count, percentage=percentage(count, len(candidates)))
        for category, count in rows
        if count > 0
    ]


def red_flag_frequency(candidates: Sequence[CandidateRecord]) -> List[CategoryCount]:
    """How often each red flag occurs; percentages are of candidates with any flag."""
    counts: Dict[str, int] = defaultdict(int)
    flagged = 0
    for c in candidates:
        if c.red_flags:
            flagged += 1
            for flag in dict.fromkeys(c.red_flags):
                counts[flag] += 1
    return rank_counts(counts, flagged)
