"""
Customer-service inquiry analytics over CustomerRecord lists.

Free-text answers (service experience, patient problem, service hours and
time) are classified with fixed keyword lists, matched case-insensitively as
substrings.
"""
from collections import defaultdict
from typing import Dict, List, Optional, Sequence, Tuple

from care_analytics.normalization import CustomerRecord, ValueParser
from .stats import percentage, rank_counts
from .views import (
    CategoryCount,
    DateCount,
    DementiaShare,
    ReferralConversion,
    ReferralSentiment,
    ServiceHoursSummary,
)

NOT_SPECIFIED = "Not Specified"
UNKNOWN = "Unknown"

POSITIVE = "Positive"
NEGATIVE = "Negative"
NEUTRAL = "Neutral"
NO_EXPERIENCE = "No Experience"

POSITIVE_KEYWORDS: Tuple[str, ...] = ("good", "excellent", "great")
NEGATIVE_KEYWORDS: Tuple[str, ...] = ("bad", "poor", "issue", "late", "problem")

PATIENT_PROBLEM_KEYWORDS: Tuple[str, ...] = (
    "memory", "dementia", "alzheimer", "forgetting", "confusion",
    "safety", "medication", "wound care", "surgery", "transplant",
    "bathing", "eating", "mobility", "fall", "supervision",
)

DEMENTIA_KEYWORDS: Tuple[str, ...] = ("dementia", "memory", "alzheimer", "forgetting")

# (label, inclusive upper bound); None = unbounded
SERVICE_HOUR_RANGES: Tuple[Tuple[str, Optional[int]], ...] = (
    ("0-20 hours/week", 20),
    ("21-40 hours/week", 40),
    ("41-60 hours/week", 60),
    ("60+ hours/week", None),
)

# Checked in order; first match wins
SERVICE_TIME_KEYWORDS: Tuple[Tuple[str, str], ...] = (
    ("morning", "Morning"),
    ("afternoon", "Afternoon"),
    ("evening", "Evening"),
    ("night", "Night"),
)
FLEXIBLE = "Flexible"


def _text(value: Optional[str]) -> str:
    return (value or "").strip().lower()


def classify_sentiment(service_experience: Optional[str]) -> str:
    """
    Classify a free-text service experience.

    Empty → "No Experience"; positive keyword → "Positive"; negative
    keyword → "Negative"; anything else → "Neutral".
    """
    text = _text(service_experience)
    if not text:
        return NO_EXPERIENCE
    if any(keyword in text for keyword in POSITIVE_KEYWORDS):
        return POSITIVE
    if any(keyword in text for keyword in NEGATIVE_KEYWORDS):
        return NEGATIVE
    return NEUTRAL


def classify_service_time(service_time: Optional[str]) -> str:
    text = _text(service_time)
    for keyword, label in SERVICE_TIME_KEYWORDS:
        if keyword in text:
            return label
    return FLEXIBLE if text else NOT_SPECIFIED


def service_hours_range(service_hours: Optional[str]) -> str:
    hours = ValueParser.parse_first_integer(service_hours)
    if hours is None:
        return NOT_SPECIFIED
    for label, upper in SERVICE_HOUR_RANGES:
        if upper is None or hours <= upper:
            return label
    return NOT_SPECIFIED


def _count_by(customers: Sequence[CustomerRecord], key) -> Dict[str, int]:
    counts: Dict[str, int] = defaultdict(int)
    for customer in customers:
        counts[key(customer)] += 1
    return counts


# ======================================
# Categorical distributions
# ======================================

def referral_sources(customers: Sequence[CustomerRecord]) -> List[CategoryCount]:
    counts = _count_by(customers, lambda c: (c.referral or "").strip() or NOT_SPECIFIED)
    return rank_counts(counts, len(customers))


def service_sentiment(customers: Sequence[CustomerRecord]) -> List[CategoryCount]:
    counts = _count_by(customers, lambda c: classify_sentiment(c.service_experience))
    return rank_counts(counts, len(customers))


def service_time(customers: Sequence[CustomerRecord]) -> List[CategoryCount]:
    counts = _count_by(customers, lambda c: classify_service_time(c.service_time))
    return rank_counts(counts, len(customers))


def nurse_preference(customers: Sequence[CustomerRecord]) -> List[CategoryCount]:
    counts = _count_by(customers, lambda c: (c.nurse_visit or "").strip() or NOT_SPECIFIED)
    return rank_counts(counts, len(customers))


def zip_code_distribution(customers: Sequence[CustomerRecord], limit: Optional[int] = None) -> List[CategoryCount]:
    counts = _count_by(customers, lambda c: (c.zip_code or "").strip() or UNKNOWN)
    return rank_counts(counts, len(customers), limit=limit)


def top_zip_codes(customers: Sequence[CustomerRecord], top_n: int = 5) -> List[CategoryCount]:
    return zip_code_distribution(customers, limit=top_n)


def patient_problems(customers: Sequence[CustomerRecord], top_n: int = 10) -> List[CategoryCount]:
    """
    Number of inquiries mentioning each patient-problem keyword.

    A keyword counts once per inquiry. Percentages are of all inquiries.
    """
    counts: Dict[str, int] = defaultdict(int)
    for customer in customers:
        problem = _text(customer.patient_problem)
        for keyword in PATIENT_PROBLEM_KEYWORDS:
            if keyword in problem:
                counts[keyword] += 1
    return rank_counts(counts, len(customers), limit=top_n)


def service_hours(customers: Sequence[CustomerRecord]) -> List[CategoryCount]:
    """Weekly-hours ranges in fixed order, over inquiries that answered the question."""
    answered = [c for c in customers if c.service_hours]
    counts = _count_by(answered, lambda c: service_hours_range(c.service_hours))

    order = [label for label, _ in SERVICE_HOUR_RANGES] + [NOT_SPECIFIED]
    return [
        CategoryCount(category=label, count=counts[label], percentage=percentage(counts[label], len(answered)))
        for label in order
        if counts.get(label)
    ]


def contact_methods(customers: Sequence[CustomerRecord]) -> List[CategoryCount]:
    both = email_only = phone_only = neither = 0
    for customer in customers:
        has_email = bool(customer.client_email)
        has_phone = bool(customer.phone_number)
        if has_email and has_phone:
            both += 1
        elif has_email:
            email_only += 1
        elif has_phone:
            phone_only += 1
        else:
            neither += 1

    rows = [
        ("Both Email & Phone", both),
        ("Phone Only", phone_only),
        ("Email Only", email_only),
        ("Neither", neither),
    ]
    return [
        CategoryCount(category=category, count=count, percentage=percentage(count, len(customers)))
        for category, count in rows
        if count > 0
    ]


def callback_scheduling(customers: Sequence[CustomerRecord]) -> List[CategoryCount]:
    with_callback = sum(1 for c in customers if c.callback_date)
    without_callback = len(customers) - with_callback
    return [
        CategoryCount(category="Requested Callback", count=with_callback,
                      percentage=percentage(with_callback, len(customers))),
        CategoryCount(category="No Callback", count=without_callback,
                      percentage=percentage(without_callback, len(customers))),
    ]


def inquiry_trends(customers: Sequence[CustomerRecord]) -> List[DateCount]:
    """Inquiries per ISO date; timestamps that do not parse share an "Unknown" bucket."""
    counts: Dict[str, int] = defaultdict(int)
    for customer in customers:
        if not customer.date_time:
            continue
        counts[ValueParser.parse_date_key(customer.date_time) or UNKNOWN] += 1
    return [DateCount(date=date_key, count=counts[date_key]) for date_key in sorted(counts)]


# ======================================
# Summaries
# ======================================

def service_hours_summary(customers: Sequence[CustomerRecord]) -> ServiceHoursSummary:
    hours = sorted(
        value for value in (ValueParser.parse_first_integer(c.service_hours) for c in customers)
        if value is not None
    )
    if not hours:
        return ServiceHoursSummary(count=0, mean=0.0, median=0.0, min=0, max=0)

    middle = len(hours) // 2
    if len(hours) % 2 == 0:
        median = (hours[middle - 1] + hours[middle]) / 2
    else:
        median = float(hours[middle])

    return ServiceHoursSummary(
        count=len(hours),
        mean=round(sum(hours) / len(hours), 1),
        median=median,
        min=hours[0],
        max=hours[-1],
    )


def referral_conversion(customers: Sequence[CustomerRecord]) -> ReferralConversion:
    """Share of inquiries that left phone, email and address."""
    complete = sum(1 for c in customers if c.phone_number and c.client_email and c.client_address)
    return ReferralConversion(
        total_inquiries=len(customers),
        with_full_contact=complete,
        conversion_rate=percentage(complete, len(customers)),
    )


def dementia_share(customers: Sequence[CustomerRecord]) -> DementiaShare:
    with_dementia = sum(
        1 for c in customers
        if any(keyword in _text(c.patient_problem) for keyword in DEMENTIA_KEYWORDS)
    )
    return DementiaShare(
        total=len(customers),
        with_dementia=with_dementia,
        percentage=percentage(with_dementia, len(customers)),
    )


def referral_sentiment_cross(customers: Sequence[CustomerRecord]) -> List[ReferralSentiment]:
    """Sentiment counts per referral source, busiest source first."""
    field_by_sentiment = {
        POSITIVE: "positive",
        NEUTRAL: "neutral",
        NEGATIVE: "negative",
        NO_EXPERIENCE: "no_experience",
    }
    grid: Dict[str, Dict[str, int]] = {}
    for customer in customers:
        referral = (customer.referral or "").strip() or NOT_SPECIFIED
        cell = grid.setdefault(referral, defaultdict(int))
        cell[field_by_sentiment[classify_sentiment(customer.service_experience)]] += 1

    rows = [ReferralSentiment(referral=referral, **counts) for referral, counts in grid.items()]
    return sorted(rows, key=lambda row: row.total, reverse=True)
