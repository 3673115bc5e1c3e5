"""
Staff application analytics over FormSubmissionRecord lists.

Form answers use the plain yes/no vocabulary (no pass/fail wording).
"""
from typing import List, Sequence, Tuple

from care_analytics.normalization import FormSubmissionRecord, YesNo, FORM_VOCABULARY, normalize_yes_no
from .stats import percentage
from .views import CategoryCount, QualificationBreakdown, QualificationStatus

FORM_QUALIFICATION_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("Experience", "has_experience"),
    ("Availability", "has_availability"),
    ("Vehicle", "has_vehicle"),
    ("CPR Certification", "has_cpr_certification"),
    ("TB Test", "can_provide_tb_test"),
    ("Willing to Travel", "willing_to_travel"),
)


def _answer(submission: FormSubmissionRecord, field_name: str) -> YesNo:
    return normalize_yes_no(getattr(submission, field_name), FORM_VOCABULARY)


def _count(submissions: Sequence[FormSubmissionRecord], field_name: str, answer: YesNo) -> int:
    return sum(1 for s in submissions if _answer(s, field_name) is answer)


def _rows(rows: Sequence[Tuple[str, int]], total: int) -> List[CategoryCount]:
    return [CategoryCount(category=category, count=count, percentage=percentage(count, total))
            for category, count in rows]


def _yes_no_unknown(submissions: Sequence[FormSubmissionRecord], field_name: str,
                    yes_label: str, no_label: str, yes_first: bool = True) -> List[CategoryCount]:
    total = len(submissions)
    yes = _count(submissions, field_name, YesNo.YES)
    no = _count(submissions, field_name, YesNo.NO)
    ordered = [(yes_label, yes), (no_label, no)] if yes_first else [(no_label, no), (yes_label, yes)]
    return _rows(ordered + [("Unknown", total - yes - no)], total)


def is_qualified_applicant(submission: FormSubmissionRecord) -> bool:
    """Experience, availability and a vehicle, and no reported background-check issue."""
    return (
        _answer(submission, "has_experience") is YesNo.YES
        and _answer(submission, "has_availability") is YesNo.YES
        and _answer(submission, "has_vehicle") is YesNo.YES
        and _answer(submission, "has_background_check_issues") is not YesNo.YES
    )


def form_qualification_status(submissions: Sequence[FormSubmissionRecord]) -> QualificationStatus:
    qualified = sum(1 for s in submissions if is_qualified_applicant(s))
    return QualificationStatus(
        qualified=qualified,
        not_qualified=len(submissions) - qualified,
        qualified_percentage=percentage(qualified, len(submissions)),
        missing_criteria={
            "experience": len(submissions) - _count(submissions, "has_experience", YesNo.YES),
            "availability": len(submissions) - _count(submissions, "has_availability", YesNo.YES),
            "vehicle": len(submissions) - _count(submissions, "has_vehicle", YesNo.YES),
            "background_issues": _count(submissions, "has_background_check_issues", YesNo.YES),
        },
    )


def form_qualifications(submissions: Sequence[FormSubmissionRecord]) -> List[QualificationBreakdown]:
    return [
        QualificationBreakdown(
            name=name,
            qualified=_count(submissions, field_name, YesNo.YES),
            not_qualified=_count(submissions, field_name, YesNo.NO),
            missing=_count(submissions, field_name, YesNo.UNKNOWN),
            total=len(submissions),
        )
        for name, field_name in FORM_QUALIFICATION_FIELDS
    ]


def experience_distribution(submissions: Sequence[FormSubmissionRecord]) -> List[CategoryCount]:
    return _yes_no_unknown(submissions, "has_experience", "With Experience", "Without Experience")


def background_check_issues(submissions: Sequence[FormSubmissionRecord]) -> List[CategoryCount]:
    return _yes_no_unknown(submissions, "has_background_check_issues", "Has Issues", "No Issues",
                           yes_first=False)


def dementia_experience(submissions: Sequence[FormSubmissionRecord]) -> List[CategoryCount]:
    return _yes_no_unknown(submissions, "has_dementia_experience",
                           "Has Dementia Experience", "No Dementia Experience")


def compliance_metrics(submissions: Sequence[FormSubmissionRecord]) -> List[CategoryCount]:
    return _rows([
        ("CPR Certified", _count(submissions, "has_cpr_certification", YesNo.YES)),
        ("TB Test Available", _count(submissions, "can_provide_tb_test", YesNo.YES)),
        ("Background Check Fee Accepted", _count(submissions, "background_check_fee_acceptance", YesNo.YES)),
        ("Pay Rate Accepted", _count(submissions, "pay_rate_acceptance", YesNo.YES)),
    ], len(submissions))


def availability_metrics(submissions: Sequence[FormSubmissionRecord]) -> List[CategoryCount]:
    return _rows([
        ("Has Availability", _count(submissions, "has_availability", YesNo.YES)),
        ("Has Vehicle", _count(submissions, "has_vehicle", YesNo.YES)),
        ("Willing to Travel", _count(submissions, "willing_to_travel", YesNo.YES)),
    ], len(submissions))


def form_summary(submissions: Sequence[FormSubmissionRecord]) -> List[CategoryCount]:
    """Headline counts for the submissions table."""
    total = len(submissions)
    return [
        CategoryCount(category="Total Submissions", count=total, percentage=100.0 if total else 0.0),
    ] + _rows([
        ("Qualified Applicants", sum(1 for s in submissions if is_qualified_applicant(s))),
        ("With Experience", _count(submissions, "has_experience", YesNo.YES)),
        ("With Availability", _count(submissions, "has_availability", YesNo.YES)),
        ("With Vehicle", _count(submissions, "has_vehicle", YesNo.YES)),
        ("Background Check Issues", _count(submissions, "has_background_check_issues", YesNo.YES)),
    ], total)
