# ==============================================
# Report Assembly
# ==============================================
#
# PURPOSE:
#   Bundle every analytics view for one dataset kind into a single
#   JSON-serializable mapping. This is what the CLI prints and what
#   an external report renderer consumes.
#
# OUTPUT SHAPE:
# -------------
#   {
#       "kind": "candidate" | "customer" | "form",
#       "total": <number of records>,
#       "views": {<view name>: <view as dict or list of dicts>, ...}
#   }
#
# FUNCTIONS:
# ----------
# - build_candidate_report(candidates, analytics_config) -> dict
# - build_customer_report(customers, analytics_config) -> dict
# - build_form_report(submissions) -> dict
# - build_report(kind, records, analytics_config) -> dict
#
# ==============================================

from typing import Any, Dict, Optional, Sequence

from care_analytics.analysis import candidate, customer, form
from care_analytics.config import AnalyticsConfig
from care_analytics.normalization import RecordKind


def _serialize(view: Any) -> Any:
    if isinstance(view, (list, tuple)):
        return [_serialize(item) for item in view]
    if hasattr(view, "to_dict"):
        return view.to_dict()
    return view


def _report(kind: RecordKind, records: Sequence[Any], views: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "kind": kind.value,
        "total": len(records),
        "views": {name: _serialize(view) for name, view in views.items()},
    }


def build_candidate_report(candidates: Sequence[Any],
                           analytics_config: Optional[AnalyticsConfig] = None) -> Dict[str, Any]:
    analytics_config = analytics_config or AnalyticsConfig()
    return _report(RecordKind.CANDIDATE, candidates, {
        "recruitment_funnel": candidate.recruitment_funnel(candidates),
        "qualification_status": candidate.qualification_status(candidates),
        "qualification_breakdown": candidate.qualification_breakdown(candidates),
        "score_distribution": candidate.score_distribution(candidates),
        "statistical_summary": candidate.statistical_summary(candidates),
        "score_correlations": candidate.score_correlations(candidates),
        "average_scores": candidate.average_scores(candidates),
        "scores_by_client_type": candidate.scores_by_client_type(candidates),
        "geographic_distribution": candidate.geographic_distribution(
            candidates, top_n=analytics_config.geographic_top_n),
        "time_series": candidate.time_series(candidates),
        "risk_metrics": candidate.risk_metrics(candidates),
        "compliance_credentials": candidate.compliance_credentials(candidates),
        "result_distribution": candidate.result_distribution(candidates),
        "travel_ability": candidate.travel_ability(candidates),
        "red_flag_frequency": candidate.red_flag_frequency(candidates),
    })


def build_customer_report(customers: Sequence[Any],
                          analytics_config: Optional[AnalyticsConfig] = None) -> Dict[str, Any]:
    analytics_config = analytics_config or AnalyticsConfig()
    return _report(RecordKind.CUSTOMER, customers, {
        "service_sentiment": customer.service_sentiment(customers),
        "referral_sources": customer.referral_sources(customers),
        "referral_sentiment": customer.referral_sentiment_cross(customers),
        "referral_conversion": customer.referral_conversion(customers),
        "patient_problems": customer.patient_problems(
            customers, top_n=analytics_config.patient_problem_top_n),
        "dementia_share": customer.dementia_share(customers),
        "service_hours": customer.service_hours(customers),
        "service_hours_summary": customer.service_hours_summary(customers),
        "service_time": customer.service_time(customers),
        "zip_code_distribution": customer.zip_code_distribution(customers),
        "top_zip_codes": customer.top_zip_codes(customers, top_n=analytics_config.top_zip_codes),
        "contact_methods": customer.contact_methods(customers),
        "callback_scheduling": customer.callback_scheduling(customers),
        "nurse_preference": customer.nurse_preference(customers),
        "inquiry_trends": customer.inquiry_trends(customers),
    })


def build_form_report(submissions: Sequence[Any]) -> Dict[str, Any]:
    return _report(RecordKind.FORM, submissions, {
        "summary": form.form_summary(submissions),
        "qualification_status": form.form_qualification_status(submissions),
        "qualifications": form.form_qualifications(submissions),
        "experience_distribution": form.experience_distribution(submissions),
        "background_check_issues": form.background_check_issues(submissions),
        "compliance_metrics": form.compliance_metrics(submissions),
        "availability_metrics": form.availability_metrics(submissions),
        "dementia_experience": form.dementia_experience(submissions),
    })


def build_report(kind: RecordKind, records: Sequence[Any],
                 analytics_config: Optional[AnalyticsConfig] = None) -> Dict[str, Any]:
    """Build the report for whichever dataset kind `records` belong to."""
    if kind is RecordKind.CANDIDATE:
        return build_candidate_report(records, analytics_config)
    if kind is RecordKind.CUSTOMER:
        return build_customer_report(records, analytics_config)
    if kind is RecordKind.FORM:
        return build_form_report(records)
    raise ValueError(f"Unknown record kind: {kind}")
