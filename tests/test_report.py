# ==============================================
# Tests for Report Assembly
# ==============================================

import json

import pytest

from care_analytics.config import AnalyticsConfig
from care_analytics.normalization import RecordKind
from care_analytics.report import (
    build_candidate_report,
    build_customer_report,
    build_form_report,
    build_report,
)


class TestCandidateReport:
    def test_shape(self, candidates):
        report = build_candidate_report(candidates)

        assert report["kind"] == "candidate"
        assert report["total"] == 3
        assert report["views"]["recruitment_funnel"][3] == {
            "stage": "Passed Interview",
            "count": 2,
            "percentage": pytest.approx(66.67, abs=0.01),
            "drop_off_rate": pytest.approx(33.33, abs=0.01),
        }

    def test_json_serializable(self, candidates):
        report = build_candidate_report(candidates)
        decoded = json.loads(json.dumps(report))

        risk = decoded["views"]["risk_metrics"][0]
        assert risk["severity"] == "high"
        assert isinstance(decoded["views"]["score_distribution"]["overall"], list)

    def test_geographic_limit_from_config(self, candidates):
        report = build_candidate_report(candidates, AnalyticsConfig(geographic_top_n=2))
        assert len(report["views"]["geographic_distribution"]) == 2


class TestOtherReports:
    def test_customer(self, customers):
        report = build_customer_report(customers, AnalyticsConfig(top_zip_codes=1))

        assert report["kind"] == "customer"
        assert report["views"]["top_zip_codes"] == [
            {"category": "21201", "count": 2, "percentage": 50.0},
        ]
        json.dumps(report)

    def test_form(self, form_submissions):
        report = build_form_report(form_submissions)

        assert report["kind"] == "form"
        assert report["views"]["qualification_status"]["qualified"] == 1
        json.dumps(report)

    def test_empty_reports(self):
        for kind in RecordKind:
            report = build_report(kind, [])
            assert report["total"] == 0
            json.dumps(report)


class TestDispatch:
    def test_build_report_by_kind(self, candidates, customers, form_submissions):
        assert build_report(RecordKind.CANDIDATE, candidates)["kind"] == "candidate"
        assert build_report(RecordKind.CUSTOMER, customers)["kind"] == "customer"
        assert build_report(RecordKind.FORM, form_submissions)["kind"] == "form"

    def test_unknown_kind(self):
        with pytest.raises(ValueError):
            build_report("candidate", [])
