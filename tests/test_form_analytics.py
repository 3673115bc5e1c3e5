# ==============================================
# Tests for Form Submission Analytics
# ==============================================

import pytest

from care_analytics.analysis import form
from care_analytics.normalization import FormSubmissionRecord


def _pairs(rows):
    return [(row.category, row.count) for row in rows]


class TestQualifiedApplicant:
    def test_qualified(self, form_submissions):
        assert form.is_qualified_applicant(form_submissions[0])

    def test_background_issue_blocks(self, form_submissions):
        assert not form.is_qualified_applicant(form_submissions[1])

    def test_unknown_background_answer_does_not_block(self):
        submission = FormSubmissionRecord(has_experience="yes", has_availability="yes", has_vehicle="yes")
        assert form.is_qualified_applicant(submission)

    def test_pass_wording_not_accepted(self):
        submission = FormSubmissionRecord(has_experience="passed", has_availability="yes", has_vehicle="yes")
        assert not form.is_qualified_applicant(submission)

    def test_status(self, form_submissions):
        status = form.form_qualification_status(form_submissions)

        assert (status.qualified, status.not_qualified) == (1, 2)
        assert status.qualified_percentage == pytest.approx(100 / 3)
        assert status.missing_criteria == {
            "experience": 1, "availability": 1, "vehicle": 1, "background_issues": 1,
        }


class TestBreakdowns:
    def test_qualifications_partition(self, form_submissions):
        rows = form.form_qualifications(form_submissions)

        assert [r.name for r in rows] == [
            "Experience", "Availability", "Vehicle", "CPR Certification", "TB Test", "Willing to Travel",
        ]
        for row in rows:
            assert row.qualified + row.not_qualified + row.missing == row.total == 3

    def test_experience_distribution(self, form_submissions):
        assert _pairs(form.experience_distribution(form_submissions)) == [
            ("With Experience", 2), ("Without Experience", 0), ("Unknown", 1),
        ]

    def test_background_check_issues(self, form_submissions):
        assert _pairs(form.background_check_issues(form_submissions)) == [
            ("No Issues", 1), ("Has Issues", 1), ("Unknown", 1),
        ]

    def test_dementia_experience(self, form_submissions):
        assert _pairs(form.dementia_experience(form_submissions)) == [
            ("Has Dementia Experience", 1), ("No Dementia Experience", 1), ("Unknown", 1),
        ]

    def test_compliance_metrics(self, form_submissions):
        assert _pairs(form.compliance_metrics(form_submissions)) == [
            ("CPR Certified", 1),
            ("TB Test Available", 1),
            ("Background Check Fee Accepted", 1),
            ("Pay Rate Accepted", 1),
        ]

    def test_availability_metrics(self, form_submissions):
        assert _pairs(form.availability_metrics(form_submissions)) == [
            ("Has Availability", 2), ("Has Vehicle", 2), ("Willing to Travel", 1),
        ]


class TestSummary:
    def test_summary(self, form_submissions):
        rows = form.form_summary(form_submissions)

        assert _pairs(rows) == [
            ("Total Submissions", 3),
            ("Qualified Applicants", 1),
            ("With Experience", 2),
            ("With Availability", 2),
            ("With Vehicle", 2),
            ("Background Check Issues", 1),
        ]
        assert rows[0].percentage == 100.0

    def test_empty(self):
        rows = form.form_summary([])
        assert all(r.count == 0 and r.percentage == 0.0 for r in rows)
