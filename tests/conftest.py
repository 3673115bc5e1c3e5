# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# Shared fixtures for all tests.
#
# FIXTURES:
# ---------
# - raw_candidate_rows   → API-style snake_case interview rows (one invalid)
# - candidates           → three CandidateRecords (PASS/qualified, PASS, FAIL)
# - customers            → CustomerRecords covering every sentiment
# - form_submissions     → FormSubmissionRecords (qualified, blocked, empty)
# - clean_config         → environment cleared and config singleton reset
#
# ==============================================

import pytest

from care_analytics.config import reset_config
from care_analytics.normalization import CandidateRecord, CustomerRecord, FormSubmissionRecord


@pytest.fixture
def raw_candidate_rows() -> list:
    """Rows as the records API returns them; the last one has no phone number."""
    return [
        {
            "guid": "c-1",
            "result": "PASS",
            "contact_name": "Ada Lovelace",
            "phone_number": "410-555-0101",
            "date_time": "2024-03-01 10:15",
            "previous_location": "Baltimore, MD",
            "work_per_week": "Yes",
            "can_travel": "yes",
            "one_year_experience": "Y",
            "pay_rate": "true",
            "experience_score": "5",
            "compassion_score": 4.5,
            "red_flags": '["late", "rude"]',
        },
        {
            "GUID": "c-2",
            "Result": "FAIL",
            "ContactName": "Grace Hopper",
            "PhoneNumber": "412-555-0102",
            "TBTestNegative": True,
            "ExperienceScore": 3.0,
        },
        {
            "guid": "c-3",
            "contact_name": "No Phone",
            "phone_number": "   ",
        },
    ]


@pytest.fixture
def candidates() -> list:
    """Scores for experience: 5, 3 and missing; two of three passed."""
    return [
        CandidateRecord(
            contact_name="A", phone_number="1", result="PASS", date_time="2024-03-01 09:00",
            previous_location="Baltimore, MD",
            work_per_week="yes", can_travel="yes", one_year_experience="yes", pay_rate="yes",
            background_check="passed", tb_test_negative="yes", cpr_certificate="yes",
            valid_driver_license="yes", reliable_transport="yes",
            experience_score="5", compassion_score="4", safety_score="5", professionalism_score="4",
            client_type="Dementia",
        ),
        CandidateRecord(
            contact_name="B", phone_number="2", result="PASS", date_time="2024-03-01 14:00",
            previous_location="Pittsburgh, PA",
            work_per_week="yes", can_travel="no", one_year_experience="yes", pay_rate="yes",
            background_check="failed",
            experience_score="3", compassion_score="2", safety_score="3", professionalism_score="2",
            red_flags=("late", "late", "evasive"),
            client_type="Dementia",
        ),
        CandidateRecord(
            contact_name="C", phone_number="3", result="FAIL", date_time="2024-03-02 11:00",
            previous_location="Jakarta",
            client_type="Elderly",
        ),
    ]


@pytest.fixture
def customers() -> list:
    return [
        CustomerRecord(
            contact_name="Pat", phone_number="1", referral="Google",
            service_experience="Great staff", zip_code="21201",
            patient_problem="Dementia and memory loss", service_hours="40 hours",
            service_time="Morning", client_email="pat@example.com", client_address="1 Main St",
            callback_date="Monday and Tuesday", date_time="2024-04-01 08:00",
        ),
        CustomerRecord(
            contact_name="Sam", phone_number="2", referral="Google",
            service_experience="The nurse was late", zip_code="21201",
            patient_problem="Needs help with bathing after surgery", service_hours="about 12 hrs",
            service_time="evenings", date_time="2024-04-02 09:00",
        ),
        CustomerRecord(
            contact_name="Lee", phone_number="3", referral="Friend",
            service_experience="It was fine", zip_code="15213",
            service_hours="70", service_time="whenever", date_time="not a date",
        ),
        CustomerRecord(
            contact_name="Kim", phone_number="4",
        ),
    ]


@pytest.fixture
def form_submissions() -> list:
    return [
        FormSubmissionRecord(
            contact_name="Qualified", has_experience="Yes", has_availability="yes",
            has_vehicle="y", has_background_check_issues="No", has_cpr_certification="Yes",
            can_provide_tb_test="yes", willing_to_travel="yes", pay_rate_acceptance="yes",
            background_check_fee_acceptance="yes", has_dementia_experience="yes",
        ),
        FormSubmissionRecord(
            contact_name="Has issues", has_experience="yes", has_availability="yes",
            has_vehicle="yes", has_background_check_issues="yes", has_dementia_experience="no",
        ),
        FormSubmissionRecord(),
    ]


@pytest.fixture
def clean_config(monkeypatch):
    """Remove config env vars so tests see defaults, and reset the singleton."""
    for name in (
        "GEOGRAPHIC_TOP_N", "PATIENT_PROBLEM_TOP_N", "TOP_ZIP_CODES",
        "RECORDS_API_URL", "RECORDS_API_TIMEOUT", "DEFAULT_LOCATION",
        "LOG_LEVEL", "LOG_FILE",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield monkeypatch
    reset_config()
