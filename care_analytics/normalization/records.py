# ==============================================
# Canonical Records (Data Classes)
# ==============================================
#
# PURPOSE:
#   The fixed record shapes every analytics function consumes,
#   one per dataset kind. Built only by RecordNormalizer and
#   immutable afterwards.
#
# ENUMS:
# ------
# - RecordKind(Enum): CANDIDATE, CUSTOMER, FORM
#
# CLASSES:
# --------
# - CandidateRecord       → one phone/text interview evaluation
# - CustomerRecord        → one customer-service inquiry
# - FormSubmissionRecord  → one web-form staff application
#
#   All text fields are Optional[str] (None = absent). Sequence
#   fields are tuples of strings (empty = absent).
#
# ==============================================

from enum import Enum
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional, Tuple

from .values import ValueParser


class RecordKind(Enum):
    """Dataset kinds handled by the analytics engine."""
    CANDIDATE = "candidate"
    CUSTOMER = "customer"
    FORM = "form"


class _RecordMixin:
    def to_dict(self) -> Dict[str, Any]:
        """Serialize the record to a JSON-friendly dictionary."""
        return {key: list(value) if isinstance(value, tuple) else value
                for key, value in asdict(self).items()}


@dataclass(frozen=True)
class CandidateRecord(_RecordMixin):
    """One interview evaluation outcome."""

    # --- Identity (required) ---
    contact_name: str
    phone_number: str

    guid: Optional[str] = None
    result: Optional[str] = None  # PASS, FAIL, HANGUP or unset
    date_time: Optional[str] = None
    previous_location: Optional[str] = None  # "City, State"
    employment_period: Optional[str] = None

    # --- Qualification gate ---
    work_per_week: Optional[str] = None
    can_travel: Optional[str] = None
    one_year_experience: Optional[str] = None
    pay_rate: Optional[str] = None

    # --- Compliance ---
    valid_driver_license: Optional[str] = None
    reliable_transport: Optional[str] = None
    background_check: Optional[str] = None
    tb_test_negative: Optional[str] = None
    cpr_certificate: Optional[str] = None
    dementia_client: Optional[str] = None

    # --- Interview details ---
    experience: Optional[str] = None
    client_type: Optional[str] = None
    caregiver_quality: Optional[str] = None
    client_refusal: Optional[str] = None
    first_action: Optional[str] = None
    phone2: Optional[str] = None
    email_address: Optional[str] = None
    performance_summary: Optional[str] = None

    # --- Scores, decimal strings in [0, 5] ---
    experience_score: Optional[str] = None
    compassion_score: Optional[str] = None
    safety_score: Optional[str] = None
    professionalism_score: Optional[str] = None

    red_flags: Tuple[str, ...] = ()
    follow_up_questions: Tuple[str, ...] = ()
    questions_asked: Tuple[str, ...] = ()
    callback_date: Optional[str] = None

    @property
    def callback_dates(self) -> Tuple[str, ...]:
        """Individual callback dates when several are joined by "and"."""
        return ValueParser.split_callback_dates(self.callback_date)


@dataclass(frozen=True)
class CustomerRecord(_RecordMixin):
    """One customer-service inquiry."""

    contact_name: str
    phone_number: str

    guid: Optional[str] = None
    date_time: Optional[str] = None
    referral: Optional[str] = None
    service_experience: Optional[str] = None
    zip_code: Optional[str] = None
    patient_identity: Optional[str] = None
    patient_problem: Optional[str] = None
    service_hours: Optional[str] = None  # free text with an embedded number
    service_time: Optional[str] = None
    client_address: Optional[str] = None
    client_email: Optional[str] = None
    callback_date: Optional[str] = None
    nurse_visit: Optional[str] = None

    @property
    def callback_dates(self) -> Tuple[str, ...]:
        """Individual callback dates when several are joined by "and"."""
        return ValueParser.split_callback_dates(self.callback_date)


@dataclass(frozen=True)
class FormSubmissionRecord(_RecordMixin):
    """One web-form staff application."""

    guid: Optional[str] = None
    result: Optional[str] = None
    date_time: Optional[str] = None
    phone_number: Optional[str] = None
    contact_name: Optional[str] = None
    email: Optional[str] = None

    has_experience: Optional[str] = None
    has_availability: Optional[str] = None
    has_vehicle: Optional[str] = None
    willing_to_travel: Optional[str] = None
    pay_rate_acceptance: Optional[str] = None
    worked_before: Optional[str] = None
    has_cpr_certification: Optional[str] = None
    can_provide_tb_test: Optional[str] = None
    has_background_check_issues: Optional[str] = None
    background_check_fee_acceptance: Optional[str] = None

    caregiving_background: Optional[str] = None
    has_dementia_experience: Optional[str] = None
    background_check_issues_description: Optional[str] = None
    good_caregiver_qualities: Optional[str] = None
    consent_to_messages: Optional[str] = None
