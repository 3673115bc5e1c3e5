# ==============================================
# Record Schemas
# ==============================================
#
# PURPOSE:
#   For each dataset kind, declare which snake_case column names
#   feed which canonical field. RecordNormalizer walks a schema;
#   it has no per-kind code of its own.
#
# CLASS: RecordSchema (dataclass)
# -------------------------------
#   - kind: RecordKind
#   - record_type: type                 → dataclass to build
#   - aliases: dict[str, tuple[str]]    → canonical field → accepted column names,
#                                         in priority order (first non-empty wins)
#   - list_fields: frozenset[str]       → fields parsed as string sequences
#   - required_fields: tuple[str]       → empty value rejects the row
#   - literal_fields: frozenset[str]    → booleans kept as "true"/"false"
#
# SCHEMAS:
# --------
#   CANDIDATE_SCHEMA, CUSTOMER_SCHEMA, FORM_SCHEMA
#   SCHEMAS: RecordKind → RecordSchema
#
# ==============================================

from dataclasses import dataclass, fields
from typing import Dict, FrozenSet, Tuple

from .records import RecordKind, CandidateRecord, CustomerRecord, FormSubmissionRecord


@dataclass(frozen=True)
class RecordSchema:
    """Column-to-field resolution rules for one dataset kind."""
    kind: RecordKind
    record_type: type
    aliases: Dict[str, Tuple[str, ...]]
    list_fields: FrozenSet[str] = frozenset()
    required_fields: Tuple[str, ...] = ()
    literal_fields: FrozenSet[str] = frozenset()

    @property
    def columns(self) -> FrozenSet[str]:
        """Every column name any field of this schema accepts."""
        return frozenset(alias for aliases in self.aliases.values() for alias in aliases)


def _aliases_for(record_type: type, extra: Dict[str, Tuple[str, ...]]) -> Dict[str, Tuple[str, ...]]:
    """Every dataclass field accepts its own name unless `extra` lists its aliases explicitly."""
    return {f.name: extra.get(f.name, (f.name,)) for f in fields(record_type)}


CANDIDATE_SCHEMA = RecordSchema(
    kind=RecordKind.CANDIDATE,
    record_type=CandidateRecord,
    aliases=_aliases_for(CandidateRecord, {
        "email_address": ("email_address", "email"),
    }),
    list_fields=frozenset({"red_flags", "follow_up_questions", "questions_asked"}),
    required_fields=("contact_name", "phone_number"),
)

CUSTOMER_SCHEMA = RecordSchema(
    kind=RecordKind.CUSTOMER,
    record_type=CustomerRecord,
    aliases=_aliases_for(CustomerRecord, {
        "zip_code": ("zipcode", "zip_code"),
    }),
    required_fields=("contact_name", "phone_number"),
)

# Form rows come either from the web form itself or from the
# staff-recruitment API/Excel exports, which use candidate column names.
FORM_SCHEMA = RecordSchema(
    kind=RecordKind.FORM,
    record_type=FormSubmissionRecord,
    aliases=_aliases_for(FormSubmissionRecord, {
        "email": ("email_address", "email"),
        "has_experience": ("one_year_experience", "has_experience"),
        "has_availability": ("work_per_week", "has_availability"),
        "has_vehicle": ("valid_driver_license", "has_vehicle"),
        "willing_to_travel": ("can_travel", "willing_to_travel"),
        "pay_rate_acceptance": ("pay_rate", "pay_rate_acceptance"),
        "worked_before": ("employment_period", "worked_before"),
        "has_cpr_certification": ("cpr_certificate", "has_cpr_certification"),
        "can_provide_tb_test": ("tb_test_negative", "can_provide_tb_test"),
        "has_background_check_issues": ("background_check_issues", "has_background_check_issues"),
        "background_check_fee_acceptance": ("background_check", "background_check_fee_acceptance"),
        "caregiving_background": ("care_experience", "caregiving_background"),
        "has_dementia_experience": ("dementia_client", "has_dementia_experience"),
    }),
    # The form importer stores the consent checkbox as the literal "true"/"false"
    literal_fields=frozenset({"consent_to_messages"}),
)

SCHEMAS: Dict[RecordKind, RecordSchema] = {
    RecordKind.CANDIDATE: CANDIDATE_SCHEMA,
    RecordKind.CUSTOMER: CUSTOMER_SCHEMA,
    RecordKind.FORM: FORM_SCHEMA,
}
