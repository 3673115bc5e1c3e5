# ==============================================
# TOPIC 1: NORMALIZATION
# ==============================================
#
# This package turns raw rows (CSV headers, snake_case API
# fields, camelCase client state) into canonical records
# BEFORE they reach the analytics engine.
#
# Modules:
# --------
# - field_normalizer.py  → Column names to snake_case
# - values.py            → Scalar/list/number/date coercion
# - yes_no.py            → Three-valued yes/no/unknown answers
# - records.py           → Canonical record dataclasses
# - schemas.py           → Column aliases per record kind
# - record_normalizer.py → Build records, reject rows missing identity
#
# ==============================================

from .field_normalizer import FieldNormalizer
from .values import ValueParser
from .yes_no import YesNo, YesNoVocabulary, CANDIDATE_VOCABULARY, FORM_VOCABULARY, normalize_yes_no
from .records import RecordKind, CandidateRecord, CustomerRecord, FormSubmissionRecord
from .schemas import RecordSchema, SCHEMAS, CANDIDATE_SCHEMA, CUSTOMER_SCHEMA, FORM_SCHEMA
from .record_normalizer import RecordNormalizer, NormalizationResult, RejectedRow, normalize_records

__all__ = [
    "FieldNormalizer",
    "ValueParser",
    "YesNo",
    "YesNoVocabulary",
    "CANDIDATE_VOCABULARY",
    "FORM_VOCABULARY",
    "normalize_yes_no",
    "RecordKind",
    "CandidateRecord",
    "CustomerRecord",
    "FormSubmissionRecord",
    "RecordSchema",
    "SCHEMAS",
    "CANDIDATE_SCHEMA",
    "CUSTOMER_SCHEMA",
    "FORM_SCHEMA",
    "RecordNormalizer",
    "NormalizationResult",
    "RejectedRow",
    "normalize_records",
]
