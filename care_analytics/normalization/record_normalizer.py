import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from care_analytics.exceptions import RecordRejected
from .field_normalizer import FieldNormalizer
from .records import RecordKind
from .schemas import RecordSchema, SCHEMAS
from .values import ValueParser

logger = logging.getLogger(__name__)


@dataclass
class RejectedRow:
    """A raw row that did not become a record."""
    index: int
    reason: str
    missing_fields: tuple = ()


@dataclass
class NormalizationResult:
    """Outcome of normalizing a batch of raw rows."""
    kind: RecordKind
    records: List[Any] = field(default_factory=list)
    rejected: List[RejectedRow] = field(default_factory=list)

    @property
    def total_rows(self) -> int:
        return len(self.records) + len(self.rejected)


class RecordNormalizer:
    def __init__(self, schema: RecordSchema, field_normalizer: Optional[FieldNormalizer] = None):
        self.schema = schema
        self.field_normalizer = field_normalizer or FieldNormalizer(schema.columns)

    @classmethod
    def for_kind(cls, kind: RecordKind) -> "RecordNormalizer":
        return cls(SCHEMAS[kind])

    def normalize(self, raw_record: Mapping[str, Any]) -> Any:
        if not isinstance(raw_record, Mapping):
            raise RecordRejected("Record must be a mapping")

        columns = self._canonicalize_keys(raw_record)
        values: Dict[str, Any] = {}

        for field_name, aliases in self.schema.aliases.items():
            raw_value = self._resolve(columns, aliases)
            if field_name in self.schema.list_fields:
                values[field_name] = ValueParser.to_text_list(raw_value)
            elif field_name in self.schema.literal_fields:
                values[field_name] = ValueParser.to_literal_text(raw_value)
            else:
                values[field_name] = ValueParser.to_text(raw_value)

        self._validate_required_fields(values)

        return self.schema.record_type(**values)

    def normalize_batch(self, raw_records: List[Mapping[str, Any]]) -> NormalizationResult:
        result = NormalizationResult(kind=self.schema.kind)

        for index, raw_record in enumerate(raw_records):
            try:
                result.records.append(self.normalize(raw_record))
            except RecordRejected as e:
                result.rejected.append(RejectedRow(index=index, reason=e.reason, missing_fields=e.missing_fields))
                logger.debug("Row %d rejected: %s", index, e.reason)

        unmatched = self.field_normalizer.unmatched_headers()
        if unmatched:
            logger.debug("Ignored %s column(s): %s", self.schema.kind.value, ", ".join(unmatched))

        if result.rejected:
            logger.warning(
                "Filtered out %d invalid %s record(s) out of %d total",
                len(result.rejected), self.schema.kind.value, result.total_rows
            )

        return result

    def _canonicalize_keys(self, raw_record: Mapping[str, Any]) -> Dict[str, Any]:
        # Several raw spellings may collapse onto one key; the first non-blank value is kept.
        columns: Dict[str, Any] = {}
        for key, value in raw_record.items():
            canonical_key = self.field_normalizer.normalize(str(key))
            if self._is_blank(columns.get(canonical_key)):
                columns[canonical_key] = value
        return columns

    def _resolve(self, columns: Dict[str, Any], aliases: tuple) -> Any:
        for alias in aliases:
            value = columns.get(alias)
            if not self._is_blank(value):
                return value
        return None

    @staticmethod
    def _is_blank(value: Any) -> bool:
        if value is None:
            return True
        if isinstance(value, str):
            return value.strip() == ""
        return False

    def _validate_required_fields(self, values: Dict[str, Any]) -> None:
        missing = [name for name in self.schema.required_fields if not values.get(name)]
        if missing:
            raise RecordRejected(
                f"Required field(s) {', '.join(missing)} missing or empty",
                missing_fields=missing,
            )


def normalize_records(kind: RecordKind, raw_records: List[Mapping[str, Any]]) -> NormalizationResult:
    """Normalize raw rows of one dataset kind with a fresh RecordNormalizer."""
    return RecordNormalizer.for_kind(kind).normalize_batch(raw_records)
