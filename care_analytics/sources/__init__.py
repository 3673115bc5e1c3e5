from .records_api import (
    LOCATIONS,
    RecruitmentKind,
    RecordsApiClient,
    fetch_records,
    recruitment_table_name,
)

__all__ = [
    "LOCATIONS",
    "RecruitmentKind",
    "RecordsApiClient",
    "fetch_records",
    "recruitment_table_name",
]
