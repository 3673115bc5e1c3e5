# ==============================================
# Dataset Store
# ==============================================
#
# PURPOSE:
#   Hold the normalized datasets a session is working with, one
#   per owner (the page or feed that loaded it), plus a pointer to
#   the dataset that is currently active.
#
#   A store is an ordinary object handed to whoever needs it; there
#   is no module-level instance.
#
# ENUMS:
# ------
# - DatasetOwner: HOME, TEXT/CALL/FORM/CUSTOMER_CALL recruitment inbound
# - DataSource: API, UPLOAD
#
# CLASSES:
# --------
# - Dataset       → kind + records + session id + source
# - DatasetStore  → claim / activate / active / get / clear
#
# ==============================================

import logging
from enum import Enum
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from care_analytics.normalization import RecordKind

logger = logging.getLogger(__name__)


class DatasetOwner(Enum):
    HOME = "home"
    TEXT_RECRUITMENT_INBOUND = "text_recruitment_inbound"
    CALL_RECRUITMENT_INBOUND = "call_recruitment_inbound"
    FORM_RECRUITMENT_INBOUND = "form_recruitment_inbound"
    CUSTOMER_CALL_RECRUITMENT_INBOUND = "customer_call_recruitment_inbound"


class DataSource(Enum):
    API = "api"
    UPLOAD = "upload"


@dataclass(frozen=True)
class Dataset:
    """One normalized dataset and where it came from."""
    kind: RecordKind
    records: Tuple[Any, ...]
    session_id: Optional[str] = None
    source: DataSource = DataSource.API

    def __len__(self) -> int:
        return len(self.records)


class DatasetStore:
    """Owner-scoped datasets with an explicit active pointer."""

    def __init__(self):
        self._datasets: Dict[DatasetOwner, Dataset] = {}
        self._active_owner: Optional[DatasetOwner] = None

    def claim(self, owner: DatasetOwner, dataset: Dataset) -> None:
        """Store `dataset` for `owner`, replacing any previous one, and make it active."""
        self._datasets[owner] = dataset
        self._active_owner = owner
        logger.debug("%s claimed %d %s record(s) from %s",
                     owner.value, len(dataset), dataset.kind.value, dataset.source.value)

    def activate(self, owner: DatasetOwner) -> None:
        if owner not in self._datasets:
            raise KeyError(f"No dataset claimed by {owner.value}")
        self._active_owner = owner

    @property
    def active_owner(self) -> Optional[DatasetOwner]:
        return self._active_owner

    @property
    def active(self) -> Optional[Dataset]:
        if self._active_owner is None:
            return None
        return self._datasets.get(self._active_owner)

    def get(self, owner: DatasetOwner, kind: Optional[RecordKind] = None) -> Optional[Dataset]:
        """
        Dataset claimed by `owner`, or None.

        When `kind` is given, a dataset of another kind is treated as absent.
        """
        dataset = self._datasets.get(owner)
        if dataset is None or (kind is not None and dataset.kind is not kind):
            return None
        return dataset

    def clear(self, owner: Optional[DatasetOwner] = None) -> None:
        """Drop one owner's dataset, or every dataset when no owner is given."""
        if owner is None:
            self._datasets.clear()
            self._active_owner = None
            return

        self._datasets.pop(owner, None)
        if self._active_owner is owner:
            self._active_owner = None

    def __contains__(self, owner: DatasetOwner) -> bool:
        return owner in self._datasets

    def __len__(self) -> int:
        return len(self._datasets)
