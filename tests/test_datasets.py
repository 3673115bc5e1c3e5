# ==============================================
# Tests for the Dataset Store
# ==============================================

import pytest

from care_analytics.datasets import Dataset, DataSource, DatasetOwner, DatasetStore
from care_analytics.normalization import RecordKind


@pytest.fixture
def store(candidates, customers):
    store = DatasetStore()
    store.claim(DatasetOwner.CALL_RECRUITMENT_INBOUND, Dataset(RecordKind.CANDIDATE, tuple(candidates)))
    store.claim(DatasetOwner.CUSTOMER_CALL_RECRUITMENT_INBOUND,
                Dataset(RecordKind.CUSTOMER, tuple(customers), session_id="s-1", source=DataSource.UPLOAD))
    return store


class TestDatasetStore:
    def test_empty_store(self):
        store = DatasetStore()
        assert store.active is None
        assert store.active_owner is None
        assert store.get(DatasetOwner.HOME) is None

    def test_claim_activates(self, store):
        assert store.active_owner is DatasetOwner.CUSTOMER_CALL_RECRUITMENT_INBOUND
        assert store.active.session_id == "s-1"
        assert len(store) == 2

    def test_activate(self, store):
        store.activate(DatasetOwner.CALL_RECRUITMENT_INBOUND)

        assert store.active.kind is RecordKind.CANDIDATE
        assert len(store.active) == 3

    def test_activate_unknown_owner(self, store):
        with pytest.raises(KeyError):
            store.activate(DatasetOwner.FORM_RECRUITMENT_INBOUND)

    def test_get_filters_by_kind(self, store):
        owner = DatasetOwner.CALL_RECRUITMENT_INBOUND
        assert store.get(owner, RecordKind.CANDIDATE) is not None
        assert store.get(owner, RecordKind.CUSTOMER) is None

    def test_owners_are_isolated(self, store, form_submissions):
        store.claim(DatasetOwner.FORM_RECRUITMENT_INBOUND, Dataset(RecordKind.FORM, tuple(form_submissions)))

        assert store.get(DatasetOwner.CALL_RECRUITMENT_INBOUND).kind is RecordKind.CANDIDATE
        assert DatasetOwner.FORM_RECRUITMENT_INBOUND in store

    def test_clear_one_owner(self, store):
        store.clear(DatasetOwner.CUSTOMER_CALL_RECRUITMENT_INBOUND)

        assert store.active is None
        assert DatasetOwner.CALL_RECRUITMENT_INBOUND in store

    def test_clear_all(self, store):
        store.clear()
        assert len(store) == 0
        assert store.active_owner is None
