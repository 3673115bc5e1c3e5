# ==============================================
# Tests for the Records API Source
# ==============================================

from unittest.mock import MagicMock, patch

import pytest
import requests

from care_analytics.exceptions import SourceError
from care_analytics.normalization import CandidateRecord, CustomerRecord, RecordKind
from care_analytics.sources import RecordsApiClient, RecruitmentKind, fetch_records, recruitment_table_name

API_URL = "https://records.example.invalid/webhook"


def _response(payload=None, status_code=200):
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.json.return_value = payload
    return response


class TestTableNames:
    @pytest.mark.parametrize("location, kind, table", [
        ("baltimore", RecruitmentKind.CALL, "Dev-Bsc-Baltimore-Staff-Inbound-Call-Recruitment"),
        ("pittsburgh", RecruitmentKind.TEXT, "Dev-Bsc-Pittsburgh-Staff-Inbound-Text-Recruitment"),
        ("Baltimore", RecruitmentKind.FORM, "Dev-BSC-Baltimore-Staff-Inbound-Form-Recruitment"),
        ("pittsburgh", RecruitmentKind.CUSTOMER_CALL, "Dev-Bsc-Pittsburgh-Customer-Inbound-Call-Recruitment"),
    ])
    def test_table_name(self, location, kind, table):
        assert recruitment_table_name(location, kind) == table

    def test_unknown_location(self):
        with pytest.raises(ValueError):
            recruitment_table_name("denver", RecruitmentKind.CALL)

    def test_record_kinds(self):
        assert RecruitmentKind.TEXT.record_kind is RecordKind.CANDIDATE
        assert RecruitmentKind.CUSTOMER_CALL.record_kind is RecordKind.CUSTOMER
        assert RecruitmentKind.FORM.record_kind is RecordKind.FORM


class TestRecordsApiClient:
    def test_requires_url(self):
        with pytest.raises(ValueError):
            RecordsApiClient("")

    @patch("care_analytics.sources.records_api.requests.get")
    def test_fetch_rows(self, mock_get):
        mock_get.return_value = _response([{"guid": "1"}])

        rows = RecordsApiClient(API_URL, timeout=3).fetch_rows("Some-Table")

        assert rows == [{"guid": "1"}]
        args, kwargs = mock_get.call_args
        assert args == (API_URL,)
        assert kwargs["params"] == {"table_name": "Some-Table"}
        assert kwargs["timeout"] == 3

    @patch("care_analytics.sources.records_api.requests.get")
    def test_http_error(self, mock_get):
        mock_get.return_value = _response(status_code=502)

        with pytest.raises(SourceError) as exc_info:
            RecordsApiClient(API_URL).fetch_rows("Some-Table")

        assert exc_info.value.status_code == 502

    @patch("care_analytics.sources.records_api.requests.get")
    def test_network_error(self, mock_get):
        mock_get.side_effect = requests.ConnectionError("refused")

        with pytest.raises(SourceError):
            RecordsApiClient(API_URL).fetch_rows("Some-Table")

    @patch("care_analytics.sources.records_api.requests.get")
    def test_non_list_payload(self, mock_get):
        mock_get.return_value = _response({"error": "nope"})

        with pytest.raises(SourceError):
            RecordsApiClient(API_URL).fetch_rows("Some-Table")

    @patch("care_analytics.sources.records_api.requests.get")
    def test_invalid_json(self, mock_get):
        response = _response()
        response.json.side_effect = ValueError("no json")
        mock_get.return_value = response

        with pytest.raises(SourceError):
            RecordsApiClient(API_URL).fetch_rows("Some-Table")


class TestFetchRecords:
    @patch("care_analytics.sources.records_api.requests.get")
    def test_candidate_feed(self, mock_get, raw_candidate_rows):
        mock_get.return_value = _response(raw_candidate_rows)

        result = fetch_records(RecordsApiClient(API_URL), "baltimore", RecruitmentKind.CALL)

        assert result.kind is RecordKind.CANDIDATE
        assert all(isinstance(r, CandidateRecord) for r in result.records)
        assert len(result.rejected) == 1
        assert mock_get.call_args[1]["params"]["table_name"] == "Dev-Bsc-Baltimore-Staff-Inbound-Call-Recruitment"

    @patch("care_analytics.sources.records_api.requests.get")
    def test_customer_feed(self, mock_get):
        mock_get.return_value = _response([{"contact_name": "Pat", "phone_number": "1", "zipcode": "21201"}])

        result = fetch_records(RecordsApiClient(API_URL), "pittsburgh", RecruitmentKind.CUSTOMER_CALL)

        assert isinstance(result.records[0], CustomerRecord)
        assert result.records[0].zip_code == "21201"
