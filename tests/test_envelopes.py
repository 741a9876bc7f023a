"""
Tests for envelope normalization
"""

import pytest

from gong_gateway.integrations.envelopes import (
    ENVELOPES,
    GongResource,
    extract_records,
    normalize_page,
    unwrap_list,
)
from gong_gateway.models.schemas import Call, Deal, Email, User

PAGINATED = [
    (GongResource.CALLS, "calls", Call),
    (GongResource.USERS, "users", User),
    (GongResource.DEALS, "deals", Deal),
    (GongResource.EMAILS, "emailActivities", Email),
]


class TestEnvelopeTable:
    """Tests for the resource mapping table"""

    def test_every_resource_has_an_envelope(self):
        """Test no resource is missing from the table"""
        assert set(ENVELOPES) == set(GongResource)

    @pytest.mark.parametrize("resource,field,model", PAGINATED)
    def test_paginated_resources_read_records_metadata(self, resource, field, model):
        """Test listing resources use the nested records object"""
        assert ENVELOPES[resource].records_field == field
        assert ENVELOPES[resource].metadata_field == "records"


class TestNormalizePage:
    """Tests for paginated normalization"""

    @pytest.mark.parametrize("resource,field,model", PAGINATED)
    def test_metadata_copied_exactly(self, resource, field, model):
        """Test cursor and totalRecords come straight from the envelope"""
        payload = {
            "requestId": "r",
            "records": {"cursor": "opaque==", "totalRecords": 5000, "currentPageSize": 1},
            field: [{"id": "x1"}],
        }

        page = normalize_page(resource, payload, model)

        assert page.cursor == "opaque=="
        assert page.total_records == 5000
        assert len(page.records) == 1
        assert isinstance(page.records[0], model)

    @pytest.mark.parametrize("resource,field,model", PAGINATED)
    def test_missing_array_is_empty(self, resource, field, model):
        """Test an absent record array is an empty list"""
        page = normalize_page(resource, {"records": {"totalRecords": 0}}, model)

        assert page.records == []
        assert page.total_records == 0
        assert page.cursor is None

    @pytest.mark.parametrize("resource,field,model", PAGINATED)
    def test_null_array_and_metadata(self, resource, field, model):
        """Test explicit nulls are treated like absence"""
        page = normalize_page(resource, {field: None, "records": None}, model)

        assert page.records == []
        assert page.cursor is None
        assert page.total_records is None

    @pytest.mark.parametrize("metadata", [["cursor", "c"], "opaque", 7, True])
    def test_non_dict_metadata_is_ignored(self, metadata):
        """Test a metadata value that is not an object reads as absent"""
        page = normalize_page(GongResource.CALLS, {"records": metadata, "calls": [{"id": "c1"}]}, Call)

        assert page.cursor is None
        assert page.total_records is None
        assert len(page.records) == 1

    def test_record_order_is_preserved(self):
        """Test records keep upstream order"""
        payload = {"calls": [{"id": str(n)} for n in range(5)]}

        page = normalize_page(GongResource.CALLS, payload, Call)

        assert [call.id for call in page.records] == ["0", "1", "2", "3", "4"]

    def test_total_records_is_not_page_length(self):
        """Test total_records reflects upstream, not len(records)"""
        payload = {"records": {"totalRecords": 900}, "users": [{"id": "u1"}]}

        page = normalize_page(GongResource.USERS, payload, User)

        assert page.total_records == 900
        assert len(page.records) == 1

    def test_wire_aliases_on_dump(self):
        """Test the normalized page dumps in Gong's camelCase"""
        payload = {"records": {"cursor": "c", "totalRecords": 1}, "deals": [{"id": "d1"}]}

        dumped = normalize_page(GongResource.DEALS, payload, Deal).model_dump(
            by_alias=True, exclude_none=True
        )

        assert dumped["totalRecords"] == 1
        assert dumped["cursor"] == "c"
        assert dumped["records"][0]["id"] == "d1"


class TestUnwrapList:
    """Tests for flat normalization"""

    def test_raw_records_without_model(self):
        """Test stats-style payloads stay plain dicts"""
        stats = [{"userId": "u1", "anything": {"nested": True}}]

        assert unwrap_list(GongResource.USER_STATS, {"usersStats": stats}) == stats

    def test_missing_field_is_empty(self):
        """Test flat lookups default to an empty list"""
        assert unwrap_list(GongResource.CRM_CALL_LINKS, {"requestId": "r"}) == []

    def test_non_dict_payload_is_empty(self):
        """Test unexpected bodies normalize to no records"""
        assert extract_records(GongResource.LIBRARY_FOLDERS, None) == []
        assert extract_records(GongResource.LIBRARY_FOLDERS, []) == []

    def test_unknown_upstream_fields_are_kept(self):
        """Test records keep fields the models do not declare"""
        calls = unwrap_list(
            GongResource.CALLS_EXTENSIVE,
            {"calls": [{"id": "c1", "isPrivate": False, "meetingUrl": "https://meet"}]},
            Call,
        )

        assert calls[0].model_dump(by_alias=True)["meetingUrl"] == "https://meet"
