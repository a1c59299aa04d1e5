from __future__ import annotations

from models import CompanyRecord
from services.field_mapping import FIELD_TABLE, apply_changes, resolve_field


def test_wire_and_attribute_names_resolve_to_attribute():
    assert resolve_field("company_name") == "name"
    assert resolve_field("name") == "name"
    assert resolve_field("company_name_id") == "id"
    assert resolve_field("zip_code") == "zip_code"


def test_unknown_names_do_not_resolve():
    assert resolve_field("data_impacts") is None
    assert resolve_field("companyName") is None


def test_table_covers_every_document_field():
    wire_names = set(CompanyRecord().to_document().keys())
    assert wire_names <= set(FIELD_TABLE)
    assert len(wire_names) == 21


def test_apply_changes_returns_skipped_keys():
    record = CompanyRecord(id="1", name="Old", description="d")
    skipped = apply_changes(record, {"company_name": "New", "bogus": 1, "url": "https://new.example"})
    assert skipped == ["bogus"]
    assert record.name == "New"
    assert record.url == "https://new.example"
