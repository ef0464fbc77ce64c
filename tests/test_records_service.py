from datetime import datetime

import pytest

from db.models import Record
from db.engine import get_session
from services.records_service import RecordsService, sequence_sortkey
from tests.factories import RecordFactory


def test_list_all_returns_whole_collection_in_sequence_order(session):
    for no in ("10", "2", "1"):
        RecordFactory(no=no, created_at=datetime(2025, 1, 1))
    records = RecordsService.list_all(session)
    assert [r.no for r in records] == ["1", "2", "10"]


def test_sequence_sortkey_puts_text_after_numbers():
    values = ["b", "3", "", "12", "a"]
    assert sorted(values, key=sequence_sortkey) == ["3", "12", "", "a", "b"]


def test_update_field_writes_through_and_stamps(session):
    """An inline edit is visible from a fresh session once committed."""
    record = RecordFactory(date="01/01/2025", updated_at=datetime(2020, 1, 1))
    target = RecordsService.get(session, record.id)

    RecordsService.update_field(session, target, "date", "05/05/2025")
    session.commit()

    fresh = get_session()
    try:
        stored = fresh.get(Record, record.id)
        assert stored.date == "05/05/2025"
        assert stored.updated_at > datetime(2020, 1, 1)
    finally:
        fresh.close()


def test_update_status_and_staff_must_be_in_vocabulary(session):
    record = RecordsService.get(session, RecordFactory().id)
    RecordsService.update_field(session, record, "status", "Incomplete")
    RecordsService.update_field(session, record, "staff", "SAKINAH")
    assert (record.status, record.staff) == ("Incomplete", "SAKINAH")

    with pytest.raises(ValueError):
        RecordsService.update_field(session, record, "status", "Done")
    with pytest.raises(ValueError):
        RecordsService.update_field(session, record, "staff", "NOBODY")


def test_read_only_fields_cannot_be_edited(session):
    record = RecordsService.get(session, RecordFactory().id)
    for field in ("title", "accession", "no", "call_no_082", "id", "created_at"):
        with pytest.raises(ValueError):
            RecordsService.update_field(session, record, field, "x")


def test_edit_does_not_recheck_uniqueness(session):
    """Giving a record another record's pair is allowed on edit."""
    RecordFactory(control_number="C1", accession="A1")
    other = RecordsService.get(session, RecordFactory(control_number="C2", accession="A1").id)
    RecordsService.update_field(session, other, "control_number", "C1")
    session.commit()
    assert session.query(Record).filter(Record.control_number == "C1").count() == 2


def test_non_string_field_is_rejected(session):
    record = RecordsService.get(session, RecordFactory().id)
    for field in (["status"], None, 3):
        with pytest.raises(ValueError):
            RecordsService.update_field(session, record, field, "Complete")
