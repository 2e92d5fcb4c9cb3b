"""
NoteKeeper Backend — Note Service Unit Tests
=============================================

What:  Tests for NoteService business logic (id parsing, CRUD rules).
How:   Runs against a real seeded NoteStore; no HTTP involved.

What we test:
    ✅ Non-numeric ids raise ValidationError, unknown ids raise NotFoundError
    ✅ Create rejects client-supplied ids without mutating the collection
    ✅ Update preserves the id and ignores any id in the body
    ✅ Delete makes later gets fail with NotFoundError
"""

import pytest

from notekeeper.exceptions import NotFoundError, ValidationError
from notekeeper.schemas.note import NotePayload


class TestParseId:

    @pytest.mark.parametrize("raw", ["abc", "1.5", "", "1a", "one", "0_1", "1_0", " 1", "1 ", "\u0661"])
    def test_non_numeric_is_invalid(self, note_service, raw):
        with pytest.raises(ValidationError) as exc_info:
            note_service.parse_id(raw)
        assert exc_info.value.message == "Invalid ID"
        assert exc_info.value.field == "id"

    def test_numeric_parses(self, note_service):
        assert note_service.parse_id("42") == 42


class TestNoteServiceGet:

    def test_get_seeded_note(self, note_service):
        result = note_service.get_note("1")
        assert result.id == 1
        assert result.title == "First Note"
        assert result.content == "Just a note"

    def test_get_missing_raises_not_found(self, note_service):
        with pytest.raises(NotFoundError) as exc_info:
            note_service.get_note("99")
        assert exc_info.value.message == "not found"
        assert exc_info.value.context["resource_id"] == 99

    @pytest.mark.parametrize("raw", ["0", "-1"])
    def test_non_positive_id_is_not_found(self, note_service, raw):
        with pytest.raises(NotFoundError):
            note_service.get_note(raw)

    def test_non_numeric_id_is_invalid_not_missing(self, note_service):
        with pytest.raises(ValidationError):
            note_service.get_note("abc")


class TestNoteServiceList:

    def test_list_returns_all_notes(self, note_service):
        result = note_service.list_notes()
        assert {n.id for n in result} == {1, 2, 3, 4}

    def test_list_empty(self, empty_store):
        from notekeeper.services.note_service import NoteService
        assert NoteService(empty_store).list_notes() == []


class TestNoteServiceCreate:

    def test_create_assigns_next_id(self, note_service, sample_payload):
        result = note_service.create_note(sample_payload)
        assert result.id == 5
        assert result.title == sample_payload.title
        assert result.content == sample_payload.content

    def test_create_then_get_round_trips(self, note_service, sample_payload):
        created = note_service.create_note(sample_payload)
        fetched = note_service.get_note(str(created.id))
        assert fetched == created

    def test_create_ids_strictly_increase(self, note_service, sample_payload):
        first = note_service.create_note(sample_payload)
        second = note_service.create_note(sample_payload)
        assert second.id > first.id

    def test_zero_id_counts_as_absent(self, note_service):
        result = note_service.create_note(NotePayload(id=0, title="t", content="c"))
        assert result.id == 5

    def test_client_id_rejected_without_mutation(self, note_service, store):
        with pytest.raises(ValidationError, match="must not be supplied"):
            note_service.create_note(NotePayload(id=7, title="t", content="c"))

        assert store.count() == 4
        assert store.last_id == 4
        assert store.get(7) is None


class TestNoteServiceUpdate:

    def test_update_replaces_title_and_content(self, note_service):
        result = note_service.update_note("3", NotePayload(title="New", content="Body"))
        assert result.id == 3
        assert result.title == "New"
        assert result.content == "Body"
        assert note_service.get_note("3") == result

    def test_update_ignores_body_id(self, note_service, store):
        result = note_service.update_note("3", NotePayload(id=99, title="New", content="Body"))
        assert result.id == 3
        assert store.get(99) is None

    def test_update_missing_raises_not_found(self, note_service, sample_payload):
        with pytest.raises(NotFoundError):
            note_service.update_note("99", sample_payload)

    def test_update_invalid_id(self, note_service, sample_payload):
        with pytest.raises(ValidationError):
            note_service.update_note("abc", sample_payload)


class TestNoteServiceDelete:

    def test_delete_then_get_is_not_found(self, note_service):
        note_service.delete_note("2")
        with pytest.raises(NotFoundError):
            note_service.get_note("2")

    def test_delete_twice_is_not_found(self, note_service):
        note_service.delete_note("2")
        with pytest.raises(NotFoundError):
            note_service.delete_note("2")

    def test_delete_invalid_id(self, note_service):
        with pytest.raises(ValidationError):
            note_service.delete_note("abc")
