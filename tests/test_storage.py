"""
Tests for the JSON record and user stores.
"""

import json
import pytest
from namematch.errors import InvalidArgumentError, RecordNotFoundError, RecordStoreError
from namematch.storage import JsonRecordStore, JsonUserStore


@pytest.fixture
def store(tmp_path):
    return JsonRecordStore(tmp_path / "records.json")


class TestJsonRecordStore:
    """Tests for JsonRecordStore."""

    def test_missing_file_is_empty(self, store):
        assert store.get_records() == []

    def test_add_record(self, store):
        """Test that a new record is standardized, active and numbered from 1."""
        record = store.add_record("  sureesh kumar ", "suspect", case_number="CASE-1",
                                  department="District 1", created_by=2,
                                  created_by_name="officer1")
        assert record.id == 1
        assert record.original_name == "sureesh kumar"
        assert record.standardized_name == "Suresh Kumar"
        assert record.is_active is True
        assert record.created_at
        assert store.get_record(1) == record

    def test_file_is_plain_json(self, store):
        store.add_record("Anjali Devi", "witness")
        with open(store.path, encoding='utf-8') as f:
            data = json.load(f)
        assert data[0]['original_name'] == "Anjali Devi"
        assert data[0]['is_active'] is True

    def test_ids_never_reused(self, store):
        store.add_record("Suresh Kumar", "suspect")
        store.add_record("Anjali Devi", "witness")
        store.deactivate_record(2)
        record = store.add_record("Ramesh Singh", "victim")
        assert record.id == 3

    def test_deactivated_record_hidden(self, store):
        store.add_record("Suresh Kumar", "suspect")
        store.deactivate_record(1)
        with pytest.raises(RecordNotFoundError):
            store.get_record(1)
        assert store.get_active_records() == []
        assert len(store.get_records()) == 1

    def test_deactivate_twice(self, store):
        store.add_record("Suresh Kumar", "suspect")
        store.deactivate_record(1)
        assert store.deactivate_record(1).is_active is False

    def test_cannot_reactivate(self, store):
        """Test that a soft-deleted record can never become active again."""
        store.add_record("Suresh Kumar", "suspect")
        store.deactivate_record(1)
        with pytest.raises(InvalidArgumentError):
            store.update_record(1, is_active=True)

    def test_update_record(self, store):
        store.add_record("Suresh Kumar", "suspect")
        updated = store.update_record(1, case_number="CASE-9")
        assert updated.case_number == "CASE-9"
        assert store.get_record(1).case_number == "CASE-9"

    def test_update_rejects_id_and_unknown_fields(self, store):
        store.add_record("Suresh Kumar", "suspect")
        with pytest.raises(InvalidArgumentError):
            store.update_record(1, id=5)
        with pytest.raises(InvalidArgumentError):
            store.update_record(1, nickname="Sonu")

    def test_update_missing_record(self, store):
        with pytest.raises(RecordNotFoundError):
            store.update_record(42, case_number="X")

    @pytest.mark.parametrize("name,person_type", [("", "suspect"), ("  ", "suspect"), ("Suresh", "")])
    def test_add_requires_name_and_type(self, store, name, person_type):
        with pytest.raises(InvalidArgumentError):
            store.add_record(name, person_type)

    def test_corrupt_file(self, store):
        store.path.write_text("{not json", encoding='utf-8')
        with pytest.raises(RecordStoreError):
            store.get_records()

    @pytest.mark.parametrize("item", [{"person_type": "suspect"}, "Suresh Kumar"])
    def test_malformed_record(self, store, item):
        """Test that a record missing required fields is a storage error."""
        store.path.write_text(json.dumps([item]), encoding='utf-8')
        with pytest.raises(RecordStoreError):
            store.get_records()


class TestJsonUserStore:
    """Tests for JsonUserStore."""

    @pytest.fixture(scope="class")
    def users(self, tmp_path_factory):
        store = JsonUserStore(tmp_path_factory.mktemp("users") / "users.json")
        store.seed_demo_users()
        return store

    def test_seeded_users(self, users):
        usernames = [u['username'] for u in users.get_users()]
        assert usernames == ['admin', 'officer1', 'officer2']

    def test_passwords_are_hashed(self, users):
        admin = users.get_user('admin')
        assert admin['password'] != 'admin123'
        assert admin['password'].startswith('$2')

    def test_verify_credentials(self, users):
        user = users.verify_credentials('officer1', 'officer123')
        assert user['role'] == 'officer'
        assert user['department'] == 'District 1'
        assert 'password' not in user

    def test_wrong_password(self, users):
        assert users.verify_credentials('admin', 'wrong') is None
        assert users.verify_credentials('nobody', 'admin123') is None
