"""
Tests for opening the record store: first-run seeding and rejection of bad data files
"""
import json

import pytest

from smartbizflow.core.exceptions import StoreInitError
from smartbizflow.core.security import verify_password
from smartbizflow.db.seed import ADMIN_PASSWORD, EMPLOYEE_PASSWORD, HR_PASSWORD
from smartbizflow.db.store import RecordStore
from smartbizflow.models.registry import COLLECTION_NAMES


def test_missing_file_is_created_with_every_collection(tmp_path):
    path = tmp_path / "nested" / "dir" / "hrms.json"
    record_store = RecordStore(path, seed_demo_data=False)
    record_store.initialize()

    assert path.exists()
    document = json.loads(path.read_text(encoding="utf-8"))
    assert set(document) == set(COLLECTION_NAMES)
    assert all(records == [] for records in document.values())
    record_store.close()


def test_first_run_seeds_demo_data(tmp_path):
    """Real bcrypt cost here: the stored hashes must verify and must not be weak"""
    record_store = RecordStore(tmp_path / "hrms.json")
    record_store.initialize()

    admin = record_store.find_one("users", email="admin@smartbizflow.com")
    hr = record_store.find_one("users", email="hr@smartbizflow.com")
    john = record_store.find_one("users", email="john.doe@smartbizflow.com")

    assert admin["role"] == "ADMIN"
    assert hr["role"] == "HR_MANAGER"
    assert john["role"] == "EMPLOYEE"
    assert admin["password"] != ADMIN_PASSWORD
    assert admin["password"].startswith("$2b$12$")
    assert verify_password(ADMIN_PASSWORD, admin["password"])
    assert verify_password(HR_PASSWORD, hr["password"])
    assert verify_password(EMPLOYEE_PASSWORD, john["password"])

    stats = record_store.stats()
    assert stats["users"] == 5
    assert stats["employees"] == 5
    assert stats["trainingCourses"] == 2
    assert stats["benefits"] == 2
    assert stats["auditLogs"] == 0
    record_store.close()


def test_existing_file_is_never_reseeded(seeded_store, password_hasher):
    seeded_store.delete("benefits", "benefit-001")
    seeded_store.close()

    reopened = RecordStore(seeded_store.path, seed_demo_data=True, password_hasher=password_hasher)
    reopened.initialize()
    assert reopened.get_by_id("benefits", "benefit-001") is None
    assert reopened.count("benefits") == 1
    reopened.close()


def test_initialize_is_idempotent(store):
    created = store.create("benefits", {"name": "Meal", "type": "MEAL", "cost": 10, "isActive": True})
    store.initialize()
    assert store.get_by_id("benefits", created["id"]) == created


def test_corrupt_json_is_rejected(tmp_path):
    path = tmp_path / "hrms.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(StoreInitError, match="not valid JSON"):
        RecordStore(path).initialize()
    assert path.read_text(encoding="utf-8") == "{not json"


def test_non_object_document_is_rejected(tmp_path):
    path = tmp_path / "hrms.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")

    with pytest.raises(StoreInitError, match="JSON object"):
        RecordStore(path).initialize()


def test_collection_with_wrong_shape_is_rejected(tmp_path):
    path = tmp_path / "hrms.json"
    path.write_text(json.dumps({"employees": {"id": "emp-1"}}), encoding="utf-8")

    with pytest.raises(StoreInitError, match="employees"):
        RecordStore(path).initialize()


def test_missing_collections_are_added_and_extra_keys_kept(tmp_path):
    path = tmp_path / "hrms.json"
    path.write_text(
        json.dumps({"employees": [{"id": "emp-1", "firstName": "Ada"}], "legacyNotes": "keep me"}),
        encoding="utf-8",
    )

    record_store = RecordStore(path)
    record_store.initialize()
    assert record_store.get_by_id("employees", "emp-1")["firstName"] == "Ada"
    assert record_store.count("payroll") == 0

    record_store.create("payroll", {"employeeId": "emp-1", "month": 1, "year": 2024, "netSalary": 1})
    document = json.loads(path.read_text(encoding="utf-8"))
    assert document["legacyNotes"] == "keep me"
    assert len(document["payroll"]) == 1
    record_store.close()


def test_uncreatable_directory_is_rejected(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")

    with pytest.raises(StoreInitError):
        RecordStore(blocker / "data" / "hrms.json", seed_demo_data=False).initialize()


def test_failed_initialize_leaves_store_closed(tmp_path):
    path = tmp_path / "hrms.json"
    path.write_text("garbage", encoding="utf-8")
    record_store = RecordStore(path)

    with pytest.raises(StoreInitError):
        record_store.initialize()
    assert not record_store.is_open

    with pytest.raises(StoreInitError):
        record_store.list("employees")
