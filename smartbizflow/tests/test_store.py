"""
Tests for the JSON-file record store: CRUD, filtering, persistence and rollback
"""
import json
import re
from datetime import date, datetime, timezone

import pytest

from smartbizflow.core.exceptions import (
    AppendOnlyCollectionError,
    NotFoundError,
    StoreIOError,
    UnknownCollectionError,
)
from smartbizflow.db.store import RecordStore, generate_id
from smartbizflow.models import EmployeeStatus, LeaveType
from smartbizflow.models.registry import COLLECTION_NAMES


ADA = {
    "employeeId": "EMP010",
    "firstName": "Ada",
    "lastName": "Lovelace",
    "email": "ada@co.com",
    "department": "Engineering",
    "position": "Engineer",
    "hireDate": "2024-01-01",
    "salary": 90000,
    "status": "ACTIVE",
}


def _employee(code, department, **extra):
    record = {
        "employeeId": code,
        "firstName": f"First{code}",
        "lastName": f"Last{code}",
        "email": f"{code.lower()}@co.com",
        "department": department,
        "position": "Staff",
        "hireDate": "2024-01-01",
        "salary": 50000,
        "status": "ACTIVE",
    }
    record.update(extra)
    return record


def _failing_write(*args, **kwargs):
    raise OSError("disk full")


def test_create_then_update_employee(store):
    """Create assigns id and timestamps; update merges and moves updatedAt forward"""
    created = store.create("employees", ADA)

    assert created["id"]
    assert created["id"].startswith("emp-")
    assert created["createdAt"] == created["updatedAt"]
    assert len(store.list("employees")) == 1

    updated = store.update("employees", created["id"], {"salary": 95000})
    assert updated["salary"] == 95000
    assert updated["department"] == "Engineering"
    assert updated["updatedAt"] > updated["createdAt"]
    assert updated["createdAt"] == created["createdAt"]


def test_create_ignores_caller_supplied_managed_fields(store):
    created = store.create("employees", dict(ADA, id="my-id", createdAt="1999-01-01T00:00:00.000000Z"))
    assert created["id"] != "my-id"
    assert created["createdAt"] != "1999-01-01T00:00:00.000000Z"


def test_timestamps_are_iso_utc(store):
    created = store.create("employees", ADA)
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{6}Z", created["createdAt"])


def test_returned_records_are_copies(store):
    created = store.create("employees", ADA)
    created["salary"] = 1
    fetched = store.get_by_id("employees", created["id"])
    fetched["department"] = "Changed"

    again = store.get_by_id("employees", created["id"])
    assert again["salary"] == 90000
    assert again["department"] == "Engineering"


def test_round_trip_every_collection(tmp_path):
    """Records of every type survive close and re-open unchanged"""
    path = tmp_path / "hrms.json"
    payloads = {
        "users": {"email": "a@co.com", "password": "$2b$04$x", "role": "ADMIN", "isActive": True, "lastLogin": None},
        "employees": dict(ADA, dateOfBirth=date(1990, 12, 10), gender="FEMALE", managerId=None),
        "attendance": {
            "employeeId": "emp-1",
            "date": "2024-03-01",
            "checkIn": datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc),
            "checkOut": None,
            "totalHours": 7.5,
            "status": "PRESENT",
        },
        "leaves": {
            "employeeId": "emp-1",
            "type": LeaveType.SICK,
            "startDate": "2024-03-04",
            "endDate": "2024-03-05",
            "days": 2,
            "reason": "Flu",
            "status": "PENDING",
        },
        "payroll": {
            "employeeId": "emp-1",
            "month": 3,
            "year": 2024,
            "basicSalary": 5000.5,
            "allowances": 250,
            "deductions": 100,
            "netSalary": 5150.5,
            "status": "PENDING",
        },
        "trainingCourses": {"title": "Python", "category": "Technical", "level": "Beginner", "duration": 8},
        "employeeTraining": {"employeeId": "emp-1", "courseId": "course-1", "status": "ENROLLED", "progress": 0},
        "benefits": {"name": "Meal", "type": "MEAL", "cost": 100, "isActive": True},
        "employeeBenefits": {"employeeId": "emp-1", "benefitId": "benefit-1", "startDate": "2024-01-01", "status": "ACTIVE", "cost": 100},
    }

    originals = {}
    with RecordStore(path, seed_demo_data=False) as record_store:
        for collection, payload in payloads.items():
            for _ in range(3):
                created = record_store.create(collection, payload)
                originals[(collection, created["id"])] = created
        entry = record_store.log_audit({"userId": "user-1", "action": "CREATE", "table": "employees"})
        originals[("auditLogs", entry["id"])] = entry

    reopened = RecordStore(path, seed_demo_data=False)
    reopened.initialize()
    for (collection, record_id), original in originals.items():
        assert reopened.get_by_id(collection, record_id) == original

    employee = next(r for (c, _), r in originals.items() if c == "employees")
    assert employee["dateOfBirth"] == "1990-12-10"
    assert employee["managerId"] is None
    leave = next(r for (c, _), r in originals.items() if c == "leaves")
    assert leave["type"] == "SICK"
    reopened.close()


def test_generated_ids_are_unique():
    ids = {generate_id("emp") for _ in range(10000)}
    assert len(ids) == 10000
    assert all(re.fullmatch(r"emp-\d+-[0-9a-z]{9}", record_id) for record_id in list(ids)[:50])


def test_ten_thousand_creates_get_distinct_ids(store, monkeypatch):
    # skip the full-document rewrite per create; ids come from the in-memory path
    monkeypatch.setattr(store, "_flush", lambda: None)
    ids = [store.create("benefits", {"name": f"B{i}", "type": "OTHER", "cost": i, "isActive": True})["id"]
           for i in range(10000)]
    assert len(set(ids)) == 10000
    assert store.count("benefits") == 10000
    assert all(re.fullmatch(r"benefit-\d+-[0-9a-z]{9}", record_id) for record_id in ids[:50])


def test_delete_is_idempotent(store):
    created = store.create("employees", ADA)
    store.create("employees", _employee("EMP011", "Sales"))

    assert store.delete("employees", created["id"]) is True
    assert store.count("employees") == 1
    assert store.delete("employees", created["id"]) is False
    assert store.count("employees") == 1


def test_filters_are_conjunctive(store):
    for code, department, status in [
        ("E1", "Engineering", "ACTIVE"),
        ("E2", "Sales", "ACTIVE"),
        ("E3", "Sales", "INACTIVE"),
        ("E4", "Marketing", "ACTIVE"),
        ("E5", "Sales", "ACTIVE"),
    ]:
        store.create("employees", _employee(code, department, status=status))

    sales = store.list("employees", {"department": "Sales"})
    assert {r["employeeId"] for r in sales} == {"E2", "E3", "E5"}

    active_sales = store.list("employees", {"department": "Sales", "status": EmployeeStatus.ACTIVE})
    assert {r["employeeId"] for r in active_sales} == {"E2", "E5"}
    assert len(active_sales) <= len(sales)

    either = store.list("employees", {"department": ["Sales", "Marketing"], "status": "ACTIVE"})
    assert {r["employeeId"] for r in either} == {"E2", "E4", "E5"}


def test_none_values_and_unknown_keys_impose_no_constraint(store):
    store.create("employees", _employee("E1", "Engineering"))
    store.create("employees", _employee("E2", "Sales"))

    assert len(store.list("employees", {"department": None})) == 2
    assert len(store.list("employees", {"favouriteColour": "blue"})) == 2


def test_search_is_case_insensitive_substring(store):
    store.create("employees", ADA)
    store.create("employees", _employee("EMP011", "Sales", firstName="Grace", lastName="Hopper"))

    found = store.list("employees", {"search": "LOVE"})
    assert [r["employeeId"] for r in found] == ["EMP010"]
    assert store.count("employees", {"search": "hop"}) == 1
    assert store.count("employees", {"search": "nobody"}) == 0
    # search only looks at the collection's search fields
    assert store.count("employees", {"search": "Engineer"}) == 0


def test_callable_filter(store):
    store.create("employees", _employee("E1", "Sales", salary=30000))
    store.create("employees", _employee("E2", "Sales", salary=80000))
    rich = store.list("employees", lambda r: r["salary"] > 50000)
    assert [r["employeeId"] for r in rich] == ["E2"]


def test_pagination_edges(store):
    for i in range(5):
        store.create("employees", _employee(f"E{i}", "Sales"))

    assert len(store.list("employees", offset=3)) == 2
    assert store.list("employees", offset=10) == []
    assert len(store.list("employees", offset=-4)) == 5
    assert store.list("employees", limit=0) == []
    assert len(store.list("employees", limit=-1)) == 5
    assert len(store.list("employees", offset=1, limit=2)) == 2


def test_default_order_is_newest_first(store):
    first = store.create("employees", _employee("E1", "Sales"))
    second = store.create("employees", _employee("E2", "Sales"))
    ids = [r["id"] for r in store.list("employees")]
    if first["createdAt"] != second["createdAt"]:
        assert ids == [second["id"], first["id"]]
    assert set(ids) == {first["id"], second["id"]}


def test_sort_by_field_puts_missing_values_last(store):
    store.create("employees", _employee("E1", "Sales", salary=70000))
    store.create("employees", _employee("E2", "Sales", phone="555"))
    store.create("employees", _employee("E3", "Sales", salary=10000))

    by_phone = store.list("employees", sort_by="phone", descending=False)
    assert by_phone[0]["employeeId"] == "E2"

    by_salary = store.list("employees", sort_by="salary", descending=False)
    assert [r["salary"] for r in by_salary] == [10000, 50000, 70000]


def test_update_does_not_clobber_other_fields(store):
    created = store.create("employees", ADA)
    updated = store.update("employees", created["id"], {"status": "INACTIVE"})

    assert updated["status"] == "INACTIVE"
    for field in ("salary", "email", "department", "hireDate", "employeeId"):
        assert updated[field] == created[field]
    assert updated["updatedAt"] > created["updatedAt"]

    again = store.update("employees", created["id"], {"status": "ACTIVE"})
    assert again["updatedAt"] > updated["updatedAt"]


def test_update_cannot_change_id_or_created_at(store):
    created = store.create("employees", ADA)
    updated = store.update("employees", created["id"], {"id": "other", "createdAt": "2000-01-01T00:00:00.000000Z"})
    assert updated["id"] == created["id"]
    assert updated["createdAt"] == created["createdAt"]


def test_update_missing_record_raises_not_found(store):
    with pytest.raises(NotFoundError) as exc_info:
        store.update("employees", "emp-missing", {"salary": 1})
    assert exc_info.value.record_id == "emp-missing"


def test_get_and_find_missing_return_none(store):
    assert store.get_by_id("employees", "emp-missing") is None
    assert store.find_one("employees", email="nobody@co.com") is None


def test_create_rolls_back_when_write_fails(store, monkeypatch):
    store.create("employees", ADA)
    before = store.list("employees")

    monkeypatch.setattr(store, "_write_file", _failing_write)
    with pytest.raises(StoreIOError):
        store.create("employees", _employee("EMP011", "Sales"))

    assert store.list("employees") == before


def test_update_rolls_back_when_write_fails(store, monkeypatch):
    created = store.create("employees", ADA)

    monkeypatch.setattr(store, "_write_file", _failing_write)
    with pytest.raises(StoreIOError):
        store.update("employees", created["id"], {"salary": 1})

    assert store.get_by_id("employees", created["id"]) == created


def test_delete_rolls_back_when_write_fails(store, monkeypatch):
    created = store.create("employees", ADA)

    monkeypatch.setattr(store, "_write_file", _failing_write)
    with pytest.raises(StoreIOError):
        store.delete("employees", created["id"])

    assert store.get_by_id("employees", created["id"]) == created


def test_failed_write_leaves_file_unchanged(store, monkeypatch):
    store.create("employees", ADA)
    on_disk = store.path.read_text(encoding="utf-8")

    monkeypatch.setattr(store, "_write_file", _failing_write)
    with pytest.raises(StoreIOError):
        store.create("employees", _employee("EMP011", "Sales"))

    assert store.path.read_text(encoding="utf-8") == on_disk


def test_every_mutation_is_persisted(store):
    created = store.create("employees", ADA)
    store.update("employees", created["id"], {"salary": 1})

    document = json.loads(store.path.read_text(encoding="utf-8"))
    assert document["employees"][0]["salary"] == 1
    assert set(COLLECTION_NAMES) <= set(document)


def test_audit_logs_are_append_only(store):
    entry = store.log_audit({"userId": None, "action": "LOGIN", "table": "users"})
    assert entry["id"].startswith("audit-")
    assert "updatedAt" not in entry

    with pytest.raises(AppendOnlyCollectionError):
        store.create("auditLogs", {"action": "CREATE"})
    with pytest.raises(AppendOnlyCollectionError):
        store.update("auditLogs", entry["id"], {"action": "DELETE"})
    with pytest.raises(AppendOnlyCollectionError):
        store.delete("auditLogs", entry["id"])
    assert store.count("auditLogs") == 1


def test_unknown_collection_raises(store):
    with pytest.raises(UnknownCollectionError):
        store.list("departments")
    with pytest.raises(UnknownCollectionError):
        store.create("departments", {"name": "IT"})
    with pytest.raises(UnknownCollectionError):
        store.get_by_id("departments", "x")


def test_stats_counts_every_collection(store):
    store.create("employees", ADA)
    store.log_audit({"action": "CREATE", "table": "employees"})

    stats = store.stats()
    assert set(stats) == set(COLLECTION_NAMES)
    assert stats["employees"] == 1
    assert stats["auditLogs"] == 1
    assert stats["payroll"] == 0


def test_store_reopens_lazily_after_close(store):
    created = store.create("employees", ADA)
    store.close()
    assert not store.is_open

    assert store.get_by_id("employees", created["id"])["email"] == "ada@co.com"
    assert store.is_open


def test_backup_and_restore(store, tmp_path):
    kept = store.create("employees", ADA)
    backup_path = store.backup(tmp_path / "backups" / "hrms-backup.json")
    assert backup_path.exists()

    store.create("employees", _employee("EMP011", "Sales"))
    store.delete("employees", kept["id"])

    store.restore(backup_path)
    employees = store.list("employees")
    assert [r["id"] for r in employees] == [kept["id"]]

    reopened = RecordStore(store.path, seed_demo_data=False)
    assert reopened.count("employees") == 1
    reopened.close()
