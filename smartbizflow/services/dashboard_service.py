"""
Dashboard service - headline counts and store statistics
"""
from typing import Dict, Optional

from smartbizflow.db.store import RecordStore
from smartbizflow.models import AttendanceStatus, EmployeeStatus, LeaveStatus, TrainingStatus
from smartbizflow.utils.datetime_utils import now_utc

# Attendance statuses that count as being at work
PRESENT_STATUSES = (
    AttendanceStatus.PRESENT,
    AttendanceStatus.LATE,
    AttendanceStatus.HALF_DAY,
    AttendanceStatus.WORK_FROM_HOME,
)


def get_dashboard_stats(store: RecordStore, today: Optional[str] = None) -> Dict[str, int]:
    """
    Counts shown on the HR dashboard

    Args:
        store: Record store
        today: Day to report attendance for (YYYY-MM-DD); defaults to the current UTC day

    Returns:
        totalEmployees (active), presentToday, pendingLeaves, activeTrainings
    """
    day = today or now_utc().date().isoformat()
    present = {status.value for status in PRESENT_STATUSES}

    return {
        "totalEmployees": store.count("employees", {"status": EmployeeStatus.ACTIVE}),
        "presentToday": store.count(
            "attendance",
            lambda r: str(r.get("date") or "")[:10] == day and r.get("status") in present,
        ),
        "pendingLeaves": store.count("leaves", {"status": LeaveStatus.PENDING}),
        "activeTrainings": store.count(
            "employeeTraining",
            {"status": [TrainingStatus.ENROLLED, TrainingStatus.IN_PROGRESS]},
        ),
    }


def get_store_stats(store: RecordStore) -> Dict:
    """Record count per collection plus the total"""
    counts = store.stats()
    return {"collections": counts, "totalRecords": sum(counts.values())}
