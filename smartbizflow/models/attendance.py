"""
Attendance model
"""
import enum

COLLECTION = "attendance"


class AttendanceStatus(str, enum.Enum):
    PRESENT = "PRESENT"
    ABSENT = "ABSENT"
    LATE = "LATE"
    HALF_DAY = "HALF_DAY"
    WORK_FROM_HOME = "WORK_FROM_HOME"


# One record per employee per day is expected but not enforced
FIELDS = ("employeeId", "date", "checkIn", "checkOut", "totalHours", "status", "notes")
SEARCH_FIELDS = ("notes",)
