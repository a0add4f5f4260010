"""
Training course and enrollment models
"""
import enum

COURSE_COLLECTION = "trainingCourses"
ENROLLMENT_COLLECTION = "employeeTraining"


class CourseStatus(str, enum.Enum):
    ACTIVE = "ACTIVE"
    DRAFT = "DRAFT"
    ARCHIVED = "ARCHIVED"


class TrainingStatus(str, enum.Enum):
    ENROLLED = "ENROLLED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"
    DROPPED = "DROPPED"


COURSE_FIELDS = (
    "title",
    "description",
    "category",
    "level",
    "duration",
    "instructor",
    "format",
    "maxEnrollment",
    "currentEnrollment",
    "status",
    "materials",
    "prerequisites",
)
COURSE_SEARCH_FIELDS = ("title", "description", "instructor")

ENROLLMENT_FIELDS = (
    "employeeId",
    "courseId",
    "status",
    "progress",
    "startDate",
    "completionDate",
    "certificate",
    "score",
    "feedback",
)
ENROLLMENT_SEARCH_FIELDS = ("feedback",)
