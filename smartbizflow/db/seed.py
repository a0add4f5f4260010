"""
Demo dataset written on first run, when no data file exists yet

Demo logins (stored only as bcrypt hashes):
    admin@smartbizflow.com / admin123        ADMIN
    hr@smartbizflow.com / hr123              HR_MANAGER
    <sample employee email> / employee123    EMPLOYEE
"""
import logging
from typing import Callable, Dict, List

from smartbizflow.models import (
    BenefitType,
    CourseStatus,
    EmployeeStatus,
    Role,
)
from smartbizflow.utils.datetime_utils import iso_8601_utc, now_utc

logger = logging.getLogger(__name__)

ADMIN_PASSWORD = "admin123"
HR_PASSWORD = "hr123"
EMPLOYEE_PASSWORD = "employee123"

SAMPLE_EMPLOYEES = [
    {
        "id": "emp-001",
        "employeeId": "EMP003",
        "firstName": "John",
        "lastName": "Doe",
        "email": "john.doe@smartbizflow.com",
        "department": "Engineering",
        "position": "Senior Developer",
        "salary": 55000,
    },
    {
        "id": "emp-002",
        "employeeId": "EMP004",
        "firstName": "Jane",
        "lastName": "Smith",
        "email": "jane.smith@smartbizflow.com",
        "department": "Marketing",
        "position": "Marketing Manager",
        "salary": 60000,
    },
    {
        "id": "emp-003",
        "employeeId": "EMP005",
        "firstName": "Mike",
        "lastName": "Wilson",
        "email": "mike.wilson@smartbizflow.com",
        "department": "Sales",
        "position": "Sales Executive",
        "salary": 45000,
    },
]


def _user(user_id: str, email: str, password_hash: str, role: Role, stamp: str) -> Dict:
    return {
        "id": user_id,
        "email": email,
        "password": password_hash,
        "role": role.value,
        "isActive": True,
        "createdAt": stamp,
        "updatedAt": stamp,
    }


def _employee(record: Dict, hire_date: str, stamp: str) -> Dict:
    employee = dict(record)
    employee.update(
        {
            "hireDate": hire_date,
            "status": EmployeeStatus.ACTIVE.value,
            "createdAt": stamp,
            "updatedAt": stamp,
        }
    )
    return employee


def build_seed_document(password_hasher: Callable[[str], str]) -> Dict[str, List[Dict]]:
    """
    Build the demo collections.

    Args:
        password_hasher: one-way hash applied to every demo password

    Returns:
        Mapping of collection name to its seeded records
    """
    stamp = iso_8601_utc(now_utc())

    users = [
        _user("admin-001", "admin@smartbizflow.com", password_hasher(ADMIN_PASSWORD), Role.ADMIN, stamp),
        _user("hr-001", "hr@smartbizflow.com", password_hasher(HR_PASSWORD), Role.HR_MANAGER, stamp),
    ]
    employees = [
        _employee(
            {
                "id": "admin-001",
                "employeeId": "EMP001",
                "firstName": "Admin",
                "lastName": "User",
                "email": "admin@smartbizflow.com",
                "department": "IT",
                "position": "System Administrator",
                "salary": 75000,
            },
            "2024-01-01",
            stamp,
        ),
        _employee(
            {
                "id": "hr-001",
                "employeeId": "EMP002",
                "firstName": "Sarah",
                "lastName": "Johnson",
                "email": "hr@smartbizflow.com",
                "department": "Human Resources",
                "position": "HR Manager",
                "salary": 65000,
            },
            "2024-01-15",
            stamp,
        ),
    ]

    for sample in SAMPLE_EMPLOYEES:
        users.append(
            _user(sample["id"], sample["email"], password_hasher(EMPLOYEE_PASSWORD), Role.EMPLOYEE, stamp)
        )
        employees.append(_employee(sample, "2024-02-01", stamp))

    courses = [
        {
            "id": "course-001",
            "title": "React Fundamentals",
            "description": "Learn the basics of React development",
            "category": "Technical",
            "level": "Beginner",
            "duration": 16,
            "instructor": "John Doe",
            "format": "Online",
            "currentEnrollment": 0,
            "status": CourseStatus.ACTIVE.value,
            "createdAt": stamp,
            "updatedAt": stamp,
        },
        {
            "id": "course-002",
            "title": "Leadership Skills",
            "description": "Develop essential leadership and management skills",
            "category": "Leadership",
            "level": "Intermediate",
            "duration": 24,
            "instructor": "Sarah Johnson",
            "format": "In-Person",
            "currentEnrollment": 0,
            "status": CourseStatus.ACTIVE.value,
            "createdAt": stamp,
            "updatedAt": stamp,
        },
    ]

    benefits = [
        {
            "id": "benefit-001",
            "name": "Health Insurance",
            "description": "Comprehensive health insurance coverage",
            "type": BenefitType.HEALTH_INSURANCE.value,
            "cost": 5000,
            "isActive": True,
            "createdAt": stamp,
            "updatedAt": stamp,
        },
        {
            "id": "benefit-002",
            "name": "Transport Allowance",
            "description": "Monthly transport allowance",
            "type": BenefitType.TRANSPORT.value,
            "cost": 3000,
            "isActive": True,
            "createdAt": stamp,
            "updatedAt": stamp,
        },
    ]

    logger.info(
        "Built demo dataset: %d users, %d employees, %d courses, %d benefits",
        len(users), len(employees), len(courses), len(benefits)
    )
    return {
        "users": users,
        "employees": employees,
        "trainingCourses": courses,
        "benefits": benefits,
    }
