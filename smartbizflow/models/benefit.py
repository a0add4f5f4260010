"""
Benefit and employee benefit models
"""
import enum

BENEFIT_COLLECTION = "benefits"
ENROLLMENT_COLLECTION = "employeeBenefits"


class BenefitType(str, enum.Enum):
    HEALTH_INSURANCE = "HEALTH_INSURANCE"
    LIFE_INSURANCE = "LIFE_INSURANCE"
    DENTAL_INSURANCE = "DENTAL_INSURANCE"
    VISION_INSURANCE = "VISION_INSURANCE"
    RETIREMENT = "RETIREMENT"
    TRANSPORT = "TRANSPORT"
    MEAL = "MEAL"
    OTHER = "OTHER"


class EmployeeBenefitStatus(str, enum.Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    EXPIRED = "EXPIRED"


BENEFIT_FIELDS = ("name", "description", "type", "cost", "isActive")
BENEFIT_SEARCH_FIELDS = ("name", "description")

ENROLLMENT_FIELDS = ("employeeId", "benefitId", "startDate", "endDate", "status", "cost")
ENROLLMENT_SEARCH_FIELDS = ()
