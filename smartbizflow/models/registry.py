"""
Collection registry

Every collection in the data file is described here: the prefix used for
generated ids, the fields a record may carry and the fields free-text
search looks at.
"""
from typing import Dict, NamedTuple, Tuple

from smartbizflow.models import (
    attendance,
    audit_log,
    benefit,
    employee,
    leave,
    payroll,
    training,
    user,
)

STORE_MANAGED_FIELDS = ("id", "createdAt", "updatedAt")


class CollectionSpec(NamedTuple):
    name: str
    id_prefix: str
    fields: Tuple[str, ...]
    search_fields: Tuple[str, ...] = ()
    append_only: bool = False

    @property
    def known_fields(self) -> Tuple[str, ...]:
        return STORE_MANAGED_FIELDS + self.fields


COLLECTIONS: Dict[str, CollectionSpec] = {
    spec.name: spec
    for spec in (
        CollectionSpec(user.COLLECTION, "user", user.FIELDS, user.SEARCH_FIELDS),
        CollectionSpec(employee.COLLECTION, "emp", employee.FIELDS, employee.SEARCH_FIELDS),
        CollectionSpec(attendance.COLLECTION, "att", attendance.FIELDS, attendance.SEARCH_FIELDS),
        CollectionSpec(leave.COLLECTION, "leave", leave.FIELDS, leave.SEARCH_FIELDS),
        CollectionSpec(payroll.COLLECTION, "payroll", payroll.FIELDS, payroll.SEARCH_FIELDS),
        CollectionSpec(
            training.COURSE_COLLECTION, "course", training.COURSE_FIELDS, training.COURSE_SEARCH_FIELDS
        ),
        CollectionSpec(
            training.ENROLLMENT_COLLECTION,
            "training",
            training.ENROLLMENT_FIELDS,
            training.ENROLLMENT_SEARCH_FIELDS,
        ),
        CollectionSpec(
            benefit.BENEFIT_COLLECTION, "benefit", benefit.BENEFIT_FIELDS, benefit.BENEFIT_SEARCH_FIELDS
        ),
        CollectionSpec(
            benefit.ENROLLMENT_COLLECTION,
            "empbenefit",
            benefit.ENROLLMENT_FIELDS,
            benefit.ENROLLMENT_SEARCH_FIELDS,
        ),
        CollectionSpec(
            audit_log.COLLECTION,
            "audit",
            audit_log.FIELDS,
            audit_log.SEARCH_FIELDS,
            append_only=True,
        ),
    )
}

COLLECTION_NAMES: Tuple[str, ...] = tuple(COLLECTIONS)
