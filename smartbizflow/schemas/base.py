"""
Shared schema base

Records are stored with camelCase keys; schemas expose snake_case attributes
and accept / emit the camelCase names.
"""
from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_record(self) -> Dict[str, Any]:
        """Field values keyed the way the record store keeps them"""
        return self.model_dump(by_alias=True)

    def to_changes(self) -> Dict[str, Any]:
        """Only the fields the caller actually sent (partial updates); an explicit null clears the field"""
        return self.model_dump(by_alias=True, exclude_unset=True)


class RecordOut(CamelModel):
    """Store-managed fields present on every record"""
    id: str
    created_at: datetime
    updated_at: datetime


def reject_null(v: Any) -> Any:
    """Update-schema check for fields a stored record must always carry"""
    if v is None:
        raise ValueError("Field cannot be null")
    return v


def normalize_email(v: Optional[str]) -> Optional[str]:
    if v is None:
        return v
    v = v.strip().lower()
    if "@" not in v:
        raise ValueError("Invalid email address")
    return v
