"""
usersvc/schemas/user.py

Purpose: Request schema for user documents

- A handful of well-known attributes with declared types
- Any other attribute is accepted and stored verbatim
- Rejects keys that cannot be stored as document fields
"""

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator, model_validator
from typing import Any, Dict, Optional

# Key assigned by the store, never taken from the client
IDENTIFIER_KEY = "_id"


def invalid_document_keys(attributes: Dict[str, Any]) -> list:
    """
    Returns the keys MongoDB would refuse (or misinterpret) as field names.
    Nested objects are checked too.
    """
    bad = []
    for key, value in attributes.items():
        if key == IDENTIFIER_KEY or key.startswith("$") or "." in key or not key:
            bad.append(key)
        if isinstance(value, dict):
            bad.extend(f"{key}.{sub}" for sub in invalid_document_keys(value))
    return bad


class UserCreate(BaseModel):
    """
    Body of POST /users.

    Only the declared fields are type-checked; everything else passes
    through unchanged.
    """
    model_config = ConfigDict(
        extra="allow",
        json_schema_extra={"example": {"name": "Alice", "email": "alice@example.com"}},
    )

    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    email: Optional[str] = Field(default=None, max_length=320)
    # Strict: no coercion from strings or booleans
    age: Optional[StrictInt] = Field(default=None, ge=0, le=150)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and "@" not in v:
            raise ValueError("email must contain '@'")
        return v

    @model_validator(mode="before")
    @classmethod
    def check_keys(cls, data: Any) -> Any:
        if isinstance(data, dict):
            bad = invalid_document_keys(data)
            if bad:
                raise ValueError(f"Invalid attribute names: {', '.join(sorted(bad))}")
        return data

    def to_document(self) -> Dict[str, Any]:
        """Attributes as sent by the client, without unset optional fields."""
        document = {
            name: getattr(self, name)
            for name in type(self).model_fields
            if name in self.model_fields_set
        }
        document.update(self.model_extra or {})
        return document
