"""
Domain model for the customer list.

Design decisions:
- Using Pydantic for binding and serialization
- Field names on the wire are camelCase and matched case-insensitively,
  so "FirstName" and "firstname" bind the same field; the Python
  attribute names are not accepted as input
- id and age are strict integers: booleans, floats and numeric strings
  are rejected
- Fields default instead of being required: business rules live in
  customers.validation, which reports them with readable messages
"""

from typing import Any, Optional
from pydantic import BaseModel, Field, field_validator, model_validator


# Lowercased wire name -> alias
_WIRE_NAMES = {
    "id": "id",
    "firstname": "firstName",
    "lastname": "lastName",
    "age": "age",
}


def fold_case(value: str) -> str:
    """
    Uppercase one character at a time.

    Characters whose uppercase form is longer than one character (such
    as "ß") are left as they are, so "Straße" and "Strasse" stay distinct.
    """
    folded = []
    for ch in value:
        upper = ch.upper()
        folded.append(upper if len(upper) == 1 else ch)
    return "".join(folded)


class Customer(BaseModel):
    """
    A single customer record.

    Stored customers always have a positive unique id, non-blank names and
    an age over 18; unvalidated candidates may hold anything that parses.
    """
    id: int = Field(default=0, strict=True, description="Unique customer identifier")
    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")
    age: int = Field(default=0, strict=True, description="Age in whole years")

    @model_validator(mode="before")
    @classmethod
    def _match_wire_names(cls, data: Any) -> Any:
        """Rename keys that differ from an alias only by case."""
        if not isinstance(data, dict):
            return data
        matched = {}
        for key, value in data.items():
            alias = _WIRE_NAMES.get(key.lower()) if isinstance(key, str) else None
            matched[alias or key] = value
        return matched

    @field_validator("first_name", "last_name")
    @classmethod
    def _encodable(cls, value: Optional[str]) -> Optional[str]:
        """Names must be storable as UTF-8 (no lone surrogates)."""
        if value is not None:
            try:
                value.encode("utf-8")
            except UnicodeEncodeError:
                raise ValueError("must be valid Unicode text")
        return value

    def sort_key(self) -> tuple[str, str]:
        """Case-insensitive (last name, first name) ordering key."""
        return (fold_case(self.last_name or ""), fold_case(self.first_name or ""))

    def to_wire(self) -> dict[str, Any]:
        """Serialize with camelCase field names."""
        return self.model_dump(by_alias=True)
