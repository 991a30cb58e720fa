"""
Domain models for parse-seed.

`RawUserRecord` validates one entry of the random-user API `results` array and
`OutputObject` is the single-field record written to Parse. Records are frozen:
an output object is built once per input record and handed to the store as is.
"""
from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, Field, model_validator

from parse_seed.domain.naming import full_name


class UserName(BaseModel):
    """
    Name block of a random-user record.
    """

    first: str = Field(..., description="Given name as returned upstream.")
    last: str = Field(..., description="Family name as returned upstream.")

    model_config = {"frozen": True, "extra": "ignore"}


class RawUserRecord(BaseModel):
    """
    One entry of the random-user API `results` array.

    Legacy API versions wrap the person in a `user` object
    (`{"user": {"name": {...}}}`), current ones return it flat
    (`{"name": {...}}`). Both shapes validate into the same model.
    """

    name: UserName

    model_config = {"frozen": True, "extra": "ignore"}

    @model_validator(mode="before")
    @classmethod
    def _unwrap_user(cls, data: Any) -> Any:
        if isinstance(data, dict) and isinstance(data.get("user"), dict):
            return data["user"]
        return data


class RandomUserResponse(BaseModel):
    """
    Top-level body of `GET /api/?results=<count>`.
    """

    results: List[RawUserRecord]

    model_config = {"frozen": True, "extra": "ignore"}


class OutputObject(BaseModel):
    """
    A Parse object of class `class_name` carrying a single `name` field.
    """

    class_name: str = Field(..., min_length=1, description="Parse class the object belongs to.")
    name: str = Field(..., description="Title-cased full name.")

    model_config = {"frozen": True}

    def to_parse_body(self) -> Dict[str, Any]:
        """Field payload sent to Parse when creating the object."""
        return {"name": self.name}


def to_output_object(record: RawUserRecord, class_name: str) -> OutputObject:
    """
    Map a random-user record to the object persisted in Parse.
    """
    return OutputObject(
        class_name=class_name,
        name=full_name(record.name.first, record.name.last),
    )


__all__ = [
    "UserName",
    "RawUserRecord",
    "RandomUserResponse",
    "OutputObject",
    "to_output_object",
]
