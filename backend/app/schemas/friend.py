"""
FriendList API: Friend Schemas
=================================

What:  The typed request payload and response record for friends, and the
       check that turns a raw JSON body into a FriendPayload.
Who:   Used by FriendService (validation) and the friends routes (responses).

Stored document shape (collection "friends"):
    {"_id": ObjectId, "firstName": str, "lastName": str, "age": int}
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from app.schemas.common import missing_fields, non_text_fields

FRIEND_FIELDS = ("firstName", "lastName", "age")
NAME_FIELDS = ("firstName", "lastName")

MIN_AGE = 1
MAX_AGE = 120


class FriendPayload(BaseModel):
    """
    A validated friend, exactly the fields that get written.

    Unknown keys in the request body are dropped.
    """
    firstName: str = Field(min_length=1, description="Given name")
    lastName: str = Field(min_length=1, description="Family name")
    age: int = Field(ge=MIN_AGE, le=MAX_AGE, description="Whole years, 1 to 120")

    model_config = {"extra": "ignore"}


class FriendResponse(BaseModel):
    """
    A stored friend. `_id` is the hex string of the MongoDB ObjectId.

    Write-time checks are not repeated here: a record stored before the age
    range existed, or with a field missing, is still returned as it is.
    """
    id: str = Field(alias="_id", description="Store-assigned identifier")
    firstName: Optional[str] = Field(default=None, description="Given name")
    lastName: Optional[str] = Field(default=None, description="Family name")
    age: Optional[int] = Field(default=None, description="Whole years")

    model_config = {"extra": "ignore", "populate_by_name": True}

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "FriendResponse":
        return cls.model_validate({**document, "_id": str(document["_id"])})


def is_valid_age(value: Any) -> bool:
    """True for an int in [1, 120]. Booleans and floats are rejected."""
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return MIN_AGE <= value <= MAX_AGE


# Reasons a friend body is rejected, in the order they are checked
MISSING_FIELDS = "missing_fields"
INVALID_AGE = "invalid_age"


def friend_body_problem(body: Dict[str, Any]) -> Optional[str]:
    """
    First reason the body cannot become a FriendPayload, or None.

    A name that is present but not a string counts as missing. An age of 0 is
    falsy and therefore also reported as missing, not as out of range.
    """
    if missing_fields(body, FRIEND_FIELDS) or non_text_fields(body, NAME_FIELDS):
        return MISSING_FIELDS
    if not is_valid_age(body["age"]):
        return INVALID_AGE
    return None
