"""
FriendList API: Post Schemas
===============================

Stored document shape (collection "posts"):
    {"_id": ObjectId, "postTitle": str, "postContent": str}
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from app.schemas.common import missing_fields, non_text_fields

POST_FIELDS = ("postTitle", "postContent")


class PostPayload(BaseModel):
    """A validated blog post. Unknown keys in the request body are dropped."""
    postTitle: str = Field(min_length=1, description="Post title")
    postContent: str = Field(min_length=1, description="Post body text")

    model_config = {"extra": "ignore"}


class PostResponse(BaseModel):
    """A stored post, returned as stored. `_id` is the hex string of the ObjectId."""
    id: str = Field(alias="_id", description="Store-assigned identifier")
    postTitle: Optional[str] = Field(default=None, description="Post title")
    postContent: Optional[str] = Field(default=None, description="Post body text")

    model_config = {"extra": "ignore", "populate_by_name": True}

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "PostResponse":
        return cls.model_validate({**document, "_id": str(document["_id"])})


def is_complete_post(body: Dict[str, Any]) -> bool:
    """Both fields present, truthy, and text."""
    return not (missing_fields(body, POST_FIELDS) or non_text_fields(body, POST_FIELDS))
