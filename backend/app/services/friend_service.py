"""
FriendList API: Friend Service
=================================

What:  CRUD for the friends collection.
How:   ResourceService workflow with the friend checks: both names present
       and text, age a whole number between 1 and 120. The same checks run
       on create and update.

Friends differ from posts in two inherited status codes: a payload with a
missing field is answered 400 (posts: 404), and a failed save is also
answered 400 (posts: 500).
"""

from typing import Any, Dict

from app.exceptions import ValidationError
from app.schemas.common import missing_fields
from app.schemas.friend import (
    FRIEND_FIELDS,
    INVALID_AGE,
    MISSING_FIELDS,
    FriendPayload,
    FriendResponse,
    friend_body_problem,
)
from app.services.resource_service import ResourceMessages, ResourceService

AGE_MESSAGE = "Age must be a whole number between 1 and 120"


class FriendService(ResourceService):
    collection = "friends"
    resource = "friend"
    response_model = FriendResponse

    create_invalid_status = 400
    create_failed_status = 400

    messages = ResourceMessages(
        create_invalid="Please provide a firstName, lastName and age for friend.",
        create_failed="There was an error saving the friend to the database",
        list_failed="The information could not be retrieved",
        not_found="The friend with the specified ID does not exist",
        get_failed="The information could not be retrieved",
        update_invalid="Please provide a first name, last name, and age",
        update_not_found="No friend with the id {id} exists",
        update_failed="There has been an error updating this Friend",
        delete_not_found="The friend with the specified id does not exist",
        delete_failed="The friend could not be removed",
        deleted="Friend has been deleted",
    )

    def validate(self, body: Dict[str, Any], *, missing_message: str, status_code: int) -> FriendPayload:
        problem = friend_body_problem(body)
        if problem == MISSING_FIELDS:
            raise ValidationError(
                message=missing_message,
                context={"missing": missing_fields(body, FRIEND_FIELDS)},
                status_code=status_code,
            )
        if problem == INVALID_AGE:
            raise ValidationError(
                message=AGE_MESSAGE,
                field="age",
                context={"age": repr(body.get("age"))},
                status_code=status_code,
            )
        return FriendPayload.model_validate(body)
