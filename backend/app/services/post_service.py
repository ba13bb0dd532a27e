"""
FriendList API: Post Service
===============================

What:  CRUD for the posts collection. Title and content must both be
       present and text, on create and on update.
"""

from typing import Any, Dict

from app.exceptions import ValidationError
from app.schemas.common import missing_fields
from app.schemas.post import POST_FIELDS, PostPayload, PostResponse, is_complete_post
from app.services.resource_service import ResourceMessages, ResourceService


class PostService(ResourceService):
    collection = "posts"
    resource = "post"
    response_model = PostResponse

    # Inherited from the first release of the API; clients match on 404 here
    create_invalid_status = 404
    create_failed_status = 500

    messages = ResourceMessages(
        create_invalid="Please provide a post title and some content",
        create_failed="There was an error saving the post to the database",
        list_failed="The Post list could not be retrieved",
        not_found="The post with the specified ID does not exist",
        get_failed="The Post information could not be retrieved",
        update_invalid="Please provide Post Title and Content",
        update_not_found="No Post with the id {id} exists",
        update_failed="There has been an error updating this Post",
        delete_not_found="The Post with the specified id does not exist",
        delete_failed="The Post could not be removed",
        deleted="Post has been deleted",
    )

    def validate(self, body: Dict[str, Any], *, missing_message: str, status_code: int) -> PostPayload:
        if not is_complete_post(body):
            raise ValidationError(
                message=missing_message,
                context={"missing": missing_fields(body, POST_FIELDS)},
                status_code=status_code,
            )
        return PostPayload.model_validate(body)
