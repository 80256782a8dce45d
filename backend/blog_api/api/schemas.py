from datetime import datetime
from typing import List, Optional
from pydantic import AliasGenerator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ResponseModel(BaseModel):
    # Read from ORM objects by attribute name, emit camelCase keys
    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=AliasGenerator(serialization_alias=to_camel),
    )


class UserResponse(ResponseModel):
    id: str
    username: str
    created_at: Optional[datetime] = None


class CommentResponse(ResponseModel):
    id: str
    body: str
    post_id: str
    author_id: str
    author: UserResponse
    created_at: datetime
    updated_at: datetime


class PostResponse(ResponseModel):
    id: str
    title: str
    body: str
    color: str
    author_id: str
    author: UserResponse
    comments: List[CommentResponse] = []
    created_at: datetime
    updated_at: datetime


class MessageResponse(ResponseModel):
    message: str
