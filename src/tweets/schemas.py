# src/tweets/schemas.py
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)


class UserResponse(CamelModel):
    id: int
    email: str
    name: str | None = None


class TweetResponse(CamelModel):
    id: int
    text: str
    user_id: int
    user: UserResponse | None = None


class EdgeResponse(CamelModel):
    cursor: str
    node: TweetResponse


class PageInfoResponse(CamelModel):
    end_cursor: str
    has_next_page: bool


class TweetPageResponse(CamelModel):
    page_info: PageInfoResponse
    edges: list[EdgeResponse] = []
