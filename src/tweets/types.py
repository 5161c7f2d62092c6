# src/tweets/types.py
import strawberry

from src.pagination import Page
from .models import Tweet


@strawberry.type(name="User")
class UserType:
    id: int
    email: str
    name: str | None = None


@strawberry.type(name="Tweet")
class TweetType:
    id: int
    text: str
    user_id: int
    user: UserType | None = None

    @classmethod
    def from_model(cls, tweet: Tweet) -> "TweetType":
        user = None
        if tweet.user is not None:
            user = UserType(id=tweet.user.id, email=tweet.user.email, name=tweet.user.name)
        return cls(id=tweet.id, text=tweet.text, user_id=tweet.user_id, user=user)


@strawberry.type(name="Edge")
class EdgeType:
    cursor: str
    node: TweetType


@strawberry.type(name="PageInfo")
class PageInfoType:
    end_cursor: str
    has_next_page: bool


@strawberry.type(name="Response", description="A page of tweets in ascending id order")
class TweetConnection:
    page_info: PageInfoType
    edges: list[EdgeType]

    @classmethod
    def from_page(cls, page: Page) -> "TweetConnection":
        return cls(
            page_info=PageInfoType(
                end_cursor=page.page_info.end_cursor,
                has_next_page=page.page_info.has_next_page,
            ),
            edges=[EdgeType(cursor=edge.cursor, node=TweetType.from_model(edge.node)) for edge in page.edges],
        )
