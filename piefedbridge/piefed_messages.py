"""Request and response bodies exchanged with the PieFed API."""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field, NonNegativeInt

from .piefed_models import (
    CommentSortType,
    CommentView,
    CommunityModeratorView,
    CommunityView,
    ListingType,
    MyUserInfo,
    PersonView,
    PostView,
    Site,
    SortType,
    _WireModel,
)


class CreateCommentRequest(_WireModel):
    _omit_empty: ClassVar[frozenset[str]] = frozenset({"parent_id", "language_id"})

    body: str
    post_id: NonNegativeInt
    parent_id: NonNegativeInt | None = None
    language_id: NonNegativeInt | None = None


class GetCommentRequest(_WireModel):
    id: NonNegativeInt


class GetCommentsRequest(_WireModel):
    _omit_empty: ClassVar[frozenset[str]] = frozenset(
        {
            "type_",
            "person_id",
            "max_depth",
            "page",
            "parent_id",
            "community_id",
            "post_id",
            "limit",
            "sort",
        }
    )

    type_: ListingType | None = None
    person_id: NonNegativeInt | None = None
    max_depth: NonNegativeInt | None = None
    page: NonNegativeInt | None = None
    parent_id: NonNegativeInt | None = None
    community_id: NonNegativeInt | None = None
    post_id: NonNegativeInt | None = None
    limit: NonNegativeInt | None = None
    sort: CommentSortType | None = None


class GetPostRequest(_WireModel):
    comment_id: NonNegativeInt | None = None
    id: NonNegativeInt | None = None


class GetPostsRequest(_WireModel):
    _omit_empty: ClassVar[frozenset[str]] = frozenset(
        {
            "type_",
            "sort",
            "page",
            "limit",
            "community_id",
            "person_id",
            "community_name",
            "liked_only",
        }
    )

    type_: ListingType | None = None
    sort: SortType | None = None
    page: NonNegativeInt | None = None
    limit: NonNegativeInt | None = None
    community_id: NonNegativeInt | None = None
    person_id: NonNegativeInt | None = None
    community_name: str | None = None
    liked_only: bool | None = None


class LoginRequest(_WireModel):
    username: str
    password: str


class CreateCommentResponse(_WireModel):
    comment_view: CommentView


class GetCommentResponse(_WireModel):
    comment_view: CommentView


class GetCommentsResponse(_WireModel):
    comments: list[CommentView] = Field(default_factory=list)


class GetPostResponse(_WireModel):
    post_view: PostView
    community_view: CommunityView
    moderators: list[CommunityModeratorView] = Field(default_factory=list)
    cross_posts: list[PostView] = Field(default_factory=list)


class GetPostsResponse(_WireModel):
    posts: list[PostView] = Field(default_factory=list)
    next_page: str | None = None


class GetSiteResponse(_WireModel):
    _omit_empty: ClassVar[frozenset[str]] = frozenset({"my_user"})

    my_user: MyUserInfo | None = None
    site: Site
    version: str = ""
    admins: list[PersonView] = Field(default_factory=list)


class GetUnreadCountResponse(_WireModel):
    replies: NonNegativeInt = 0
    mentions: NonNegativeInt = 0
    private_messages: NonNegativeInt = 0
    other: NonNegativeInt = 0


class LoginResponse(_WireModel):
    jwt: str = ""