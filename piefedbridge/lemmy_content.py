"""Data models of the Lemmy API for posts, comments, communities and people."""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    NonNegativeInt,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    model_serializer,
)

from .piefed_models import _is_empty


class _LemmyModel(BaseModel):
    """Base for Lemmy JSON models.

    Keys named in ``_omit_none`` are dropped when null; keys named in
    ``_omit_empty`` are dropped when empty. Unknown input keys are ignored.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    _omit_none: ClassVar[frozenset[str]] = frozenset()
    _omit_empty: ClassVar[frozenset[str]] = frozenset()

    @model_serializer(mode="wrap")
    def _serialize(
        self, handler: SerializerFunctionWrapHandler, info: SerializationInfo
    ) -> Any:
        data = handler(self)
        if not isinstance(data, dict) or not (self._omit_none or self._omit_empty):
            return data
        fields = type(self).model_fields

        def key(name: str) -> str:
            return (fields[name].alias or name) if info.by_alias else name

        nullable = {key(name) for name in self._omit_none}
        emptiable = {key(name) for name in self._omit_empty}
        return {
            k: v
            for k, v in data.items()
            if not ((k in nullable and v is None) or (k in emptiable and _is_empty(v)))
        }


class CommentSortType(str, Enum):
    HOT = "Hot"
    TOP = "Top"
    NEW = "New"
    OLD = "Old"
    CONTROVERSIAL = "Controversial"


class CommunityVisibility(str, Enum):
    PUBLIC = "Public"
    LOCAL_ONLY = "LocalOnly"


class ListingType(str, Enum):
    ALL = "All"
    LOCAL = "Local"
    SUBSCRIBED = "Subscribed"
    MODERATOR_VIEW = "ModeratorView"


class SortType(str, Enum):
    ACTIVE = "Active"
    HOT = "Hot"
    NEW = "New"
    TOP_HOUR = "TopHour"
    TOP_SIX_HOUR = "TopSixHour"
    TOP_TWELVE_HOUR = "TopTwelveHour"
    TOP_DAY = "TopDay"
    TOP_WEEK = "TopWeek"
    TOP_MONTH = "TopMonth"
    SCALED = "Scaled"

    OLD = "Old"
    TOP_YEAR = "TopYear"
    TOP_ALL = "TopAll"
    MOST_COMMENTS = "MostComments"
    NEW_COMMENTS = "NewComments"
    TOP_THREE_MONTHS = "TopThreeMonths"
    TOP_SIX_MONTHS = "TopSixMonths"
    TOP_NINE_MONTHS = "TopNineMonths"
    CONTROVERSIAL = "Controversial"


class SubscribedType(str, Enum):
    SUBSCRIBED = "Subscribed"
    NOT_SUBSCRIBED = "NotSubscribed"
    PENDING = "Pending"


class Comment(_LemmyModel):
    _omit_none: ClassVar[frozenset[str]] = frozenset({"updated"})

    activity_pub_id: str = Field(default="", alias="ap_id")
    content: str = ""
    creator_id: NonNegativeInt = 0
    deleted: bool = False
    distinguished: bool = False
    id: NonNegativeInt = 0
    language_id: NonNegativeInt = 0
    local: bool = False
    path: str = ""
    post_id: NonNegativeInt = 0
    published: str = ""
    removed: bool = False
    updated: str | None = None


class CommentAggregates(_LemmyModel):
    child_count: NonNegativeInt = 0
    comment_id: NonNegativeInt = 0
    downvotes: NonNegativeInt = 0
    published: str = ""
    score: int = 0
    upvotes: NonNegativeInt = 0


class Community(_LemmyModel):
    _omit_none: ClassVar[frozenset[str]] = frozenset(
        {"banner", "description", "icon", "updated"}
    )

    actor_id: str = ""
    banner: str | None = None
    deleted: bool = False
    description: str | None = None
    hidden: bool = False
    icon: str | None = None
    id: NonNegativeInt = 0
    instance_id: NonNegativeInt = 0
    local: bool = False
    name: str = ""
    nsfw: bool = False
    posting_restricted_to_mods: bool = False
    published: str = ""
    removed: bool = False
    title: str = ""
    updated: str | None = None
    visibility: CommunityVisibility = CommunityVisibility.PUBLIC


class CommunityAggregates(_LemmyModel):
    comments: NonNegativeInt = 0
    community_id: NonNegativeInt = 0
    posts: NonNegativeInt = 0
    published: str = ""
    subscribers: NonNegativeInt = 0
    subscribers_local: NonNegativeInt = 0
    users_active_day: NonNegativeInt = 0
    users_active_half_year: NonNegativeInt = 0
    users_active_month: NonNegativeInt = 0
    users_active_week: NonNegativeInt = 0


class Person(_LemmyModel):
    _omit_none: ClassVar[frozenset[str]] = frozenset(
        {
            "avatar",
            "ban_expires",
            "banner",
            "bio",
            "bot_account",
            "matrix_user_id",
            "updated",
        }
    )

    actor_id: str = ""
    avatar: str | None = None
    ban_expires: str | None = None
    banned: bool = False
    banner: str | None = None
    bio: str | None = None
    bot_account: bool | None = None
    deleted: bool = False
    display_name: str = ""
    id: NonNegativeInt = 0
    instance_id: NonNegativeInt = 0
    local: bool = False
    matrix_user_id: str | None = None
    name: str = ""
    published: str = ""
    updated: str | None = None


class PersonAggregates(_LemmyModel):
    comment_count: NonNegativeInt = 0
    person_id: NonNegativeInt = 0
    post_count: NonNegativeInt = 0


class Post(_LemmyModel):
    _omit_none: ClassVar[frozenset[str]] = frozenset(
        {
            "alt_text",
            "body",
            "embed_description",
            "embed_title",
            "embed_video_url",
            "thumbnail_url",
            "updated",
            "url",
            "url_content_type",
        }
    )

    alt_text: str | None = None
    activity_pub_id: str = Field(default="", alias="ap_id")
    body: str | None = None
    community_id: NonNegativeInt = 0
    creator_id: NonNegativeInt = 0
    deleted: bool = False
    embed_description: str | None = None
    embed_title: str | None = None
    embed_video_url: str | None = None
    featured_community: bool = False
    featured_local: bool = False
    id: NonNegativeInt = 0
    language_id: NonNegativeInt = 0
    local: bool = False
    locked: bool = False
    name: str = ""
    nsfw: bool = False
    published: str = ""
    removed: bool = False
    thumbnail_url: str | None = None
    updated: str | None = None
    url: str | None = None
    url_content_type: str | None = None


class PostAggregates(_LemmyModel):
    comments: NonNegativeInt = 0
    downvotes: NonNegativeInt = 0
    newest_comment_time: str = ""
    post_id: NonNegativeInt = 0
    published: str = ""
    score: int = 0
    upvotes: NonNegativeInt = 0


class ImageDetails(_LemmyModel):
    content_type: str = ""
    height: NonNegativeInt = 0
    link: str = ""
    width: NonNegativeInt = 0


class Instance(_LemmyModel):
    _omit_none: ClassVar[frozenset[str]] = frozenset(
        {"software", "updated", "version"}
    )

    domain: str = ""
    id: NonNegativeInt = 0
    published: str = ""
    software: str | None = None
    updated: str | None = None
    version: str | None = None


class CommentView(_LemmyModel):
    _omit_none: ClassVar[frozenset[str]] = frozenset({"my_vote"})

    banned_from_community: bool = False
    comment: Comment
    community: Community
    counts: CommentAggregates
    creator: Person
    creator_banned_from_community: bool = False
    creator_blocked: bool = False
    creator_is_admin: bool = False
    creator_is_moderator: bool = False
    my_vote: int | None = None
    post: Post
    saved: bool = False
    subscribed: SubscribedType


class CommunityBlockView(_LemmyModel):
    community: Community
    person: Person


class CommunityFollowerView(_LemmyModel):
    community: Community
    follower: Person


class CommunityModeratorView(_LemmyModel):
    community: Community
    moderator: Person


class CommunityView(_LemmyModel):
    banned_from_community: bool = False
    blocked: bool = False
    community: Community
    counts: CommunityAggregates
    subscribed: SubscribedType


class PersonBlockView(_LemmyModel):
    person: Person
    target: Person


class PersonView(_LemmyModel):
    counts: PersonAggregates
    is_admin: bool = False
    person: Person


class PostView(_LemmyModel):
    _omit_none: ClassVar[frozenset[str]] = frozenset({"image_details", "my_vote"})

    banned_from_community: bool = False
    community: Community
    counts: PostAggregates
    creator: Person
    creator_banned_from_community: bool = False
    creator_blocked: bool = False
    creator_is_admin: bool = False
    creator_is_moderator: bool = False
    hidden: bool = False
    image_details: ImageDetails | None = None
    my_vote: int | None = None
    post: Post
    read: bool = False
    saved: bool = False
    subscribed: SubscribedType
    unread_comments: NonNegativeInt = 0