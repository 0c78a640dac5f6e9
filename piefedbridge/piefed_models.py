"""Data models of the PieFed API as it sends them over the wire."""

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


def _is_empty(value: Any) -> bool:
    """Tell whether a serialized value counts as empty and may be left out."""
    if isinstance(value, (list, dict)):
        return not value
    return value is None or value == "" or value is False or value == 0


class _WireModel(BaseModel):
    """Base for JSON models: unknown keys are ignored, empty optional keys dropped."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    _omit_empty: ClassVar[frozenset[str]] = frozenset()

    @model_serializer(mode="wrap")
    def _serialize(
        self, handler: SerializerFunctionWrapHandler, info: SerializationInfo
    ) -> Any:
        data = handler(self)
        if not self._omit_empty or not isinstance(data, dict):
            return data
        fields = type(self).model_fields
        keys = {
            (fields[name].alias or name) if info.by_alias else name
            for name in self._omit_empty
        }
        return {
            key: value
            for key, value in data.items()
            if not (key in keys and _is_empty(value))
        }


class CommentSortType(str, Enum):
    HOT = "Hot"
    TOP = "Top"
    NEW = "New"
    OLD = "Old"


class ListingType(str, Enum):
    ALL = "All"
    LOCAL = "Local"
    SUBSCRIBED = "Subscribed"
    POPULAR = "Popular"
    MODERATOR_VIEW = "ModeratorView"


class RegistrationMode(str, Enum):
    CLOSED = "Closed"
    REQUIRE_APPLICATION = "RequireApplication"
    OPEN = "Open"


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


class SubscribedType(str, Enum):
    SUBSCRIBED = "Subscribed"
    NOT_SUBSCRIBED = "NotSubscribed"
    PENDING = "Pending"


class Comment(_WireModel):
    _omit_empty: ClassVar[frozenset[str]] = frozenset({"updated"})

    id: NonNegativeInt = 0
    creator_id: NonNegativeInt = 0
    post_id: NonNegativeInt = 0
    body: str = ""
    removed: bool = False
    published: str = ""
    updated: str | None = None
    deleted: bool = False
    activity_pub_id: str = Field(default="", alias="ap_id")
    local: bool = False
    path: str = ""
    distinguished: bool = False
    language_id: NonNegativeInt = 0


class CommentAggregates(_WireModel):
    comment_id: NonNegativeInt = 0
    score: int = 0
    upvotes: NonNegativeInt = 0
    downvotes: NonNegativeInt = 0
    published: str = ""
    child_count: NonNegativeInt = 0


class Community(_WireModel):
    _omit_empty: ClassVar[frozenset[str]] = frozenset(
        {"ap_domain", "banned", "banner", "description", "icon", "updated"}
    )

    actor_id: str = ""
    ap_domain: str | None = None
    banned: bool | None = None
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
    published: str = ""
    removed: bool = False
    restricted_to_mods: bool = False
    title: str = ""
    updated: str | None = None


class CommunityAggregates(_WireModel):
    community_id: NonNegativeInt = 0
    subscriptions_count: NonNegativeInt = 0
    post_count: NonNegativeInt = 0
    post_reply_count: NonNegativeInt = 0
    published: str = ""


class Person(_WireModel):
    _omit_empty: ClassVar[frozenset[str]] = frozenset(
        {"avatar", "banner", "title", "username"}
    )

    actor_id: str = ""
    avatar: str | None = None
    banned: bool = False
    banner: str | None = None
    bot: bool = False
    deleted: bool = False
    id: NonNegativeInt = 0
    instance_id: NonNegativeInt = 0
    local: bool = False
    published: str = ""
    title: str | None = None
    username: str | None = Field(default=None, alias="user_name")


class PersonAggregates(_WireModel):
    comment_count: NonNegativeInt = 0
    person_id: NonNegativeInt = 0
    post_count: NonNegativeInt = 0


class Post(_WireModel):
    _omit_empty: ClassVar[frozenset[str]] = frozenset(
        {"url", "body", "updated", "thumbnail_url", "alt_text"}
    )

    id: NonNegativeInt = 0
    title: str = ""
    url: str | None = None
    body: str | None = None
    # PieFed does not always send the creator id; it then stays 0.
    creator_id: NonNegativeInt = 0
    community_id: NonNegativeInt = 0
    removed: bool = False
    locked: bool = False
    published: str = ""
    updated: str | None = None
    deleted: bool = False
    nsfw: bool = False
    thumbnail_url: str | None = None
    activity_pub_id: str = Field(default="", alias="ap_id")
    local: bool = False
    language_id: NonNegativeInt = 0
    sticky: bool = False
    alt_text: str | None = None


class PostAggregates(_WireModel):
    post_id: NonNegativeInt = 0
    comments: NonNegativeInt = 0
    score: int = 0
    upvotes: NonNegativeInt = 0
    downvotes: NonNegativeInt = 0
    published: str = ""
    newest_comment_time: str = ""


class CommentView(_WireModel):
    _omit_empty: ClassVar[frozenset[str]] = frozenset({"my_vote"})

    comment: Comment
    creator: Person
    post: Post
    community: Community
    counts: CommentAggregates
    creator_banned_from_community: bool = False
    banned_from_community: bool = False
    creator_is_moderator: bool = False
    creator_is_admin: bool = False
    subscribed: SubscribedType
    saved: bool = False
    activity_alert: bool = False
    creator_blocked: bool = False
    my_vote: int | None = None


class CommunityBlockView(_WireModel):
    community: Community
    person: Person


class CommunityFollowerView(_WireModel):
    community: Community
    follower: Person


class CommunityModeratorView(_WireModel):
    community: Community
    moderator: Person


class CommunityView(_WireModel):
    community: Community
    subscribed: SubscribedType
    blocked: bool = False
    counts: CommunityAggregates
    banned_from_community: bool = False
    activity_alert: bool = False


class Instance(_WireModel):
    _omit_empty: ClassVar[frozenset[str]] = frozenset(
        {"updated", "software", "version"}
    )

    id: NonNegativeInt = 0
    domain: str = ""
    published: str = ""
    updated: str | None = None
    software: str | None = None
    version: str | None = None


class LanguageView(_WireModel):
    code: str = ""
    id: NonNegativeInt = 0
    name: str = ""


class Site(_WireModel):
    _omit_empty: ClassVar[frozenset[str]] = frozenset(
        {
            "all_languages",
            "description",
            "enable_downvotes",
            "icon",
            "registration_mode",
            "sidebar",
            "user_count",
        }
    )

    actor_id: str = ""
    all_languages: list[LanguageView] = Field(default_factory=list)
    description: str | None = None
    enable_downvotes: bool | None = None
    icon: str | None = None
    name: str = ""
    registration_mode: RegistrationMode | None = None
    sidebar: str | None = None
    user_count: NonNegativeInt | None = None


class InstanceBlockView(_WireModel):
    _omit_empty: ClassVar[frozenset[str]] = frozenset({"site"})

    person: Person
    instance: Instance
    site: Site | None = None


class LocalUser(_WireModel):
    default_listing_type: ListingType
    default_sort_type: SortType
    show_bot_accounts: bool = False
    show_nsfw: bool = False
    show_read_posts: bool = False
    show_scores: bool = False


class LocalUserView(_WireModel):
    counts: PersonAggregates
    local_user: LocalUser
    person: Person


class PersonBlockView(_WireModel):
    person: Person
    target: Person


class MyUserInfo(_WireModel):
    community_blocks: list[CommunityBlockView] = Field(default_factory=list)
    discussion_languages: list[LanguageView] = Field(default_factory=list)
    follows: list[CommunityFollowerView] = Field(default_factory=list)
    instance_blocks: list[InstanceBlockView] = Field(default_factory=list)
    local_user_view: LocalUserView
    moderates: list[CommunityModeratorView] = Field(default_factory=list)
    person_blocks: list[PersonBlockView] = Field(default_factory=list)


class PersonView(_WireModel):
    person: Person
    counts: PersonAggregates
    is_admin: bool = False
    activity_alert: bool = False


class PostView(_WireModel):
    _omit_empty: ClassVar[frozenset[str]] = frozenset(
        {"activity_alert", "creator_blocked", "my_vote"}
    )

    post: Post
    creator: Person
    community: Community
    creator_banned_from_community: bool = False
    banned_from_community: bool = False
    creator_is_moderator: bool = False
    creator_is_admin: bool = False
    counts: PostAggregates
    subscribed: SubscribedType
    saved: bool = False
    activity_alert: bool | None = None
    read: bool = False
    hidden: bool = False
    creator_blocked: bool | None = None
    my_vote: int | None = None
    unread_comments: NonNegativeInt = 0