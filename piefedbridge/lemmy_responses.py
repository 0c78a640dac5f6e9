"""Response bodies sent to Lemmy clients."""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field, NonNegativeInt

from .lemmy_content import (
    CommentView,
    CommunityModeratorView,
    CommunityView,
    PersonView,
    PostView,
    _LemmyModel,
)
from .lemmy_site import (
    CustomEmojiView,
    Language,
    LocalSiteUrlBlocklist,
    MyUserInfo,
    SiteView,
    Tagline,
)


class CreateCommentResponse(_LemmyModel):
    comment_view: CommentView
    recipient_ids: list[NonNegativeInt] = Field(default_factory=list)


class GetCommentResponse(_LemmyModel):
    comment_view: CommentView
    recipient_ids: list[NonNegativeInt] = Field(default_factory=list)


class GetCommentsResponse(_LemmyModel):
    comments: list[CommentView] = Field(default_factory=list)


class GetPostResponse(_LemmyModel):
    community_view: CommunityView
    cross_posts: list[PostView] = Field(default_factory=list)
    moderators: list[CommunityModeratorView] = Field(default_factory=list)
    post_view: PostView


class GetPostsResponse(_LemmyModel):
    _omit_none: ClassVar[frozenset[str]] = frozenset({"next_page"})

    next_page: str | None = None
    posts: list[PostView] = Field(default_factory=list)


class GetReportCountResponse(_LemmyModel):
    _omit_none: ClassVar[frozenset[str]] = frozenset(
        {"community_id", "private_message_reports"}
    )

    comment_reports: NonNegativeInt = 0
    community_id: NonNegativeInt | None = None
    post_reports: NonNegativeInt = 0
    private_message_reports: NonNegativeInt | None = None


class GetSiteResponse(_LemmyModel):
    _omit_none: ClassVar[frozenset[str]] = frozenset({"my_user"})

    admins: list[PersonView] = Field(default_factory=list)
    all_languages: list[Language] = Field(default_factory=list)
    blocked_urls: list[LocalSiteUrlBlocklist] = Field(default_factory=list)
    custom_emojis: list[CustomEmojiView] = Field(default_factory=list)
    discussion_languages: list[NonNegativeInt] = Field(default_factory=list)
    my_user: MyUserInfo | None = None
    site_view: SiteView
    taglines: list[Tagline] = Field(default_factory=list)
    version: str = ""


class GetUnreadCountResponse(_LemmyModel):
    mentions: NonNegativeInt = 0
    private_messages: NonNegativeInt = 0
    replies: NonNegativeInt = 0


class LoginResponse(_LemmyModel):
    jwt: str = ""
    registration_created: bool = False
    verify_email_sent: bool = False


class SuccessResponse(_LemmyModel):
    success: bool = False